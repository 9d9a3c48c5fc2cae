"""Live reload dev server over dist/."""

from __future__ import annotations

from livereload import Server

from sitebuild.config import SERVER_PORT, Layout


def make_server(layout: Layout) -> Server:
    server = Server()
    # Any change under dist/ (css, js bundle, copied files) reloads the browser.
    server.watch(str(layout.dist))
    return server


def serve(layout: Layout, port: int = SERVER_PORT) -> None:
    server = make_server(layout)
    print(f"🚀 Serving on http://localhost:{port}", flush=True)
    server.serve(root=str(layout.dist), port=port, open_url_delay=0.5)
