"""Script pipeline: bundles src/js/app.js into dist/assets with esbuild."""

from __future__ import annotations

import subprocess
from typing import Optional

from sitebuild.config import BuildMode, Layout
from sitebuild.tools import find_node_tool


class ScriptBundler:
    """An esbuild build context.

    ``rebuild()`` runs one build. ``watch()`` keeps an esbuild process alive that
    rebuilds on its own whenever a dependency changes. ``dispose()`` releases
    that process; using the bundler as a context manager disposes it on exit.
    """

    def __init__(self, layout: Layout, mode: BuildMode, executable: Optional[str] = None) -> None:
        self.layout = layout
        self.mode = mode
        self.executable = executable or find_node_tool(layout, "esbuild")
        self.process: Optional[subprocess.Popen] = None

    def command(self) -> list[str]:
        cmd = [
            self.executable,
            str(self.layout.script_entry),
            "--bundle",
            f"--outdir={self.layout.out_assets}",
            "--log-level=error",
        ]
        if self.mode.production:
            cmd.append("--minify")
        else:
            cmd.append("--sourcemap")
        return cmd

    def rebuild(self) -> None:
        subprocess.run(self.command(), cwd=str(self.layout.root), check=True)

    def watch(self) -> None:
        if self.process is not None:
            return
        self.process = subprocess.Popen(
            self.command() + ["--watch=forever"],
            cwd=str(self.layout.root),
        )

    def dispose(self) -> None:
        if self.process is None:
            return
        if self.process.poll() is None:
            self.process.terminate()
            try:
                self.process.wait(timeout=5)
            except subprocess.TimeoutExpired:
                self.process.kill()
                self.process.wait()
        self.process = None

    def __enter__(self) -> ScriptBundler:
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()


def build_js(layout: Layout, mode: BuildMode) -> Optional[ScriptBundler]:
    bundler = ScriptBundler(layout, mode)
    if not mode.watch:
        with bundler:
            bundler.rebuild()
        print("JS Built!", flush=True)
        return None

    # The first bundle must exist before the dev server starts.
    bundler.rebuild()
    print("JS Built!", flush=True)
    bundler.watch()
    print("Watching JS!", flush=True)
    return bundler
