"""Locating the Node command line tools the pipelines delegate to."""

from __future__ import annotations

import shutil

from sitebuild.config import Layout

NODE_PACKAGES = ("postcss-cli", "@tailwindcss/postcss", "autoprefixer", "cssnano", "esbuild")


def find_node_tool(layout: Layout, name: str) -> str:
    """Return ``name`` from the project's node_modules/.bin, else from PATH."""
    local = layout.root / "node_modules" / ".bin" / name
    if local.exists():
        return str(local)
    found = shutil.which(name)
    if found:
        return found
    raise FileNotFoundError(
        f"{name} not found in node_modules/.bin or on PATH. "
        f"Install it in {layout.root} with 'npm install --save-dev {' '.join(NODE_PACKAGES)}'."
    )
