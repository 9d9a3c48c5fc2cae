"""CSS post-processing through postcss-cli: Tailwind utilities, autoprefixer, cssnano."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from sitebuild.config import BuildMode, Layout
from sitebuild.tools import find_node_tool

PLUGINS = ("@tailwindcss/postcss", "autoprefixer")
MINIFY_PLUGIN = "cssnano"


class PostCSS:
    """Runs one postcss-cli pass over the intermediate CSS.

    postcss-cli writes the output file only when every plugin succeeds, so a
    failed run leaves the previously published stylesheet untouched.
    """

    def __init__(self, layout: Layout, mode: BuildMode, executable: Optional[str] = None) -> None:
        self.layout = layout
        self.mode = mode
        self.executable = executable or find_node_tool(layout, "postcss")

    def plugins(self) -> list[str]:
        plugins = list(PLUGINS)
        if self.mode.production:
            plugins.append(MINIFY_PLUGIN)
        return plugins

    def command(self, source: Path, target: Path) -> list[str]:
        return [
            self.executable,
            str(source),
            "--no-map",
            "--use",
            *self.plugins(),
            "-o",
            str(target),
        ]

    def process(self, source: Path, target: Path) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        # Tailwind scans for class names relative to the working directory.
        subprocess.run(self.command(source, target), cwd=str(self.layout.root), check=True)
