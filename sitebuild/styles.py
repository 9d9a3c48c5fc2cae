"""Style pipeline: main.scss -> tmp/main.css -> postcss -> dist/assets/main.css."""

from __future__ import annotations

from typing import Optional

import sass
from watchdog.observers import Observer

from sitebuild.config import CLASS_SOURCE_PATTERNS, STYLE_PATTERNS, BuildMode, Layout
from sitebuild.postprocess import PostCSS
from sitebuild.watch import watch_files


def compile_css(layout: Layout, mode: BuildMode) -> None:
    src_file = layout.style_entry
    print(f"Compiling {src_file.name}......", flush=True)
    css = sass.compile(filename=str(src_file), output_style="expanded")
    print("Compiled!", flush=True)

    layout.tmp.mkdir(parents=True, exist_ok=True)
    layout.tmp_css.write_text(css, encoding="utf-8")
    print("Wrote to temp file....", flush=True)

    PostCSS(layout, mode).process(layout.tmp_css, layout.out_css)
    print("Processing Done.", flush=True)
    print(f"CSS Built! {layout.out_css}", flush=True)


def build_css(layout: Layout, mode: BuildMode) -> Optional[Observer]:
    compile_css(layout, mode)
    if not mode.watch:
        return None

    # Utility classes come from markup as well as stylesheets.
    observer = watch_files(
        layout.src,
        STYLE_PATTERNS + CLASS_SOURCE_PATTERNS,
        lambda: compile_css(layout, mode),
        event_types={"modified"},
        label="css",
    )
    print("Watching CSS!", flush=True)
    return observer
