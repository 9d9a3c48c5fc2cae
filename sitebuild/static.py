"""Static pipeline: copies markup/templates and src/assets/ into dist/ as-is."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from watchdog.observers import Observer

from sitebuild.config import STATIC_PATTERNS, BuildMode, Layout
from sitebuild.watch import matches, watch_files


def static_files(layout: Layout) -> list[Path]:
    src = layout.src
    if not src.exists():
        return []
    return sorted(
        path
        for path in src.rglob("*")
        if path.is_file() and matches(path.relative_to(src).as_posix(), STATIC_PATTERNS)
    )


def copy_all(layout: Layout) -> int:
    files = static_files(layout)
    for path in files:
        target = layout.dist / path.relative_to(layout.src)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, target)
    print("Static Files Copied!", flush=True)
    return len(files)


def copy_static(layout: Layout, mode: BuildMode) -> Optional[Observer]:
    copy_all(layout)
    if not mode.watch:
        return None

    observer = watch_files(layout.src, STATIC_PATTERNS, lambda: copy_all(layout), label="static")
    print("Watching static files.", flush=True)
    return observer
