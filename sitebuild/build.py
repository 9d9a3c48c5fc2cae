"""Runs the style, script and static pipelines in order, then optionally serves dist/."""

from __future__ import annotations

import shutil

from sitebuild.config import BuildMode, Layout
from sitebuild.scripts import build_js
from sitebuild.server import serve
from sitebuild.static import copy_static
from sitebuild.styles import build_css
from sitebuild.watch import stop_all, wait


def clean(layout: Layout) -> None:
    for directory in (layout.dist, layout.tmp):
        if directory.exists():
            shutil.rmtree(directory)


def build_all(layout: Layout, mode: BuildMode) -> None:
    layout.ensure_dirs()

    observers = []
    bundler = None
    try:
        css_observer = build_css(layout, mode)
        if css_observer is not None:
            observers.append(css_observer)

        bundler = build_js(layout, mode)

        static_observer = copy_static(layout, mode)
        if static_observer is not None:
            observers.append(static_observer)

        if mode.serve:
            serve(layout)
        elif mode.watch:
            wait(observers)
    finally:
        stop_all(observers)
        if bundler is not None:
            bundler.dispose()
