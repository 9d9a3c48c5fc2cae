"""
File watching for the pipelines: each pipeline gets its own watchdog observer,
so its rebuilds run one after another on the observer thread.
"""
from __future__ import annotations

import sys
import time
import traceback
from fnmatch import fnmatch
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

SLEEP_SECONDS = 1.0

# "opened" and "closed" events fire when a rebuild reads its own sources.
CHANGE_EVENTS = frozenset({"created", "modified", "deleted", "moved"})


def matches(rel_path: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch(rel_path, pattern) for pattern in patterns)


class GlobEventHandler(FileSystemEventHandler):
    """Run ``callback`` for file events under ``root`` that match ``patterns``.

    ``event_types`` limits which watchdog events count (e.g. ``{"modified"}``);
    ``None`` accepts every change event.
    """

    def __init__(
        self,
        root: Path,
        patterns: Sequence[str],
        callback: Callable[[], object],
        event_types: Optional[Iterable[str]] = None,
        label: str = "watch",
    ) -> None:
        super().__init__()
        self.root = Path(root).resolve()
        self.patterns = tuple(patterns)
        self.callback = callback
        self.event_types = frozenset(event_types) if event_types is not None else CHANGE_EVENTS
        self.label = label

    def relative(self, path: str | bytes) -> Optional[str]:
        if isinstance(path, bytes):
            path = path.decode()
        try:
            return Path(path).resolve().relative_to(self.root).as_posix()
        except ValueError:
            return None

    def wants(self, event: FileSystemEvent) -> bool:
        if event.is_directory:
            return False
        if event.event_type not in self.event_types:
            return False
        paths = [event.src_path, getattr(event, "dest_path", "")]
        for path in paths:
            if not path:
                continue
            rel = self.relative(path)
            if rel is not None and matches(rel, self.patterns):
                return True
        return False

    def on_any_event(self, event: FileSystemEvent) -> None:
        if not self.wants(event):
            return
        print(f"[{self.label}] {event.event_type}: {event.src_path}", flush=True)
        try:
            self.callback()
        except Exception:
            # Keep the observer alive; the developer reads this at the terminal.
            print(f"[{self.label}] Rebuild failed:", file=sys.stderr, flush=True)
            traceback.print_exc(file=sys.stderr)


def watch_files(
    root: Path,
    patterns: Sequence[str],
    callback: Callable[[], object],
    event_types: Optional[Iterable[str]] = None,
    label: str = "watch",
) -> Observer:
    handler = GlobEventHandler(root, patterns, callback, event_types=event_types, label=label)
    observer = Observer()
    observer.schedule(handler, str(root), recursive=True)
    observer.start()
    return observer


def stop_all(observers: Iterable[Observer]) -> None:
    observers = list(observers)
    for observer in observers:
        observer.stop()
    for observer in observers:
        observer.join()


def wait(observers: Sequence[Observer]) -> None:
    """Block until Ctrl+C, for watch sessions without a server."""
    print("[watch] Watching for changes. Ctrl+C to stop.", flush=True)
    try:
        while all(observer.is_alive() for observer in observers):
            time.sleep(SLEEP_SECONDS)
    except KeyboardInterrupt:
        print("\n[watch] Stopped.", flush=True)
