"""Fixed paths, patterns and the build mode shared by every pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


SERVER_PORT = 8080

# fnmatch patterns relative to src/; "*" also matches "/".
STYLE_PATTERNS = ("styles/*.scss",)
CLASS_SOURCE_PATTERNS = ("*.html", "*.php", "*.js")
STATIC_PATTERNS = ("*.html", "*.php", "assets/*")


@dataclass(frozen=True)
class BuildMode:
    production: bool = False
    watch: bool = False
    serve: bool = False

    @classmethod
    def for_build(cls) -> BuildMode:
        return cls(production=True)

    @classmethod
    def for_dev(cls) -> BuildMode:
        return cls(production=False, watch=True, serve=True)


@dataclass(frozen=True)
class Layout:
    root: Path

    @classmethod
    def from_root(cls, root: str | Path | None = None) -> Layout:
        return cls(Path(root) if root is not None else Path.cwd())

    @property
    def src(self) -> Path:
        return self.root / "src"

    @property
    def dist(self) -> Path:
        return self.root / "dist"

    @property
    def tmp(self) -> Path:
        return self.root / "tmp"

    @property
    def style_entry(self) -> Path:
        return self.src / "styles" / "main.scss"

    @property
    def script_entry(self) -> Path:
        return self.src / "js" / "app.js"

    @property
    def tmp_css(self) -> Path:
        return self.tmp / "main.css"

    @property
    def out_assets(self) -> Path:
        return self.dist / "assets"

    @property
    def out_css(self) -> Path:
        return self.out_assets / "main.css"

    def ensure_dirs(self) -> None:
        for directory in (self.dist, self.out_assets, self.tmp):
            directory.mkdir(parents=True, exist_ok=True)
