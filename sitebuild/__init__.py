"""Asset build orchestrator for the PHP site: Sass, JS bundling, static copy, live reload."""

__version__ = "0.1.0"
