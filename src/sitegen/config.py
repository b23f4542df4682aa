"""Configuration management for sitegen."""

import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError


DEFAULT_CONFIG = {
    "content_path": ".",
    "template_key": "template",
    "output_key": "output",
    "title_key": "title",
    "output_extension": "html",
    "encoding": "utf-8",
    "source_extensions": [],
}

# Suffixes written by `sitegen init`; sitegen.yaml itself is not among them
INIT_SOURCE_EXTENSIONS = [".md", ".markdown", ".txt", ".html"]

ENV_OVERRIDES = {
    "SITEGEN_CONTENT_PATH": "content_path",
    "SITEGEN_OUTPUT_EXTENSION": "output_extension",
}


def _find_config_file() -> Path | None:
    """Look for sitegen.yaml in standard locations."""
    candidates = [
        Path.cwd() / "config" / "sitegen.yaml",
        Path.cwd() / "sitegen.yaml",
        Path.home() / ".sitegen" / "config.yaml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = dict(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else _find_config_file()
    if path and path.exists():
        try:
            with open(path) as f:
                file_cfg = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot load config file {path}: {e}") from e
        if not isinstance(file_cfg, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        _deep_merge(cfg, file_cfg)
    elif config_path:
        raise ConfigurationError(f"Config file not found: {config_path}")

    # Env overrides
    for var, key in ENV_OVERRIDES.items():
        if value := os.environ.get(var):
            cfg[key] = value

    cfg["content_path"] = str(Path(cfg["content_path"]).expanduser().resolve())

    return cfg


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override into base in-place."""
    for k, v in override.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v


@dataclass(frozen=True)
class ParserConfig:
    """Settings the source parser needs, passed in explicitly."""
    content_root: Path
    template_key: str = "template"
    output_key: str = "output"
    title_key: str = "title"
    output_extension: str = "html"
    encoding: str = "utf-8"
    source_extensions: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "content_root", Path(self.content_root))
        object.__setattr__(self, "output_extension", str(self.output_extension).lstrip("."))
        if not isinstance(self.source_extensions, (list, tuple)):
            raise ConfigurationError(f"source_extensions must be a list, got {self.source_extensions!r}")
        object.__setattr__(
            self,
            "source_extensions",
            tuple(ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in map(str, self.source_extensions)),
        )
        try:
            codecs.lookup(str(self.encoding))
        except LookupError:
            raise ConfigurationError(f"Unknown encoding: {self.encoding}") from None
        for name in ("template_key", "output_key", "title_key", "output_extension"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} must not be empty")

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ParserConfig":
        """Build a ParserConfig from a loaded configuration dict."""
        return cls(
            content_root=Path(config.get("content_path", ".")),
            template_key=config.get("template_key", "template"),
            output_key=config.get("output_key", "output"),
            title_key=config.get("title_key", "title"),
            output_extension=config.get("output_extension", "html"),
            encoding=config.get("encoding", "utf-8"),
            source_extensions=config.get("source_extensions") or (),
        )
