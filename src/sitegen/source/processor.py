"""Walk the content root and collect every source file into an Index."""

import logging
from collections.abc import Iterator
from pathlib import Path

from ..config import ParserConfig
from ..exceptions import MissingFieldError
from ..index import Index
from ..models import SourceFile
from .parser import SourceParser

logger = logging.getLogger(__name__)


def iter_source_files(config: ParserConfig) -> Iterator[Path]:
    """Yield root-relative paths of source files, in sorted order."""
    root = Path(config.content_root).expanduser().resolve()
    if not root.exists():
        return

    for file_path in sorted(root.rglob("*")):
        rel = file_path.relative_to(root)
        if any(part.startswith(".") for part in rel.parts):
            continue
        if not file_path.is_file():
            continue
        if config.source_extensions and file_path.suffix.lower() not in config.source_extensions:
            continue
        yield rel


def process_directory(config: ParserConfig) -> Index:
    """Parse all source files under the content root into a fresh Index.

    Read errors propagate as SourceReadError.
    """
    parser = SourceParser(config)
    index = Index()
    for rel in iter_source_files(config):
        index.add(parser.parse(rel))
    logger.info(f"Indexed {len(index)} source file(s) from {config.content_root}")
    return index


def required_keys(config: ParserConfig) -> list[str]:
    """Keys a record needs before it can be rendered."""
    return [config.template_key, config.output_key]


def require_fields(record: SourceFile, keys: list[str]) -> SourceFile:
    """Return `record` unchanged, or raise MissingFieldError if any key is empty."""
    missing = record.missing(keys)
    if missing:
        raise MissingFieldError(record.basename, missing)
    return record
