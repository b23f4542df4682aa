"""Source file parser: metadata header, body and deduced fields."""

import logging
import re
from pathlib import Path, PurePosixPath

from ..config import ParserConfig
from ..exceptions import SourceReadError
from ..models import SourceFile
from .convention import basename, classify_filename, deduce_title, relative_source_path

logger = logging.getLogger(__name__)

SEPARATOR_RE = re.compile(r"^---\r?$", re.MULTILINE)


def split_source(text: str) -> tuple[str, str] | None:
    """Split raw text at the first `---` line into (header, body).

    Returns None when there is no separator line.
    """
    match = SEPARATOR_RE.search(text)
    if match is None:
        return None
    body = text[match.end():]
    if body.startswith("\n"):
        body = body[1:]
    return text[:match.start()], body


def parse_header(header: str) -> dict[str, str]:
    """Parse `key: value` lines, keeping their order."""
    fields: dict[str, str] = {}
    for lineno, line in enumerate(header.splitlines(), 1):
        if not line.strip():
            continue
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            logger.debug(f"Skipping malformed header line {lineno}: {line!r}")
            continue
        fields[key] = value.strip()
    return fields


class SourceParser:
    """Parse content source files into SourceFile records."""

    def __init__(self, config: ParserConfig):
        self.config = config
        self.root = Path(config.content_root).expanduser().resolve()

    def parse(self, file_path: str | Path) -> SourceFile:
        """Read one source file and return its populated record.

        `file_path` is relative to the content root, or absolute under it.

        Raises:
            SourceReadError: the file cannot be opened or read.
        """
        full_path = self._resolve(file_path)
        try:
            text = full_path.read_text(encoding=self.config.encoding, errors="replace")
        except OSError as e:
            raise SourceReadError(full_path, e) from e

        try:
            rel = relative_source_path(self.root, full_path)
        except ValueError:
            raise SourceReadError(
                full_path, message=f"Source file {full_path} is outside content root {self.root}"
            ) from None
        record = SourceFile(basename=basename(self.root, full_path), source_path=str(full_path))

        parts = split_source(text)
        if parts is None:
            logger.warning(f"{rel}: no '---' separator, treating the whole file as body")
            header, record.body = "", text
        else:
            header, record.body = parts
        record.fields = parse_header(header)

        self._deduce(record, rel)
        logger.debug(f"Parsed {rel}: {len(record.fields)} field(s), {len(record.body)} body chars")
        return record

    def _resolve(self, file_path: str | Path) -> Path:
        path = Path(file_path).expanduser()
        if not path.is_absolute():
            path = self.root / path
        return path.resolve()

    def _deduce(self, record: SourceFile, rel: PurePosixPath) -> None:
        """Fill in the output and title fields when the header left them out."""
        cfg = self.config
        stem = rel.stem
        entry = classify_filename(stem)

        if not record.has(cfg.output_key):
            if entry is not None:
                output = rel.parent / entry.year / entry.month / entry.day / f"{entry.slug}.{cfg.output_extension}"
            else:
                output = PurePosixPath(f"{record.basename}.{cfg.output_extension}")
            record.fields[cfg.output_key] = str(output)

        if not record.has(cfg.title_key):
            record.fields[cfg.title_key] = deduce_title(entry.slug if entry is not None else stem)


def parse_source_file(file_path: str | Path, config: ParserConfig | None = None) -> SourceFile:
    """Parse a single source file, using the current directory as root by default."""
    return SourceParser(config or ParserConfig(content_root=Path.cwd())).parse(file_path)
