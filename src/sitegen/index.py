"""Ordered collection of source records, merged by basename."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import PurePosixPath

from .models import SourceFile

logger = logging.getLogger(__name__)


class Index:
    """Source records in insertion order, at most one per basename.

    Not thread-safe: callers sharing an Index across threads must lock it.
    """

    def __init__(self):
        self._records: list[SourceFile] = []
        self._by_basename: dict[str, SourceFile] = {}

    @classmethod
    def from_records(cls, records: Iterable[SourceFile]) -> "Index":
        index = cls()
        for record in records:
            index.add(record)
        return index

    def add(self, record: SourceFile) -> SourceFile:
        """Append a new record, or merge its fields into the existing one.

        On merge, the new record's fields overwrite same-named fields and the
        existing entry keeps its position. Returns the entry held by the index.
        """
        existing = self._by_basename.get(record.basename)
        if existing is None:
            self._records.append(record)
            self._by_basename[record.basename] = record
            return record

        logger.debug(f"Merging {len(record.fields)} field(s) into {record.basename}")
        existing.fields.update(record.fields)
        return existing

    def get(self, basename: str) -> SourceFile | None:
        return self._by_basename.get(basename)

    def in_directory(self, directory: str) -> list[SourceFile]:
        """Records whose basename sits directly inside `directory`."""
        target = PurePosixPath(directory.strip("/") or ".")
        return [r for r in self._records if PurePosixPath(r.basename).parent == target]

    def __contains__(self, basename: object) -> bool:
        return basename in self._by_basename

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self._records)

    def __getitem__(self, position: int) -> SourceFile:
        return self._records[position]
