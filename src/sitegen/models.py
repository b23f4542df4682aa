"""Data models used throughout sitegen."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BlogEntry:
    """Date and slug extracted from a YYYY-MM-DD-slug filename."""
    year: str
    month: str
    day: str
    slug: str


@dataclass
class SourceFile:
    """Metadata and raw body of one content source file."""
    basename: str
    fields: dict[str, str] = field(default_factory=dict)
    body: str = ""
    source_path: str = ""

    def get_string(self, key: str) -> str:
        """Return the value for key, or "" when the key is absent."""
        return self.fields.get(key, "")

    def has(self, key: str) -> bool:
        return bool(self.fields.get(key))

    def missing(self, keys) -> list[str]:
        """Return the keys in `keys` that resolve to an empty string."""
        return [k for k in keys if not self.get_string(k)]
