"""Filename conventions: blog-entry dates, titles and basenames."""

import re
from pathlib import Path, PurePosixPath

from ..models import BlogEntry

BLOG_ENTRY_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})-(.+)", re.ASCII)


def classify_filename(name: str) -> BlogEntry | None:
    """Match a filename stem against the YYYY-MM-DD-slug blog convention.

    Only the shape of the date is checked, not whether it is a real calendar
    date. Returns None for anything that is not a blog entry.
    """
    match = BLOG_ENTRY_RE.fullmatch(name)
    if match is None:
        return None
    return BlogEntry(*match.groups())


def is_blog_entry(name: str) -> bool:
    return classify_filename(name) is not None


def deduce_title(slug: str) -> str:
    """Turn a slug into a display title: hyphens become spaces, first letter upper-cased."""
    text = slug.replace("-", " ")
    return text[:1].upper() + text[1:]


def relative_source_path(root: str | Path, path: str | Path) -> PurePosixPath:
    """Return `path` relative to `root` as a forward-slash path.

    Raises ValueError if an absolute `path` does not lie under `root`.
    """
    p = Path(path)
    if p.is_absolute():
        p = p.relative_to(Path(root))
    return PurePosixPath(p.as_posix())


def basename(root: str | Path, path: str | Path) -> str:
    """Root-relative path of a source file with its extension removed."""
    rel = relative_source_path(root, path)
    return str(rel.with_name(rel.stem)) if rel.suffix else str(rel)
