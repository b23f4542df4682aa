"""Parsing of content source files."""

from .convention import basename, classify_filename, deduce_title, is_blog_entry
from .parser import SourceParser, parse_source_file
from .processor import iter_source_files, process_directory, require_fields, required_keys

__all__ = [
    "SourceParser",
    "parse_source_file",
    "classify_filename",
    "is_blog_entry",
    "deduce_title",
    "basename",
    "iter_source_files",
    "process_directory",
    "require_fields",
    "required_keys",
]
