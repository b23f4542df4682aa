"""Exception hierarchy for sitegen."""

import errno


class SiteGenError(Exception):
    """Base exception for all sitegen errors."""


class ConfigurationError(SiteGenError):
    """Invalid or unreadable configuration."""


class SourceReadError(SiteGenError, OSError):
    """A source file could not be opened or read.

    The underlying error is chained as ``__cause__``; ``errno`` is copied from
    it so a missing file still reports ``ENOENT``.
    """

    def __init__(self, path, cause: OSError | None = None, message: str | None = None):
        self.path = str(path)
        code = cause.errno if cause is not None and cause.errno is not None else errno.EIO
        text = message or f"Cannot read source file {self.path}: {cause}"
        super().__init__(code, text)
        self.filename = self.path

    def __str__(self) -> str:
        return self.strerror

    @property
    def not_found(self) -> bool:
        return self.errno == errno.ENOENT


class MissingFieldError(SiteGenError):
    """A record lacks one or more fields its caller requires."""

    def __init__(self, basename: str, fields: list[str]):
        self.basename = basename
        self.fields = list(fields)
        super().__init__(f"{basename}: missing {', '.join(self.fields)}")
