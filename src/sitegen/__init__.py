"""sitegen - content source parsing for a static-site generator."""

__version__ = "0.1.0"
