"""Content extractor — fetch a web page and return its main content as Markdown."""

__version__ = "1.0.0"
