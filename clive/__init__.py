"""clive - a minimal image browser for triaging pictures into a folder."""

__version__ = "0.1.0"
