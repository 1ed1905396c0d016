"""ItemFinder - browse and search a directory of JSON item records."""

__version__ = "0.1.0"
