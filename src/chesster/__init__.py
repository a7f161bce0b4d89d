"""Click-driven chess interaction core on top of python-chess."""

__version__ = "0.1.0"
