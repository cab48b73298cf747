"""threechess — rules engine and Qt front end for three-player chess."""

__version__ = "0.1.0"
