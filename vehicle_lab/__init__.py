"""Vehicle prototype lab: part composition and stress-test scoring."""

__version__ = "0.1.0"
