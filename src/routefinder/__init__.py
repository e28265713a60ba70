"""RouteFinder - resolve generated route names to the files defining their screens."""

__version__ = "0.1.0"
