"""Simple logging with console, file, rolling-file and combined loggers and a configurable line format."""

__version__ = "0.1.0"