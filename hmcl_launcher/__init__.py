"""Find a Java runtime on Windows and start the HMCL launcher jar with it."""

__version__ = "3.5.0"