"""scaffoldctl: interactive feature setup for a web application starter template."""

__version__ = "0.1.0"
