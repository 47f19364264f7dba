"""Translate pull requests, issue comments and reviews in place."""

__version__ = "0.1.0"
