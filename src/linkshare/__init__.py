"""Linkshare: vote-ranked article sharing backed by a key-value store."""

__version__ = "0.1.0"
