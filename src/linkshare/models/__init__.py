"""Record types stored by the Linkshare services."""

from .article import Article

__all__ = ["Article"]
