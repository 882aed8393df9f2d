"""HTTP API for Linkshare."""
