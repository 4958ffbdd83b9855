"""Installed bingo version, stamped into freshly created manifests."""

__version__ = "0.1.0"
