"""EGTS protocol checksums, constants and section codecs, with receiver storage connectors."""

__version__ = "0.1.0"