"""Digital wardrobe ingestion, sync and recommendation service."""

__version__ = "0.1.0"
