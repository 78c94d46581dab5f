"""Ingestion layer.

Turns raw status payloads delivered by the transport into state writes.
"""

__all__: list[str] = []
