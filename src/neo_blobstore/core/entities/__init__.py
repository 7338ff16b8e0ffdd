"""Blob store domain entities."""

from .container import Container, to_collection
from .tracking_record import TrackingRecord

__all__ = [
    "Container",
    "TrackingRecord",
    "to_collection",
]
