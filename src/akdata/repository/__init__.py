"""Persistence adapters for assembled game data."""

from .json_store import JsonSnapshotRepository

__all__ = ["JsonSnapshotRepository"]
