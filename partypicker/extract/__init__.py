"""
Track data loading.
"""
from .schema import TrackRecord, parse_track_document
from .track_loader import (
    TrackLoader,
    JsonFileSource,
    StaticSource,
    FALLBACK_TRACKS,
    BUNDLED_TRACKS_PATH,
    default_sources,
    load_tracks,
    load_picker_items,
)

__all__ = [
    "TrackRecord",
    "parse_track_document",
    "TrackLoader",
    "JsonFileSource",
    "StaticSource",
    "FALLBACK_TRACKS",
    "BUNDLED_TRACKS_PATH",
    "default_sources",
    "load_tracks",
    "load_picker_items",
]
