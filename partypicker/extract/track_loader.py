"""
Track list loading with a static fallback chain.

Sources are tried in order; the first one that yields valid records wins.
Failures are logged and counted but never reach the caller: when every
source fails the result is an empty list.
"""
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from partypicker.config import settings
from partypicker.core.protocols import TrackSource
from partypicker.exceptions import DataLoadFailure
from partypicker.picker.items import normalize_items
from partypicker.picker.models import PickerItem
from partypicker.utils.observability import Logger, get_metrics
from .schema import TrackRecord, parse_track_document

logger = Logger(__name__)
metrics = get_metrics()

BUNDLED_TRACKS_PATH = Path(__file__).resolve().parent.parent / "data" / "tracks.json"

FALLBACK_TRACKS: List[Dict[str, Any]] = [
    {"name": "Mario Kart Stadium", "cup": "Mushroom Cup", "bonus": False},
    {"name": "Water Park", "cup": "Mushroom Cup", "bonus": False},
    {"name": "Sweet Sweet Canyon", "cup": "Mushroom Cup", "bonus": False},
    {"name": "Thwomp Ruins", "cup": "Mushroom Cup", "bonus": False},
    {"name": "Mario Circuit", "cup": "Flower Cup", "bonus": False},
    {"name": "Toad Harbor", "cup": "Flower Cup", "bonus": False},
    {"name": "Twisted Mansion", "cup": "Flower Cup", "bonus": False},
    {"name": "Shy Guy Falls", "cup": "Flower Cup", "bonus": False},
    {"name": "Rainbow Road", "cup": "Special Cup", "bonus": False},
]


@dataclass
class JsonFileSource:
    """Track records from a JSON document on disk."""
    path: Path
    name: str = "json_file"

    def __call__(self) -> List[Dict[str, Any]]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DataLoadFailure(source=str(self.path), reason=str(e)) from e


@dataclass
class StaticSource:
    """Hard-coded track records."""
    records: List[Dict[str, Any]] = field(default_factory=list)
    name: str = "static"

    def __call__(self) -> List[Dict[str, Any]]:
        return list(self.records)


class TrackLoader:
    """
    Evaluate an ordered list of track sources.

    Example:
        loader = TrackLoader([JsonFileSource(path), StaticSource(FALLBACK_TRACKS, name="fallback")])
        tracks = loader.load()
    """

    def __init__(self, sources: Sequence[TrackSource]):
        self.sources = list(sources)

    def load(self) -> List[TrackRecord]:
        """
        Load tracks from the first source that works.

        Returns:
            Validated track records, or an empty list if every source failed
        """
        for source in self.sources:
            source_name = getattr(source, "name", type(source).__name__)
            try:
                tracks = parse_track_document(source(), source=source_name)
            except Exception as e:
                metrics.track_load_fallbacks.labels(source=source_name).inc()
                logger.log_warning(
                    "track_load_attempt_failed",
                    source=source_name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                continue

            logger.log_event("tracks_loaded", source=source_name, count=len(tracks))
            return tracks

        logger.log_warning("track_load_exhausted", sources=len(self.sources))
        return []


def default_sources(data_path: Optional[Path] = None) -> List[TrackSource]:
    """Primary resource, then the hard-coded fallback list."""
    path = data_path or settings.tracks.data_path or BUNDLED_TRACKS_PATH
    return [
        JsonFileSource(path=Path(path), name="primary"),
        StaticSource(records=FALLBACK_TRACKS, name="fallback"),
    ]


def load_tracks(
    include_bonus: Optional[bool] = None,
    sources: Optional[Sequence[TrackSource]] = None,
) -> List[TrackRecord]:
    """
    Load the track list, optionally without bonus content.

    Args:
        include_bonus: Keep bonus tracks (defaults to TRACKS_INCLUDE_BONUS)
        sources: Override the default source chain
    """
    if include_bonus is None:
        include_bonus = settings.tracks.include_bonus
    tracks = TrackLoader(sources if sources is not None else default_sources()).load()
    if not include_bonus:
        tracks = [t for t in tracks if not t.bonus]
    return tracks


def load_picker_items(
    include_bonus: Optional[bool] = None,
    sources: Optional[Sequence[TrackSource]] = None,
) -> List[PickerItem]:
    """Load tracks and turn them into colored wheel items."""
    return normalize_items(
        load_tracks(include_bonus=include_bonus, sources=sources),
        saturation=settings.picker.color_saturation,
        lightness=settings.picker.color_lightness,
    )
