from fastapi import APIRouter, HTTPException
from datetime import datetime
from typing import Optional

from partypicker import __version__
from partypicker.api.schema import (
    BracketRequest,
    BracketResponse,
    SpinRequest,
    SpinResponse,
    TrackListResponse,
)
from partypicker.bracket import (
    Player,
    generate_double_elimination_bracket,
    generate_single_elimination_bracket,
    simulate_matches,
)
from partypicker.config import settings
from partypicker.exceptions import InvalidBracketSize
from partypicker.extract import load_picker_items, load_tracks
from partypicker.picker import (
    PickerItem,
    build_rng,
    generate_color_from_index,
    normalize_items,
    slugify_label,
    spin,
)
from partypicker.utils.observability import Logger, get_metrics
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from fastapi.responses import Response

router = APIRouter()
logger = Logger(__name__)
metrics = get_metrics()

GENERATORS = {
    "single": generate_single_elimination_bracket,
    "double": generate_double_elimination_bracket,
}

@router.get("/health")
def health_check():
    """
    Service health check.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
    }

@router.get("/metrics")
def metrics_endpoint():
    """
    Expose Prometheus metrics.
    """
    return Response(generate_latest(metrics.registry), media_type=CONTENT_TYPE_LATEST)

@router.post("/brackets", response_model=BracketResponse)
def create_bracket(request: BracketRequest):
    """
    Build a single or double elimination bracket.
    """
    logger.log_event("api_bracket_request", format=request.format, players=len(request.players))

    players = [Player(id=p.id, name=p.name, seed=p.seed) for p in request.players]
    try:
        bracket = GENERATORS[request.format](players)
    except InvalidBracketSize as e:
        raise HTTPException(status_code=422, detail=str(e))

    matches = bracket.matches
    if request.simulate:
        matches = simulate_matches(matches, build_rng(seed=request.seed))

    return {
        "format": request.format,
        "matches": [m.to_dict() for m in matches],
        "rounds": [r.to_dict() for r in bracket.rounds],
    }

@router.post("/spin", response_model=SpinResponse)
def spin_wheel(request: SpinRequest):
    """
    Pick an item and return the rotation that lands on it.
    """
    if request.items:
        items = [
            PickerItem(
                id=item.id or slugify_label(item.label),
                label=item.label,
                color=item.color or generate_color_from_index(
                    index,
                    settings.picker.color_saturation,
                    settings.picker.color_lightness,
                ),
                weight=item.weight,
            )
            for index, item in enumerate(request.items)
        ]
    else:
        items = load_picker_items(include_bonus=request.include_bonus)

    seed = request.seed if request.seed is not None else settings.picker.rng_seed
    spins = request.spins if request.spins is not None else settings.picker.default_spins
    state = spin(items, rng=build_rng(seed=seed), spins=spins, weighted=request.weighted)

    return {
        "selected_item": state.selected_item.to_dict() if state.selected_item else None,
        "rotation": state.rotation,
        "is_spinning": state.is_spinning,
        "total_items": len(items),
    }

@router.get("/tracks", response_model=TrackListResponse)
def list_tracks(include_bonus: Optional[bool] = None):
    """
    Track list with wheel ids and colors.
    """
    tracks = load_tracks(include_bonus=include_bonus)
    items = normalize_items(
        tracks,
        saturation=settings.picker.color_saturation,
        lightness=settings.picker.color_lightness,
    )
    return {
        "count": len(tracks),
        "tracks": [
            {
                "id": item.id,
                "name": track.name,
                "cup": track.cup,
                "bonus": track.bonus,
                "color": item.color,
            }
            for track, item in zip(tracks, items)
        ],
    }
