from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class PlayerIn(BaseModel):
    """
    Competitor supplied by the caller.
    """
    id: str
    name: str
    seed: Optional[int] = Field(default=None, ge=1, description="1 = strongest")


class BracketRequest(BaseModel):
    """
    Request to build a bracket; the player count must be a power of 2.
    """
    players: List[PlayerIn]
    format: Literal["single", "double"] = "single"
    simulate: bool = Field(default=False, description="Fill round 1 with simulated results")
    seed: Optional[int] = Field(default=None, description="Random seed for simulation")


class PlayerOut(BaseModel):
    id: str
    name: str
    seed: Optional[int] = None
    score: Optional[int] = None


class MatchOut(BaseModel):
    id: str
    identifier: str
    player1: Optional[PlayerOut] = None
    player2: Optional[PlayerOut] = None
    winner: Optional[PlayerOut] = None
    status: str
    round: int
    position: int


class RoundOut(BaseModel):
    number: int
    title: str


class BracketResponse(BaseModel):
    """
    Generated bracket, round 1 first.
    """
    format: str
    matches: List[MatchOut]
    rounds: List[RoundOut]


class PickerItemIn(BaseModel):
    id: Optional[str] = Field(default=None, description="Derived from the label when omitted")
    label: str = Field(min_length=1)
    color: Optional[str] = None
    weight: Optional[float] = Field(default=None, ge=0.0)


class SpinRequest(BaseModel):
    """
    Request to spin the wheel. Without items the track list is used.
    """
    items: List[PickerItemIn] = Field(default_factory=list)
    spins: Optional[int] = Field(default=None, ge=0, le=100, description="Full revolutions (default from settings)")
    weighted: bool = False
    include_bonus: Optional[bool] = None  # None: TRACKS_INCLUDE_BONUS
    seed: Optional[int] = Field(default=None, description="Random seed for a reproducible pick")


class PickerItemOut(BaseModel):
    id: str
    label: str
    color: Optional[str] = None
    weight: Optional[float] = None


class SpinResponse(BaseModel):
    selected_item: Optional[PickerItemOut] = None
    rotation: float
    is_spinning: bool
    total_items: int


class TrackOut(BaseModel):
    id: str
    name: str
    cup: Optional[str] = None
    bonus: bool
    color: str


class TrackListResponse(BaseModel):
    count: int
    tracks: List[TrackOut]
