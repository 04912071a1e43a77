"""
Bracket Data Structures.

Players, matches and round descriptors produced by the bracket builder
and consumed by rendering layers.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Any


class MatchStatus(str, Enum):
    PENDING = "pending"
    OPEN = "open"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Player:
    """A competitor as supplied by the caller."""
    id: str
    name: str
    seed: Optional[int] = None          # 1 = strongest
    score: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "seed": self.seed,
            "score": self.score,
        }


@dataclass
class Match:
    """A single match in the bracket."""
    id: str                             # Numeric counter, or "L<n>" in the losers bracket
    identifier: str                     # Display key: "3", "W3", "L8"
    round: int                          # 1-based
    position: int                       # Rendering order within its round

    # Empty until the previous round resolves
    player1: Optional[Player] = None
    player2: Optional[Player] = None
    winner: Optional[Player] = None

    status: MatchStatus = MatchStatus.PENDING

    @property
    def is_ready(self) -> bool:
        """Check if both player slots are filled."""
        return self.player1 is not None and self.player2 is not None

    @property
    def bracket_side(self) -> str:
        """Which side of a double-elimination bracket the match belongs to."""
        return "losers" if self.identifier.startswith("L") else "winners"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "identifier": self.identifier,
            "player1": self.player1.to_dict() if self.player1 else None,
            "player2": self.player2.to_dict() if self.player2 else None,
            "winner": self.winner.to_dict() if self.winner else None,
            "status": self.status.value,
            "round": self.round,
            "position": self.position,
        }


@dataclass(frozen=True)
class RoundInfo:
    """Round number and its human-readable title."""
    number: int
    title: str

    def to_dict(self) -> Dict[str, Any]:
        return {"number": self.number, "title": self.title}


@dataclass
class Bracket:
    """
    Generated bracket: flat match list (round 1 first) plus round descriptors.

    Matches in the losers bracket of a double-elimination bracket carry an
    "L" identifier and share round numbers with the winners bracket.
    """
    matches: List[Match] = field(default_factory=list)
    rounds: List[RoundInfo] = field(default_factory=list)

    @property
    def winners_matches(self) -> List[Match]:
        return [m for m in self.matches if m.bracket_side == "winners"]

    @property
    def losers_matches(self) -> List[Match]:
        return [m for m in self.matches if m.bracket_side == "losers"]

    @property
    def total_matches(self) -> int:
        return len(self.matches)

    def matches_in_round(self, round_num: int, side: str = "winners") -> List[Match]:
        """Get the matches of one round on one side, in bracket order."""
        return [
            m for m in self.matches
            if m.round == round_num and m.bracket_side == side
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize bracket to dictionary."""
        return {
            "matches": [m.to_dict() for m in self.matches],
            "rounds": [r.to_dict() for r in self.rounds],
        }
