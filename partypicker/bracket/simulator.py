"""
Bracket Simulator - Sample players and simulated first-round results.

Used for demos and tests: fills round 1 with plausible outcomes where the
better seed usually wins.
"""
import random
from dataclasses import replace
from typing import List, Optional, Sequence

from partypicker.core.protocols import RandomSource
from partypicker.utils.observability import Logger
from .models import Match, MatchStatus, Player

logger = Logger(__name__)

SAMPLE_NAMES = [
    "Mario", "Luigi", "Peach", "Bowser", "Yoshi", "Koopa", "Toad", "DK",
    "Wario", "Waluigi", "Rosalina", "Bowser Jr.", "Shy Guy", "Lakitu", "Piranha Plant", "King Boo",
]

# Draws above this go to the better seed
UPSET_THRESHOLD = 0.3
WINNER_SCORE = 2
LOSER_SCORE = 1


def create_sample_players(count: int) -> List[Player]:
    """Create `count` seeded sample players (p1 is seed 1)."""
    return [
        Player(
            id=f"p{i + 1}",
            name=SAMPLE_NAMES[i] if i < len(SAMPLE_NAMES) else f"Player {i + 1}",
            seed=i + 1,
        )
        for i in range(count)
    ]


def _pick_winner(player1: Player, player2: Player, rng: RandomSource) -> Player:
    # Equal seeds: player2 wins either way
    seed1 = player1.seed or 0
    seed2 = player2.seed or 0
    if rng.random() > UPSET_THRESHOLD:
        return player1 if seed1 < seed2 else player2
    return player1 if seed1 > seed2 else player2


def simulate_matches(
    matches: Sequence[Match],
    rng: Optional[RandomSource] = None,
) -> List[Match]:
    """
    Simulate round-1 results.

    Every round-1 match with both players gets a winner, a 2-1 score and
    status complete. Other matches are returned as they are. The input
    matches are never modified; simulated ones are new copies.

    Args:
        matches: Bracket matches (any order)
        rng: Source of uniform draws (defaults to an unseeded generator)

    Returns:
        New list with simulated copies in place of round-1 matches
    """
    rng = rng or random.Random()
    simulated = []
    completed = 0

    for match in matches:
        if match.round != 1 or not match.is_ready or match.bracket_side != "winners":
            simulated.append(match)
            continue

        winner = _pick_winner(match.player1, match.player2, rng)
        player1 = replace(
            match.player1,
            score=WINNER_SCORE if winner.id == match.player1.id else LOSER_SCORE,
        )
        player2 = replace(
            match.player2,
            score=WINNER_SCORE if winner.id == match.player2.id else LOSER_SCORE,
        )
        simulated.append(replace(
            match,
            player1=player1,
            player2=player2,
            winner=winner,
            status=MatchStatus.COMPLETE,
        ))
        completed += 1

    logger.log_event("matches_simulated", completed=completed, total=len(simulated))
    return simulated
