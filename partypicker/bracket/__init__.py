"""
Tournament brackets - single and double elimination.

Builds round/match skeletons from seeded players and simulates
first-round results for demos.
"""
from .models import Player, Match, MatchStatus, RoundInfo, Bracket
from .builder import (
    generate_single_elimination_bracket,
    generate_double_elimination_bracket,
    generate_round_titles,
    seed_players,
    is_power_of_two,
)
from .simulator import simulate_matches, create_sample_players

__all__ = [
    "Player",
    "Match",
    "MatchStatus",
    "RoundInfo",
    "Bracket",
    "generate_single_elimination_bracket",
    "generate_double_elimination_bracket",
    "generate_round_titles",
    "seed_players",
    "is_power_of_two",
    "simulate_matches",
    "create_sample_players",
]
