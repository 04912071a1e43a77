"""
Bracket construction for knockout tournaments.

Builds the round/match skeleton for single- and double-elimination play
from a power-of-two list of players. Only round 1 is populated; later
rounds are placeholders filled in once earlier results are known.
"""
import math
from typing import List, Sequence, Tuple

from partypicker.exceptions import InvalidBracketSize
from partypicker.utils.observability import Logger, get_metrics
from .models import Bracket, Match, MatchStatus, Player, RoundInfo

logger = Logger(__name__)
metrics = get_metrics()


def is_power_of_two(n: int) -> bool:
    """Check if a number is a power of 2."""
    return n > 0 and (n & (n - 1)) == 0


def _validate_size(players: Sequence[Player], bracket_format: str) -> int:
    count = len(players)
    # k >= 1: a lone player is not a bracket
    if count < 2 or not is_power_of_two(count):
        metrics.invalid_bracket_requests.inc()
        logger.log_error("invalid_bracket_size", player_count=count, format=bracket_format)
        raise InvalidBracketSize(player_count=count, bracket_format=bracket_format)
    return int(math.log2(count))


def seed_players(players: Sequence[Player]) -> List[Tuple[Player, Player]]:
    """
    Pair players for round 1: 1 vs last, 2 vs second-to-last, etc.

    Players without a seed sort as seed 0. The sort is stable, so
    unseeded players keep their input order.
    """
    sorted_players = sorted(players, key=lambda p: p.seed or 0)
    last = len(sorted_players) - 1
    return [
        (sorted_players[i], sorted_players[last - i])
        for i in range(len(sorted_players) // 2)
    ]


def generate_round_titles(num_rounds: int) -> List[str]:
    """
    Title for each round, indexed from round 1.

    Titles are anchored to the final: the last round is always "Finals",
    then "Semifinals" and "Quarterfinals"; anything earlier is "Round <n>".
    """
    titles = []
    for remaining in range(num_rounds, 0, -1):
        if remaining == 1:
            titles.append("Finals")
        elif remaining == 2:
            titles.append("Semifinals")
        elif remaining == 3:
            titles.append("Quarterfinals")
        else:
            titles.append(f"Round {num_rounds - remaining + 1}")
    return titles


def _build_single_elimination(players: Sequence[Player], num_rounds: int) -> Bracket:
    rounds = [
        RoundInfo(number=i, title=title)
        for i, title in enumerate(generate_round_titles(num_rounds), start=1)
    ]

    match_id = 1
    current_round: List[Match] = []
    for index, (player1, player2) in enumerate(seed_players(players)):
        current_round.append(Match(
            id=str(match_id),
            identifier=str(match_id),
            round=1,
            position=index,
            player1=player1,
            player2=player2,
            status=MatchStatus.PENDING,
        ))
        match_id += 1

    matches = list(current_round)

    for round_num in range(2, num_rounds + 1):
        next_round: List[Match] = []
        for i in range(0, len(current_round), 2):
            # Filled by the winners of current_round[i] and current_round[i + 1]
            next_round.append(Match(
                id=str(match_id),
                identifier=str(match_id),
                round=round_num,
                position=i // 2,
            ))
            match_id += 1
        matches.extend(next_round)
        current_round = next_round

    return Bracket(matches=matches, rounds=rounds)


def generate_single_elimination_bracket(players: Sequence[Player]) -> Bracket:
    """
    Generate a single elimination tournament bracket.

    Args:
        players: Competitors; the count must be a power of 2

    Returns:
        Bracket with N-1 matches over log2(N) rounds

    Raises:
        InvalidBracketSize if the player count is not a power of 2
    """
    num_rounds = _validate_size(players, "single")
    bracket = _build_single_elimination(players, num_rounds)

    metrics.brackets_generated.labels(format="single").inc()
    logger.log_event(
        "bracket_generated",
        format="single",
        players=len(players),
        rounds=num_rounds,
        matches=bracket.total_matches,
    )
    return bracket


def generate_double_elimination_bracket(players: Sequence[Player]) -> Bracket:
    """
    Generate a double elimination tournament bracket.

    The winners bracket is a full single elimination bracket with "W"
    identifiers. The losers bracket is partial: only losers round 1 is
    generated, one "L" match per pair of winners round-1 matches, with
    empty slots for the round-1 losers. Later losers rounds and the grand
    final match must be created by the caller.

    Args:
        players: Competitors; the count must be a power of 2

    Returns:
        Bracket with winners matches followed by losers round-1 matches,
        and the winners round titles plus a "Grand Final" round

    Raises:
        InvalidBracketSize if the player count is not a power of 2
    """
    num_rounds = _validate_size(players, "double")
    winners = _build_single_elimination(players, num_rounds)

    matches: List[Match] = []
    for match in winners.matches:
        match.identifier = f"W{match.id}"
        matches.append(match)

    first_round_pairs = len(players) // 2
    match_id = len(winners.matches) + 1
    # Rendering hint only: keeps the losers bracket below the winners bracket
    losers_position = math.ceil(first_round_pairs * 1.5)

    for _ in range(0, first_round_pairs, 2):
        matches.append(Match(
            id=f"L{match_id}",
            identifier=f"L{match_id}",
            round=1,
            position=losers_position,
        ))
        match_id += 1
        losers_position += 1

    rounds = winners.rounds + [RoundInfo(number=num_rounds + 1, title="Grand Final")]
    bracket = Bracket(matches=matches, rounds=rounds)

    metrics.brackets_generated.labels(format="double").inc()
    logger.log_event(
        "bracket_generated",
        format="double",
        players=len(players),
        rounds=len(rounds),
        matches=bracket.total_matches,
        losers_matches=len(bracket.losers_matches),
    )
    return bracket
