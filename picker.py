#!/usr/bin/env python
"""
Party Picker - CLI for tournament brackets and the spinner wheel
"""
import sys
import argparse
import os
import time
import uuid
import json

from partypicker.utils.observability import initialize_observability, Logger, CORRELATION_ID
from partypicker.config import settings

# Initialize observability
ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')
initialize_observability(environment=ENVIRONMENT)

logger = Logger(__name__)


def cmd_bracket(args):
    """Build and print a bracket of sample players."""
    from partypicker.bracket import (
        create_sample_players,
        generate_single_elimination_bracket,
        generate_double_elimination_bracket,
        simulate_matches,
    )
    from partypicker.exceptions import InvalidBracketSize
    from partypicker.picker import build_rng

    logger.log_event('bracket_command_started', players=args.players, format=args.format)

    players = create_sample_players(args.players)
    generate = (
        generate_double_elimination_bracket if args.format == "double"
        else generate_single_elimination_bracket
    )
    try:
        bracket = generate(players)
    except InvalidBracketSize as e:
        print(f"ERROR: {e}")
        return 1

    matches = bracket.matches
    if args.simulate:
        matches = simulate_matches(matches, build_rng(seed=args.seed))

    if args.json:
        print(json.dumps({
            "format": args.format,
            "matches": [m.to_dict() for m in matches],
            "rounds": [r.to_dict() for r in bracket.rounds],
        }, indent=2))
        return 0

    _print_bracket_ascii(matches, bracket.rounds)
    return 0


def cmd_spin(args):
    """Spin the wheel over custom items or the track list."""
    from partypicker.extract import load_picker_items
    from partypicker.picker import normalize_items, build_rng, spin, get_default_items

    if args.items:
        labels = [x.strip() for x in args.items.split(",") if x.strip()]
        items = normalize_items(
            [{"name": label} for label in labels],
            saturation=settings.picker.color_saturation,
            lightness=settings.picker.color_lightness,
        )
    elif args.tracks:
        items = load_picker_items(include_bonus=False if args.no_bonus else None)
    else:
        items = get_default_items()

    seed = args.seed if args.seed is not None else settings.picker.rng_seed
    spins = args.spins if args.spins is not None else settings.picker.default_spins

    logger.log_event('spin_command_started', items=len(items), weighted=args.weighted)
    state = spin(items, rng=build_rng(seed=seed), spins=spins, weighted=args.weighted)

    if args.json:
        print(json.dumps(state.to_dict(), indent=2))
        return 0

    if state.selected_item is None:
        print("Nothing to pick: the wheel is empty.")
        return 0

    print(f"\n>>> {state.selected_item.label}")
    print(f"    rotation: {state.rotation:.2f} deg over {len(items)} slices\n")
    return 0


def cmd_tracks(args):
    """List the available tracks."""
    from partypicker.extract import load_tracks

    tracks = load_tracks(include_bonus=False if args.no_bonus else None)
    if not tracks:
        print("No tracks available")
        return 0

    print(f"\n=== TRACKS ({len(tracks)}) ===\n")
    for i, track in enumerate(tracks, 1):
        tag = " [bonus]" if track.bonus else ""
        cup = f" ({track.cup})" if track.cup else ""
        print(f"  {i:>2}. {track.name}{cup}{tag}")
    print()
    return 0


def _print_bracket_ascii(matches, rounds):
    """Print bracket rounds in a readable layout."""
    titles = {r.number: r.title for r in rounds}

    for side in ("winners", "losers"):
        side_matches = [m for m in matches if m.bracket_side == side]
        if not side_matches:
            continue
        if side == "losers":
            print("\n=== LOSERS BRACKET ===")

        for round_num in sorted({m.round for m in side_matches}):
            title = titles.get(round_num, f"Round {round_num}")
            if side == "losers":
                title = f"Losers Round {round_num}"
            print(f"\n--- {title} ---")
            for match in sorted((m for m in side_matches if m.round == round_num), key=lambda m: m.position):
                _print_match_row(match)

    extra = [r for r in rounds if r.number > max(m.round for m in matches)]
    for info in extra:
        print(f"\n--- {info.title} ---")
        print("  (decided outside the generated bracket)")
    print()


def _print_match_row(match):
    """Print a single match row."""
    p1 = match.player1.name if match.player1 else "TBD"
    p2 = match.player2.name if match.player2 else "TBD"
    if match.winner:
        p1_mark = "*" if match.winner.id == match.player1.id else " "
        p2_mark = "*" if match.winner.id == match.player2.id else " "
    else:
        p1_mark = p2_mark = " "
    print(f"  [{match.identifier:>4}] {p1_mark}{p1:<18} vs {p2_mark}{p2:<18} ({match.status.value})")


def main():
    parser = argparse.ArgumentParser(description="Party Picker")
    subparsers = parser.add_subparsers(dest="command", required=True)

    bracket = subparsers.add_parser("bracket", help="Build a tournament bracket")
    bracket.add_argument("--players", "-n", type=int, default=8, help="Number of players (power of 2)")
    bracket.add_argument("--format", "-f", choices=["single", "double"], default="single")
    bracket.add_argument("--simulate", action="store_true", help="Simulate round 1 results")
    bracket.add_argument("--seed", type=int, help="Random seed for simulation")
    bracket.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    bracket.set_defaults(func=cmd_bracket)

    spin = subparsers.add_parser("spin", help="Spin the wheel")
    spin.add_argument("--items", help="Comma-separated labels")
    spin.add_argument("--tracks", action="store_true", help="Spin over the track list")
    spin.add_argument("--no-bonus", action="store_true", help="Leave bonus tracks out")
    spin.add_argument("--spins", type=int, help="Full revolutions before landing")
    spin.add_argument("--weighted", action="store_true", help="Use item weights")
    spin.add_argument("--seed", type=int, help="Random seed for a reproducible pick")
    spin.add_argument("--json", action="store_true")
    spin.set_defaults(func=cmd_spin)

    tracks = subparsers.add_parser("tracks", help="List tracks")
    tracks.add_argument("--no-bonus", action="store_true", help="Leave bonus tracks out")
    tracks.set_defaults(func=cmd_tracks)

    args = parser.parse_args()

    # Initialize correlation ID for this run
    correlation_id = str(uuid.uuid4())
    CORRELATION_ID.set(correlation_id)

    start_time = time.time()

    try:
        result = args.func(args)
    except Exception as e:
        logger.log_error("command_failed", error=str(e), exc_info=True)
        sys.exit(1)
    finally:
        duration = time.time() - start_time
        logger.log_event('command_completed', duration_seconds=duration)

    if result:
        sys.exit(result)

if __name__ == "__main__":
    main()
