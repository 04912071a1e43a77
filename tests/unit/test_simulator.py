"""
Unit tests for sample players and simulated results.
"""
import pytest

from partypicker.bracket import (
    MatchStatus,
    Player,
    create_sample_players,
    generate_double_elimination_bracket,
    generate_single_elimination_bracket,
    simulate_matches,
)
from partypicker.picker import build_rng


class TestCreateSamplePlayers:
    """Tests for create_sample_players."""

    def test_named_and_seeded(self):
        players = create_sample_players(4)
        assert [p.id for p in players] == ["p1", "p2", "p3", "p4"]
        assert [p.name for p in players] == ["Mario", "Luigi", "Peach", "Bowser"]
        assert [p.seed for p in players] == [1, 2, 3, 4]

    def test_generic_names_past_roster(self):
        """Test names fall back to 'Player N' after the sixteen racers."""
        players = create_sample_players(18)
        assert players[15].name == "King Boo"
        assert players[16].name == "Player 17"
        assert players[17].name == "Player 18"

    def test_zero(self):
        assert create_sample_players(0) == []


class TestSimulateMatches:
    """Tests for simulate_matches."""

    @pytest.fixture
    def bracket(self):
        return generate_single_elimination_bracket(create_sample_players(8))

    def test_favorite_wins_on_high_draw(self, bracket, scripted_rng):
        """Test draws above 0.3 go to the better seed."""
        simulated = simulate_matches(bracket.matches, scripted_rng([0.9]))
        first = simulated[0]

        assert first.status == MatchStatus.COMPLETE
        assert first.winner.seed == 1
        assert first.player1.score == 2
        assert first.player2.score == 1

    def test_underdog_wins_on_low_draw(self, bracket, scripted_rng):
        """Test draws at or below 0.3 go to the worse seed."""
        simulated = simulate_matches(bracket.matches, scripted_rng([0.1]))
        first = simulated[0]

        assert first.winner.seed == 8
        assert first.player1.score == 1
        assert first.player2.score == 2

    def test_draw_of_exactly_threshold_is_an_upset(self, bracket, scripted_rng):
        simulated = simulate_matches(bracket.matches, scripted_rng([0.3]))
        assert simulated[0].winner.seed == 8

    @pytest.mark.parametrize("draw", [0.1, 0.3, 0.9])
    @pytest.mark.parametrize("seeds", [(None, None), (2, 2)])
    def test_equal_seeds_go_to_second_player(self, scripted_rng, draw, seeds):
        players = [
            Player(id="x", name="X", seed=seeds[0]),
            Player(id="y", name="Y", seed=seeds[1]),
        ]
        bracket = generate_single_elimination_bracket(players)

        simulated = simulate_matches(bracket.matches, scripted_rng([draw]))

        assert simulated[0].winner.id == "y"
        assert simulated[0].player2.score == 2

    def test_only_first_round_simulated(self, bracket, scripted_rng):
        simulated = simulate_matches(bracket.matches, scripted_rng([0.5]))

        for match in simulated:
            if match.round == 1:
                assert match.status == MatchStatus.COMPLETE
            else:
                assert match.status == MatchStatus.PENDING
                assert match.winner is None

    def test_input_untouched(self, bracket, scripted_rng):
        """Test simulation returns copies and leaves the bracket as generated."""
        simulated = simulate_matches(bracket.matches, scripted_rng([0.5]))

        assert simulated[0] is not bracket.matches[0]
        assert bracket.matches[0].status == MatchStatus.PENDING
        assert bracket.matches[0].winner is None
        assert bracket.matches[0].player1.score is None
        # Later rounds are passed through as-is
        assert simulated[-1] is bracket.matches[-1]

    def test_unseeded_players_treated_as_zero(self, scripted_rng):
        players = [
            Player(id="x", name="Unseeded"),
            Player(id="a", name="A", seed=1),
        ]
        bracket = generate_single_elimination_bracket(players)
        simulated = simulate_matches(bracket.matches, scripted_rng([0.9]))
        assert simulated[0].winner.id == "x"

    def test_losers_placeholders_skipped(self, scripted_rng):
        bracket = generate_double_elimination_bracket(create_sample_players(8))
        simulated = simulate_matches(bracket.matches, scripted_rng([0.5]))
        losers = [m for m in simulated if m.bracket_side == "losers"]
        assert all(m.status == MatchStatus.PENDING for m in losers)

    def test_seeded_simulation_reproducible(self, bracket):
        first = simulate_matches(bracket.matches, build_rng(seed=11))
        second = simulate_matches(bracket.matches, build_rng(seed=11))
        assert [m.winner for m in first] == [m.winner for m in second]

    @pytest.mark.slow
    def test_favorites_win_most_often(self):
        """Test the better seed wins about 70% of simulated matches."""
        bracket = generate_single_elimination_bracket(create_sample_players(16))
        rng = build_rng(seed=2024)
        favorite_wins = 0
        total = 0
        for _ in range(500):
            for match in simulate_matches(bracket.matches, rng):
                if match.round == 1:
                    total += 1
                    favorite_wins += match.winner.seed == min(match.player1.seed, match.player2.seed)
        assert 0.65 < favorite_wins / total < 0.75
