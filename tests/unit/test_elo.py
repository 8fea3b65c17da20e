"""
Unit tests for the ELO rating engine.

Tests the core rating logic to ensure:
- Expected scores are symmetric and 0.5 for equal ratings
- K-factor rules apply in priority order with exact boundaries
- Winners always gain, losers always lose
- Equal-K matches are zero-sum, mixed-K matches are not
"""

import random

import pytest

from sportshub.elo.calculator import EloRatingDelta, calculate_delta, expected_score, k_factor
from sportshub.sports import SportConfig


class TestExpectedScore:
    """Tests for expected_score()."""

    @pytest.mark.parametrize("rating", [0.0, 850.0, 1000.0, 1600.0, 2450.5])
    def test_equal_ratings_are_even(self, rating):
        assert expected_score(rating, rating) == 0.5

    @pytest.mark.parametrize(
        "rating_a,rating_b",
        [(1000.0, 1400.0), (1523.7, 1188.2), (900.0, 2100.0), (1000.0, 1001.0), (0.0, 10**6)],
    )
    def test_both_sides_sum_to_one(self, rating_a, rating_b):
        assert expected_score(rating_a, rating_b) + expected_score(rating_b, rating_a) == 1.0

    def test_both_sides_sum_to_one_for_random_pairs(self):
        """The sum is exactly 1.0 in float, not just close to it."""
        rng = random.Random(2026)
        for _ in range(5000):
            rating_a = rng.uniform(-5000.0, 8000.0)
            rating_b = rng.uniform(-5000.0, 8000.0)
            total = expected_score(rating_a, rating_b) + expected_score(rating_b, rating_a)
            assert total == 1.0, (rating_a, rating_b)

    def test_400_point_gap(self):
        """A 400-point favourite is expected to win about 91% of the time."""
        assert expected_score(1400, 1000) == pytest.approx(10 / 11)
        assert expected_score(1000, 1400) == pytest.approx(1 / 11)

    def test_higher_rating_is_favoured(self):
        assert expected_score(1200, 1000) > 0.5
        assert expected_score(1000, 1200) < 0.5

    def test_extreme_gap_saturates(self):
        """
        Past a few thousand points the float result pins to 0.0 and 1.0
        instead of overflowing.
        """
        assert expected_score(0, 10**6) == 0.0
        assert expected_score(10**6, 0) == 1.0

    def test_large_gap_still_pays_the_favourite(self):
        """A 5000-point favourite gains a vanishing but positive amount."""
        delta = calculate_delta(5000, 20, 0, 20)

        assert 0 < delta.winner_delta < 1e-9
        assert delta.loser_delta < 0


class TestKFactor:
    """Tests for the K-factor schedule."""

    def test_high_rated_wins_over_everything(self):
        assert k_factor(1601, 0) == 16
        assert k_factor(1601, 5) == 16
        assert k_factor(1601, 500) == 16

    def test_high_rated_boundary_is_exclusive(self):
        assert k_factor(1600, 20) == 24
        assert k_factor(1600, 3) == 40

    def test_provisional_boundary(self):
        assert k_factor(1000, 9) == 40
        assert k_factor(1000, 10) == 24

    def test_new_player(self):
        assert k_factor(1000, 0) == 40

    def test_custom_config(self):
        config = SportConfig(k_provisional=50, provisional_threshold=5)
        assert k_factor(1000, 4, config) == 50
        assert k_factor(1000, 5, config) == 24


class TestCalculateDelta:
    """Tests for calculate_delta()."""

    def test_both_provisional_equal_ratings(self):
        """K=40 and E=0.5 on both sides: +20 / -20."""
        delta = calculate_delta(1000, 0, 1000, 0)

        assert delta.winner_delta == 20.0
        assert delta.loser_delta == -20.0
        assert delta.winner_new_rating == 1020.0
        assert delta.loser_new_rating == 980.0
        assert delta.is_zero_sum

    def test_both_standard_equal_ratings(self):
        """K=24 and E=0.5 on both sides: +12 / -12."""
        delta = calculate_delta(1000, 15, 1000, 15)

        assert delta.winner_delta == 12.0
        assert delta.loser_delta == -12.0
        assert delta.is_zero_sum

    def test_both_high_rated_is_zero_sum(self):
        delta = calculate_delta(1700, 50, 1650, 50)

        assert delta.winner_k == delta.loser_k == 16
        assert delta.winner_delta + delta.loser_delta == pytest.approx(0.0, abs=1e-9)

    def test_mixed_k_is_not_zero_sum(self):
        """
        A provisional winner against an established loser.

        Each side uses its own K, so the winner gains more than the loser drops.
        """
        delta = calculate_delta(1000, 2, 1000, 30)

        assert delta.winner_k == 40
        assert delta.loser_k == 24
        assert delta.winner_delta == 20.0
        assert delta.loser_delta == -12.0
        assert not delta.is_zero_sum

    @pytest.mark.parametrize(
        "winner_rating,winner_count,loser_rating,loser_count",
        [
            (1000, 0, 1000, 0),
            (800, 12, 1700, 40),   # big upset
            (1700, 40, 800, 12),   # heavy favourite wins
            (1599, 9, 1601, 9),
            (1234.5, 3, 1111.1, 27),
        ],
    )
    def test_signs_and_new_ratings(self, winner_rating, winner_count, loser_rating, loser_count):
        delta = calculate_delta(winner_rating, winner_count, loser_rating, loser_count)

        assert delta.winner_delta > 0
        assert delta.loser_delta < 0
        assert delta.winner_new_rating == winner_rating + delta.winner_delta
        assert delta.loser_new_rating == loser_rating + delta.loser_delta

    def test_underdog_gains_more(self):
        upset = calculate_delta(1000, 20, 1300, 20)
        expected = calculate_delta(1300, 20, 1000, 20)

        assert upset.winner_delta > expected.winner_delta
        assert upset.was_upset
        assert not expected.was_upset

    def test_delta_is_immutable(self):
        delta = calculate_delta(1000, 0, 1000, 0)
        with pytest.raises(AttributeError):
            delta.winner_delta = 99.0

    def test_returns_rating_delta(self):
        assert isinstance(calculate_delta(1000, 0, 1100, 0), EloRatingDelta)
