"""
Unit tests for the matchmaking fairness score.

Only the structural properties are pinned (range, symmetry, monotonic
decay, sport independence) plus the recommendation cutoff scenarios.
"""

import pytest

from sportshub.matchmaking import (
    MINIMUM_RECOMMENDED_FAIRNESS,
    fairness_score,
    is_recommended,
    rank_opponents,
)
from sportshub.models import Player
from sportshub.sports import ALL_SPORTS, Sport


class TestFairnessScore:
    """Tests for fairness_score()."""

    @pytest.mark.parametrize("rating", [0.0, 1000.0, 1733.3])
    def test_identical_ratings_are_perfectly_fair(self, rating):
        assert fairness_score(rating, rating, Sport.BASKETBALL) == 1.0

    @pytest.mark.parametrize(
        "rating_a,rating_b",
        [(1000, 1050), (800, 2000), (0, 10**7), (1100, 1300)],
    )
    def test_range_and_symmetry(self, rating_a, rating_b):
        score = fairness_score(rating_a, rating_b, Sport.BASKETBALL)
        assert 0.0 <= score <= 1.0
        assert score == fairness_score(rating_b, rating_a, Sport.BASKETBALL)

    def test_strictly_decreasing_with_gap(self):
        scores = [fairness_score(1000, 1000 + gap, Sport.TENNIS) for gap in range(0, 2001, 50)]
        assert all(later < earlier for earlier, later in zip(scores, scores[1:]))

    def test_400_point_gap_halves_score(self):
        assert fairness_score(1000, 1400, Sport.SOCCER) == pytest.approx(0.5)

    def test_same_score_across_sports(self):
        scores = {sport: fairness_score(1100, 1250, sport) for sport in ALL_SPORTS}
        assert len(set(scores.values())) == 1

    def test_sport_name_accepted(self):
        assert fairness_score(1100, 1250, "football") == fairness_score(1100, 1250, Sport.FOOTBALL)


class TestRecommendation:
    """Tests for the recommendation cutoff."""

    def test_threshold_in_open_unit_interval(self):
        assert 0.0 < MINIMUM_RECOMMENDED_FAIRNESS < 1.0

    def test_close_ratings_recommended(self):
        assert fairness_score(1000, 1020, Sport.BASKETBALL) == pytest.approx(0.952, abs=1e-3)
        assert is_recommended(1000, 1020, Sport.BASKETBALL)

    def test_600_point_gap_not_recommended(self):
        assert fairness_score(800, 1400, Sport.BASKETBALL) == pytest.approx(0.4)
        assert not is_recommended(800, 1400, Sport.BASKETBALL)


class TestRankOpponents:
    """Tests for rank_opponents()."""

    def test_fairest_first_and_self_skipped(self):
        me = Player(name="Me", ratings={Sport.TENNIS: 1200.0})
        far = Player(name="Far", ratings={Sport.TENNIS: 1700.0})
        near = Player(name="Near", ratings={Sport.TENNIS: 1180.0})
        mid = Player(name="Mid", ratings={Sport.TENNIS: 1000.0})

        ranked = rank_opponents(me, [far, me, near, mid], Sport.TENNIS)

        assert [p.name for p, _ in ranked] == ["Near", "Mid", "Far"]
        assert ranked[0][1] == fairness_score(1200.0, 1180.0, Sport.TENNIS)

    def test_ties_keep_input_order(self):
        me = Player(name="Me")
        first = Player(name="First")
        second = Player(name="Second")

        ranked = rank_opponents(me, [first, second], Sport.SOCCER)

        assert [p.name for p, _ in ranked] == ["First", "Second"]
        assert all(score == 1.0 for _, score in ranked)
