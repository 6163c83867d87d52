"""Unit tests for potential scoring."""

import pytest

from gem_finder.core.models import PotentialScore
from gem_finder.scanner.scoring import (
    DEFAULT_RULES,
    MAX_POTENTIAL_SCORE,
    PotentialScorer,
    ScoreRule,
    ScoreTier,
    score_record,
)


class TestScoreRecord:
    def test_scenario_a_scores_fifteen(self, scenario_a_record):
        score = score_record(scenario_a_record)
        assert score.value == 15
        assert score.factors == [
            "Micro market cap with massive growth potential",
            "Exceptional trading volume relative to market cap",
            "Strong positive price momentum (>15%)",
            "Very large room for supply growth",
        ]

    def test_zero_score_has_no_factors(self, record_factory):
        record = record_factory(
            market_cap=90_000_000,
            total_volume=10_000_000,
            price_change_percentage_24h=-3.0,
        )
        score = score_record(record)
        assert score == PotentialScore(value=0, factors=[])

    def test_maximum_score(self, record_factory):
        record = record_factory(
            market_cap=1_000_000,
            total_volume=2_000_000,
            price_change_percentage_24h=30,
            total_supply=1000,
            circulating_supply=100,
        )
        score = score_record(record)
        assert score.value == 17 == MAX_POTENTIAL_SCORE
        assert len(score.factors) == 5
        assert score.factors[-1] == "Extremely high trading activity"

    def test_lower_tiers(self, record_factory):
        record = record_factory(
            market_cap=20_000_000,
            total_volume=8_000_000,  # ratio 0.4
            price_change_percentage_24h=10,
            total_supply=100,
            circulating_supply=40,
        )
        score = score_record(record)
        assert score.value == 3 + 3 + 2 + 2
        assert score.factors == [
            "Very low market cap with high growth potential",
            "Very high trading volume relative to market cap",
            "Good positive price momentum (>8%)",
            "Significant room for supply growth",
        ]

    def test_thresholds_are_strict(self, record_factory):
        record = record_factory(
            market_cap=10_000_000,  # not < 10M
            total_volume=5_000_000,  # ratio exactly 0.5
            price_change_percentage_24h=15,
            total_supply=10,
            circulating_supply=3,  # exactly 0.3
        )
        score = score_record(record)
        assert score.factors == [
            "Very low market cap with high growth potential",
            "Very high trading volume relative to market cap",
            "Good positive price momentum (>8%)",
            "Significant room for supply growth",
        ]

    @pytest.mark.parametrize("total_supply,circulating_supply", [
        (None, 20),
        (100, None),
        (0, 20),
        (None, None),
    ])
    def test_missing_supply_contributes_nothing(self, record_factory, total_supply, circulating_supply):
        record = record_factory(
            market_cap=60_000_000,
            total_volume=7_000_000,
            total_supply=total_supply,
            circulating_supply=circulating_supply,
        )
        score = score_record(record)
        assert score.value == 0
        assert score.factors == []

    def test_missing_price_change_contributes_nothing(self, record_factory):
        record = record_factory(market_cap=60_000_000, total_volume=7_000_000, price_change_percentage_24h=None)
        assert score_record(record).value == 0

    def test_bonus_needs_volume_above_cap(self, record_factory):
        equal = record_factory(market_cap=60_000_000, total_volume=60_000_000)
        above = record_factory(market_cap=60_000_000, total_volume=60_000_001)
        assert "Extremely high trading activity" not in score_record(equal).factors
        assert "Extremely high trading activity" in score_record(above).factors

    def test_score_is_deterministic(self, scenario_a_record):
        assert score_record(scenario_a_record) == score_record(scenario_a_record)

    def test_factor_count_matches_triggered_rules(self, record_factory):
        for cap in (1e6, 20e6, 70e6):
            for volume in (0.2e6, 10e6, 100e6):
                record = record_factory(market_cap=cap, total_volume=volume, price_change_percentage_24h=12)
                score = score_record(record)
                triggered = [rule for rule in DEFAULT_RULES if rule.evaluate(record) is not None]
                assert len(score.factors) == len(triggered)
                assert 0 <= score.value <= MAX_POTENTIAL_SCORE


class TestPotentialScorer:
    def test_custom_rules(self, record_factory):
        rule = ScoreRule(
            name="positive_change",
            metric=lambda r: r.price_change_percentage_24h,
            tiers=(ScoreTier(lambda v: v > 0, 1, "Going up"),),
        )
        scorer = PotentialScorer([rule])
        assert scorer.max_score == 1
        assert scorer.score(record_factory(price_change_percentage_24h=1.0)).factors == ["Going up"]
        assert scorer.score(record_factory(price_change_percentage_24h=-1.0)).value == 0

    def test_empty_rule_table(self, scenario_a_record):
        scorer = PotentialScorer([])
        assert scorer.score(scenario_a_record) == PotentialScore()

    def test_rule_returns_first_matching_tier(self, record_factory):
        rule = DEFAULT_RULES[0]
        tier = rule.evaluate(record_factory(market_cap=1_000_000))
        assert tier.points == 4
        assert rule.max_points == 4
