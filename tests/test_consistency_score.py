import pytest

from rcfpl.config import ScoreWeights
from rcfpl.scoring import (
    NEUTRAL_PERCENTILE,
    compute_breakdowns,
    percentile_rank,
    recompute_scores,
    validate_scores,
)

from tests.helpers import make_record, sample_pool


def _player(player_id, smoothed=50.0, std_dev=3.0, blank_rate=20.0, appearances=10):
    base = make_record(player_id, f"Player {player_id}", appearances=appearances, returns=0, blanks=0, hauls=0)
    return base.model_copy(
        update={
            "return_rate_smoothed": smoothed,
            "points_std_dev": std_dev,
            "blank_rate": blank_rate,
        }
    )


def test_percentile_rank_uses_mid_rank_ties():
    assert percentile_rank(3, [1, 2, 3, 4]) == pytest.approx(62.5)
    assert percentile_rank(1, [1, 1, 1]) == pytest.approx(50.0)
    assert percentile_rank(0, [1, 2]) == pytest.approx(0.0)
    assert percentile_rank(9, [1, 2]) == pytest.approx(100.0)


def test_percentile_rank_of_empty_population_is_neutral():
    assert percentile_rank(12.0, []) == NEUTRAL_PERCENTILE


def test_three_distinct_return_rates_rank_100_50_0():
    records = [_player(1, smoothed=80), _player(2, smoothed=50), _player(3, smoothed=20)]
    breakdowns = compute_breakdowns(records)

    assert [b.return_component for b in breakdowns] == pytest.approx([100.0, 50.0, 0.0])
    assert [b.volatility_component for b in breakdowns] == pytest.approx([50.0, 50.0, 50.0])
    assert [b.blank_component for b in breakdowns] == pytest.approx([50.0, 50.0, 50.0])

    composites = [b.composite for b in breakdowns]
    assert composites[0] - composites[1] == pytest.approx(0.55 * 50)
    assert composites[1] - composites[2] == pytest.approx(0.55 * 50)
    assert [b.score for b in breakdowns] == [78.0, 50.0, 23.0]


def test_identical_population_scores_fifty():
    records = [_player(index) for index in range(1, 6)]
    assert {b.score for b in compute_breakdowns(records)} == {50.0}


def test_single_eligible_player_is_neutral():
    records = [_player(1), _player(2, appearances=3)]
    first, second = compute_breakdowns(records)

    assert first.eligible and first.composite == pytest.approx(50.0)
    assert not second.eligible and second.score == 0.0


def test_low_volatility_and_low_blanks_rank_higher():
    records = [
        _player(1, std_dev=2.0, blank_rate=10.0),
        _player(2, std_dev=6.0, blank_rate=40.0),
    ]
    steady, streaky = compute_breakdowns(records)

    assert steady.volatility_component == pytest.approx(100.0)
    assert streaky.volatility_component == pytest.approx(0.0)
    assert steady.blank_component == pytest.approx(100.0)
    assert steady.score > streaky.score


def test_components_are_symmetric_under_reversal():
    records = [_player(i, smoothed=value) for i, value in enumerate([30, 70, 70, 10, 55], start=1)]
    forward = [b.return_component for b in compute_breakdowns(records)]
    flipped = [
        b.return_component
        for b in compute_breakdowns([r.model_copy(update={"return_rate_smoothed": 100 - r.return_rate_smoothed}) for r in records])
    ]
    for a, b in zip(forward, flipped):
        assert a + b == pytest.approx(100.0)


def test_low_sample_players_always_score_zero():
    star = _player(1, smoothed=95, std_dev=0.5, blank_rate=0.0, appearances=5)
    rescored = recompute_scores([star, _player(2), _player(3, smoothed=10)])

    assert rescored[0].consistency_score == 0.0
    assert all(r.consistency_score == 0.0 for r in rescored if r.appearances < 6)


def test_low_sample_players_do_not_shift_eligible_ranks():
    eligible = [_player(1, smoothed=80), _player(2, smoothed=20)]
    with_low_sample = eligible + [_player(3, smoothed=99, appearances=2)]

    assert [b.score for b in compute_breakdowns(eligible)] == [b.score for b in compute_breakdowns(with_low_sample)][:2]


def test_weight_law_reproduces_stored_scores():
    rescored = recompute_scores(sample_pool())
    for record, breakdown in zip(rescored, compute_breakdowns(rescored)):
        if not breakdown.eligible:
            assert record.consistency_score == 0.0
            continue
        blended = (
            0.55 * breakdown.return_component
            + 0.25 * breakdown.volatility_component
            + 0.20 * breakdown.blank_component
        )
        assert abs(record.consistency_score - blended) <= 0.5


def test_recompute_keeps_input_order_and_other_fields():
    pool = sample_pool()
    rescored = recompute_scores(pool)

    assert [r.id for r in rescored] == [r.id for r in pool]
    assert rescored[0].return_rate_smoothed == pool[0].return_rate_smoothed


def test_precision_keeps_decimals():
    records = [_player(1, smoothed=80), _player(2, smoothed=50), _player(3, smoothed=20)]
    assert [b.score for b in compute_breakdowns(records, precision=1)] == pytest.approx([77.5, 50.0, 22.5])


def test_custom_weights_change_the_blend():
    records = [_player(1, smoothed=80, std_dev=6.0), _player(2, smoothed=20, std_dev=1.0)]
    volatility_only = ScoreWeights(returns=0.0, volatility=1.0, blanks=0.0)

    first, second = compute_breakdowns(records, weights=volatility_only)
    assert (first.score, second.score) == (0.0, 100.0)


def test_validate_scores_accepts_recomputed_pool():
    assert validate_scores(recompute_scores(sample_pool())) == []


def test_validate_scores_reports_disagreements(caplog):
    rescored = recompute_scores(sample_pool())
    tampered = [rescored[0].model_copy(update={"consistency_score": rescored[0].consistency_score - 7})] + rescored[1:]
    low_sample_index = next(i for i, r in enumerate(tampered) if r.appearances < 6)
    tampered[low_sample_index] = tampered[low_sample_index].model_copy(update={"consistency_score": 40.0})

    with caplog.at_level("WARNING"):
        mismatches = validate_scores(tampered)

    assert {m.player_id for m in mismatches} == {tampered[0].id, tampered[low_sample_index].id}
    low = next(m for m in mismatches if m.player_id == tampered[low_sample_index].id)
    assert low.expected == 0.0
    assert low.difference == pytest.approx(40.0)
    assert "disagree" in caplog.text


def test_empty_pool_has_no_breakdowns():
    assert compute_breakdowns([]) == []
    assert validate_scores([]) == []


def test_low_sample_score_must_be_exactly_zero():
    rescored = recompute_scores(sample_pool())
    index = next(i for i, r in enumerate(rescored) if r.appearances < 6)
    rescored[index] = rescored[index].model_copy(update={"consistency_score": 0.4})

    mismatches = validate_scores(rescored)

    assert [m.player_id for m in mismatches] == [rescored[index].id]
    assert mismatches[0].expected == 0.0
