import pytest

from feedback_ledger.core.config import settings
from feedback_ledger.core.exceptions import InvalidFeedbackValue
from feedback_ledger.models.event import Event
from feedback_ledger.services.aggregation_service import AggregationService
from tests.conftest import ALICE, BOB, CREATOR, at, create_default_event

VOTERS = [f"ST{i:039d}" for i in range(6)]


def test_average_is_absent_without_ratings(contract):
    event_id = create_default_event(contract)
    contract.submit_text_feedback(at(ALICE, 20), event_id, "no stars from me", False)

    assert contract.get_average_rating(event_id) is None
    assert contract.get_average_rating(404) is None
    assert contract.get_event_rating_stats(event_id) is None


def test_stats_accumulate_count_sum_and_histogram(contract):
    event_id = create_default_event(contract, min_rating=1, max_rating=5)
    for voter, value in zip(VOTERS, [5, 4, 4, 1, 5, 4]):
        assert contract.submit_rating_feedback(at(voter, 20), event_id, value, False).ok

    stats = contract.get_event_rating_stats(event_id)

    assert stats.total_ratings == 6
    assert stats.rating_sum == 23
    assert stats.rating_distribution == {1: 1, 4: 3, 5: 2}
    assert contract.get_rating_distribution(event_id) == {1: 1, 4: 3, 5: 2}


def test_average_uses_floor_division(contract):
    event_id = create_default_event(contract)
    contract.submit_rating_feedback(at(ALICE, 20), event_id, 4, False)
    assert contract.get_average_rating(event_id) == 4

    contract.submit_rating_feedback(at(BOB, 21), event_id, 1, False)
    assert contract.get_average_rating(event_id) == 2  # 5 // 2


def test_stats_are_kept_per_event(contract):
    first = create_default_event(contract)
    second = create_default_event(contract)
    contract.submit_rating_feedback(at(ALICE, 20), first, 5, False)
    contract.submit_rating_feedback(at(ALICE, 20), second, 1, False)

    assert contract.get_average_rating(first) == 5
    assert contract.get_average_rating(second) == 1


def test_histogram_never_exceeds_bucket_limit(contract, db):
    event_id = create_default_event(contract, min_rating=0, max_rating=9)
    for value in range(10):
        AggregationService.record_rating(db, event_id=event_id, rating_value=value)

    with pytest.raises(InvalidFeedbackValue):
        AggregationService.record_rating(db, event_id=event_id, rating_value=10)

    # Existing buckets still accept values
    stats = AggregationService.record_rating(db, event_id=event_id, rating_value=3)
    assert stats.total_ratings == 11
    assert AggregationService.average(db, event_id=event_id) == 48 // 11


def test_ten_value_range_fills_every_bucket(contract):
    event_id = create_default_event(
        contract, min_rating=0, max_rating=9, feedback_types=["rating"]
    )
    voters = [f"SP{i:039d}" for i in range(10)]
    for value, voter in enumerate(voters):
        assert contract.submit_rating_feedback(at(voter, 20), event_id, value, False).ok

    assert len(contract.get_rating_distribution(event_id)) == 10
    assert contract.get_average_rating(event_id) == 45 // 10


def test_incentive_flag_is_stored_only(contract):
    event_id = create_default_event(contract, incentive_enabled=True)
    contract.submit_rating_feedback(at(ALICE, 20), event_id, 3, False)

    assert contract.get_event(event_id).incentive_enabled is True
    assert contract.get_event_rating_stats(event_id).rating_sum == 3
    assert contract.get_event(event_id).creator == CREATOR


def test_rating_sum_overflow_rolls_back_the_whole_submission(contract):
    top = settings.MAX_UINT
    event_id = create_default_event(contract, min_rating=top - 4, max_rating=top)
    assert contract.submit_rating_feedback(at(ALICE, 20), event_id, top, False).value == 1

    result = contract.submit_rating_feedback(at(BOB, 21), event_id, top - 1, False)

    assert result.error_kind == "InvalidFeedbackValue"
    assert contract.get_event_feedback(event_id) == 1
    assert contract.get_feedback_submission(event_id, 2) is None
    assert contract.has_participant_submitted(event_id, BOB, "rating") is False
    assert contract.get_event_rating_stats(event_id).rating_distribution == {top: 1}


def test_eleventh_distinct_rating_rolls_back_the_whole_submission(contract, db):
    event_id = create_default_event(contract, feedback_types=["rating"])
    # Widen the stored range past the histogram size, bypassing creation checks
    event = db.get(Event, event_id)
    event.max_rating = 20
    db.commit()

    voters = [f"SM{i:039d}" for i in range(11)]
    for value, voter in enumerate(voters[:10], start=1):
        assert contract.submit_rating_feedback(at(voter, 20), event_id, value, False).ok

    result = contract.submit_rating_feedback(at(voters[10], 21), event_id, 11, False)

    assert result.error_kind == "InvalidFeedbackValue"
    assert contract.get_event_feedback(event_id) == 10
    assert contract.has_participant_submitted(event_id, voters[10], "rating") is False
    assert contract.get_feedback_submission(event_id, 11) is None
    stats = contract.get_event_rating_stats(event_id)
    assert (stats.total_ratings, stats.rating_sum) == (10, 55)
    assert 11 not in stats.rating_distribution

    # The counter was rolled back too, so the next accepted rating gets id 11
    assert contract.submit_rating_feedback(at(voters[10], 22), event_id, 3, False).value == 11
