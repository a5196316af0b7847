from tests.conftest import ALICE, BOB, CREATOR, at, create_default_event


def test_submission_ids_are_sequential_per_event(contract):
    first_event = create_default_event(contract, feedback_types=["rating", "reaction", "text"])
    second_event = create_default_event(contract, feedback_types=["text"])

    assert contract.submit_rating_feedback(at(ALICE, 20), first_event, 4, False).value == 1
    assert contract.submit_reaction_feedback(at(ALICE, 20), first_event, "fire", False).value == 2
    assert contract.submit_text_feedback(at(BOB, 21), second_event, "hi", False).value == 1
    assert contract.submit_text_feedback(at(BOB, 21), first_event, "good pace", True).value == 3

    assert contract.get_event_feedback(first_event) == 3
    assert contract.get_event_feedback(second_event) == 1
    assert contract.get_event_feedback(99) == 0


def test_each_submission_carries_only_its_payload(contract):
    event_id = create_default_event(contract, feedback_types=["rating", "reaction", "text"])
    contract.submit_rating_feedback(at(ALICE, 20), event_id, 5, False)
    contract.submit_reaction_feedback(at(ALICE, 21), event_id, "clap", False)
    contract.submit_text_feedback(at(ALICE, 22), event_id, "ok", True)

    rating, reaction, text = contract.list_event_submissions(event_id)

    assert (rating.feedback_type, rating.rating_value, rating.reaction_value, rating.text_value) == ("rating", 5, None, None)
    assert (reaction.feedback_type, reaction.rating_value, reaction.reaction_value, reaction.text_value) == ("reaction", None, "clap", None)
    assert (text.feedback_type, text.rating_value, text.reaction_value, text.text_value) == ("text", None, None, "ok")
    assert rating.submitted_at_height == 20
    assert text.submitted_at_height == 22


def test_anonymous_submission_still_records_submitter(contract):
    event_id = create_default_event(contract)

    submission_id = contract.submit_text_feedback(at(BOB, 20), event_id, "quiet feedback", True).value

    submission = contract.get_feedback_submission(event_id, submission_id)
    assert submission.is_anonymous is True
    assert submission.submitter == BOB


def test_unknown_event(contract):
    result = contract.submit_rating_feedback(at(ALICE, 20), 3, 4, False)
    assert result.error_kind == "EventNotFound"


def test_submission_window_edges(contract):
    event_id = create_default_event(contract, height=10, duration=100, feedback_types=["rating", "text"])

    assert contract.submit_rating_feedback(at(ALICE, 10), event_id, 4, False).ok
    assert contract.submit_rating_feedback(at(BOB, 110), event_id, 4, False).ok
    assert contract.submit_text_feedback(at(ALICE, 111), event_id, "late", False).error_kind == "EventExpired"


def test_closed_event_reports_not_started(contract):
    event_id = create_default_event(contract)
    contract.close_event(at(CREATOR, 15), event_id)

    result = contract.submit_rating_feedback(at(ALICE, 20), event_id, 4, False)

    assert result.error_kind == "EventNotStarted"
    assert result.error.code == 103


def test_closed_and_expired_event_reports_expired(contract):
    event_id = create_default_event(contract, height=10, duration=5)
    contract.close_event(at(CREATOR, 12), event_id)

    assert contract.submit_rating_feedback(at(ALICE, 16), event_id, 4, False).error_kind == "EventExpired"


def test_feedback_type_must_be_enabled(contract):
    event_id = create_default_event(contract, feedback_types=["rating"])

    result = contract.submit_reaction_feedback(at(ALICE, 20), event_id, "wow", False)

    assert result.error_kind == "InvalidFeedbackType"
    assert contract.has_participant_submitted(event_id, ALICE, "reaction") is False


def test_rating_must_be_within_configured_range(contract):
    event_id = create_default_event(contract, min_rating=1, max_rating=5)

    low = contract.submit_rating_feedback(at(ALICE, 20), event_id, 0, False)
    high = contract.submit_rating_feedback(at(ALICE, 20), event_id, 6, False)

    assert low.error_kind == high.error_kind == "InvalidFeedbackValue"
    assert contract.get_event_feedback(event_id) == 0
    assert contract.get_event_rating_stats(event_id) is None
    # Rejections leave no dedup marker behind
    assert contract.submit_rating_feedback(at(ALICE, 21), event_id, 5, False).value == 1


def test_duplicate_check_runs_before_range_check(contract):
    event_id = create_default_event(contract)
    contract.submit_rating_feedback(at(ALICE, 20), event_id, 2, False)

    result = contract.submit_rating_feedback(at(ALICE, 21), event_id, 99, False)

    assert result.error_kind == "DuplicateSubmission"


def test_duplicate_does_not_touch_aggregates(contract):
    event_id = create_default_event(contract)
    contract.submit_rating_feedback(at(ALICE, 20), event_id, 2, False)

    result = contract.submit_rating_feedback(at(ALICE, 21), event_id, 5, True)

    assert result.error_kind == "DuplicateSubmission"
    stats = contract.get_event_rating_stats(event_id)
    assert (stats.total_ratings, stats.rating_sum) == (1, 2)
    assert stats.rating_distribution == {2: 1}
    assert contract.get_event_feedback(event_id) == 1


def test_dedup_is_per_kind_and_per_event(contract):
    first = create_default_event(contract)
    second = create_default_event(contract)

    assert contract.submit_rating_feedback(at(ALICE, 20), first, 3, False).ok
    assert contract.submit_text_feedback(at(ALICE, 20), first, "nice", False).ok
    assert contract.submit_rating_feedback(at(ALICE, 20), second, 3, False).ok

    assert contract.has_participant_submitted(first, ALICE, "rating") is True
    assert contract.has_participant_submitted(first, ALICE, "text") is True
    assert contract.has_participant_submitted(second, ALICE, "text") is False
    assert contract.has_participant_submitted(first, BOB, "rating") is False


def test_oversized_payloads_are_invalid_input(contract):
    event_id = create_default_event(contract, feedback_types=["reaction", "text"])

    reaction = contract.submit_reaction_feedback(at(ALICE, 20), event_id, "r" * 21, False)
    text = contract.submit_text_feedback(at(ALICE, 20), event_id, "t" * 281, False)

    assert reaction.error_kind == text.error_kind == "InvalidInput"
    assert contract.submit_text_feedback(at(ALICE, 20), event_id, "t" * 280, False).ok


def test_pipeline_reports_window_before_authorization(contract):
    event_id = create_default_event(contract, height=10, duration=5, requires_auth=True)

    result = contract.submit_rating_feedback(at(ALICE, 50), event_id, 9, False)

    assert result.error_kind == "EventExpired"


def test_rating_beyond_uint_range_is_invalid_input(contract):
    event_id = create_default_event(contract)

    result = contract.submit_rating_feedback(at(ALICE, 20), event_id, 2**64, False)

    assert result.error_kind == "InvalidInput"
    assert contract.get_event_feedback(event_id) == 0
