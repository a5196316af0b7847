import pytest

from feedback_ledger.api.contract import FeedbackContract
from feedback_ledger.core.context import CallContext
from feedback_ledger.db.database import create_engine_for, create_session_factory, init_db

CREATOR = "SP2J6ZY48GV1EZ5V2V5RB9MP66SW86PYKKNRV9EJ7"
ALICE = "ST1SJ3DTE5DN7X54YDH5D64R3BCB6A2AG2ZQ8YPD5"
BOB = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


@pytest.fixture
def session_factory():
    engine = create_engine_for("sqlite://")
    init_db(engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture
def contract(session_factory):
    return FeedbackContract(session_factory)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


def at(caller, height):
    return CallContext(caller=caller, height=height)


def create_default_event(contract, height=10, **overrides):
    params = dict(
        title="Community Call #12",
        description="Monthly sync with node operators",
        duration=100,
        feedback_types=["rating", "text"],
        min_rating=1,
        max_rating=5,
        requires_auth=False,
        incentive_enabled=False,
    )
    params.update(overrides)
    result = contract.create_event(at(CREATOR, height), **params)
    assert result.ok, result.error
    return result.value
