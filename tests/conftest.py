from decimal import Decimal

import pytest

from modules.core.conf import EngineSettings
from modules.core.storage.memory import InMemoryRecordStore
from modules.identity.constants import ActorRole
from modules.identity.dtos import Actor
from modules.sessions.services import ActorSession


@pytest.fixture()
def store():
    """Empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture()
def engine_settings():
    return EngineSettings()


@pytest.fixture()
def customer():
    return Actor(
        id="u1",
        role=ActorRole.CUSTOMER,
        name="Student User",
        phone="9876543210",
        email="student@cbit.ac.in",
        college="CBIT",
    )


@pytest.fixture()
def partner():
    return Actor(id="shop_x", role=ActorRole.PARTNER, email="x@y.com", name="X")


@pytest.fixture()
def print_spec():
    return {
        "fileName": "a.pdf",
        "pages": 12,
        "color": False,
        "copies": 1,
        "binding": "Stapled",
        "totalCost": Decimal("45"),
    }


@pytest.fixture()
def shop():
    return {"shopName": "X", "shopEmail": "x@y.com"}


@pytest.fixture()
def make_session(store, engine_settings):
    """Factory starting an ``ActorSession`` on the shared store."""

    def _make(actor, settings=None, **kwargs):
        return ActorSession(actor, store, settings=settings or engine_settings, **kwargs).start()

    return _make


@pytest.fixture()
def customer_session(make_session, customer):
    return make_session(customer)


@pytest.fixture()
def partner_session(make_session, partner):
    return make_session(partner)
