import itertools
from collections.abc import Callable

import pytest

from toolkicker.core.application.stores import BookingsStore, CartStore, CatalogStore
from toolkicker.core.domain.catalog import Category, NewListing
from toolkicker.infrastructure.configuration.app_settings import AppSettings
from toolkicker.infrastructure.fakes.in_memory_key_value_store import InMemoryKeyValueStore


def sequential_ids(prefix: str) -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def catalog(storage: InMemoryKeyValueStore) -> CatalogStore:
    return CatalogStore(storage, id_factory=sequential_ids("tool"))


@pytest.fixture
def cart(storage: InMemoryKeyValueStore) -> CartStore:
    return CartStore(storage)


@pytest.fixture
def bookings(storage: InMemoryKeyValueStore) -> BookingsStore:
    return BookingsStore(storage, id_factory=sequential_ids("bk"), clock=lambda: 1_700_000_000_000)


@pytest.fixture
def drill() -> NewListing:
    return NewListing(name="Drill", price_per_day=20, category=Category.POWER_TOOLS)


@pytest.fixture
def ladder() -> NewListing:
    return NewListing(name="Ladder", price_per_day=15, category=Category.LADDERS_SCAFFOLDING)


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(runtime_data_dir=tmp_path / "runtime_data", storage_key_prefix="toolkicker")
