import pytest

from abc_logistics.config import set_config_for_test
from abc_logistics.data.id_allocator import IdAllocator
from abc_logistics.data.models import InventoryItem
from abc_logistics.data.storage import MemoryKeyValueStorage
from abc_logistics.data.util import get_item_backend


class CountingStorage(MemoryKeyValueStorage):
    """Memory storage that records how often each key is written."""

    def __init__(self, quota_bytes=None):
        super().__init__(quota_bytes)
        self.writes = {}

    def set_item(self, key, value):
        super().set_item(key, value)
        self.writes[key] = self.writes.get(key, 0) + 1


class FailingStorage(MemoryKeyValueStorage):
    """Memory storage whose writes fail once `fail` is switched on."""

    def __init__(self):
        super().__init__()
        self.fail = False

    def set_item(self, key, value):
        if self.fail:
            raise OSError("disk full")
        super().set_item(key, value)


@pytest.fixture(autouse=True)
def test_config(monkeypatch):
    for var in ["LOG_LEVEL", "LOG_SERIALIZE", "STORAGE_BACKEND", "ID_PREFIX", "ITEMS_KEY", "COUNTER_KEY", "LEGACY_KEY", "DATA_DIR"]:
        monkeypatch.delenv(var, raising=False)
    set_config_for_test(log_level="WARNING")
    yield


@pytest.fixture
def storage():
    return CountingStorage()


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture(params=["sqlite", "json"])
def backend_kind(request):
    return request.param


@pytest.fixture
def backend(backend_kind, storage):
    b = get_item_backend(backend_kind, storage)
    b.load()
    return b


@pytest.fixture
def allocator(storage):
    return IdAllocator(storage)


@pytest.fixture
def make_item():
    def _make(item_id="ABC-0001", name="Widget", quantity=1, unit_price=2.5,
              date_added="2025-01-01", category="Supplies", status="In Stock"):
        return InventoryItem.create(item_id, name, category, quantity, unit_price, date_added, status)
    return _make
