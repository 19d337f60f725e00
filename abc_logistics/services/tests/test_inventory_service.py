import json

import pytest

from abc_logistics.config import get_config, set_config_for_test
from abc_logistics.data.id_allocator import IdAllocator
from abc_logistics.data.util import get_item_backend
from abc_logistics.services.inventory_service import InventoryService, build_inventory_service
from abc_logistics.services.views import compute_kpis


@pytest.fixture
def service(backend_kind, storage):
    svc = InventoryService(storage, get_item_backend(backend_kind, storage), IdAllocator(storage))
    svc.start()
    return svc


def test_start_seeds_and_reports_no_merges(service):
    assert service.merged_duplicates == []
    assert compute_kpis(service.items()).total_items == 5


def test_use_before_start_is_an_error(storage):
    svc = InventoryService(storage, get_item_backend("json", storage))
    with pytest.raises(RuntimeError):
        svc.items()


def test_add_item_allocates_next_id_and_persists(service, storage, backend_kind):
    result = service.add_item("Pallet Jack", "Equipment", "2", "350.25", "In Stock", today="2026-03-01")
    assert result.ok
    assert result.item.id == "ABC-0006"
    assert result.item.total_value == 2 * 350.25
    assert result.message == 'Item "Pallet Jack" (ABC-0006) added successfully.'
    assert storage.get_item("abcLogisticsNextId") == "7"

    reloaded = get_item_backend(backend_kind, storage)
    reloaded.load()
    assert reloaded.find_by_name("pallet jack").id == "ABC-0006"


def test_add_item_defaults_date_to_today(service):
    result = service.add_item("Tape", "Supplies", "1", "1")
    assert len(result.item.date_added) == 10


def test_duplicate_name_rejected_case_insensitively(service, storage):
    result = service.add_item("safety helmets", "Supplies", "1", "1")
    assert not result.ok
    assert result.errors == {
        "name": '"Safety Helmets" already exists (ABC-0005). Item names must be unique.',
    }
    # no id consumed, nothing inserted
    assert storage.get_item("abcLogisticsNextId") == "6"
    assert len(service.items()) == 5


def test_validation_errors_block_insert(service, storage):
    result = service.add_item("", "Supplies", "x", "-1")
    assert not result.ok
    assert set(result.errors) == {"name", "quantity", "unit_price"}
    assert storage.get_item("abcLogisticsNextId") == "6"


def test_ids_never_reused_after_delete(service):
    first = service.add_item("Tape", "Supplies", "1", "1").item
    assert service.delete_item(first.id)
    second = service.add_item("Tape", "Supplies", "1", "1").item
    assert second.id == "ABC-0007"


def test_delete_unknown_id(service):
    before = service.items()
    assert service.delete_item("ABC-9999") is False
    assert service.items() == before


def test_start_merges_duplicates_left_in_storage(backend_kind, storage):
    legacy = [
        {"id": "ABC-0001", "name": "Widget", "category": "Supplies", "quantity": 3,
         "unitPrice": 2, "dateAdded": "2025-01-01", "status": "In Stock"},
        {"id": "ABC-0002", "name": "widget", "category": "Supplies", "quantity": 5,
         "unitPrice": 4, "dateAdded": "2025-02-01", "status": "In Stock"},
        {"id": "ABC-0003", "name": "WIDGET", "category": "Supplies", "quantity": 2,
         "unitPrice": 6, "dateAdded": "2025-01-15", "status": "In Stock"},
    ]
    storage.set_item("abcLogisticsInventory", json.dumps(legacy))
    svc = InventoryService(storage, get_item_backend(backend_kind, storage), IdAllocator(storage))
    summaries = svc.start()

    assert [s.model_dump() for s in summaries] == [{"name": "Widget", "count": 3, "merged_quantity": 10}]
    (item,) = svc.items()
    assert (item.id, item.quantity, item.total_value) == ("ABC-0001", 10, 20)

    again = InventoryService(storage, get_item_backend(backend_kind, storage), IdAllocator(storage))
    assert again.start() == []


def test_configured_categories_are_enforced(storage):
    svc = InventoryService(storage, get_item_backend("json", storage), categories=["Equipment"])
    svc.start()
    assert svc.add_item("Crate", "Supplies", "1", "1").errors == {"category": "Please select a category."}


def test_build_from_config(tmp_path, backend_kind):
    set_config_for_test(log_level="WARNING", data_dir=str(tmp_path), storage_backend=backend_kind, id_prefix="WH")
    svc = build_inventory_service(get_config())
    svc.start()
    assert svc.add_item("Crate", "Supplies", "1", "1").item.id == "WH-0006"
    assert (tmp_path / "abcLogisticsDB.txt").exists()
    assert (tmp_path / "abcLogisticsNextId.txt").read_text() == "7"


def test_adds_get_distinct_ids_when_storage_stops_accepting_writes(backend_kind, failing_storage):
    svc = InventoryService(failing_storage, get_item_backend(backend_kind, failing_storage), IdAllocator(failing_storage))
    svc.start()
    failing_storage.fail = True

    rope = svc.add_item("Rope", "Supplies", "1", "1")
    chain = svc.add_item("Chain", "Supplies", "1", "1")
    assert rope.ok and chain.ok
    assert (rope.item.id, chain.item.id) == ("ABC-0006", "ABC-0007")
    assert len(svc.items()) == 7
    assert svc.delete_item(rope.item.id)
    assert [i.id for i in svc.items() if i.name == "Chain"] == ["ABC-0007"]
