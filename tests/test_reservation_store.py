from __future__ import annotations

from app.domain.entities.conversation_state import ChoosingAction, ConversationState, Idle
from app.domain.entities.reservation import ReservationStatus
from app.infrastructure.store.memory_store import MemoryConversationStore, MemoryReservationStore
from tests.support import TickingClock


def _store() -> MemoryReservationStore:
    return MemoryReservationStore(clock=TickingClock())


def test_create_then_get_is_confirmed_with_equal_timestamps():
    store = _store()
    created = store.create(name="Alex", date="2099-01-01", time="18:30", guests=4)

    fetched = store.get(created.id)

    assert fetched == created
    assert fetched.status == ReservationStatus.CONFIRMED
    assert fetched.created_at == fetched.updated_at
    assert (fetched.name, fetched.date, fetched.time, fetched.guests) == ("Alex", "2099-01-01", "18:30", 4)


def test_ids_are_unique():
    store = _store()
    ids = {store.create(name=f"Guest {i}", date="2099-01-01", time="18:30", guests=2).id for i in range(50)}
    assert len(ids) == 50
    assert all(i.startswith("res_") for i in ids)


def test_get_unknown_is_none():
    assert _store().get("res_missing") is None


def test_update_merges_given_fields_and_refreshes_updated_at():
    store = _store()
    created = store.create(name="Alex", date="2099-01-01", time="18:30", guests=4)

    updated = store.update(created.id, guests=6)

    assert updated.guests == 6
    assert updated.name == "Alex"
    assert updated.date == "2099-01-01"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at
    assert store.get(created.id) == updated


def test_update_unknown_id_returns_none():
    store = _store()
    assert store.update("res_missing", name="Sam") is None
    assert store.update("res_missing") is None
    assert store.list() == []


def test_cancel_sets_cancelled_regardless_of_prior_status():
    store = _store()
    created = store.create(name="Alex", date="2099-01-01", time="18:30", guests=4)

    first = store.cancel(created.id)
    second = store.cancel(created.id)

    assert first.status == ReservationStatus.CANCELLED
    assert second.status == ReservationStatus.CANCELLED
    assert second.updated_at > first.updated_at


def test_cancel_after_reconfirm_is_cancelled():
    store = _store()
    created = store.create(name="Alex", date="2099-01-01", time="18:30", guests=4)
    store.cancel(created.id)
    store.update(created.id, status=ReservationStatus.CONFIRMED)

    assert store.cancel(created.id).status == ReservationStatus.CANCELLED


def test_cancel_unknown_id_returns_none():
    assert _store().cancel("res_missing") is None


def test_list_keeps_creation_order_and_cancelled_records():
    store = _store()
    a = store.create(name="A", date="2099-01-01", time="18:30", guests=2)
    b = store.create(name="B", date="2099-01-02", time="19:30", guests=3)
    store.cancel(a.id)

    listed = store.list()

    assert [r.id for r in listed] == [a.id, b.id]
    assert listed[0].status == ReservationStatus.CANCELLED


def test_returned_records_are_snapshots():
    store = _store()
    created = store.create(name="Alex", date="2099-01-01", time="18:30", guests=4)
    store.update(created.id, name="Sam")

    assert created.name == "Alex"
    assert store.get(created.id).name == "Sam"


def test_conversation_store_defaults_to_idle():
    store = MemoryConversationStore()

    assert isinstance(store.get_state("new").step, Idle)
    assert store.has_conversation("new") is False

    store.set_state("new", ConversationState(step=ChoosingAction()))
    assert store.has_conversation("new") is True
    assert isinstance(store.get_state("new").step, ChoosingAction)
