"""
Tests for stand check-in and check-out.

Run with: python -m pytest tests/test_occupancy.py
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from logic.errors import ConflictError, NotFoundError, ValidationError
from logic.models import ActivityType, Hunter, Stand
from logic.occupancy import OccupancyManager
from logic.repository import Repository
from logic.store import EntitySet


def snapshot(store):
    return {
        entity_set: [item.to_json() for item in store.load(entity_set)]
        for entity_set in EntitySet
    }


def stand(store, stand_id):
    return Repository(store.load(EntitySet.STANDS)).find_by_id(stand_id)


def hunter(store, hunter_id):
    return Repository(store.load(EntitySet.HUNTERS)).find_by_id(hunter_id)


def assert_consistent(store):
    """Occupied stands and checked-in hunters match one to one."""
    stands = store.load(EntitySet.STANDS)
    hunters = store.load(EntitySet.HUNTERS)
    occupied = {(s.hunter, s.id) for s in stands if s.occupied}
    checked_in = {(h.name, h.current_stand) for h in hunters if h.current_stand is not None}
    assert occupied == checked_in
    for s in stands:
        assert s.occupied == (s.hunter is not None)


class TestCheckIn:
    def test_check_in_occupies_stand(self, camp):
        manager = OccupancyManager(camp)
        updated_stand, updated_hunter = manager.check_in(1, 10)

        assert updated_stand.occupied is True
        assert updated_stand.hunter == "Alex"
        assert updated_stand.check_in_time is not None
        assert updated_hunter.current_stand == 10

        assert stand(camp, 10).occupied is True
        assert hunter(camp, 1).current_stand == 10
        assert_consistent(camp)

    def test_check_in_logs_activity(self, camp):
        OccupancyManager(camp).check_in(1, 10)

        activity = camp.load(EntitySet.ACTIVITY)
        assert len(activity) == 1
        assert activity[0].type == ActivityType.CHECKIN
        assert activity[0].hunter == "Alex"
        assert activity[0].stand == "North Ridge"

    def test_check_in_moves_hunter_between_stands(self, camp):
        manager = OccupancyManager(camp)
        manager.check_in(1, 10)
        manager.check_in(1, 11)

        old = stand(camp, 10)
        assert old.occupied is False
        assert old.hunter is None
        assert old.check_in_time is None
        assert stand(camp, 11).hunter == "Alex"
        assert hunter(camp, 1).current_stand == 11
        assert_consistent(camp)

    def test_check_in_to_occupied_stand_conflicts(self, camp):
        manager = OccupancyManager(camp)
        manager.check_in(1, 10)
        before = snapshot(camp)

        with pytest.raises(ConflictError):
            manager.check_in(2, 10)

        assert snapshot(camp) == before

    def test_check_in_again_to_own_stand_conflicts(self, camp):
        manager = OccupancyManager(camp)
        manager.check_in(1, 10)
        before = snapshot(camp)

        with pytest.raises(ConflictError):
            manager.check_in(1, 10)

        assert snapshot(camp) == before
        assert len(camp.load(EntitySet.ACTIVITY)) == 1

    def test_check_in_unknown_stand(self, camp):
        before = snapshot(camp)
        with pytest.raises(NotFoundError):
            OccupancyManager(camp).check_in(1, 999)
        assert snapshot(camp) == before

    def test_check_in_unknown_hunter(self, camp):
        with pytest.raises(NotFoundError):
            OccupancyManager(camp).check_in(999, 10)

    def test_check_in_heals_dangling_previous_stand(self, camp):
        hunters = camp.load(EntitySet.HUNTERS)
        hunters[0].current_stand = 55
        camp.save(EntitySet.HUNTERS, hunters)

        OccupancyManager(camp).check_in(1, 10)

        assert hunter(camp, 1).current_stand == 10
        assert_consistent(camp)

    def test_check_in_clears_half_written_previous_stand(self, camp):
        # hunter points at stand 11 but stand 11 was never marked occupied
        hunters = camp.load(EntitySet.HUNTERS)
        hunters[0].current_stand = 11
        camp.save(EntitySet.HUNTERS, hunters)

        OccupancyManager(camp).check_in(1, 10)

        assert stand(camp, 11).occupied is False
        assert_consistent(camp)

    def test_concurrent_check_ins_cannot_double_book(self, camp):
        camp.save(
            EntitySet.HUNTERS,
            [Hunter(id=i, name=f"Hunter {i}") for i in range(1, 9)],
        )
        manager = OccupancyManager(camp, lock=threading.RLock())

        def attempt(hunter_id):
            try:
                manager.check_in(hunter_id, 10)
                return True
            except ConflictError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(1, 9)))

        assert results.count(True) == 1
        assert len(camp.load(EntitySet.ACTIVITY)) == 1
        assert_consistent(camp)


class TestCheckOut:
    def test_check_out_releases_stand(self, camp):
        manager = OccupancyManager(camp)
        manager.check_in(1, 10)

        released, updated = manager.check_out(1)

        assert released.id == 10
        assert updated.current_stand is None
        assert stand(camp, 10).occupied is False
        assert hunter(camp, 1).current_stand is None
        assert_consistent(camp)

        activity = camp.load(EntitySet.ACTIVITY)
        assert [e.type for e in activity] == [ActivityType.CHECKIN, ActivityType.CHECKOUT]
        assert activity[-1].stand == "North Ridge"

    def test_check_out_not_checked_in(self, camp):
        before = snapshot(camp)
        with pytest.raises(ValidationError):
            OccupancyManager(camp).check_out(2)
        assert snapshot(camp) == before

    def test_double_check_out_rejected_without_drift(self, camp):
        manager = OccupancyManager(camp)
        manager.check_in(1, 10)
        manager.check_out(1)
        before = snapshot(camp)

        for _ in range(2):
            with pytest.raises(ValidationError):
                manager.check_out(1)

        assert snapshot(camp) == before

    def test_check_out_unknown_hunter(self, camp):
        with pytest.raises(ValidationError):
            OccupancyManager(camp).check_out(999)

    def test_check_out_missing_stand_logs_unknown(self, camp):
        hunters = camp.load(EntitySet.HUNTERS)
        hunters[1].current_stand = 77
        camp.save(EntitySet.HUNTERS, hunters)

        released, updated = OccupancyManager(camp).check_out(2)

        assert released is None
        assert updated.current_stand is None
        assert camp.load(EntitySet.ACTIVITY)[-1].stand == "Unknown"


class TestLogEvent:
    def test_log_sighting(self, camp):
        entry = OccupancyManager(camp).log_event(2, "sighting", "doe and two fawns")

        assert entry.type == ActivityType.SIGHTING
        assert entry.hunter == "Sam"
        assert entry.stand is None
        assert camp.load(EntitySet.ACTIVITY) == [entry]

    def test_log_harvest_names_current_stand(self, camp):
        manager = OccupancyManager(camp)
        manager.check_in(2, 12)
        entry = manager.log_event(2, ActivityType.HARVEST, "8 point buck")

        assert entry.stand == "Oak Flat"
        assert entry.id == 2

    def test_log_unknown_hunter(self, camp):
        with pytest.raises(NotFoundError):
            OccupancyManager(camp).log_event(42)
        assert camp.load(EntitySet.ACTIVITY) == []

    def test_log_rejects_occupancy_types(self, camp):
        with pytest.raises(ValidationError):
            OccupancyManager(camp).log_event(1, "checkin")
        with pytest.raises(ValidationError):
            OccupancyManager(camp).log_event(1, "bigfoot")

    def test_log_unknown_type_keeps_cause(self, camp):
        with pytest.raises(ValidationError) as excinfo:
            OccupancyManager(camp).log_event(1, "bigfoot")
        assert isinstance(excinfo.value.__cause__, ValueError)


def test_scenario_check_in_then_repeat_then_check_out(store):
    store.save(EntitySet.HUNTERS, [Hunter(id=1, name="Alex")])
    store.save(EntitySet.STANDS, [Stand(id=10, name="North Ridge")])
    manager = OccupancyManager(store)

    manager.check_in(1, 10)
    assert stand(store, 10).occupied is True
    assert hunter(store, 1).current_stand == 10
    assert [e.type for e in store.load(EntitySet.ACTIVITY)] == [ActivityType.CHECKIN]

    with pytest.raises(ConflictError):
        manager.check_in(1, 10)
    assert len(store.load(EntitySet.ACTIVITY)) == 1

    manager.check_out(1)
    assert stand(store, 10).occupied is False
    assert hunter(store, 1).current_stand is None
    assert [e.type for e in store.load(EntitySet.ACTIVITY)] == [
        ActivityType.CHECKIN,
        ActivityType.CHECKOUT,
    ]
