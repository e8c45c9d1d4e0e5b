# tests/modules/entities/domain/test_entities.py
"""
Tests unitarios para ValidatedEntity y VehicleEntity.
Foco: Transiciones de nivel, protección de invariantes y orden de construcción.
"""

import threading

import pytest

from progression.modules.entities.domain.entities import (
    ValidatedEntity,
    VehicleEntity,
    from_snapshot,
)
from progression.modules.entities.domain.exceptions import ConstructionOrderViolation
from progression.modules.entities.domain.value_objects import (
    REJECTION_NOT_GREATER,
    EntityKind,
    EntitySnapshot,
    LevelCommitted,
    ValidationRejected,
)


# === Fixtures ===
@pytest.fixture
def player():
    return ValidatedEntity.create("P1")


# === Creación y lectura ===


def test_create_should_start_at_level_one(player):
    assert player.level == 1
    assert player.identity == "P1"


def test_empty_identity_should_raise_error():
    with pytest.raises(ValueError):
        ValidatedEntity.create("")


def test_reads_are_idempotent(player):
    assert player.level == player.level
    assert player.identity == player.identity


# === increment() ===


@pytest.mark.parametrize("n", [0, 1, 5, 20])
def test_n_increments_add_n_levels(player, n):
    for _ in range(n):
        player.increment()
    assert player.level == 1 + n


def test_increment_should_notify_new_level(player):
    events = []
    player.subscribe(events.append)

    returned = player.increment()

    assert returned == 2
    assert len(events) == 1
    assert (events[0].identity, events[0].previous, events[0].current) == ("P1", 1, 2)


def test_unsubscribed_listener_is_not_called(player):
    events = []
    player.subscribe(events.append)
    player.unsubscribe(events.append)

    player.increment()

    assert events == []


# === try_set() ===


def test_try_set_greater_value_commits(player):
    outcome = player.try_set(10)

    assert isinstance(outcome, LevelCommitted)
    assert outcome.committed is True
    assert (outcome.previous, outcome.current) == (1, 10)
    assert player.level == 10


@pytest.mark.parametrize("proposed", [1, 0, -3])
def test_try_set_not_greater_value_is_rejected(player, proposed):
    """
    Regla: solo se confirma si el valor propuesto supera al actual.
    El rechazo se devuelve, no se lanza, y el nivel no cambia.
    """
    events = []
    player.subscribe(events.append)

    outcome = player.try_set(proposed)

    assert isinstance(outcome, ValidationRejected)
    assert outcome.committed is False
    assert outcome.reason == REJECTION_NOT_GREATER
    assert outcome.current == 1
    assert player.level == 1
    assert events == []


def test_reference_scenario(player):
    """P1 -> 1; set 2 ok; set 2 rechazado; increment -> 3."""
    assert player.try_set(2).committed
    assert player.level == 2

    assert not player.try_set(2).committed
    assert player.level == 2

    player.increment()
    assert player.level == 3


def test_concurrent_increments_keep_monotonicity(player):
    def work():
        for _ in range(200):
            player.increment()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert player.level == 1 + 800


# === Identidad ===


def test_entities_compare_by_identity_not_level():
    a = ValidatedEntity.create("same")
    b = ValidatedEntity.create("same")
    b.increment()

    assert a == b
    assert hash(a) == hash(b)
    assert a != VehicleEntity.create("same", 4)


# === VehicleEntity ===


def test_vehicle_inherits_level_contract():
    car = VehicleEntity.create("Toyota", door_count=4)

    assert car.level == 1
    car.increment()
    assert car.level == 2
    assert not car.try_set(2).committed
    assert car.try_set(7).committed
    assert car.door_count == 4


def test_vehicle_overrides_activate_only():
    car = VehicleEntity.create("Toyota", door_count=4)
    base = ValidatedEntity.create("Toyota")

    assert car.activate() == "The Toyota vehicle with 4 doors starts with a push button."
    assert base.activate() == "The Toyota's engine starts."
    assert car.describe() == "Vehicle Info: Toyota at level 1 with 4 doors."


def test_vehicle_rejects_invalid_door_count():
    with pytest.raises(ValueError):
        VehicleEntity("Toyota", -1)
    with pytest.raises(ValueError):
        VehicleEntity("Toyota", True)


def test_base_fields_initialized_before_derived_fields():
    """Probe: al verificar la base, la identidad y el nivel ya existen y puertas aún no."""
    seen = {}

    class ProbeVehicle(VehicleEntity):
        def _ensure_base_initialized(self):
            seen["identity"] = self.identity
            seen["level"] = self.level
            seen["has_doors"] = hasattr(self, "_door_count")
            super()._ensure_base_initialized()

    ProbeVehicle("Probe", 3)

    assert seen == {"identity": "Probe", "level": 1, "has_doors": False}


def test_extend_keeps_identity_level_and_listeners():
    base = ValidatedEntity.create("Proto")
    base.try_set(5)
    events = []
    base.subscribe(events.append)

    vehicle = VehicleEntity.extend(base, door_count=2)
    vehicle.increment()

    assert vehicle.identity == "Proto"
    assert vehicle.level == 6
    assert vehicle.door_count == 2
    assert events[-1].current == 6
    assert base.level == 5


def test_extend_uninitialized_base_raises_violation():
    skipped = ValidatedEntity.__new__(ValidatedEntity)

    with pytest.raises(ConstructionOrderViolation):
        VehicleEntity.extend(skipped, door_count=4)


# === Snapshots ===


def test_snapshot_round_trip_preserves_variant():
    car = VehicleEntity.create("Toyota", door_count=4)
    car.try_set(3)

    snapshot = car.snapshot()
    rebuilt = from_snapshot(snapshot)

    assert snapshot == EntitySnapshot("Toyota", 3, EntityKind.VEHICLE, 4)
    assert isinstance(rebuilt, VehicleEntity)
    assert rebuilt.level == 3
    assert rebuilt.door_count == 4
