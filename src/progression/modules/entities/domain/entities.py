# src/progression/modules/entities/domain/entities.py
"""
Entidades del dominio de Progresión.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Estado mutable con transiciones controladas (nivel monótono)
y su variante derivada (vehículo con puertas).
"""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable

# === Imports del Core ===
from progression.core.value_objects import NonEmptyText, PositiveInt

# === Imports del Mismo Módulo ===
from .exceptions import ConstructionOrderViolation
from .value_objects import (
    EntityKind,
    EntitySnapshot,
    LevelChanged,
    LevelCommitted,
    SetOutcome,
    ValidationRejected,
)

# === Guía de Organización ===
# ✅ IDENTIDAD: Las entidades se comparan por identity, no por nivel.
# ✅ ESTADO: El nivel solo cambia vía increment() o try_set().

LevelListener = Callable[[LevelChanged], None]


class ValidatedEntity:
    """
    Entidad con identidad inmutable y un nivel que nunca decrece.

    Invariantes:
    1. level >= 1 (toda entidad nace en 1)
    2. increment() sube exactamente 1
    3. try_set(v) solo confirma si v > level; si no, el estado no cambia
    """

    kind = EntityKind.BASE

    def __init__(self, identity: str):
        self._identity = NonEmptyText(identity).value
        self._level = PositiveInt(1)
        self._listeners: list[LevelListener] = []
        self._lock = threading.Lock()

    @classmethod
    def create(cls, identity: str) -> ValidatedEntity:
        """Factory method: entidad limpia en nivel 1."""
        return cls(identity)

    # --- Lectura (sin efectos secundarios) ---

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def level(self) -> int:
        return self._level.value

    # --- Mutación controlada ---

    def increment(self) -> int:
        """Sube el nivel en 1 y notifica a los suscriptores. Nunca falla."""
        with self._lock:
            previous = self._level
            self._level = previous.next()
            event = LevelChanged(
                identity=self._identity,
                previous=previous.value,
                current=self._level.value,
                occurred_at=datetime.now(),
            )
        self._notify(event)
        return event.current

    def try_set(self, new_level: int) -> SetOutcome:
        """
        Única vía de asignación directa. Protege contra manipulación externa:
        un valor que no supera al actual se rechaza y se devuelve el motivo.
        """
        with self._lock:
            current = self._level.value
            if not new_level > current:
                return ValidationRejected(current=current, proposed=new_level)
            self._level = PositiveInt(new_level)
            event = LevelChanged(
                identity=self._identity,
                previous=current,
                current=new_level,
                occurred_at=datetime.now(),
            )
        self._notify(event)
        return LevelCommitted(previous=current, current=new_level)

    # --- Comportamiento sustituible por variantes ---

    def activate(self) -> str:
        return f"The {self._identity}'s engine starts."

    # --- Notificaciones ---

    def subscribe(self, listener: LevelListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: LevelListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: LevelChanged) -> None:
        for listener in list(self._listeners):
            listener(event)

    # --- Persistencia ---

    def snapshot(self) -> EntitySnapshot:
        """Devuelve una copia inmutable del estado para persistencia."""
        return EntitySnapshot(identity=self._identity, level=self.level, kind=self.kind)

    def _restore_level(self, level: int) -> None:
        # Solo para reconstrucción desde almacenamiento, nunca para lógica de negocio.
        self._level = PositiveInt(level)

    def _ensure_base_initialized(self) -> None:
        """Comprueba que la fase base de construcción ya se ejecutó."""
        if getattr(self, "_identity", None) is None or getattr(self, "_level", None) is None:
            raise ConstructionOrderViolation(
                f"{type(self).__name__}: la base debe inicializarse antes que los campos derivados."
            )

    # --- Identidad ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self._identity == other._identity  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._identity))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identity={self._identity!r}, level={self.level})"


class VehicleEntity(ValidatedEntity):
    """
    Variante de ValidatedEntity con número de puertas.

    Hereda íntegro el contrato de nivel (increment/try_set) y solo
    sustituye activate(). Orden de construcción: base primero, luego puertas.
    """

    kind = EntityKind.VEHICLE

    def __init__(self, identity: str, door_count: int):
        super().__init__(identity)
        self._ensure_base_initialized()
        if isinstance(door_count, bool) or not isinstance(door_count, int) or door_count < 0:
            raise ValueError(f"Número de puertas inválido: {door_count!r}")
        self._door_count = door_count

    @classmethod
    def create(cls, identity: str, door_count: int = 4) -> VehicleEntity:
        return cls(identity, door_count)

    @classmethod
    def extend(cls, base: ValidatedEntity, door_count: int) -> VehicleEntity:
        """
        Construcción en dos fases: recibe una entidad base ya construida
        y la extiende con los campos derivados, conservando identidad,
        nivel y suscriptores.

        Raises:
            ConstructionOrderViolation: Si la base no completó su inicialización.
        """
        base._ensure_base_initialized()
        vehicle = cls(base.identity, door_count)
        vehicle._restore_level(base.level)
        for listener in getattr(base, "_listeners", []):
            vehicle.subscribe(listener)
        return vehicle

    @property
    def door_count(self) -> int:
        return self._door_count

    def activate(self) -> str:
        return f"The {self.identity} vehicle with {self._door_count} doors starts with a push button."

    def describe(self) -> str:
        return f"Vehicle Info: {self.identity} at level {self.level} with {self._door_count} doors."

    def snapshot(self) -> EntitySnapshot:
        return EntitySnapshot(
            identity=self.identity,
            level=self.level,
            kind=self.kind,
            door_count=self._door_count,
        )


def from_snapshot(snapshot: EntitySnapshot) -> ValidatedEntity:
    """Reconstruye la variante correcta a partir de su DTO."""
    entity: ValidatedEntity
    if snapshot.kind is EntityKind.VEHICLE:
        entity = VehicleEntity(snapshot.identity, snapshot.door_count)  # type: ignore[arg-type]
    else:
        entity = ValidatedEntity(snapshot.identity)
    entity._restore_level(snapshot.level)
    return entity
