# src/progression/modules/entities/domain/value_objects.py
"""
Value Objects para el Bounded Context de Entidades.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Resultados de mutación, notificaciones y DTOs inmutables.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos y validación pura.
# ❌ SIN I/O: Nada de disco ni consola aquí.

REJECTION_NOT_GREATER = "value not greater than current"


class EntityKind(Enum):
    """Variantes conocidas del contrato de entidad."""

    BASE = "base"
    VEHICLE = "vehicle"


@dataclass(frozen=True)
class LevelCommitted:
    """Resultado de un `try_set` aceptado."""

    previous: int
    current: int

    @property
    def committed(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationRejected:
    """
    Resultado de un `try_set` rechazado.
    Se DEVUELVE al llamador (no se lanza): la entidad queda intacta.
    """

    current: int
    proposed: int
    reason: str = REJECTION_NOT_GREATER

    @property
    def committed(self) -> bool:
        return False


SetOutcome = Union[LevelCommitted, ValidationRejected]


@dataclass(frozen=True)
class LevelChanged:
    """Notificación emitida cada vez que el nivel de una entidad sube."""

    identity: str
    previous: int
    current: int
    occurred_at: datetime


@dataclass(frozen=True)
class EntitySnapshot:
    """
    Copia inmutable del estado de una entidad (DTO de persistencia).

    Invariantes:
    1. level >= 1
    2. door_count solo existe para la variante VEHICLE
    """

    identity: str
    level: int
    kind: EntityKind = EntityKind.BASE
    door_count: Optional[int] = None

    def __post_init__(self):
        if self.level < 1:
            raise ValueError(f"El nivel no puede ser menor a 1: {self.level}")
        if self.kind is EntityKind.VEHICLE and self.door_count is None:
            raise ValueError("Una entidad VEHICLE requiere door_count.")
        if self.kind is EntityKind.BASE and self.door_count is not None:
            raise ValueError("Una entidad BASE no admite door_count.")

    def to_dict(self) -> dict:
        data = {"identity": self.identity, "level": self.level, "kind": self.kind.value}
        if self.door_count is not None:
            data["door_count"] = self.door_count
        return data

    @classmethod
    def from_dict(cls, data: dict) -> EntitySnapshot:
        return cls(
            identity=data["identity"],
            level=data["level"],
            kind=EntityKind(data.get("kind", EntityKind.BASE.value)),
            door_count=data.get("door_count"),
        )
