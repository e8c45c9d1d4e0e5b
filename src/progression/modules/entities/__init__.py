"""
Módulo de Entidades (nivel monótono y variantes).
"""

from __future__ import annotations

# Application
from .application.use_cases import EntityRoster

# Domain
from .domain.entities import ValidatedEntity, VehicleEntity, from_snapshot
from .domain.exceptions import (
    ConstructionOrderViolation,
    DuplicateEntityError,
    EntityError,
    EntityNotFoundError,
    RepositoryError,
)
from .domain.ports.repository import EntityRepository
from .domain.value_objects import (
    EntityKind,
    EntitySnapshot,
    LevelChanged,
    LevelCommitted,
    SetOutcome,
    ValidationRejected,
)

# Infrastructure
from .infrastructure.adapters import InMemoryEntityRepository, JsonFileRepository

__all__ = [
    "ValidatedEntity",
    "VehicleEntity",
    "from_snapshot",
    "EntityKind",
    "EntitySnapshot",
    "LevelChanged",
    "LevelCommitted",
    "SetOutcome",
    "ValidationRejected",
    "EntityError",
    "ConstructionOrderViolation",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "RepositoryError",
    "EntityRepository",
    "EntityRoster",
    "InMemoryEntityRepository",
    "JsonFileRepository",
]
