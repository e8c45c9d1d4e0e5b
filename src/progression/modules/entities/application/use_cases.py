# src/progression/modules/entities/application/use_cases.py
"""
Casos de Uso para la gestión de Entidades.

Arquitectura: Modular Monolith
Capa: Application
Responsabilidad: Registrar entidades, aplicar transiciones de nivel y persistirlas.
"""

import logging
from typing import Optional

# === Imports de Dominio ===
from progression.modules.entities.domain.entities import ValidatedEntity, VehicleEntity
from progression.modules.entities.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
)
from progression.modules.entities.domain.ports.repository import EntityRepository
from progression.modules.entities.domain.value_objects import (
    EntitySnapshot,
    LevelChanged,
    SetOutcome,
    ValidationRejected,
)

# ✅ Infraestructura transversal (Observabilidad)
from progression.modules.entities.infrastructure.observability import ObservabilityService

logger = logging.getLogger("progression.app")


# === Resúmenes de dominio para los eventos .completed ===


def _registered_summary(entity: ValidatedEntity) -> dict:
    return {"kind": entity.kind.value, "level_after": entity.level}


def _level_up_summary(new_level: int) -> dict:
    return {"level_before": new_level - 1, "level_after": new_level}


def _set_outcome_summary(outcome: SetOutcome) -> dict:
    if isinstance(outcome, ValidationRejected):
        return {
            "committed": False,
            "level_before": outcome.current,
            "level_after": outcome.current,
            "proposed": outcome.proposed,
            "reason": outcome.reason,
        }
    return {"committed": True, "level_before": outcome.previous, "level_after": outcome.current}


class EntityRoster:
    """
    Caso de Uso Principal: administrar el conjunto de entidades.

    Colaboradores:
    - repository: EntityRepository (Puerto)

    Cada mutación sigue el ciclo cargar -> mutar -> guardar.
    """

    def __init__(self, repository: EntityRepository):
        self.repo = repository

    @ObservabilityService.measure_latency(
        operation_name="register_entity", summarize=_registered_summary
    )
    def register(self, identity: str, door_count: Optional[int] = None) -> ValidatedEntity:
        """
        Crea y persiste una entidad nueva en nivel 1.
        Con door_count se crea la variante VehicleEntity.

        Raises:
            DuplicateEntityError: Si la identidad ya está registrada.
        """
        if self.repo.find_by_identity(identity) is not None:
            raise DuplicateEntityError(f"La entidad ya existe: {identity}")

        entity: ValidatedEntity
        if door_count is None:
            entity = ValidatedEntity.create(identity)
        else:
            entity = VehicleEntity.create(identity, door_count)

        self.repo.save(entity)
        logger.info(f"[NEW] {type(entity).__name__} registrada: {identity}")
        return entity

    def get(self, identity: str) -> ValidatedEntity:
        entity = self.repo.find_by_identity(identity)
        if entity is None:
            raise EntityNotFoundError(f"No existe la entidad: {identity}")
        return entity

    @ObservabilityService.measure_latency(operation_name="level_up", summarize=_level_up_summary)
    def level_up(self, identity: str) -> int:
        entity = self._load_tracked(identity)
        new_level = entity.increment()
        self.repo.save(entity)
        return new_level

    @ObservabilityService.measure_latency(
        operation_name="try_set_level", summarize=_set_outcome_summary
    )
    def try_set_level(self, identity: str, new_level: int) -> SetOutcome:
        """
        Intenta fijar el nivel directamente. Un rechazo no es un error:
        se devuelve ValidationRejected y no se escribe nada.
        """
        entity = self._load_tracked(identity)
        outcome = entity.try_set(new_level)

        if isinstance(outcome, ValidationRejected):
            logger.warning(f"[REJECTED] {identity}: {new_level} -> {outcome.reason}")
        else:
            self.repo.save(entity)
        return outcome

    def activate(self, identity: str) -> str:
        return self.get(identity).activate()

    def activate_all(self) -> list[str]:
        """Despacho polimórfico sobre todas las entidades, en orden de registro."""
        return [entity.activate() for entity in self.repo.list_all()]

    def leaderboard(self) -> list[EntitySnapshot]:
        """Ranking por nivel descendente; empates por identidad."""
        snapshots = [entity.snapshot() for entity in self.repo.list_all()]
        return sorted(snapshots, key=lambda s: (-s.level, s.identity))

    def _load_tracked(self, identity: str) -> ValidatedEntity:
        entity = self.get(identity)
        entity.subscribe(self._on_level_changed)
        return entity

    @staticmethod
    def _on_level_changed(event: LevelChanged) -> None:
        logger.info(f"{event.identity} leveled up to level {event.current}!")
