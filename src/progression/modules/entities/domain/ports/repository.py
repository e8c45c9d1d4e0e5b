# src/progression/modules/entities/domain/ports/repository.py
"""
Puerto (Interface) para la persistencia de entidades.

Arquitectura: Modular Monolith
Capa: Domain -> Ports
Responsabilidad: Abstraer el almacenamiento del estado (memoria, JSON).
"""

from abc import ABC, abstractmethod
from typing import Optional

# === Imports de Tipos de Dominio ===
from progression.modules.entities.domain.entities import ValidatedEntity


class EntityRepository(ABC):
    """
    Contrato para guardar y recuperar entidades por su identidad.
    La identidad es clave única: guardar dos veces la misma identidad sobrescribe.
    """

    @abstractmethod
    def save(self, entity: ValidatedEntity) -> None:
        """Persiste el estado actual de la entidad (nivel incluido)."""
        pass

    @abstractmethod
    def find_by_identity(self, identity: str) -> Optional[ValidatedEntity]:
        """Devuelve la entidad o None si no existe."""
        pass

    @abstractmethod
    def list_all(self) -> list[ValidatedEntity]:
        """Todas las entidades en orden de registro."""
        pass
