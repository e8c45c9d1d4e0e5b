# src/progression/modules/entities/infrastructure/adapters.py
"""
Adaptadores de Infraestructura para Entidades.

Arquitectura: Modular Monolith
Capa: Infrastructure (Adapters)
Responsabilidad: Implementar el puerto EntityRepository en memoria y sobre JSON.
"""

import json
import logging
import os
from typing import Any, Optional, cast

from progression.modules.entities.domain.entities import ValidatedEntity, from_snapshot
from progression.modules.entities.domain.exceptions import RepositoryError

# === Imports de Dominio ===
from progression.modules.entities.domain.ports.repository import EntityRepository
from progression.modules.entities.domain.value_objects import EntitySnapshot

logger = logging.getLogger(__name__)


class InMemoryEntityRepository(EntityRepository):
    """
    Repositorio volátil: un dict identidad -> snapshot (clave única,
    orden de inserción). Devuelve copias, nunca la instancia guardada.
    """

    def __init__(self):
        self._snapshots: dict[str, EntitySnapshot] = {}

    def save(self, entity: ValidatedEntity) -> None:
        self._snapshots[entity.identity] = entity.snapshot()
        logger.debug(f"Entidad guardada en memoria: {entity.identity} | Nivel: {entity.level}")

    def find_by_identity(self, identity: str) -> Optional[ValidatedEntity]:
        snapshot = self._snapshots.get(identity)
        if snapshot is None:
            return None
        return from_snapshot(snapshot)

    def list_all(self) -> list[ValidatedEntity]:
        return [from_snapshot(s) for s in self._snapshots.values()]


class JsonFileRepository(EntityRepository):
    """
    Persistencia simple basada en un archivo JSON único:
    {"entities": {identity: {...snapshot...}}}
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._ensure_db_exists()

    def _ensure_db_exists(self):
        if not os.path.exists(self.db_path):
            logger.info(f"Inicializando nueva DB en: {self.db_path}")
            self._save_db({"entities": {}})

    def _load_db(self) -> dict[str, Any]:
        try:
            with open(self.db_path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.error(f"DB corrupta en {self.db_path}, iniciando vacía.")
            return {"entities": {}}

        # JSON válido pero con forma inesperada (lista, null, entities no-dict)
        if not isinstance(data, dict):
            logger.error(f"DB con formato inválido en {self.db_path}, iniciando vacía.")
            return {"entities": {}}
        data.setdefault("entities", {})
        if not isinstance(data["entities"], dict):
            logger.error(f"Sección 'entities' inválida en {self.db_path}, iniciando vacía.")
            data["entities"] = {}
        return cast(dict[str, Any], data)

    def _save_db(self, data: dict[str, Any]):
        # Escritura atómica: archivo temporal + rename
        tmp_path = f"{self.db_path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.db_path)

    def save(self, entity: ValidatedEntity) -> None:
        data = self._load_db()

        # Mapping: Entity -> DTO (Dict)
        data["entities"][entity.identity] = entity.snapshot().to_dict()
        self._save_db(data)
        logger.debug(f"Entidad guardada: {entity.identity} | Nivel: {entity.level}")

    def find_by_identity(self, identity: str) -> Optional[ValidatedEntity]:
        data = self._load_db()
        entity_data = data["entities"].get(identity)

        if not entity_data:
            return None

        return self._rebuild(entity_data)

    def list_all(self) -> list[ValidatedEntity]:
        data = self._load_db()
        return [self._rebuild(item) for item in data["entities"].values()]

    def _rebuild(self, entity_data: dict[str, Any]) -> ValidatedEntity:
        # Mapping: DTO -> Entity
        try:
            return from_snapshot(EntitySnapshot.from_dict(entity_data))
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error reconstruyendo entidad desde DB: {e}", exc_info=True)
            raise RepositoryError(f"Registro inválido en {self.db_path}: {entity_data!r}") from e
