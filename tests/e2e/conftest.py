# tests/e2e/conftest.py
import pytest

from progression.modules.entities.application.use_cases import EntityRoster
from progression.modules.entities.infrastructure.adapters import JsonFileRepository


@pytest.fixture
def roster_factory(tmp_path):
    """
    Factory de EntityRoster sobre un archivo JSON real.
    Llamarla dos veces con el mismo nombre simula reiniciar el proceso.
    """

    def _create(db_name: str = "e2e_db.json") -> EntityRoster:
        return EntityRoster(JsonFileRepository(str(tmp_path / db_name)))

    return _create
