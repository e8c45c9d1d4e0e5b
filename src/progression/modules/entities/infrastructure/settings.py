# src/progression/modules/entities/infrastructure/settings.py
"""
Configuración leída del entorno.

Capa: Infrastructure
Responsabilidad: Centralizar variables de entorno con valores por defecto.
Los flags de la CLI tienen prioridad sobre estos valores.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_DB_PATH = "./entities.json"
DEFAULT_LOG_FILE = "progression.log"


@dataclass(frozen=True)
class Settings:
    db_path: str = DEFAULT_DB_PATH
    log_level: str = "INFO"
    log_file: str = DEFAULT_LOG_FILE
    pretty_logs: bool = False

    def __post_init__(self):
        if not self.db_path:
            raise ValueError("La ruta de la DB no puede estar vacía.")
        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG,
            logging.INFO,
            logging.WARNING,
            logging.ERROR,
            logging.CRITICAL,
        ):
            raise ValueError(f"Nivel de log desconocido: {self.log_level}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            db_path=os.getenv("PROGRESSION_DB", DEFAULT_DB_PATH),
            log_level=os.getenv("PROGRESSION_LOG_LEVEL", "INFO"),
            log_file=os.getenv("PROGRESSION_LOG_FILE", DEFAULT_LOG_FILE),
            pretty_logs=os.getenv("LOG_FORMAT") == "PRETTY",
        )
