# src/progression/modules/entities/infrastructure/observability.py
"""
Servicio de Observabilidad SRE: Logs, Latency & Saturation (RAM).

Principios:
1. Logs estructurados en JSON para máquinas (archivo).
2. Logs legibles para humanos (consola, o vertical con LOG_FORMAT=PRETTY).
3. Contexto (correlation_id + entidad objetivo) en cada evento.
"""

import functools
import inspect
import json
import logging
import os
import sys
import time
import uuid
from typing import Any, Callable, Optional

import psutil

logger = logging.getLogger("progression")


def configure_logging(level=logging.INFO, log_file: str = "progression.log"):
    """
    Configura el sistema de logging con doble destino (File + Console).
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )

    # Formateador detallado para archivo (Forensics)
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(logging.DEBUG)  # Siempre capturamos todo en disco

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.getLogger("progression").debug(f"Observabilidad iniciada. Logs en: {log_file}")


Summarizer = Callable[[Any], dict[str, Any]]


class ObservabilityService:
    """
    Eventos JSON por operación: <op>.started / <op>.completed / <op>.failed.
    Cada evento lleva la entidad objetivo y, al completar, el resumen de
    dominio que aporte el caso de uso (niveles antes/después, rechazo...).
    """

    # Si LOG_FORMAT=PRETTY, activamos la vista vertical
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return uuid.uuid4().hex[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            rss = psutil.Process().memory_info().rss
        except psutil.Error:
            return 0.0
        return round(rss / (1024 * 1024), 2)

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (horizontal, o vertical con PRETTY)."""
        entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }
        indent = 4 if ObservabilityService.PRETTY_PRINT else None
        emit = getattr(logger, level.lower(), logger.info)
        emit(json.dumps(entry, indent=indent, default=str))

    @staticmethod
    def measure_latency(
        operation_name: str,
        target_param: str = "identity",
        summarize: Optional[Summarizer] = None,
    ):
        """
        Decorador de casos de uso: latencia, RAM y contexto de dominio.

        Args:
            operation_name: Prefijo de los eventos emitidos.
            target_param: Parámetro de la función que identifica la entidad.
            summarize: Convierte el resultado en campos extra del evento completed.
        """

        def decorator(func: Callable):
            signature = inspect.signature(func)

            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                bound = signature.bind_partial(*args, **kwargs)
                target = bound.arguments.get(target_param, "unknown")
                correlation_id = ObservabilityService.get_correlation_id()
                started_at = time.time()
                start_ram = ObservabilityService._get_ram_usage_mb()

                ObservabilityService.log_event(
                    f"{operation_name}.started",
                    correlation_id,
                    {"target": target, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    ObservabilityService.log_event(
                        f"{operation_name}.failed",
                        correlation_id,
                        {
                            "target": target,
                            "duration_sec": round(time.time() - started_at, 3),
                            "crash_ram_mb": ObservabilityService._get_ram_usage_mb(),
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

                end_ram = ObservabilityService._get_ram_usage_mb()
                payload = {
                    "target": target,
                    "status": "success",
                    "duration_sec": round(time.time() - started_at, 3),
                    "end_ram_mb": end_ram,
                    "ram_delta_mb": round(end_ram - start_ram, 2),
                }
                if summarize is not None:
                    payload.update(summarize(result))
                ObservabilityService.log_event(
                    f"{operation_name}.completed", correlation_id, payload
                )
                return result

            return wrapper

        return decorator
