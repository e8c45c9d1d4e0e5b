# src/progression/core/value_objects.py
"""
Building blocks universales con validación de invariantes.

Arquitectura: Modular Monolith
Capa: Core
Responsabilidad: Primitivos validados reutilizables en cualquier dominio.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PositiveInt:
    """
    Value Object universal: entero estrictamente positivo (valor > 0).
    Rechaza bool, que en Python es subclase de int.
    """

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Se esperaba un entero, recibido: {self.value!r}")
        if self.value <= 0:
            raise ValueError("Must be positive")

    def exceeds(self, other: PositiveInt) -> bool:
        return self.value > other.value

    def next(self) -> PositiveInt:
        """Sucesor inmediato (valor + 1)."""
        return PositiveInt(self.value + 1)


@dataclass(frozen=True)
class NonEmptyText:
    """Texto con contenido visible. Se conserva tal cual (sin strip)."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"Se esperaba un texto, recibido: {self.value!r}")
        if not self.value.strip():
            raise ValueError("Must not be empty")

    def __str__(self) -> str:
        return self.value
