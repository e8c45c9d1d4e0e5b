"""📦 core/: Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Primitivos validados reutilizables en CUALQUIER dominio:
     - PositiveInt, NonEmptyText

🚫 ¿Qué NO pertenece aquí?
   • Entidades del dominio (ValidatedEntity, VehicleEntity)
   • Reglas de negocio (monotonía del nivel, orden de construcción)

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/
"""

from .value_objects import NonEmptyText, PositiveInt

__all__ = ["NonEmptyText", "PositiveInt"]
