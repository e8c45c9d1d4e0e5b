# src/progression/modules/entities/domain/exceptions.py
"""
Excepciones del dominio de Entidades.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.

Nota: un `try_set` rechazado NO es una excepción; se devuelve ValidationRejected.
"""


class EntityError(Exception):
    """Clase base para errores en el módulo de entidades."""

    pass


class ConstructionOrderViolation(EntityError):
    """La variante derivada se construyó sin inicializar antes la base."""

    pass


class EntityNotFoundError(EntityError):
    """No existe ninguna entidad registrada con esa identidad."""

    pass


class DuplicateEntityError(EntityError):
    """Ya existe una entidad con la misma identidad."""

    pass


class RepositoryError(EntityError):
    """Fallo del almacenamiento al guardar o reconstruir entidades."""

    pass
