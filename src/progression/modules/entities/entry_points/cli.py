# src/progression/modules/entities/entry_points/cli.py
"""
Interfaz de Línea de Comandos (CLI) para el Módulo de Entidades.

Arquitectura: Interface Adapter
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Instanciar el Composition Root.
    3. Traducir excepciones de dominio a códigos de salida.
"""

import argparse
import json
import logging
import sys
from typing import Optional

from progression.modules.entities.application.use_cases import EntityRoster
from progression.modules.entities.domain.entities import VehicleEntity
from progression.modules.entities.domain.exceptions import (
    DuplicateEntityError,
    EntityError,
    EntityNotFoundError,
    RepositoryError,
)
from progression.modules.entities.domain.value_objects import ValidationRejected
from progression.modules.entities.infrastructure.adapters import (
    InMemoryEntityRepository,
    JsonFileRepository,
)
from progression.modules.entities.infrastructure.observability import (
    ObservabilityService,
    configure_logging,
)
from progression.modules.entities.infrastructure.settings import Settings

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_REJECTED = 2
EXIT_UNEXPECTED = 3
EXIT_INTERRUPTED = 130


def setup_parser(settings: Settings) -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="progression",
        description="Registro de entidades con nivel monótono",
        epilog="Ejemplo: progression register KnightRider_99 && progression level-up KnightRider_99",
    )
    parser.add_argument(
        "--db", default=settings.db_path, help="Ruta al archivo JSON de estado"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Muestra logs detallados"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    register = sub.add_parser("register", help="Registrar una entidad nueva (nivel 1)")
    register.add_argument("identity")
    register.add_argument(
        "--doors", type=int, default=None, help="Crea la variante vehículo con N puertas"
    )

    level_up = sub.add_parser("level-up", help="Subir un nivel")
    level_up.add_argument("identity")

    set_level = sub.add_parser("set-level", help="Fijar el nivel (solo si es mayor)")
    set_level.add_argument("identity")
    set_level.add_argument("level", type=int)

    activate = sub.add_parser("activate", help="Ejecutar el comportamiento activate()")
    activate.add_argument("identity")

    show = sub.add_parser("show", help="Mostrar el estado de una entidad")
    show.add_argument("identity")
    show.add_argument("--json", action="store_true", help="Salida en formato JSON")

    sub.add_parser("list", help="Ranking de entidades por nivel")
    sub.add_parser("demo", help="Escenario de ejemplo en memoria (no toca la DB)")

    return parser


def run_demo() -> None:
    """Escenario de referencia: P1 -> 1, set 2 ok, set 2 rechazado, increment -> 3."""
    roster = EntityRoster(InMemoryEntityRepository())

    entity = roster.register("P1")
    print(f"Creada {entity.identity} en nivel {entity.level}")

    for proposed in (2, 2):
        outcome = roster.try_set_level("P1", proposed)
        if isinstance(outcome, ValidationRejected):
            print(f"set-level {proposed}: rechazado ({outcome.reason}), nivel {outcome.current}")
        else:
            print(f"set-level {proposed}: aceptado, nivel {outcome.current}")

    print(f"level-up: nivel {roster.level_up('P1')}")

    roster.register("Toyota", door_count=4)
    for line in roster.activate_all():
        print(line)


def dispatch(args: argparse.Namespace) -> int:
    if args.command == "demo":
        run_demo()
        return EXIT_OK

    # Composition Root (Wiring)
    roster = EntityRoster(JsonFileRepository(args.db))

    if args.command == "register":
        entity = roster.register(args.identity, door_count=args.doors)
        print(f"✅ {type(entity).__name__} '{entity.identity}' registrada en nivel {entity.level}")

    elif args.command == "level-up":
        print(f"⬆️  {args.identity} leveled up to level {roster.level_up(args.identity)}!")

    elif args.command == "set-level":
        outcome = roster.try_set_level(args.identity, args.level)
        if isinstance(outcome, ValidationRejected):
            print(
                f"❌ Rechazado: {outcome.reason} (actual {outcome.current}, propuesto {outcome.proposed})",
                file=sys.stderr,
            )
            return EXIT_REJECTED
        print(f"✅ Nivel fijado: {outcome.previous} -> {outcome.current}")

    elif args.command == "activate":
        print(roster.activate(args.identity))

    elif args.command == "show":
        entity = roster.get(args.identity)
        if args.json:
            print(json.dumps(entity.snapshot().to_dict(), indent=2))
        elif isinstance(entity, VehicleEntity):
            print(entity.describe())
        else:
            print(f"{entity.identity} | nivel {entity.level}")

    elif args.command == "list":
        board = roster.leaderboard()
        if not board:
            print("✨ No hay entidades registradas.")
        else:
            print(f"{'#':<4} | {'NIVEL':<6} | {'TIPO':<8} | {'IDENTIDAD'}")
            print("-" * 50)
            for i, snap in enumerate(board, 1):
                print(f"{i:<4} | {snap.level:<6} | {snap.kind.value:<8} | {snap.identity}")

    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    # 1. Configuración (entorno) antes de construir el parser
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"❌ Configuración inválida: {e}", file=sys.stderr)
        return EXIT_REJECTED

    parser = setup_parser(settings)
    args = parser.parse_args(argv)

    try:
        level = logging.DEBUG if args.verbose else settings.log_level_value
        configure_logging(level=level, log_file=settings.log_file)
        ObservabilityService.PRETTY_PRINT = settings.pretty_logs

        return dispatch(args)
    except OSError as e:
        print(f"❌ Error de E/S: {e}", file=sys.stderr)
        return EXIT_UNEXPECTED
    except (EntityNotFoundError, DuplicateEntityError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except RepositoryError as e:
        print(f"❌ Error de almacenamiento: {e}", file=sys.stderr)
        return EXIT_UNEXPECTED
    except (EntityError, ValueError, TypeError) as e:
        print(f"❌ Error de validación: {e}", file=sys.stderr)
        return EXIT_REJECTED
    except KeyboardInterrupt:
        print("\n⚠️  Operación cancelada por el usuario.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        print(f"❌ Error Crítico: {e}", file=sys.stderr)
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
