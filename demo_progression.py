# entity-progression/demo_progression.py
"""
Demo Interactiva: Entidades con nivel monótono.

Arquitectura: Composition Root (Consumer)
Responsabilidad: Cablear dependencias reales y recorrer los escenarios:
encapsulamiento, herencia, polimorfismo, colecciones y JSON.
"""
import json
import sys
from pathlib import Path

# === Configuración de Path para Imports ===
SCRIPT_ROOT = Path(__file__).parent
OUTPUT_DIR = SCRIPT_ROOT / "output"

sys.path.append(str(SCRIPT_ROOT / "src"))

try:
    # === Imports del Proyecto ===
    from progression.modules.entities import (
        EntityRoster,
        JsonFileRepository,
        ValidatedEntity,
        ValidationRejected,
        VehicleEntity,
    )
except ImportError as e:
    print(f"❌ Error de Importación Crítico: {e}")
    print("⚠️  Verifica que hayas instalado el paquete (pip install -e .).")
    sys.exit(1)


def print_header(title: str) -> None:
    print(f"\n{'=' * 60}\n{title}\n{'=' * 60}")


def demo_encapsulation() -> None:
    print_header("1. ENCAPSULAMIENTO: el nivel solo cambia por métodos")
    player = ValidatedEntity.create("KnightRider_99")
    player.subscribe(lambda ev: print(f"   ⬆️  {ev.identity} leveled up to level {ev.current}!"))

    print(f"Identidad: {player.identity} | Nivel: {player.level}")
    player.increment()
    player.increment()

    for proposed in (2, 10):
        outcome = player.try_set(proposed)
        if isinstance(outcome, ValidationRejected):
            print(f"   ❌ try_set({proposed}) rechazado: {outcome.reason}")

    print(f"Estado final -> Nivel: {player.level}")


def demo_inheritance() -> None:
    print_header("2. HERENCIA: la variante conserva el contrato base")
    car = VehicleEntity.create("Toyota", door_count=4)
    print(car.activate())
    print(car.describe())
    car.increment()
    print(f"Tras increment() heredado: nivel {car.level}")

    upgraded = VehicleEntity.extend(ValidatedEntity.create("Prototype"), door_count=2)
    print(f"Construcción en dos fases: {upgraded!r}")


def demo_polymorphism_and_collections(roster: EntityRoster) -> None:
    print_header("3. POLIMORFISMO + COLECCIONES")
    for line in roster.activate_all():
        print(f"   {line}")

    print("\nRanking (lista ordenada, identidad única):")
    for i, snap in enumerate(roster.leaderboard(), 1):
        print(f"   {i}. {snap.identity:<16} nivel {snap.level}")


def demo_json(db_path: Path) -> None:
    print_header("4. JSON: estado persistido")
    print(json.dumps(json.loads(db_path.read_text(encoding="utf-8")), indent=2))


def main() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    db_path = OUTPUT_DIR / "demo_entities.json"
    if db_path.exists():
        db_path.unlink()

    demo_encapsulation()
    demo_inheritance()

    roster = EntityRoster(JsonFileRepository(str(db_path)))
    roster.register("KnightRider_99")
    roster.register("Toyota", door_count=4)
    roster.register("Honda", door_count=2)
    roster.level_up("Toyota")
    roster.try_set_level("KnightRider_99", 5)

    demo_polymorphism_and_collections(roster)
    demo_json(db_path)

    # Limpieza automática de archivos temporales
    db_path.unlink()
    print("\n🧹 Archivos temporales eliminados.")


if __name__ == "__main__":
    main()
