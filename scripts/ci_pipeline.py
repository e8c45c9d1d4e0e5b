#!/usr/bin/env python3
"""
Pipeline de CI Local para entity-progression.
Ejecuta linting, chequeo de tipos del dominio y las suites de tests por capa.

Uso: python scripts/ci_pipeline.py
"""

import subprocess
import sys
import time
from datetime import datetime


# Colores para la terminal
class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


STEPS = [
    # (título, comando, descripción, bloqueante)
    ("1. LINTING", "ruff check src/ tests/", "Estilo y errores comunes", False),
    (
        "2. TIPOS DEL DOMINIO",
        "mypy src/progression/core src/progression/modules/entities/domain",
        "Contratos estrictos en Core y Domain",
        True,
    ),
    (
        "3. TESTS UNITARIOS (CORE, DOMAIN & APP)",
        "pytest tests/core tests/modules/entities/domain tests/modules/entities/application -v",
        "Lógica pura de negocio",
        True,
    ),
    (
        "4. TESTS INFRAESTRUCTURA, CLI & E2E",
        "pytest tests/modules/entities/infrastructure tests/modules/entities/entry_points tests/e2e -v",
        "Persistencia JSON real y ciclos completos",
        True,
    ),
]


def run_command(command: str, description: str) -> bool:
    print(f"⏳ {description}...")
    start = time.time()
    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    duration = time.time() - start

    if result.returncode == 0:
        print(f"{Colors.OKGREEN}✅ PASÓ ({duration:.2f}s){Colors.ENDC}")
        return True

    print(f"{Colors.FAIL}❌ FALLÓ ({duration:.2f}s){Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDERR ---\n{result.stderr}{Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDOUT ---\n{result.stdout}{Colors.ENDC}")
    return False


def main():
    start_total = time.time()
    print(f"{Colors.BOLD}🚀 INICIANDO PIPELINE CI - ENTITY PROGRESSION{Colors.ENDC}")
    print(f"📅 Fecha: {datetime.now()}")

    for title, command, description, blocking in STEPS:
        print(f"\n{Colors.HEADER}=== EJECUTANDO: {title} ==={Colors.ENDC}")
        if run_command(command, description):
            continue
        if blocking:
            sys.exit(1)
        print(f"{Colors.WARNING}⚠️  Advertencias detectadas (No bloqueante){Colors.ENDC}")

    total_duration = time.time() - start_total
    print(f"\n{Colors.OKGREEN}{'=' * 50}{Colors.ENDC}")
    print(f"{Colors.OKGREEN}🎉  BUILD SUCCESSFUL{Colors.ENDC}")
    print(f"⏱️ Tiempo Total: {total_duration:.2f}s")


if __name__ == "__main__":
    main()
