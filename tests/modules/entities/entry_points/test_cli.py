# tests/modules/entities/entry_points/test_cli.py
"""
Tests de la CLI: códigos de salida y salida visible.
configure_logging se sustituye para no tocar los handlers globales.
"""

import json
from unittest.mock import patch

import pytest

from progression.modules.entities.entry_points import cli


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch.object(cli, "configure_logging"):
        yield


@pytest.fixture
def db(tmp_path):
    return str(tmp_path / "cli_db.json")


def run(db, *argv):
    return cli.main(["--db", db, *argv])


def test_register_and_show_json(db, capsys):
    assert run(db, "register", "P1") == cli.EXIT_OK
    capsys.readouterr()

    assert run(db, "show", "P1", "--json") == cli.EXIT_OK
    out = json.loads(capsys.readouterr().out)
    assert out == {"identity": "P1", "level": 1, "kind": "base"}


def test_set_level_rejection_exit_code(db, capsys):
    run(db, "register", "P1")
    assert run(db, "set-level", "P1", "3") == cli.EXIT_OK

    assert run(db, "set-level", "P1", "3") == cli.EXIT_REJECTED
    assert "value not greater than current" in capsys.readouterr().err


def test_level_up_and_activate_vehicle(db, capsys):
    run(db, "register", "Toyota", "--doors", "4")
    assert run(db, "level-up", "Toyota") == cli.EXIT_OK
    assert run(db, "activate", "Toyota") == cli.EXIT_OK
    assert run(db, "show", "Toyota") == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "Toyota leveled up to level 2!" in out
    assert "starts with a push button" in out
    assert "Vehicle Info: Toyota at level 2 with 4 doors." in out


def test_unknown_and_duplicate_identity(db, capsys):
    assert run(db, "level-up", "ghost") == cli.EXIT_NOT_FOUND

    run(db, "register", "P1")
    assert run(db, "register", "P1") == cli.EXIT_NOT_FOUND


def test_invalid_identity_is_validation_error(db):
    assert run(db, "register", " ") == cli.EXIT_REJECTED


def test_list_empty_and_ranked(db, capsys):
    assert run(db, "list") == cli.EXIT_OK
    assert "No hay entidades" in capsys.readouterr().out

    run(db, "register", "a")
    run(db, "register", "b")
    run(db, "set-level", "b", "9")
    capsys.readouterr()

    run(db, "list")
    lines = capsys.readouterr().out.splitlines()
    assert lines[2].split("|")[-1].strip() == "b"


def test_demo_runs_reference_scenario(db, capsys):
    assert run(db, "demo") == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "set-level 2: aceptado, nivel 2" in out
    assert "set-level 2: rechazado (value not greater than current), nivel 2" in out
    assert "level-up: nivel 3" in out


def test_invalid_env_log_level_returns_exit_code(db, monkeypatch, capsys):
    monkeypatch.setenv("PROGRESSION_LOG_LEVEL", "LOUD")

    assert run(db, "list") == cli.EXIT_REJECTED
    assert "Configuración inválida" in capsys.readouterr().err


def test_unwritable_log_file_returns_exit_code(db, capsys):
    with patch.object(cli, "configure_logging", side_effect=PermissionError("denied")):
        assert run(db, "list") == cli.EXIT_UNEXPECTED
    assert "denied" in capsys.readouterr().err
