"""CLI — seed a file database, print the reports, fail cleanly on bad input."""

import pytest

from warehouse.cli import build_parser, main


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'warehouse.db'}"


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_init_db_then_empty_report(database_url, capsys):
    assert main(["--database-url", database_url, "init-db"]) == 0
    assert main(["--database-url", database_url, "report"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Pallets grouped by expiration date (ascending weight within a group):",
        "",
        "Pallets holding the longest-lasting boxes (ascending volume):",
    ]


def test_seed_and_report(database_url, capsys):
    assert main(["--database-url", database_url, "seed"]) == 0
    assert main(["--database-url", database_url, "report"]) == 0
    out = capsys.readouterr().out

    assert out.count("Expires on:") == 10
    assert "Expires on: 2023-12-05" in out
    assert "weight: 31.2 kg, volume: 2.127 m^3" in out
    shelf_life = out.split("Pallets holding the longest-lasting boxes")[1].splitlines()[1:]
    assert len(shelf_life) == 3
    assert shelf_life[0].endswith("volume: 1.343 m^3, expires on: 2024-03-29")


def test_seed_twice_replaces_data(database_url, capsys):
    main(["--database-url", database_url, "seed"])
    main(["--database-url", database_url, "seed"])
    main(["--database-url", database_url, "report", "--top", "12"])
    out = capsys.readouterr().out
    shelf_life = out.split("Pallets holding the longest-lasting boxes")[1].splitlines()[1:]
    assert len(shelf_life) == 12


def test_negative_top_fails(database_url):
    assert main(["--database-url", database_url, "report", "--top", "-1"]) == 1
