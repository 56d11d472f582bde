"""Tests for the artscope CLI."""

import json

import pytest

import artscope.cli as cli_mod
from artscope.cli import main
from artscope.resources.models import Artwork


@pytest.fixture(autouse=True)
def no_log_handler(monkeypatch):
    """Keep the CLI from attaching a handler bound to pytest's captured stderr."""
    monkeypatch.setattr(cli_mod, "configure_logging", lambda level: None)


def test_query_url_command(capsys):
    assert main(["query-url", "artwork", "1", "2", "--all-fields"]) == 0

    assert capsys.readouterr().out.strip() == "https://api.artic.edu/api/v1/artworks?ids=1,2"


def test_query_url_search_kind(capsys):
    assert main(["query-url", "featured_exhibits", "5"]) == 0

    out = capsys.readouterr().out.strip()
    assert out == "https://api.artic.edu/api/v1/exhibitions/search?query[term][is_featured]=true&page=1&limit=5"


def test_image_url_command(capsys):
    exit_code = main([
        "image-url", "https://www.artic.edu/iiif/2", "abc",
        "--height", "400", "--region", "10", "10", "80", "80", "--rotation", "90", "--mirrored",
    ])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "https://www.artic.edu/iiif/2/abc/pct:10,10,80,80/,400/!/90/default.jpg"


def test_range_violation_returns_error_code(capsys):
    assert main(["image-url", "https://www.artic.edu/iiif/2", "abc"]) == 1

    assert "Error:" in capsys.readouterr().err


def test_search_kind_with_two_values_returns_error_code(capsys):
    assert main(["query-url", "random_artist", "1", "2"]) == 1


def test_artworks_command_renders_json(capsys, monkeypatch):
    async def fake_artworks_by_ids(assembler, ids):
        assert ids == ["27992"]
        return [Artwork(id=27992, title="A Sunday on La Grande Jatte", image_url="https://img/1.jpg")]

    monkeypatch.setattr(cli_mod, "artworks_by_ids", fake_artworks_by_ids)

    assert main(["artworks", "27992", "--format", "json"]) == 0

    cards = json.loads(capsys.readouterr().out)
    assert cards[0]["title"] == "A Sunday on La Grande Jatte"
    assert cards[0]["artwork_only"] is True


def test_featured_command_renders_markdown(capsys, monkeypatch):
    async def fake_featured(assembler, limit=None):
        assert limit == 2
        return []

    monkeypatch.setattr(cli_mod, "featured_exhibitions", fake_featured)

    assert main(["featured", "--limit", "2"]) == 0

    assert "# Featured Exhibitions" in capsys.readouterr().out


def test_missing_subcommand_exits():
    with pytest.raises(SystemExit):
        main([])


def test_invalid_config_values_return_error_code(tmp_path, capsys):
    path = tmp_path / "artscope.yaml"
    path.write_text("version: 1\nhydration:\n  max_concurrency: 0\n")

    assert main(["--config", str(path), "query-url", "artwork", "1"]) == 1

    err = capsys.readouterr().err
    assert "Error:" in err
    assert "Traceback" not in err


def test_malformed_config_yaml_returns_error_code(tmp_path, capsys):
    path = tmp_path / "artscope.yaml"
    path.write_text("version: 1\napi: [unclosed\n")

    assert main(["--config", str(path), "query-url", "artwork", "1"]) == 1

    assert "not valid YAML" in capsys.readouterr().err


def test_missing_config_file_returns_error_code(tmp_path, capsys):
    missing = tmp_path / "nope.yaml"

    assert main(["--config", str(missing), "query-url", "artwork", "1"]) == 1

    assert "Config file not found" in capsys.readouterr().err
