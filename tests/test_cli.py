# File: tests/test_cli.py
"""Тесты для CLI (`icon_scout.cli`) с использованием click.testing.CliRunner.
Проверяют команды `lookup`, `config`, `--version`, а также обработку ошибок.
"""
import asyncio
import importlib
import json

import pytest
from click.testing import CliRunner

from icon_scout.cli import cli
from icon_scout.errors import PageFetchError
from icon_scout.models import SiteIcons
from icon_scout.net.models import FailureKind, FetchFailure

cli_module = importlib.import_module("icon_scout.cli")


@pytest.fixture(autouse=True)
def patch_start_lookup(monkeypatch):
    """Патчим start_lookup, чтобы не ходить в сеть."""
    calls = []

    async def fake_lookup(cfg, url):
        calls.append(url)
        return SiteIcons(
            title="Example",
            description="",
            url="https://example.com",
            favicon_url="https://example.com/favicon.ico",
            favicons={"16": "data:image/png;base64,AAAA"},
        )

    monkeypatch.setattr(cli_module, "start_lookup", fake_lookup)
    return calls


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "IconScout" in result.output


def test_show_config(tmp_path):
    cfg_file = tmp_path / "custom.json"
    cfg_file.write_text(json.dumps({"retry_times": 4, "port": 8080}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["retry_times"] == 4
    assert data["port"] == 8080


def test_invalid_config_reports_error(tmp_path):
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text("retry_times: -3\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])

    assert result.exit_code == 1


def test_lookup_stdout(patch_start_lookup):
    result = CliRunner().invoke(cli, ["lookup", "example.com"])
    assert result.exit_code == 0
    output = json.loads(result.output)
    assert output["faviconUrl"] == "https://example.com/favicon.ico"
    assert output["favicons"]["16"].startswith("data:image/png")
    assert patch_start_lookup == ["example.com"]


def test_lookup_json_file(tmp_path):
    out = tmp_path / "out.json"
    result = CliRunner().invoke(cli, ["lookup", "example.com", "--json", str(out)])
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8"))["title"] == "Example"


def test_lookup_html_file(tmp_path):
    out = tmp_path / "report.html"
    result = CliRunner().invoke(cli, ["lookup", "example.com", "--html", str(out)])
    assert result.exit_code == 0
    assert out.exists()


def test_lookup_page_failure(monkeypatch):
    async def failing(cfg, url):
        raise PageFetchError(FetchFailure("https://down.test", FailureKind.STATUS, 1, status=502))

    monkeypatch.setattr(cli_module, "start_lookup", failing)
    result = CliRunner().invoke(cli, ["lookup", "down.test"])
    assert result.exit_code == 1
    assert "502" in result.output


def test_lookup_timeout(monkeypatch):
    async def slow(cfg, url):
        await asyncio.sleep(2)

    monkeypatch.setattr(cli_module, "start_lookup", slow)
    result = CliRunner().invoke(cli, ["lookup", "example.com", "--lookup-timeout", "0.2"])
    assert result.exit_code != 0
    assert "не завершён" in result.output
