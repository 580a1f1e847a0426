from __future__ import annotations

import pytest
from typer.testing import CliRunner

from cities_service import cli
from cities_service.db.nosql.settings import MongoSettings
from cities_service.db.settings import DBSettings

runner = CliRunner()


def test_serve_runs_uvicorn_with_factory(monkeypatch):
    calls = {}
    monkeypatch.setattr(cli, "setup_logging", lambda **_: None)
    monkeypatch.setattr(cli.uvicorn, "run", lambda target, **kw: calls.update(target=target, **kw))

    result = runner.invoke(cli.app, ["serve", "--port", "8081"])

    assert result.exit_code == 0, result.output
    assert calls["target"] == "cities_service.api.fastapi:create_app"
    assert calls["factory"] is True
    assert calls["port"] == 8081
    assert calls["log_config"] is None


def test_ping_reports_each_store(monkeypatch):
    async def _fake(*_a, **_kw):
        return {"mongo": None, "mssql": "Login failed"}

    monkeypatch.setattr(cli, "setup_logging", lambda **_: None)
    monkeypatch.setattr(cli, "_ping_stores", _fake)

    result = runner.invoke(cli.app, ["ping"])

    assert result.exit_code == 1
    assert "mongo: ok" in result.output
    assert "mssql: Login failed" in result.output


def test_ping_all_ok(monkeypatch):
    async def _fake(*_a, **_kw):
        return {"mongo": None, "mssql": None}

    monkeypatch.setattr(cli, "setup_logging", lambda **_: None)
    monkeypatch.setattr(cli, "_ping_stores", _fake)

    assert runner.invoke(cli.app, ["ping"]).exit_code == 0


@pytest.mark.asyncio
async def test_ping_stores_against_real_clients(sqlite_url):
    results = await cli._ping_stores(
        db_settings=DBSettings(database_url=sqlite_url),
        mongo_settings=MongoSettings(
            _env_file=None, url="mongodb://127.0.0.1:1", connect_timeout_seconds=0.1
        ),
    )

    assert results["mssql"] is None
    assert results["mongo"]
