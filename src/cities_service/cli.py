from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
import uvicorn
from pymongo.errors import PyMongoError

from cities_service.app.core.logging import setup_logging
from cities_service.app.settings import get_app_settings
from cities_service.db.engine import DBEngine
from cities_service.db.nosql.client import MongoConnection
from cities_service.db.nosql.settings import MongoSettings, get_mongo_settings
from cities_service.db.settings import DBSettings, get_db_settings
from cities_service.db.store import RelationalCityStore
from cities_service.exceptions import StoreError

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Cities service")

logger = logging.getLogger(__name__)

APP_FACTORY = "cities_service.api.fastapi:create_app"


@app.command("serve")
def serve(
        host: Optional[str] = typer.Option(None, help="Bind address; defaults to APP_HOST"),
        port: Optional[int] = typer.Option(None, help="Bind port; defaults to APP_PORT"),
        reload: bool = typer.Option(False, help="Restart on code changes (development only)"),
        log_level: Optional[str] = typer.Option(None, help="Override LOG_LEVEL"),
):
    """Run the HTTP API under uvicorn."""
    setup_logging(level=log_level)
    settings = get_app_settings()
    logger.info("Service started... waiting for calls...")
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None,  # keep our dictConfig
    )


async def _ping_stores(
        db_settings: Optional[DBSettings] = None,
        mongo_settings: Optional[MongoSettings] = None,
) -> dict[str, Optional[str]]:
    """Return {store name: None if reachable else the error text}."""
    results: dict[str, Optional[str]] = {}

    mongo = MongoConnection(mongo_settings or get_mongo_settings())
    try:
        await mongo.ping()
        results["mongo"] = None
    except PyMongoError as exc:
        results["mongo"] = str(exc)
    finally:
        mongo.close()

    settings = db_settings or get_db_settings()
    engine = DBEngine(settings)
    try:
        await RelationalCityStore(engine, query_timeout_seconds=settings.query_timeout_seconds).ping()
        results["mssql"] = None
    except StoreError as exc:
        results["mssql"] = str(exc)
    finally:
        await engine.dispose()

    return results


@app.command("ping")
def ping():
    """Check both stores once; exit 1 if either is unreachable."""
    setup_logging()
    results = asyncio.run(_ping_stores())
    for name, error in results.items():
        typer.echo(f"{name}: {'ok' if error is None else error}")
    if any(error is not None for error in results.values()):
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
