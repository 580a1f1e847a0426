from __future__ import annotations

import importlib
import logging
import pkgutil
from types import ModuleType
from typing import Iterable, Optional

from fastapi import FastAPI

logger = logging.getLogger(__name__)


def _should_skip_module(module_name: str, exclude_segments: set[str]) -> bool:
    parts = module_name.split(".")
    if parts[-1].startswith("_"):
        return True
    return any(seg in exclude_segments for seg in parts)


def register_all_routers(
        app: FastAPI,
        *,
        base_package: Optional[str] = None,
        prefix: str = "",
        exclude: Iterable[str] = (),
) -> list[str]:
    """
    Discover and register every router module under a package.

    Args:
        app: FastAPI application instance.
        base_package: Import path of the routers package; defaults to this package.
        prefix: Prefix prepended to every router (e.g. "/v1").
        exclude: Module path segments to skip.

    Behavior:
        - Any module with a top-level `router` variable is included.
        - Modules whose final segment starts with '_' are skipped.
        - ROUTER_PREFIX / ROUTER_TAG module globals customize the include.
        - Import errors propagate; a missing route must not go unnoticed.

    Returns the names of the included modules.
    """
    base_package = base_package or __package__
    if base_package is None:
        raise RuntimeError("Cannot derive base_package; please pass base_package explicitly.")

    package_module: ModuleType = importlib.import_module(base_package)
    if not hasattr(package_module, "__path__"):
        raise RuntimeError(f"Provided base_package '{base_package}' is not a package (no __path__).")

    exclude_set = set(exclude)
    included: list[str] = []
    for _, module_name, _ in pkgutil.walk_packages(
            package_module.__path__, prefix=f"{base_package}."
    ):
        if _should_skip_module(module_name, exclude_set):
            logger.debug("Skipping router module due to exclusion/private: %s", module_name)
            continue
        module = importlib.import_module(module_name)
        router = getattr(module, "router", None)
        if router is None:
            continue

        router_prefix = getattr(module, "ROUTER_PREFIX", None)
        router_tag = getattr(module, "ROUTER_TAG", None)
        include_kwargs: dict = {
            "prefix": prefix.rstrip("/") + router_prefix if router_prefix else prefix,
        }
        if router_tag:
            include_kwargs["tags"] = [router_tag]
        app.include_router(router, **include_kwargs)
        included.append(module_name)
        logger.debug(
            "Included router from module: %s (prefix=%s, tag=%s)",
            module_name, include_kwargs["prefix"], router_tag,
        )
    return included
