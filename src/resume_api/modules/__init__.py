"""Feature modules with auto-discovery."""

from importlib import import_module
from pathlib import Path

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> dict[str, APIRouter]:
    """Auto-discover routers from all modules.

    Scans the modules directory for subpackages whose ``__init__.py``
    defines a ``router`` attribute. Packages without one (such as
    ``users``) are skipped.

    Returns:
        Routers keyed by module name, in name order.
    """
    modules_dir = Path(__file__).parent
    routers: dict[str, APIRouter] = {}

    for path in sorted(modules_dir.iterdir()):
        if path.is_dir() and not path.name.startswith("_"):
            module = import_module(f"resume_api.modules.{path.name}")
            if hasattr(module, "router"):
                routers[path.name] = module.router
                logger.debug("module_loaded", module=path.name)

    return routers
