from __future__ import annotations

import functools
import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List

if TYPE_CHECKING:
    from ..client import MondayClient

log = logging.getLogger("monday_client.core.registry")

RESOURCES_PACKAGE = "monday_client.resources"


# --- Discovery helpers ----------------------------------------------------- #


def discover_resource_modules(
    package_name: str = RESOURCES_PACKAGE,
) -> List[ModuleType]:
    """Import every public module under the resources package."""
    modules: List[ModuleType] = []
    base_pkg = importlib.import_module(package_name)

    for finder in pkgutil.iter_modules(base_pkg.__path__, base_pkg.__name__ + "."):
        if finder.name.rsplit(".", 1)[-1].startswith("_"):
            continue
        modules.append(importlib.import_module(finder.name))

    return modules


def iter_resource_functions(module: ModuleType) -> Iterable[Callable]:
    """Yield functions that satisfy the resource convention (client first)."""
    for _, func in inspect.getmembers(module, inspect.isfunction):
        if func.__name__.startswith("_"):
            continue
        if func.__module__ != module.__name__:
            # Skip imported functions
            continue

        params = list(inspect.signature(func).parameters.values())
        if not params or params[0].name != "client":
            log.debug(
                "Skipping %s.%s: first parameter must be 'client'",
                module.__name__,
                func.__name__,
            )
            continue

        yield func


# --- Binding --------------------------------------------------------------- #


class ResourceNamespace:
    """Resource functions of one module with the client already applied."""

    def __init__(self, name: str, functions: Dict[str, Callable[..., Any]]):
        self._name = name
        self._functions = functions
        for fname, func in functions.items():
            setattr(self, fname, func)

    def __dir__(self) -> List[str]:
        return sorted(self._functions)

    def __repr__(self) -> str:
        return f"<ResourceNamespace {self._name}: {', '.join(sorted(self._functions))}>"


def _bind(func: Callable, client: "MondayClient") -> Callable:
    bound = functools.partial(func, client)
    functools.update_wrapper(bound, func)
    return bound


def bind_resources(
    client: "MondayClient", modules: List[ModuleType] | None = None
) -> Dict[str, ResourceNamespace]:
    """Build one namespace per resource module, keyed by the module's short name."""
    modules = modules if modules is not None else discover_resource_modules()
    namespaces: Dict[str, ResourceNamespace] = {}

    for module in modules:
        name = module.__name__.rsplit(".", 1)[-1]
        if name in namespaces:
            raise ValueError(f"Duplicate resource name detected: {name}")

        functions = {f.__name__: _bind(f, client) for f in iter_resource_functions(module)}
        namespaces[name] = ResourceNamespace(name, functions)
        log.debug("Bound resource: %s (%d functions)", name, len(functions))

    return namespaces


__all__ = [
    "RESOURCES_PACKAGE",
    "ResourceNamespace",
    "discover_resource_modules",
    "iter_resource_functions",
    "bind_resources",
]
