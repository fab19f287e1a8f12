"""Reset hooks for module-level instances built from the environment.

Modules that cache an object at import time (``config.settings.cfg``) hand a
rebuild function to :func:`register_singleton`. Tests call
:func:`reset_all_singletons` after changing environment variables so every
cached object sees the new values.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

# Keyed by dotted name so reloading a module replaces its hook instead of
# adding a second one.
_hooks: dict[str, Callable[[], None]] = {}


def _hook_name(reset_fn: Callable[[], None]) -> str:
    return f"{reset_fn.__module__}.{reset_fn.__qualname__}"


def register_singleton(reset_fn: Callable[[], None], name: str | None = None) -> str:
    """Register *reset_fn* under *name* (default: its dotted name) and return the name."""
    key = name or _hook_name(reset_fn)
    if key in _hooks and _hooks[key] is not reset_fn:
        logger.debug("Replacing singleton reset hook %s", key)
    _hooks[key] = reset_fn
    return key


def registered_singletons() -> tuple[str, ...]:
    return tuple(_hooks)


def reset_all_singletons() -> None:
    """Run every hook in registration order."""
    for key, fn in list(_hooks.items()):
        logger.debug("Resetting singleton %s", key)
        fn()
