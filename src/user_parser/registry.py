"""Decorator-based registry of variant validators.

Each variant validator registers itself at import time via
``@register_variant("VerifiedUser")``.  The dispatcher resolves the ``type``
tag it detected to a validator via ``get_variant_validator(tag)`` — it never
calls a concrete validator directly.
"""

from __future__ import annotations

from typing import Callable

_variant_registry: dict[str, Callable] = {}


def register_variant(name: str):
    """Function decorator that registers a variant validator under *name*."""

    def decorator(fn: Callable) -> Callable:
        if name in _variant_registry:
            raise ValueError(
                f"Duplicate variant registration: {name!r} is already "
                f"registered to {_variant_registry[name].__name__}"
            )
        _variant_registry[name] = fn
        return fn

    return decorator


def get_variant_validator(name: str) -> Callable:
    """Return the validator registered under *name*."""
    try:
        return _variant_registry[name]
    except KeyError:
        available = ", ".join(sorted(_variant_registry)) or "(none)"
        raise KeyError(
            f"Unknown variant {name!r}. Available: {available}"
        ) from None


def list_registered() -> dict[str, str]:
    """Return registered variants as ``{tag: validator function name}``."""
    return {k: v.__name__ for k, v in sorted(_variant_registry.items())}
