# infrastructure/walk_config/hook_resolver.py
from __future__ import annotations

import importlib
from typing import Any, Callable


class HookResolveError(Exception):
    pass


def resolve_hook(reference: str) -> Callable[..., Any]:
    """
    Resolve a "package.module:attr" reference to a callable.
    attr may be dotted (e.g. "hooks:Login.prepare").
    """
    module_name, sep, attr_path = (reference or "").partition(":")
    if not sep or not module_name or not attr_path:
        raise HookResolveError(f"Hook reference must look like 'module:function', got: {reference!r}")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise HookResolveError(f"Cannot import hook module {module_name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise HookResolveError(f"Hook {reference!r} not found: {e}") from e

    if not callable(target):
        raise HookResolveError(f"Hook {reference!r} is not callable")
    return target
