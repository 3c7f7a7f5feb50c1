# infrastructure/walk_config/__init__.py
from infrastructure.walk_config.base_loader import WalkConfigLoadError, WalkConfigLoaderBase
from infrastructure.walk_config.hook_resolver import HookResolveError, resolve_hook
from infrastructure.walk_config.json_loader import JsonWalkConfigLoader
from infrastructure.walk_config.loader_registry import WalkConfigLoaderRegistry
from infrastructure.walk_config.yaml_loader import YamlWalkConfigLoader

__all__ = [
    "HookResolveError",
    "WalkConfigLoadError",
    "WalkConfigLoaderBase",
    "WalkConfigLoaderRegistry",
    "YamlWalkConfigLoader",
    "JsonWalkConfigLoader",
    "resolve_hook",
]
