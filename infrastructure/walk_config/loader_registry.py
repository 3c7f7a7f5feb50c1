# infrastructure/walk_config/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from infrastructure.walk_config.base_loader import WalkConfigLoadError, WalkConfigLoaderBase
from infrastructure.walk_config.json_loader import JsonWalkConfigLoader
from infrastructure.walk_config.yaml_loader import YamlWalkConfigLoader


class WalkConfigLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, WalkConfigLoaderBase] = {
            ".yaml": YamlWalkConfigLoader(),
            ".yml": YamlWalkConfigLoader(),
            ".json": JsonWalkConfigLoader(),
        }

    def get_loader(self, path: Path) -> WalkConfigLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise WalkConfigLoadError(f"Unsupported walk file format: {ext}")
        return loader
