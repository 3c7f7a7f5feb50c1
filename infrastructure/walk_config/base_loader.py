# infrastructure/walk_config/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from domain.request import StepRequest
from domain.walk import StepConfig, WalkConfig
from infrastructure.walk_config.hook_resolver import HookResolveError, resolve_hook


class WalkConfigLoadError(Exception):
    pass


def _string_pairs(value: Any, label: str) -> Optional[Dict[str, str]]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise WalkConfigLoadError(f"{label} must be a mapping, got: {type(value).__name__}")
    return {str(k): "" if v is None else str(v) for k, v in value.items()}


class WalkConfigLoaderBase(ABC):
    """Build a WalkConfig from a walk file; subclasses only read the file."""

    def __init__(self, hook_resolver: Callable[[str], Callable[..., Any]] = resolve_hook):
        self._resolve_hook = hook_resolver

    def load_from_file(self, path: Union[str, Path]) -> WalkConfig:
        p = Path(path)
        if not p.exists():
            raise WalkConfigLoadError(f"Walk file not found: {path}")

        data = self._load_file(p)

        if data is None:
            raise WalkConfigLoadError(f"Walk file is empty: {path}")

        if not isinstance(data, dict):
            raise WalkConfigLoadError(f"Walk file is invalid: {path}")

        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> WalkConfig:
        steps_data = data.get("steps") or []
        if not isinstance(steps_data, list):
            raise WalkConfigLoadError("steps must be a list")

        return WalkConfig(
            steps=tuple(self._load_steps(steps_data)),
            headers=_string_pairs(data.get("headers"), "headers"),
            cookies=_string_pairs(data.get("cookies"), "cookies"),
            base_url=str(data.get("base_url") or ""),
        )

    def _load_steps(self, steps_data: List[Any]) -> List[StepConfig]:
        steps: List[StepConfig] = []
        for i, step_data in enumerate(steps_data):
            if not isinstance(step_data, dict):
                raise WalkConfigLoadError(f"steps[{i}] must be a mapping")
            steps.append(self._load_step(i, step_data))
        return steps

    def _load_step(self, index: int, data: Dict[str, Any]) -> StepConfig:
        url = data.get("url")
        if not url or not isinstance(url, str):
            raise WalkConfigLoadError(f"steps[{index}].url is required")

        try:
            request = StepRequest.from_dict(data.get("request"))
        except (TypeError, ValueError) as e:
            raise WalkConfigLoadError(f"steps[{index}].request is invalid: {e}") from e

        return StepConfig(
            url=url,
            request=request,
            prepare=self._hook(index, data.get("prepare")),
            process=self._hook(index, data.get("process")),
            id=data.get("id"),
        )

    def _hook(self, index: int, reference: Optional[str]) -> Optional[Callable[..., Any]]:
        if not reference:
            return None
        try:
            return self._resolve_hook(reference)
        except HookResolveError as e:
            raise WalkConfigLoadError(f"steps[{index}]: {e}") from e

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
