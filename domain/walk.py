# domain/walk.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Sequence, Tuple, Union

from domain.request import StepRequest, StringPairs
from domain.response import StepResponse

History = Tuple[StepResponse, ...]

PrepareResult = Union[StepRequest, dict, None]
PrepareHook = Callable[
    [Optional[StepResponse], History],
    Union[PrepareResult, Awaitable[PrepareResult]],
]
ProcessHook = Callable[[StepResponse, History], Any]


@dataclass(frozen=True)
class StepConfig:
    url: str
    request: StepRequest = field(default_factory=StepRequest)
    prepare: Optional[PrepareHook] = None
    process: Optional[ProcessHook] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class WalkConfig:
    steps: Sequence[StepConfig] = ()
    headers: Optional[StringPairs] = None
    cookies: Optional[StringPairs] = None
    base_url: str = ""
