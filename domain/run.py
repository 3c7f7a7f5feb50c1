# domain/run.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from domain.response import StepResponse
from domain.walk import History


@dataclass
class WalkContext:
    walk_id: str = ""
    history: List[StepResponse] = field(default_factory=list)

    @property
    def last(self) -> Optional[StepResponse]:
        return self.history[-1] if self.history else None

    def snapshot(self) -> History:
        # hooks see a frozen view; later steps never rewrite earlier entries
        return tuple(self.history)

    def commit(self, response: StepResponse) -> None:
        self.history.append(response)
