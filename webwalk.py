"""Scripted multi-step HTTP walks with a per-walk cookie jar."""
from application.version import __version__
from application.walker import SessionWalker, walk
from domain.request import EffectiveRequest, StepRequest
from domain.response import RawCookie, StepResponse
from domain.walk import StepConfig, WalkConfig

__all__ = [
    "__version__",
    "walk",
    "SessionWalker",
    "WalkConfig",
    "StepConfig",
    "StepRequest",
    "EffectiveRequest",
    "StepResponse",
    "RawCookie",
]
