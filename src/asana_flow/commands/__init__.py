"""CLI commands for asana-flow."""

from .bodymap import bodymap
from .poses import poses
from .recommend import recommend
from .recovery import recovery
from .sequence import sequence
from .serve import serve

__all__ = [
    "bodymap",
    "poses",
    "recommend",
    "recovery",
    "sequence",
    "serve",
]
