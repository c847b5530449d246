"""ABI acquisition strategies."""

from .base import AbiSource
from .explorer import ExplorerAbiSource
from .factory import build_abi_source
from .heuristic import HeuristicAbiSource

__all__ = [
    "AbiSource",
    "ExplorerAbiSource",
    "HeuristicAbiSource",
    "build_abi_source",
]
