"""Resolve EIP-1967 proxy implementations and discover their ABI."""

from .core import InspectionResult, InspectorConfig, ProxyInspector
from .errors import AbiLookupError, FormatError, InspectorError, TransportError

__version__ = "0.1.0"

__all__ = [
    "AbiLookupError",
    "FormatError",
    "InspectionResult",
    "InspectorConfig",
    "InspectorError",
    "ProxyInspector",
    "TransportError",
]
