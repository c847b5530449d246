"""Inspector flow package."""

from .config import InspectorConfig
from .engine import ProxyInspector
from .models import InspectionResult

__all__ = [
    "InspectionResult",
    "InspectorConfig",
    "ProxyInspector",
]
