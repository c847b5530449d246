"""Public inspector engine composed from focused mixins."""

from .acquisition import InspectorAbiMixin
from .base import InspectorBase
from .models import InspectionResult
from .resolution import InspectorResolutionMixin


class ProxyInspector(
    InspectorBase,
    InspectorResolutionMixin,
    InspectorAbiMixin,
):
    """Resolve an EIP-1967 proxy's implementation and discover its ABI."""

    def inspect(self) -> InspectionResult:
        implementation = self.resolve_implementation()
        abi = self.discover_abi(implementation)
        return InspectionResult(
            proxy_address=self.config.proxy_address,
            implementation_address=implementation,
            abi=abi,
            abi_source=self.abi_source.name,
        )
