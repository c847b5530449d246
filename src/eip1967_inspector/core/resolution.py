"""Pipeline stage: implementation slot read and address extraction."""

import logging

from ..extraction.address import extract_address, is_zero_address
from ..extraction.slots import verify_implementation_slot

logger = logging.getLogger(__name__)


class InspectorResolutionMixin:
    def read_implementation_word(self) -> bytes:
        """Read the raw 32-byte implementation pointer from the proxy."""
        return self.rpc.read_storage(self.config.proxy_address, self.config.implementation_slot)

    def resolve_implementation(self) -> str:
        """
        Resolve the implementation address behind the configured proxy.

        Returns:
            Checksummed implementation address (the zero address if the proxy
            was never initialised)

        Raises:
            TransportError: If the storage read fails
            FormatError: If the word is malformed, or strict padding fails
        """
        verify_implementation_slot()
        logger.info(f"Checking EIP-1967 implementation slot of {self.config.proxy_address}...")

        word = self.read_implementation_word()
        implementation = extract_address(word, strict=self.config.strict)

        if is_zero_address(implementation):
            logger.warning(f"Implementation slot of {self.config.proxy_address} is empty (all zeros)")
        else:
            logger.info(f"Detected EIP-1967 implementation: {implementation}")
        return implementation
