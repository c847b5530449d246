"""Pipeline stage: ABI acquisition for the resolved implementation."""

import logging
from typing import Dict, List

logger = logging.getLogger(__name__)


class InspectorAbiMixin:
    def discover_abi(self, address: str) -> List[Dict]:
        """Acquire a best-effort ABI for an address through the configured source."""
        logger.info(f"Discovering ABI for {address} via {self.abi_source.name} source")
        abi = self.abi_source.load_abi(address)
        if not abi:
            logger.warning(f"ABI discovery for {address} returned no entries")
        return abi
