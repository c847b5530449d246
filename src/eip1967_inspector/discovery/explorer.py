"""ABI retrieval from an Etherscan-compatible block explorer."""

import json
import logging
from typing import Dict, List, Optional

import requests

from ..clients.constants import ETHERSCAN_V2_URL, HTTP_TIMEOUT
from ..errors import AbiLookupError, TransportError
from ..extraction.address import is_zero_address
from .base import AbiSource

logger = logging.getLogger(__name__)


class ExplorerAbiSource(AbiSource):
    """Fetch a verified ABI through the explorer's contract/getabi action."""

    name = "explorer"

    def __init__(
        self,
        api_key: str,
        chain_id: int,
        base_url: str = ETHERSCAN_V2_URL,
        timeout: Optional[float] = HTTP_TIMEOUT,
    ):
        """
        Initialize the explorer source.

        Args:
            api_key: Explorer API key
            chain_id: Chain ID, forwarded as the chainid parameter
            base_url: API endpoint (Etherscan v2 by default)
            timeout: HTTP timeout in seconds
        """
        self.api_key = api_key
        self.chain_id = chain_id
        self.base_url = base_url
        self.timeout = timeout

    def load_abi(self, address: str) -> List[Dict]:
        """
        Fetch the verified ABI for an address.

        Raises:
            TransportError: If the HTTP request fails or the body is not JSON
            AbiLookupError: If the explorer reports an error (e.g. unverified source)
        """
        if is_zero_address(address):
            logger.warning("Zero address has no verified source, returning empty ABI")
            return []

        params = {
            'chainid': self.chain_id,
            'module': 'contract',
            'action': 'getabi',
            'address': address,
            'apikey': self.api_key,
        }
        logger.info(f"Fetching ABI for {address} from {self.base_url} (chain {self.chain_id})")

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise TransportError(f"Explorer request failed for {address}: {e}") from e

        if data.get('status') != '1':
            message = data.get('result') or data.get('message') or 'unknown error'
            raise AbiLookupError(f"Explorer refused ABI for {address}: {message}")

        try:
            abi = json.loads(data['result'])
        except (KeyError, TypeError, json.JSONDecodeError) as e:
            raise AbiLookupError(f"Explorer returned a malformed ABI for {address}: {e}") from e

        logger.info(f"Fetched ABI with {len(abi)} entries from {address}")
        return abi
