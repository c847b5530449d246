"""JSON-RPC access to contract storage and code."""

import logging
from typing import Optional, Union

from web3 import Web3

from ..errors import TransportError
from ..extraction.slots import slot_to_int

logger = logging.getLogger(__name__)


class RpcClient:
    """
    Thin read-only wrapper around a web3 HTTP provider.

    One instance is shared by the storage read and the bytecode fetch.
    """

    def __init__(self, rpc_endpoint: str, timeout: Optional[float] = None, w3: Optional[Web3] = None):
        """
        Initialize the client.

        Args:
            rpc_endpoint: HTTP(S) JSON-RPC URL
            timeout: Per-request timeout in seconds (None keeps the provider default)
            w3: Pre-built Web3 instance, mostly for tests
        """
        self.rpc_endpoint = rpc_endpoint
        self.timeout = timeout
        if w3 is None:
            request_kwargs = {'timeout': timeout} if timeout is not None else None
            w3 = Web3(Web3.HTTPProvider(rpc_endpoint, request_kwargs=request_kwargs))
        self.w3 = w3

    def read_storage(self, address: str, slot: Union[str, bytes]) -> bytes:
        """
        Read one 32-byte storage word at the latest block (eth_getStorageAt).

        Args:
            address: Contract address
            slot: Storage slot key (hex or bytes)

        Returns:
            Raw storage word

        Raises:
            TransportError: If the RPC call fails
        """
        position = slot_to_int(slot)
        logger.info(f"Reading storage slot {hex(position)} of {address} via {self.rpc_endpoint}")
        try:
            value = self.w3.eth.get_storage_at(
                Web3.to_checksum_address(address),
                position,
                block_identifier='latest'
            )
        except Exception as e:
            raise TransportError(f"eth_getStorageAt failed for {address}: {e}") from e

        raw = bytes(value)
        logger.info(f"  RPC storage slot result: 0x{raw.hex()}")
        return raw

    def get_code(self, address: str) -> bytes:
        """
        Fetch deployed runtime bytecode at the latest block (eth_getCode).

        Raises:
            TransportError: If the RPC call fails
        """
        logger.info(f"Fetching bytecode of {address}")
        try:
            code = self.w3.eth.get_code(Web3.to_checksum_address(address), block_identifier='latest')
        except Exception as e:
            raise TransportError(f"eth_getCode failed for {address}: {e}") from e

        raw = bytes(code)
        logger.info(f"  Bytecode size: {len(raw)} bytes")
        return raw
