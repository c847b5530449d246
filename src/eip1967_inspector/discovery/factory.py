"""Selection of the ABI acquisition strategy from configuration."""

import logging

from ..clients.rpc import RpcClient
from ..clients.signatures import SignatureLookup
from ..core.config import InspectorConfig
from .base import AbiSource
from .explorer import ExplorerAbiSource
from .heuristic import HeuristicAbiSource

logger = logging.getLogger(__name__)


def build_abi_source(config: InspectorConfig, rpc: RpcClient) -> AbiSource:
    """
    Build the ABI source named by config.abi_source.

    Args:
        config: Run configuration
        rpc: RPC client shared with the storage read

    Returns:
        HeuristicAbiSource or ExplorerAbiSource
    """
    if config.abi_source == "explorer":
        logger.info(f"Using explorer ABI source ({config.explorer_base_url})")
        return ExplorerAbiSource(
            api_key=config.explorer_api_key,
            chain_id=config.chain_id,
            base_url=config.explorer_base_url,
            timeout=config.timeout,
        )

    lookup = SignatureLookup(timeout=config.timeout) if config.lookup_signatures else None
    logger.info(f"Using heuristic ABI source (signature lookup {'on' if lookup else 'off'})")
    return HeuristicAbiSource(rpc, signature_lookup=lookup)
