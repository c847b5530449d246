"""Bytecode-driven ABI discovery with optional signature database enrichment."""

import logging
from typing import Dict, List, Optional

from ..clients.rpc import RpcClient
from ..clients.signatures import SignatureLookup, signature_to_inputs, split_signature
from ..extraction.bytecode import abi_from_bytecode
from .base import AbiSource

logger = logging.getLogger(__name__)


class HeuristicAbiSource(AbiSource):
    """Recover an ABI from on-chain bytecode, naming entries when a database knows them."""

    name = "heuristic"

    def __init__(self, rpc: RpcClient, signature_lookup: Optional[SignatureLookup] = None):
        self.rpc = rpc
        self.signature_lookup = signature_lookup

    def _enrich(self, abi: List[Dict]) -> List[Dict]:
        selectors = [entry['selector'] for entry in abi if entry['type'] == 'function']
        topics = [entry['hash'] for entry in abi if entry['type'] == 'event']
        functions, events = self.signature_lookup.lookup(selectors, topics)

        for entry in abi:
            if entry['type'] == 'function':
                signature = functions.get(entry['selector'])
            else:
                signature = events.get(entry['hash'])
            if not signature:
                continue
            entry['name'], _ = split_signature(signature)
            entry['signature'] = signature
            entry['inputs'] = signature_to_inputs(signature)
        return abi

    def load_abi(self, address: str) -> List[Dict]:
        code = self.rpc.get_code(address)
        if not code:
            logger.warning(f"No bytecode deployed at {address}, returning empty ABI")
            return []

        abi = abi_from_bytecode(code)
        function_count = sum(1 for entry in abi if entry['type'] == 'function')
        logger.info(f"✓ Recovered {function_count} function selector(s) and "
                    f"{len(abi) - function_count} event topic(s) from bytecode")

        if self.signature_lookup is not None and abi:
            abi = self._enrich(abi)
        return abi
