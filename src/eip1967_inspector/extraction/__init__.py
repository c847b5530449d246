"""Slot constants, address extraction and bytecode heuristics."""

from .address import ZERO_ADDRESS, extract_address, is_zero_address
from .bytecode import abi_from_bytecode, find_event_topics, find_function_selectors
from .slots import IMPLEMENTATION_SLOT, derive_eip1967_slot, verify_implementation_slot

__all__ = [
    "IMPLEMENTATION_SLOT",
    "ZERO_ADDRESS",
    "abi_from_bytecode",
    "derive_eip1967_slot",
    "extract_address",
    "find_event_topics",
    "find_function_selectors",
    "is_zero_address",
    "verify_implementation_slot",
]
