"""EIP-1967 storage slot constants and their derivation self-check."""

import logging
from typing import Union

from eth_utils import keccak

from ..errors import FormatError

logger = logging.getLogger(__name__)

# bytes32(uint256(keccak256('eip1967.proxy.implementation')) - 1)
IMPLEMENTATION_SLOT = '0x360894a13ba1a3210667c828492db98dca3e2076cc3735a920a3ca505d382bbc'
IMPLEMENTATION_LABEL = 'eip1967.proxy.implementation'

# Informational only, the pipeline never resolves admin or beacon pointers.
ADMIN_SLOT = '0xb53127684a568b3173ae13b9f8a6016e243e63b6e8ee1178d6a717850b5d6103'
ADMIN_LABEL = 'eip1967.proxy.admin'
BEACON_SLOT = '0xa3f0ad74e5423aebfd80d3ef4346578335a9a72aeaee59ff6cb3582b35133d50'
BEACON_LABEL = 'eip1967.proxy.beacon'

SLOT_SIZE = 32


def derive_eip1967_slot(label: str) -> bytes:
    """
    Derive an EIP-1967 slot key from its label.

    The standard subtracts one from the hash so the slot has no known
    preimage. The subtraction wraps modulo 2**256.

    Args:
        label: Slot label (e.g., "eip1967.proxy.implementation")

    Returns:
        The 32-byte big-endian slot key
    """
    value = (int.from_bytes(keccak(text=label), 'big') - 1) % (1 << 256)
    return value.to_bytes(SLOT_SIZE, 'big')


def slot_to_bytes(slot: Union[str, bytes]) -> bytes:
    """
    Normalise a slot key given as hex text or raw bytes.

    Raises:
        FormatError: If the key is not exactly 32 bytes of valid hex
    """
    if isinstance(slot, (bytes, bytearray)):
        raw = bytes(slot)
    else:
        text = slot[2:] if slot.lower().startswith('0x') else slot
        try:
            raw = bytes.fromhex(text)
        except ValueError as e:
            raise FormatError(f"Storage slot {slot!r} is not valid hex") from e

    if len(raw) != SLOT_SIZE:
        raise FormatError(f"Storage slot must be {SLOT_SIZE} bytes, got {len(raw)}")
    return raw


def slot_to_int(slot: Union[str, bytes]) -> int:
    """Convert a slot key to the integer position expected by eth_getStorageAt."""
    return int.from_bytes(slot_to_bytes(slot), 'big')


def verify_implementation_slot(slot: Union[str, bytes] = IMPLEMENTATION_SLOT) -> None:
    """
    Check that a slot literal matches keccak256("eip1967.proxy.implementation") - 1.

    Raises:
        FormatError: If the literal drifted from the derivation
    """
    expected = derive_eip1967_slot(IMPLEMENTATION_LABEL)
    if slot_to_bytes(slot) != expected:
        raise FormatError(
            f"Implementation slot literal does not match derivation: "
            f"expected 0x{expected.hex()}"
        )
    logger.debug(f"Implementation slot self-check passed (0x{expected.hex()})")
