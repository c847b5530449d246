"""Storage word to implementation address conversion."""

import logging
from typing import Union

from eth_utils import to_checksum_address

from ..errors import FormatError

logger = logging.getLogger(__name__)

WORD_SIZE = 32
ADDRESS_SIZE = 20
PADDING_SIZE = WORD_SIZE - ADDRESS_SIZE

ZERO_ADDRESS = '0x' + '0' * 40


def _word_to_bytes(word: Union[str, bytes]) -> bytes:
    if isinstance(word, (bytes, bytearray)):
        return bytes(word)
    text = word[2:] if word.lower().startswith('0x') else word
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise FormatError(f"Storage word {word!r} is not valid hex") from e


def extract_address(word: Union[str, bytes], strict: bool = False) -> str:
    """
    Extract the checksummed address held in the low 20 bytes of a storage word.

    EIP-1967 proxies store the implementation left-padded with 12 zero bytes.
    By default the padding is not inspected, so a non-compliant layout still
    yields an address. With strict=True non-zero padding is rejected.

    Args:
        word: Raw 32-byte storage value (bytes or 0x-prefixed hex)
        strict: Reject words whose upper 12 bytes are not zero

    Returns:
        EIP-55 checksummed address

    Raises:
        FormatError: If the word is not exactly 32 bytes, or strict padding fails
    """
    raw = _word_to_bytes(word)
    if len(raw) != WORD_SIZE:
        raise FormatError(f"Storage word must be {WORD_SIZE} bytes, got {len(raw)}")

    padding = raw[:PADDING_SIZE]
    if any(padding):
        if strict:
            raise FormatError(
                f"Storage word 0x{raw.hex()} is not a zero-padded address "
                f"(upper {PADDING_SIZE} bytes are 0x{padding.hex()})"
            )
        logger.warning(f"Upper {PADDING_SIZE} bytes of storage word are non-zero, address may be garbage")

    return to_checksum_address('0x' + raw[PADDING_SIZE:].hex())


def is_zero_address(address: str) -> bool:
    return address.lower() == ZERO_ADDRESS
