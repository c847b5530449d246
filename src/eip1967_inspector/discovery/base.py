"""Common interface for ABI acquisition strategies."""

from typing import Dict, List


class AbiSource:
    """Strategy that produces a best-effort ABI for a contract address."""

    name = "abstract"

    def load_abi(self, address: str) -> List[Dict]:
        """
        Acquire an ABI for the given address.

        Args:
            address: Checksummed contract address

        Returns:
            ABI entries (possibly empty)
        """
        raise NotImplementedError
