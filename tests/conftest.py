"""Test configuration: isolate every test from the caller's environment."""
from __future__ import annotations

import pytest

INSPECTOR_ENV_VARS = (
    "RPC_URL",
    "PROXY_ADDRESS",
    "IMPLEMENTATION_SLOT",
    "CHAIN_ID",
    "ABI_SOURCE",
    "ETHERSCAN_API_KEY",
    "BSCSCAN_KEY",
    "EXPLORER_URL",
    "RPC_TIMEOUT",
    "STRICT_SLOT",
    "SIGNATURE_LOOKUP",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in INSPECTOR_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
