"""Tests for run configuration validation and environment loading."""
from __future__ import annotations

import pytest
from eth_utils import to_checksum_address
from pydantic import ValidationError

from eip1967_inspector.clients.constants import DEFAULT_PROXY_ADDRESS
from eip1967_inspector.core.config import InspectorConfig
from eip1967_inspector.extraction.slots import IMPLEMENTATION_SLOT


def test_defaults_target_the_bsc_token_manager_proxy():
    config = InspectorConfig()

    assert config.rpc_endpoint == "https://bsc.blockrazor.xyz"
    assert config.proxy_address == to_checksum_address(DEFAULT_PROXY_ADDRESS)
    assert config.implementation_slot == IMPLEMENTATION_SLOT
    assert config.chain_id == 56
    assert config.abi_source == "heuristic"
    assert config.strict is False
    assert config.timeout is None


def test_slot_is_normalised_to_lowercase_hex():
    config = InspectorConfig(
        implementation_slot="0x360894A13BA1A3210667C828492DB98DCA3E2076CC3735A920A3CA505D382BBC"
    )

    assert config.implementation_slot == IMPLEMENTATION_SLOT


@pytest.mark.parametrize(
    "field, value",
    [
        ("proxy_address", "0x1234"),
        ("proxy_address", "not-an-address"),
        ("implementation_slot", "0x1234"),
        ("chain_id", 0),
        ("timeout", -1),
        ("abi_source", "sourcify"),
    ],
)
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        InspectorConfig(**{field: value})


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        InspectorConfig(rpc_url="http://localhost:8545")


def test_explorer_source_requires_api_key():
    with pytest.raises(ValidationError, match="explorer_api_key"):
        InspectorConfig(abi_source="explorer")


def test_from_env_reads_variables():
    env = {
        "RPC_URL": "http://localhost:8545",
        "PROXY_ADDRESS": "0x" + "ab" * 20,
        "CHAIN_ID": "1",
        "ABI_SOURCE": "explorer",
        "BSCSCAN_KEY": "bsc-key",
        "RPC_TIMEOUT": "2.5",
        "STRICT_SLOT": "true",
        "SIGNATURE_LOOKUP": "0",
    }

    config = InspectorConfig.from_env(env)

    assert config.rpc_endpoint == "http://localhost:8545"
    assert config.proxy_address.lower() == "0x" + "ab" * 20
    assert config.chain_id == 1
    assert config.abi_source == "explorer"
    assert config.explorer_api_key == "bsc-key"
    assert config.timeout == 2.5
    assert config.strict is True
    assert config.lookup_signatures is False


def test_etherscan_key_wins_over_bscscan_key():
    config = InspectorConfig.from_env({"ETHERSCAN_API_KEY": "eth", "BSCSCAN_KEY": "bsc"})

    assert config.explorer_api_key == "eth"


def test_overrides_take_priority_and_none_is_ignored():
    env = {"RPC_URL": "http://env:8545", "CHAIN_ID": "10"}

    config = InspectorConfig.from_env(env, rpc_endpoint="http://cli:8545", chain_id=None)

    assert config.rpc_endpoint == "http://cli:8545"
    assert config.chain_id == 10
