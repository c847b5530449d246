"""Run configuration for a single proxy inspection."""

import os
from typing import Literal, Mapping, Optional

from eth_utils import is_address, to_checksum_address
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..clients.constants import DEFAULT_CHAIN_ID, DEFAULT_PROXY_ADDRESS, ETHERSCAN_V2_URL, RPC_URLS
from ..extraction.slots import IMPLEMENTATION_SLOT, slot_to_bytes
from ..errors import FormatError


class InspectorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_default=True)

    rpc_endpoint: str = Field(
        default=RPC_URLS[DEFAULT_CHAIN_ID],
        description="HTTP(S) JSON-RPC endpoint used for storage and code reads.",
    )
    proxy_address: str = Field(
        default=DEFAULT_PROXY_ADDRESS,
        description="EIP-1967 proxy to inspect.",
    )
    implementation_slot: str = Field(
        default=IMPLEMENTATION_SLOT,
        description="Storage slot holding the implementation pointer.",
    )
    chain_id: int = Field(default=DEFAULT_CHAIN_ID, gt=0)
    abi_source: Literal["heuristic", "explorer"] = "heuristic"
    explorer_api_key: Optional[str] = None
    explorer_base_url: str = ETHERSCAN_V2_URL
    strict: bool = Field(
        default=False,
        description="Reject storage words whose upper 12 bytes are not zero.",
    )
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds; None waits on the transport default.",
    )
    lookup_signatures: bool = True

    @field_validator("proxy_address")
    @classmethod
    def _checksum_proxy_address(cls, value: str) -> str:
        if not is_address(value):
            raise ValueError(f"{value!r} is not a valid 20-byte address")
        return to_checksum_address(value)

    @field_validator("implementation_slot")
    @classmethod
    def _normalise_slot(cls, value: str) -> str:
        try:
            return "0x" + slot_to_bytes(value).hex()
        except FormatError as e:
            raise ValueError(str(e)) from e

    @model_validator(mode="after")
    def _require_explorer_key(self) -> "InspectorConfig":
        if self.abi_source == "explorer" and not self.explorer_api_key:
            raise ValueError("abi_source 'explorer' requires explorer_api_key")
        return self

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> "InspectorConfig":
        """
        Build a config from environment variables, with keyword overrides on top.

        Recognised variables: RPC_URL, PROXY_ADDRESS, IMPLEMENTATION_SLOT, CHAIN_ID,
        ABI_SOURCE, ETHERSCAN_API_KEY (or BSCSCAN_KEY), EXPLORER_URL, RPC_TIMEOUT,
        STRICT_SLOT, SIGNATURE_LOOKUP.
        """
        env = os.environ if env is None else env
        values = {}

        mapping = {
            "RPC_URL": "rpc_endpoint",
            "PROXY_ADDRESS": "proxy_address",
            "IMPLEMENTATION_SLOT": "implementation_slot",
            "CHAIN_ID": "chain_id",
            "ABI_SOURCE": "abi_source",
            "EXPLORER_URL": "explorer_base_url",
            "RPC_TIMEOUT": "timeout",
        }
        for var, field in mapping.items():
            if env.get(var):
                values[field] = env[var]

        api_key = env.get("ETHERSCAN_API_KEY") or env.get("BSCSCAN_KEY")
        if api_key:
            values["explorer_api_key"] = api_key
        if env.get("STRICT_SLOT"):
            values["strict"] = env["STRICT_SLOT"].lower() in ("1", "true", "yes")
        if env.get("SIGNATURE_LOOKUP"):
            values["lookup_signatures"] = env["SIGNATURE_LOOKUP"].lower() not in ("0", "false", "no")

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
