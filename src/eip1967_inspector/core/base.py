"""Base inspector state and collaborator wiring."""

from typing import Optional

from ..clients.rpc import RpcClient
from ..discovery.base import AbiSource
from ..discovery.factory import build_abi_source
from .config import InspectorConfig


class InspectorBase:
    """Base class holding the configuration and the two network collaborators."""

    def __init__(
        self,
        config: Optional[InspectorConfig] = None,
        rpc: Optional[RpcClient] = None,
        abi_source: Optional[AbiSource] = None,
    ):
        self.config = config or InspectorConfig()
        self.rpc = rpc or RpcClient(self.config.rpc_endpoint, timeout=self.config.timeout)
        self.abi_source = abi_source or build_abi_source(self.config, self.rpc)
