"""Network clients: JSON-RPC and signature databases."""

from .rpc import RpcClient
from .signatures import SignatureLookup

__all__ = ["RpcClient", "SignatureLookup"]
