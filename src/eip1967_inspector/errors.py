"""Exception hierarchy surfaced by the inspection pipeline."""


class InspectorError(Exception):
    """Base class for every failure that aborts an inspection run."""


class TransportError(InspectorError):
    """An RPC or HTTP round-trip failed (unreachable host, timeout, bad response)."""


class FormatError(InspectorError):
    """A slot key or storage word is not the shape the pipeline expects."""


class AbiLookupError(InspectorError):
    """A block explorer answered but refused to hand out an ABI."""
