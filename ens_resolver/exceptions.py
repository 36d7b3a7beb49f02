from enum import Enum


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    UNSUPPORTED_NETWORK = "unsupported_network"
    NO_RESOLVER = "no_resolver"
    RESOLUTION_FAILED = "resolution_failed"
    TRANSPORT = "transport"


class ResolverError(Exception):
    """
    Base exception for every failure surfaced by a name resolution.

    Each subclass sets `kind`, so callers can branch on the failure without matching messages.
    """

    kind: ErrorKind = None


class InvalidInput(ResolverError):
    """
    A name or resolution option had the wrong type or value
    """

    kind = ErrorKind.INVALID_INPUT


class UnsupportedNetwork(ResolverError):
    """
    The chain the client is connected to has no known registry contract
    """

    kind = ErrorKind.UNSUPPORTED_NETWORK

    def __init__(self, chain_id):
        super().__init__(f"ENS is not supported on network id {chain_id}")
        self.chain_id = chain_id


class NoResolver(ResolverError):
    """
    The registry returned a zero or malformed resolver address for the node
    """

    kind = ErrorKind.NO_RESOLVER

    def __init__(self, name: str):
        super().__init__(f"No resolver for ENS address: '{name}'")
        self.name = name


class ResolutionFailed(ResolverError):
    """
    The resolver returned something that is not an address for the node
    """

    kind = ErrorKind.RESOLUTION_FAILED

    def __init__(self, name: str):
        super().__init__(f"Failed to resolve ENS address: '{name}'")
        self.name = name


class TransportError(ResolverError):
    """
    The chain client failed to build a connection, reach the node or return a well formed response.
    The underlying exception, if any, is chained as __cause__.
    """

    kind = ErrorKind.TRANSPORT
