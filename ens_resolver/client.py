from abc import ABC, abstractmethod
from typing import Callable, Dict, Tuple

import structlog
from eth_utils import to_checksum_address, to_hex
from requests.exceptions import RequestException
from web3 import Web3
from web3.exceptions import Web3Exception

from ens_resolver import settings
from ens_resolver.exceptions import TransportError
from ens_resolver.options import ResolutionOptions
from ens_resolver.utils.typing import BlockSpecification, ChainID, HexStr, Optional, Transaction

log = structlog.get_logger(__name__)


class ChainClient(ABC):
    """
    ChainClient is the capability a resolution needs from a blockchain node: its chain id and read only contract
    calls. Under gevent both operations are expected to yield to other greenlets while waiting on the node.
    Implementations report failures as TransportError.
    """

    @abstractmethod
    def get_chain_id(self) -> ChainID:
        """
        Return the identifier of the chain the node is connected to.
        """

    @abstractmethod
    def call(self, transaction: Transaction, block: Optional[BlockSpecification] = None) -> HexStr:
        """
        Execute a read only contract call and return the raw hex encoded result.
        :param transaction: dict with `to`, `data` and `value`
        :param block: block to execute the call at, latest when None
        """


class Web3ChainClient(ChainClient):
    """
    ChainClient backed by a web3 instance.
    """

    TRANSPORT_EXCEPTIONS = (Web3Exception, RequestException, OSError, ValueError)

    def __init__(self, web3: Web3):
        self.web3 = web3

    def get_chain_id(self) -> ChainID:
        try:
            return ChainID(int(self.web3.eth.chain_id))
        except self.TRANSPORT_EXCEPTIONS as error:
            raise self.get_exception(error) from error

    def call(self, transaction: Transaction, block: Optional[BlockSpecification] = None) -> HexStr:
        transaction = dict(transaction, to=to_checksum_address(transaction["to"]))
        try:
            return HexStr(to_hex(self.web3.eth.call(transaction, block)))
        except self.TRANSPORT_EXCEPTIONS as error:
            raise self.get_exception(error) from error

    @staticmethod
    def get_exception(error: Exception) -> TransportError:
        return TransportError(f"{error.__class__.__name__}: {error}")


def build_web3_client(
    provider=None,
    uri: Optional[str] = None,
    network: Optional[str] = None,
    credential: Optional[str] = None,
) -> Web3ChainClient:
    """
    Builds a web3 backed client.
    An explicit provider wins, then `uri` (http(s) or an IPC socket path), then the Infura endpoint of `network`
    authenticated with `credential`.
    """
    if provider is None:
        if uri:
            if uri.startswith(("http://", "https://")):
                provider = Web3.HTTPProvider(
                    uri, request_kwargs={"timeout": settings.DEFAULT_HTTP_REQUEST_TIMEOUT}
                )
            elif uri.endswith(".ipc"):
                provider = Web3.IPCProvider(uri)
            else:
                raise TransportError(f"Unsupported provider URI: {uri}")
        elif credential:
            provider = Web3.HTTPProvider(
                settings.INFURA_URL_TEMPLATE.format(
                    network=network or settings.DEFAULT_NETWORK, credential=credential
                ),
                request_kwargs={"timeout": settings.DEFAULT_HTTP_REQUEST_TIMEOUT},
            )
        else:
            raise TransportError("A provider, a provider URI or a credential is required to reach the chain")
    return Web3ChainClient(Web3(provider))


class ClientFactory:
    """
    Builds chain clients and keeps them for reuse.
    Options with the same construction key (provider, uri, network, credential) share one client for the lifetime
    of the factory.
    """

    def __init__(self, build: Callable[..., ChainClient] = build_web3_client):
        self.build = build
        self.clients: Dict[Tuple, ChainClient] = dict()

    def get(self, options: ResolutionOptions) -> ChainClient:
        if options.client is not None:
            return options.client

        key = options.construction_key()
        client = self.clients.get(key)
        if client is None:
            log.debug("Building chain client", uri=options.uri, network=options.network)
            client = self.build(
                provider=options.provider,
                uri=options.uri,
                network=options.network,
                credential=options.credential,
            )
            self.clients[key] = client
        return client
