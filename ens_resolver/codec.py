from eth_utils import encode_hex, is_hex, remove_0x_prefix

from ens_resolver.exceptions import TransportError
from ens_resolver.utils.typing import HexStr, Node, Selector, Union


def encode_call(selector: Selector, argument: Node) -> HexStr:
    """
    Builds the data of a contract read call taking a single bytes32 argument.
    :param selector: 4 byte function selector, 0x prefixed
    :param argument: 32 byte argument, 0x prefixed
    :return: the selector immediately followed by the argument
    """
    return HexStr(selector + remove_0x_prefix(argument))


def decode_result(raw: Union[str, bytes], width: int) -> HexStr:
    """
    Extracts a fixed width value from the result of a contract call.
    Call results are left padded to 32 byte words, so the value is right aligned.
    :param raw: hex encoded result as returned by the chain client
    :param width: size of the value in bytes
    :return: the last `width` bytes of the result, 0x prefixed
    """
    if isinstance(raw, (bytes, bytearray)):
        raw = encode_hex(raw)
    if not isinstance(raw, str) or not is_hex(raw):
        raise TransportError(f"Malformed contract call result: {raw!r}")

    digits = remove_0x_prefix(raw).lower()
    return HexStr("0x" + digits[-width * 2:])
