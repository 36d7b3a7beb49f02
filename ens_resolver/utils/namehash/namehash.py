import functools
from typing import List

from eth_utils import encode_hex, keccak

from ens_resolver.constants import EMPTY_NODE
from ens_resolver.exceptions import InvalidInput
from ens_resolver.utils.typing import Node


def combine(f, g):
    return lambda x: f(g(x))


def compose(*functions):
    return functools.reduce(combine, functions, lambda x: x)


def _sub_hash(value: bytes, label: bytes) -> bytes:
    return keccak(value + keccak(label))


def labels_of(name: str) -> List[bytes]:
    """ The utf8 encoded, non empty labels of a name, leaf first """
    return [label.encode("utf8") for label in name.split(".") if label]


def namehash(name: str) -> Node:
    """
    Implementation of the namehash algorithm from EIP137.

    Labels are folded from the top level label down to the leaf, so `foo.eth` hashes `eth` first.
    Empty labels are ignored and a name without labels hashes to the zero node.
    """
    if not isinstance(name, str):
        raise InvalidInput("ENS name must be a string")

    try:
        labels = labels_of(name)
    except UnicodeEncodeError as error:
        raise InvalidInput(f"ENS name is not valid unicode: {name!r}") from error

    # compose applies the last function first, which is the top level label
    node = compose(*(
        functools.partial(_sub_hash, label=label)
        for label
        in labels
    ))(EMPTY_NODE)
    return Node(encode_hex(node))
