from typing import Any, Callable, Dict, NewType, Optional, Union

from eth_typing import ChecksumAddress, HexStr

Node = NewType("Node", str)
ChainID = NewType("ChainID", int)
Selector = NewType("Selector", str)
Milliseconds = NewType("Milliseconds", int)

BlockSpecification = Union[int, str]
Transaction = Dict[str, Any]
Clock = Callable[[], int]

__all__ = (
    "Any",
    "BlockSpecification",
    "ChainID",
    "ChecksumAddress",
    "Clock",
    "Dict",
    "HexStr",
    "Milliseconds",
    "Node",
    "Optional",
    "Selector",
    "Transaction",
    "Union",
)
