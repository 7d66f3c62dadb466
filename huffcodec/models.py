"""
models.py

The shared objects used in huffcodec: tree nodes and the code table.

"""


import abc
from collections.abc import Mapping
from typing import Dict, Iterator


class HuffmanNode(abc.ABC):
    """
    A node of a Huffman tree. Either a HuffmanLeaf or a HuffmanInternal.
    Nodes are immutable once constructed.
    """
    __slots__ = ("weight",)

    def __init__(self, weight: int) -> None:
        object.__setattr__(self, "weight", weight)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    @abc.abstractmethod
    def is_leaf(self) -> bool:
        pass


class HuffmanLeaf(HuffmanNode):
    """
    A leaf carrying one symbol and its weight.
    """
    __slots__ = ("symbol",)

    def __init__(self, symbol: int, weight: int = 0) -> None:
        super().__init__(weight)
        object.__setattr__(self, "symbol", symbol)

    @property
    def is_leaf(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"HuffmanLeaf({self.symbol}, {self.weight})"


class HuffmanInternal(HuffmanNode):
    """
    An internal node owning exactly two children. Carries no symbol.
    """
    __slots__ = ("left", "right")

    def __init__(self, weight: int, left: HuffmanNode, right: HuffmanNode) -> None:
        if not isinstance(left, HuffmanNode) or not isinstance(right, HuffmanNode):
            raise ValueError("Children must be instances of HuffmanNode")
        super().__init__(weight)
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)

    @property
    def is_leaf(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"HuffmanInternal({self.weight}, {self.left!r}, {self.right!r})"


class CodeTable(Mapping):
    """
    Read-only mapping from symbol to its code, a string of '0' and '1'.
    """

    def __init__(self, codes: Dict[int, str]) -> None:
        for symbol, code in codes.items():
            if not code or set(code) - {"0", "1"}:
                raise ValueError(f"Invalid code for symbol {symbol}: {code!r}")
        self._codes: Dict[int, str] = dict(codes)

    def __getitem__(self, symbol: int) -> str:
        return self._codes[symbol]

    def __iter__(self) -> Iterator[int]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"CodeTable({self._codes!r})"
