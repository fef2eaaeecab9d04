"""String interning: each distinct string gets one small integer symbol."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Symbol:
    """Handle of an interned string; equal strings give equal symbols."""

    index: int

    def __repr__(self) -> str:
        return f"Symbol({self.index})"


SYM_EMPTY = Symbol(0)
SYM_CONSTRUCTOR = Symbol(1)
SYM_PROTOTYPE = Symbol(2)
SYM_LENGTH = Symbol(3)
SYM_UNDEFINED = Symbol(4)
SYM_NULL = Symbol(5)
SYM_NUMBER = Symbol(6)
SYM_STRING = Symbol(7)
SYM_BOOLEAN = Symbol(8)
SYM_OBJECT = Symbol(9)
SYM_FUNCTION = Symbol(10)
SYM_SYMBOL = Symbol(11)
SYM_BIGINT = Symbol(12)

_PRELUDE = (
    "",
    "constructor",
    "prototype",
    "length",
    "undefined",
    "null",
    "number",
    "string",
    "boolean",
    "object",
    "function",
    "symbol",
    "bigint",
)


class Interner:
    """Maps strings to symbols and back; common names are pre-interned."""

    def __init__(self) -> None:
        self._map: dict[str, Symbol] = {}
        self._strings: list[str] = []
        for text in _PRELUDE:
            self.intern(text)

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, text: object) -> bool:
        return text in self._map

    def intern(self, text: str) -> Symbol:
        """Return the symbol for ``text``, creating it if new."""
        symbol = self._map.get(text)
        if symbol is None:
            symbol = Symbol(len(self._strings))
            self._strings.append(text)
            self._map[text] = symbol
        return symbol

    def get(self, symbol: Symbol) -> str:
        """Return the string a symbol stands for."""
        if not 0 <= symbol.index < len(self._strings):
            raise IndexError(f"unknown symbol {symbol!r}")
        return self._strings[symbol.index]