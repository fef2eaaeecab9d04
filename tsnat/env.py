"""Lexical environments: variable scopes chained to their parents."""

from __future__ import annotations

from typing import Any, Iterator

from .interner import Symbol


class Environment:
    """One scope of variable bindings with an optional enclosing scope."""

    def __init__(self, parent: Environment | None = None) -> None:
        self.values: dict[Symbol, Any] = {}
        self.parent = parent

    def _chain(self) -> Iterator[Environment]:
        scope: Environment | None = self
        while scope is not None:
            yield scope
            scope = scope.parent

    def define(self, name: Symbol, value: Any) -> None:
        """Bind ``name`` in this scope, replacing any existing binding here."""
        self.values[name] = value

    def get(self, name: Symbol) -> Any | None:
        """Look ``name`` up through the scope chain; ``None`` if unbound."""
        for scope in self._chain():
            if name in scope.values:
                return scope.values[name]
        return None

    def assign(self, name: Symbol, value: Any) -> bool:
        """Rebind the nearest existing ``name``; return whether one was found."""
        for scope in self._chain():
            if name in scope.values:
                scope.values[name] = value
                return True
        return False