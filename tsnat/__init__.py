"""Source spans, string interning, diagnostics, a TypeScript lexer, and interpreter values and scopes."""

__version__ = "0.1.0"
__all__ = ["diagnostic", "env", "interner", "lexer", "span", "token", "value"]