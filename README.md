# tsnat

Building blocks for working with TypeScript source in Python:

- `tsnat.span` has `Span`, `SourceFile` and `SourceMap`. A span is a half-open byte range `[start, end)` in one source file. The map turns a span into a 1-based line and column. The column is counted in characters.
- `tsnat.interner` has `Interner` and `Symbol`. The interner stores each distinct string once and hands back a small integer symbol for it. The empty string and common names (`constructor`, `prototype`, `length`, `undefined`, `null`, `number`, `string`, `boolean`, `object`, `function`, `symbol`, `bigint`) are interned in advance, as `SYM_EMPTY` through `SYM_BIGINT`.
- `tsnat.diagnostic` holds the `TsnatError` exception hierarchy: `LexError`, `ParseError`, `TypeCheckError`, `TsnatRuntimeError` and `FfiError`. `str()` of an error reads `"<kind> error: <message>"`, for example `"Lex error: bad char"`.
- `tsnat.token` has `TokenKind`, an enum whose `str()` is the token's display text (`str(TokenKind.KW_CONST) == "const"`, `str(TokenKind.EOF) == "EOF"`), and the frozen `Token` dataclass.
- `tsnat.lexer` has `Lexer`, `LexMode` and the `tokenise` helper.
- `tsnat.value` has the runtime values `Undefined`/`UNDEFINED`, `Null`/`NULL`, `BigInt` and `JsObject`, along with `is_truthy` and `debug_repr`.
- `tsnat.env` has `Environment`, a scope of bindings that is chained to an enclosing scope.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Lexing

```python
from tsnat.interner import Interner
from tsnat.lexer import tokenise

interner = Interner()
tokens = tokenise("const x = `a${y}b`;", interner, 0)
print([t.kind.name for t in tokens])
# ['KW_CONST', 'IDENT', 'EQ', 'TEMPLATE_HEAD', 'IDENT', 'TEMPLATE_TAIL', 'SEMICOLON', 'EOF']

print(interner.get(tokens[1].value))  # x
```

`Lexer(source, file_id=0, interner=None)` does the same work. Call `next_token()` to get one token at a time, call `tokenise_all()` to get a list, or iterate over the lexer. The token stream always ends with an `EOF` token. The lexer's behaviour:

- Identifiers, numbers, strings, templates and regex literals carry their interned text in `Token.value`. For strings and templates this is the text after escapes are resolved. Keywords and punctuation carry `SYM_EMPTY`.
- A number followed by `n` becomes a `BIG_INT` token. The lexer also accepts `0x`, `0o` and `0b` prefixes, and `_` separators.
- Template literals give `NO_SUBST_TEMPLATE` or `TEMPLATE_HEAD` / `TEMPLATE_MIDDLE` / `TEMPLATE_TAIL`. Braces nested inside `${...}` are tracked.
- A `/` counts as the start of a regex only at the start of input or after a token that cannot end an expression, such as `=`, `(`, `,`, `return` or `throw`. Anywhere else it is a division operator.
- `Token.has_preceding_newline` records whether a line break (including one inside a block comment) came before the token.

When lexing fails, the lexer raises `LexError`. This happens on an unexpected character or an unterminated template literal. The error carries a `message` and the `span` where the problem was found.

## Source positions

```python
from tsnat.span import SourceMap, Span

sm = SourceMap()
file_id = sm.add_file("test.ts", "hello\nworld")
print(sm.line_col(Span(file_id, 6, 11)))  # (2, 1)
```

`Span.merge` returns the smallest span that covers both spans. It raises `ValueError` if the two spans are in different files.

## Scopes and values

```python
from tsnat.env import Environment
from tsnat.interner import Interner
from tsnat.value import UNDEFINED, debug_repr, is_truthy

interner = Interner()
sym = interner.intern("count")

outer = Environment()
outer.define(sym, 1.0)
inner = Environment(outer)
print(inner.assign(sym, 2.0))        # True: the binding in outer was updated
print(debug_repr(outer.get(sym)))    # 2
print(is_truthy(UNDEFINED))          # False
```

Runtime values map onto Python as follows:

- Numbers are `int`/`float`.
- Strings are `str` and booleans are `bool`.
- `BigInt` wraps a signed 128-bit integer.
- `JsObject` holds an ordered `properties` dict keyed by `Symbol`, plus an optional `prototype`.
- Any callable counts as a function.

`debug_repr` renders values as follows: `undefined`, `null`, `true`, `7`, `2.5`, `5n`, `"text"`, `[object Object]`, `[function]`.

`Environment.get` returns `None` for a name that is not bound anywhere in the chain. `Environment.assign` returns `False` in that case.

## What this package does not do

The package stops at tokens, values and scopes. It has no parser that builds a syntax tree, no type checker and no evaluator that runs a script. It provides no command-line program. `ParseError`, `TypeCheckError`, `TsnatRuntimeError` and `FfiError` are defined so that such stages can raise them, but nothing in this package raises them.