"""Token kinds and tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .interner import Symbol
from .span import Span


class TokenKind(Enum):
    """Every kind of token; ``str()`` gives its display text."""

    text: str

    def __new__(cls, text: str) -> TokenKind:
        member = object.__new__(cls)
        member._value_ = len(cls.__members__) + 1
        member.text = text
        return member

    def __str__(self) -> str:
        return self.text

    # Literals
    NUMBER = "number"
    BIG_INT = "bigint"
    STRING = "string"
    TEMPLATE_HEAD = "`...${"
    TEMPLATE_MIDDLE = "}...${"
    TEMPLATE_TAIL = "}...`"
    NO_SUBST_TEMPLATE = "`...`"
    REGEX = "regex"

    IDENT = "identifier"

    # Value keywords
    KW_BREAK = "break"
    KW_CASE = "case"
    KW_CATCH = "catch"
    KW_CLASS = "class"
    KW_CONST = "const"
    KW_CONTINUE = "continue"
    KW_DEBUGGER = "debugger"
    KW_DEFAULT = "default"
    KW_DELETE = "delete"
    KW_DO = "do"
    KW_ELSE = "else"
    KW_ENUM = "enum"
    KW_EXPORT = "export"
    KW_EXTENDS = "extends"
    KW_FALSE = "false"
    KW_FINALLY = "finally"
    KW_FOR = "for"
    KW_FUNCTION = "function"
    KW_IF = "if"
    KW_IMPORT = "import"
    KW_IN = "in"
    KW_INSTANCEOF = "instanceof"
    KW_LET = "let"
    KW_NEW = "new"
    KW_NULL = "null"
    KW_RETURN = "return"
    KW_SUPER = "super"
    KW_SWITCH = "switch"
    KW_THIS = "this"
    KW_THROW = "throw"
    KW_TRUE = "true"
    KW_TRY = "try"
    KW_TYPEOF = "typeof"
    KW_UNDEFINED = "undefined"
    KW_VAR = "var"
    KW_VOID = "void"
    KW_WHILE = "while"
    KW_WITH = "with"
    KW_YIELD = "yield"
    KW_ASYNC = "async"
    KW_AWAIT = "await"
    KW_OF = "of"
    KW_FROM = "from"
    KW_AS = "as"
    KW_SATISFIES = "satisfies"
    KW_USING = "using"
    KW_STATIC = "static"

    # Type keywords
    KW_TYPE = "type"
    KW_INTERFACE = "interface"
    KW_NAMESPACE = "namespace"
    KW_MODULE = "module"
    KW_DECLARE = "declare"
    KW_NATIVE = "native"
    KW_ABSTRACT = "abstract"
    KW_OVERRIDE = "override"
    KW_READONLY = "readonly"
    KW_KEYOF = "keyof"
    KW_INFER = "infer"
    KW_IS = "is"
    KW_ASSERTS = "asserts"
    KW_PUBLIC = "public"
    KW_PRIVATE = "private"
    KW_PROTECTED = "protected"
    KW_NEVER = "never"
    KW_UNKNOWN = "unknown"
    KW_ANY = "any"
    KW_OBJECT = "object"
    KW_SYMBOL = "symbol"
    KW_NUMBER = "number"
    KW_STRING = "string"
    KW_BOOLEAN = "boolean"
    KW_BIG_INT = "bigint"
    KW_INTRINSIC = "intrinsic"

    # Punctuation
    L_PAREN = "("
    R_PAREN = ")"
    L_BRACE = "{"
    R_BRACE = "}"
    L_BRACKET = "["
    R_BRACKET = "]"
    SEMICOLON = ";"
    COLON = ":"
    COMMA = ","
    DOT = "."
    DOT_DOT_DOT = "..."
    QUESTION_DOT = "?."
    QUESTION = "?"
    QUESTION_QUESTION = "??"

    # Operators
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    PERCENT = "%"
    STAR_STAR = "**"
    AMP = "&"
    PIPE = "|"
    CARET = "^"
    TILDE = "~"
    LT_LT = "<<"
    GT_GT = ">>"
    GT_GT_GT = ">>>"
    BANG = "!"
    AMP_AMP = "&&"
    PIPE_PIPE = "||"
    EQ = "="
    EQ_EQ = "=="
    EQ_EQ_EQ = "==="
    BANG_EQ = "!="
    BANG_EQ_EQ = "!=="
    LT = "<"
    GT = ">"
    LT_EQ = "<="
    GT_EQ = ">="
    ARROW = "=>"
    PLUS_EQ = "+="
    MINUS_EQ = "-="
    STAR_EQ = "*="
    SLASH_EQ = "/="
    PERCENT_EQ = "%="
    STAR_STAR_EQ = "**="
    AMP_EQ = "&="
    PIPE_EQ = "|="
    CARET_EQ = "^="
    LT_LT_EQ = "<<="
    GT_GT_EQ = ">>="
    GT_GT_GT_EQ = ">>>="
    AMP_AMP_EQ = "&&="
    PIPE_PIPE_EQ = "||="
    QUESTION_QUESTION_EQ = "??="
    PLUS_PLUS = "++"
    MINUS_MINUS = "--"
    AT = "@"

    # JSX
    JSX_TEXT = "JSX text"
    JSX_TAG_OPEN = "<JSXTag"
    JSX_TAG_CLOSE = "</JSXTag>"
    JSX_L_BRACE = "{ (JSX)"
    JSX_R_BRACE = "} (JSX)"

    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexed token; ``value`` is the interned text, empty for punctuation."""

    kind: TokenKind
    value: Symbol
    span: Span
    has_preceding_newline: bool = False