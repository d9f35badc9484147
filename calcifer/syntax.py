"""Token categories and per-language highlighting rules."""

from __future__ import annotations

import dataclasses
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union

SEPARATORS: frozenset[str] = frozenset({"_"})
QUOTES: frozenset[str] = frozenset({"'", '"', "`"})

_ASCII_PUNCTUATION = frozenset(string.punctuation)


class TokenKind(Enum):
    """The category of a token, without its payload."""

    COMMENT = "comment"
    FUNCTION = "function"
    KEYWORD = "keyword"
    LITERAL = "literal"
    NUMERIC = "numeric"
    PUNCTUATION = "punctuation"
    SPECIAL = "special"
    STR = "str"
    TYPE = "type"
    WHITESPACE = "whitespace"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TokenType:
    """A token category with its payload.

    ``value`` holds the multiline flag for comments, the float flag for
    numerics, and the character for punctuation, strings and whitespace.
    """

    kind: TokenKind = TokenKind.UNKNOWN
    value: Optional[Union[bool, str]] = None

    @classmethod
    def from_char(cls, c: str) -> "TokenType":
        """Classify a single character."""
        if c.isspace():
            return cls(TokenKind.WHITESPACE, c)
        if c in QUOTES:
            return cls(TokenKind.STR, c)
        if c.isnumeric():
            return cls(TokenKind.NUMERIC, False)
        if c.isalpha() or c in SEPARATORS:
            return cls(TokenKind.LITERAL)
        if c in _ASCII_PUNCTUATION:
            return cls(TokenKind.PUNCTUATION, c)
        return cls(TokenKind.UNKNOWN)

    def describe(self) -> str:
        """A human-readable name for this token type."""
        kind = self.kind
        if kind is TokenKind.COMMENT:
            return "Comment MultiLine" if self.value else "Comment SingleLine"
        if kind is TokenKind.NUMERIC:
            return "Numeric Float" if self.value else "Numeric Integer"
        if kind is TokenKind.STR:
            return f"Str {self.value}"
        if kind is TokenKind.WHITESPACE:
            suffix = {" ": " Space", "\t": " Tab", "\n": " New Line"}.get(
                self.value, ""
            )
            return f"Whitespace{suffix}"
        return {
            TokenKind.FUNCTION: "Function",
            TokenKind.KEYWORD: "Keyword",
            TokenKind.LITERAL: "Literal",
            TokenKind.PUNCTUATION: "Punctuation",
            TokenKind.SPECIAL: "Special",
            TokenKind.TYPE: "Type",
            TokenKind.UNKNOWN: "Unknown",
        }[kind]

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Syntax:
    """Rules for highlighting one language."""

    language: str
    case_sensitive: bool
    comment: str
    comment_multiline: tuple[str, str]
    keywords: frozenset[str] = field(default_factory=frozenset)
    types: frozenset[str] = field(default_factory=frozenset)
    special: frozenset[str] = field(default_factory=frozenset)

    def __hash__(self) -> int:
        return hash(self.language)

    def _lookup(self, words: frozenset[str], word: str) -> bool:
        if self.case_sensitive:
            return word in words
        return word.upper() in words

    def is_keyword(self, word: str) -> bool:
        return self._lookup(self.keywords, word)

    def is_type(self, word: str) -> bool:
        return self._lookup(self.types, word)

    def is_special(self, word: str) -> bool:
        return self._lookup(self.special, word)

    def with_case_sensitive(self, case_sensitive: bool) -> "Syntax":
        return dataclasses.replace(self, case_sensitive=case_sensitive)

    def with_comment(self, comment: str) -> "Syntax":
        return dataclasses.replace(self, comment=comment)

    def with_comment_multiline(self, comment_multiline: Iterable[str]) -> "Syntax":
        start, end = comment_multiline
        return dataclasses.replace(self, comment_multiline=(start, end))

    def with_keywords(self, keywords: Iterable[str]) -> "Syntax":
        return dataclasses.replace(self, keywords=frozenset(keywords))

    def with_types(self, types: Iterable[str]) -> "Syntax":
        return dataclasses.replace(self, types=frozenset(types))

    def with_special(self, special: Iterable[str]) -> "Syntax":
        return dataclasses.replace(self, special=frozenset(special))

    @classmethod
    def new(cls, language: str) -> "Syntax":
        """The default rules under another language name."""
        return dataclasses.replace(cls.default(), language=language)

    @classmethod
    def simple(cls, comment: str) -> "Syntax":
        """Rules that only know one comment marker."""
        return cls(
            language="",
            case_sensitive=False,
            comment=comment,
            comment_multiline=(comment, comment),
        )

    @classmethod
    def default(cls) -> "Syntax":
        return cls.rust()

    @classmethod
    def rust(cls) -> "Syntax":
        return cls(
            language="Rust",
            case_sensitive=True,
            comment="//",
            comment_multiline=("/*", "*/"),
            keywords=frozenset({
                "as", "break", "const", "continue", "crate", "else", "enum", "extern", "fn",
                "for", "if", "impl", "in", "let", "loop", "match", "mod", "move", "mut", "pub",
                "ref", "return", "self", "struct", "super", "trait", "type", "use", "where",
                "while", "async", "await", "abstract", "become", "box", "do", "final", "macro",
                "override", "priv", "typeof", "unsized", "virtual", "yield", "try", "unsafe",
                "dyn",
            }),
            types=frozenset({
                "Option", "Result", "Error", "Box", "Cow",
                "bool", "i8", "u8", "i16", "u16", "i32", "u32", "i64", "u64", "i128", "u128",
                "isize", "usize", "f32", "f64", "char", "str", "String",
                "Vec", "BTreeMap", "BTreeSet", "VecDeque", "BinaryHeap", "LinkedList",
                "Rc", "Weak", "LazyCell", "SyncUnsafeCell", "BorrowErrorl", "BorrowMutErrorl",
                "Celll", "OnceCelll", "Refl", "RefCelll", "RefMutl", "UnsafeCell", "Exclusive",
                "LazyLock",
                "Arc", "Barrier", "BarrierWaitResult", "Condvar", "Mutex", "MutexGuard",
                "Once", "OnceLock", "OnceState", "PoisonError", "RwLock", "RwLockReadGuard",
                "RwLockWriteGuard", "WaitTimeoutResult",
            }),
            special=frozenset({"Self", "static", "true", "false"}),
        )

    @classmethod
    def python(cls) -> "Syntax":
        return cls(
            language="Python",
            case_sensitive=True,
            comment="#",
            comment_multiline=("'''", "'''"),
            keywords=frozenset({
                "and", "as", "assert", "break", "class", "continue", "def", "del", "elif",
                "else", "except", "finally", "for", "from", "global", "if", "import", "in",
                "is", "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try",
                "while", "with", "yield",
            }),
            types=frozenset({
                "bool", "int", "float", "complex", "str", "list", "tuple", "range", "bytes",
                "bytearray", "memoryview", "dict", "set", "frozenset",
            }),
            special=frozenset({"False", "None", "True"}),
        )

    @classmethod
    def javascript(cls) -> "Syntax":
        return cls(
            language="Javascript",
            case_sensitive=True,
            comment="//",
            comment_multiline=("/*", "*/"),
            keywords=frozenset({
                "&&", "||", "!", "let", "var", "abstract", "arguments", "await", "break",
                "case", "catch", "class", "const", "continue", "debugger", "default", "delete",
                "do", "else", "enum", "eval", "export", "extends", "final", "finally", "for",
                "function", "goto", "if", "implements", "import", "in", "instanceof",
                "interface", "native", "new", "package", "private", "protected", "public",
                "return", "static", "super", "switch", "synchronized", "this", "throw",
                "throws", "transient", "try", "typeof", "volatile", "while", "with", "yield",
            }),
            types=frozenset({
                "Boolean", "Number", "BigInt", "Undefined", "Null", "String", "Symbol",
                "byte", "char", "float", "int", "long", "short", "void",
            }),
            special=frozenset({"false", "null", "true"}),
        )

    @classmethod
    def lua(cls) -> "Syntax":
        return cls(
            language="Lua",
            case_sensitive=True,
            comment="--",
            comment_multiline=("--[[", "]]"),
            keywords=frozenset({
                "and", "break", "do", "else", "elseif", "end", "for", "function", "if", "in",
                "local", "not", "or", "repeat", "return", "then", "until", "while",
            }),
            types=frozenset({
                "boolean", "number", "string", "function", "userdata", "thread", "table",
            }),
            special=frozenset({"false", "nil", "true"}),
        )

    @classmethod
    def shell(cls) -> "Syntax":
        return cls(
            language="Shell",
            case_sensitive=True,
            comment="#",
            comment_multiline=(": '", "'"),
            keywords=frozenset({
                "echo", "read", "set", "unset", "readonly", "shift", "export", "if", "fi",
                "else", "while", "do", "done", "for", "until", "case", "esac", "break",
                "continue", "exit", "return", "trap", "wait", "eval", "exec", "ulimit",
                "umask",
            }),
            types=frozenset({
                "ENV", "HOME", "IFS", "LANG", "LC_ALL", "LC_COLLATE", "LC_CTYPE",
                "LC_MESSAGES", "LINENO", "NLSPATH", "PATH", "PPID", "PS1", "PS2", "PS4", "PWD",
            }),
            special=frozenset({
                "alias", "bg", "cd", "command", "false", "fc", "fg", "getopts", "jobs", "kill",
                "newgrp", "pwd", "read", "true", "umask", "unalias", "wait",
            }),
        )

    @classmethod
    def sql(cls) -> "Syntax":
        return cls(
            language="SQL",
            case_sensitive=False,
            comment="--",
            comment_multiline=("/*", "*/"),
            keywords=frozenset({
                "ADD", "ALL", "ALTER", "AND", "ANY", "AS", "ASC", "BACKUP", "BETWEEN", "CASE",
                "CHECK", "COLUMN", "CONSTRAINT", "CREATE", "INDEX", "OR", "REPLACE", "VIEW",
                "PROCEDURE", "UNIQUE", "DEFAULT", "DELETE", "DESC", "DISTINCT", "DROP",
                "PRIMARY", "FOREIGN", "EXEC", "EXISTS", "FROM", "FULL", "OUTER", "JOIN",
                "GROUP", "BY", "HAVING", "IN", "INNER", "INSERT", "INTO", "SELECT", "IS",
                "KEY", "NOT", "NULL", "LEFT", "LIKE", "LIMIT", "ORDER", "A", "RIGHT", "ROWNUM",
                "TOP", "TOPDOWN", "TRUNCATE", "UNION", "UPDATE", "VALUES", "WHERE", "WITH",
            }),
            types=frozenset({
                "BOOL", "INTEGER", "SMALLINT", "BIGINT", "REAL", "DOUBLEPRECISION", "VARCHAR",
                "NUMBER", "CHAR", "TEXT", "DATE", "TIMESTAMP", "UUID", "BYTEA", "LOB", "BLOB",
                "CLOB", "NUMERIC", "BIT", "DECIMAL", "SMALLMONEY", "INT", "INT4", "INT8",
                "INT16", "INT32", "INT64", "INT128", "TINYINT", "MONEY", "FLOAT",
                "DATETIMEOFFSET", "DATETIME2", "SMALLDATETIME", "DATETIME", "TIME", "VARCHAR2",
                "NCHAR", "NVARCHAR", "NTEXT", "BINARY", "VARBINARY", "IMAGE", "ROWVERSION",
                "HIERARCHYID", "UNIQUEIDENTIFIER", "SQL_VARIANT", "XML", "XMLTYPE", "TABLE",
                "SET", "DATABASE",
            }),
            special=frozenset({"PUBLIC"}),
        )

    @classmethod
    def pendragon(cls) -> "Syntax":
        return cls(
            language="Pendragon",
            case_sensitive=True,
            comment="Nota",
            comment_multiline=("/*", "*/"),
            keywords=frozenset({
                "Définis", "Modifie", "Tant", "que", "Affiche", "Si", "Demande",
            }),
            types=frozenset({"entier", "booleen", "texte"}),
            special=frozenset({
                "et", "ou", "puis", "plus", "moins", "fois", "divisé", "par", "ouvre", "la",
                "parenthèse", "ferme", "non", "est", "égal", "supérieur", "inférieur", "à",
            }),
        )