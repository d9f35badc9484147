import pytest

from calcifer.syntax import Syntax, TokenKind, TokenType


@pytest.mark.parametrize(
    "char, expected",
    [
        (" ", TokenType(TokenKind.WHITESPACE, " ")),
        ("\n", TokenType(TokenKind.WHITESPACE, "\n")),
        ('"', TokenType(TokenKind.STR, '"')),
        ("`", TokenType(TokenKind.STR, "`")),
        ("7", TokenType(TokenKind.NUMERIC, False)),
        ("a", TokenType(TokenKind.LITERAL)),
        ("_", TokenType(TokenKind.LITERAL)),
        ("(", TokenType(TokenKind.PUNCTUATION, "(")),
        (".", TokenType(TokenKind.PUNCTUATION, ".")),
        ("\u20ac", TokenType(TokenKind.UNKNOWN)),
    ],
)
def test_from_char(char, expected):
    assert TokenType.from_char(char) == expected


def test_default_token_type_is_unknown():
    assert TokenType().kind is TokenKind.UNKNOWN


@pytest.mark.parametrize(
    "token_type, text",
    [
        (TokenType(TokenKind.COMMENT, True), "Comment MultiLine"),
        (TokenType(TokenKind.COMMENT, False), "Comment SingleLine"),
        (TokenType(TokenKind.NUMERIC, True), "Numeric Float"),
        (TokenType(TokenKind.NUMERIC, False), "Numeric Integer"),
        (TokenType(TokenKind.WHITESPACE, " "), "Whitespace Space"),
        (TokenType(TokenKind.WHITESPACE, "\t"), "Whitespace Tab"),
        (TokenType(TokenKind.WHITESPACE, "\n"), "Whitespace New Line"),
        (TokenType(TokenKind.PUNCTUATION, ";"), "Punctuation"),
        (TokenType(TokenKind.STR, '"'), 'Str "'),
        (TokenType(TokenKind.FUNCTION), "Function"),
        (TokenType(), "Unknown"),
    ],
)
def test_describe(token_type, text):
    assert token_type.describe() == text
    assert str(token_type) == text


def test_rust_lookups():
    rust = Syntax.rust()
    assert rust.is_keyword("fn")
    assert not rust.is_keyword("Fn")
    assert rust.is_type("f32")
    assert rust.is_special("Self")
    assert not rust.is_special("self")


def test_sql_is_case_insensitive():
    sql = Syntax.sql()
    assert sql.is_keyword("select")
    assert sql.is_keyword("SeLeCt")
    assert sql.is_type("varchar")
    assert sql.is_special("public")


def test_default_is_rust():
    assert Syntax.default() == Syntax.rust()


def test_new_keeps_default_rules():
    syntax = Syntax.new("Mine")
    assert syntax.language == "Mine"
    assert syntax.keywords == Syntax.rust().keywords
    assert syntax.comment == "//"


def test_simple():
    syntax = Syntax.simple("#")
    assert syntax.language == ""
    assert syntax.comment_multiline == ("#", "#")
    assert not syntax.case_sensitive
    assert not syntax.is_keyword("fn")


def test_builders_replace_fields():
    base = Syntax.simple(";")
    built = (
        base.with_case_sensitive(True)
        .with_comment("//")
        .with_comment_multiline(["/*", "*/"])
        .with_keywords(["loop"])
        .with_types(["Int"])
        .with_special(["nil"])
    )
    assert built.comment == "//"
    assert built.comment_multiline == ("/*", "*/")
    assert built.is_keyword("loop")
    assert built.is_type("Int")
    assert built.is_special("nil")
    assert base.comment == ";"


def test_hash_uses_language_only():
    a = Syntax.rust()
    b = a.with_keywords(["x"])
    assert hash(a) == hash(b)
    assert a != b


@pytest.mark.parametrize(
    "factory, comment, multiline",
    [
        (Syntax.python, "#", ("'''", "'''")),
        (Syntax.javascript, "//", ("/*", "*/")),
        (Syntax.lua, "--", ("--[[", "]]")),
        (Syntax.shell, "#", (": '", "'")),
        (Syntax.sql, "--", ("/*", "*/")),
        (Syntax.pendragon, "Nota", ("/*", "*/")),
    ],
)
def test_comment_markers(factory, comment, multiline):
    syntax = factory()
    assert syntax.comment == comment
    assert syntax.comment_multiline == multiline


def test_language_specific_words():
    assert Syntax.python().is_special("None")
    assert Syntax.javascript().is_keyword("&&")
    assert Syntax.lua().is_special("nil")
    assert Syntax.shell().is_type("PATH")
    assert Syntax.pendragon().is_keyword("Définis")
    assert Syntax.pendragon().is_special("égal")