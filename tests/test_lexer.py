import pytest

from litx.errors import LexFailure
from litx.lexer import Lexer, Token, TokenKind, dump_tokens, lex, token_text
from litx.text import TextSpan
from tests._debug import debug_dump_tokens
from tests._shared_cases import LEXABLE_CASES, LitxCase, case_id, case_source


def kinds(source: str) -> list[TokenKind]:
    return [tok.kind for tok, _ in lex(source)]


def tokens(source: str) -> list[Token]:
    return [tok for tok, _ in lex(source)]


def first_token(source: str) -> Token:
    pair = Lexer(source).next_token()
    assert pair is not None
    return pair[0]


def word(text: str) -> Token:
    return Token(TokenKind.WORD, text)


OPEN = Token(TokenKind.OPEN)
CLOSE = Token(TokenKind.CLOSE)
DIVIDER = Token(TokenKind.DIVIDER)
BLANK_LINE = Token(TokenKind.BLANK_LINE)


def test_all_token_kinds_in_one_document() -> None:
    source = case_source("all_token_kinds")
    pairs = lex(source)
    debug_dump_tokens("all_token_kinds", source, pairs)

    assert [tok for tok, _ in pairs] == [
        OPEN,
        word("outer"),
        Token(TokenKind.KEY, "inner"),
        OPEN,
        word("foo"),
        word("bar"),
        CLOSE,
        Token(TokenKind.KEY, "quote"),
        Token(TokenKind.QUOTE, "this"),
        DIVIDER,
        Token(TokenKind.VAR, "var"),
        BLANK_LINE,
        Token(TokenKind.COMMENT, "Comment"),
        word("baz"),
        word("quux"),
        CLOSE,
    ]


def test_key_ends_before_whitespace() -> None:
    pairs = lex("::Key Value")
    assert pairs == [
        (Token(TokenKind.KEY, "Key"), TextSpan(0, 5)),
        (word("Value"), TextSpan(6, 11)),
    ]


def test_key_inside_expression() -> None:
    assert tokens("[{expr ::key val}]") == [
        OPEN,
        word("expr"),
        Token(TokenKind.KEY, "key"),
        word("val"),
        CLOSE,
    ]


def test_var_and_word_end_at_whitespace() -> None:
    assert first_token("$$foo bar") == Token(TokenKind.VAR, "foo")
    assert first_token("foo bar") == word("foo")


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("::key}]", [Token(TokenKind.KEY, "key}]")]),
        ("::a::b c", [Token(TokenKind.KEY, "a::b"), word("c")]),
        ("::}] x", [Token(TokenKind.KEY, "}]"), word("x")]),
        ("$$v||x", [Token(TokenKind.VAR, "v||x")]),
        ("$$name''q''", [Token(TokenKind.VAR, "name''q''")]),
        ("[{$$v}] }]", [OPEN, Token(TokenKind.VAR, "v}]"), CLOSE]),
    ],
)
def test_key_and_var_content_runs_to_whitespace(source: str, expected: list[Token]) -> None:
    assert tokens(source) == expected


@pytest.mark.parametrize(
    ("source", "content"),
    [
        ("''''", ""),
        ("''Foo bar baz''", "Foo bar baz"),
        ("''[{ ::Foo Bar }]''", "[{ ::Foo Bar }]"),
        ("''Test'' Foo bar", "Test"),
        ("''line one\nline two''", "line one\nline two"),
        ("''// not a comment''", "// not a comment"),
    ],
)
def test_quote_content_is_taken_verbatim(source: str, content: str) -> None:
    assert first_token(source) == Token(TokenKind.QUOTE, content)


def test_quote_span_includes_delimiters() -> None:
    assert lex("a ''b c'' d")[1] == (Token(TokenKind.QUOTE, "b c"), TextSpan(2, 9))


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("// Foo bar\n", ["Foo bar"]),
        ("//\n", [""]),
        ("//   padded   \n", ["padded"]),
        ("// Foo bar\n// Baz quux\n", ["Foo bar", "Baz quux"]),
        ("// no trailing break", ["no trailing break"]),
    ],
)
def test_comments_are_trimmed(source: str, expected: list[str]) -> None:
    assert tokens(source) == [Token(TokenKind.COMMENT, text) for text in expected]


def test_comment_does_not_swallow_next_line() -> None:
    assert tokens("// Foo bar\nBaz quux") == [
        Token(TokenKind.COMMENT, "Foo bar"),
        word("Baz"),
        word("quux"),
    ]


def test_comment_span_stops_before_line_break() -> None:
    pairs = lex("// note\r\nx", keep_whitespace=True)
    assert pairs[0] == (Token(TokenKind.COMMENT, "note"), TextSpan(0, 7))
    assert pairs[1][0].kind == TokenKind.WHITESPACE


@pytest.mark.parametrize(
    ("source", "kind"),
    [
        ("[{", TokenKind.OPEN),
        ("}]", TokenKind.CLOSE),
        ("||", TokenKind.DIVIDER),
    ],
)
def test_structural_tokens(source: str, kind: TokenKind) -> None:
    assert lex(source) == [(Token(kind), TextSpan(0, 2))]


def test_single_structural_characters_are_word_text() -> None:
    assert tokens("[{ a/b x]y {z a|b it's }]") == [
        OPEN,
        word("a/b"),
        word("x]y"),
        word("{z"),
        word("a|b"),
        word("it's"),
        CLOSE,
    ]


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("bar}]", [word("bar"), CLOSE]),
        ("foo[{bar}]", [word("foo"), OPEN, word("bar"), CLOSE]),
        ("a||b", [word("a"), DIVIDER, word("b")]),
        ("key::value", [word("key"), Token(TokenKind.KEY, "value")]),
        ("x$$y", [word("x"), Token(TokenKind.VAR, "y")]),
        ("say''hi''", [word("say"), Token(TokenKind.QUOTE, "hi")]),
        ("text// note", [word("text"), Token(TokenKind.COMMENT, "note")]),
    ],
)
def test_words_stop_in_front_of_structural_sequences(source: str, expected: list[Token]) -> None:
    assert tokens(source) == expected


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("::", [word("::")]),
        (":: x", [word("::"), word("x")]),
        ("$$", [word("$$")]),
        ("$$ }]", [word("$$"), CLOSE]),
        (":: \n", [word("::")]),
    ],
)
def test_bare_prefix_is_word_text(source: str, expected: list[Token]) -> None:
    assert tokens(source) == expected


def test_blank_line_needs_two_line_breaks() -> None:
    assert kinds("a\nb") == [TokenKind.WORD, TokenKind.WORD]
    assert kinds("a\n\nb") == [TokenKind.WORD, TokenKind.BLANK_LINE, TokenKind.WORD]
    assert kinds("a\n\n\n\nb") == [TokenKind.WORD, TokenKind.BLANK_LINE, TokenKind.WORD]


@pytest.mark.parametrize(
    ("source", "blank_span"),
    [
        ("a\n\nb", TextSpan(1, 3)),
        ("a\n  \n\tb", TextSpan(1, 5)),
        ("a\r\n\r\nb", TextSpan(1, 5)),
        ("a   \n\n   b", TextSpan(4, 6)),
        ("a \t\n \nb", TextSpan(3, 6)),
    ],
)
def test_blank_line_span_ends_after_last_line_break(source: str, blank_span: TextSpan) -> None:
    pairs = lex(source)
    assert pairs[1] == (Token(TokenKind.BLANK_LINE), blank_span)


def test_spaces_before_blank_line_are_plain_whitespace() -> None:
    assert lex("a  \n\nb", keep_whitespace=True) == [
        (word("a"), TextSpan(0, 1)),
        (Token(TokenKind.WHITESPACE), TextSpan(1, 3)),
        (Token(TokenKind.BLANK_LINE), TextSpan(3, 5)),
        (word("b"), TextSpan(5, 6)),
    ]


def test_whitespace_is_hidden_unless_requested() -> None:
    assert kinds("a   b") == [TokenKind.WORD, TokenKind.WORD]
    assert [tok.kind for tok, _ in lex("a   b", keep_whitespace=True)] == [
        TokenKind.WORD,
        TokenKind.WHITESPACE,
        TokenKind.WORD,
    ]


def test_spans_are_byte_offsets() -> None:
    assert lex("é ::ké") == [
        (word("é"), TextSpan(0, 2)),
        (Token(TokenKind.KEY, "ké"), TextSpan(3, 8)),
    ]


@pytest.mark.parametrize("case", LEXABLE_CASES, ids=case_id)
def test_raw_tokens_tile_the_source(case: LitxCase) -> None:
    pairs = lex(case.source, keep_whitespace=True)
    debug_dump_tokens(case.name, case.source, pairs)

    offset = 0
    for _, span in pairs:
        assert span.low == offset
        assert span.high > span.low
        offset = span.high
    assert "".join(token_text(case.source, span) for _, span in pairs) == case.source


@pytest.mark.parametrize("case", LEXABLE_CASES, ids=case_id)
def test_no_whitespace_tokens_by_default(case: LitxCase) -> None:
    assert all(not tok.kind.is_trivia for tok, _ in lex(case.source))


def test_unterminated_quote_fails_with_span_to_end() -> None:
    with pytest.raises(LexFailure) as exc_info:
        lex("foo bar ''baz")
    assert exc_info.value.span == TextSpan(8, 13)
    assert exc_info.value.spec.code == "LEXER_UNTERMINATED_QUOTE"


def test_unterminated_quote_surfaces_lazily_and_exhausts_lexer() -> None:
    lexer = Lexer("foo ''bar")
    assert lexer.next_token() == (word("foo"), TextSpan(0, 3))
    with pytest.raises(LexFailure):
        lexer.next_token()
    assert lexer.is_eof
    assert lexer.next_token() is None


def test_lexer_is_single_use() -> None:
    lexer = Lexer("[{ a }]")
    assert [tok.kind for tok, _ in lexer] == [TokenKind.OPEN, TokenKind.WORD, TokenKind.CLOSE]
    assert lexer.next_token() is None
    assert lexer.next_raw_token() is None
    assert list(lexer) == []
    assert lexer.position == 7


def test_empty_source_has_no_tokens() -> None:
    assert lex("") == []
    assert lex("", keep_whitespace=True) == []


def test_token_text_presence_is_validated() -> None:
    with pytest.raises(ValueError):
        Token(TokenKind.WORD)
    with pytest.raises(ValueError):
        Token(TokenKind.OPEN, "[{")


def test_token_display() -> None:
    assert str(word("foo")) == "Word('foo')"
    assert str(OPEN) == "Open"
    assert str(Token(TokenKind.BLANK_LINE)) == "BlankLine"


def test_dump_tokens_prints_kind_span_and_text(capsys: pytest.CaptureFixture[str]) -> None:
    source = "[{ foo }]"
    dump_tokens(lex(source), source)
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert out[1].startswith("001 WORD")
    assert "span=(3, 6)" in out[1]
    assert "text='foo'" in out[1]
