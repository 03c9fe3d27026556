from ftlex.parts import LexerPart, LexerParts, get_lexer_part, split_in_parts


def test_get_lexer_part_cuts_before_separator():
    text = "defs\n%%\nrules\n"
    part = get_lexer_part(text)
    assert part.text == text[: text.index("%%")]
    assert part.start == 0
    assert part.end == text.index("%%") + len("%%\n")


def test_get_lexer_part_without_separator():
    part = get_lexer_part("abc")
    assert part == LexerPart(text="", start=0, end=len("%%\n"))


def test_split_in_parts_three_sections():
    text = "head\n%%\nbody\n%%\nfoot\n"
    parts = split_in_parts(text)
    assert isinstance(parts, LexerParts)
    assert parts.header.text == "head\n"
    assert parts.body.text == "body\n"
    assert parts.footer.text == ""


def test_split_in_parts_offsets_chain():
    text = "head\n%%\nbody\n%%\nfoot\n"
    parts = split_in_parts(text)
    rest = text[parts.header.end:]
    assert rest.startswith("body")
    assert rest[parts.body.end:] == "foot\n"


def test_split_in_parts_footer_with_third_separator():
    text = "a\n%%\nb\n%%\nc\n%%\n"
    parts = split_in_parts(text)
    assert [parts.header.text, parts.body.text, parts.footer.text] == [
        "a\n",
        "b\n",
        "c\n",
    ]


def test_split_in_parts_spaces_after_separator():
    text = "a\n%%  \nb\n%%\nc"
    parts = split_in_parts(text)
    assert parts.header.text == "a\n"
    assert parts.body.text == " \nb\n"


def test_split_in_parts_empty_text():
    parts = split_in_parts("")
    assert parts.header.text == parts.body.text == parts.footer.text == ""