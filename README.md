# ftlex

`ftlex` reads lex specification files (`.l` files) and offers two things:

- splitting a specification into its three sections: definitions, rules and
  user code. The sections are separated by `%%` lines. A `%%` counts as a
  separator when it is followed by optional spaces and then a newline.
- listing every double-quoted string in a specification, with its position
  and its content. A quote preceded by a backslash does not open a string.
  Escape sequences are kept as written. A string may not run over a newline.

## Installation

```
pip install .
```

## Command line

```
ftlex path/to/spec.l
```

This prints the content of every quoted string in the file, one per line.
Without an argument the command reads `files/ex1.l` relative to the current
directory. The command writes `Error: ...` to standard error and exits with
status 1 in these cases:

- the file cannot be read;
- a string has no closing quote;
- a newline occurs inside a string.

## Library use

```python
from ftlex.utils import read_file
from ftlex.parts import split_in_parts
from ftlex.quoted import create_lexer_strings, LexerStringError

text = read_file("spec.l")

parts = split_in_parts(text)
print(parts.header.text)
print(parts.body.text)
print(parts.footer.text)

try:
    for literal in create_lexer_strings(text):
        print(literal.start, literal.end, literal.content)
except LexerStringError as err:
    print("invalid string:", err)
```

### `ftlex.parts`

- `get_lexer_part(text)` returns a `LexerPart` with the text up to the first
  `%%` separator line. Its `start` is 0. Its `end` is the offset where the
  next section begins. If no separator is found, the section is empty.
- `split_in_parts(text)` applies `get_lexer_part` three times. It returns a
  `LexerParts` with `header`, `body` and `footer`.

### `ftlex.quoted`

- `get_string(text, start)` reads the string whose opening quote is at
  `start`. It returns the content and the offset just past the closing quote.
- `create_lexer_strings(text)` returns a list of `LexerString` records with
  fields `start` (the opening quote), `end` and `content`.
- Both raise `LexerStringError`, a `ValueError`, for malformed strings.

### `ftlex.utils`

`read_file`, `find_first_occurrence`, `find_first_occurrence_spaces`,
`find_char`, `replace_string_with_character`, `is_closing_quote` and
`is_new_part` are the low-level text helpers the modules above use.

## What it does not do

`ftlex` does not generate a scanner. It does not interpret definitions or
rules, and it does not compile patterns. It only splits a specification into
sections and extracts its quoted strings.

## Development

```
pip install -e ".[test]"
pytest
```