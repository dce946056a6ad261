# mshlex

`mshlex` turns a line of shell input into tokens in the way a small
POSIX-like shell does. It checks that quotes are closed, splits the line into
words and operators, expands `$?` and `$VAR`, and removes the outer quotes.

## Installation

```
pip install mshlex
```

To run the test suite:

```
pip install "mshlex[test]"
pytest
```

## Lexing a command line

```python
from mshlex.quotes import check_quote_balance, remove_quotes
from mshlex.tokenizer import parse_input_line
from mshlex.expand import expand_tokens

line = 'echo "$HOME" | grep \'$USER\' > out.txt'
check_quote_balance(line)                 # raises UnclosedQuoteError if a quote is left open
parsed = parse_input_line(line)           # ParsedInput: the raw line and its tokens
env = ["HOME=/home/alice", "USER=alice"]  # a dict such as {"HOME": "/home/alice"} works too
tokens = expand_tokens(parsed.tokens, 0, env)
tokens = remove_quotes(tokens)
for token in tokens:
    print(token.type.name, token.text)
```

This prints:

```
WORD echo
WORD /home/alice
PIPE |
WORD grep
WORD $USER
REDIR_OUT >
WORD out.txt
```

### The stages

- **Quote balance** (`mshlex.quotes`): `quotes_unbalanced(text)` returns
  `True` when a `'` or `"` is left open. `check_quote_balance(line)` returns
  the line unchanged, or raises `UnclosedQuoteError`. The exception is a
  `ValueError` and carries the offending `line` and a `status` of 2.
- **Tokenizing** (`mshlex.tokenizer`): `tokenize(line)` returns a list of
  `Token` objects. Each token has a `type`, a `text`, a start `pos` and a
  `was_quoted` flag. Words are split on spaces and tabs outside quotes.
  `|`, `<`, `>`, `<<` and `>>` always become tokens of their own, typed
  `PIPE`, `REDIR_IN`, `REDIR_OUT`, `HEREDOC` and `REDIR_APP`.
  `parse_input_line(line)` wraps the result in a `ParsedInput`, which keeps
  `raw` and `tokens` and supports `len()` and iteration. The lower-level
  helpers `operator_length`, `operator_type`, `skip_blanks` and
  `scan_word_end` are public as well.
- **Expansion** (`mshlex.expand`):
  - `expand_status(text, last_status)` replaces `$?`.
  - `expand_variable(text, env)` replaces `$NAME`. The name starts with a
    letter or `_` and continues with letters, digits or `_`.
  - `env` is a mapping or an iterable of `KEY=VALUE` strings. For repeated
    keys, the first entry wins.
  - An undefined name expands to nothing.
  - A `$` that is not followed by a valid name start is kept.
  - Outside any quotes, a `$` directly before a quote is dropped.
  - Nothing is expanded inside single quotes.
  - `expand_tokens(tokens, last_status, env)` applies both expansions to
    every word. The word right after `<<` is left untouched.
- **Quote removal** (`mshlex.quotes`): `strip_outer_quotes(text)` returns the
  text without its delimiting quotes and a flag saying whether any were
  removed. `remove_quotes(tokens)` applies it to every word and returns new
  tokens. A word that ends up empty and never held quotes becomes
  `TokenType.VOID`.

The functions that take a line raise `TypeError` when given `None`.

## Helpers

- `mshlex.chars`: ASCII tests and case conversion: `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower`. They accept
  a one-character string or an integer code.
- `mshlex.convert`:
  - `atoi` parses C-style, wrapping to 32 bits.
  - `atodbl` parses a decimal with a fraction.
  - `itoa` formats an integer.
  - `safe_atoi` parses strictly and raises `ValueError` on bad or
    out-of-range input.
- `mshlex.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`
  and `calloc` on `bytearray` and other buffers. `memmove` copies between
  offsets within one buffer.
- `mshlex.strings`: `bounded_copy`, `bounded_concat`, `strchr`, `strrchr`,
  `strcmp`, `strncmp`, `strnstr`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi` and `striteri`. Searches return an index or `None`.
- `mshlex.lists`: `LinkedList`, with `add_back`, `add_front`, `clear`,
  `for_each`, `last`, `map` and `size`. It also supports iteration and
  `len()`.
- `mshlex.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. They
  write to a given text stream, or to standard output.
- `mshlex.printf`: `render(fmt, *args)` formats `%c %s %p %d %i %u %x %X %%`
  and returns the text. An unknown conversion is written back unchanged.
  `printf(fmt, *args)` writes the text to standard output and returns its
  length. `format_number_base` and `format_pointer` are also available.
- `mshlex.linereader`: `LineReader(fd, buffer_size=42)` reads lines as bytes
  from a file descriptor with `os.read`. Call `read_line()` or iterate over
  it. `get_next_line(fd)` keeps one reader per descriptor, for descriptors
  from 0 to 1023.

## What it does not do

`mshlex` only lexes. It does not:

- group tokens into commands or pipelines;
- open redirection targets;
- read heredoc bodies;
- run programs;
- provide builtins such as `cd`, `export` or `exit`;
- offer an interactive prompt.

It also installs no command of its own.