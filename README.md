# minishell

A small interactive shell front end. It reads lines at a `minishell$ ` prompt.
It rejects input with unclosed quotes. For other input it prints each word of the
line on its own line, and quoted sections stay together with their quotes.

## Installation

```
pip install .
```

## Command line

```
minishell
```

You can also start it with `python -m minishell.shell`.

Type a line at the prompt:

```
minishell$ echo "hello world" 'a b' | cat
echo
"hello world"
'a b'
|
cat
```

- A line with an unclosed quote prints `error invalid input` and nothing else.
- End of input (Ctrl-D) prints `exit` and quits with status 0.
- Ctrl-C prints a newline and quits with status 130.
- When Python's `readline` module is available, it provides line editing and
  history.

## What it does not do

The prompt does not run commands. It does not set up pipes or redirections, and
it does not expand `$VARIABLES`. There are no builtins such as `cd` or `export`.
It only checks the quoting and shows the words.

## Library use

```python
from minishell.quotes import quotes_balanced, check_quotes, UnclosedQuoteError
from minishell.splitter import split_words, count_words
from minishell.tokens import tokenize, token_type, Token, TokenType

quotes_balanced("echo 'hi")           # False
words = split_words('ls -l "my dir"')  # ['ls', '-l', '"my dir"']
count_words('ls -l "my dir"')          # 3

for token in tokenize(["cat", "<", "in.txt", "|", "wc", ">>", "$OUT"]):
    print(token.value, token.type)

token_type("<<")                       # TokenType.HEREDOC
token_type("$")                        # TokenType.WORD
```

The modules:

- `check_quotes` raises `UnclosedQuoteError`, a `ValueError`, when a quote is
  left open. The error's `line` attribute holds the input line and its `quote`
  attribute holds the open quote character.
- `token_type` gives the operators `|`, `<`, `>`, `<<` and `>>` their own types.
  It gives `TokenType.VAR` to a word of two or more characters that begins with
  `$`. Every other word is `TokenType.WORD`.
- `Token` is a frozen dataclass with `value` and `type` fields.

To drive the shell loop without a terminal, use `minishell.shell.run(lines, out)`.
It takes any iterable of lines and a text stream to write to. It writes the same
output as the prompt, ends with `exit`, and returns 0.
`minishell.shell.process_line(line)` returns the list of words for one line. It
raises `UnclosedQuoteError` when a quote is left open.

## Tests

```
pip install ".[test]"
pytest
```