# minish

A small shell toolkit. It checks a command line for common syntax mistakes
(unclosed quotes, stray pipes, misplaced redirections, `;`, `&`, `&&`), splits
it into quote-aware tokens and reports which redirections it found. It also
has a simple command loop that runs `cd`, `exit` and external programs, and a
printf-style formatter.

## Installing

```
pip install .
```

## Running

```
minish
```

This prompts with `minishell> `, reads one line, and prints its tokens and the
redirections detected among them:

```
minishell> cat < in.txt | grep x >> out.txt
Tokens:
  [0]: cat
  [1]: <
  [2]: in.txt
  [3]: |
  [4]: grep
  [5]: x
  [6]: >>
  [7]: out.txt

Redirections:
IN:  2 
OUT: 1 
```

`IN` is 1 for `>` and 2 for `>>`; `OUT` is 1 for `<` and 2 for `<<`; 0 means
none. A line that breaks a syntax rule prints a message such as

```
minishell: syntax error near unexpected token `|'
```

on standard error, followed by `Tokenization error.`, and the exit status is 1.
At end of input the command prints `No input. Exiting.` and exits with 1.

```
minish --loop
```

runs a command loop on standard input with the prompt `minishell$ `. Each line
is split on spaces; `cd` changes directory (to `HOME` without an argument),
`exit` ends the loop, and any other word is started as a program and waited for.

## Using it as a library

```python
from minish.lexer import lex, split_tokens
from minish.syntax import validate, ShellSyntaxError
from minish.parser import has_pipe, detect_redirects, Command

tokens = lex('echo  "hello   world"  | wc')
# ['echo', '"hello   world"', '|', 'wc']
has_pipe(tokens)            # True

try:
    validate("ls |")
except ShellSyntaxError as err:
    print(err)              # minishell: syntax error near unexpected token `|'
    print(err.token)        # |
```

- `minish.syntax` – one `check_*` function per rule, `is_empty_line`, and
  `validate`, which runs all checks and raises `ShellSyntaxError`.
- `minish.lexer` – `squeeze_spaces`, `remove_quotes`, `split_tokens` and `lex`.
- `minish.parser` – `has_pipe`, `detect_redirects` returning a `Redirect`, and
  `Command` with `next_node()` for the command after a pipe.
- `minish.builtins` – `ShellState` with `echo`, `cd`, `pwd`, `env`, `unset`
  and `exit`; `exit` raises `ShellExit` carrying the status code.
- `minish.shell` – `launch_program`, `read_command`, `run_loop`,
  `describe_line` and `main`.
- `minish.cformat` – `sprintf` and `printf` with the `%c %s %p %d %i %u %x %X
  %o %%` conversions and the `-`, `0`, width, `.precision` and `*` flags.
- `minish.libutils` – small character, number and string helpers.

## What it does not do

The command loop does not run pipelines or redirections, does not expand
variables and does not strip quotes from words: it splits on spaces and starts
the first word as a program. There is no `export` command, and the `echo`,
`pwd`, `env` and `unset` builtins are only available through `ShellState`, not
from the command loop.

## Tests

```
pip install .[test]
pytest
```