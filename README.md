# minishell

A small interactive shell. It reads a line and splits it into words on spaces. If the first word is a builtin, the shell runs it itself. Otherwise it starts the program of that name, found on `PATH`, passes it the remaining words as arguments and waits for it to finish.

## Installing

```
pip install .
```

## Running

```
minishell
```

The prompt is `minishell$`. Where Python's `readline` module is available, it gives the prompt line editing and input history. At end of input (Ctrl-D) the shell prints `bye!` and stops.

### Builtins at the prompt

| Command     | Effect |
|-------------|--------|
| `cd [dir]`  | Changes to `dir`. With no argument it changes to `$HOME`, and prints `cd: HOME not set` if `HOME` is not set. |
| `pwd`       | Prints the current working directory. |
| `exit`      | Prints `exit` and leaves the shell with status 0. Any arguments are ignored. |

Every other word, `env` included, is started as an external program. If a program cannot be started, the shell prints a message that begins with `minishell:` and carries on. A line of more than 99 words is refused with a `minishell: too many arguments` message.

## What it does not do

Words are separated by the space character alone. The shell has no quoting, no variable expansion, no pipes, no redirections, no here-documents and no job control. `minishell.lexer` defines `TokenType` (`WORD`, `PIPE`, `REDIRECT_IN`, `REDIRECT_OUT`, `HEREDOC`, `APPEND`), `Token` and `Command`, but nothing in the package produces or uses them yet. The shell does not record the exit status of the programs it runs.

## Using it as a library

```python
from minishell.lexer import split_input
from minishell.builtins import is_builtin, run_builtin
from minishell.shell import execute_line

split_input("ls  -l   /tmp")   # ['ls', '-l', '/tmp']
is_builtin("pwd")              # True
is_builtin("env")              # False
execute_line("pwd", ["HOME=/home/user"])   # prints the directory, returns 0
```

`execute_line(line, envp)` returns the status of the builtin or program it ran, and 0 for a blank line. It raises `ValueError` for a line of more than 99 words.

`minishell.builtins` provides `builtin_cd`, `builtin_pwd`, `builtin_exit`, `builtin_env`, `is_builtin` and `run_builtin`. `run_builtin(args, envp)` also handles `env`: it prints each entry of `envp`, which may be a mapping such as `os.environ` or an iterable of `NAME=value` strings. It returns 1 for an empty argument list and 0 for a name it does not know. `builtin_exit` raises `SystemExit(0)`.

The package also holds the string and character helpers the shell is built on:

- `minishell.strutil`: `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `memcmp`, `strchr`, `strrchr`, `strmapi`. The search functions return an index, or `None` when nothing is found.
- `minishell.charutil`: `atoi`, `itoa`, `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`, `putnbr`, `putendl`. The classifiers take a one-character string or a code point, and they test for ASCII only.

## Tests

```
pip install .[test]
pytest
```