# minish

A small interactive shell. It reads command lines at the `miniSH$ ` prompt and runs them.
It supports:

- pipelines joined with `|`;
- redirections `<`, `>`, `>>` and here-documents `<<` (read at a `>` prompt until a line
  equal to the delimiter); a `<` target that does not exist is created empty;
- single and double quotes; text inside single quotes is not expanded;
- `$NAME` and `$?` expansion (unset variables expand to nothing);
- the builtins `echo` (with `-n`), `export`, `unset`, `cd` (including `cd -` and `cd`
  alone for `HOME`), `pwd`, `env` and `exit`.

Any other command is run directly if it is executable as given, or else looked up in the
directories of `PATH`, and started as a separate process. Builtins run inside the shell
itself, so `export`, `unset` and `cd` take effect even inside a pipeline.

## Installation

```
pip install .
```

## Usage

Start the interactive shell:

```
minish
```

A short session:

```
miniSH$ export GREETING=hello
miniSH$ echo $GREETING world | cat
hello world
miniSH$ echo $?
0
miniSH$ exit
exit
```

When a line has unbalanced quotes the shell prints `miniSH: quotes error`; when a command
in a pipeline is neither a builtin nor found, it prints `miniSH: unknown command`. In both
cases `$?` becomes `127`. Ctrl-C at the prompt moves to a fresh line and sets `$?` to
`130`. Ctrl-D ends the session; `exit` ends it with the given code, or with the last
status when no code is given.

## What it does not do

There is no command list syntax (`;`, `&&`, `||`), no backslash escapes, no wildcard
expansion, no subshells and no job control. Error output of programs is not redirected;
only standard input and standard output can be.

## Using it from Python

```python
from minish.environment import Environment
from minish.shell import Shell

shell = Shell(Environment.from_environ({"PATH": "/usr/bin:/bin"}))
status = shell.execute_line("export NAME=value")   # 0
print(shell.environment.get("NAME"))               # value
```

`Shell` takes an `Environment` and, optionally, a `prompt` callable that receives prompt
text and returns a line or `None` at end of input; it is used by `Shell.run` and for
here-documents. `Shell.execute_line` returns the status of the line (`None` for a blank
line) and lets `minish.builtins.ShellExit` through when `exit` runs.

The other modules can be used on their own:

- `minish.parser`: `Command`, `split_commands`, `replace_vars`, `apply_redirections`,
  `build_arguments`, `resolve_path`, `parse` and `close_all`;
- `minish.pipeline`: `check_pipeline` and `run_pipeline`;
- `minish.builtins`: the builtin commands and `find_builtin`;
- `minish.environment`: the ordered `Environment` and `is_valid_identifier`;
- `minish.signals`: `handle_signal`;
- `minish.text`, `minish.strings`, `minish.numbers`, `minish.chars` and `minish.output`:
  character, string and integer helpers with C-style rules (for example `numbers.atoi`
  gives `-1` above the 32-bit maximum);
- `minish.math3d`: 3-component vectors and 4x4 matrices as tuples, with points
  transformed as row vectors; `mat44_inverse` raises `ValueError` for a singular matrix.

## Running the tests

```
pip install .[test]
pytest
```