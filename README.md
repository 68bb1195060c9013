# fnox

Two small building blocks for a secret management tool: an interactive
prompt that offers to run a provider's authentication command, and a
checker for the ordering convention of a command-line interface.

The package has no dependencies beyond the standard library.

## Installation

```
pip install fnox
```

To run the test suite:

```
pip install "fnox[test]"
pytest
```

## Authentication prompts

`fnox.auth_prompt.prompt_and_run_auth(should_prompt, auth_command,
provider_name, error, confirm=None)` is meant to be called after a secret
provider fails because the user is not signed in.

```python
from fnox.auth_prompt import ProviderError, prompt_and_run_auth

retry = prompt_and_run_auth(
    should_prompt=True,
    auth_command="my-provider login",
    provider_name="vault",
    error=ProviderError("session expired"),
    confirm=lambda question: input(f"{question} [y/N] ").lower() == "y",
)
```

What it does:

- Returns `False` straight away when `should_prompt` is false or
  `auth_command` is empty or `None`.
- Otherwise writes `Authentication failed for provider '<name>': <error>`
  to standard error and asks ``Run `<auth_command>` to authenticate?``.
  The question goes to `confirm`, a callable taking the question and
  returning a bool. Without `confirm`, the question is asked on standard
  input with a `[Yes/No]` suffix, and `y` or `yes` (any case) counts as
  agreement.
- Returns `False` when the user declines.
- Otherwise runs the command through the shell (`sh -c` on POSIX,
  `cmd /C` on Windows). On exit status 0 it writes
  `Authentication successful, retrying...` to standard error and returns
  `True`.
- Raises `fnox.auth_prompt.ProviderError` when the prompt itself fails
  (including an interrupt), when the command cannot be started, or when it
  exits with a non-zero status (`Auth command failed with exit code: N`;
  a command killed by a signal is reported as `-1`).

## Command ordering checks

`fnox.clap_sort` describes a command-line interface with `Command` and
`Arg` and checks it with `assert_command_order`.

- `Arg(id, short=None, long=None)`: an argument is positional when it has
  neither a short nor a long option (`Arg.is_positional()`). `short` must
  be a single character, otherwise `ValueError` is raised.
- `Command(name)`: `Command.arg(arg)` and `Command.subcommand(command)`
  append and return the command, so calls can be chained.

The convention that is checked, for the command and every subcommand
below it:

1. subcommands sorted by name;
2. positional arguments sorted by id;
3. flags with a short option sorted by that letter, case-insensitively,
   with lowercase before uppercase for the same letter;
4. long-only flags sorted by long name;
5. arguments grouped in the order positional, short flags, long-only
   flags.

```python
from fnox.clap_sort import Arg, Command, assert_command_order

cli = (
    Command("myapp")
    .arg(Arg("file"))
    .arg(Arg("output", short="o", long="output"))
    .arg(Arg("verbose", short="v", long="verbose"))
    .arg(Arg("no-color", long="no-color"))
    .subcommand(Command("alpha"))
    .subcommand(Command("zebra"))
)

assert_command_order(cli)
```

The first problem found raises `fnox.clap_sort.OrderingError`, a subclass
of `AssertionError` with `command` and `details` attributes. Its message
reads `CLI ordering error in '<command>': <details>`, where the details
name the broken rule and list the current and the expected order.

## What this package does not do

It does not store, fetch or encrypt secrets, has no secret providers or
configuration files, and installs no command-line program. The
authentication prompt is given its settings and command by the caller.