"""Prompting the user to authenticate a provider and running its auth command."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Callable, Optional


class ProviderError(Exception):
    """Raised when a provider operation, such as authentication, fails."""


def _ask(message: str) -> bool:
    answer = input(f"{message} [Yes/No] ")
    return answer.strip().lower() in {"y", "yes"}


def _shell_command(command: str) -> list[str]:
    if os.name == "nt":
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


def prompt_and_run_auth(
    should_prompt: bool,
    auth_command: Optional[str],
    provider_name: str,
    error: object,
    confirm: Optional[Callable[[str], bool]] = None,
) -> bool:
    """Offer to run ``auth_command`` after an authentication failure.

    Returns True when the command ran successfully, False when prompting is
    disabled, no command is available, or the user declined. Raises
    :class:`ProviderError` when the prompt or the command fails.
    """
    if not should_prompt or not auth_command:
        return False

    ask = confirm if confirm is not None else _ask
    print(
        f"Authentication failed for provider '{provider_name}': {error}",
        file=sys.stderr,
    )

    try:
        confirmed = ask(f"Run `{auth_command}` to authenticate?")
    except (Exception, KeyboardInterrupt) as exc:
        raise ProviderError(f"Failed to show prompt: {exc}") from exc

    if not confirmed:
        return False

    print(f"Running: {auth_command}", file=sys.stderr)
    try:
        result = subprocess.run(_shell_command(auth_command), check=False)
    except OSError as exc:
        raise ProviderError(f"Failed to run auth command: {exc}") from exc

    if result.returncode == 0:
        print("Authentication successful, retrying...", file=sys.stderr)
        return True

    code = result.returncode if result.returncode >= 0 else -1
    raise ProviderError(f"Auth command failed with exit code: {code}")