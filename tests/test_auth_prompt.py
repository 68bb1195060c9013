from unittest.mock import patch

import pytest

from fnox.auth_prompt import ProviderError, prompt_and_run_auth


class Recorder:
    def __init__(self, answer):
        self.answer = answer
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)
        return self.answer


def test_no_prompt_when_disabled():
    confirm = Recorder(True)
    assert prompt_and_run_auth(False, "exit 0", "vault", "boom", confirm) is False
    assert confirm.messages == []


def test_no_prompt_without_auth_command():
    confirm = Recorder(True)
    assert prompt_and_run_auth(True, None, "vault", "boom", confirm) is False
    assert confirm.messages == []


def test_declined_returns_false(capsys):
    confirm = Recorder(False)
    assert prompt_and_run_auth(True, "exit 0", "vault", "boom", confirm) is False
    assert confirm.messages == ["Run `exit 0` to authenticate?"]
    err = capsys.readouterr().err
    assert "Authentication failed for provider 'vault': boom" in err
    assert "Running:" not in err


def test_successful_command_returns_true(capsys):
    confirm = Recorder(True)
    assert prompt_and_run_auth(True, "exit 0", "vault", "boom", confirm) is True
    err = capsys.readouterr().err
    assert "Running: exit 0" in err
    assert "Authentication successful, retrying..." in err


def test_failing_command_raises_with_exit_code():
    with pytest.raises(ProviderError, match="Auth command failed with exit code: 3"):
        prompt_and_run_auth(True, "exit 3", "vault", "boom", Recorder(True))


def test_prompt_failure_is_wrapped():
    def broken(message):
        raise RuntimeError("no terminal")

    with pytest.raises(ProviderError, match="Failed to show prompt: no terminal"):
        prompt_and_run_auth(True, "exit 0", "vault", "boom", broken)


def test_command_launch_failure_is_wrapped():
    with patch("fnox.auth_prompt.subprocess.run", side_effect=OSError("missing shell")):
        with pytest.raises(ProviderError, match="Failed to run auth command: missing shell"):
            prompt_and_run_auth(True, "exit 0", "vault", "boom", Recorder(True))


def test_default_confirm_reads_input():
    with patch("builtins.input", return_value="no"):
        assert prompt_and_run_auth(True, "exit 0", "vault", "boom") is False
    with patch("builtins.input", return_value="yes"):
        assert prompt_and_run_auth(True, "exit 0", "vault", "boom") is True