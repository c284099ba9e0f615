"""Tests for PIN prompts."""

import io

from tests.conftest import FakePinPrompt
from yql_driver.auth.pin import ConsolePinPrompt, PinPrompt


def test_console_prompt_reads_pin():
    stdout = io.StringIO()
    prompt = ConsolePinPrompt(stdin=io.StringIO(" 4321 \n"), stdout=stdout)

    assert prompt("https://login.example.test/auth?oauth_token=t") == "4321"
    output = stdout.getvalue()
    assert "https://login.example.test/auth?oauth_token=t" in output
    assert output.endswith("PIN Number: ")


def test_console_prompt_conforms_to_protocol():
    assert isinstance(ConsolePinPrompt(), PinPrompt)


def test_fake_prompt_conforms_to_protocol():
    assert isinstance(FakePinPrompt(), PinPrompt)
