"""PIN prompt protocol for the out-of-band OAuth authorization step."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class PinPrompt(Protocol):
    """Obtains the verification code the user is shown after authorizing.

    Implementations block until the code is available. There is no timeout:
    a pending prompt stalls the whole query call chain.
    """

    def __call__(self, authorization_url: str) -> str:
        """Return the PIN entered for ``authorization_url``."""
        ...


class ConsolePinPrompt:
    """Asks for the PIN on a terminal."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Initialize with optional streams (default: sys.stdin / sys.stdout)."""
        self._stdin = stdin
        self._stdout = stdout

    def __call__(self, authorization_url: str) -> str:
        """Print the authorization URL and read one line from stdin."""
        stdin = self._stdin or sys.stdin
        stdout = self._stdout or sys.stdout
        stdout.write(f"Open {authorization_url} in your browser.\n")
        stdout.write("Allow access and then enter the PIN number\n")
        stdout.write("PIN Number: ")
        stdout.flush()
        return stdin.readline().strip()
