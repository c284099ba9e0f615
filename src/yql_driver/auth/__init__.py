"""OAuth collaborators for secure-mode queries."""

from yql_driver.auth.oauth import OAuthSession
from yql_driver.auth.pin import ConsolePinPrompt, PinPrompt

__all__ = ["ConsolePinPrompt", "OAuthSession", "PinPrompt"]
