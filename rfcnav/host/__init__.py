"""Concrete document host and prompt used outside an editor."""

from rfcnav.host.prompt import ConsolePrompt
from rfcnav.host.workspace import Notification, TextDocument, Workspace

__all__ = [
    "ConsolePrompt",
    "Notification",
    "TextDocument",
    "Workspace",
]
