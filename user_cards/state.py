#!/usr/bin/env python3
"""
Application state and the context object that owns it.

Only two writers touch ``AppContext.state``: the page load job (when a fetch
completes) and the highlight controller.
"""
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from .dom import Element, Page
from .models import UserRecord


@dataclass
class ApplicationState:
    users: Tuple[UserRecord, ...] = ()  # tuple: a new fetch swaps the whole thing, nobody edits it
    highlight: Optional[Element] = None  # the highlighted card, owned by the page

    def replace_users(self, users: Iterable[UserRecord]) -> None:
        # Wholesale replacement: a new fetch means new cards, so any old highlight is gone too.
        self.users = tuple(users)
        self.highlight = None  # back to Idle


class AlertLog:
    """Collects user-facing alerts; stands in for window.alert."""

    def __init__(self):
        self.messages: List[str] = []  # oldest first

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def drain(self) -> List[str]:
        # Hand the pending messages to whoever shows them (CLI print, HTML banner) and start empty.
        messages, self.messages = self.messages, []
        return messages


@dataclass
class AppContext:
    # Passed by reference to the job, the renderer and the highlight controller.
    # page: render target + email input; alert: where user-facing messages go.
    page: Page = field(default_factory=Page.default)
    state: ApplicationState = field(default_factory=ApplicationState)
    alert: Callable[[str], None] = field(default_factory=AlertLog)
