#!/usr/bin/env python3
"""
Highlight controller: type an email, press Enter, that user's card turns yellow.

Two states, Idle (state.highlight is None) and Highlighted(card). At most one
card is yellow at any time; a lookup miss or a repeat never changes state.
"""
import enum
import logging

from . import config
from .state import AppContext

logger = logging.getLogger(__name__)

ENTER = "Enter"


class HighlightOutcome(enum.Enum):
    # What one submit did. The alert text (if any) went to context.alert.
    HIGHLIGHTED = "highlighted"
    NOT_FOUND = "not_found"
    ALREADY_HIGHLIGHTED = "already_highlighted"
    IGNORED = "ignored"


class HighlightController:
    def __init__(self, context: AppContext):
        self.context = context  # shared with the page load job; both write context.state

    def highlight_user(self, email: str) -> HighlightOutcome:
        state = self.context.state

        # --------------------------------------------------------------------------------------------------
        # 1) Look up the card whose id is exactly the typed email (case and whitespace count)
        # --------------------------------------------------------------------------------------------------
        # Only cards count: the input box and the mount point have ids too.
        cell = self.context.page.get_element_by_id(email, class_name=config.ITEM_CLASS)
        if cell is None:
            self.context.alert(f"could not find {email}")
            return HighlightOutcome.NOT_FOUND  # state unchanged, any current highlight stays

        # --------------------------------------------------------------------------------------------------
        # 2) Same card as last time: tell the user, change nothing
        # --------------------------------------------------------------------------------------------------
        if cell is state.highlight:
            self.context.alert(f"Already highlighting {email}")
            return HighlightOutcome.ALREADY_HIGHLIGHTED

        # --------------------------------------------------------------------------------------------------
        # 3) Move the highlight: old card back to white, new card yellow, remember the new one
        # --------------------------------------------------------------------------------------------------
        if state.highlight is not None:
            state.highlight.background_color = config.DEFAULT_COLOR
        cell.background_color = config.HIGHLIGHT_COLOR
        state.highlight = cell  # Idle/Highlighted(old) -> Highlighted(cell)
        logger.info("highlighting %s", email)
        return HighlightOutcome.HIGHLIGHTED

    def on_key_press(self, key: str) -> HighlightOutcome:
        # Every key press reaches here; only Enter submits what is in the input box.
        if key != ENTER:
            return HighlightOutcome.IGNORED
        return self.highlight_user(self.context.page.read_email())
