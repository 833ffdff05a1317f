#!/usr/bin/env python3
"""
Card and page rendering:
- display_person: one full card (name, photo, email, address)
- display_name: a name-only card
- render: every user in state, in order, mounted into #content
"""
import logging

from . import config
from .dom import Element
from .models import UserRecord
from .state import AppContext

logger = logging.getLogger(__name__)


def display_name(record: UserRecord) -> Element:
    cell = Element("div", class_name=config.ITEM_CLASS)
    cell.id = record.email  # verbatim: this is the highlight lookup key
    cell.append_child(Element("h2", text=record.full_name))
    return cell


def display_person(record: UserRecord) -> Element:
    """Build the card for one user.

    The card's id is the email exactly as fetched, so a later lookup with the
    same string finds it. Text goes in as plain text, with no escaping here.
    """
    logger.debug("person is %r", record)
    cell = display_name(record)
    cell.append_child(Element("img", src=record.picture, alt=record.full_name))
    cell.append_child(Element("p", text=record.email))
    cell.append_child(Element("p", text=record.address_line))
    return cell


def render(context: AppContext, names_only: bool = False) -> None:
    users = context.state.users
    if users:
        logger.debug("first user: %r", users[0])

    # Resolve the mount point before building anything so a bad page fails early.
    content = context.page.require(config.CONTENT_ID)
    build = display_name if names_only else display_person

    div = Element("div", class_name=config.CONTAINER_CLASS)
    for person in users:
        div.append_child(build(person))
    content.append_child(div)
