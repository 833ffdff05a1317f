#!/usr/bin/env python3
"""
Page load job:
- fetch users from the API
- replace the application state with the new records
- render one card per user into #content
- print summary for logs
"""

import argparse
import logging
from typing import Callable, Dict, List, Optional

from . import config
from .api_client import fetch_users, fetch_users_async
from .errors import FetchError, UserCardsError
from .highlight import HighlightController
from .models import UserRecord
from .rendering import render
from .state import AppContext
from .transformations import duplicate_emails, users_frame

logger = logging.getLogger(__name__)

LOAD_FAILED_ALERT = "could not load users"


def show_users(context: AppContext, raw_users: List[Dict], names_only: bool = False) -> dict:
    """Everything after the fetch: parse, store, render, report.

    Returns the job metrics as a dict so the HTTP service and the CLI can
    both inspect the result.
    """
    # --------------------------------------------------------------------------------------------------
    # 1) Parse - one UserRecord per fetched dict, order preserved
    # --------------------------------------------------------------------------------------------------
    records = [UserRecord.from_api(raw) for raw in raw_users]
    dupes = duplicate_emails(raw_users)
    for email in dupes:
        # Cards are looked up by email; with a repeat only the first card can be highlighted.
        logger.warning("email %s appears on more than one user", email)

    # --------------------------------------------------------------------------------------------------
    # 2) Store - wholesale replacement of the previous users (and of any highlight)
    # --------------------------------------------------------------------------------------------------
    context.state.replace_users(records)

    # --------------------------------------------------------------------------------------------------
    # 3) Render - drop any previous cards, then mount the new container
    # --------------------------------------------------------------------------------------------------
    content = context.page.require(config.CONTENT_ID)
    content.clear()
    render(context, names_only=names_only)

    metrics = {
        "users_fetched": len(raw_users),
        "cards_rendered": sum(1 for el in content.iter() if el.class_name == config.ITEM_CLASS),
        "duplicate_emails": dupes,
    }
    print(
        f"users_fetched={metrics['users_fetched']} "
        f"cards_rendered={metrics['cards_rendered']} "
        f"duplicate_emails={len(dupes)}"
    )
    return metrics


def run_page_job(context: Optional[AppContext] = None,
                 fetch: Optional[Callable[[], List[Dict]]] = None,
                 names_only: bool = False) -> dict:
    context = context if context is not None else AppContext()
    fetch = fetch or fetch_users
    try:
        raw_users = fetch()
        return show_users(context, raw_users, names_only=names_only)
    except UserCardsError:
        # One user-facing alert, then the failure goes on to the caller.
        context.alert(LOAD_FAILED_ALERT)
        raise


async def load_page_async(context: AppContext, names_only: bool = False) -> dict:
    try:
        raw_users = await fetch_users_async()
        return show_users(context, raw_users, names_only=names_only)
    except UserCardsError:
        context.alert(LOAD_FAILED_ALERT)
        raise


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch random users and render them as cards.")
    parser.add_argument("--dump", action="store_true", help="print the fetched users as a table and stop")
    parser.add_argument("--names-only", action="store_true", help="cards show the name only")
    parser.add_argument("--highlight", metavar="EMAIL", action="append", default=[],
                        help="type EMAIL and press Enter (repeatable)")
    parser.add_argument("--html", action="store_true", help="print the rendered page as HTML")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config.configure_logging()

    if args.dump:
        try:
            raw_users = fetch_users()
        except FetchError as exc:
            logger.error("%s", exc)
            return 1
        print(users_frame(raw_users).to_string(index=False))
        return 0

    context = AppContext()
    try:
        run_page_job(context, names_only=args.names_only)
    except UserCardsError as exc:
        logger.error("%s", exc)
        return 1

    controller = HighlightController(context)
    for email in args.highlight:
        context.page.type_email(email)
        controller.on_key_press("Enter")

    for message in context.alert.drain():
        print(f"alert: {message}")
    if args.html:
        print(context.page.to_html())
    return 0


# Only run the job when this file is executed directly (not when it's imported)
if __name__ == "__main__":
    raise SystemExit(main())
