#!/usr/bin/env python3
"""
Pandas view of the fetched RandomUser data:
- flatten JSON
- select the columns a card shows
"""

from typing import Dict, List

import pandas as pd

CARD_COLUMNS = [
    "name.first",
    "name.last",
    "email",
    "picture.large",
    "location.street.number",
    "location.street.name",
    "location.city",
    "location.postcode",
]


def users_frame(users: List[Dict]) -> pd.DataFrame:
    # Turns the list of nested user dicts into a flat DataFrame (columns like name.first, location.city, etc.)
    df_raw = pd.json_normalize(users)
    if df_raw.empty:
        return pd.DataFrame(columns=CARD_COLUMNS)

    # reindex keeps the column order stable and fills anything the API left out with NaN.
    return df_raw.reindex(columns=CARD_COLUMNS).copy()


def duplicate_emails(users: List[Dict]) -> List[str]:
    """Emails that appear on more than one fetched user, in first-seen order."""
    df = users_frame(users)
    dupes = df.loc[df["email"].duplicated(keep="first"), "email"]
    return list(dict.fromkeys(dupes))
