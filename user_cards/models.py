#!/usr/bin/env python3
"""
UserRecord: the part of a RandomUser result that a card displays.
"""
from dataclasses import dataclass
from typing import Any, Dict, Union

from .errors import MalformedRecordError


def _pick(raw: Dict[str, Any], path: str) -> Any:
    # _pick(raw, "location.street.number") walks the nested dicts like json_normalize column names.
    node: Any = raw
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            email = raw.get("email", "?") if isinstance(raw, dict) else "?"
            raise MalformedRecordError(path, email)
        node = node[key]
    return node


@dataclass(frozen=True)
class UserRecord:
    first: str
    last: str
    email: str
    picture: str
    street_number: Union[int, str]
    street_name: str
    city: str
    postcode: Union[int, str]

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "UserRecord":
        """Build a record from one item of the API's "results" array.

        Values are kept as received: postcodes stay strings for GB and
        numbers for other nationalities.
        """
        return cls(
            first=_pick(raw, "name.first"),
            last=_pick(raw, "name.last"),
            email=_pick(raw, "email"),
            picture=_pick(raw, "picture.large"),
            street_number=_pick(raw, "location.street.number"),
            street_name=_pick(raw, "location.street.name"),
            city=_pick(raw, "location.city"),
            postcode=_pick(raw, "location.postcode"),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first} {self.last}"

    @property
    def address_line(self) -> str:
        return f"{self.street_number} {self.street_name}, {self.city}, {self.postcode}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.full_name,
            "email": self.email,
            "picture": self.picture,
            "address": self.address_line,
        }
