"""
Pytest fixtures: RandomUser payloads, a fake HTTP response, rendered pages.
"""

import sys
from pathlib import Path

import pytest

# Make the project root importable (api_server.py lives there)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from user_cards.models import UserRecord  # noqa: E402
from user_cards.rendering import render  # noqa: E402
from user_cards.state import AppContext  # noqa: E402


def make_user(first, last, email, number=1, street="Main St", city="York", postcode="AB1"):
    return {
        "name": {"title": "Ms", "first": first, "last": last},
        "email": email,
        "picture": {"large": f"https://randomuser.me/api/portraits/{first.lower()}.jpg"},
        "location": {
            "street": {"number": number, "name": street},
            "city": city,
            "postcode": postcode,
            "country": "United Kingdom",
        },
        "nat": "GB",
    }


class FakeResponse:
    """Just the bits of requests.Response the client touches."""

    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


# ============================================================
# Payload fixtures
# ============================================================

@pytest.fixture
def ann_raw():
    """The single-user scenario: Ann Lee at 1 Main St, York."""
    return {
        "name": {"first": "Ann", "last": "Lee"},
        "email": "ann@x.com",
        "picture": {"large": "u"},
        "location": {"street": {"number": 1, "name": "Main St"}, "city": "York", "postcode": "AB1"},
    }


@pytest.fixture
def raw_users():
    return [
        make_user("Ann", "Lee", "ann@x.com"),
        make_user("Bob", "Hart", "bob@x.com", number=22, street="High St", city="Leeds", postcode="LS1 4AP"),
        make_user("Cara", "Moss", "cara@x.com", number=7, street="Mill Rd", city="Bath", postcode="BA2"),
    ]


@pytest.fixture
def fake_response():
    return FakeResponse


# ============================================================
# Page fixtures
# ============================================================

@pytest.fixture
def rendered(raw_users):
    """A context whose page already shows the three sample users."""
    context = AppContext()
    context.state.replace_users(UserRecord.from_api(raw) for raw in raw_users)
    render(context)
    return context
