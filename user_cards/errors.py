#!/usr/bin/env python3
"""
Exceptions raised by the user cards package.
"""


class UserCardsError(Exception):
    """Base class for every error this package raises on purpose."""


class FetchError(UserCardsError):
    """The RandomUser request failed or its body could not be used."""


class MalformedRecordError(UserCardsError):
    """A fetched user dict is missing a field the cards need."""

    def __init__(self, path: str, email: str = "?"):
        super().__init__(f"user record {email!r} has no {path!r}")
        self.path = path
        self.email = email


class MountPointError(UserCardsError):
    """The page has no element with the requested id."""

    def __init__(self, element_id: str):
        super().__init__(f"page has no element with id {element_id!r}")
        self.element_id = element_id
