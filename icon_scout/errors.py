"""Exception hierarchy for IconScout."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from icon_scout.net.models import FetchFailure


class IconScoutError(Exception):
    """Base class for all project errors."""


class DecodeError(IconScoutError):
    """A candidate's payload could not be turned into a bitmap."""


class InvalidTargetError(IconScoutError):
    """The URL handed to a lookup cannot be parsed into a page address."""


class PageFetchError(IconScoutError):
    """The page itself could not be fetched, so there is nothing to inspect."""

    def __init__(self, failure: "FetchFailure") -> None:
        self.failure = failure
        super().__init__(failure.describe())


__all__ = ["IconScoutError", "DecodeError", "InvalidTargetError", "PageFetchError"]
