# icon_scout/net/models.py
"""
Outcome types produced by :class:`icon_scout.net.fetcher.Fetcher`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    STATUS = "status"


@dataclass(frozen=True, slots=True)
class FetchSuccess:
    """Body of a 200 response together with its Content-Type header."""

    url: str
    body: bytes
    content_type: str = ""
    attempts: int = 1


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """The last failure observed once every attempt has been spent."""

    url: str
    kind: FailureKind
    attempts: int
    status: Optional[int] = None
    error: Optional[str] = None

    def describe(self) -> str:
        if self.kind is FailureKind.STATUS:
            return f"{self.url} returned status code {self.status} after {self.attempts} attempt(s)"
        return f"{self.url} failed after {self.attempts} attempt(s): {self.error}"


FetchOutcome = Union[FetchSuccess, FetchFailure]
