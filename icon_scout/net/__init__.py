"""icon_scout.net: HTTP fetching with fixed-delay retry."""

from .fetcher import Fetcher, create_session
from .models import FailureKind, FetchFailure, FetchOutcome, FetchSuccess

__all__ = ["Fetcher", "create_session", "FailureKind", "FetchFailure", "FetchOutcome", "FetchSuccess"]
