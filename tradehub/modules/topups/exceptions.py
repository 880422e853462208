"""Top-up failure taxonomy."""

from .models import TopupFailure


class TopupError(Exception):
    """Base class for top-up errors; ``failure`` tags the result handed back to callers."""

    failure: TopupFailure


class ValidationError(TopupError):
    """A required field is missing or the amount is unusable."""

    failure = TopupFailure.VALIDATION


class NotFoundError(TopupError):
    """The user being topped up does not exist."""

    failure = TopupFailure.NOT_FOUND


class PersistenceError(TopupError):
    """The store rejected the insert or the wallet update, or returned nothing."""

    failure = TopupFailure.PERSISTENCE
