"""
Type definitions used across layers
"""

from enum import StrEnum

# Closed range the secret is drawn from (inclusive on both ends).
MIN_GUESS = 1
MAX_GUESS = 100


class Status(StrEnum):
    ACTIVE = "active"
    COMPLETE = "complete"


class Outcome(StrEnum):
    """Result of comparing a guess against the secret."""

    CORRECT = "correct"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"

    @property
    def message(self) -> str:
        return _OUTCOME_MESSAGES[self]


_OUTCOME_MESSAGES = {
    Outcome.CORRECT: "Congratulations! You guessed the correct number.",
    Outcome.TOO_LOW: "Your guess is too low. Try a higher number.",
    Outcome.TOO_HIGH: "Your guess is too high. Try a lower number.",
}


class LinkMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class MediaType(StrEnum):
    JSON = "application/json"
    FORM = "application/x-www-form-urlencoded"
    HTML = "text/html"
    XHTML = "application/xhtml+xml"
