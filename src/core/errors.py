"""Exception hierarchy for the destination pipeline."""
from __future__ import annotations


class DestinationError(Exception):
    """Base class for pipeline errors."""


class RecommendationError(DestinationError):
    """The model produced no usable destination candidates."""


class ModelResponseError(DestinationError):
    """The model answered with something that is not the expected JSON text."""


class CandidateSkipped(DestinationError):
    """A candidate could not be resolved into a concrete location."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason
