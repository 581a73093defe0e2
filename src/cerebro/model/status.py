"""
Application status: a closed enumeration of stages.

User input is normalised (trimmed, lower-cased, underscores turned into
hyphens) before it is matched against the enumeration. Resolution is a pure
function that returns either a Status or an UnsupportedStatus value; callers
that need an exception convert the latter themselves.
"""

from enum import Enum

from attrs import frozen


class Stage(Enum):
    """Application stages in display order, valued by their canonical text."""

    TO_APPLY = "to-apply"
    APPLIED = "applied"
    OA = "oa"
    TECH_INTERVIEW = "tech-interview"
    HR_INTERVIEW = "hr-interview"
    IN_PROCESS = "in-process"
    OFFERED = "offered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


MESSAGE_CONSTRAINTS = "Status must be one of: " + ", ".join(
    stage.value for stage in Stage
)


@frozen
class Status:
    """A company's application status; defaults to `to-apply`."""

    MESSAGE_CONSTRAINTS = MESSAGE_CONSTRAINTS

    stage: Stage = Stage.TO_APPLY

    @property
    def canonical(self) -> str:
        return self.stage.value

    def __str__(self) -> str:
        return self.stage.value


@frozen
class UnsupportedStatus:
    """Resolution failure for a token outside the enumeration."""

    token: str
    message: str = MESSAGE_CONSTRAINTS


def normalize_status_token(token: str) -> str:
    """
    Bring a user-supplied status token into canonical hyphenated form.

    Params:
        token: Raw status text, e.g. "HR_Interview"

    Returns:
        Normalised text, e.g. "hr-interview"
    """
    return token.strip().lower().replace("_", "-")


_STAGES_BY_TEXT = {stage.value: stage for stage in Stage}


def resolve_status(token: str) -> Status | UnsupportedStatus:
    """
    Resolve a status token against the closed stage enumeration.

    Params:
        token: Raw status text from the command line

    Returns:
        Status for a recognised stage, otherwise UnsupportedStatus carrying the
        original token and the enumeration's constraint message
    """
    stage = _STAGES_BY_TEXT.get(normalize_status_token(token))
    if stage is None:
        return UnsupportedStatus(token)
    return Status(stage)


def is_valid_status(token: str | None) -> bool:
    if token is None:
        return False
    return isinstance(resolve_status(token), Status)
