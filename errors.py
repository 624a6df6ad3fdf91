"""Exception types raised by the tutor core.

Every failure is raised synchronously before any state is mutated, so the
caller can inspect the exception type to learn which precondition failed.
"""


class TutorError(Exception):
    """Base class for all tutor errors."""


class InvalidArgumentError(TutorError, ValueError):
    """An argument was outside its accepted range (e.g. negative XP)."""


class ResourceExhaustedError(TutorError):
    """No energy remains to attempt another question."""


class NotFoundError(TutorError, LookupError):
    """A referenced lesson, question or achievement does not exist."""
