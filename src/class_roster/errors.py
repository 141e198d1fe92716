"""Exception types raised by roster operations."""

from __future__ import annotations


class RosterError(RuntimeError):
    """Base class for every failure a roster operation can report."""


class RosterNotFoundError(RosterError):
    """A roster document or a student is not where it was expected."""


class RosterAlreadyExistsError(RosterError):
    pass


class CorruptRosterError(RosterError):
    """A roster document exists but does not decode into students."""


class RosterIOError(RosterError):
    pass


class NoActiveRosterError(RosterError):
    """The operation needs a loaded roster but none is selected."""


class EmptyRosterError(RosterError):
    pass


class InvalidNameError(RosterError, ValueError):
    """A class or student name that cannot be stored."""
