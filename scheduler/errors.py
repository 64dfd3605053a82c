"""
Domain errors raised by the allocation system.

All of them are caller-recoverable validation failures.
"""


class VaccinationError(Exception):
    """Base class for every error raised by the campaign."""


class DuplicateIdentityError(VaccinationError):
    """A person or hub with the same identifier already exists."""


class UnknownHubError(VaccinationError):
    """No hub is registered under the given name."""


class UnknownPersonError(VaccinationError):
    """No person is registered under the given ssn."""


class StaffingNotConfiguredError(VaccinationError):
    """Capacity was requested before the hub's staff was set."""


class InvalidScheduleShapeError(VaccinationError):
    """Weekly hours are not 7 values within the daily cap."""


class InvalidIntervalBreakpointsError(VaccinationError):
    """Breakpoints are negative or not strictly increasing, or a label is malformed."""


class InvalidHeaderError(VaccinationError):
    """The people CSV does not start with the expected header."""


class InvalidRecordError(VaccinationError):
    """A person or hub record failed validation (e.g. empty ssn or name)."""
