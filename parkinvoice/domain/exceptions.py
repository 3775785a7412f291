"""
Domain-specific exception hierarchy for the parking invoice application.
"""


class InvoicingError(Exception):
    """Base class for all application-level errors."""


class UnknownFacility(InvoicingError):
    """Raised when no rate profile exists for a parking facility id."""

    def __init__(self, facility_id: str):
        self.facility_id = facility_id
        super().__init__(f"Invalid parking facility id '{facility_id}'")


class ScheduleCoverageError(InvoicingError):
    """Raised when a tariff list has no entry for an hour of the day."""

    def __init__(self, facility_id: str, day_class: str, hour: int):
        self.facility_id = facility_id
        self.day_class = day_class
        self.hour = hour
        super().__init__(
            f"No {day_class} tariff covers hour {hour} "
            f"for parking facility '{facility_id}'"
        )


class DataSourceError(InvoicingError):
    """Raised when seed data cannot be read or parsed."""
