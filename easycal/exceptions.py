"""
Errors raised by the EasyCal utility layer
"""


class InvalidPeriodError(ValueError):
    """Raised when a statistics period tag is not recognised."""

    def __init__(self, period):
        self.period = period
        super().__init__(f"Invalid period: {period}")
