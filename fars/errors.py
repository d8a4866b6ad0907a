"""Exceptions raised by the FARS helpers."""


class InvalidStateError(ValueError):
    """Raised when a state code is absent from a year's ``STATE`` column."""

    def __init__(self, state_num: int):
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")
