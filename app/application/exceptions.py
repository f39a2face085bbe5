class NLUUpstreamError(RuntimeError):
    """Raised when the NLU provider fails (timeouts, network errors, service unavailable)."""
    pass


class NLUContractError(RuntimeError):
    """Raised when the NLU provider answers with something that is not the agreed JSON."""
    pass


class ReservationValidationError(ValueError):
    """Raised when reservation input fails validation. `field` names the offending field."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ReservationNotFoundError(LookupError):
    """Raised when no reservation exists for the given id."""

    def __init__(self, reservation_id: str) -> None:
        super().__init__("Reservation not found")
        self.reservation_id = reservation_id
