# module backend.bookings.errors
"""Erreurs métier du parcours de réservation (jamais fatales)."""


class BookingValidationError(ValueError):
    """Champ de réservation absent ou mal formé."""

    def __init__(self, field: str, message: str = ""):
        self.field = field
        super().__init__(message or f"{self.__class__.__name__}: {field}")


class MissingFieldError(BookingValidationError):
    def __init__(self, field: str, message: str = ""):
        super().__init__(field, message or f"Missing required field: {field}")


class InvalidFieldError(BookingValidationError):
    def __init__(self, field: str, message: str = ""):
        super().__init__(field, message or f"Invalid field: {field}")


class NoBackendAvailable(RuntimeError):
    """Aucun endpoint de session ne répond et aucun Payment Link n'est configuré."""
