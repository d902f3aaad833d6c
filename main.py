import os
from datetime import date

from backend.bookings.errors import BookingValidationError, NoBackendAvailable
from backend.bookings.flow import start_payment
from backend.bookings.models import BookingSelection

# Réservation d'exemple contre un backend local (python -m backend)
def main():
    selection = BookingSelection(
        name=os.getenv("BOOKING_NAME", "Demo User"),
        email=os.getenv("BOOKING_EMAIL", "demo@example.com"),
        promo=os.getenv("BOOKING_PROMO", ""),
        date=date.today(),
    )
    selection.set_offering(os.getenv("BOOKING_CLASS", "boxfit"))
    endpoint = os.getenv("BOOKING_ENDPOINT", "http://localhost:8787/api/create-checkout-session")
    try:
        outcome = start_payment(selection, endpoint=endpoint, demo=os.getenv("BOOKING_DEMO") == "1")
        print(f"{outcome.kind}: {outcome.url}")
    except (BookingValidationError, NoBackendAvailable) as e:
        print(f"Erreur: {e}")

if __name__ == "__main__":
    main()
