# module backend.bookings.flow
"""
Action "payer" du parcours, côté client.
Ordre des tentatives:
  1) endpoint serveur /api/create-checkout-session (Stripe Checkout recommandé)
  2) Payment Link du cours (aucun serveur requis)
  3) simulation locale si demo=True (?demo=1)
Sinon NoBackendAvailable.
"""
import logging
import secrets
import string
from typing import Optional
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from .errors import MissingFieldError, NoBackendAvailable
from .models import BookingSelection

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://localhost:8787/api/create-checkout-session"
NO_BACKEND_MESSAGE = "No backend found. Add a Payment Link, deploy the tiny server, or use ?demo=1."

_REF_ALPHABET = string.ascii_lowercase + string.digits


class PaymentOutcome(BaseModel):
    kind: str  # "redirect" | "payment_link" | "demo"
    url: str
    message: str = ""


def demo_reference(length: int = 8) -> str:
    return "".join(secrets.choice(_REF_ALPHABET) for _ in range(length))


def _request_session_url(selection: BookingSelection, endpoint: str, client: httpx.Client) -> Optional[str]:
    try:
        res = client.post(endpoint, json=selection.to_payload())
    except httpx.HTTPError as e:
        logger.warning("flow.start_payment endpoint unreachable endpoint=%s error=%s", endpoint, e)
        return None
    if not res.is_success:
        logger.info("flow.start_payment endpoint refused status=%s", res.status_code)
        return None
    try:
        data = res.json()
    except ValueError:
        return None
    # Corps JSON qui n'est pas un objet: on passe au fallback suivant
    url = data.get("url") if isinstance(data, dict) else None
    return url or None


def start_payment(
    selection: BookingSelection,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    demo: bool = False,
    http_client: Optional[httpx.Client] = None,
) -> PaymentOutcome:
    """
    Lance le paiement pour la sélection courante.
    - Lève MissingFieldError si le nom ou l'email manque (bandeau côté UI).
    - Lève NoBackendAvailable si aucune voie de paiement n'aboutit.
    """
    if not selection.name:
        raise MissingFieldError("name", "Please add your name and email first.")
    if not selection.email:
        raise MissingFieldError("email", "Please add your name and email first.")

    client = http_client or httpx.Client(timeout=15)
    try:
        url = _request_session_url(selection, endpoint, client)
    finally:
        if http_client is None:
            client.close()
    if url:
        return PaymentOutcome(kind="redirect", url=url)

    offering = selection.offering
    if offering and offering.payment_link:
        return PaymentOutcome(
            kind="payment_link",
            url=offering.payment_link,
            message="Opened Stripe Payment Link in a new tab. After paying, return here.",
        )

    if demo:
        query = urlencode({"demo": "1", "success": "1", "ref": demo_reference()})
        return PaymentOutcome(kind="demo", url=f"?{query}", message="Demo success! This simulates a paid booking.")

    raise NoBackendAvailable(NO_BACKEND_MESSAGE)
