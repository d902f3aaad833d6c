"""
Module 'payments' (feature-first): point d'entrée public.
Réunit le client Stripe, les erreurs de session et le cas d'usage de création de session.
"""

from .errors import SessionError, InvalidRequest, ProviderError
from .stripe_client import require_stripe, create_session
from .service import to_line_items, create_checkout_session

__all__ = [
    # errors
    "SessionError",
    "InvalidRequest",
    "ProviderError",
    # stripe
    "require_stripe",
    "create_session",
    # services
    "to_line_items",
    "create_checkout_session",
]
