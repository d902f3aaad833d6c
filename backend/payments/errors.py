# module backend.payments.errors
from typing import List, Optional


class SessionError(Exception):
    """Échec de création de session Checkout (avant ou pendant l'appel Stripe)."""


class InvalidRequest(SessionError):
    """Demande rejetée avant tout appel Stripe."""

    def __init__(self, missing: Optional[List[str]] = None, invalid: Optional[List[str]] = None):
        self.missing = list(missing or [])
        self.invalid = list(invalid or [])
        super().__init__(f"InvalidRequest(missing={self.missing}, invalid={self.invalid})")


class ProviderError(SessionError):
    """Erreur Stripe (clé, réseau, paramètres refusés). diagnostic: usage serveur uniquement."""

    def __init__(self, diagnostic: str = ""):
        self.diagnostic = diagnostic
        super().__init__(diagnostic or "ProviderError")
