# backend.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

"""
Configuration centrale du backend.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose la clé Stripe, le domaine de redirection et le CORS
- Fournit les URLs de retour du checkout (succès / annulation)
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _split_env(v: str) -> list:
    return [x.strip() for x in (v or "").split(",") if x.strip()]

# Stripe: clé secrète (obligatoire au démarrage, cf. lifespan)
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")

# Domaine public du front: sert à construire success_url / cancel_url
DOMAIN = _clean_env(os.getenv("DOMAIN") or "http://localhost:3000").rstrip("/")

# CORS: CORS_ORIGINS (liste) sinon FRONTEND_URL
CORS_ORIGINS = _split_env(os.getenv("CORS_ORIGINS") or os.getenv("FRONTEND_URL") or "http://localhost:3000")

# Port d'écoute par défaut (python -m backend)
PORT = int(os.getenv("PORT", "8787"))

# Devise unique (pas de conversion)
CHECKOUT_CURRENCY = _clean_env(os.getenv("CHECKOUT_CURRENCY") or "gbp").lower()

# Moyens de paiement proposés sur la page hébergée
PAYMENT_METHOD_TYPES = _split_env(os.getenv("PAYMENT_METHOD_TYPES") or "card,link,klarna,paypal")

# Marqueurs de retour ajoutés par Stripe (le placeholder est résolu par Stripe)
CHECKOUT_SUCCESS_QUERY = "?success=1&ref={CHECKOUT_SESSION_ID}"
CHECKOUT_CANCEL_QUERY = "?canceled=1"


def checkout_success_url() -> str:
    return f"{DOMAIN}/{CHECKOUT_SUCCESS_QUERY}"


def checkout_cancel_url() -> str:
    return f"{DOMAIN}/{CHECKOUT_CANCEL_QUERY}"


class ConfigurationError(RuntimeError):
    """Configuration invalide: le processus refuse de démarrer."""


def require_stripe_secret() -> str:
    """Lève ConfigurationError si STRIPE_SECRET_KEY est absente (lue à l'appel, patchable en tests)."""
    if not STRIPE_SECRET_KEY:
        raise ConfigurationError("STRIPE_SECRET_KEY is missing. Did you create a .env file?")
    return STRIPE_SECRET_KEY
