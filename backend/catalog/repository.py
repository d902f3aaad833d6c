# module backend.catalog.repository
"""
Catalogue statique des cours (lecture seule, chargé à l'import).
- Pas de base de données: la source de vérité est ce module.
- Les recherches sont insensibles à la casse pour les noms et codes.
"""
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from .models import Offering, PromoCode

OFFERINGS: Tuple[Offering, ...] = (
    Offering(
        id="boxfit",
        name="BoxFit Fundamentals",
        description="Technique + conditioning, beginner friendly.",
        coach="Coach Sam",
        duration_min=60,
        base_price=1000,
        capacity=16,
        emoji="🥊",
    ),
    Offering(
        id="sparring",
        name="Technical Sparring",
        description="Light, coached rounds. Own kit required.",
        coach="Coach Liv",
        duration_min=75,
        base_price=1500,
        capacity=12,
        emoji="🛡️",
    ),
    Offering(
        id="hiit",
        name="FightCamp HIIT",
        description="High-intensity intervals, full sweat.",
        coach="Coach Ade",
        duration_min=45,
        base_price=1200,
        capacity=18,
        emoji="🔥",
    ),
)

PROMO_CODES: Dict[str, PromoCode] = {
    p.code: p
    for p in (
        PromoCode(code="TEST10", fraction=Decimal("0.10")),
        PromoCode(code="STUDENT15", fraction=Decimal("0.15")),
    )
}

TIME_SLOTS: Tuple[str, ...] = ("06:30", "07:30", "09:00", "12:30", "17:30", "18:30", "19:30")
DEFAULT_TIME_SLOT = "18:30"

_BY_ID: Dict[str, Offering] = {o.id: o for o in OFFERINGS}
_BY_NAME: Dict[str, Offering] = {o.name.strip().lower(): o for o in OFFERINGS}


def list_offerings() -> List[Offering]:
    return list(OFFERINGS)


def get_offering(offering_id: Optional[str]) -> Optional[Offering]:
    return _BY_ID.get(str(offering_id or "").strip())


def find_offering_by_name(name: Optional[str]) -> Optional[Offering]:
    return _BY_NAME.get(str(name or "").strip().lower())


def resolve_offering(class_id: Optional[str] = None, class_name: Optional[str] = None) -> Optional[Offering]:
    """
    Résout l'offre à partir de classId (prioritaire) puis de className.
    Retourne None si aucune des deux clés n'est connue du catalogue.
    """
    return get_offering(class_id) or find_offering_by_name(class_name)


def get_promo(code: Optional[str]) -> Optional[PromoCode]:
    return PROMO_CODES.get(str(code or "").strip().upper())


def upcoming_days(days: int = 14, today: Optional[date] = None) -> List[date]:
    """Dates sélectionnables: aujourd'hui + les (days - 1) jours suivants."""
    start = today or date.today()
    return [start + timedelta(days=i) for i in range(days)]
