"""
Registre central des routers (catalogue, devis, paiements, health).
"""
from fastapi import FastAPI
from backend.catalog import views as catalog_views
from backend.pricing import views as pricing_views
from backend.payments import views as payments_views
from backend.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    """
    Agrège tous les routers de l’application.
    - Tous les chemins sont sous /api (le front est servi séparément).
    """
    app.include_router(catalog_views.router)
    app.include_router(pricing_views.router)
    app.include_router(payments_views.router)
    # Health & monitoring
    app.include_router(health_router)
