"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `backend.asgi:app`.
- Toute la configuration FastAPI (routes, middlewares, lifespan) est centralisée dans
  backend.app_setup.factory, ce fichier ne fait qu’exposer l’instance `app`.
"""

from backend.app import app

if __name__ == "__main__":
    # Exécution directe utile en développement local (uvicorn standalone).
    import uvicorn
    from backend.config import PORT
    uvicorn.run(
        "backend.asgi:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,     # rechargement automatique en dev
    )
