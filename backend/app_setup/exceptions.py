"""
Gestionnaires d’exceptions utilisés par la factory.
- HTTPException (404, 429, ...) => JSON {"error": ...} comme les autres réponses de l’API.
- Erreurs de validation pydantic sur les routes JSON => 400 {"error": ..., "fields": [...]}.
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def json_http_errors(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def json_validation_errors(request: Request, exc: RequestValidationError):
        fields = [".".join(str(p) for p in err.get("loc", ())[1:]) for err in exc.errors()]
        return JSONResponse(status_code=400, content={"error": "Invalid request body", "fields": fields})
