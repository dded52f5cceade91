from __future__ import annotations

from fastapi import FastAPI

from api.routes.descriptions import router as descriptions_router


def create_app() -> FastAPI:
    app = FastAPI(title="Portfolio Descriptions API", version="0.1.0")
    app.include_router(descriptions_router)

    @app.get("/healthz")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
