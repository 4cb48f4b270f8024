import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from config import SECRET_KEY, SESSION_MAX_AGE, LOG_LEVEL
from db import init_db
from routers import auth, cart

logging.getLogger("uvicorn.error").setLevel(LOG_LEVEL)

# Comandos varios
# python scripts/seed_catalog.py
# uvicorn main:app --reload


# --- Ciclo de vida ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()   # crea tablas una sola vez al boot
    yield


def create_app() -> FastAPI:
    app = FastAPI(lifespan=lifespan)

    app.add_middleware(SessionMiddleware, secret_key=SECRET_KEY, max_age=SESSION_MAX_AGE)

    app.include_router(auth.router)
    app.include_router(cart.router)

    # ruta de prueba para verificar que la app que corre es esta
    @app.get("/ping")
    def ping():
        return {"ok": True}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
