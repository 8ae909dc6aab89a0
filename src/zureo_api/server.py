from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import requests
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from . import __version__
from .adjust import adjust_stock
from .config import Settings
from .errors import ZureoError
from .logger import get_logger
from .session import SessionManager
from .stock import get_stock

log = get_logger("server")

ENDPOINTS = [
    "GET|POST /zureo/login                  -> Inicia sesión en Zureo",
    "GET      /zureo/stock/:sku             -> Devuelve el stock de un artículo",
    "GET      /zureo/ajustar/:sku/:cantidad -> Ajusta el stock de un artículo",
    "GET|POST /zureo/logout                 -> Cierra la sesión del navegador",
    "GET      /health                       -> Estado del servicio",
]


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def selenium_status(settings):
    if not settings.selenium_remote_url:
        return "local"
    try:
        res = requests.get(f"{settings.selenium_remote_url.rstrip('/')}/status", timeout=2)
        res.raise_for_status()
        ready = res.json().get("value", {}).get("ready", False)
    except (requests.RequestException, ValueError) as e:
        log.debug(f"Selenium hub unreachable: {e}")
        return "down"
    return "up" if ready else "down"


def get_manager(request: Request) -> SessionManager:
    return request.app.state.manager


def create_app(settings=None, manager=None):
    settings = settings or Settings.from_env()
    manager = manager or SessionManager(settings)

    @asynccontextmanager
    async def lifespan(app):
        yield
        manager.shutdown()

    app = FastAPI(title="Zureo API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.manager = manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(ZureoError)
    async def zureo_error(request: Request, exc: ZureoError):
        log.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        # the server logs the traceback when the error is re-raised
        return JSONResponse(status_code=500, content={"error": "Error interno del servidor"})

    def _login(manager, body):
        manager.login(
            email=body.username if body else None,
            password=body.password if body else None,
        )
        return {
            "success": True,
            "status": "ok",
            "message": "Sesión iniciada correctamente",
            "timestamp": now_iso(),
        }

    @app.get("/zureo/login")
    def login_get(manager: SessionManager = Depends(get_manager)):
        return _login(manager, None)

    @app.post("/zureo/login")
    def login_post(body: Optional[LoginRequest] = None, manager: SessionManager = Depends(get_manager)):
        return _login(manager, body)

    @app.get("/zureo/stock/{sku}")
    def stock_api(sku: str, manager: SessionManager = Depends(get_manager)):
        return manager.run(get_stock, sku)

    @app.get("/zureo/ajustar/{sku}/{cantidad}")
    def adjust_api(sku: str, cantidad: str, manager: SessionManager = Depends(get_manager)):
        return manager.run(adjust_stock, sku, cantidad)

    @app.api_route("/zureo/logout", methods=["GET", "POST"])
    def logout_api(manager: SessionManager = Depends(get_manager)):
        manager.logout()
        return {"success": True, "message": "Sesión cerrada"}

    @app.get("/")
    def index():
        return {
            "service": "zureo-api",
            "version": __version__,
            "endpoints": ENDPOINTS,
        }

    @app.get("/health")
    def health(manager: SessionManager = Depends(get_manager)):
        return {
            "status": "UP",
            "session": manager.status(),
            "selenium": selenium_status(settings),
            "timestamp": now_iso(),
        }

    return app

