import logging
import sys
import time
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from app.config import BASE_DIR, get_settings
from app.routers import api, reports, wizard
from talent_risk import get_runtime_version


def create_app() -> FastAPI:
    # Respect runtime env overrides (tests, packaged launcher, temporary runs).
    get_settings.cache_clear()
    settings = get_settings()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title=settings.app_name)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie_name,
        same_site="lax",
        https_only=False,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins or ["http://127.0.0.1", "http://localhost"],
        allow_origin_regex=settings.cors_allow_origin_regex,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    bundle_dir = Path(getattr(sys, "_MEIPASS", str(BASE_DIR)))
    static_dir = bundle_dir / "static"
    templates_dir = bundle_dir / "templates"
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
    app.state.templates = Jinja2Templates(directory=str(templates_dir), auto_reload=True, cache_size=0)

    def _static_v(rel_path: str) -> int:
        # Cache-busting from file mtime.
        try:
            return int((static_dir / rel_path).stat().st_mtime)
        except OSError:
            return int(time.time())

    app.state.templates.env.globals["static_v"] = _static_v
    app.state.templates.env.globals["app_name"] = settings.app_name

    app.include_router(wizard.router)
    app.include_router(reports.router)
    app.include_router(api.router)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.get("/api/health")
    def api_health():
        return {"status": "ok", "version": get_runtime_version()}

    return app


app = create_app()
