from app.routers import api, reports, wizard

__all__ = [
    "api",
    "reports",
    "wizard",
]
