import json
import os
import secrets
import sys
import tempfile
from functools import lru_cache
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _load_env_file_if_present() -> None:
    env_file = BASE_DIR / ".env"
    if not env_file.exists():
        return
    try:
        lines = env_file.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return

    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key or key in os.environ:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        os.environ[key] = value


_load_env_file_if_present()


_SECRET_KEY_PLACEHOLDER = "change-me-talent-risk-secret"
_RUNTIME_SECRETS_FILENAME = ".runtime_secrets.json"
_RUNTIME_GENERATED_VALUES: dict[str, str] = {}


def _default_runtime_dir() -> Path:
    if getattr(sys, "frozen", False) or getattr(sys, "_MEIPASS", ""):
        candidates: list[Path] = []
        local_appdata = os.getenv("LOCALAPPDATA", "").strip()
        if local_appdata:
            candidates.append(Path(local_appdata) / "BilingualTalentRisk" / "data")
        candidates.append(Path.home() / ".bilingual_talent_risk" / "data")
        candidates.append(Path(tempfile.gettempdir()) / "BilingualTalentRisk" / "data")

        for path in candidates:
            try:
                path.mkdir(parents=True, exist_ok=True)
                return path
            except OSError:
                continue
    return BASE_DIR / "data"


def _runtime_secrets_store_path(runtime_dir: Path) -> Path:
    return runtime_dir / _RUNTIME_SECRETS_FILENAME


def _load_runtime_secrets_store(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(payload, dict):
        return {}
    return {str(k): str(v) for k, v in payload.items() if isinstance(k, str) and isinstance(v, str)}


def _save_runtime_secrets_store(path: Path, values: dict[str, str]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(values, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, path)
    except OSError:
        return


def _runtime_secret(env_name: str, runtime_dir: Path, *, placeholder: str = "", token_size: int = 32) -> str:
    current = os.getenv(env_name, "").strip()
    if current and current != placeholder:
        return current
    if env_name in _RUNTIME_GENERATED_VALUES:
        return _RUNTIME_GENERATED_VALUES[env_name]

    store_path = _runtime_secrets_store_path(runtime_dir)
    persisted_values = _load_runtime_secrets_store(store_path)
    persisted = persisted_values.get(env_name, "").strip()
    if persisted:
        _RUNTIME_GENERATED_VALUES[env_name] = persisted
        return persisted

    generated = secrets.token_urlsafe(token_size)
    _RUNTIME_GENERATED_VALUES[env_name] = generated
    persisted_values[env_name] = generated
    _save_runtime_secrets_store(store_path, persisted_values)
    return generated


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in (raw or "").split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.app_name: str = os.getenv("APP_NAME", "Bilingual Talent Intelligence")
        self.app_env: str = os.getenv("APP_ENV", "dev")
        self.runtime_dir: Path = Path(os.getenv("RUNTIME_DIR", str(_default_runtime_dir()))).expanduser()
        self.runtime_dir.mkdir(parents=True, exist_ok=True)
        self.secret_key: str = _runtime_secret("SECRET_KEY", self.runtime_dir, placeholder=_SECRET_KEY_PLACEHOLDER)
        self.session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "talent_risk_session")
        self.cors_allowed_origins: list[str] = _split_csv(
            os.getenv(
                "CORS_ALLOWED_ORIGINS",
                "http://127.0.0.1,http://localhost,http://127.0.0.1:56471,http://localhost:56471",
            )
        )
        self.cors_allow_origin_regex: str = os.getenv(
            "CORS_ALLOW_ORIGIN_REGEX",
            r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
