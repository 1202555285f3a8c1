"""
Environment-driven settings.

Values come from the process environment; a .env file in the working
directory is loaded first so local runs do not need exported variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Mapping, Optional

from dotenv import load_dotenv

from .errors import StartupConfigError

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"
DEFAULT_CORS_ORIGINS = "http://localhost:3000"
DEFAULT_MONGODB_URI = "mongodb://localhost:27017/aiml_department"


def _flag(value: Optional[str]) -> bool:
    return (value or "false").strip().lower() == "true"


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    if env is None:
        load_dotenv()
        return os.environ
    return env


def _number(env: Mapping[str, str], name: str, default: str, cast: Callable, minimum):
    raw = env.get(name, default)
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        raise StartupConfigError(f"{name} must be a number, got {raw!r}")
    if value < minimum:
        raise StartupConfigError(f"{name} must be at least {minimum}, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    gemini_api_key: Optional[str]
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_s: float = 30.0
    data_dir: Path = DEFAULT_DATA_DIR
    demo_mode: bool = False
    history_limit: int = 10
    log_level: str = "INFO"


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment, failing fast on a missing API key."""
    env = _environment(env)

    demo_mode = _flag(env.get("DEMO_MODE"))
    api_key = (env.get("GEMINI_API_KEY") or "").strip() or None
    if not api_key and not demo_mode:
        raise StartupConfigError(
            "GEMINI_API_KEY is not set. Export it or add it to .env "
            "(or set DEMO_MODE=true to run with keyword fallbacks only)."
        )

    return Settings(
        gemini_api_key=api_key,
        gemini_model=env.get("GEMINI_MODEL", "gemini-1.5-flash"),
        gemini_base_url=env.get("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta").rstrip("/"),
        gemini_timeout_s=_number(env, "GEMINI_TIMEOUT_S", "30", float, 0.1),
        data_dir=Path(env.get("DATA_DIR") or DEFAULT_DATA_DIR),
        demo_mode=demo_mode,
        history_limit=_number(env, "HISTORY_LIMIT", "10", int, 1),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )


def load_cors_origins(env: Optional[Mapping[str, str]] = None) -> List[str]:
    # read when the app object is built, before the startup hook runs
    env = _environment(env)
    return [o.strip() for o in env.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",") if o.strip()]


def load_mongodb_uri(env: Optional[Mapping[str, str]] = None) -> str:
    return _environment(env).get("MONGODB_URI") or DEFAULT_MONGODB_URI
