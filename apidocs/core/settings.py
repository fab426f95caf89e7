"""
Runtime settings.

Read from the environment once, when the app is assembled. Defaults match
the fixed behaviour of the service (port 3311, the docs/swagger.yaml shipped
inside the package), so an unconfigured process serves exactly that.

Environment:
    APIDOCS_HOST                      listener address (default 0.0.0.0)
    APIDOCS_PORT / PORT               listener port (default 3311)
    APIDOCS_SPEC_FILE                 file served at /api-docs
    APIDOCS_ENV                       dev | prod (default dev)
    APIDOCS_CORS_ORIGINS              comma separated, default "*"
    APIDOCS_SECURITY_HEADERS_ENABLED  default on in prod only
    APIDOCS_LOG_LEVEL                 uvicorn level name, default info
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

# Lives next to the code so an installed package finds it without config.
PACKAGE_DIR = Path(__file__).resolve().parents[1]

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3311
DEFAULT_SPEC_FILE = PACKAGE_DIR / "docs" / "swagger.yaml"

_TRUTHY = ("1", "true", "yes", "on")

# uvicorn level names -> stdlib logging levels ("trace" is uvicorn-only).
LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


def _env(environ: Mapping[str, str], key: str, default: str = "") -> str:
    return (environ.get(key) or default).strip()


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"invalid port {raw!r}: expected an integer") from None
    if not 0 < port < 65536:
        raise ValueError(f"invalid port {port}: expected 1-65535")
    return port


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


def _parse_log_level(raw: str) -> str:
    level = raw.lower()
    if level not in LOG_LEVELS:
        raise ValueError(f"invalid log level {raw!r}: expected one of {', '.join(LOG_LEVELS)}")
    return level


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    spec_file: Path = DEFAULT_SPEC_FILE
    env: str = "dev"
    cors_origins: Tuple[str, ...] = field(default=("*",))
    security_headers: bool = False
    log_level: str = "info"

    @property
    def is_prod(self) -> bool:
        return self.env == "prod"

    @property
    def logging_level(self) -> int:
        return LOG_LEVELS[self.log_level]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        e = os.environ if environ is None else environ

        env = _env(e, "APIDOCS_ENV", "dev").lower()
        port_raw = _env(e, "APIDOCS_PORT") or _env(e, "PORT") or str(DEFAULT_PORT)

        spec_raw = _env(e, "APIDOCS_SPEC_FILE")
        spec_file = Path(spec_raw).expanduser() if spec_raw else DEFAULT_SPEC_FILE

        sec_raw = _env(e, "APIDOCS_SECURITY_HEADERS_ENABLED", "true" if env == "prod" else "false")

        return cls(
            host=_env(e, "APIDOCS_HOST", DEFAULT_HOST),
            port=_parse_port(port_raw),
            spec_file=spec_file,
            env=env,
            cors_origins=_parse_origins(_env(e, "APIDOCS_CORS_ORIGINS")),
            security_headers=_parse_bool(sec_raw),
            log_level=_parse_log_level(_env(e, "APIDOCS_LOG_LEVEL", "info")),
        )
