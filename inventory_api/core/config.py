"""
Configuration for the inventory service.

Settings are built once at startup (from command-line flags, falling back to
environment variables) and handed to ``create_app``; nothing reads os.environ
after that.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

ENV_HOST = "INVENTORY_HOST"
ENV_PORT = "INVENTORY_PORT"
ENV_CACHE_DIR = "INVENTORY_CACHE_DIR"
ENV_LOG_LEVEL = "INVENTORY_LOG_LEVEL"

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass(frozen=True)
class Settings:
    """Typed view of the startup configuration."""

    host: str
    port: int
    cache_dir: Path
    log_level: str = "info"


def _port(value: str) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def _cache_dir(value: str) -> Path:
    return Path(os.getcwd(), value).resolve()


def build_parser(environ: Mapping[str, str] | None = None) -> argparse.ArgumentParser:
    env = os.environ if environ is None else environ
    ap = argparse.ArgumentParser(prog="inventory-api", description="Inventory tracking HTTP service")
    ap.add_argument(
        "-H", "--host",
        default=env.get(ENV_HOST),
        required=not env.get(ENV_HOST),
        help=f"server host (env {ENV_HOST})",
    )
    ap.add_argument(
        "-P", "--port",
        type=_port,
        default=env.get(ENV_PORT),
        required=not env.get(ENV_PORT),
        help=f"server port (env {ENV_PORT})",
    )
    ap.add_argument(
        "-C", "--cache",
        dest="cache_dir",
        default=env.get(ENV_CACHE_DIR),
        required=not env.get(ENV_CACHE_DIR),
        help=f"cache directory for inventory.json and photos (env {ENV_CACHE_DIR})",
    )
    ap.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=(env.get(ENV_LOG_LEVEL) or "info").lower(),
        help=f"logging level (env {ENV_LOG_LEVEL})",
    )
    return ap


def load_settings(argv: Optional[Sequence[str]] = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Parse flags into Settings. Exits with status 2 when a required value is missing."""
    args = build_parser(environ).parse_args(argv)
    return Settings(
        host=args.host,
        port=args.port,
        cache_dir=_cache_dir(args.cache_dir),
        log_level=args.log_level,
    )


def settings_from_env(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables only (for ``uvicorn --factory``)."""
    env = os.environ if environ is None else environ
    missing = [name for name in (ENV_HOST, ENV_PORT, ENV_CACHE_DIR) if not env.get(name)]
    if missing:
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")
    try:
        port = _port(env[ENV_PORT])
    except argparse.ArgumentTypeError as exc:
        raise RuntimeError(str(exc)) from exc
    level = (env.get(ENV_LOG_LEVEL) or "info").lower()
    if level not in LOG_LEVELS:
        raise RuntimeError(f"Invalid {ENV_LOG_LEVEL}: {level}")
    return Settings(
        host=env[ENV_HOST],
        port=port,
        cache_dir=_cache_dir(env[ENV_CACHE_DIR]),
        log_level=level,
    )
