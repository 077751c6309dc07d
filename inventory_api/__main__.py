"""
Run the inventory service.

Usage:
  python -m inventory_api -H 127.0.0.1 -P 3000 -C ./cache
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

import uvicorn

from inventory_api.app import create_app
from inventory_api.core.config import load_settings
from inventory_api.core.log import configure_logging

logger = logging.getLogger("inventory_api")


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = load_settings(argv)
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Server running at http://%s:%d (cache %s)", settings.host, settings.port, settings.cache_dir)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
