#!/usr/bin/env python3
"""
Production startup script.

1. Runs migrations (release.py)
2. Starts gunicorn (replaces this process via os.execvp)

Usage:
    python scripts/start.py
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logger = logging.getLogger("crm.start")


def resolve_port(raw: str | None) -> int:
    port = (raw or "").strip()
    if not port:
        logger.warning("PORT not set, using default 8080")
        return 8080
    port_int = int(port)
    if port_int < 1 or port_int > 65535:
        raise ValueError(f"Invalid PORT value '{port}'. Must be integer 1-65535.")
    return port_int


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")
    try:
        port = resolve_port(os.environ.get("PORT"))
    except ValueError as e:
        logger.error("%s", e)
        sys.exit(1)

    from scripts.release import run_release
    try:
        run_release()
    except Exception:
        logger.exception("Release failed")
        sys.exit(1)

    logger.info("Starting gunicorn on 0.0.0.0:%s", port)
    # exec so gunicorn becomes PID 1 and receives signals directly
    os.execvp(
        "gunicorn",
        [
            "gunicorn",
            "app.wsgi:app",
            "--bind", f"0.0.0.0:{port}",
            "--workers", "2",
            "--timeout", "60",
            "--preload",
            "--access-logfile", "-",
            "--error-logfile", "-",
        ],
    )


if __name__ == "__main__":
    main()
