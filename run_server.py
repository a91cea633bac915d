"""Run the friendship API under Uvicorn."""
from __future__ import annotations

import logging
import os

import uvicorn


def main() -> None:
  log_level = os.getenv("LOG_LEVEL", "info").lower()
  logging.basicConfig(
    level=log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
  )
  uvicorn.run(
    "friendship_api.main:app",
    host=os.getenv("SOCIAL_SERVER_HOST", "0.0.0.0"),
    port=int(os.getenv("SOCIAL_SERVER_PORT", "8000")),
    reload=os.getenv("UVICORN_RELOAD", "false").lower() == "true",
    log_level=log_level,
  )


if __name__ == "__main__":
  main()
