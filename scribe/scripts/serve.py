"""Run the transcription stream server under uvicorn."""

from __future__ import annotations

import os
import argparse

import uvicorn

from scribe.config.server import ENV_HOST, ENV_PORT, DEFAULT_HOST, DEFAULT_PORT


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Streaming consultation transcription server")
    p.add_argument("--host", default=os.getenv(ENV_HOST) or DEFAULT_HOST)
    p.add_argument("--port", type=int, default=int(os.getenv(ENV_PORT) or DEFAULT_PORT))
    p.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    uvicorn.run("scribe.server:app", host=args.host, port=args.port, reload=args.reload, log_config=None)


if __name__ == "__main__":
    main()
