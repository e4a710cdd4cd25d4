from __future__ import annotations

import argparse
import os
import time

from .logging_setup import setup_logging
from .runtime.server import run


def main() -> None:
    p = argparse.ArgumentParser(prog="rollbook", description="rollbook: in-memory student record registry")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--log-level", default=None, help="Python/uvicorn log level (default: $LOG_LEVEL or info)")
    p.add_argument("--access-log", action="store_true")
    args = p.parse_args()

    setup_logging(args.log_level)
    level = (args.log_level or os.getenv("LOG_LEVEL") or "info").lower()

    srv = run(host=args.host, port=args.port, log_level=level, access_log=args.access_log, new_server=True)
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
