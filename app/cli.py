"""Small CLI helpers exposed as project scripts for developer convenience.

Usage (from project root):
  runserver --host=0.0.0.0 --port=8000 --no-reload
  run-tests
  migrate                # defaults to `alembic upgrade head`
  init-env               # copies .env.example -> .env if missing
  issue-token 42         # mint a credential for user 42 with SECRET_KEY
"""
from __future__ import annotations

import sys
import shutil
import subprocess
from pathlib import Path
from typing import List


def _args() -> List[str]:
    return sys.argv[1:]


def runserver() -> None:
    """Run Uvicorn programmatically. Accepts simple flags:

    --host=<host>  (default 127.0.0.1)
    --port=<port>  (default 8000)
    --no-reload    (disable auto-reload)
    --reload       (enable auto-reload)
    """
    import uvicorn

    host = "127.0.0.1"
    port = 8000
    reload = True

    for a in _args():
        if a.startswith("--host="):
            host = a.split("=", 1)[1]
        elif a.startswith("--port="):
            value = a.split("=", 1)[1]
            if not value.isdigit():
                sys.exit(f"Invalid port: {value}")
            port = int(value)
        elif a == "--no-reload":
            reload = False
        elif a == "--reload":
            reload = True

    print(f"Starting uvicorn on {host}:{port} (reload={reload})")
    uvicorn.run("app.main:app", host=host, port=port, reload=reload)


def run_tests() -> None:
    """Run pytest with any forwarded args."""
    cmd = ["pytest"] + _args()
    subprocess.run(cmd, check=True)


def run_migrations() -> None:
    """Run alembic. If no args provided, runs `alembic upgrade head`."""
    args = _args()
    cmd = ["alembic"] + (args or ["upgrade", "head"])
    subprocess.run(cmd, check=True)


def init_env() -> None:
    """Copy `.env.example` to `.env` if `.env` is missing."""
    root = Path(__file__).resolve().parents[1]
    src = root / ".env.example"
    dst = root / ".env"
    if dst.exists():
        print(f".env already exists at {dst}")
        return
    if not src.exists():
        print(f".env.example not found at {src}")
        return
    shutil.copy(src, dst)
    print(f"Created .env from .env.example at {dst}")


def issue_token() -> None:
    """Print a credential for the given user id using the configured key.

    Numeric ids are encoded as integers, anything else as a string.
    """
    from app.core.config import settings
    from app.core.keys import build_token_pair

    args = _args()
    if len(args) != 1:
        sys.exit("usage: issue-token <user_id>")
    raw = args[0]
    user_id = int(raw) if raw.isdigit() else raw

    issuer, _ = build_token_pair(settings)
    print(issuer.issue(user_id))


if __name__ == "__main__":
    # Allow running the helpers directly: python -m app.cli runserver
    if len(sys.argv) <= 1:
        print(__doc__)
        sys.exit(0)
    cmd = sys.argv[1]
    sys.argv.pop(1)
    if cmd == "runserver":
        runserver()
    elif cmd in ("run-tests", "tests", "test"):
        run_tests()
    elif cmd in ("migrate", "alembic"):
        run_migrations()
    elif cmd in ("init-env", "initenv"):
        init_env()
    elif cmd in ("issue-token", "token"):
        issue_token()
    else:
        print(f"Unknown command: {cmd}")
