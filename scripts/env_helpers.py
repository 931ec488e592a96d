"""Helpers for reading/updating the root .env used by local runs. Uses python-dotenv."""

import sys
from pathlib import Path

from dotenv import dotenv_values, set_key as dotenv_set_key

# Workspace root (parent of scripts/).
WORKSPACE_ROOT = Path(__file__).resolve().parent.parent


def root_env_path() -> Path:
    """Path to the root .env (the file FINREELS_ENV_FILE usually points at)."""
    return WORKSPACE_ROOT / ".env"


def load_env(path: str | Path) -> dict[str, str | None]:
    """Read a .env-style file into a dict; an absent file reads as empty."""
    path = Path(path)
    if not path.exists():
        return {}
    return dict(dotenv_values(path))


def set_env_var(path: str | Path, key: str, value: str) -> None:
    """Ensure key=value exists in the file. Update if key exists, else append. Uses python-dotenv set_key (quote_mode=never)."""
    path = Path(path)
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")
    dotenv_set_key(path, key, value, quote_mode="never")


def fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)
