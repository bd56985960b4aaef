"""
Run Alembic against the bundled migrations without an alembic.ini.

    python -m mailshrimp_api.db.run_migrations upgrade head
    python -m mailshrimp_api.db.run_migrations downgrade -1
    python -m mailshrimp_api.db.run_migrations current
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, List, Sequence

from alembic import command
from alembic.config import Config

from mailshrimp_api.db.config import get_settings

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"

# command name -> (alembic function, default positional args)
COMMANDS: Dict[str, tuple[Callable[..., object], Sequence[str]]] = {
    "upgrade": (command.upgrade, ("head",)),
    "downgrade": (command.downgrade, ("-1",)),
    "current": (command.current, ()),
    "heads": (command.heads, ()),
    "history": (command.history, ()),
}


# PUBLIC_INTERFACE
def build_config() -> Config:
    """Alembic Config for the migrations directory beside this module."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # Offline mode reads this; online mode connects through env.py.
    cfg.set_main_option("sqlalchemy.url", get_settings().sync_database_url)
    return cfg


# PUBLIC_INTERFACE
def main(argv: List[str] | None = None) -> None:
    """Dispatch `<command> [args...]` to Alembic; exits non-zero on bad usage."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in COMMANDS:
        sys.exit(f"usage: run_migrations {{{'|'.join(COMMANDS)}}} [args...]")
    func, defaults = COMMANDS[args[0]]
    func(build_config(), *(args[1:] or defaults))


if __name__ == "__main__":
    main()
