"""Engines and sessions for the scoreboard database.

A file database gets a pooled engine, so every session runs on its own
connection and sees only committed data from other sessions. The
in-memory database exists only inside one connection and is shared
through a StaticPool instead.
"""

from __future__ import annotations

import os
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from scoreboard.db.schema import Base

# Default database path, overridable with SCOREBOARD_DB_PATH
DEFAULT_DB_PATH = Path("data/scoreboard.db")

MEMORY_DB = ":memory:"

# Seconds a connection waits for another connection's write lock
LOCK_TIMEOUT_S = 15

_engines: dict[str, Engine] = {}
_session_factories: dict[str, sessionmaker] = {}


def resolve_db_path(db_path: Path | None = None) -> Path:
    """Resolve the database path from the argument or the environment.

    Args:
        db_path: Explicit path. Takes precedence over SCOREBOARD_DB_PATH.

    Returns:
        Path to the SQLite database file, or Path(":memory:").
    """
    if db_path is not None:
        return Path(db_path)
    return Path(os.environ.get("SCOREBOARD_DB_PATH", str(DEFAULT_DB_PATH)))


def _is_memory(db_path: Path) -> bool:
    return str(db_path) == MEMORY_DB


def _engine_key(db_path: Path) -> str:
    return MEMORY_DB if _is_memory(db_path) else str(db_path.resolve())


def _build_engine(db_path: Path) -> Engine:
    if _is_memory(db_path):
        return create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    db_path.parent.mkdir(parents=True, exist_ok=True)
    # Default QueuePool: one connection (and transaction) per session.
    # check_same_thread=False lets FastAPI's threadpool return connections.
    return create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False, "timeout": LOCK_TIMEOUT_S},
    )


def get_engine(db_path: Path | None = None) -> Engine:
    """Get the cached engine for a database path.

    Args:
        db_path: SQLite file, ":memory:", or None for the configured path.

    Returns:
        SQLAlchemy engine, created on first use.
    """
    db_path = resolve_db_path(db_path)
    key = _engine_key(db_path)
    if key not in _engines:
        _engines[key] = _build_engine(db_path)
    return _engines[key]


def get_session(db_path: Path | None = None) -> Session:
    """Open a new session. The caller closes it."""
    db_path = resolve_db_path(db_path)
    key = _engine_key(db_path)
    if key not in _session_factories:
        _session_factories[key] = sessionmaker(bind=get_engine(db_path))
    return _session_factories[key]()


def init_db(db_path: Path | None = None) -> None:
    """Create any missing tables."""
    Base.metadata.create_all(get_engine(db_path))
