"""SQLite storage for reconnaissance results, one database per workspace."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path

DB_DIR = "bugbounty-results"
DB_FILE_NAME = "sentinel.db"

_ID = "id integer primary key autoincrement"

# Table name -> column and constraint definitions, in creation order.
_TABLES: dict[str, tuple[str, ...]] = {
    "targets": (
        _ID,
        "name text not null unique",
    ),
    "subdomains": (
        _ID,
        "target_id integer",
        "subdomain text not null unique",
        "foreign key (target_id) references targets (id)",
    ),
    "ips": (
        _ID,
        "subdomain_id integer",
        "ip_address text not null",
        "foreign key (subdomain_id) references subdomains (id)",
    ),
    "ports": (
        _ID,
        "ip_id integer",
        "port integer not null",
        "service text",
        "unique (ip_id, port)",
        "foreign key (ip_id) references ips (id)",
    ),
    "urls": (
        _ID,
        "port_id integer",
        "url text not null unique",
        "status_code integer",
        "title text",
        "tech text",
        "foreign key (port_id) references ports (id)",
    ),
}


def _schema() -> str:
    return "\n".join(
        f"create table if not exists {name} ({', '.join(columns)});"
        for name, columns in _TABLES.items()
    )


def create_tables(conn: sqlite3.Connection) -> None:
    """Create the result tables if they do not exist yet."""
    conn.executescript(_schema())


def init_db(workspace: str, base_dir: str | os.PathLike = DB_DIR) -> sqlite3.Connection:
    """Open the workspace database, creating its directory and tables as needed.

    The connection is in autocommit mode: each statement takes effect at once.
    """
    directory = Path(base_dir) / workspace
    directory.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(directory / DB_FILE_NAME, isolation_level=None)
    try:
        create_tables(conn)
    except sqlite3.Error:
        conn.close()
        raise
    return conn