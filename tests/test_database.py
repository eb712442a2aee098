import sqlite3

import pytest

from sentinel.database import create_tables, init_db

EXPECTED_TABLES = {"targets", "subdomains", "ips", "ports", "urls"}


def _tables(conn):
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
    ).fetchall()
    return {name for (name,) in rows}


@pytest.fixture
def conn(tmp_path):
    connection = init_db("proj", tmp_path)
    yield connection
    connection.close()


def test_init_db_creates_file(tmp_path):
    connection = init_db("proj", tmp_path)
    connection.close()
    assert (tmp_path / "proj" / "sentinel.db").is_file()


def test_init_db_creates_tables(conn):
    assert _tables(conn) == EXPECTED_TABLES


def test_create_tables_is_idempotent(conn):
    create_tables(conn)
    assert _tables(conn) == EXPECTED_TABLES


def test_target_insert_and_read(conn):
    conn.execute("INSERT INTO targets(name) VALUES(?)", ("example.com",))
    rows = conn.execute("SELECT name FROM targets").fetchall()
    assert rows == [("example.com",)]


def test_target_name_unique(conn):
    conn.execute("INSERT INTO targets(name) VALUES(?)", ("example.com",))
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute("INSERT INTO targets(name) VALUES(?)", ("example.com",))


def test_subdomain_unique(conn):
    conn.execute(
        "INSERT INTO subdomains(target_id, subdomain) VALUES(?, ?)", (1, "a.example.com")
    )
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute(
            "INSERT INTO subdomains(target_id, subdomain) VALUES(?, ?)", (2, "a.example.com")
        )


def test_ports_unique_per_ip(conn):
    conn.execute("INSERT INTO ports(ip_id, port) VALUES(?, ?)", (1, 443))
    conn.execute("INSERT INTO ports(ip_id, port) VALUES(?, ?)", (2, 443))
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute("INSERT INTO ports(ip_id, port) VALUES(?, ?)", (1, 443))


def test_data_persists_across_connections(tmp_path):
    first = init_db("proj", tmp_path)
    first.execute("INSERT INTO targets(name) VALUES(?)", ("example.com",))
    first.close()
    second = init_db("proj", tmp_path)
    try:
        rows = second.execute("SELECT name FROM targets").fetchall()
    finally:
        second.close()
    assert rows == [("example.com",)]