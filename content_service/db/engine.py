"""
Engine construction with the dialect settings the service relies on.

Kept free of import-time side effects so scripts can build engines for
arbitrary URLs.
"""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool


def _configure_sqlite(engine: Engine) -> None:
    """Enforce foreign keys and take the write lock when a transaction starts.

    pysqlite defers BEGIN until the first write, so two writers can each hold
    a read lock and then fail to upgrade. BEGIN IMMEDIATE makes the second
    writer wait on the busy timeout instead. Read-only transactions take the
    same lock, so readers serialize with writers until their session closes.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(url: str, **kwargs) -> Engine:
    if url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        if ":memory:" in url:
            # Keep a single connection so the schema persists across sessions
            kwargs.setdefault("poolclass", StaticPool)
        engine = create_engine(url, connect_args=connect_args, **kwargs)
        _configure_sqlite(engine)
        return engine
    return create_engine(url, pool_pre_ping=True, **kwargs)
