"""Fakes and fixtures for data dictionary tests."""

import copy

import pytest

USERS_COLUMNS = {
    "id": {"type": "INTEGER", "allowNull": False, "defaultValue": None, "primaryKey": True},
    "name": {"type": "VARCHAR(255)", "allowNull": False, "defaultValue": None, "primaryKey": False},
    "email": {
        "type": "VARCHAR(255)",
        "allowNull": False,
        "defaultValue": None,
        "primaryKey": False,
        "unique": True,
    },
}

POSTS_COLUMNS = {
    "id": {"type": "INTEGER", "allowNull": False, "defaultValue": None, "primaryKey": True},
    "title": {"type": "VARCHAR(255)", "allowNull": False, "defaultValue": None, "primaryKey": False},
    "content": {"type": "TEXT", "allowNull": False, "defaultValue": None, "primaryKey": False},
    "userId": {"type": "INTEGER", "allowNull": True, "defaultValue": None, "primaryKey": False},
}

POSTS_FOREIGN_KEYS = [
    {
        "columnName": "userId",
        "referencedTableName": "Users",
        "referencedColumnName": "id",
        "constraintName": "Posts_userId_fkey",
    }
]

USERS_INDEXES = [{"name": "Users_email_key", "column_names": ["email"], "unique": True}]


class FakeIntrospector:
    """In-memory SchemaIntrospector that records every call."""

    def __init__(self, tables, fail_on=None, error=None):
        """Initialize with ``{table: {"columns", "foreign_keys", "indexes"}}``.

        ``fail_on`` is a ``(method, table)`` pair whose call raises ``error``.
        """
        self.tables = tables
        self.fail_on = fail_on
        self.error = error or ConnectionError("connection lost")
        self.calls = []

    def _record(self, method, table=None):
        self.calls.append((method, table))
        if self.fail_on == (method, table):
            raise self.error

    async def list_table_names(self):
        self._record("list_table_names")
        return list(self.tables)

    async def describe_table(self, table_name):
        self._record("describe_table", table_name)
        return copy.deepcopy(self.tables[table_name]["columns"])

    async def get_foreign_keys(self, table_name):
        self._record("get_foreign_keys", table_name)
        return copy.deepcopy(self.tables[table_name].get("foreign_keys", []))

    async def get_indexes(self, table_name):
        self._record("get_indexes", table_name)
        return copy.deepcopy(self.tables[table_name].get("indexes", []))


class RecordingLogger:
    """Logger double capturing formatted info and error messages."""

    def __init__(self):
        self.infos = []
        self.errors = []

    def info(self, msg, *args, **kwargs):
        self.infos.append(msg % args if args else msg)

    def error(self, msg, *args, **kwargs):
        self.errors.append(msg % args if args else msg)


def _users_posts_tables():
    return {
        "Users": {"columns": USERS_COLUMNS, "foreign_keys": [], "indexes": USERS_INDEXES},
        "Posts": {"columns": POSTS_COLUMNS, "foreign_keys": POSTS_FOREIGN_KEYS, "indexes": []},
    }


@pytest.fixture
def users_posts_tables():
    """Users/Posts sample schema."""
    return _users_posts_tables()


@pytest.fixture
def make_introspector():
    """Factory for fake introspectors over arbitrary tables."""
    return FakeIntrospector


@pytest.fixture
def introspector(users_posts_tables):
    """Fake introspector over the Users/Posts schema."""
    return FakeIntrospector(users_posts_tables)


@pytest.fixture
def recording_logger():
    """Logger double for asserting emitted events."""
    return RecordingLogger()

