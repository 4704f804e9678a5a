import asyncio
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.engine.reflection import Inspector

from data_dictionary.config.env import get_env_str
from data_dictionary.normalizer import to_plain

logger = logging.getLogger(__name__)

DATABASE_URL_ENV_VAR = "DATABASE_URL"
SCHEMA_ENV_VAR = "DATA_DICTIONARY_SCHEMA"


class SqlAlchemyIntrospector:
    """SchemaIntrospector implementation backed by the SQLAlchemy Inspector.

    Reflection is blocking, so every call runs in a worker thread. A fresh
    Inspector is created per call; its reflection cache never outlives it.
    """

    def __init__(self, engine: Engine, schema: Optional[str] = None):
        """Initialize with an engine and an optional database schema name."""
        self.engine = engine
        self.schema = schema

    @classmethod
    def from_url(cls, url: str, schema: Optional[str] = None) -> "SqlAlchemyIntrospector":
        """Create an introspector for a database URL."""
        return cls(create_engine(url), schema=schema)

    @classmethod
    def from_env(cls) -> "SqlAlchemyIntrospector":
        """Create an introspector from DATABASE_URL and DATA_DICTIONARY_SCHEMA."""
        url = get_env_str(DATABASE_URL_ENV_VAR, required=True)
        return cls.from_url(url, schema=get_env_str(SCHEMA_ENV_VAR))

    def _inspector(self) -> Inspector:
        return inspect(self.engine)

    async def list_table_names(self) -> List[str]:
        """List table names in the configured schema."""
        return await asyncio.to_thread(self._list_table_names)

    async def describe_table(self, table_name: str) -> Dict[str, Dict[str, Any]]:
        """Describe columns keyed by column name."""
        return await asyncio.to_thread(self._describe_table, table_name)

    async def get_foreign_keys(self, table_name: str) -> List[Dict[str, Any]]:
        """List foreign keys, one entry per constrained column."""
        return await asyncio.to_thread(self._get_foreign_keys, table_name)

    async def get_indexes(self, table_name: str) -> List[Dict[str, Any]]:
        """List reflected indexes."""
        return await asyncio.to_thread(self._get_indexes, table_name)

    def _list_table_names(self) -> List[str]:
        table_names = list(self._inspector().get_table_names(schema=self.schema))
        logger.debug("Reflected %d tables (schema=%s)", len(table_names), self.schema)
        return table_names

    def _describe_table(self, table_name: str) -> Dict[str, Dict[str, Any]]:
        inspector = self._inspector()
        columns_info = inspector.get_columns(table_name, schema=self.schema)
        pk_constraint = inspector.get_pk_constraint(table_name, schema=self.schema)
        pk_columns = set(pk_constraint.get("constrained_columns") or [])

        description = {}
        for col in columns_info:
            name = col["name"]
            description[name] = {
                # Type is an object, convert to string
                "type": str(col["type"]),
                "allowNull": col.get("nullable", True),
                "defaultValue": to_plain(col.get("default")),
                "primaryKey": name in pk_columns,
                "comment": col.get("comment"),
                "autoIncrement": to_plain(col.get("autoincrement")),
            }
        return description

    def _get_foreign_keys(self, table_name: str) -> List[Dict[str, Any]]:
        fks_info = self._inspector().get_foreign_keys(table_name, schema=self.schema)
        fks = []
        for fk in fks_info:
            # Composite keys become one entry per column pair
            for src, ref in zip(fk["constrained_columns"], fk["referred_columns"]):
                fks.append(
                    {
                        "columnName": src,
                        "referencedTableName": fk["referred_table"],
                        "referencedColumnName": ref,
                        "constraintName": fk.get("name"),
                        "referencedSchema": fk.get("referred_schema"),
                    }
                )
        return fks

    def _get_indexes(self, table_name: str) -> List[Dict[str, Any]]:
        indexes = self._inspector().get_indexes(table_name, schema=self.schema)
        return [to_plain(index) for index in indexes]
