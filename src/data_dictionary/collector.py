"""Schema collection: one sequential introspection pass over every table."""

import logging
from typing import Any, Awaitable, Callable, Iterable, Mapping, Optional, Protocol, TypeVar

from data_dictionary.errors import (
    STAGE_DESCRIBE_TABLE,
    STAGE_FOREIGN_KEYS,
    STAGE_INDEXES,
    STAGE_LIST_TABLES,
    IntrospectionError,
)
from data_dictionary.introspection.base import SchemaIntrospector
from data_dictionary.models import (
    ColumnDescriptor,
    DataDictionary,
    ForeignKeyDescriptor,
    TableDocument,
)

T = TypeVar("T")

module_logger = logging.getLogger(__name__)


def _fields(value: Any) -> dict:
    """Descriptor fields of a reported entry; non-mappings carry none."""
    return dict(value) if isinstance(value, Mapping) else {}


class SupportsLogging(Protocol):
    """Minimal logger surface used by the collector and generator."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


class SchemaCollector:
    """Builds a DataDictionary from a SchemaIntrospector.

    Tables are processed strictly one after another; the first failure aborts
    the run and nothing collected so far is returned.
    """

    def __init__(
        self,
        introspector: SchemaIntrospector,
        logger: Optional[SupportsLogging] = None,
        exclude_tables: Iterable[str] = (),
    ):
        """Initialize the collector.

        Args:
            introspector: Read-only schema introspection capability.
            logger: Logger for progress and failure events (defaults to the
                module logger).
            exclude_tables: Table names to skip, matched case-insensitively.
        """
        self.introspector = introspector
        self.logger = logger or module_logger
        self.exclude_tables = frozenset(name.lower() for name in exclude_tables)

    async def collect(self) -> DataDictionary:
        """Collect every table's columns, foreign keys, indexes and primary keys."""
        table_names = await self._call(STAGE_LIST_TABLES, None, self.introspector.list_table_names)

        dictionary: DataDictionary = {}
        for table in table_names:
            if table.lower() in self.exclude_tables:
                self.logger.info("Skipping excluded table: %s", table)
                continue
            dictionary[table] = await self._collect_table(table)
            self.logger.info("Fetched details for table: %s", table)

        return dictionary

    async def _collect_table(self, table: str) -> TableDocument:
        table_info = await self._call(
            STAGE_DESCRIBE_TABLE, table, self.introspector.describe_table, table
        )
        foreign_keys = await self._call(
            STAGE_FOREIGN_KEYS, table, self.introspector.get_foreign_keys, table
        )
        indexes = await self._call(STAGE_INDEXES, table, self.introspector.get_indexes, table)

        columns = [
            ColumnDescriptor.model_validate({"name": name, **_fields(details)})
            for name, details in table_info.items()
        ]
        primary_keys = [column for column in columns if column.primary_key]

        return TableDocument(
            table_info=dict(table_info),
            columns=columns,
            foreign_keys=[ForeignKeyDescriptor.model_validate(_fields(fk)) for fk in foreign_keys],
            indexes=list(indexes),
            primary_keys=primary_keys,
        )

    async def _call(
        self,
        stage: str,
        table: Optional[str],
        fn: Callable[..., Awaitable[T]],
        *args: Any,
    ) -> T:
        """Await one introspection call, wrapping any failure in IntrospectionError."""
        try:
            return await fn(*args)
        except IntrospectionError:
            raise
        except Exception as e:
            where = f" for table {table}" if table is not None else ""
            self.logger.error("Error generating data dictionary during %s%s: %s", stage, where, e)
            raise IntrospectionError(
                f"Schema introspection failed during {stage}{where}: {e}",
                stage=stage,
                table=table,
            ) from e
