from typing import Any, List, Mapping, Protocol, runtime_checkable


@runtime_checkable
class SchemaIntrospector(Protocol):
    """Protocol for read-only schema introspection.

    Implementations wrap an ORM or driver metadata API. Failures may be any
    exception; callers wrap them, implementations should not.
    """

    async def list_table_names(self) -> List[str]:
        """List all table names, in the order they should be documented."""
        ...

    async def describe_table(self, table_name: str) -> Mapping[str, Mapping[str, Any]]:
        """Describe the columns of a table.

        Returns:
            Mapping of column name to details (``type``, ``allowNull``,
            ``defaultValue``, ``primaryKey`` and any driver extras).
        """
        ...

    async def get_foreign_keys(self, table_name: str) -> List[Mapping[str, Any]]:
        """List foreign keys as ``columnName``/``referencedTableName``/``referencedColumnName``."""
        ...

    async def get_indexes(self, table_name: str) -> List[Any]:
        """List indexes for a table (opaque, passed through)."""
        ...
