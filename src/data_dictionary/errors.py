"""Error taxonomy for data dictionary generation."""

from typing import Optional

STAGE_LIST_TABLES = "list_tables"
STAGE_DESCRIBE_TABLE = "describe_table"
STAGE_FOREIGN_KEYS = "foreign_keys"
STAGE_INDEXES = "indexes"


class IntrospectionError(RuntimeError):
    """Raised when the schema introspection capability fails.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, stage: str, table: Optional[str] = None) -> None:
        """Initialize with the stage (and table, if any) that was in progress."""
        super().__init__(message)
        self.stage = stage
        self.table = table
