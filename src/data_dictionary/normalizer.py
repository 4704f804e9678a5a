"""Column enrichment and the structured form shared by JSON and YAML output."""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from data_dictionary.models import (
    ColumnDescriptor,
    DataDictionary,
    ForeignKeyDescriptor,
    StructuredDictionary,
    TableDocument,
)


def to_plain(value: Any) -> Any:
    """Reduce a value to JSON/YAML-safe plain data.

    Scalars other than str, bool, int, float and None become their string form.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(v) for v in value]
    return str(value)


@dataclass(frozen=True)
class EnrichedColumn:
    """A column together with its resolved foreign key reference, if any."""

    column: ColumnDescriptor
    foreign_key: Optional[str] = None


def resolve_foreign_key(
    column_name: str, foreign_keys: Sequence[ForeignKeyDescriptor]
) -> Optional[str]:
    """Return ``"table.column"`` for the first foreign key on ``column_name``.

    Duplicate foreign keys on the same column are not merged; the first one in
    sequence order wins. Returns None when the column references nothing.
    """
    for fk in foreign_keys:
        if fk.column_name == column_name:
            return f"{fk.referenced_table_name}.{fk.referenced_column_name}"
    return None


def enrich_columns(table: TableDocument) -> List[EnrichedColumn]:
    """Pair each column of a table with its foreign key reference."""
    return [
        EnrichedColumn(
            column=column,
            foreign_key=resolve_foreign_key(column.name, table.foreign_keys),
        )
        for column in table.columns
    ]


def _structured_column(enriched: EnrichedColumn) -> Dict[str, Any]:
    column = enriched.column
    return {
        "name": column.name,
        "type": column.type,
        "allowNull": column.allow_null,
        "defaultValue": column.default_value,
        "primaryKey": column.primary_key,
        "foreignKey": enriched.foreign_key,
    }


def to_structured(dictionary: DataDictionary) -> StructuredDictionary:
    """Build the serializer-ready form of a data dictionary.

    ``tableInfo`` and ``primaryKeys`` are intentionally left out; they only
    appear in the Markdown rendering. Values are reduced to plain data so the
    JSON and YAML serializers see identical content.
    """
    structured: StructuredDictionary = {}
    for table_name, table in dictionary.items():
        structured[table_name] = to_plain(
            {
                "columns": [_structured_column(enriched) for enriched in enrich_columns(table)],
                "foreignKeys": [fk.model_dump(by_alias=True) for fk in table.foreign_keys],
                "indexes": list(table.indexes),
            }
        )
    return structured
