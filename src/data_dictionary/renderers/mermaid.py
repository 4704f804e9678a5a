"""Mermaid entity-relationship diagram for a data dictionary."""

from typing import List

from data_dictionary.models import DataDictionary

RELATIONSHIP_CONNECTOR = "}|--||"


def render_diagram(dictionary: DataDictionary) -> str:
    """Render every table as an entity and every foreign key as a relationship.

    Relationships are emitted after all entities, one per foreign key, without
    deduplication and without checking that the referenced table was collected.
    """
    lines: List[str] = ["```mermaid", "erDiagram"]

    for table_name, table in dictionary.items():
        lines.append(f"  {table_name} {{")
        for column in table.columns:
            nullability = "NULL" if column.allow_null else "NOT NULL"
            lines.append(f"    {column.type} {column.name} {nullability}")
        lines.append("  }")

    for table_name, table in dictionary.items():
        for fk in table.foreign_keys:
            lines.append(
                f"  {table_name} {RELATIONSHIP_CONNECTOR} {fk.referenced_table_name} : "
                f'"{fk.column_name} -> {fk.referenced_column_name}"'
            )

    lines.append("```")
    return "\n".join(lines) + "\n"
