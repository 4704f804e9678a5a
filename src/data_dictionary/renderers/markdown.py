"""Markdown rendering of a data dictionary."""

import json
from typing import Any, List

from data_dictionary.models import DataDictionary, TableDocument
from data_dictionary.normalizer import enrich_columns
from data_dictionary.renderers.mermaid import render_diagram

TITLE = "# Data Dictionary"
COLUMNS_HEADER = "| Name | Type | Null | Default | Primary Key | Foreign Key |"
COLUMNS_DIVIDER = "|------|------|------|---------|-------------|-------------|"


def _json_block(value: Any) -> str:
    text = json.dumps(value, indent=2, default=str, ensure_ascii=False)
    return f"```json\n{text}\n```\n\n"


def _yes_no(flag: Any) -> str:
    return "YES" if flag else "NO"


def _columns_table(table: TableDocument) -> str:
    rows: List[str] = [COLUMNS_HEADER, COLUMNS_DIVIDER]
    for enriched in enrich_columns(table):
        column = enriched.column
        default = "" if column.default_value is None else column.default_value
        rows.append(
            f"| {column.name} | {column.type} | {_yes_no(column.allow_null)} | {default} | "
            f"{_yes_no(column.primary_key)} | {enriched.foreign_key or ''} |"
        )
    return "\n".join(rows) + "\n\n"


def _table_section(table_name: str, table: TableDocument) -> str:
    parts = [f"## {table_name}\n\n"]

    parts.append("### Table Information\n\n")
    parts.append(_json_block(table.table_info))

    parts.append("### Columns\n\n")
    parts.append(_columns_table(table))

    parts.append("### Foreign Keys\n\n")
    parts.append(_json_block([fk.model_dump(by_alias=True) for fk in table.foreign_keys]))

    parts.append("### Indexes\n\n")
    parts.append(_json_block(table.indexes))

    parts.append("### Primary Keys\n\n")
    parts.append(_json_block([pk.model_dump(by_alias=True) for pk in table.primary_keys]))

    parts.append("---\n\n")
    return "".join(parts)


def render_markdown(dictionary: DataDictionary) -> str:
    """Render per-table sections followed by one Mermaid relation view."""
    sections = [f"{TITLE}\n\n"]
    for table_name, table in dictionary.items():
        sections.append(_table_section(table_name, table))
    sections.append(render_diagram(dictionary))
    return "".join(sections)
