"""Document model for collected database schemas."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ColumnDescriptor(BaseModel):
    """A single column as reported by the introspection capability.

    Driver-specific details beyond the core fields (comments, autoincrement
    flags, ...) are kept as extra fields. Flags are read for truthiness and
    are never rejected.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    type: Optional[str] = None
    allow_null: Any = Field(default=None, alias="allowNull")
    default_value: Any = Field(default=None, alias="defaultValue")
    primary_key: Any = Field(default=None, alias="primaryKey")

    @field_validator("name", mode="before")
    @classmethod
    def stringify_name(cls, v: Any) -> str:
        return str(v)

    @field_validator("type", mode="before")
    @classmethod
    def stringify_type(cls, v: Any) -> Optional[str]:
        """Driver type objects are reported by their string form."""
        return v if v is None else str(v)


class ForeignKeyDescriptor(BaseModel):
    """A single-column foreign key reference.

    Fields are passed through as reported; malformed values are not rejected.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    column_name: Any = Field(default=None, alias="columnName")
    referenced_table_name: Any = Field(default=None, alias="referencedTableName")
    referenced_column_name: Any = Field(default=None, alias="referencedColumnName")


class TableDocument(BaseModel):
    """Everything collected for one table."""

    model_config = ConfigDict(populate_by_name=True)

    table_info: Dict[str, Any] = Field(default_factory=dict, alias="tableInfo")
    columns: List[ColumnDescriptor] = Field(default_factory=list)
    foreign_keys: List[ForeignKeyDescriptor] = Field(default_factory=list, alias="foreignKeys")
    indexes: List[Any] = Field(default_factory=list)
    primary_keys: List[ColumnDescriptor] = Field(default_factory=list, alias="primaryKeys")


# Table name -> document, in table-listing order.
DataDictionary = Dict[str, TableDocument]

# Serializer-ready form shared by the JSON and YAML renderers.
StructuredDictionary = Dict[str, Dict[str, Any]]
