"""Schema data dictionaries rendered as JSON, YAML or Markdown."""

from data_dictionary.collector import SchemaCollector
from data_dictionary.config import GeneratorConfig, OutputFormat
from data_dictionary.errors import IntrospectionError
from data_dictionary.generator import DataDictionaryGenerator, generate_data_dictionary
from data_dictionary.introspection import SchemaIntrospector, SqlAlchemyIntrospector
from data_dictionary.models import (
    ColumnDescriptor,
    DataDictionary,
    ForeignKeyDescriptor,
    TableDocument,
)

__all__ = [
    "ColumnDescriptor",
    "DataDictionary",
    "DataDictionaryGenerator",
    "ForeignKeyDescriptor",
    "GeneratorConfig",
    "IntrospectionError",
    "OutputFormat",
    "SchemaCollector",
    "SchemaIntrospector",
    "SqlAlchemyIntrospector",
    "TableDocument",
    "generate_data_dictionary",
]
