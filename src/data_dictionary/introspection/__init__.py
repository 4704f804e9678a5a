from data_dictionary.introspection.base import SchemaIntrospector
from data_dictionary.introspection.sqlalchemy_introspector import SqlAlchemyIntrospector

__all__ = ["SchemaIntrospector", "SqlAlchemyIntrospector"]
