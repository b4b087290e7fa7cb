"""Validation components for graph definitions."""

from .schema import GRAPH_DEFINITION_SCHEMA, SchemaValidator

__all__ = ["GRAPH_DEFINITION_SCHEMA", "SchemaValidator"]
