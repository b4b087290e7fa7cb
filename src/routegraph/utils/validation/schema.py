"""
Schema validation for graph definition documents.

A graph definition is a JSON document listing undirected weighted edges and the
places of interest attached to nodes:

    {
        "edges": [{"source": "A", "destination": "B", "weight": 4}],
        "places": {"A": ["Lighthouse", "Fish market"]}
    }

Documents are checked with ``jsonschema`` before a graph is built from them, so a
malformed definition is reported in full instead of failing halfway through
construction.
"""

from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator

GRAPH_DEFINITION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "source": {"type": "string", "minLength": 1},
                    "destination": {"type": "string", "minLength": 1},
                    "weight": {"type": "integer", "minimum": 0},
                },
                "required": ["source", "destination", "weight"],
                "additionalProperties": False,
            },
        },
        "places": {
            "type": "object",
            "propertyNames": {"minLength": 1},
            "additionalProperties": {
                "type": "array",
                "items": {"type": "string", "minLength": 1},
            },
        },
    },
    "required": ["edges"],
    "additionalProperties": False,
}


class SchemaValidator:
    """
    JSON Schema-based validator for graph definitions.

    Attributes:
        schema (Dict[str, Any]): Schema documents are validated against
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema or GRAPH_DEFINITION_SCHEMA
        self._validator = Draft7Validator(self.schema)

    def errors(self, document: Any) -> List[str]:
        """
        Collect every schema violation in a document.

        Returns:
            Messages prefixed with the JSON path of the offending value, in
            document order; empty when the document is valid
        """
        messages = []
        errors = self._validator.iter_errors(document)
        for error in sorted(errors, key=lambda e: [str(part) for part in e.path]):
            location = "/".join(str(part) for part in error.path) or "<root>"
            messages.append(f"{location}: {error.message}")
        return messages

    def is_valid(self, document: Any) -> bool:
        return self._validator.is_valid(document)
