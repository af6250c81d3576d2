"""Todo serialization module.

Exports the serializer for converting todos to and from JSON/YAML.
"""
from __future__ import annotations

from todostore.serializer.serializer import TodoSerializer

__all__ = ["TodoSerializer"]
