"""
Domain models and value objects.

Contains NumericValue, the stateless converter functions and the
serialisable EncodedValueSnapshot.
"""

from src.core.domain.converter import convert, decode, encode
from src.core.domain.numeric_value import NumericValue, convert_string
from src.core.domain.snapshot import SNAPSHOT_SCHEMA_VERSION, EncodedValueSnapshot

__all__ = [
    # Numeric value
    "NumericValue",
    "convert_string",
    # Converter
    "decode",
    "encode",
    "convert",
    # Snapshot
    "SNAPSHOT_SCHEMA_VERSION",
    "EncodedValueSnapshot",
]
