"""
Raw string to host type conversion for scenemut.
"""

from scenemut.conversion.type_mapping import (
    FALLBACK_VALUES,
    TypeConverter,
    create_type_converter,
    describe_type,
)

__all__ = [
    "FALLBACK_VALUES",
    "TypeConverter",
    "create_type_converter",
    "describe_type",
]
