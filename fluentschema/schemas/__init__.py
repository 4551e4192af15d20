"""Schema Variants

- Schema: the capability contract every variant implements
- NumberSchema / IntSchema / FloatSchema: ordered scalars with inclusive bounds
- StringSchema: strings with length bounds
- BoolSchema: presence only
- ArraySchema: sequences validated element by element against a template
"""
from .base import Schema, ScalarSchema

from .number import (
    NumberSchema,
    IntSchema,
    FloatSchema,
    Number,
    Int,
    Float,
)

from .string import StringSchema, String
from .boolean import BoolSchema, Bool
from .array import ArraySchema, Array

__all__ = [
    "Schema",
    "ScalarSchema",
    "NumberSchema",
    "IntSchema",
    "FloatSchema",
    "Number",
    "Int",
    "Float",
    "StringSchema",
    "String",
    "BoolSchema",
    "Bool",
    "ArraySchema",
    "Array",
]
