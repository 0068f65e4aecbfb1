"""jobwire type definitions, split into focused modules.

- wire_type: WireType enum, tag groups, tag parsing
- schema: FieldSchema, ContextParam, JobSchema, JobCategory, FieldKind
- blueprint: BlueprintDefinition, CategoryInfo
- registry: JobRegistry ABC
"""

from jobwire.types.blueprint import BlueprintDefinition, CategoryInfo
from jobwire.types.registry import JobPredicate, JobRegistry
from jobwire.types.schema import ContextParam, FieldKind, FieldSchema, JobCategory, JobSchema, SelectOption
from jobwire.types.wire_type import ARRAY_TYPES, BIG_UINT_TYPES, SMALL_UINT_TYPES, WireType, parse_wire_type

__all__ = [
    "ARRAY_TYPES",
    "BIG_UINT_TYPES",
    "BlueprintDefinition",
    "CategoryInfo",
    "ContextParam",
    "FieldKind",
    "FieldSchema",
    "JobCategory",
    "JobPredicate",
    "JobRegistry",
    "JobSchema",
    "SMALL_UINT_TYPES",
    "SelectOption",
    "WireType",
    "parse_wire_type",
]
