"""Domain models for the CSV -> token metadata generator."""

from .counter import SequentialCounter
from .error_record import ErrorRecord
from .generation_result import GenerationResult
from .metadata import AttributeEntry, MetadataDocument
from .row_record import RowRecord
from .schema import FieldBinding, OutputSlot, SchemaVariant

__all__ = [
    # Schema models
    "FieldBinding",
    "OutputSlot",
    "SchemaVariant",
    # Processing models
    "RowRecord",
    "AttributeEntry",
    "MetadataDocument",
    "SequentialCounter",
    "GenerationResult",
    "ErrorRecord",
]
