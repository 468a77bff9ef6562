"""UniqueID SDK: short, quasi-unique text and numeric identifiers."""

from uniqueid_sdk.config import GeneratorConfig, UniquenessConfig, UUIDOptions
from uniqueid_sdk.core.clock import Clock, SystemClock
from uniqueid_sdk.core.duplicates import find_duplicates
from uniqueid_sdk.core.entropy import (
    ALPHANUMERIC,
    RandomSource,
    SystemRandomSource,
    hex_random_bytes,
    random_alphanumeric,
    random_bits,
)
from uniqueid_sdk.core.errors import (
    EntropySourceUnavailableError,
    InvalidLengthError,
    UniqueIdError,
)
from uniqueid_sdk.core.types import DuplicateReport, GeneratedId, IdKind
from uniqueid_sdk.generator import UniqueID, UUIDHandle, create_uuid
from uniqueid_sdk.observability.event_bus import Event, EventBus, InMemoryEventBus

__all__ = [
    "ALPHANUMERIC",
    "Clock",
    "DuplicateReport",
    "EntropySourceUnavailableError",
    "Event",
    "EventBus",
    "GeneratedId",
    "GeneratorConfig",
    "IdKind",
    "InMemoryEventBus",
    "InvalidLengthError",
    "RandomSource",
    "SystemClock",
    "SystemRandomSource",
    "UUIDHandle",
    "UUIDOptions",
    "UniqueID",
    "UniqueIdError",
    "UniquenessConfig",
    "create_uuid",
    "find_duplicates",
    "hex_random_bytes",
    "random_alphanumeric",
    "random_bits",
]
