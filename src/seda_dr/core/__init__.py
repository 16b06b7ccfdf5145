"""Core types and data structures for SEDA data requests."""

from seda_dr.core.types import (
    ConsensusMethod,
    ConsensusOptions,
    DataRequestResult,
    PostDataRequestInput,
)

__all__ = [
    "ConsensusMethod",
    "ConsensusOptions",
    "DataRequestResult",
    "PostDataRequestInput",
]
