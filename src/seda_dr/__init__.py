"""Post data requests to the SEDA oracle network."""

from seda_dr.auth.signer import Signer
from seda_dr.client import DataRequestClient, DataRequestError, MockDataRequestClient
from seda_dr.client_devtools import DevToolsClient
from seda_dr.codec import decode_result, encode_event_slug_input, encode_text_input
from seda_dr.config import SigningConfig, build_signing_config, get_explorer_url
from seda_dr.core.types import (
    ConsensusMethod,
    ConsensusOptions,
    DataRequestResult,
    PostDataRequestInput,
)
from seda_dr.submitter import RequestSubmitter, build_display_record, build_request_input

__version__ = "0.1.0"

__all__ = [
    "ConsensusMethod",
    "ConsensusOptions",
    "DataRequestClient",
    "DataRequestError",
    "DataRequestResult",
    "DevToolsClient",
    "MockDataRequestClient",
    "PostDataRequestInput",
    "RequestSubmitter",
    "Signer",
    "SigningConfig",
    "build_display_record",
    "build_request_input",
    "build_signing_config",
    "decode_result",
    "encode_event_slug_input",
    "encode_text_input",
    "get_explorer_url",
]
