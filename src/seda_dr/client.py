"""Data request client interface and an offline implementation."""

import hashlib
import logging
import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from seda_dr.auth.signer import Signer
from seda_dr.config import SigningConfig, build_signing_config
from seda_dr.core.types import DataRequestResult, PostDataRequestInput

logger = logging.getLogger(__name__)


class DataRequestError(Exception):
    """Raised when posting or awaiting a data request fails."""


class DataRequestClient(ABC):
    """
    Capabilities needed to post a data request and wait for its result.

    Signing, submission and polling belong to the implementation; callers
    only build the input and read the result.
    """

    def build_signing_config(self, options: Optional[Dict[str, Any]] = None) -> SigningConfig:
        """Build a signing config from options and the environment."""
        return build_signing_config(options)

    def create_signer(self, config: SigningConfig) -> Signer:
        """Create the signing identity used for submission."""
        return Signer.from_partial(config)

    @abstractmethod
    def post_and_await_data_request(
        self,
        signer: Signer,
        dr_input: PostDataRequestInput,
        options: Optional[Dict[str, Any]] = None,
    ) -> DataRequestResult:
        """
        Post a data request and block until its result is final.

        Args:
            signer: Signing identity
            dr_input: The data request to post
            options: Implementation specific submission options

        Returns:
            The final data request result

        Raises:
            DataRequestError: If posting or awaiting the request fails
        """


class MockDataRequestClient(DataRequestClient):
    """
    Offline client that never touches the network.

    The data request id is the SHA3-256 of the request fields and the
    submission time, so every call yields a new id. Block heights advance by
    one per call and the result echoes the exec inputs.
    """

    def __init__(self, start_block_height: int = 1, fail_with: Optional[Exception] = None):
        """
        Initialize the mock client.

        Args:
            start_block_height: Block height reported for the first request
            fail_with: If set, raised from every submission
        """
        self.block_height = start_block_height
        self.fail_with = fail_with
        self.submitted: List[PostDataRequestInput] = []

    def post_and_await_data_request(
        self,
        signer: Signer,
        dr_input: PostDataRequestInput,
        options: Optional[Dict[str, Any]] = None,
    ) -> DataRequestResult:
        self.submitted.append(dr_input)
        if self.fail_with is not None:
            raise self.fail_with

        timestamp_ns = time.time_ns()
        dr_block_height = self.block_height
        dr_id = self._calculate_dr_id(dr_input, dr_block_height, timestamp_ns)
        self.block_height += 1

        logger.debug("Mock data request %s posted at height %d", dr_id, dr_block_height)

        return DataRequestResult(
            dr_id=dr_id,
            dr_block_height=dr_block_height,
            block_height=dr_block_height + 1,
            block_timestamp=datetime.fromtimestamp(timestamp_ns / 1e9, tz=timezone.utc),
            version=dr_input.version or "0.0.1",
            exit_code=0,
            gas_used=0,
            result=dr_input.exec_inputs.hex(),
            consensus=True,
            payback_address="",
            seda_payload="",
        )

    @staticmethod
    def _calculate_dr_id(
        dr_input: PostDataRequestInput, block_height: int, timestamp_ns: int
    ) -> str:
        data = (
            dr_input.exec_program_id.encode("utf-8")
            + dr_input.exec_inputs
            + dr_input.tally_inputs
            + dr_input.memo
            + (dr_input.replication_factor or 1).to_bytes(2, "big")
            + block_height.to_bytes(8, "big")
            + timestamp_ns.to_bytes(8, "big")
        )
        return hashlib.sha3_256(data).hexdigest()
