"""Post a data request and turn its result into a display record."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from seda_dr.client import DataRequestClient
from seda_dr.codec.inputs import DEFAULT_EXEC_INPUTS, encode_text_input
from seda_dr.config import get_explorer_url, get_oracle_program_id
from seda_dr.core.types import (
    ConsensusOptions,
    DataRequestResult,
    PostDataRequestInput,
    format_iso_timestamp,
)
from seda_dr.display import console, print_line


def build_request_input(
    exec_program_id: str,
    exec_inputs: Optional[bytes] = None,
    memo: Optional[bytes] = None,
    **overrides: Any,
) -> PostDataRequestInput:
    """
    Build the data request posted by this tool.

    Consensus is disabled and the tally inputs are empty. Exec inputs default
    to the text "46724" and the memo to the current UTC time.

    Args:
        exec_program_id: Oracle program to execute
        exec_inputs: Raw exec inputs
        memo: Raw memo
        **overrides: replication_factor, exec_gas_limit, tally_gas_limit, gas_price, version
    """
    if exec_inputs is None:
        exec_inputs = encode_text_input(DEFAULT_EXEC_INPUTS)
    if memo is None:
        memo = format_iso_timestamp(datetime.now(timezone.utc)).encode("utf-8")

    return PostDataRequestInput(
        consensus_options=ConsensusOptions(),
        exec_program_id=exec_program_id,
        exec_inputs=exec_inputs,
        tally_inputs=b"",
        memo=memo,
        **overrides,
    )


def build_display_record(result: DataRequestResult) -> Dict[str, Any]:
    """Merge the result fields with a printable timestamp and the explorer link."""
    record = result.to_dict()
    record["block_timestamp"] = (
        format_iso_timestamp(result.block_timestamp) if result.block_timestamp else ""
    )
    record["explorer_link"] = get_explorer_url(result.dr_id, result.dr_block_height)
    return record


class RequestSubmitter:
    """Runs validate, sign, submit-and-wait and format against a client."""

    def __init__(self, client: DataRequestClient):
        self.client = client

    def submit(
        self,
        exec_inputs: Optional[bytes] = None,
        memo: Optional[bytes] = None,
        signing_options: Optional[Dict[str, Any]] = None,
        post_options: Optional[Dict[str, Any]] = None,
        **overrides: Any,
    ) -> Dict[str, Any]:
        """
        Post a data request and wait for its result.

        Nothing is caught here: configuration, signing and submission errors
        reach the caller unchanged.

        Returns:
            The display record for the final result

        Raises:
            ValueError: If ORACLE_PROGRAM_ID is unset, checked before any client call
        """
        program_id = get_oracle_program_id()

        signing_config = self.client.build_signing_config(signing_options)
        signer = self.client.create_signer(signing_config)

        dr_input = build_request_input(program_id, exec_inputs, memo, **overrides)

        console.print("Posting and waiting for a result, this may take a little while..")
        print_line("Exec inputs (hex)", dr_input.exec_inputs.hex())

        result = self.client.post_and_await_data_request(signer, dr_input, post_options)
        return build_display_record(result)
