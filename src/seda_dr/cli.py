#!/usr/bin/env python3
"""Command line entry point: post a data request to SEDA and print the result."""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from seda_dr.client import DataRequestClient, MockDataRequestClient
from seda_dr.client_devtools import DevToolsClient
from seda_dr.codec.inputs import (
    DEFAULT_EXEC_INPUTS,
    decode_result,
    encode_event_slug_input,
    encode_hex_input,
    encode_text_input,
)
from seda_dr.display import console, error_panel, print_record
from seda_dr.submitter import RequestSubmitter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seda-post-dr",
        description="Post a data request to the SEDA network and wait for the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  ORACLE_PROGRAM_ID    Oracle program to execute (required)
  SEDA_MNEMONIC        Mnemonic of the submitting account (required)
  SEDA_RPC_ENDPOINT    SEDA chain RPC endpoint (required)
  SEDA_EXPLORER_URL    Explorer base URL used to link the result (optional)

Examples:
  # Post with the default exec inputs
  seda-post-dr

  # Ask the PolyMarket program for an event
  seda-post-dr --event-slug fed-decision-in-october

  # Try it without touching the network
  seda-post-dr --dry-run
        """
    )

    inputs = parser.add_mutually_exclusive_group()
    inputs.add_argument(
        '--exec-inputs',
        type=str,
        default=DEFAULT_EXEC_INPUTS,
        help=f'Exec inputs as text (default: {DEFAULT_EXEC_INPUTS})'
    )
    inputs.add_argument('--exec-inputs-hex', type=str, help='Exec inputs as hex')
    inputs.add_argument('--event-slug', type=str, help='PolyMarket event slug to query')

    parser.add_argument('--memo', type=str, help='Memo text (default: current UTC time)')
    parser.add_argument('--replication-factor', type=int, help='Number of executing nodes')
    parser.add_argument('--exec-gas-limit', type=int, help='Gas limit of the execution phase')
    parser.add_argument('--tally-gas-limit', type=int, help='Gas limit of the tally phase')
    parser.add_argument('--gas-price', type=int, help='Gas price in aseda')
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help=(
            'Use an offline client instead of posting to the network '
            '(SEDA_MNEMONIC and SEDA_RPC_ENDPOINT are still checked locally)'
        )
    )
    parser.add_argument('--debug', '-d', action='store_true', help='Enable debug logging')
    return parser


def resolve_exec_inputs(args: argparse.Namespace) -> bytes:
    if args.exec_inputs_hex is not None:
        return encode_hex_input(args.exec_inputs_hex)
    if args.event_slug is not None:
        return encode_event_slug_input(args.event_slug)
    return encode_text_input(args.exec_inputs)


def create_client(args: argparse.Namespace) -> DataRequestClient:
    if args.dry_run:
        console.print("[warn]Dry run: nothing will be posted to the network[/warn]")
        return MockDataRequestClient()
    return DevToolsClient()


def main(argv: Optional[List[str]] = None, client: Optional[DataRequestClient] = None):
    """Post a data request and print the result table."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Values already in the environment take precedence over .env
    load_dotenv()

    overrides = {
        name: getattr(args, name)
        for name in ("replication_factor", "exec_gas_limit", "tally_gas_limit", "gas_price")
        if getattr(args, name) is not None
    }

    try:
        exec_inputs = resolve_exec_inputs(args)
        memo = encode_text_input(args.memo) if args.memo is not None else None

        submitter = RequestSubmitter(client or create_client(args))
        record = submitter.submit(exec_inputs=exec_inputs, memo=memo, **overrides)
    except Exception as e:
        logging.getLogger(__name__).debug("Data request failed", exc_info=True)
        error_panel("Data request failed", str(e) or repr(e))
        sys.exit(1)

    print_record(record)

    decoded = decode_result(record["result"])
    if isinstance(decoded, (dict, list)):
        console.print("[info]Decoded result:[/info]")
        console.print_json(data=decoded)


if __name__ == "__main__":
    main()
