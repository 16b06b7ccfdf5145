#!/usr/bin/env python3
"""
Example of querying a PolyMarket event through a SEDA oracle program.

This example shows how to:
1. Build a signer from SEDA_MNEMONIC and SEDA_RPC_ENDPOINT
2. Post a data request whose exec inputs name a PolyMarket event
3. Decode the JSON the oracle program returns
"""

import sys
import traceback

from dotenv import load_dotenv

from seda_dr import DevToolsClient, build_request_input, decode_result, encode_event_slug_input
from seda_dr.config import get_explorer_url, get_oracle_program_id


def main():
    """Post a PolyMarket event request and print the market prices."""
    print("=== SEDA PolyMarket Event Example ===\n")

    load_dotenv()

    event_slug = sys.argv[1] if len(sys.argv) > 1 else "fed-decision-in-october"

    try:
        program_id = get_oracle_program_id()
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    client = DevToolsClient()

    try:
        signer = client.create_signer(client.build_signing_config())
        print(f"Signer public key: {signer.get_public_key()}")
        print(f"RPC endpoint: {signer.get_endpoint()}")

        dr_input = build_request_input(program_id, exec_inputs=encode_event_slug_input(event_slug))
        print(f"\nPosting request for event '{event_slug}'...")
        result = client.post_and_await_data_request(signer, dr_input)
    except Exception as e:
        print(f"\n❌ Data request error: {e}")
        traceback.print_exc()
        sys.exit(1)

    print("\n✅ Data request resolved!")
    print(f"DR ID: {result.dr_id}")
    print(f"Exit code: {result.exit_code}")
    print(f"Explorer: {get_explorer_url(result.dr_id, result.dr_block_height)}")

    decoded = decode_result(result.result)
    if not isinstance(decoded, dict):
        print(f"Unexpected result: {decoded!r}")
        return

    for i, market in enumerate(decoded.get("markets", [])):
        status = "closed" if market.get("closed") else "open"
        print(f"  Market {i}: yes price {market.get('yes_price')} ({status})")


if __name__ == "__main__":
    main()
