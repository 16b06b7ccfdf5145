#!/usr/bin/env python3
"""Minimal example of posting a data request with the offline client."""

import os
import sys
from pathlib import Path

# Add the src directory to the path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv
from seda_dr import MockDataRequestClient, RequestSubmitter
from seda_dr.display import print_record


def main():
    """Run a data request against the offline client."""
    print("=== SEDA Data Request Python Client Example ===\n")

    load_dotenv()

    if not os.getenv("SEDA_MNEMONIC"):
        print("Error: SEDA_MNEMONIC environment variable not set")
        print("Please set your mnemonic in .env file or environment")
        sys.exit(1)

    # Swap in DevToolsClient to post to the network
    submitter = RequestSubmitter(MockDataRequestClient())

    try:
        record = submitter.submit()
    except Exception as e:
        print(f"Data request failed: {e}")
        sys.exit(1)

    print_record(record)


if __name__ == "__main__":
    main()
