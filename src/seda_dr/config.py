"""Environment configuration for posting SEDA data requests."""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

ORACLE_PROGRAM_ID_ENV = "ORACLE_PROGRAM_ID"
MNEMONIC_ENV = "SEDA_MNEMONIC"
RPC_ENDPOINT_ENV = "SEDA_RPC_ENDPOINT"
ACCOUNT_INDEX_ENV = "SEDA_ACCOUNT_INDEX"
EXPLORER_URL_ENV = "SEDA_EXPLORER_URL"
NODE_BINARY_ENV = "SEDA_NODE_BINARY"
DEV_TOOLS_DIR_ENV = "SEDA_DEV_TOOLS_DIR"

EXPLORER_LINK_PLACEHOLDER = "Configure env.SEDA_EXPLORER_URL to generate a link to your DR"


@dataclass
class SigningConfig:
    """Credentials and endpoint used to sign and submit data requests."""

    mnemonic: str
    rpc: str
    account_index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mnemonic": self.mnemonic,
            "rpc": self.rpc,
            "accountIndex": self.account_index,
        }

    def __repr__(self) -> str:
        # Never print the mnemonic
        return f"SigningConfig(rpc={self.rpc!r}, account_index={self.account_index})"


def get_oracle_program_id() -> str:
    """
    Get the oracle program to execute.

    Raises:
        ValueError: If ORACLE_PROGRAM_ID is not set or empty
    """
    program_id = os.getenv(ORACLE_PROGRAM_ID_ENV)
    if not program_id:
        raise ValueError(f"Please set the {ORACLE_PROGRAM_ID_ENV} in your env file")
    return program_id


def build_signing_config(options: Optional[Dict[str, Any]] = None) -> SigningConfig:
    """
    Build a signing config, falling back to the environment.

    Explicit options win over SEDA_MNEMONIC, SEDA_RPC_ENDPOINT and
    SEDA_ACCOUNT_INDEX.

    Args:
        options: Optional overrides with keys mnemonic, rpc, account_index

    Returns:
        SigningConfig

    Raises:
        ValueError: If the mnemonic or endpoint is missing, or the account
            index is not a non-negative integer
    """
    options = options or {}

    mnemonic = options.get("mnemonic") or os.getenv(MNEMONIC_ENV)
    if not mnemonic:
        raise ValueError(f"Please set {MNEMONIC_ENV} in your env file")

    rpc = options.get("rpc") or os.getenv(RPC_ENDPOINT_ENV)
    if not rpc:
        raise ValueError(f"Please set {RPC_ENDPOINT_ENV} in your env file")

    account_index = options.get("account_index")
    if account_index is None:
        account_index = int(os.getenv(ACCOUNT_INDEX_ENV, "0"))
    if account_index < 0:
        raise ValueError(f"Account index cannot be negative, got {account_index}")

    return SigningConfig(mnemonic=mnemonic.strip(), rpc=rpc, account_index=account_index)


def get_explorer_base_url() -> Optional[str]:
    """Get the explorer base URL, or None when SEDA_EXPLORER_URL is unset."""
    return os.getenv(EXPLORER_URL_ENV) or None


def get_explorer_url(dr_id: str, dr_block_height: int) -> str:
    """
    Get the explorer link for a data request.

    Returns the placeholder text when no explorer is configured.
    """
    base_url = get_explorer_base_url()
    if not base_url:
        return EXPLORER_LINK_PLACEHOLDER
    return f"{base_url}/data-requests/{dr_id}/{dr_block_height}"


def get_node_binary() -> str:
    """Get the Node.js executable used to run the dev-tools library."""
    return os.getenv(NODE_BINARY_ENV, "node")


def get_dev_tools_dir() -> Optional[str]:
    """Get the directory whose node_modules holds @seda-protocol/dev-tools."""
    return os.getenv(DEV_TOOLS_DIR_ENV) or None
