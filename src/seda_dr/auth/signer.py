"""Signing identity for SEDA data requests."""

from urllib.parse import urlparse

from eth_account import Account
from eth_keys import keys
from eth_utils import ValidationError

from seda_dr.config import SigningConfig

# Cosmos SDK coin type, used by the SEDA chain
HD_PATH_TEMPLATE = "m/44'/118'/0'/0/{index}"

VALID_ENDPOINT_SCHEMES = ("http", "https", "ws", "wss")

Account.enable_unaudited_hdwallet_features()


class Signer:
    """
    Signing identity derived from a BIP-39 mnemonic.

    Transactions are signed by the submitting library; this class derives the
    key up front so a bad mnemonic or endpoint fails before anything is sent.
    """

    def __init__(self, config: SigningConfig):
        """
        Initialize the signer.

        Args:
            config: Signing configuration with mnemonic, endpoint and account index

        Raises:
            ValueError: If the endpoint is not a valid URL or the mnemonic is invalid
        """
        self.config = config
        self._validate_endpoint(config.rpc)

        try:
            self.account = Account.from_mnemonic(
                config.mnemonic,
                account_path=HD_PATH_TEMPLATE.format(index=config.account_index),
            )
        except (ValidationError, ValueError) as e:
            raise ValueError(f"Invalid mnemonic: {e}") from e

        self._public_key = keys.PrivateKey(self.account.key).public_key

    @classmethod
    def from_partial(cls, config: SigningConfig) -> "Signer":
        """Create a signer from a signing config."""
        return cls(config)

    @staticmethod
    def _validate_endpoint(rpc: str) -> None:
        parsed = urlparse(rpc)
        if parsed.scheme not in VALID_ENDPOINT_SCHEMES or not parsed.netloc:
            raise ValueError(f"Invalid RPC endpoint: {rpc!r}")

    def get_public_key(self) -> str:
        """Get the compressed secp256k1 public key as hex (33 bytes)."""
        return self._public_key.to_compressed_bytes().hex()

    def get_endpoint(self) -> str:
        return self.config.rpc

    def get_hd_path(self) -> str:
        return HD_PATH_TEMPLATE.format(index=self.config.account_index)
