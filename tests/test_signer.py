"""Tests for the signing identity."""

from unittest.mock import patch

import pytest

from seda_dr.auth.signer import Signer
from seda_dr.config import SigningConfig

TEST_MNEMONIC = "abandon " * 11 + "about"


class TestSigner:
    """Test Signer class."""

    @pytest.fixture
    def config(self):
        """Create a test signing config."""
        return SigningConfig(mnemonic=TEST_MNEMONIC, rpc="https://rpc.testnet.example")

    @pytest.fixture
    def signer(self, config):
        """Create a test signer."""
        return Signer.from_partial(config)

    def test_signer_creation(self, signer, config):
        """Test creating a signer."""
        assert signer.config is config
        assert signer.account is not None
        assert signer.get_endpoint() == "https://rpc.testnet.example"
        assert signer.get_hd_path() == "m/44'/118'/0'/0/0"

    def test_public_key(self, signer):
        """Test the compressed public key."""
        public_key = signer.get_public_key()

        assert isinstance(public_key, str)
        assert len(public_key) == 66  # 33 bytes
        assert public_key[:2] in ("02", "03")

    def test_deterministic(self, config):
        """Test that the same mnemonic gives the same key."""
        assert Signer(config).get_public_key() == Signer(config).get_public_key()

    def test_account_index(self, config):
        """Test that account indexes derive different keys."""
        other = SigningConfig(mnemonic=config.mnemonic, rpc=config.rpc, account_index=1)

        assert Signer(other).get_hd_path() == "m/44'/118'/0'/0/1"
        assert Signer(other).get_public_key() != Signer(config).get_public_key()

    def test_invalid_mnemonic(self):
        """Test that an invalid mnemonic is rejected."""
        config = SigningConfig(mnemonic="not a real mnemonic", rpc="https://rpc.example")

        with pytest.raises(ValueError, match="Invalid mnemonic"):
            Signer.from_partial(config)

    def test_unrelated_errors_propagate(self):
        """Test that errors other than mnemonic validation are not rewrapped."""
        config = SigningConfig(mnemonic=TEST_MNEMONIC, rpc="https://rpc.example")
        error = RuntimeError("key derivation backend unavailable")

        with patch("seda_dr.auth.signer.Account.from_mnemonic", side_effect=error):
            with pytest.raises(RuntimeError) as exc_info:
                Signer.from_partial(config)

        assert exc_info.value is error

    @pytest.mark.parametrize("rpc", ["rpc.example", "ftp://rpc.example", "https://", ""])
    def test_invalid_endpoint(self, rpc):
        """Test that malformed endpoints are rejected."""
        config = SigningConfig(mnemonic=TEST_MNEMONIC, rpc=rpc)

        with pytest.raises(ValueError, match="Invalid RPC endpoint"):
            Signer.from_partial(config)

    @pytest.mark.parametrize(
        "rpc", ["http://localhost:26657", "https://rpc.example", "wss://rpc.example/websocket"]
    )
    def test_valid_endpoints(self, rpc):
        """Test accepted endpoint schemes."""
        signer = Signer.from_partial(SigningConfig(mnemonic=TEST_MNEMONIC, rpc=rpc))
        assert signer.get_endpoint() == rpc
