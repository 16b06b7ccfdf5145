"""Signing identity for SEDA data requests."""

from seda_dr.auth.signer import Signer

__all__ = ["Signer"]
