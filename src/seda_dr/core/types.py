"""Core type definitions for SEDA data requests."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ConsensusMethod(Enum):
    """How many execution reveals must agree before tallying."""

    NONE = "none"
    MODE = "mode"


@dataclass(frozen=True)
class ConsensusOptions:
    """Consensus policy attached to a data request."""

    method: ConsensusMethod = ConsensusMethod.NONE
    json_path: Optional[str] = None

    def __post_init__(self):
        """Validate options."""
        if self.method == ConsensusMethod.MODE and not self.json_path:
            raise ValueError("json_path is required for the 'mode' consensus method")
        if self.method == ConsensusMethod.NONE and self.json_path:
            raise ValueError("json_path is only valid for the 'mode' consensus method")

    def to_dict(self) -> Dict[str, str]:
        options = {"method": self.method.value}
        if self.json_path:
            options["jsonPath"] = self.json_path
        return options


@dataclass(frozen=True)
class PostDataRequestInput:
    """
    Everything needed to post a single data request.

    Byte fields are opaque to this package; they are handed to the oracle
    program (exec_inputs), the tally phase (tally_inputs) or stored with the
    request (memo). Optional numeric fields left as None are omitted from the
    wire payload so the submitting library applies its own defaults.
    """

    exec_program_id: str
    exec_inputs: bytes = b""
    tally_inputs: bytes = b""
    memo: bytes = b""
    consensus_options: ConsensusOptions = field(default_factory=ConsensusOptions)
    replication_factor: Optional[int] = None
    exec_gas_limit: Optional[int] = None
    tally_gas_limit: Optional[int] = None
    gas_price: Optional[int] = None
    version: Optional[str] = None

    def __post_init__(self):
        """Validate input."""
        if not self.exec_program_id:
            raise ValueError("exec_program_id cannot be empty")
        for name in ("replication_factor", "exec_gas_limit", "tally_gas_limit", "gas_price"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire form: camelCase keys, byte fields hex encoded."""
        payload: Dict[str, Any] = {
            "consensusOptions": self.consensus_options.to_dict(),
            "execProgramId": self.exec_program_id,
            "execInputs": self.exec_inputs.hex(),
            "tallyInputs": self.tally_inputs.hex(),
            "memo": self.memo.hex(),
        }
        optional = {
            "replicationFactor": self.replication_factor,
            "execGasLimit": self.exec_gas_limit,
            "tallyGasLimit": self.tally_gas_limit,
            "gasPrice": self.gas_price,
            "version": self.version,
        }
        for key, value in optional.items():
            if value is not None:
                payload[key] = value
        return payload


@dataclass(frozen=True)
class DataRequestResult:
    """Final result of a data request, as reported by the network."""

    dr_id: str
    dr_block_height: int
    block_height: int
    block_timestamp: Optional[datetime] = None
    version: str = ""
    exit_code: int = 0
    gas_used: int = 0
    result: str = ""  # hex
    consensus: bool = False
    payback_address: str = ""
    seda_payload: str = ""

    @property
    def result_as_utf8(self) -> str:
        """Decode the hex result as UTF-8, replacing undecodable bytes."""
        return bytes.fromhex(strip_hex_prefix(self.result)).decode("utf-8", errors="replace")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DataRequestResult":
        """
        Create a result from the JSON the submitting library returns.

        Bigint fields may arrive as decimal strings and the block timestamp
        as an ISO 8601 string.
        """
        try:
            dr_id = data["drId"]
            dr_block_height = int(data["drBlockHeight"])
            block_height = int(data["blockHeight"])
        except KeyError as e:
            raise ValueError(f"Data request result is missing field {e}") from None

        timestamp = data.get("blockTimestamp")
        return cls(
            dr_id=dr_id,
            dr_block_height=dr_block_height,
            block_height=block_height,
            block_timestamp=parse_iso_timestamp(timestamp) if timestamp else None,
            version=data.get("version", ""),
            exit_code=int(data.get("exitCode", 0)),
            gas_used=int(data.get("gasUsed", 0)),
            result=data.get("result", ""),
            consensus=bool(data.get("consensus", False)),
            payback_address=data.get("paybackAddress", ""),
            seda_payload=data.get("sedaPayload", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the result fields in display order."""
        return {
            "dr_id": self.dr_id,
            "dr_block_height": self.dr_block_height,
            "version": self.version,
            "exit_code": self.exit_code,
            "gas_used": self.gas_used,
            "result": self.result,
            "result_as_utf8": self.result_as_utf8,
            "block_height": self.block_height,
            "block_timestamp": self.block_timestamp,
            "consensus": self.consensus,
            "payback_address": self.payback_address,
            "seda_payload": self.seda_payload,
        }


def strip_hex_prefix(hex_str: str) -> str:
    if hex_str.startswith(("0x", "0X")):
        return hex_str[2:]
    return hex_str


def format_iso_timestamp(dt: datetime) -> str:
    """Format a datetime as UTC with millisecond precision, e.g. 2024-01-02T03:04:05.678Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def parse_iso_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp; a trailing Z is read as UTC."""
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
