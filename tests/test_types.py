"""Tests for core types."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from seda_dr.core.types import (
    ConsensusMethod,
    ConsensusOptions,
    DataRequestResult,
    PostDataRequestInput,
    format_iso_timestamp,
    parse_iso_timestamp,
)


class TestConsensusOptions:
    """Test ConsensusOptions."""

    def test_default_is_none(self):
        """Test that consensus is disabled by default."""
        options = ConsensusOptions()
        assert options.method == ConsensusMethod.NONE
        assert options.to_dict() == {"method": "none"}

    def test_mode_requires_json_path(self):
        """Test that mode consensus needs a json path."""
        with pytest.raises(ValueError, match="json_path is required"):
            ConsensusOptions(method=ConsensusMethod.MODE)

        options = ConsensusOptions(method=ConsensusMethod.MODE, json_path="$.markets[0].yes_price")
        assert options.to_dict() == {"method": "mode", "jsonPath": "$.markets[0].yes_price"}

    def test_none_rejects_json_path(self):
        """Test that a json path is rejected without mode consensus."""
        with pytest.raises(ValueError, match="only valid"):
            ConsensusOptions(json_path="$.price")


class TestPostDataRequestInput:
    """Test PostDataRequestInput."""

    def test_empty_program_id(self):
        """Test that the program id is required."""
        with pytest.raises(ValueError, match="exec_program_id cannot be empty"):
            PostDataRequestInput(exec_program_id="")

    def test_immutable(self):
        """Test that inputs cannot be changed once built."""
        dr_input = PostDataRequestInput(exec_program_id="abc123")
        with pytest.raises(FrozenInstanceError):
            dr_input.exec_program_id = "other"

    def test_non_positive_limits(self):
        """Test that gas and replication settings must be positive."""
        with pytest.raises(ValueError, match="replication_factor must be positive"):
            PostDataRequestInput(exec_program_id="abc123", replication_factor=0)

        with pytest.raises(ValueError, match="gas_price must be positive"):
            PostDataRequestInput(exec_program_id="abc123", gas_price=-1)

    def test_to_dict(self):
        """Test the wire form."""
        dr_input = PostDataRequestInput(
            exec_program_id="abc123",
            exec_inputs=b"46724",
            tally_inputs=b"",
            memo=b"memo",
        )

        assert dr_input.to_dict() == {
            "consensusOptions": {"method": "none"},
            "execProgramId": "abc123",
            "execInputs": "3436373234",
            "tallyInputs": "",
            "memo": "6d656d6f",
        }

    def test_to_dict_optional_fields(self):
        """Test that optional fields appear only when set."""
        dr_input = PostDataRequestInput(
            exec_program_id="abc123",
            replication_factor=2,
            gas_price=2000,
            version="0.0.2",
        )
        payload = dr_input.to_dict()

        assert payload["replicationFactor"] == 2
        assert payload["gasPrice"] == 2000
        assert payload["version"] == "0.0.2"
        assert "execGasLimit" not in payload
        assert "tallyGasLimit" not in payload


class TestDataRequestResult:
    """Test DataRequestResult."""

    @pytest.fixture
    def result_json(self):
        """Result JSON as the dev-tools library serializes it."""
        return {
            "drId": "r1",
            "drBlockHeight": "42",
            "version": "0.0.1",
            "exitCode": 0,
            "gasUsed": "1234567",
            "result": "7b2261223a317d",
            "consensus": True,
            "blockHeight": "45",
            "blockTimestamp": "2024-01-02T03:04:05.678Z",
            "paybackAddress": "",
            "sedaPayload": "",
        }

    def test_from_dict(self, result_json):
        """Test parsing the library's JSON."""
        result = DataRequestResult.from_dict(result_json)

        assert result.dr_id == "r1"
        assert result.dr_block_height == 42
        assert result.block_height == 45
        assert result.gas_used == 1234567
        assert result.consensus is True
        assert result.block_timestamp == datetime(
            2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc
        )
        assert result.result_as_utf8 == '{"a":1}'

    def test_from_dict_without_timestamp(self, result_json):
        """Test that the block timestamp is optional."""
        del result_json["blockTimestamp"]
        result = DataRequestResult.from_dict(result_json)
        assert result.block_timestamp is None

    def test_from_dict_missing_field(self, result_json):
        """Test that required fields are enforced."""
        del result_json["drId"]
        with pytest.raises(ValueError, match="missing field"):
            DataRequestResult.from_dict(result_json)

    def test_result_as_utf8_with_prefix(self):
        """Test decoding a 0x prefixed result."""
        result = DataRequestResult(dr_id="r1", dr_block_height=1, block_height=2, result="0x6869")
        assert result.result_as_utf8 == "hi"

    def test_to_dict_order(self, result_json):
        """Test display field order."""
        keys = list(DataRequestResult.from_dict(result_json).to_dict())
        assert keys[:2] == ["dr_id", "dr_block_height"]
        assert "block_timestamp" in keys
        assert "result_as_utf8" in keys


class TestTimestamps:
    """Test timestamp helpers."""

    def test_format_iso_timestamp(self):
        """Test millisecond precision UTC formatting."""
        dt = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
        assert format_iso_timestamp(dt) == "2024-01-02T03:04:05.678Z"

    def test_format_converts_to_utc(self):
        """Test that aware datetimes are converted to UTC."""
        dt = datetime(2024, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_iso_timestamp(dt) == "2024-01-02T03:04:05.000Z"

    def test_format_naive_is_utc(self):
        """Test that naive datetimes are read as UTC."""
        assert format_iso_timestamp(datetime(2024, 1, 2)) == "2024-01-02T00:00:00.000Z"

    def test_parse_round_trip(self):
        """Test parsing what we format."""
        dt = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
        assert parse_iso_timestamp(format_iso_timestamp(dt)) == dt
