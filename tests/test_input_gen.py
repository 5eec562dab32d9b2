"""
Unit tests for host-side input generation.
"""

import pytest
from dynsha256.types import Public, Private, Array, field
from dynsha256.input_gen import (
    parse_argument_value, parse_return_value, prepare_inputs, sha256_pad, dynamic_sha256_pad,
)


class TestSha256Pad:
    """Tests for standard padding up to a capacity."""

    def test_empty_message(self):
        padded, length = sha256_pad(b"", 128)
        assert length == 64
        assert padded == b"\x80" + b"\x00" * 127

    def test_length_field(self):
        padded, length = sha256_pad(b"abc", 1024)
        assert len(padded) == 1024
        assert length == 64
        assert padded[:4] == b"abc\x80"
        assert padded[56:64] == (24).to_bytes(8, byteorder="big")
        assert padded[64:] == b"\x00" * 960

    def test_block_boundaries(self):
        assert sha256_pad(b"a" * 55, 64)[1] == 64
        assert sha256_pad(b"a" * 56, 128)[1] == 128
        assert sha256_pad(b"a" * 64, 128)[1] == 128

    def test_capacity_too_small(self):
        with pytest.raises(ValueError, match="maximum is 64"):
            sha256_pad(b"a" * 100, 64)

    def test_capacity_not_multiple_of_64(self):
        with pytest.raises(ValueError, match="not a multiple of 64"):
            sha256_pad(b"a" * 10, 134)

    def test_digest_index(self):
        assert dynamic_sha256_pad(b"", 1024)[1] == 0
        assert dynamic_sha256_pad(b"a" * 128, 1024)[1] == 16


class TestParseArgumentValue:
    """Tests for converting host values to circuit inputs."""

    def test_field(self):
        assert parse_argument_value(5, field, "x") == field(5)

    def test_private_and_public_are_unwrapped(self):
        assert parse_argument_value(5, Private[field], "x") == field(5)
        assert parse_argument_value([1, 2], Public[Array[field, 2]], "x") == [field(1), field(2)]

    def test_bytes_as_array(self):
        assert parse_argument_value(b"\x01\x02", Array[field, 2], "x") == [field(1), field(2)]

    def test_nested_array(self):
        value = parse_argument_value([[1, 2], [3, 4]], Array[Array[int, 2], 2], "x")
        assert value == [[1, 2], [3, 4]]

    def test_wrong_length(self):
        with pytest.raises(ValueError, match="Expected 3 elements for x, got 2"):
            parse_argument_value([1, 2], Array[field, 3], "x")

    def test_wrong_inner_length(self):
        with pytest.raises(ValueError, match="Expected 2 elements for x.1"):
            parse_argument_value([[1, 2], [3]], Array[Array[int, 2], 2], "x")

    def test_not_an_integer(self):
        with pytest.raises(ValueError, match="Expected an integer for x"):
            parse_argument_value("5", field, "x")
        with pytest.raises(ValueError, match="Expected an integer for x"):
            parse_argument_value(True, int, "x")

    def test_unsupported_annotation(self):
        with pytest.raises(ValueError, match="Unsupported type annotation"):
            parse_argument_value(1.5, float, "x")

    def test_return_value(self):
        assert parse_return_value([field(1), field(255)], Array[field, 2]) == [1, 255]
        assert parse_return_value(True, bool) is True


class TestPrepareInputs:
    """Tests for binding arguments to an entry function signature."""

    names = ("a", "b")
    types = {"a": Private[field], "b": Public[Array[field, 2]]}

    def test_positional_and_keyword(self):
        inputs = prepare_inputs(self.names, self.types, 1, b=[2, 3])
        assert inputs == {"a": field(1), "b": [field(2), field(3)]}

    def test_missing_argument(self):
        with pytest.raises(ValueError, match="Missing arguments: b"):
            prepare_inputs(self.names, self.types, 1)

    def test_unexpected_argument(self):
        with pytest.raises(ValueError, match="Unexpected argument: c"):
            prepare_inputs(self.names, self.types, 1, b=[2, 3], c=4)

    def test_too_many_arguments(self):
        with pytest.raises(ValueError, match="at most 2 arguments"):
            prepare_inputs(self.names, self.types, 1, [2, 3], 4)

    def test_missing_annotation(self):
        with pytest.raises(ValueError, match="Missing type annotation for argument b"):
            prepare_inputs(self.names, {"a": field}, 1, 2)
