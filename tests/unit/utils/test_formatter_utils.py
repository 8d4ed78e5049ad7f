import logging

import pytest
from eth_utils import to_checksum_address

from utils.formatter_utils import from_fixed_point, hex_to_bytes, parse_quantity, to_hex_data, to_normalized_address
from utils.logger_utils import configure_logging
from utils.validation_utils import validate_block_range


def test_from_fixed_point():
    assert from_fixed_point("2000000000000000000") == 2
    assert from_fixed_point(1500000000000000000) == 1.5
    assert from_fixed_point(1234, decimals=2) == 12.34


def test_hex_helpers():
    assert parse_quantity("0x00") == 0
    assert to_hex_data(b"\x12\x34") == "0x1234"
    assert to_hex_data("abcd") == "0xabcd"
    assert hex_to_bytes("0x1234") == b"\x12\x34"


def test_to_normalized_address_checksums():
    address = "0x" + "ab" * 20
    assert to_normalized_address(address) == to_checksum_address(address)
    assert to_normalized_address(address.upper().replace("0X", "0x")) == to_checksum_address(address)
    with pytest.raises(ValueError):
        to_normalized_address("0x1234")


def test_validate_block_range_accepts_tags():
    validate_block_range(0, "latest")
    validate_block_range("earliest", "latest")
    with pytest.raises(ValueError):
        validate_block_range(5, 1)
    with pytest.raises(ValueError):
        validate_block_range(-1, 1)


def test_configure_logging_accepts_level_names():
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
    try:
        configure_logging(log_level="DEBUG")
        assert root_logger.level == logging.DEBUG
        assert logging.getLogger("web3").level == logging.WARNING

        with pytest.raises(ValueError):
            configure_logging(log_level="LOUD")
    finally:
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)


def test_parse_quantity_accepts_decimal_and_hex():
    assert parse_quantity("1200") == 1200
    assert parse_quantity("0x4b0") == 1200
    assert parse_quantity("0X4B0") == 1200
    assert parse_quantity(7) == 7


@pytest.mark.parametrize("value", ["0xzz", "twelve", ""])
def test_parse_quantity_rejects_malformed_input(value):
    with pytest.raises(ValueError):
        parse_quantity(value)
