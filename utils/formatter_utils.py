# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified by: Cuong CT, 6/12/2025
# Change Description: using eth_utils library for implement some formatter utilities
# Modified for governance client: fixed point scaling and calldata hex helpers

from typing import Union

from eth_utils import add_0x_prefix, to_bytes, to_checksum_address, to_int

ZERO_VALUE_HEX = "0x00"
DEFAULT_DECIMALS = 18


def parse_quantity(value: Union[int, str]) -> int:
    """
    Converts a decimal or 0x-prefixed hex quantity (e.g. "1200", "0x4b0") to an integer.
    Malformed input raises ValueError.
    """
    if isinstance(value, int):
        return value
    if value[:2].lower() == "0x":
        return to_int(hexstr=value)
    return int(value)


def to_normalized_address(address: str) -> str:
    """
    Converts an address to its EIP-55 checksum form.
    web3 refuses non-checksummed addresses as contract arguments, so every
    account entering the client passes through here.
    """
    return to_checksum_address(address)


def from_fixed_point(raw_value: Union[int, str], decimals: int = DEFAULT_DECIMALS) -> float:
    """
    Scales an on-chain fixed point integer (e.g. 18 decimals) down to a float.
    """
    return int(raw_value) / 10 ** decimals


def to_hex_data(data: Union[bytes, str]) -> str:
    """
    Normalizes ABI payloads (bytes or hex string) to a 0x-prefixed hex string.
    """
    if isinstance(data, (bytes, bytearray)):
        return add_0x_prefix(bytes(data).hex())
    return add_0x_prefix(data)


def hex_to_bytes(data: Union[bytes, str]) -> bytes:
    """
    Inverse of to_hex_data, used when payloads are passed back as bytes arguments.
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    return to_bytes(hexstr=data)
