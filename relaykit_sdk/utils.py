"""
Utility functions for the RelayKit SDK.
"""
from typing import Any

from web3 import Web3


def validate_address(value: Any) -> str:
    """
    Check that a value is a 20-byte hex address

    The value is returned unchanged so callers keep the exact string they
    passed in; use ``Web3.to_checksum_address`` where a canonical form is needed.

    Args:
        value: Candidate address

    Returns:
        The same address string

    Raises:
        ValueError: If the value is not a valid address (including a
            mixed-case address with a bad EIP-55 checksum)
    """
    if not isinstance(value, str) or not Web3.is_address(value):
        raise ValueError(f"Invalid address: {value!r}")
    return value


def ensure_hex_data(value: Any) -> str:
    """
    Check that a value is 0x-prefixed hex call data

    "0x" on its own is valid and means an empty call.

    Raises:
        ValueError: If the value is not 0x-prefixed, even-length hex
    """
    if not isinstance(value, str) or not value.startswith("0x"):
        raise ValueError(f"Hex data must be a 0x-prefixed string, got: {value!r}")

    body = value[2:]
    if any(c.isspace() for c in body):
        raise ValueError("Hex data must not contain whitespace")
    try:
        bytes.fromhex(body)
    except ValueError as e:
        raise ValueError(f"Invalid hex data: {str(e)}")
    return value


def ensure_wei_amount(value: Any) -> str:
    """Normalize a wei amount (int or decimal string) to a decimal string"""
    if isinstance(value, bool):
        raise ValueError("Wei amount must be an integer or decimal string")
    if isinstance(value, int):
        amount = value
    elif isinstance(value, str) and value.isdigit():
        amount = int(value)
    else:
        raise ValueError(f"Wei amount must be an integer or decimal string, got: {value!r}")

    if amount < 0:
        raise ValueError(f"Wei amount must not be negative, got: {amount}")
    return str(amount)
