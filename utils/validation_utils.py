from typing import Union

BLOCK_TAGS = ("earliest", "latest", "pending", "safe", "finalized")

BlockIdentifier = Union[int, str]


def validate_block_range(range_start_incl: BlockIdentifier, range_end_incl: BlockIdentifier) -> None:
    """
    Validate a block range used for event log queries.

    Args:
        range_start_incl: The inclusive start block number or tag.
        range_end_incl: The inclusive end block number or tag.

    Raises:
        ValueError: If the block range is invalid.
    """
    validate_block_identifier(range_start_incl)
    validate_block_identifier(range_end_incl)

    # Tags are resolved by the node, only numeric bounds can be compared here
    if isinstance(range_start_incl, int) and isinstance(range_end_incl, int):
        if range_end_incl < range_start_incl:
            raise ValueError(
                f"range_end ({range_end_incl}) must be greater than or equal to range_start ({range_start_incl})"
            )


def validate_block_identifier(block: BlockIdentifier) -> None:
    """
    Validate a block number or a named block tag.

    Raises:
        ValueError: If the identifier is neither a non-negative integer nor a known tag
    """
    if isinstance(block, bool):
        raise ValueError(f"Invalid block identifier: {block}")
    if isinstance(block, int):
        validate_block_number(block)
    elif block not in BLOCK_TAGS:
        raise ValueError(f"Unknown block tag '{block}'. Supported: {', '.join(BLOCK_TAGS)}")


def validate_block_number(block_number: int) -> None:
    """
    Validate a single block number.

    Args:
        block_number: The block number to validate, must be >= 0

    Raises:
        ValueError: If the block number is invalid
    """
    if block_number < 0:
        raise ValueError(f"Block number must be greater than or equal to 0, got {block_number}")
