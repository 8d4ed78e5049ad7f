from enum import IntEnum


class VoteSupport(IntEnum):
    AGAINST = 0
    FOR = 1
