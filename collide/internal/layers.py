from __future__ import annotations

from enum import IntFlag
from typing import Iterable, Union

U32_MAX = 0xFFFFFFFF
# Grouping id of filters that do not take part in any grouping
NO_GROUPING = 0


class InteractionGroup(IntFlag):
    """Bit flags naming the 32 interaction groups a filter can reference."""

    GROUP_1 = 1 << 0
    GROUP_2 = 1 << 1
    GROUP_3 = 1 << 2
    GROUP_4 = 1 << 3
    GROUP_5 = 1 << 4
    GROUP_6 = 1 << 5
    GROUP_7 = 1 << 6
    GROUP_8 = 1 << 7
    GROUP_9 = 1 << 8
    GROUP_10 = 1 << 9
    GROUP_11 = 1 << 10
    GROUP_12 = 1 << 11
    GROUP_13 = 1 << 12
    GROUP_14 = 1 << 13
    GROUP_15 = 1 << 14
    GROUP_16 = 1 << 15
    GROUP_17 = 1 << 16
    GROUP_18 = 1 << 17
    GROUP_19 = 1 << 18
    GROUP_20 = 1 << 19
    GROUP_21 = 1 << 20
    GROUP_22 = 1 << 21
    GROUP_23 = 1 << 22
    GROUP_24 = 1 << 23
    GROUP_25 = 1 << 24
    GROUP_26 = 1 << 25
    GROUP_27 = 1 << 26
    GROUP_28 = 1 << 27
    GROUP_29 = 1 << 28
    GROUP_30 = 1 << 29
    GROUP_31 = 1 << 30
    GROUP_32 = 1 << 31

    ALL = U32_MAX
    NONE = 0x00000000

    @classmethod
    def mask_of(cls, *groups: Union[InteractionGroup, int, Iterable[Union[InteractionGroup, int]]]) -> int:
        """Build a 32-bit mask from one or more groups."""
        bits = 0
        for item in groups:
            if isinstance(item, (list, tuple, set, frozenset)):
                for sub in item:
                    bits |= int(sub)
            else:
                bits |= int(item)
        return int(bits) & U32_MAX

    @classmethod
    def can_interact(cls, memberships_a: int, filter_a: int, memberships_b: int, filter_b: int) -> bool:
        """Symmetric membership/filter check: each side must accept the other."""
        return (memberships_a & filter_b) != 0 and (memberships_b & filter_a) != 0
