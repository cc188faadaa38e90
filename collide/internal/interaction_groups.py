from __future__ import annotations

from dataclasses import dataclass, replace

from collide.internal.layers import NO_GROUPING, U32_MAX, InteractionGroup


@dataclass(frozen=True)
class InteractionFilter:
    """Pairwise filtering using 32-bit group masks.

    Two filters ``a`` and ``b`` may interact when the memberships of each one
    share at least one bit with the filter of the other. When both filters
    carry the same non-zero ``grouping_id``, the grouping masks must pass
    the same mutual check on top of that. Filters from different groupings,
    or with no grouping (id 0), skip the grouping check entirely.
    """

    memberships: int
    filter: int
    grouping_memberships: int = 0
    grouping_filter: int = 0
    grouping_id: int = 0

    def __post_init__(self):
        # Keep every field in the u32 domain so ~mask style values work
        for name in ("memberships", "filter", "grouping_memberships", "grouping_filter", "grouping_id"):
            object.__setattr__(self, name, int(getattr(self, name)) & U32_MAX)

    @classmethod
    def all(cls) -> "InteractionFilter":
        """Allow interaction with everything."""
        return cls(U32_MAX, U32_MAX, U32_MAX, U32_MAX, U32_MAX)

    @classmethod
    def none(cls) -> "InteractionFilter":
        """Prevent all interactions."""
        return cls(0, 0, 0, 0, 0)

    @classmethod
    def default(cls) -> "InteractionFilter":
        return cls.all()

    def with_memberships(self, memberships: int) -> "InteractionFilter":
        return replace(self, memberships=memberships)

    def with_filter(self, filter: int) -> "InteractionFilter":
        return replace(self, filter=filter)

    def with_grouping_memberships(self, memberships: int) -> "InteractionFilter":
        return replace(self, grouping_memberships=memberships)

    def with_grouping_filter(self, filter: int) -> "InteractionFilter":
        return replace(self, grouping_filter=filter)

    def with_grouping_id(self, grouping_id: int) -> "InteractionFilter":
        return replace(self, grouping_id=grouping_id)

    def allows_global(self, other: "InteractionFilter") -> bool:
        return InteractionGroup.can_interact(
            self.memberships,
            self.filter,
            other.memberships,
            other.filter
        )

    def allows_grouping(self, other: "InteractionFilter") -> bool:
        return InteractionGroup.can_interact(
            self.grouping_memberships,
            self.grouping_filter,
            other.grouping_memberships,
            other.grouping_filter
        )

    def shares_grouping(self, other: "InteractionFilter") -> bool:
        return self.grouping_id == other.grouping_id and self.grouping_id != NO_GROUPING

    def test(self, other: "InteractionFilter") -> bool:
        """Check whether ``self`` and ``other`` are allowed to interact.

        The global masks are checked first. The grouping masks only narrow
        the result when both filters share a grouping, they never replace
        the global check.
        """
        return self.allows_global(other) and (
            not self.shares_grouping(other) or self.allows_grouping(other)
        )

    def to_bytes(self) -> bytes:
        from collide.internal.layout import to_bytes

        return to_bytes(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> "InteractionFilter":
        from collide.internal.layout import from_bytes

        return from_bytes(data)


def test(a: InteractionFilter, b: InteractionFilter) -> bool:
    return a.test(b)
