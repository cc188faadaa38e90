"""Tests for the fixed binary layout of interaction filters."""

import numpy as np
import pytest

from collide.internal import layout
from collide.internal.interaction_groups import InteractionFilter
from collide.internal.layers import U32_MAX


class TestRecordLayout:
    """Tests for the numpy record dtype."""

    def test_record_size(self):
        assert layout.RECORD_SIZE == 20
        assert layout.INTERACTION_FILTER_DTYPE.itemsize == 20

    def test_field_order(self):
        assert layout.INTERACTION_FILTER_DTYPE.names == (
            "memberships",
            "filter",
            "grouping_memberships",
            "grouping_filter",
            "grouping_id",
        )

    def test_fields_are_packed(self):
        """Each field sits right after the previous one."""
        offsets = [layout.INTERACTION_FILTER_DTYPE.fields[name][1] for name in layout.FIELD_NAMES]
        assert offsets == [0, 4, 8, 12, 16]

    def test_to_record(self):
        record = layout.to_record(InteractionFilter(1, 2, 3, 4, 5))
        assert record["memberships"] == 1
        assert record["grouping_id"] == 5

    def test_from_record(self):
        records = np.array([(0xFF, 0xFF, 0b01, 0b10, 1)], dtype=layout.INTERACTION_FILTER_DTYPE)
        assert layout.from_record(records[0]) == InteractionFilter(0xFF, 0xFF, 0b01, 0b10, 1)


class TestBytes:
    """Tests for raw byte conversion."""

    def test_to_bytes_little_endian(self):
        data = layout.to_bytes(InteractionFilter(1, 2, 3, 4, 5))
        assert data == bytes.fromhex("01000000" "02000000" "03000000" "04000000" "05000000")

    def test_all_bytes(self):
        assert InteractionFilter.all().to_bytes() == b"\xff" * 20

    def test_none_bytes(self):
        assert InteractionFilter.none().to_bytes() == b"\x00" * 20

    def test_from_bytes(self):
        data = bytes.fromhex("ffffffff" "00000000" "02000000" "01000000" "07000000")
        f = InteractionFilter.from_bytes(data)
        assert f == InteractionFilter(U32_MAX, 0, 2, 1, 7)

    def test_bytes_preserve_predicate(self):
        a = InteractionFilter(0xFF, 0xFF, 0b01, 0b10, 1)
        b = InteractionFilter(0xFF, 0xFF, 0b10, 0b01, 1)
        decoded = layout.from_bytes(layout.to_bytes(a))
        assert decoded == a
        assert decoded.test(b) == a.test(b)

    @pytest.mark.parametrize("size", [0, 4, 19, 21, 40])
    def test_from_bytes_wrong_size(self, size):
        with pytest.raises(ValueError):
            layout.from_bytes(b"\x00" * size)


class TestDict:
    """Tests for mapping conversion."""

    def test_to_dict(self):
        assert layout.to_dict(InteractionFilter(1, 2, 3, 4, 5)) == {
            "memberships": 1,
            "filter": 2,
            "grouping_memberships": 3,
            "grouping_filter": 4,
            "grouping_id": 5,
        }

    def test_from_dict(self):
        data = {
            "memberships": 8,
            "filter": 9,
            "grouping_memberships": 0,
            "grouping_filter": 0,
            "grouping_id": 0,
        }
        assert layout.from_dict(data) == InteractionFilter(8, 9)

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            layout.from_dict({"memberships": 1, "filter": 1})
