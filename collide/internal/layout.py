"""Fixed binary layout for interaction filters.

A filter is stored as five little-endian ``uint32`` values in field
declaration order (20 bytes, no padding, no header), so raw records can be
shared between processes or embedded in a host scene format.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

import numpy as np

from collide.internal.interaction_groups import InteractionFilter

logger = logging.getLogger(__name__)

FIELD_NAMES = (
    "memberships",
    "filter",
    "grouping_memberships",
    "grouping_filter",
    "grouping_id",
)

INTERACTION_FILTER_DTYPE = np.dtype([(name, "<u4") for name in FIELD_NAMES])
RECORD_SIZE = INTERACTION_FILTER_DTYPE.itemsize


def to_record(interaction_filter: InteractionFilter) -> np.void:
    record = np.zeros((), dtype=INTERACTION_FILTER_DTYPE)
    for name in FIELD_NAMES:
        record[name] = getattr(interaction_filter, name)
    return record[()]


def from_record(record: np.void) -> InteractionFilter:
    return InteractionFilter(*(int(record[name]) for name in FIELD_NAMES))


def to_bytes(interaction_filter: InteractionFilter) -> bytes:
    return to_record(interaction_filter).tobytes()


def from_bytes(data: bytes) -> InteractionFilter:
    if len(data) != RECORD_SIZE:
        raise ValueError(f"Interaction filter record must be {RECORD_SIZE} bytes, got {len(data)}.")

    record = np.frombuffer(data, dtype=INTERACTION_FILTER_DTYPE, count=1)[0]
    interaction_filter = from_record(record)
    logger.debug("Decoded interaction filter %s", interaction_filter)
    return interaction_filter


def to_dict(interaction_filter: InteractionFilter) -> dict[str, int]:
    return {name: getattr(interaction_filter, name) for name in FIELD_NAMES}


def from_dict(data: Mapping[str, Any]) -> InteractionFilter:
    # Missing fields raise KeyError; the layout has no optional members
    return InteractionFilter(*(int(data[name]) for name in FIELD_NAMES))
