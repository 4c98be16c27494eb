"""
Structural decoder: fixed-width field extraction.

No validation happens here; callers must have matched the string against
the structure pattern for the given type.
"""

from __future__ import annotations

from .models import NICParts, NICType

# OLD: YY DDD SSS C L
# NEW: YYYY DDD SSSS C


def _old_parts(nic: str) -> NICParts:
    return NICParts(
        year=f"19{nic[0:2]}",
        days=nic[2:5],
        serial=nic[5:8],
        checkdigit=nic[8:9],
        letter=nic[9:10],
    )


def _new_parts(nic: str) -> NICParts:
    return NICParts(
        year=nic[0:4],
        days=nic[4:7],
        serial=nic[7:11],
        checkdigit=nic[11:12],
        letter=None,
    )


def get_nic_parts(nic: str, nic_type: NICType) -> NICParts:
    """Split a sanitized NIC into its fields."""
    if nic_type is NICType.OLD:
        return _old_parts(nic)
    return _new_parts(nic)
