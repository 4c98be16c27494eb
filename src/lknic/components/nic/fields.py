"""
Pydantic field types for NIC numbers.

Usage:
    class ApplicantForm(BaseModel):
        nic: NICStr

The field is validated and stored in canonical form. Invalid numbers
surface as pydantic ValidationError entries carrying the NICError message.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator

from .component import sanitize


def _sanitize_nic(value: str) -> str:
    # NICError is a ValueError, which pydantic reports as a field error
    return sanitize(value)


NICStr = Annotated[str, AfterValidator(_sanitize_nic)]
