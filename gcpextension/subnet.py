"""Subnets of a GCP infrastructure and lookups over them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


class SubnetPurpose(str, enum.Enum):
    """The purpose a subnet serves."""

    NODES = "nodes"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Subnet:
    """A subnet with its name and purpose."""

    name: str
    purpose: SubnetPurpose | str


class SubnetNotFoundError(LookupError):
    """Raised when no subnet has the requested purpose."""


def _purpose_text(purpose: SubnetPurpose | str) -> str:
    return purpose.value if isinstance(purpose, SubnetPurpose) else str(purpose)


def find_subnet_for_purpose(
    subnets: Iterable[Subnet] | None, purpose: SubnetPurpose | str
) -> Subnet:
    """Return the first subnet whose purpose matches the given one."""
    for subnet in subnets or ():
        if _purpose_text(subnet.purpose) == _purpose_text(purpose):
            return subnet
    raise SubnetNotFoundError(f'no subnet with purpose "{_purpose_text(purpose)}" found')