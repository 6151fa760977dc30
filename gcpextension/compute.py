"""Querying GCP compute addresses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol


@dataclass(frozen=True)
class Address:
    """A reserved IP address and the resources using it."""

    name: str
    address_type: str = ""
    status: str = ""
    users: tuple[str, ...] = field(default_factory=tuple)


class AddressService(Protocol):
    """The compute operations the client relies on."""

    def list_addresses(self, project_id: str, region: str) -> Iterable[Address]:
        """Yield every address of the region, across all pages."""


def external_addresses(addresses: Iterable[Address]) -> dict[str, list[str]]:
    """Map each external address name to the names of the resources using it."""
    result: dict[str, list[str]] = {}
    for address in addresses:
        if address.address_type != "EXTERNAL":
            continue
        users = []
        if address.status == "IN_USE":
            users = [user.rsplit("/", 1)[-1] for user in address.users]
        result[address.name] = users
    return result


class ComputeClient:
    """A compute client for one GCP project."""

    def __init__(self, service: AddressService, project_id: str) -> None:
        self.service = service
        self.project_id = project_id

    def get_external_addresses(self, region: str) -> dict[str, list[str]]:
        """Map every external IP address in the region to the names of its users."""
        return external_addresses(self.service.list_addresses(self.project_id, region))