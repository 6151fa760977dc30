"""Managing record sets in Google Cloud DNS managed zones."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol, Sequence


@dataclass(frozen=True)
class ManagedZone:
    """A managed zone: its resource name and the DNS name it serves."""

    name: str
    dns_name: str


@dataclass
class ResourceRecordSet:
    """A set of records of one type under one name."""

    name: str
    type: str
    rrdatas: list[str] = field(default_factory=list)
    ttl: int = 0


@dataclass
class Change:
    """A batch of record set deletions and additions applied together."""

    additions: list[ResourceRecordSet] = field(default_factory=list)
    deletions: list[ResourceRecordSet] = field(default_factory=list)


class DNSService(Protocol):
    """The Cloud DNS operations the client relies on."""

    def list_managed_zones(self, project_id: str) -> Iterable[ManagedZone]:
        """Yield every managed zone of the project, across all pages."""

    def list_resource_record_sets(
        self, project_id: str, managed_zone: str, name: str, record_type: str
    ) -> Sequence[ResourceRecordSet]:
        """Return the record sets with the given name and type."""

    def create_change(self, project_id: str, managed_zone: str, change: Change) -> object:
        """Apply a change to the managed zone."""


def normalize_zone_name(zone_name: str) -> str:
    """Turn an escaped wildcard into '*' and drop a trailing dot."""
    if zone_name.startswith("\\052."):
        zone_name = "*" + zone_name[4:]
    return zone_name[:-1] if zone_name.endswith(".") else zone_name


def ensure_trailing_dot(host: str) -> str:
    """Return the host name with a trailing dot."""
    return host if host.endswith(".") else host + "."


def format_rrdatas(record_type: str, values: Iterable[str]) -> list[str]:
    """Format record data for the given type; CNAME targets get a trailing dot."""
    if record_type == "CNAME":
        return [ensure_trailing_dot(value) for value in values]
    return list(values)


class DNSClient:
    """A client for the managed zones of one GCP project."""

    def __init__(self, service: DNSService, project_id: str) -> None:
        self.service = service
        self.project_id = project_id

    def zone_id(self, managed_zone: str) -> str:
        """Return the ID of a managed zone: project ID and zone name."""
        return f"{self.project_id}/{managed_zone}"

    def project_and_managed_zone(self, zone_id: str) -> tuple[str, str]:
        """Split a zone ID into project and zone; a bare name uses this project."""
        parts = zone_id.split("/")
        if len(parts) != 2:
            return self.project_id, zone_id
        return parts[0], parts[1]

    def get_managed_zones(self) -> dict[str, str]:
        """Map the DNS name of every managed zone to its zone ID."""
        return {
            normalize_zone_name(zone.dns_name): self.zone_id(zone.name)
            for zone in self.service.list_managed_zones(self.project_id)
        }

    def _get_record_set(
        self, project: str, managed_zone: str, name: str, record_type: str
    ) -> ResourceRecordSet | None:
        rrsets = self.service.list_resource_record_sets(project, managed_zone, name, record_type)
        return rrsets[0] if rrsets else None

    def create_or_update_record_set(
        self,
        managed_zone: str,
        name: str,
        record_type: str,
        rrdatas: Iterable[str],
        ttl: int,
    ) -> None:
        """Create the record set, or replace it if it differs from what is wanted."""
        project, zone = self.project_and_managed_zone(managed_zone)
        name = ensure_trailing_dot(name)
        existing = self._get_record_set(project, zone, name, record_type)
        wanted = format_rrdatas(record_type, rrdatas)
        change = Change()
        if existing is not None:
            if list(existing.rrdatas) == wanted and existing.ttl == ttl:
                return
            change.deletions.append(existing)
        change.additions.append(
            ResourceRecordSet(name=name, type=record_type, rrdatas=wanted, ttl=ttl)
        )
        self.service.create_change(project, zone, change)

    def delete_record_set(self, managed_zone: str, name: str, record_type: str) -> None:
        """Delete the record set if it exists."""
        project, zone = self.project_and_managed_zone(managed_zone)
        name = ensure_trailing_dot(name)
        existing = self._get_record_set(project, zone, name, record_type)
        if existing is None:
            return
        self.service.create_change(project, zone, Change(deletions=[existing]))