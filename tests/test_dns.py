import pytest

from gcpextension.dns import (
    Change,
    DNSClient,
    ManagedZone,
    ResourceRecordSet,
    ensure_trailing_dot,
    format_rrdatas,
    normalize_zone_name,
)


class FakeDNSService:
    def __init__(self, zones=(), rrsets=()):
        self.zones = list(zones)
        self.rrsets = list(rrsets)
        self.changes = []
        self.queries = []

    def list_managed_zones(self, project_id):
        self.queries.append(("zones", project_id))
        yield from self.zones

    def list_resource_record_sets(self, project_id, managed_zone, name, record_type):
        self.queries.append(("rrsets", project_id, managed_zone, name, record_type))
        return [r for r in self.rrsets if r.name == name and r.type == record_type]

    def create_change(self, project_id, managed_zone, change):
        self.changes.append((project_id, managed_zone, change))


def test_normalize_zone_name_wildcard_and_dot():
    assert normalize_zone_name("\\052.example.com.") == "*.example.com"
    assert normalize_zone_name("example.com") == "example.com"


def test_ensure_trailing_dot_is_idempotent():
    once = ensure_trailing_dot("example.com")
    assert once.endswith(".")
    assert ensure_trailing_dot(once) == once


def test_format_rrdatas_only_cname_gets_dot():
    assert format_rrdatas("CNAME", ["a.example.com", "b.example.com."]) == [
        "a.example.com.",
        "b.example.com.",
    ]
    assert format_rrdatas("A", ["1.2.3.4"]) == ["1.2.3.4"]


def test_project_and_managed_zone():
    client = DNSClient(FakeDNSService(), "proj")
    assert client.project_and_managed_zone("other/zone") == ("other", "zone")
    assert client.project_and_managed_zone("zone") == ("proj", "zone")
    assert client.project_and_managed_zone("a/b/c") == ("proj", "a/b/c")


def test_zone_id_round_trips():
    client = DNSClient(FakeDNSService(), "proj")
    assert client.project_and_managed_zone(client.zone_id("zone")) == ("proj", "zone")


def test_get_managed_zones():
    service = FakeDNSService(
        zones=[ManagedZone("z1", "example.com."), ManagedZone("z2", "\\052.example.org.")]
    )
    client = DNSClient(service, "proj")
    assert client.get_managed_zones() == {
        "example.com": "proj/z1",
        "*.example.org": "proj/z2",
    }


def test_create_record_set_when_missing():
    service = FakeDNSService()
    client = DNSClient(service, "proj")
    client.create_or_update_record_set("zone", "www.example.com", "CNAME", ["target.example.com"], 120)
    assert service.changes == [
        (
            "proj",
            "zone",
            Change(
                additions=[
                    ResourceRecordSet("www.example.com.", "CNAME", ["target.example.com."], 120)
                ]
            ),
        )
    ]


def test_update_unchanged_record_set_does_nothing():
    existing = ResourceRecordSet("www.example.com.", "A", ["1.2.3.4"], 120)
    service = FakeDNSService(rrsets=[existing])
    client = DNSClient(service, "proj")
    client.create_or_update_record_set("other/zone", "www.example.com", "A", ["1.2.3.4"], 120)
    assert service.changes == []
    assert ("rrsets", "other", "zone", "www.example.com.", "A") in service.queries


def test_update_changed_record_set_replaces_it():
    existing = ResourceRecordSet("www.example.com.", "A", ["1.2.3.4"], 120)
    service = FakeDNSService(rrsets=[existing])
    client = DNSClient(service, "proj")
    client.create_or_update_record_set("zone", "www.example.com.", "A", ["1.2.3.4"], 300)
    (project, zone, change), = service.changes
    assert (project, zone) == ("proj", "zone")
    assert change.deletions == [existing]
    assert change.additions == [ResourceRecordSet("www.example.com.", "A", ["1.2.3.4"], 300)]


def test_delete_record_set():
    existing = ResourceRecordSet("www.example.com.", "A", ["1.2.3.4"], 120)
    service = FakeDNSService(rrsets=[existing])
    client = DNSClient(service, "proj")
    client.delete_record_set("zone", "www.example.com", "A")
    assert service.changes == [("proj", "zone", Change(deletions=[existing]))]


def test_delete_missing_record_set_does_nothing():
    service = FakeDNSService()
    client = DNSClient(service, "proj")
    client.delete_record_set("zone", "www.example.com", "A")
    assert service.changes == []


def test_service_errors_propagate():
    class FailingService(FakeDNSService):
        def list_resource_record_sets(self, *args):
            raise RuntimeError("boom")

    client = DNSClient(FailingService(), "proj")
    with pytest.raises(RuntimeError, match="boom"):
        client.delete_record_set("zone", "www.example.com", "A")