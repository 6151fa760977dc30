"""Finding and removing Kubernetes-created firewalls and routes of a shoot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol

# Name prefix of Kubernetes related firewall rules.
KUBERNETES_FIREWALL_NAME_PREFIX = "k8s"
_SHOOT_PREFIX = "shoot--"


@dataclass(frozen=True)
class Firewall:
    """A firewall rule in a GCP network."""

    name: str
    network: str = ""
    target_tags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Route:
    """A route in a GCP network."""

    name: str
    network: str = ""
    next_hop_instance: str = ""


class ComputeApi(Protocol):
    """The compute operations on firewalls and routes."""

    def list_firewalls(self, project_id: str) -> Iterable[Firewall]:
        """Yield every firewall of the project, across all pages."""

    def list_routes(self, project_id: str) -> Iterable[Route]:
        """Yield every route of the project, across all pages."""

    def delete_firewall(self, project_id: str, name: str) -> object:
        """Delete the named firewall."""

    def delete_route(self, project_id: str, name: str) -> object:
        """Delete the named route."""


def list_kubernetes_firewalls(
    client: ComputeApi, project_id: str, network: str, shoot_seed_namespace: str
) -> list[str]:
    """Return the names of the shoot's Kubernetes related firewalls in the network."""
    names = []
    for firewall in client.list_firewalls(project_id):
        if not firewall.network.endswith(network):
            continue
        if firewall.name.startswith(KUBERNETES_FIREWALL_NAME_PREFIX):
            if shoot_seed_namespace in firewall.target_tags:
                names.append(firewall.name)
        elif firewall.name.startswith(shoot_seed_namespace):
            names.append(firewall.name)
    return names


def list_kubernetes_routes(
    client: ComputeApi, project_id: str, network: str, shoot_seed_namespace: str
) -> list[str]:
    """Return the names of shoot routes in the network whose next hop belongs to the shoot."""
    names = []
    for route in client.list_routes(project_id):
        if route.name.startswith(_SHOOT_PREFIX) and route.network.endswith(network):
            instance = route.next_hop_instance.rsplit("/", 1)[-1]
            if instance.startswith(shoot_seed_namespace):
                names.append(route.name)
    return names


def delete_firewalls(client: ComputeApi, project_id: str, firewalls: Iterable[str]) -> None:
    """Delete the named firewalls, stopping at the first failure."""
    for firewall in firewalls:
        client.delete_firewall(project_id, firewall)


def delete_routes(client: ComputeApi, project_id: str, routes: Iterable[str]) -> None:
    """Delete the named routes, stopping at the first failure."""
    for route in routes:
        client.delete_route(project_id, route)


def cleanup_kubernetes_firewalls(
    client: ComputeApi, project_id: str, network: str, shoot_seed_namespace: str
) -> None:
    """Delete every Kubernetes related firewall of the shoot."""
    names = list_kubernetes_firewalls(client, project_id, network, shoot_seed_namespace)
    delete_firewalls(client, project_id, names)


def cleanup_kubernetes_routes(
    client: ComputeApi, project_id: str, network: str, shoot_seed_namespace: str
) -> None:
    """Delete every Kubernetes related route of the shoot."""
    names = list_kubernetes_routes(client, project_id, network, shoot_seed_namespace)
    delete_routes(client, project_id, names)