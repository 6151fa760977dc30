"""Terraform values, state extraction and status for a GCP infrastructure."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from .serviceaccount import ServiceAccount
from .subnet import Subnet, SubnetPurpose

# Default VPC terraform name.
DEFAULT_VPC_NAME = "google_compute_network.network.name"

# Terraformer infrastructure purpose.
TERRAFORMER_PURPOSE = "infra"

# Names of the terraform output variables.
TERRAFORMER_OUTPUT_KEY_VPC_NAME = "vpc_name"
TERRAFORMER_OUTPUT_KEY_SERVICE_ACCOUNT_EMAIL = "service_account_email"
TERRAFORMER_OUTPUT_KEY_SUBNET_NODES = "subnet_nodes"
TERRAFORMER_OUTPUT_KEY_SUBNET_INTERNAL = "subnet_internal"
TERRAFORM_OUTPUT_KEY_CLOUD_NAT = "cloud_nat"
TERRAFORM_OUTPUT_KEY_NAT_IPS = "nat_ips"
TERRAFORM_OUTPUT_KEY_CLOUD_ROUTER = "cloud_router"

# Type information of the infrastructure status.
STATUS_API_VERSION = "gcp.provider.extensions.gardener.cloud/v1alpha1"
STATUS_KIND = "InfrastructureStatus"

_DEFAULT_MIN_PORTS_PER_VM = 2048


@dataclass(frozen=True)
class CloudRouter:
    """A cloud router referenced by name."""

    name: str = ""


@dataclass(frozen=True)
class VPC:
    """A VPC and, optionally, its cloud router."""

    name: str = ""
    cloud_router: CloudRouter | None = None


@dataclass(frozen=True)
class NatIPName:
    """The name of a manually reserved NAT IP address."""

    name: str


@dataclass(frozen=True)
class CloudNAT:
    """Cloud NAT settings."""

    min_ports_per_vm: int | None = None
    nat_ip_names: list[NatIPName] | None = None


@dataclass(frozen=True)
class FlowLogs:
    """VPC flow log settings."""

    aggregation_interval: str | None = None
    flow_sampling: float | None = None
    metadata: str | None = None


@dataclass
class NetworkConfig:
    """Network settings of an infrastructure."""

    vpc: VPC | None = None
    cloud_nat: CloudNAT | None = None
    internal: str | None = None
    workers: str = ""
    # Older name of ``workers``, used when ``workers`` is empty.
    worker: str = ""
    flow_logs: FlowLogs | None = None


@dataclass
class InfrastructureConfig:
    """Provider configuration of an infrastructure."""

    networks: NetworkConfig = field(default_factory=NetworkConfig)


@dataclass
class Infrastructure:
    """The infrastructure resource being reconciled."""

    name: str
    namespace: str
    region: str


@dataclass(frozen=True)
class NatIP:
    """An external IP address of the NAT gateway."""

    ip: str


@dataclass
class TerraformState:
    """The Terraform state of an infrastructure."""

    vpc_name: str = ""
    cloud_router_name: str = ""
    cloud_nat_name: str = ""
    nat_ips: list[NatIP] | None = None
    service_account_email: str = ""
    subnet_nodes: str = ""
    subnet_internal: str | None = None


@dataclass
class NetworkStatus:
    """Network part of an infrastructure status."""

    vpc: VPC = field(default_factory=VPC)
    subnets: list[Subnet] = field(default_factory=list)
    nat_ips: list[NatIP] | None = None


@dataclass
class InfrastructureStatus:
    """Status reported for a GCP infrastructure."""

    networks: NetworkStatus = field(default_factory=NetworkStatus)
    service_account_email: str = ""
    api_version: str = STATUS_API_VERSION
    kind: str = STATUS_KIND


class Terraformer(Protocol):
    """Access to the outputs of a Terraform state."""

    def get_state_output_variables(self, *keys: str) -> dict[str, str]:
        """Return the values of the given output variables."""


_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(text: str) -> str:
    """Quote a string as a double-quoted literal with escapes."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(parts) + '"'


def _manual_nat_ips_set(config: InfrastructureConfig) -> bool:
    cloud_nat = config.networks.cloud_nat
    return cloud_nat is not None and cloud_nat.nat_ip_names is not None


def compute_terraformer_template_values(
    infra: Infrastructure, account: ServiceAccount, config: InfrastructureConfig
) -> dict[str, Any]:
    """Compute the values for the Terraform template of the infrastructure."""
    networks = config.networks
    vpc_name = DEFAULT_VPC_NAME
    create_vpc = True
    create_cloud_router = True
    cloud_router_name = ""
    cloud_nat: dict[str, Any] = {"minPortsPerVM": _DEFAULT_MIN_PORTS_PER_VM}

    if networks.vpc is not None:
        vpc_name = _quote(networks.vpc.name)
        create_vpc = False
        create_cloud_router = False
        if networks.vpc.cloud_router is not None and networks.vpc.cloud_router.name:
            cloud_router_name = networks.vpc.cloud_router.name

    if networks.cloud_nat is not None:
        if networks.cloud_nat.min_ports_per_vm is not None:
            cloud_nat["minPortsPerVM"] = networks.cloud_nat.min_ports_per_vm
        if networks.cloud_nat.nat_ip_names is not None:
            cloud_nat["natIPNames"] = [ip.name for ip in networks.cloud_nat.nat_ip_names]

    vpc: dict[str, Any] = {"name": vpc_name}
    if cloud_router_name:
        vpc["cloudRouter"] = {"name": cloud_router_name}

    workers_cidr = networks.workers or networks.worker

    output_keys = {
        "vpcName": TERRAFORMER_OUTPUT_KEY_VPC_NAME,
        "cloudNAT": TERRAFORM_OUTPUT_KEY_CLOUD_NAT,
        "cloudRouter": TERRAFORM_OUTPUT_KEY_CLOUD_ROUTER,
        "serviceAccountEmail": TERRAFORMER_OUTPUT_KEY_SERVICE_ACCOUNT_EMAIL,
        "subnetNodes": TERRAFORMER_OUTPUT_KEY_SUBNET_NODES,
        "subnetInternal": TERRAFORMER_OUTPUT_KEY_SUBNET_INTERNAL,
    }
    if _manual_nat_ips_set(config):
        output_keys["natIPs"] = TERRAFORM_OUTPUT_KEY_NAT_IPS

    network_values: dict[str, Any] = {
        "workers": workers_cidr,
        "internal": networks.internal,
        "cloudNAT": cloud_nat,
    }

    if networks.flow_logs is not None:
        flow_logs: dict[str, Any] = {}
        if networks.flow_logs.aggregation_interval is not None:
            flow_logs["aggregationInterval"] = networks.flow_logs.aggregation_interval
        if networks.flow_logs.flow_sampling is not None:
            flow_logs["flowSampling"] = networks.flow_logs.flow_sampling
        if networks.flow_logs.metadata is not None:
            flow_logs["metadata"] = networks.flow_logs.metadata
        network_values["flowLogs"] = flow_logs

    return {
        "google": {"region": infra.region, "project": account.project_id},
        "create": {"vpc": create_vpc, "cloudRouter": create_cloud_router},
        "vpc": vpc,
        "clusterName": infra.namespace,
        "networks": network_values,
        "outputKeys": output_keys,
    }


def extract_terraform_state(tf: Terraformer, config: InfrastructureConfig) -> TerraformState:
    """Read the infrastructure's Terraform state from the terraformer outputs."""
    networks = config.networks
    output_keys = [
        TERRAFORMER_OUTPUT_KEY_VPC_NAME,
        TERRAFORMER_OUTPUT_KEY_SUBNET_NODES,
        TERRAFORMER_OUTPUT_KEY_SERVICE_ACCOUNT_EMAIL,
    ]
    vpc_without_cloud_router = networks.vpc is not None and networks.vpc.cloud_router is None
    if not vpc_without_cloud_router:
        output_keys += [TERRAFORM_OUTPUT_KEY_CLOUD_ROUTER, TERRAFORM_OUTPUT_KEY_CLOUD_NAT]
    manual_nat_ips = _manual_nat_ips_set(config)
    if manual_nat_ips:
        output_keys.append(TERRAFORM_OUTPUT_KEY_NAT_IPS)
    has_internal = networks.internal is not None
    if has_internal:
        output_keys.append(TERRAFORMER_OUTPUT_KEY_SUBNET_INTERNAL)

    variables = tf.get_state_output_variables(*output_keys)

    state = TerraformState(
        vpc_name=variables.get(TERRAFORMER_OUTPUT_KEY_VPC_NAME, ""),
        subnet_nodes=variables.get(TERRAFORMER_OUTPUT_KEY_SUBNET_NODES, ""),
        service_account_email=variables.get(TERRAFORMER_OUTPUT_KEY_SERVICE_ACCOUNT_EMAIL, ""),
    )
    if manual_nat_ips:
        raw = variables.get(TERRAFORM_OUTPUT_KEY_NAT_IPS, "")
        state.nat_ips = [NatIP(ip=ip) for ip in raw.split(",")]
    if not vpc_without_cloud_router:
        state.cloud_router_name = variables.get(TERRAFORM_OUTPUT_KEY_CLOUD_ROUTER, "")
        state.cloud_nat_name = variables.get(TERRAFORM_OUTPUT_KEY_CLOUD_NAT, "")
    if has_internal:
        state.subnet_internal = variables.get(TERRAFORMER_OUTPUT_KEY_SUBNET_INTERNAL, "")
    return state


def status_from_terraform_state(state: TerraformState) -> InfrastructureStatus:
    """Compute the infrastructure status from a Terraform state."""
    cloud_router = CloudRouter(name=state.cloud_router_name) if state.cloud_router_name else None
    subnets = [Subnet(name=state.subnet_nodes, purpose=SubnetPurpose.NODES)]
    if state.subnet_internal is not None:
        subnets.append(Subnet(name=state.subnet_internal, purpose=SubnetPurpose.INTERNAL))
    return InfrastructureStatus(
        networks=NetworkStatus(
            vpc=VPC(name=state.vpc_name, cloud_router=cloud_router),
            subnets=subnets,
            nat_ips=state.nat_ips,
        ),
        service_account_email=state.service_account_email,
    )


def compute_status(tf: Terraformer, config: InfrastructureConfig) -> InfrastructureStatus:
    """Compute the infrastructure status from the terraformer outputs."""
    return status_from_terraform_state(extract_terraform_state(tf, config))