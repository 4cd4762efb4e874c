"""Provider-specific configuration and status types for GCP."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

GROUP_NAME = "gcp.provider.extensions.gardener.cloud"


@dataclass
class MachineImageVersion:
    """A version of a machine image and the GCP image path for it."""

    version: str = ""
    image: str = ""


@dataclass
class MachineImages:
    """Maps a logical machine image name to its versions."""

    name: str = ""
    versions: list[MachineImageVersion] = field(default_factory=list)


@dataclass
class CloudProfileConfig:
    """Provider configuration embedded in a cloud profile."""

    machine_images: list[MachineImages] = field(default_factory=list)


@dataclass
class CloudControllerManagerConfig:
    """Settings for the cloud-controller-manager."""

    feature_gates: dict[str, bool] = field(default_factory=dict)


@dataclass
class ControlPlaneConfig:
    """Settings for the control plane."""

    zone: str = ""
    cloud_controller_manager: CloudControllerManagerConfig | None = None


class SubnetPurpose(str, enum.Enum):
    """What a subnet was created for."""

    NODES = "nodes"
    INTERNAL = "internal"


@dataclass
class Subnet:
    """A subnet that was created."""

    name: str = ""
    purpose: SubnetPurpose | str = ""


@dataclass
class CloudRouter:
    """Configuration of a cloud router."""

    name: str = ""


@dataclass
class VPC:
    """A VPC and its related resources."""

    name: str = ""
    cloud_router: CloudRouter | None = None


@dataclass
class NatIP:
    """A user provided external IP usable by the NAT gateway."""

    ip: str = ""


@dataclass
class NatIPName:
    """The name of a user provided external IP usable by the NAT gateway."""

    name: str = ""


@dataclass
class CloudNAT:
    """Configuration of the cloud NAT resource."""

    min_ports_per_vm: int | None = None
    nat_ip_names: list[NatIPName] = field(default_factory=list)


@dataclass
class FlowLogs:
    """Configuration of VPC flow logs."""

    aggregation_interval: str | None = None
    flow_sampling: float | None = None
    metadata: str | None = None


@dataclass
class NetworkConfig:
    """Kubernetes and infrastructure network settings."""

    vpc: VPC | None = None
    cloud_nat: CloudNAT | None = None
    internal: str | None = None
    worker: str = ""  # deprecated, use ``workers``
    workers: str = ""
    flow_logs: FlowLogs | None = None


@dataclass
class InfrastructureConfig:
    """Infrastructure configuration resource."""

    networks: NetworkConfig = field(default_factory=NetworkConfig)


@dataclass
class NetworkStatus:
    """Current status of the infrastructure networks."""

    vpc: VPC = field(default_factory=VPC)
    subnets: list[Subnet] = field(default_factory=list)
    nat_ips: list[NatIP] = field(default_factory=list)


@dataclass
class InfrastructureStatus:
    """Information about created infrastructure resources."""

    networks: NetworkStatus = field(default_factory=NetworkStatus)
    service_account_email: str = ""


@dataclass
class Volume:
    """Configuration of additional disks attached to VMs."""

    local_ssd_interface: str | None = None


@dataclass
class ServiceAccount:
    """A GCP service account and the scopes granted to it."""

    email: str = ""
    scopes: list[str] = field(default_factory=list)


@dataclass
class WorkerConfig:
    """Settings for worker nodes."""

    volume: Volume | None = None
    service_account: ServiceAccount | None = None


@dataclass
class MachineImage:
    """Maps a logical machine image name and version to a GCP image."""

    name: str = ""
    version: str = ""
    image: str = ""


@dataclass
class WorkerStatus:
    """Information about created worker resources."""

    machine_images: list[MachineImage] = field(default_factory=list)


KNOWN_TYPES = (
    CloudProfileConfig,
    InfrastructureConfig,
    InfrastructureStatus,
    ControlPlaneConfig,
    WorkerStatus,
    WorkerConfig,
)