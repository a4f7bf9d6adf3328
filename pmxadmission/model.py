"""Resource types checked by the admission validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

INFRASTRUCTURE_GROUP = "infrastructure.cluster.x-k8s.io"


@dataclass(frozen=True)
class GroupKind:
    """An API group together with a resource kind."""

    group: str
    kind: str

    def __str__(self) -> str:
        if not self.group:
            return self.kind
        return f"{self.kind}.{self.group}"


@dataclass
class APIEndpoint:
    """The address at which the control plane is reachable."""

    host: str = ""
    port: int = 0


@dataclass
class IPConfigSpec:
    """A pool of node addresses: single IPs, ranges or CIDRs."""

    addresses: list[str] = field(default_factory=list)
    prefix: int = 0
    gateway: str = ""
    metric: Optional[int] = None


@dataclass
class ProxmoxClusterSpec:
    control_plane_endpoint: Optional[APIEndpoint] = None
    external_managed_control_plane: bool = False
    ipv4_config: Optional[IPConfigSpec] = None
    ipv6_config: Optional[IPConfigSpec] = None
    dns_servers: list[str] = field(default_factory=list)


@dataclass
class ProxmoxCluster:
    KIND: ClassVar[GroupKind] = GroupKind(INFRASTRUCTURE_GROUP, "ProxmoxCluster")

    name: str
    spec: ProxmoxClusterSpec = field(default_factory=ProxmoxClusterSpec)
    namespace: str = "default"

    @property
    def group_kind(self) -> GroupKind:
        return self.KIND


@dataclass
class RoutingPolicySpec:
    table: Optional[int] = None
    priority: Optional[int] = None
    to: Optional[str] = None
    from_: Optional[str] = None


@dataclass
class Routing:
    routing_policy: list[RoutingPolicySpec] = field(default_factory=list)


@dataclass
class NetworkDevice:
    bridge: str = ""
    model: Optional[str] = None
    mtu: Optional[int] = None
    vlan: Optional[int] = None


@dataclass
class InterfaceConfig:
    ipv4_pool_ref: Optional[dict[str, str]] = None
    ipv6_pool_ref: Optional[dict[str, str]] = None
    dns_servers: list[str] = field(default_factory=list)
    link_mtu: Optional[int] = None
    routing: Routing = field(default_factory=Routing)


@dataclass
class AdditionalNetworkDevice:
    name: str
    network_device: NetworkDevice = field(default_factory=NetworkDevice)
    interface_config: InterfaceConfig = field(default_factory=InterfaceConfig)


@dataclass
class VRFDevice:
    name: str
    table: int
    interfaces: list[str] = field(default_factory=list)
    routing: Routing = field(default_factory=Routing)


@dataclass
class VirtualNetworkDevices:
    vrfs: list[VRFDevice] = field(default_factory=list)


@dataclass
class NetworkSpec:
    default: Optional[NetworkDevice] = None
    additional_devices: list[AdditionalNetworkDevice] = field(default_factory=list)
    virtual_network_devices: VirtualNetworkDevices = field(
        default_factory=VirtualNetworkDevices
    )


@dataclass
class ProxmoxMachineSpec:
    source_node: str = ""
    num_sockets: int = 0
    num_cores: int = 0
    memory_mib: int = 0
    network: Optional[NetworkSpec] = None


@dataclass
class ProxmoxMachine:
    KIND: ClassVar[GroupKind] = GroupKind(INFRASTRUCTURE_GROUP, "ProxmoxMachine")

    name: str
    spec: ProxmoxMachineSpec = field(default_factory=ProxmoxMachineSpec)
    namespace: str = "default"

    @property
    def group_kind(self) -> GroupKind:
        return self.KIND