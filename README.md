# pmxadmission

Admission checks for Proxmox infrastructure resources: clusters and machines.
The checks decide whether a resource may be created or updated, and say why
not when it is refused.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Resources

`pmxadmission.model` holds the resource types as dataclasses:
`ProxmoxCluster` (with `ProxmoxClusterSpec`, `APIEndpoint`, `IPConfigSpec`)
and `ProxmoxMachine` (with `ProxmoxMachineSpec`, `NetworkSpec`,
`NetworkDevice`, `AdditionalNetworkDevice`, `InterfaceConfig`, `Routing`,
`RoutingPolicySpec`, `VRFDevice`, `VirtualNetworkDevices`). Each resource
exposes its `group_kind`, a `GroupKind` whose string form is, for example,
`ProxmoxCluster.infrastructure.cluster.x-k8s.io`.

## Clusters

`pmxadmission.cluster.ProxmoxClusterValidator` checks `ProxmoxCluster`
objects:

- on create, at least one IP pool config (`ipv4_config` or `ipv6_config`)
  must be set;
- the control plane endpoint must be a valid IP address or host name,
  unless `external_managed_control_plane` is set;
- when the endpoint is an IP address, it must not fall inside the node
  address pools. Pools may list single addresses, ranges such as
  `10.10.10.2-10.10.10.10`, and CIDR networks such as `2001:db8::/64`.

Host names are checked for their form only; they are never resolved.

```python
from pmxadmission.cluster import ProxmoxClusterValidator
from pmxadmission.errors import InvalidError
from pmxadmission.model import (
    APIEndpoint, IPConfigSpec, ProxmoxCluster, ProxmoxClusterSpec,
)

cluster = ProxmoxCluster(
    name="test-cluster",
    spec=ProxmoxClusterSpec(
        control_plane_endpoint=APIEndpoint(host="10.10.10.2", port=6443),
        ipv4_config=IPConfigSpec(
            addresses=["10.10.10.2-10.10.10.10"],
            gateway="10.10.10.1",
            prefix=24,
        ),
    ),
)

try:
    ProxmoxClusterValidator().validate_create(cluster)
except InvalidError as err:
    print(err)           # ... addresses may not contain the endpoint IP
    print(err.warnings)  # ['cannot create proxmox cluster test-cluster']
```

The module-level functions `validate_control_plane_endpoint`,
`has_no_ip_pool_config` and `is_hostname` can be used on their own.

## Machines

`pmxadmission.machine.ProxmoxMachineValidator` checks the network section of
`ProxmoxMachine` objects; a machine without a network section passes.

- a device MTU (default device and additional devices) must be `1`
  (inherit from the bridge) or at least 1280;
- an additional device's link MTU must be at least 1280;
- each routing policy on an additional device must name a table;
- routing policies on a VRF must use the VRF's own table.

The first problem found is reported.

```python
from pmxadmission.machine import ProxmoxMachineValidator
from pmxadmission.model import (
    NetworkDevice, NetworkSpec, ProxmoxMachine, ProxmoxMachineSpec,
)

machine = ProxmoxMachine(
    name="test-machine",
    spec=ProxmoxMachineSpec(
        network=NetworkSpec(default=NetworkDevice(bridge="vmbr1", mtu=50)),
    ),
)
ProxmoxMachineValidator().validate_create(machine)
# raises InvalidError: ... spec.network.default.mtu: Invalid value ...
```

The single checks `validate_networks`, `validate_network_device_mtu`,
`validate_interface_config_mtu`, `validate_routing_policy` and
`validate_vrf_config_routing_policy` are also available; all but
`validate_networks` raise `ValueError`.

## Results and errors

`validate_create` and `validate_update` return a list of warnings (empty
when there are none); `validate_delete` always allows deletion and returns
an empty list. `validate_update` checks only the new object.

A refusal raises `AdmissionError` (from `pmxadmission.errors`) or one of its
subclasses:

- `BadRequestError` when the object is not of the expected resource type;
- `InvalidError` when a field holds an invalid value. It carries `kind`,
  `name` and `errors`, a list of `FieldError`s, each with a `FieldPath`,
  the offending value and a detail message;
- plain `AdmissionError` when a cluster defines no IP pool config.

Every error has a `warnings` list; refusals of create and update requests
for invalid objects add a `cannot create ...` or `cannot update ...` entry.

## IP sets

`pmxadmission.ipset.build_set_from_addresses` builds an `IPSet` from address
strings and raises `ValueError` on bad input. An `IPSet` supports
`add_address`, `add_range`, `add_network` and the `in` operator;
`parse_ip_range` splits `first-last` into two ordered addresses of one family.

```python
from pmxadmission.ipset import build_set_from_addresses

pool = build_set_from_addresses(["10.0.0.5", "10.0.1.0/24", "10.0.2.1-10.0.2.9"])
"10.0.1.77" in pool   # True
"10.0.3.1" in pool    # False
```

## What it does not do

This package is a library of checks. It has no command-line tool and no
HTTP server for receiving admission requests, and it does not read or write
resources in a cluster: callers build the model objects and call the
validators themselves.