"""Admission validation for ProxmoxMachine resources."""

from __future__ import annotations

from typing import Iterable

from .errors import AdmissionError, BadRequestError, FieldPath, InvalidError, invalid
from .model import (
    InterfaceConfig,
    NetworkDevice,
    ProxmoxMachine,
    RoutingPolicySpec,
    VRFDevice,
)

# Values below 1280 break IPv6; 576 would be allowed by the hardware limits.
_MIN_MTU = 1280
# A device MTU of 1 inherits the MTU of the underlying bridge.
_INHERIT_MTU = 1


def validate_routing_policy(policies: Iterable[RoutingPolicySpec]) -> None:
    for index, policy in enumerate(policies):
        if policy.table is None:
            raise ValueError(f"routing policy [{index}] requires a table")


def validate_vrf_config_routing_policy(vrf: VRFDevice) -> None:
    # Rules must use the l3mdev table; netplan refuses anything else.
    for policy in vrf.routing.routing_policy:
        if policy.table is not None and policy.table != vrf.table:
            raise ValueError(
                f"VRF {vrf.name}: device/rule routing table mismatch {vrf.table} != {policy.table}"
            )


def validate_interface_config_mtu(ifconfig: InterfaceConfig) -> None:
    if ifconfig.link_mtu is not None and ifconfig.link_mtu < _MIN_MTU:
        raise ValueError(f"mtu must be at least 1280, but was {ifconfig.link_mtu}")


def validate_network_device_mtu(device: NetworkDevice) -> None:
    mtu = device.mtu
    if mtu is None or mtu == _INHERIT_MTU or mtu >= _MIN_MTU:
        return
    raise ValueError(f"mtu must be at least 1280 or 1, but was {mtu}")


def validate_networks(machine: ProxmoxMachine) -> None:
    """Raise InvalidError for the first invalid network setting of ``machine``."""
    network = machine.spec.network
    if network is None:
        return

    def fail(path: FieldPath, value: object, err: ValueError) -> InvalidError:
        return InvalidError(str(machine.group_kind), machine.name, [invalid(path, value, str(err))])

    base = FieldPath("spec", "network")

    if network.default is not None:
        try:
            validate_network_device_mtu(network.default)
        except ValueError as err:
            raise fail(base.child("default", "mtu"), network.default, err) from None

    for index, device in enumerate(network.additional_devices):
        checks = (
            ("mtu", validate_network_device_mtu, device.network_device),
            ("linkMtu", validate_interface_config_mtu, device.interface_config),
            ("routingPolicy", validate_routing_policy, device.interface_config.routing.routing_policy),
        )
        for name, check, target in checks:
            try:
                check(target)
            except ValueError as err:
                raise fail(base.child("additionalDevices", index, name), device, err) from None

    for index, vrf in enumerate(network.virtual_network_devices.vrfs):
        try:
            validate_vrf_config_routing_policy(vrf)
        except ValueError as err:
            raise fail(
                base.child("VirtualNetworkDevices", "VRFs", index, "Table"), vrf, err
            ) from None


class ProxmoxMachineValidator:
    """Validates ProxmoxMachine objects on create, update and delete."""

    @staticmethod
    def _expect_machine(obj: object) -> ProxmoxMachine:
        if not isinstance(obj, ProxmoxMachine):
            raise BadRequestError(f"expected a ProxmoxMachine but got {type(obj).__name__}")
        return obj

    def validate_create(self, obj: object) -> list[str]:
        machine = self._expect_machine(obj)
        try:
            validate_networks(machine)
        except AdmissionError as err:
            err.warnings.append(f"cannot create proxmox machine {machine.name}")
            raise
        return []

    def validate_update(self, old_obj: object, new_obj: object) -> list[str]:
        machine = self._expect_machine(new_obj)
        try:
            validate_networks(machine)
        except AdmissionError as err:
            err.warnings.append(f"cannot update proxmox machine {machine.name}")
            raise
        return []

    def validate_delete(self, obj: object) -> list[str]:
        return []