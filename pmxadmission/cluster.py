"""Admission validation for ProxmoxCluster resources."""

from __future__ import annotations

import ipaddress
import re
from typing import Any

from .errors import AdmissionError, BadRequestError, FieldPath, InvalidError, invalid
from .ipset import build_set_from_addresses
from .model import ProxmoxCluster

_SHORTNAME = r"([a-z0-9]{1,253}|[a-z0-9][a-z0-9-]{1,251}[a-z0-9])"
_HOSTNAME = r"([a-z0-9]{1,63}|[a-z0-9][a-z0-9-]{1,61}[a-z0-9]\.)?"
_DOMAIN = r"((([a-z0-9]{1,63}|[a-z0-9][a-z0-9-]{1,61}[a-z0-9])\.)+?[a-z]{2,63})"
_HOST_RE = re.compile(f"({_SHORTNAME}|{_HOSTNAME}{_DOMAIN})", re.IGNORECASE)


def is_hostname(host: str) -> bool:
    """Return whether ``host`` is a short hostname or a domain name."""
    return _HOST_RE.fullmatch(host) is not None


def has_no_ip_pool_config(cluster: ProxmoxCluster) -> bool:
    return cluster.spec.ipv4_config is None and cluster.spec.ipv6_config is None


def _invalid(cluster: ProxmoxCluster, path: FieldPath, value: Any, detail: str) -> InvalidError:
    return InvalidError(str(cluster.group_kind), cluster.name, [invalid(path, value, detail)])


def validate_control_plane_endpoint(cluster: ProxmoxCluster) -> None:
    """Raise InvalidError if the endpoint is malformed or lies in a node address pool."""
    spec = cluster.spec
    # An externally managed control plane provides its own endpoint.
    if spec.external_managed_control_plane:
        return

    endpoint = spec.control_plane_endpoint.host if spec.control_plane_endpoint else ""

    # Hostnames are not resolved; only IP endpoints are checked against the pools.
    if is_hostname(endpoint):
        return

    try:
        address = ipaddress.ip_address(endpoint)
    except ValueError:
        raise _invalid(
            cluster,
            FieldPath("spec", "controlplaneEndpoint"),
            endpoint,
            "provided endpoint address is not a valid IP or FQDN",
        ) from None

    for label, config in (("IPv4Config", spec.ipv4_config), ("IPv6Config", spec.ipv6_config)):
        if config is None:
            continue
        path = FieldPath("spec", label, "addresses")
        try:
            pool = build_set_from_addresses(config.addresses)
        except ValueError:
            raise _invalid(
                cluster,
                path,
                config.addresses,
                "provided addresses are not valid IP addresses, ranges or CIDRs",
            ) from None
        if address in pool:
            raise _invalid(cluster, path, config.addresses, "addresses may not contain the endpoint IP")


class ProxmoxClusterValidator:
    """Validates ProxmoxCluster objects on create, update and delete."""

    @staticmethod
    def _expect_cluster(obj: object) -> ProxmoxCluster:
        if not isinstance(obj, ProxmoxCluster):
            raise BadRequestError(f"expected a ProxmoxCluster but got {type(obj).__name__}")
        return obj

    def validate_create(self, obj: object) -> list[str]:
        cluster = self._expect_cluster(obj)
        if has_no_ip_pool_config(cluster):
            raise AdmissionError(
                "proxmox cluster must define at least one IP pool config",
                [f"proxmox cluster must define at least one IP pool config {cluster.name}"],
            )
        try:
            validate_control_plane_endpoint(cluster)
        except AdmissionError as err:
            err.warnings.append(f"cannot create proxmox cluster {cluster.name}")
            raise
        return []

    def validate_update(self, old_obj: object, new_obj: object) -> list[str]:
        cluster = self._expect_cluster(new_obj)
        try:
            validate_control_plane_endpoint(cluster)
        except AdmissionError as err:
            err.warnings.append(f"cannot update proxmox cluster {cluster.name}")
            raise
        return []

    def validate_delete(self, obj: object) -> list[str]:
        return []