import ipaddress

import pytest

from pmxadmission.ipset import IPSet, build_set_from_addresses, parse_ip_range


def test_range_membership_is_inclusive():
    ipset = build_set_from_addresses(["10.10.10.2-10.10.10.10"])
    assert "10.10.10.2" in ipset
    assert "10.10.10.10" in ipset
    assert "10.10.10.1" not in ipset
    assert "10.10.10.11" not in ipset


def test_cidr_membership():
    ipset = build_set_from_addresses(["2001:db8::/64"])
    assert "2001:db8::1" in ipset
    assert "2001:db9::1" not in ipset


def test_cidr_with_host_bits_is_accepted():
    ipset = build_set_from_addresses(["10.0.0.5/24"])
    assert "10.0.0.200" in ipset


def test_single_address():
    ipset = build_set_from_addresses(["192.168.1.1"])
    assert ipaddress.ip_address("192.168.1.1") in ipset
    assert "192.168.1.2" not in ipset


def test_families_are_separate():
    ipset = build_set_from_addresses(["0.0.0.0/0"])
    assert "::1" not in ipset
    assert "8.8.8.8" in ipset


def test_unparsable_query_is_not_contained():
    ipset = build_set_from_addresses(["10.0.0.0/8"])
    assert "host.example.com" not in ipset


@pytest.mark.parametrize(
    "bad",
    ["invalid", "10.0.0.1-invalid", "10.0.0.0/33", "10.0.0.9-10.0.0.1", "10.0.0.1-::1"],
)
def test_invalid_entries_raise(bad):
    with pytest.raises(ValueError):
        build_set_from_addresses([bad])


def test_parse_ip_range_returns_ordered_pair():
    start, end = parse_ip_range("10.10.10.2-10.10.10.10")
    assert start == ipaddress.ip_address("10.10.10.2")
    assert end == ipaddress.ip_address("10.10.10.10")


def test_parse_ip_range_requires_hyphen():
    with pytest.raises(ValueError):
        parse_ip_range("10.0.0.1")


def test_add_range_rejects_reversed():
    with pytest.raises(ValueError):
        IPSet().add_range("10.0.0.5", "10.0.0.1")


def test_empty_set_contains_nothing():
    assert "10.0.0.1" not in build_set_from_addresses([])