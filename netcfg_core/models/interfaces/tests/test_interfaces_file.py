from datetime import datetime

import pytest

from netcfg_core.models.interfaces.interfaces_file import InterfacesFile, generate_config
from netcfg_core.schemas.interfaces import InterfaceRecord

NOW = datetime(2024, 3, 5, 14, 7, 9)

HEADER = """# Network Configuration
# Generated on 03/05/2024, 02:07:09 PM
# This file should be placed in /etc/network/interfaces

# The loopback network interface
auto lo
iface lo inet loopback

"""


def make(**fields) -> InterfaceRecord:
    fields.setdefault("id", "1")
    fields.setdefault("name", "eth0")
    return InterfaceRecord(**fields)


def test_empty_list_is_header_only():
    assert generate_config([], NOW) == HEADER


def test_generate_is_deterministic():
    records = [
        make(ip="10.0.0.5", netmask="24", dns=["8.8.8.8", "", "1.1.1.1"], mtu="1500"),
        make(id="2", name="bond0", type="bond", bondMode="balance-alb", slaves=["eth1"]),
    ]

    assert generate_config(records, NOW) == generate_config(records, NOW)


def test_static_physical():
    record = make(
        method="static",
        ip="10.0.0.5",
        netmask="24",
        gateway="10.0.0.1",
        dns=["8.8.8.8", "", ""],
    )

    assert generate_config([record], NOW) == HEADER + (
        "# eth0 - Physical Interface\n"
        "auto eth0\n"
        "iface eth0 inet static\n"
        "    address 10.0.0.5/24\n"
        "    gateway 10.0.0.1\n"
        "    dns-nameservers 8.8.8.8\n"
        "\n"
    )


def test_dns_keeps_slot_order():
    record = make(ip="10.0.0.5", netmask="24", dns=["", "9.9.9.9", "1.1.1.1"])

    assert "    dns-nameservers 9.9.9.9 1.1.1.1\n" in generate_config([record], NOW)


def test_static_with_empty_address_is_written_verbatim():
    record = make()

    text = generate_config([record], NOW)

    assert "    address /\n" in text
    assert "gateway" not in text
    assert "dns-nameservers" not in text


@pytest.mark.parametrize("method", ["dhcp", "manual"])
def test_non_static_only_writes_mtu(method):
    record = make(
        method=method, ip="10.0.0.5", netmask="24", gateway="10.0.0.1", mtu="9000"
    )

    assert generate_config([record], NOW) == HEADER + (
        "# eth0 - Physical Interface\n"
        "auto eth0\n"
        f"iface eth0 inet {method}\n"
        "    mtu 9000\n"
        "\n"
    )


def test_disabled_interface_is_left_out():
    records = [
        make(name="eth0", enabled=False, ip="10.0.0.5", netmask="24", mtu="1500"),
        make(
            id="2",
            name="bond0",
            type="bond",
            bondMode="active-backup",
            slaves=["eth1"],
            enabled=False,
        ),
    ]

    assert generate_config(records, NOW) == HEADER


def test_bond():
    record = make(
        name="bond0",
        type="bond",
        method="manual",
        bondMode="active-backup",
        slaves=["eth1", "eth2"],
    )

    assert generate_config([record], NOW) == HEADER + (
        "# bond0 - Bond Interface\n"
        "auto bond0\n"
        "iface bond0 inet manual\n"
        "    bond-mode 1\n"
        "    bond-miimon 100\n"
        "    bond-slaves eth1 eth2\n"
        "    bond-xmit-hash-policy layer2+3\n"
        "\n"
        "auto eth1\n"
        "iface eth1 inet manual\n"
        "    bond-master bond0\n"
        "\n"
        "auto eth2\n"
        "iface eth2 inet manual\n"
        "    bond-master bond0\n"
        "\n"
    )


def test_bond_options_follow_common_block():
    record = make(
        name="bond0",
        type="bond",
        ip="10.0.0.2",
        netmask="24",
        mtu="9000",
        bondMode="802.3ad",
        slaves=["eth1"],
    )

    lines = generate_config([record], NOW).splitlines()

    start = lines.index("iface bond0 inet static")
    assert lines[start + 1 : start + 7] == [
        "    address 10.0.0.2/24",
        "    mtu 9000",
        "    bond-mode 4",
        "    bond-miimon 100",
        "    bond-slaves eth1",
        "    bond-xmit-hash-policy layer2+3",
    ]


def test_bond_without_mode_still_writes_slave_stanzas():
    record = make(name="bond0", type="bond", method="manual", slaves=["eth1"])

    text = generate_config([record], NOW)

    assert "bond-mode" not in text
    assert "bond-slaves" not in text
    assert "auto eth1\niface eth1 inet manual\n    bond-master bond0\n" in text


def test_bond_mode_without_slaves():
    record = make(name="bond0", type="bond", method="manual", bondMode="balance-rr")

    text = generate_config([record], NOW)

    assert "    bond-mode 0\n    bond-miimon 100\n\n" in text
    assert "bond-slaves" not in text


def test_bridge():
    record = make(name="br0", type="bridge", method="dhcp", slaves=["eth1"])

    assert generate_config([record], NOW) == HEADER + (
        "# br0 - Bridge Interface\n"
        "auto br0\n"
        "iface br0 inet dhcp\n"
        "    bridge-ports eth1\n"
        "    bridge-stp on\n"
        "    bridge-fd 0\n"
        "\n"
        "auto eth1\n"
        "iface eth1 inet manual\n"
        "    bridge-master br0\n"
        "\n"
    )


def test_bridge_without_ports():
    record = make(name="br0", type="bridge", method="dhcp")

    assert "bridge-" not in generate_config([record], NOW)


def test_vlan():
    record = make(
        name="eth0.100",
        type="vlan",
        method="dhcp",
        vlanId="100",
        parentInterface="eth0",
    )

    assert generate_config([record], NOW) == HEADER + (
        "# eth0.100 - VLAN Interface\n"
        "auto eth0.100\n"
        "iface eth0.100 inet dhcp\n"
        "    vlan-raw-device eth0\n"
        "    vlan-id 100\n"
        "\n"
    )


@pytest.mark.parametrize(
    "fields", [{"vlanId": "100"}, {"parentInterface": "eth0"}, {}]
)
def test_incomplete_vlan_contributes_nothing(fields):
    record = make(name="vlan100", type="vlan", **fields)

    assert generate_config([record], NOW) == HEADER


def test_records_keep_their_order():
    records = [
        make(id="1", name="eth1", method="dhcp"),
        make(id="2", name="eth0", method="dhcp"),
    ]

    text = generate_config(records, NOW)

    assert text.index("auto eth1") < text.index("auto eth0")
    assert text.endswith("iface eth0 inet dhcp\n\n")


def test_dangling_slave_is_still_written():
    records = [make(name="bond0", type="bond", slaves=["missing0"], method="manual")]

    assert "auto missing0\n" in generate_config(records, NOW)


def test_inactive_fields_are_ignored():
    record = make(
        type="physical",
        method="manual",
        slaves=["eth1"],
        bondMode="balance-rr",
        vlanId="5",
        parentInterface="eth9",
    )

    assert InterfacesFile.stanza(record) == [
        "# eth0 - Physical Interface",
        "auto eth0",
        "iface eth0 inet manual",
    ]
