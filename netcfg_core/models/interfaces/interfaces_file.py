from datetime import datetime
from typing import Iterable

from netcfg_core.constants import (
    BOND_MIIMON,
    BOND_XMIT_HASH_POLICY,
    BRIDGE_FD,
    BRIDGE_STP,
    HEADER_GENERATED,
    HEADER_TARGET,
    HEADER_TITLE,
    INDENT,
    LOOPBACK_STANZA,
    TIMESTAMP_FORMAT,
)
from netcfg_core.schemas.interfaces import InterfaceRecord
from netcfg_core.schemas.interfaces.types import bond_mode_code

# https://manpages.debian.org/interfaces(5)


class InterfacesFile:
    """
    Renders interface definitions as an /etc/network/interfaces file.

    Rendering never fails: empty or malformed values are omitted or written
    verbatim. Use the validators for feedback on individual fields.
    """

    STANZA_COMMENTS = {
        "physical": "Physical Interface",
        "bond": "Bond Interface",
        "bridge": "Bridge Interface",
        "vlan": "VLAN Interface",
    }

    @staticmethod
    def header(now: datetime) -> list[str]:
        return [
            HEADER_TITLE,
            HEADER_GENERATED.format(timestamp=now.strftime(TIMESTAMP_FORMAT)),
            HEADER_TARGET,
            "",
            *LOOPBACK_STANZA,
            "",
        ]

    @staticmethod
    def common_options(iface: InterfaceRecord) -> list[str]:
        """Address options shared by every interface type"""
        options = []
        if iface.method == "static":
            options.append(f"address {iface.ip}/{iface.netmask}")
            if iface.gateway:
                options.append(f"gateway {iface.gateway}")
            nameservers = [d for d in iface.dns if d]
            if nameservers:
                options.append(f"dns-nameservers {' '.join(nameservers)}")
        if iface.mtu:
            options.append(f"mtu {iface.mtu}")
        return options

    @staticmethod
    def bond_options(iface: InterfaceRecord) -> list[str]:
        options = []
        if iface.bond_mode:
            options.append(f"bond-mode {bond_mode_code(iface.bond_mode)}")
            options.append(f"bond-miimon {BOND_MIIMON}")
            if iface.slaves:
                options.append(f"bond-slaves {' '.join(iface.slaves)}")
                options.append(f"bond-xmit-hash-policy {BOND_XMIT_HASH_POLICY}")
        return options

    @staticmethod
    def bridge_options(iface: InterfaceRecord) -> list[str]:
        options = []
        if iface.slaves:
            options.append(f"bridge-ports {' '.join(iface.slaves)}")
            options.append(f"bridge-stp {BRIDGE_STP}")
            options.append(f"bridge-fd {BRIDGE_FD}")
        return options

    @staticmethod
    def vlan_options(iface: InterfaceRecord) -> list[str]:
        return [
            f"vlan-raw-device {iface.parent_interface}",
            f"vlan-id {iface.vlan_id}",
        ]

    @staticmethod
    def member_stanzas(iface: InterfaceRecord, master_option: str) -> list[str]:
        """A manual stanza per slave or port, pointing back at its master"""
        lines = []
        for slave in iface.slaves:
            lines += [
                "",
                f"auto {slave}",
                f"iface {slave} inet manual",
                f"{INDENT}{master_option} {iface.name}",
            ]
        return lines

    @classmethod
    def is_renderable(cls, iface: InterfaceRecord) -> bool:
        """Disabled interfaces and VLANs missing a parent or id are left out"""
        if not iface.enabled:
            return False
        if iface.type == "vlan":
            # skipped whole, so no trailing blank line either
            return bool(iface.parent_interface and iface.vlan_id)
        return iface.type in cls.STANZA_COMMENTS

    @classmethod
    def stanza(cls, iface: InterfaceRecord) -> list[str]:
        """
        Generates the lines for one interface, including the stanzas of its
        bond slaves or bridge ports
        """
        options = cls.common_options(iface)
        members = []

        if iface.type == "bond":
            options += cls.bond_options(iface)
            members = cls.member_stanzas(iface, "bond-master")
        elif iface.type == "bridge":
            options += cls.bridge_options(iface)
            members = cls.member_stanzas(iface, "bridge-master")
        elif iface.type == "vlan":
            options += cls.vlan_options(iface)

        return [
            f"# {iface.name} - {cls.STANZA_COMMENTS[iface.type]}",
            f"auto {iface.name}",
            f"iface {iface.name} inet {iface.method}",
            *[f"{INDENT}{option}" for option in options],
            *members,
        ]

    @classmethod
    def generate(cls, interfaces: Iterable[InterfaceRecord], now: datetime) -> str:
        """
        Generates the complete interfaces file, in the order given
        """
        lines = cls.header(now)
        for iface in interfaces:
            if not cls.is_renderable(iface):
                continue
            lines += cls.stanza(iface)
            lines.append("")
        return "\n".join(lines) + "\n"


def generate_config(interfaces: Iterable[InterfaceRecord], now: datetime) -> str:
    """
    Generates an /etc/network/interfaces style config string from interface
    definitions. The same interfaces and timestamp always give the same text.
    """
    return InterfacesFile.generate(interfaces, now)
