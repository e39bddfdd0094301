from typing import Literal

INTERFACE_TYPE = Literal["physical", "bond", "bridge", "vlan"]

INET_METHOD = Literal["static", "dhcp", "manual"]

BOND_MODE = Literal[
    "balance-rr",
    "active-backup",
    "balance-xor",
    "broadcast",
    "802.3ad",
    "balance-tlb",
    "balance-alb",
]

# Types whose slaves field names member interfaces
SLAVE_TYPES = ("bond", "bridge")

INTERFACE_TYPES = {
    "physical": {
        "name": "Physical Interface",
        "has_slaves": False,
        "has_bond_mode": False,
        "has_parent": False,
        "has_vlan_id": False,
    },
    "bond": {
        "name": "Network Bond",
        "has_slaves": True,
        "has_bond_mode": True,
        "has_parent": False,
        "has_vlan_id": False,
    },
    "bridge": {
        "name": "Network Bridge",
        "has_slaves": True,
        "has_bond_mode": False,
        "has_parent": False,
        "has_vlan_id": False,
    },
    "vlan": {
        "name": "VLAN Interface",
        "has_slaves": False,
        "has_bond_mode": False,
        "has_parent": True,
        "has_vlan_id": True,
    },
}

INET_METHODS = {
    "static": "Static IP",
    "dhcp": "DHCP",
    "manual": "Manual",
}

# The numeric bonding driver code is the token before " - " in each label
BOND_MODES = {
    "balance-rr": "0 - Round Robin (Sequential packet distribution)",
    "active-backup": "1 - Active Backup (Failover)",
    "balance-xor": "2 - XOR (Based on MAC address)",
    "broadcast": "3 - Broadcast (All interfaces active)",
    "802.3ad": "4 - LACP (Dynamic link aggregation)",
    "balance-tlb": "5 - Adaptive TLB (Outbound load balancing)",
    "balance-alb": "6 - Adaptive Load Balancing (Bidirectional)",
}


def bond_mode_code(bond_mode: str) -> str:
    """
    Returns the numeric code emitted as bond-mode for a mode name.

    Unknown names are passed through the same split, so the value is
    rendered verbatim.
    """
    label = BOND_MODES.get(bond_mode, bond_mode)
    return label.split(" - ")[0]
