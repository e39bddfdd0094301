# Core config
API_V1_STR: str = "/api/v1"
PROJECT_NAME: str = "netcfg-core"
PROJECT_DESCRIPTION: str = (
    "The netcfg-core API edits interface definitions and renders them as an "
    "/etc/network/interfaces file."
)

# Logging
DEFAULT_LOG_DIR: str = "/var/log/netcfg_core"

# Interfaces file
DEFAULT_INTERFACE_FILE: str = "/etc/network/interfaces"
TIMESTAMP_FORMAT: str = "%m/%d/%Y, %I:%M:%S %p"
INDENT: str = "    "

HEADER_TITLE: str = "# Network Configuration"
HEADER_GENERATED: str = "# Generated on {timestamp}"
HEADER_TARGET: str = f"# This file should be placed in {DEFAULT_INTERFACE_FILE}"
LOOPBACK_STANZA: tuple = (
    "# The loopback network interface",
    "auto lo",
    "iface lo inet loopback",
)

# Bond defaults
BOND_MIIMON: str = "100"
BOND_XMIT_HASH_POLICY: str = "layer2+3"

# Bridge defaults
BRIDGE_STP: str = "on"
BRIDGE_FD: str = "0"

# Registry defaults
DNS_SLOTS: int = 3
DEFAULT_NAME_PREFIX: str = "eth"
DEFAULT_MTU: str = "1500"
INITIAL_INTERFACE_NAME: str = "eth0"
