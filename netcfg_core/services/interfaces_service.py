from datetime import datetime
from typing import Any, Optional

from netcfg_core.core.config import settings
from netcfg_core.core.logging import get_logger
from netcfg_core.models.interfaces import InterfaceRegistry, generate_config
from netcfg_core.schemas.interfaces import (
    InterfaceCatalog,
    InterfaceRecord,
    IPValidationResult,
)
from netcfg_core.schemas.interfaces.types import (
    BOND_MODES,
    INET_METHODS,
    INTERFACE_TYPES,
)
from netcfg_core.utils.validators import validate_ipv4

log = get_logger(__name__)

# The one registry edited through the API. Edits happen on the event loop
# without awaiting, so they apply in the order requests arrive.
registry: InterfaceRegistry


def reset_interfaces() -> list[InterfaceRecord]:
    """
    Replaces the registry with the starting state: one enabled static
    physical interface.
    """
    global registry
    registry = InterfaceRegistry(default_mtu=settings.DEFAULT_MTU)
    first = registry.add()
    registry.update(first.id, "name", settings.INITIAL_INTERFACE_NAME)
    log.info(f"Interfaces reset to {settings.INITIAL_INTERFACE_NAME}")
    return list(registry)


async def get_interfaces() -> list[InterfaceRecord]:
    return list(registry)


async def add_interface() -> InterfaceRecord:
    record = registry.add()
    log.info(f"Added interface {record.name}")
    return record


async def remove_interface(interface_id: str) -> list[InterfaceRecord]:
    """
    Removes an interface and its references. Unknown ids are not an error.
    """
    removed = registry.remove(interface_id)
    if removed is not None:
        log.info(f"Removed interface {removed.name}")
    return list(registry)


async def update_interface(
    interface_id: str, field: str, value: Any
) -> Optional[InterfaceRecord]:
    return registry.update(interface_id, field, value)


async def get_config(now: Optional[datetime] = None) -> str:
    """
    Returns the interfaces file for the current definitions
    """
    if now is None:
        now = datetime.now()
    return generate_config(registry, now)


async def validate_ip(value: str) -> IPValidationResult:
    return validate_ipv4(value)


async def get_catalog() -> InterfaceCatalog:
    return InterfaceCatalog(
        interface_types=INTERFACE_TYPES,
        inet_methods=INET_METHODS,
        bond_modes=BOND_MODES,
    )


reset_interfaces()
