import itertools
from typing import Any, Iterator, Optional

import pydantic

from netcfg_core.constants import DEFAULT_NAME_PREFIX
from netcfg_core.core.logging import get_logger
from netcfg_core.models.validation_error import ValidationError
from netcfg_core.schemas.interfaces import InterfaceRecord
from netcfg_core.schemas.interfaces.types import SLAVE_TYPES

log = get_logger(__name__)

# Accept both the wire alias (bondMode) and the attribute name (bond_mode)
FIELD_NAMES = {
    **{name: name for name in InterfaceRecord.model_fields},
    **{
        info.alias: name
        for name, info in InterfaceRecord.model_fields.items()
        if info.alias
    },
}

# Fields cleared on a type change unless the new type keeps them
TYPE_SPECIFIC_FIELDS = {
    "bond_mode": ("bond",),
    "slaves": SLAVE_TYPES,
    "vlan_id": ("vlan",),
    "parent_interface": ("vlan",),
}


def parse_slaves(value: str) -> list[str]:
    """Splits comma-separated names, dropping blanks. Order and duplicates are kept."""
    return [slave.strip() for slave in value.split(",") if slave.strip()]


class InterfaceRegistry:
    """
    Ordered collection of interface definitions.

    Insertion order is the order interfaces appear in the generated file.
    Bonds, bridges and VLANs refer to other interfaces by name; those
    references are plain strings and may point at nothing.
    """

    def __init__(self, default_mtu: str = ""):
        self.interfaces: list[InterfaceRecord] = []
        self.default_mtu = default_mtu
        self._ids = itertools.count(1)

    def __iter__(self) -> Iterator[InterfaceRecord]:
        return iter(self.interfaces)

    def __len__(self) -> int:
        return len(self.interfaces)

    def get(self, interface_id: str) -> Optional[InterfaceRecord]:
        for record in self.interfaces:
            if record.id == interface_id:
                return record
        return None

    def add(self) -> InterfaceRecord:
        """
        Appends a new static physical interface named after the current count.

        Name collisions are not checked.
        """
        record = InterfaceRecord(
            id=str(next(self._ids)),
            name=f"{DEFAULT_NAME_PREFIX}{len(self.interfaces) + 1}",
            mtu=self.default_mtu,
        )
        self.interfaces.append(record)
        log.debug(f"Added interface {record.name} (id {record.id})")
        return record

    def remove(self, interface_id: str) -> Optional[InterfaceRecord]:
        """
        Removes an interface and drops every reference to its name.

        Bonds and bridges lose it from their slaves, VLANs whose parent it was
        get an empty parent. Unknown ids are ignored.
        """
        removed = self.get(interface_id)
        if removed is None:
            log.debug(f"Remove ignored, no interface with id {interface_id}")
            return None

        self.interfaces = [i for i in self.interfaces if i.id != interface_id]

        for index, record in enumerate(self.interfaces):
            if record.type in SLAVE_TYPES and removed.name in record.slaves:
                self.interfaces[index] = record.model_copy(
                    update={
                        "slaves": [s for s in record.slaves if s != removed.name]
                    }
                )
                log.debug(f"Dropped {removed.name} from {record.name} slaves")
            elif record.type == "vlan" and record.parent_interface == removed.name:
                self.interfaces[index] = record.model_copy(
                    update={"parent_interface": ""}
                )
                log.debug(f"Cleared parent of {record.name}")

        log.debug(f"Removed interface {removed.name} (id {removed.id})")
        return removed

    def update(
        self, interface_id: str, field: str, value: Any
    ) -> Optional[InterfaceRecord]:
        """
        Applies a single field edit.

        - dns: value is an (index, address) pair replacing one slot
        - slaves: value is comma-separated text
        - type: also clears the fields the new type does not use
        - anything else is replaced as given

        Unknown ids are ignored. Unknown fields and values the record cannot
        hold raise ValidationError and leave the record unchanged.
        """
        for index, record in enumerate(self.interfaces):
            if record.id == interface_id:
                break
        else:
            log.debug(f"Update ignored, no interface with id {interface_id}")
            return None

        attribute = FIELD_NAMES.get(field)
        if attribute is None:
            raise ValidationError(f"Unknown interface field '{field}'")
        if attribute == "id":
            raise ValidationError("Interface id cannot be changed")

        if attribute == "dns":
            changes = {"dns": self._replace_dns_slot(record, value)}
        elif attribute == "slaves":
            if not isinstance(value, str):
                raise ValidationError("slaves updates must be comma-separated text")
            changes = {"slaves": parse_slaves(value)}
        elif attribute == "type":
            changes = {"type": value}
            for name, kept_for in TYPE_SPECIFIC_FIELDS.items():
                if value not in kept_for:
                    changes[name] = InterfaceRecord.model_fields[name].get_default(
                        call_default_factory=True
                    )
        else:
            changes = {attribute: value}

        updated = self._validated(record, changes)
        self.interfaces[index] = updated
        log.debug(f"Updated {field} of interface {updated.name} (id {updated.id})")
        return updated

    @staticmethod
    def _replace_dns_slot(record: InterfaceRecord, value: Any) -> list[str]:
        try:
            slot, address = value
            slot = int(slot)
        except (TypeError, ValueError):
            raise ValidationError("dns updates must be an (index, value) pair")

        if not 0 <= slot < len(record.dns):
            raise ValidationError(f"dns index {slot} is out of range")

        dns = list(record.dns)
        dns[slot] = address
        return dns

    @staticmethod
    def _validated(record: InterfaceRecord, changes: dict) -> InterfaceRecord:
        data = record.model_dump()
        data.update(changes)
        try:
            return InterfaceRecord.model_validate(data)
        except pydantic.ValidationError as e:
            error = e.errors()[0]
            location = ".".join(str(part) for part in error["loc"])
            raise ValidationError(
                f"Invalid value for interface {record.name}: {location}: {error['msg']}"
            )
