import typing
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from netcfg_core.constants import DNS_SLOTS
from netcfg_core.schemas.interfaces.types import (
    BOND_MODES,
    INET_METHOD,
    INTERFACE_TYPE,
)


class InterfaceRecord(BaseModel):
    """
    One interface definition, physical or virtual.

    A single shape serves every type; fields that do not apply to the active
    type are ignored when rendering and cleared when the type changes.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(examples=["1"])
    name: str = Field(examples=["eth0"])
    type: INTERFACE_TYPE = Field(examples=["physical"], default="physical")
    method: INET_METHOD = Field(examples=["static"], default="static")

    ip: str = Field(examples=["192.168.1.100"], default="")
    netmask: str = Field(examples=["24"], default="")
    gateway: str = Field(examples=["192.168.1.1"], default="")
    dns: typing.List[str] = Field(
        examples=[["8.8.8.8", "1.1.1.1", ""]],
        default_factory=lambda: [""] * DNS_SLOTS,
    )
    mtu: str = Field(examples=["1500"], default="")

    # bond and bridge
    slaves: typing.List[str] = Field(examples=[["eth1", "eth2"]], default_factory=list)
    # bond
    bond_mode: str = Field(alias="bondMode", examples=["active-backup"], default="")
    # vlan
    vlan_id: str = Field(alias="vlanId", examples=["100"], default="")
    parent_interface: str = Field(
        alias="parentInterface", examples=["eth0"], default=""
    )

    enabled: bool = True

    @field_validator("dns")
    def validate_dns(cls, v):
        assert len(v) == DNS_SLOTS, f"dns must have exactly {DNS_SLOTS} slots"
        return v

    @field_validator("bond_mode")
    def validate_bond_mode(cls, v):
        assert v == "" or v in BOND_MODES, "bondMode must be empty or one of " + ", ".join(
            BOND_MODES
        )
        return v


class InterfaceUpdate(BaseModel):
    """A single field edit, as sent by a form"""

    field: str = Field(examples=["slaves"])
    value: Any = Field(examples=["eth1, eth2"])


class IPValidationResult(BaseModel):
    valid: bool = True
    message: str = ""


class InterfaceCatalog(BaseModel):
    interface_types: dict = Field(default_factory=dict)
    inet_methods: dict = Field(default_factory=dict)
    bond_modes: dict = Field(default_factory=dict)


class InterfacesResponse(BaseModel):
    success: bool = True
    result: typing.List[InterfaceRecord] = Field(default_factory=list)
    errors: typing.Optional[dict] = None
