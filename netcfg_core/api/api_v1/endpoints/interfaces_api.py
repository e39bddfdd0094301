from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse

from netcfg_core.core.logging import get_logger
from netcfg_core.models.validation_error import ValidationError
from netcfg_core.schemas.interfaces import (
    InterfaceCatalog,
    InterfacesResponse,
    InterfaceUpdate,
    IPValidationResult,
)
from netcfg_core.services import interfaces_service

router = APIRouter()

log = get_logger(__name__)


@router.get("", response_model=InterfacesResponse)
async def show_interfaces():
    """
    Returns every interface definition, in file order
    """

    try:
        return InterfacesResponse(result=await interfaces_service.get_interfaces())
    except Exception as ex:
        log.error(ex)
        return Response(content="Internal Server Error", status_code=500)


@router.post("", response_model=InterfacesResponse)
async def add_interface():
    """
    Appends a new static physical interface with default values.
    """

    try:
        await interfaces_service.add_interface()
        return InterfacesResponse(result=await interfaces_service.get_interfaces())
    except Exception as ex:
        log.error(ex)
        return Response(content="Internal Server Error", status_code=500)


@router.post("/reset", response_model=InterfacesResponse)
async def reset_interfaces():
    """
    Discards all definitions and starts over from a single eth0.
    """

    try:
        return InterfacesResponse(result=interfaces_service.reset_interfaces())
    except Exception as ex:
        log.error(ex)
        return Response(content="Internal Server Error", status_code=500)


@router.get("/config", response_class=PlainTextResponse)
async def show_config():
    """
    Returns the generated /etc/network/interfaces file as plain text.
    """

    try:
        return PlainTextResponse(content=await interfaces_service.get_config())
    except Exception as ex:
        log.error(ex)
        return Response(content="Internal Server Error", status_code=500)


@router.get("/validate/ipv4", response_model=IPValidationResult)
async def validate_ipv4(value: str = ""):
    """
    Checks an IPv4 address. Advisory only; the config is generated regardless.
    """

    try:
        return await interfaces_service.validate_ip(value)
    except Exception as ex:
        log.error(ex)
        return Response(content="Internal Server Error", status_code=500)


@router.get("/catalog", response_model=InterfaceCatalog)
async def show_catalog():
    """
    Returns the interface types, address methods and bond modes a form can offer.
    """

    try:
        return await interfaces_service.get_catalog()
    except Exception as ex:
        log.error(ex)
        return Response(content="Internal Server Error", status_code=500)


@router.delete("/{interface_id}", response_model=InterfacesResponse)
async def delete_interface(interface_id: str):
    """
    Removes an interface and drops it from bond slaves, bridge ports and VLAN parents.
    """

    try:
        return InterfacesResponse(
            result=await interfaces_service.remove_interface(interface_id)
        )
    except Exception as ex:
        log.error(ex)
        return Response(content="Internal Server Error", status_code=500)


@router.patch("/{interface_id}", response_model=InterfacesResponse)
async def update_interface(interface_id: str, update: InterfaceUpdate):
    """
    Edits one field of an interface. Changing the type clears the fields the
    new type does not use.
    """

    try:
        await interfaces_service.update_interface(
            interface_id, update.field, update.value
        )
        return InterfacesResponse(result=await interfaces_service.get_interfaces())
    except ValidationError as ve:
        return Response(content=ve.error_msg, status_code=ve.status_code)
    except Exception as ex:
        log.error(ex)
        return Response(content="Internal Server Error", status_code=500)
