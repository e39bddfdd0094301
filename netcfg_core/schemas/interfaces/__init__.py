# flake8: noqa: F401

from .interfaces import (
    InterfaceCatalog,
    InterfaceRecord,
    InterfacesResponse,
    InterfaceUpdate,
    IPValidationResult,
)
