# flake8: noqa: F401

from .interfaces_file import InterfacesFile, generate_config
from .registry import InterfaceRegistry, parse_slaves
