import re

from netcfg_core.schemas.interfaces import IPValidationResult

IPV4_PATTERN = re.compile(r"(\d{1,3}\.){3}\d{1,3}", re.ASCII)

INVALID_FORMAT = "Invalid IP format"
INVALID_OCTET = "IP octets must be between 0 and 255"


def validate_ipv4(value: str) -> IPValidationResult:
    """
    Checks an IPv4 address typed into a form.

    An empty value is valid, since every address field is optional. The
    result is advisory: generating the interfaces file never consults it.
    """
    if not value:
        return IPValidationResult(valid=True, message="")

    if not IPV4_PATTERN.fullmatch(value):
        return IPValidationResult(valid=False, message=INVALID_FORMAT)

    if not all(0 <= int(octet) <= 255 for octet in value.split(".")):
        return IPValidationResult(valid=False, message=INVALID_OCTET)

    return IPValidationResult(valid=True, message="")
