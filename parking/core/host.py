"""
Host name value objects.

Every landing request is keyed on the Host header. These helpers turn the raw
header into either the platform root or a candidate parked-domain name, and
validate names before they enter inventory.
"""

import enum
from dataclasses import dataclass
from typing import Iterable, Optional

from parking.core.errors import InvalidDomainNameError


class HostKind(str, enum.Enum):
    PLATFORM = "platform"
    PARKED = "parked"


@dataclass(frozen=True)
class ResolvedHost:
    """
    Result of host resolution.

    name: host with the port stripped (case preserved)
    kind: PLATFORM for the marketing site, PARKED for everything else
    """

    name: str
    kind: HostKind

    @property
    def is_platform(self) -> bool:
        return self.kind == HostKind.PLATFORM

    def __str__(self) -> str:
        return self.name


def strip_port(raw_host: Optional[str]) -> str:
    """
    Remove the port from a Host header value.

    "testdomain.local:3000" -> "testdomain.local"
    """
    if not raw_host:
        return ""
    return raw_host.split(":")[0].strip()


def resolve_host(raw_host: Optional[str], platform_hosts: Iterable[str]) -> Optional[ResolvedHost]:
    """
    Classify an incoming Host header.

    Comparison against the platform allow-list is exact (case-sensitive).
    Returns None when there is no usable host at all.
    """
    name = strip_port(raw_host)
    if not name:
        return None

    if name in set(platform_hosts):
        return ResolvedHost(name=name, kind=HostKind.PLATFORM)
    return ResolvedHost(name=name, kind=HostKind.PARKED)


def is_plausible_domain_name(name: str) -> bool:
    """Loose check used by bulk import: longer than 3 chars and contains a dot."""
    return len(name) > 3 and "." in name


def normalize_domain_name(raw_name: Optional[str]) -> str:
    """
    Validate and normalize a domain name before it is stored.

    Stored names are lowercase so browser Host headers match them exactly.

    Raises:
        InvalidDomainNameError: If the name can't be served as a host
    """
    name = (raw_name or "").strip().lower()

    if not name:
        raise InvalidDomainNameError(raw_name or "", "name is required")
    if "://" in name or "/" in name:
        raise InvalidDomainNameError(name, "use the bare host name without scheme or path")
    if ":" in name or any(ch.isspace() for ch in name):
        raise InvalidDomainNameError(name, "host names cannot contain ports or whitespace")
    if not is_plausible_domain_name(name):
        raise InvalidDomainNameError(name, "expected a name like example.com")
    if len(name) > 253 or any(not label or len(label) > 63 for label in name.split(".")):
        raise InvalidDomainNameError(name, "labels must be 1-63 characters")

    return name
