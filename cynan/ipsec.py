"""IPsec security associations and policies for the Gm interface."""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)

IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _as_ip(value: Union[str, IpAddress]) -> IpAddress:
    return ipaddress.ip_address(value)


class IpsecMode(Enum):
    """Encapsulation mode; IMS normally uses transport mode on Gm."""

    TRANSPORT = "transport"
    TUNNEL = "tunnel"


class PolicyAction(Enum):
    PROTECT = "protect"
    BYPASS = "bypass"
    DISCARD = "discard"


class PolicyDirection(Enum):
    IN = "in"
    OUT = "out"
    FWD = "fwd"


@dataclass
class SecurityAssociation:
    """A one-way IPsec security association. Keys are kept out of repr."""

    spi: int
    source: IpAddress
    destination: IpAddress
    mode: IpsecMode = IpsecMode.TRANSPORT
    encryption_alg: str = "null"
    encryption_key: bytes = field(default=b"", repr=False)
    integrity_alg: str = "hmac-sha-1-96"
    integrity_key: bytes = field(default=b"", repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.spi <= 0xFFFFFFFF:
            raise ValueError(f"SPI out of range: {self.spi}")
        self.source = _as_ip(self.source)
        self.destination = _as_ip(self.destination)
        self.encryption_key = bytes(self.encryption_key)
        self.integrity_key = bytes(self.integrity_key)

    def wipe_keys(self) -> None:
        """Drop the key material held by this association."""
        self.encryption_key = b""
        self.integrity_key = b""


@dataclass
class TrafficSelector:
    """Traffic matched by a security policy."""

    source_ip: IpAddress
    dest_ip: IpAddress
    protocol: Optional[int] = None
    source_port: Optional[int] = None
    dest_port: Optional[int] = None

    def __post_init__(self) -> None:
        self.source_ip = _as_ip(self.source_ip)
        self.dest_ip = _as_ip(self.dest_ip)
        if self.protocol is not None and not 0 <= self.protocol <= 0xFF:
            raise ValueError(f"Protocol out of range: {self.protocol}")
        for port in (self.source_port, self.dest_port):
            if port is not None and not 0 <= port <= 0xFFFF:
                raise ValueError(f"Port out of range: {port}")


@dataclass
class SecurityPolicy:
    """Decides which traffic IPsec protects; higher priority wins."""

    selector: TrafficSelector
    action: PolicyAction
    direction: PolicyDirection
    priority: int


class IpsecManager:
    """Keeps the installed security associations and policies."""

    def __init__(self) -> None:
        logger.info("Initializing IPsec manager")
        self._associations: dict[tuple[int, IpAddress], SecurityAssociation] = {}
        self._policies: list[SecurityPolicy] = []

    @property
    def security_associations(self) -> list[SecurityAssociation]:
        return list(self._associations.values())

    @property
    def security_policies(self) -> list[SecurityPolicy]:
        """Installed policies, highest priority first."""
        return sorted(self._policies, key=lambda sp: sp.priority, reverse=True)

    async def add_sa(self, sa: SecurityAssociation) -> None:
        logger.info(
            "Adding IPsec SA: SPI=0x%x Src=%s Dst=%s",
            sa.spi,
            sa.source,
            sa.destination,
        )
        logger.debug(
            "SA algorithms: %s (auth), %s (enc)", sa.integrity_alg, sa.encryption_alg
        )
        self._associations[(sa.spi, sa.destination)] = sa

    async def add_sp(self, sp: SecurityPolicy) -> None:
        logger.info(
            "Adding IPsec SP: Dir=%s Src=%s Dst=%s",
            sp.direction.name,
            sp.selector.source_ip,
            sp.selector.dest_ip,
        )
        self._policies.append(sp)

    async def delete_sa(self, spi: int, destination: Union[str, IpAddress]) -> None:
        destination = _as_ip(destination)
        logger.info("Deleting IPsec SA: SPI=%s Dst=%s", spi, destination)
        removed = self._associations.pop((spi, destination), None)
        if removed is not None:
            removed.wipe_keys()