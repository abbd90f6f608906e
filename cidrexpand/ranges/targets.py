import ipaddress
import itertools
import logging
import re
import socket
from typing import Iterable, Iterator, List, Sequence

from .models import NetworkBlock
from .ports import PortSpecError, convert_ports, format_ports

log = logging.getLogger(__name__)

_NUMERIC = re.compile(r"[0-9.]+")
_PREFIX = re.compile(r"[0-9]{1,2}")


class RangeError(ValueError):
    """Raised when the address half of a range expression is unusable."""


def is_ip(input: str) -> bool:
    try:
        ipaddress.IPv4Address(input)
        return True
    except ValueError:
        return False


def to_ip(octets: Sequence[int]) -> str:
    if len(octets) != 4:
        return ""
    return "%d.%d.%d.%d" % tuple(octets)


def resolve_host(host: str) -> List[str]:
    """
    Resolves a hostname to its IPv4 addresses, keeping resolver order
    and dropping repeats.
    """
    try:
        infos = socket.getaddrinfo(host, None, socket.AF_INET, socket.SOCK_STREAM)
    except (OSError, UnicodeError) as e:
        raise RangeError(f"Could not resolve '{host}': {e}") from e

    addresses: List[str] = []
    for _family, _type, _proto, _canon, sockaddr in infos:
        if sockaddr[0] not in addresses:
            addresses.append(sockaddr[0])
    if not addresses:
        raise RangeError(f"No IPv4 address for '{host}'")
    log.debug("Resolved %s to %s", host, ", ".join(addresses))
    return addresses


def _block(address: str, prefix: int, ports) -> NetworkBlock:
    try:
        ip = ipaddress.IPv4Address(address)
    except ValueError as e:
        raise RangeError(f"Invalid address '{address}': {e}") from e
    mask = (0xFFFFFFFF << (32 - prefix)) & 0xFFFFFFFF
    network = ipaddress.IPv4Address(int(ip) & mask)
    return NetworkBlock(
        network=tuple(network.packed),
        address=tuple(ip.packed),
        prefix=prefix,
        ports=ports,
    )


def parse_expression(expression: str) -> List[NetworkBlock]:
    """
    Parses "host[/prefix][:ports]" into one block per address.

    A literal made of digits and dots must be a dotted-quad IPv4 address,
    anything else is looked up as a hostname and every address it resolves
    to becomes a block with the same prefix. Address problems raise
    RangeError, port problems raise PortSpecError.
    """
    if expression is None:
        raise RangeError("Range expression cannot be None")
    s = expression.strip()

    ports = None
    if ":" in s:
        s, _, port_spec = s.partition(":")
        ports = convert_ports(port_spec)

    if "/" not in s:
        s += "/32"
    host, _, prefix_s = s.partition("/")

    if not _PREFIX.fullmatch(prefix_s) or int(prefix_s) > 32:
        raise RangeError(f"Invalid prefix length: '{prefix_s}'")
    prefix = int(prefix_s)

    if not host:
        raise RangeError(f"Missing address in '{expression}'")

    if _NUMERIC.fullmatch(host):
        addresses = [host]
    else:
        addresses = resolve_host(host)

    return [_block(address, prefix, ports) for address in addresses]


def iter_block(block: NetworkBlock) -> Iterator[str]:
    """
    Walks a block from its network address to its broadcast address by
    treating the octets as a big-endian counter.
    """
    suffix = ":" + format_ports(block.ports) if block.ports else ""

    if block.prefix == 32:
        yield to_ip(block.address) + suffix
        return

    octets = list(block.network)
    yield to_ip(octets) + suffix
    for _ in range(1, block.size):
        octets[3] += 1
        if octets[3] > 255:
            octets[3] = 0
            octets[2] += 1

        if octets[2] > 255:
            octets[2] = 0
            octets[1] += 1

        # octet 1 rolls over at 255, checked on every step
        if octets[1] >= 255:
            octets[1] = 0
            octets[0] = (octets[0] + 1) % 256
        yield to_ip(octets) + suffix


def iter_expand(expression: str) -> Iterable[str]:
    # parse up front so a bad expression fails before anything is yielded
    blocks = parse_expression(expression)
    return itertools.chain.from_iterable(iter_block(b) for b in blocks)


def expand(expression: str) -> List[str]:
    """
    Every address (or address:ports string) covered by the expression.
    Malformed or unresolvable expressions give an empty list.
    """
    try:
        return list(iter_expand(expression))
    except (RangeError, PortSpecError) as e:
        log.debug("Ignoring range %r: %s", expression, e)
        return []
