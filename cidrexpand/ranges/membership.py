import logging
from typing import Iterable, List, Tuple

from .models import Membership
from .targets import expand, is_ip

log = logging.getLogger(__name__)

SEPARATORS = {"contains", "c", ","}


def contains(cidr: str, *ips: str) -> List[Membership]:
    """
    Reports whether each IP appears in the expansion of ``cidr``.

    The test is an exact string match against the expanded addresses, so the
    network and broadcast addresses count as members and a candidate written
    differently from the dotted-decimal form (leading zeros, padding) never
    matches.
    """
    members = set(expand(cidr))
    result: List[Membership] = []
    for ip in ips:
        if not is_ip(ip):
            log.debug("Candidate %r is not a plain IPv4 address and only matches verbatim", ip)
        result.append(Membership(cidr=cidr, ip=ip, belongs=ip in members))
    return result


def check_all(cidrs: Iterable[str], ips: List[str]) -> List[Tuple[str, List[Membership]]]:
    return [(cidr, contains(cidr, *ips)) for cidr in cidrs]


def split_check_tokens(tokens: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Splits "RANGE... contains IP..." at the first separator."""
    cidrs: List[str] = []
    ips: List[str] = []
    is_cidr = True
    for token in tokens:
        if is_cidr and token in SEPARATORS:
            is_cidr = False
            continue
        if is_cidr:
            cidrs.append(token)
        else:
            ips.append(token)
    return cidrs, ips
