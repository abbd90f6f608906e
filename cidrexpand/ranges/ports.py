import re
from typing import Iterable, List

from .models import PortRange

_PORT_MIN, _PORT_MAX = 0, 65535
_DIGITS = re.compile(r"[0-9]+")


class PortSpecError(ValueError):
    pass


class NonNumericPortError(PortSpecError):
    pass


class MultiHyphenPortError(PortSpecError):
    pass


class PortOutOfRangeError(PortSpecError):
    pass


def _to_port(value: str, part: str) -> int:
    value = value.strip()
    if not _DIGITS.fullmatch(value):
        raise NonNumericPortError(f"Invalid port: '{part}' is not numeric")
    return int(value)


def convert_ports(input_ports: str) -> List[PortRange]:
    """
    Turns "22,80,8000-8010" into sorted, merged (start, end) ranges.
    A reversed range such as "500-498" is swapped rather than rejected.
    """
    if input_ports is None:
        raise PortSpecError("Port spec cannot be None")
    s = input_ports.strip()

    raw: List[PortRange] = []
    for part in s.split(","):
        part = part.strip()
        if not part:
            continue
        if part.count("-") > 1:
            raise MultiHyphenPortError(f"Invalid range: '{part}' has more than one '-'")
        if "-" in part:
            a, b = part.split("-", 1)
            start, end = _to_port(a, part), _to_port(b, part)
            if start > end:
                start, end = end, start
        else:
            start = end = _to_port(part, part)

        if start < _PORT_MIN or end > _PORT_MAX:
            raise PortOutOfRangeError(f"Port(s) out of range in '{part}'; valid {_PORT_MIN}-{_PORT_MAX}")

        raw.append((start, end))

    if not raw:
        raise PortSpecError("Empty port spec")

    raw.sort()
    merged: List[PortRange] = []
    cs, ce = raw[0]
    for s2, e2 in raw[1:]:
        if s2 <= ce + 1:
            ce = max(ce, e2)
        else:
            merged.append((cs, ce))
            cs, ce = s2, e2
    merged.append((cs, ce))
    return merged


def iterate_ports(ranges: List[PortRange]) -> Iterable[int]:
    for start, end in ranges:
        for p in range(start, end + 1):
            yield p


def format_ports(ranges: List[PortRange]) -> str:
    return ",".join(str(p) for p in iterate_ports(ranges))
