import json
from typing import Iterable, List, Tuple

from .models import Membership

Expansion = Tuple[str, Iterable[str]]
Check = Tuple[str, List[Membership]]


def _quote(s: str) -> str:
    return json.dumps(s)


def format_expansions(expansions: Iterable[Expansion]) -> str:
    return "".join(f"{arg}: {' '.join(ips)}\n\n" for arg, ips in expansions)


def format_expansions_json(expansions: Iterable[Expansion]) -> str:
    entries = []
    for arg, ips in expansions:
        entries.append(f"{_quote(arg)}: [{', '.join(_quote(ip) for ip in ips)}]")
    return "{\n" + ",\n\n".join(entries) + "\n}"


def format_checks(checks: Iterable[Check]) -> str:
    lines = []
    for cidr, members in checks:
        pairs = " ".join(f"{m.ip},{str(m.belongs).lower()}" for m in members)
        lines.append(f"{cidr}: {pairs}")
    return "\n".join(lines)


def format_checks_json(checks: Iterable[Check]) -> str:
    entries = []
    for cidr, members in checks:
        objects = ",".join(
            f'{{"ip":{_quote(m.ip)},"belongs":{str(m.belongs).lower()}}}' for m in members
        )
        entries.append(f"{_quote(cidr)}: [{objects}]")
    return "{\n" + ",\n".join(entries) + "\n}"
