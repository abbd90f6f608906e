from dataclasses import dataclass
from typing import List, Optional, Tuple

PortRange = Tuple[int, int]


@dataclass(frozen=True)
class NetworkBlock:
    network: Tuple[int, int, int, int]
    address: Tuple[int, int, int, int]
    prefix: int
    ports: Optional[List[PortRange]] = None

    @property
    def size(self) -> int:
        return 1 << (32 - self.prefix)


@dataclass(frozen=True)
class Membership:
    cidr: str
    ip: str
    belongs: bool
