from dataclasses import dataclass, field


@dataclass
class Pool:
    id: str
    name: str


@dataclass
class Lun:
    id: str
    name: str
    size_total: int
    host_ids: list = field(default_factory=list)
    wwn: str = None

    @property
    def is_attached(self):
        return bool(self.host_ids)


@dataclass
class Host:
    id: str
    name: str
