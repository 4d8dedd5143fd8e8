import json
from dataclasses import dataclass, field

from unity_block.common import settings


@dataclass
class InstanceId:
    id: str = ""
    driver: str = ""
    metadata: str = None

    def marshal_metadata(self, value):
        """
        Stores an opaque value in the instance id so that it can be persisted and recovered later.

        Args:
            value : any json serializable value
        """
        self.metadata = json.dumps(value)

    def unmarshal_metadata(self):
        if self.metadata is None:
            return None
        return json.loads(self.metadata)

    def to_dict(self):
        return {"id": self.id, "driver": self.driver, "metadata": self.metadata}

    @classmethod
    def from_dict(cls, instance_id_dict):
        return cls(id=instance_id_dict.get("id", ""),
                   driver=instance_id_dict.get("driver", ""),
                   metadata=instance_id_dict.get("metadata"))


@dataclass
class Instance:
    instance_id: InstanceId
    name: str = ""


@dataclass
class LocalDevices:
    driver: str
    device_map: dict = field(default_factory=dict)


@dataclass
class VolumeAttachment:
    volume_id: str
    instance_id: InstanceId
    device_name: str = settings.EMPTY_DEVICE_NAME
    status: str = settings.DEFAULT_ATTACHMENT_STATUS


@dataclass
class Volume:
    name: str
    id: str
    size: int
    type: str = settings.VOLUME_TYPE_THIN
    availability_zone: str = settings.DEFAULT_AVAILABILITY_ZONE
    status: str = settings.DEFAULT_VOLUME_STATUS
    iops: int = 0
    attachments: list = field(default_factory=list)


@dataclass
class DriverContext:
    """
    Request scoped values passed down the call chain.
    """
    instance_id: InstanceId = None
    local_devices: LocalDevices = None


@dataclass
class VolumesOpts:
    attachments: bool = False


@dataclass
class VolumeInspectOpts:
    attachments: bool = False
    opts: dict = field(default_factory=dict)


@dataclass
class VolumeCreateOpts:
    availability_zone: str = None
    type: str = None
    size: int = None
    iops: int = None


@dataclass
class VolumeAttachOpts:
    force: bool = False
    opts: dict = field(default_factory=dict)


@dataclass
class VolumeDetachOpts:
    force: bool = False
    opts: dict = field(default_factory=dict)
