from unity_block.common.config import config

DRIVER_NAME = config.identity.name
STORAGE_TYPE_BLOCK = config.storage_type.block

VOLUME_TYPE_THIN = config.volume.type
DEFAULT_AVAILABILITY_ZONE = config.volume.availability_zone
DEFAULT_VOLUME_STATUS = config.volume.status
DEFAULT_ATTACHMENT_STATUS = ""
EMPTY_DEVICE_NAME = ""

HOST_GUID_METADATA_KEY = "hostGuid"
DEFAULT_HOST_GUID_PATH = config.host_guid.default_path
