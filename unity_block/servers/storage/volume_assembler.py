from unity_block.common import settings
from unity_block.common.size_converter import convert_and_floor_size_bytes_to_gib
from unity_block.servers.driver_types import Volume, VolumeAttachment


def get_local_device_map(context, attachments):
    """
    Returns the lun id to local device name mapping of the request, or an empty mapping when attachments
    were not requested or the request carries no local devices.
    """
    if not attachments or context is None or context.local_devices is None:
        return {}
    return context.local_devices.device_map or {}


def assemble_volume(lun, local_device_map, instance_id):
    """
    Builds the volume returned to callers from an array lun and the local device mapping.

    Args:
        lun              : Lun
        local_device_map : lun id to local device name mapping, may be None
        instance_id      : InstanceId of the local instance

    Returns:
        Volume with exactly one attachment, the local instance's view of the lun
    """
    device_name = settings.EMPTY_DEVICE_NAME
    if local_device_map:
        device_name = local_device_map.get(lun.id, settings.EMPTY_DEVICE_NAME)
    attachment = VolumeAttachment(
        volume_id=lun.id,
        instance_id=instance_id,
        device_name=device_name,
        status=settings.DEFAULT_ATTACHMENT_STATUS
    )
    return Volume(
        name=lun.name,
        id=lun.id,
        size=convert_and_floor_size_bytes_to_gib(lun.size_total),
        type=settings.VOLUME_TYPE_THIN,
        availability_zone=settings.DEFAULT_AVAILABILITY_ZONE,
        status=settings.DEFAULT_VOLUME_STATUS,
        attachments=[attachment]
    )
