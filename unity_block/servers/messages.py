VALIDATION_EXCEPTION_MESSAGE = "Validation error has occurred : {0}"

UNKNOWN_DRIVER_MESSAGE = "Storage driver is not registered : {0}"

# validation error messages
VOLUME_ID_SHOULD_NOT_BE_EMPTY_MESSAGE = 'volume id should not be empty'
VOLUME_NAME_SHOULD_NOT_BE_EMPTY_MESSAGE = 'volume name should not be empty'
SIZE_SHOULD_BE_POSITIVE_MESSAGE = 'size should be a positive number of GiB, got : {}'
UNSUPPORTED_VOLUME_TYPE_MESSAGE = 'unsupported volume type : {}, only {} volumes are provisioned'

# not implemented messages
CREATE_VOLUME_FROM_SNAPSHOT_NOT_IMPLEMENTED_MESSAGE = "create volume from snapshot is not implemented"
VOLUME_COPY_NOT_IMPLEMENTED_MESSAGE = "volume copy is not implemented"
SNAPSHOTS_NOT_IMPLEMENTED_MESSAGE = "snapshot related operations are not implemented"
NEXT_DEVICE_NOT_IMPLEMENTED_MESSAGE = "next device is not implemented, device names are chosen by the host"
