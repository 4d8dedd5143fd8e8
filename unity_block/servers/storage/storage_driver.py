from functools import partial

import unity_block.array_action.errors as array_errors
import unity_block.servers.messages as messages
from unity_block.array_action.array_mediator_unity import UnityArrayMediator
from unity_block.array_action.pool_resolver import PoolResolver
from unity_block.common import settings
from unity_block.common.config import config as common_config, load_driver_config
from unity_block.common.driver_logger import get_stdout_logger
from unity_block.common.size_converter import convert_size_gib_to_bytes
from unity_block.servers.decorators import driver_method
from unity_block.servers.driver_types import Instance, VolumeInspectOpts, VolumesOpts, VolumeAttachOpts
from unity_block.servers.errors import ValidationException
from unity_block.servers.executor.host_guid import get_host_guid
from unity_block.servers.storage.attachment_manager import AttachmentManager
from unity_block.servers.storage.instance_identity import InstanceIdentityResolver
from unity_block.servers.storage.volume_assembler import assemble_volume, get_local_device_map

logger = get_stdout_logger()

driver_keys = common_config.driver_config


class UnityStorageDriver:
    """
    Block storage driver for a single Unity array and a single storage pool.
    """

    def __init__(self, mediator_class=UnityArrayMediator, host_guid_supplier=None):
        self.config = None
        self.mediator = None
        self.pool_resolver = None
        self.attachment_manager = None
        self._mediator_class = mediator_class
        self._host_guid_supplier = host_guid_supplier
        self._identity_resolver = None

    def name(self):
        return settings.DRIVER_NAME

    @driver_method()
    def init(self, context, config):
        self.config = load_driver_config(config)
        driver_config = self.config.get(driver_keys.root_key) or {}
        endpoint = driver_config.get(driver_keys.endpoint)
        user = driver_config.get(driver_keys.user_name)
        password = driver_config.get(driver_keys.password)
        pool_id = driver_config.get(driver_keys.storage_pool_id)
        pool_name = driver_config.get(driver_keys.storage_pool_name)

        fields = {
            "provider": self.name(),
            "endpoint": endpoint,
            "userName": user,
            "storagePoolID": pool_id,
            "storagePoolName": pool_name,
        }
        logger.info("initializing driver : {}".format(fields))

        self._validate_driver_config(endpoint, user, password, pool_id, pool_name)

        self.mediator = self._mediator_class(user, password, endpoint)
        self.pool_resolver = PoolResolver(self.mediator, pool_id=pool_id, pool_name=pool_name)
        self.attachment_manager = AttachmentManager(self.mediator)

        if self._host_guid_supplier is None:
            host_guid_path = driver_config.get(driver_keys.host_guid_path) or settings.DEFAULT_HOST_GUID_PATH
            self._host_guid_supplier = partial(get_host_guid, host_guid_path)
        self._identity_resolver = InstanceIdentityResolver(self._host_guid_supplier, self.name())

        logger.info("storage driver initialized : {}".format(fields))

    @staticmethod
    def _validate_driver_config(endpoint, user, password, pool_id, pool_name):
        for key, value in ((driver_keys.endpoint, endpoint),
                           (driver_keys.user_name, user),
                           (driver_keys.password, password)):
            if not value:
                raise array_errors.CredentialsParameterIsMissing(key)
        if not pool_id and not pool_name:
            raise array_errors.PoolParameterIsMissing(driver_keys.storage_pool_id, driver_keys.storage_pool_name)

    @staticmethod
    def _validate_volume_id(volume_id):
        if not volume_id:
            raise ValidationException(messages.VOLUME_ID_SHOULD_NOT_BE_EMPTY_MESSAGE)

    @staticmethod
    def _validate_create_volume_opts(volume_name, opts):
        if not volume_name:
            raise ValidationException(messages.VOLUME_NAME_SHOULD_NOT_BE_EMPTY_MESSAGE)
        if opts.size is None or opts.size <= 0:
            raise ValidationException(messages.SIZE_SHOULD_BE_POSITIVE_MESSAGE.format(opts.size))
        if opts.type and opts.type != settings.VOLUME_TYPE_THIN:
            raise ValidationException(messages.UNSUPPORTED_VOLUME_TYPE_MESSAGE.format(opts.type,
                                                                                      settings.VOLUME_TYPE_THIN))

    def type(self, context):
        return settings.STORAGE_TYPE_BLOCK

    def next_device_info(self, context):
        return None

    @driver_method()
    def instance_inspect(self, context, opts=None):
        instance_id = self._identity_resolver.resolve(context)
        return Instance(instance_id=instance_id, name=self.mediator.serial_number)

    @driver_method()
    def volumes(self, context, opts=None):
        if opts is None:
            opts = VolumesOpts()
        local_device_map = get_local_device_map(context, opts.attachments)
        instance_id = self._identity_resolver.resolve(context)
        pool = self.pool_resolver.resolve()
        luns = self.mediator.get_luns(pool.id)
        return [assemble_volume(lun, local_device_map, instance_id) for lun in luns]

    @driver_method(object_id_parameter="volume_id")
    def volume_inspect(self, context, volume_id, opts=None):
        self._validate_volume_id(volume_id)
        if opts is None:
            opts = VolumeInspectOpts()
        local_device_map = get_local_device_map(context, opts.attachments)
        lun = self.mediator.get_lun_by_id(volume_id)
        return assemble_volume(lun, local_device_map, self._identity_resolver.resolve(context))

    @driver_method(object_id_parameter="volume_name")
    def volume_create(self, context, volume_name, opts):
        logger.info("creating volume : {} with opts : {}".format(volume_name, opts))
        self._validate_create_volume_opts(volume_name, opts)
        if opts.availability_zone:
            logger.warning("availability zone is ignored, the array has no zones : {}".format(
                opts.availability_zone))
        if opts.iops:
            logger.warning("iops are ignored, the array has no per volume iops : {}".format(opts.iops))

        pool = self.pool_resolver.resolve()
        lun = self.mediator.create_lun(pool.id, volume_name, convert_size_gib_to_bytes(opts.size))
        return self.volume_inspect(context, lun.id, VolumeInspectOpts(attachments=True))

    @driver_method()
    def volume_create_from_snapshot(self, context, snapshot_id, volume_name, opts=None):
        raise NotImplementedError(messages.CREATE_VOLUME_FROM_SNAPSHOT_NOT_IMPLEMENTED_MESSAGE)

    @driver_method()
    def volume_copy(self, context, volume_id, volume_name, opts=None):
        raise NotImplementedError(messages.VOLUME_COPY_NOT_IMPLEMENTED_MESSAGE)

    @driver_method()
    def volume_snapshot(self, context, volume_id, snapshot_name, opts=None):
        raise NotImplementedError(messages.SNAPSHOTS_NOT_IMPLEMENTED_MESSAGE)

    @driver_method(object_id_parameter="volume_id")
    def volume_remove(self, context, volume_id, opts=None):
        self._validate_volume_id(volume_id)
        self.attachment_manager.remove(volume_id)

    @driver_method(object_id_parameter="volume_id")
    def volume_attach(self, context, volume_id, opts=None):
        self._validate_volume_id(volume_id)
        if opts is None:
            opts = VolumeAttachOpts()
        instance_id = self._identity_resolver.resolve(context)
        lun = self.attachment_manager.attach(volume_id, instance_id.id, force=opts.force)
        local_device_map = get_local_device_map(context, attachments=True)
        attached_volume = assemble_volume(lun, local_device_map, instance_id)
        return attached_volume, attached_volume.id

    @driver_method(object_id_parameter="volume_id")
    def volume_detach(self, context, volume_id, opts=None):
        self._validate_volume_id(volume_id)
        instance_id = self._identity_resolver.resolve(context)
        lun = self.attachment_manager.detach(volume_id, instance_id.id)
        local_device_map = get_local_device_map(context, attachments=True)
        return assemble_volume(lun, local_device_map, instance_id)

    @driver_method(object_id_parameter="volume_id")
    def volume_detach_all(self, context, volume_id, opts=None):
        self._validate_volume_id(volume_id)
        self.attachment_manager.detach_all(volume_id)

    @driver_method()
    def snapshots(self, context, opts=None):
        raise NotImplementedError(messages.SNAPSHOTS_NOT_IMPLEMENTED_MESSAGE)

    @driver_method(object_id_parameter="snapshot_id")
    def snapshot_inspect(self, context, snapshot_id, opts=None):
        raise NotImplementedError(messages.SNAPSHOTS_NOT_IMPLEMENTED_MESSAGE)

    @driver_method(object_id_parameter="snapshot_id")
    def snapshot_copy(self, context, snapshot_id, snapshot_name, destination_id, opts=None):
        raise NotImplementedError(messages.SNAPSHOTS_NOT_IMPLEMENTED_MESSAGE)

    @driver_method(object_id_parameter="snapshot_id")
    def snapshot_remove(self, context, snapshot_id, opts=None):
        raise NotImplementedError(messages.SNAPSHOTS_NOT_IMPLEMENTED_MESSAGE)
