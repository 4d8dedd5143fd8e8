from functools import partial

import unity_block.servers.messages as messages
from unity_block.common import settings
from unity_block.common.config import config as common_config, load_driver_config
from unity_block.common.driver_logger import get_stdout_logger
from unity_block.servers.driver_types import LocalDevices
from unity_block.servers.executor.host_guid import get_host_guid
from unity_block.servers.storage.instance_identity import InstanceIdentityResolver

logger = get_stdout_logger()


def _empty_device_map():
    return {}


class UnityStorageExecutor:
    """
    Host side part of the driver, runs on the instance the volumes are attached to.
    """

    def __init__(self, device_map_supplier=None, host_guid_supplier=None):
        """
        Args:
            device_map_supplier : callable returning the lun id to local device name mapping of this host
            host_guid_supplier  : callable returning the guid of this host, the persisted guid file by default
        """
        self.config = None
        self._device_map_supplier = device_map_supplier or _empty_device_map
        self._host_guid_supplier = host_guid_supplier
        self._identity_resolver = None

    def name(self):
        return settings.DRIVER_NAME

    def init(self, context, config):
        self.config = load_driver_config(config)
        if self._host_guid_supplier is None:
            driver_config = self.config.get(common_config.driver_config.root_key) or {}
            host_guid_path = driver_config.get(common_config.driver_config.host_guid_path) or \
                settings.DEFAULT_HOST_GUID_PATH
            logger.debug("host guid is persisted in : {}".format(host_guid_path))
            self._host_guid_supplier = partial(get_host_guid, host_guid_path)
        self._identity_resolver = InstanceIdentityResolver(self._host_guid_supplier, self.name())
        logger.info("storage executor initialized : {}".format(self.name()))

    def next_device(self, context, opts=None):
        raise NotImplementedError(messages.NEXT_DEVICE_NOT_IMPLEMENTED_MESSAGE)

    def local_devices(self, context, opts=None):
        device_map = self._device_map_supplier()
        logger.debug("local devices : {}".format(device_map))
        return LocalDevices(driver=self.name(), device_map=dict(device_map))

    def instance_id(self, context, opts=None):
        return self._identity_resolver.resolve(context)
