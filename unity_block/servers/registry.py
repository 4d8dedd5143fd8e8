from threading import RLock

from unity_block.common import settings
from unity_block.common.driver_logger import get_stdout_logger
from unity_block.servers.errors import UnknownDriverError
from unity_block.servers.executor.storage_executor import UnityStorageExecutor
from unity_block.servers.storage.storage_driver import UnityStorageDriver

logger = get_stdout_logger()


class DriverRegistry:
    """
    Maps driver names to the factories of their storage driver and storage executor.
    The host application builds a registry at startup and passes it where drivers are created.
    """

    def __init__(self):
        self._storage_drivers = {}
        self._storage_executors = {}
        self._lock = RLock()

    def register_storage_driver(self, name, factory):
        with self._lock:
            logger.debug("registering storage driver : {}".format(name))
            self._storage_drivers[name] = factory

    def register_storage_executor(self, name, factory):
        with self._lock:
            logger.debug("registering storage executor : {}".format(name))
            self._storage_executors[name] = factory

    def storage_driver_names(self):
        with self._lock:
            return sorted(self._storage_drivers)

    def new_storage_driver(self, name):
        return self._new(self._storage_drivers, name)

    def new_storage_executor(self, name):
        return self._new(self._storage_executors, name)

    def _new(self, factories, name):
        with self._lock:
            factory = factories.get(name)
        if factory is None:
            raise UnknownDriverError(name)
        return factory()


def build_registry():
    registry = DriverRegistry()
    registry.register_storage_driver(settings.DRIVER_NAME, UnityStorageDriver)
    registry.register_storage_executor(settings.DRIVER_NAME, UnityStorageExecutor)
    return registry
