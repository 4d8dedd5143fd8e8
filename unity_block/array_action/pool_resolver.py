from threading import Lock

import unity_block.array_action.errors as array_errors
from unity_block.common.config import config
from unity_block.common.driver_logger import get_stdout_logger

logger = get_stdout_logger()


class PoolResolver:
    """
    Resolves the storage pool the driver creates luns in and keeps it for the lifetime of the driver.
    The pool id wins over the pool name when both are configured.
    """

    def __init__(self, mediator, pool_id=None, pool_name=None):
        self._mediator = mediator
        self.pool_id = pool_id
        self.pool_name = pool_name
        self._pool = None
        self._lock = Lock()

    @property
    def is_resolved(self):
        return self._pool is not None

    def resolve(self):
        if self._pool is None:
            with self._lock:
                if self._pool is None:
                    self._pool = self._resolve_from_array()
                    logger.info("storage pool resolved : {}".format(self._pool))
        return self._pool

    def _resolve_from_array(self):
        if self.pool_id:
            logger.debug("resolving storage pool by id : {}".format(self.pool_id))
            return self._mediator.get_pool_by_id(self.pool_id)
        if self.pool_name:
            logger.debug("resolving storage pool by name : {}".format(self.pool_name))
            return self._mediator.get_pool_by_name(self.pool_name)
        logger.error("cannot find the storage pool on array, neither pool id nor pool name is configured")
        raise array_errors.PoolParameterIsMissing(config.driver_config.storage_pool_id,
                                                  config.driver_config.storage_pool_name)
