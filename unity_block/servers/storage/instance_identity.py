from unity_block.common import settings
from unity_block.common.driver_logger import get_stdout_logger
from unity_block.servers.driver_types import InstanceId

logger = get_stdout_logger()


class InstanceIdentityResolver:

    def __init__(self, host_guid_supplier, driver_name=settings.DRIVER_NAME):
        """
        Args:
            host_guid_supplier : callable returning a guid that is unique and stable for the local host
            driver_name        : name the instance id is tagged with
        """
        self._host_guid_supplier = host_guid_supplier
        self._driver_name = driver_name

    def resolve(self, context=None):
        """
        Returns the instance id of the request when it carries one, otherwise an instance id derived from the
        host guid. Attach and detach look up the array host by this id, so callers working against an array
        must pass the array host id in DriverContext.instance_id.
        """
        if context is not None and context.instance_id is not None and context.instance_id.id:
            logger.debug("using the instance id of the request : {}".format(context.instance_id.id))
            return context.instance_id

        host_guid = self._host_guid_supplier()
        logger.debug("derived instance id from host guid : {}".format(host_guid))
        instance_id = InstanceId(id=host_guid, driver=self._driver_name)
        instance_id.marshal_metadata({settings.HOST_GUID_METADATA_KEY: host_guid})
        return instance_id
