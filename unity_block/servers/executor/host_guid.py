import os
import uuid
from threading import Lock

from unity_block.common import settings
from unity_block.common.driver_logger import get_stdout_logger

logger = get_stdout_logger()

_host_guid_lock = Lock()


def get_host_guid(path=settings.DEFAULT_HOST_GUID_PATH):
    """
    Returns the guid of the local host, creating and persisting a new one on first use.

    Args:
        path : file the guid is persisted in

    Returns:
        guid string, the same value across process restarts on the same host
    """
    with _host_guid_lock:
        if os.path.exists(path):
            with open(path, 'r', encoding="utf-8") as guid_file:
                host_guid = guid_file.read().strip()
            if host_guid:
                return host_guid
            logger.warning("host guid file {} is empty, generating a new guid".format(path))

        host_guid = str(uuid.uuid4())
        guid_dir = os.path.dirname(path)
        if guid_dir:
            os.makedirs(guid_dir, exist_ok=True)
        with open(path, 'w', encoding="utf-8") as guid_file:
            guid_file.write(host_guid)
        logger.info("generated host guid {} and stored it in {}".format(host_guid, path))
        return host_guid
