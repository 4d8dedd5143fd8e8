from retry import retry

import unity_block.array_action.errors as array_errors
from unity_block.common.driver_logger import get_stdout_logger

logger = get_stdout_logger()


class AttachmentManager:
    """
    Drives the attach and detach transitions of a lun.
    The array is the source of truth, a lun is attached when it has at least one host association.
    """

    def __init__(self, mediator):
        self._mediator = mediator

    def attach(self, volume_id, host_id, force=False):
        lun = self._mediator.get_lun_by_id(volume_id)
        previous_host_ids = list(lun.host_ids)
        if previous_host_ids and not force:
            logger.error("volume {} is already attached to hosts : {}".format(volume_id, previous_host_ids))
            raise array_errors.VolumeAlreadyAttachedError(volume_id, previous_host_ids)

        host = self._mediator.get_host_by_id(host_id)

        try:
            if previous_host_ids:
                logger.info("force attach, detaching volume {} from hosts : {}".format(volume_id, previous_host_ids))
                self._mediator.detach_all_hosts(volume_id)
            self._mediator.attach_host(volume_id, host.id)
        except Exception as ex:
            logger.error("failed to attach volume {} to host {} : {}".format(volume_id, host.id, ex))
            if previous_host_ids:
                self._rollback_host_access(volume_id, previous_host_ids)
            raise ex

        logger.info("volume {} attached to host {}".format(volume_id, host.id))
        return self._mediator.get_lun_by_id(volume_id)

    def _rollback_host_access(self, volume_id, host_ids):
        try:
            self._restore_host_access(volume_id, host_ids)
        except Exception as ex:
            logger.exception("failed to re-attach volume {} to hosts {} : {}".format(volume_id, host_ids, ex))

    @retry(Exception, tries=5, delay=1)
    def _restore_host_access(self, volume_id, host_ids):
        logger.debug("Rollback force attach. re-attaching volume {} to hosts : {}".format(volume_id, host_ids))
        current_host_ids = self._mediator.get_lun_by_id(volume_id).host_ids
        for host_id in host_ids:
            if host_id not in current_host_ids:
                self._mediator.attach_host(volume_id, host_id)

    def detach(self, volume_id, host_id):
        self._mediator.get_lun_by_id(volume_id)
        host = self._mediator.get_host_by_id(host_id)
        self._mediator.detach_host(volume_id, host.id)
        logger.info("volume {} detached from host {}".format(volume_id, host.id))
        return self._mediator.get_lun_by_id(volume_id)

    def detach_all(self, volume_id):
        logger.debug("detaching volume {} from all hosts".format(volume_id))
        self._mediator.detach_all_hosts(volume_id)

    def remove(self, volume_id):
        self._mediator.delete_lun(volume_id)
