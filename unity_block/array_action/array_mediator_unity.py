import storops
from storops import exception as storops_ex

import unity_block.array_action.errors as array_errors
from unity_block.array_action.array_action_types import Pool, Lun, Host
from unity_block.array_action.array_mediator_interface import ArrayMediator
from unity_block.common.driver_logger import get_stdout_logger
from unity_block.common.size_converter import convert_and_ceil_size_bytes_to_gib

logger = get_stdout_logger()


class UnityArrayMediator(ArrayMediator):

    def __init__(self, user, password, endpoint):  # pylint: disable=super-init-not-called
        self.user = user
        self.password = password
        self.endpoint = endpoint
        self.client = None
        self._serial_number = None

        logger.debug("in init")
        self._connect()

    def _connect(self):
        logger.debug("connecting to endpoint : {}".format(self.endpoint))
        try:
            self.client = storops.UnitySystem(self.endpoint, self.user, self.password)
            self.client.update()
        except storops_ex.UnityException as ex:
            logger.exception(ex)
            raise array_errors.CredentialsError(self.endpoint) from ex

    @property
    def serial_number(self):
        if self._serial_number is None:
            self._serial_number = self.client.serial_number
        return self._serial_number

    @staticmethod
    def _generate_pool_response(unity_pool):
        return Pool(id=unity_pool.get_id(), name=unity_pool.name)

    @staticmethod
    def _get_host_ids(unity_lun):
        host_access = unity_lun.host_access or []
        return [access.host.get_id() for access in host_access]

    def _generate_lun_response(self, unity_lun):
        return Lun(
            id=unity_lun.get_id(),
            name=unity_lun.name,
            size_total=int(unity_lun.size_total),
            host_ids=self._get_host_ids(unity_lun),
            wwn=unity_lun.wwn
        )

    def get_pool_by_id(self, pool_id):
        logger.debug("Get pool by id : {}".format(pool_id))
        try:
            unity_pool = self.client.get_pool(_id=pool_id)
            if unity_pool is None or not unity_pool.existed:
                raise array_errors.PoolDoesNotExist(pool_id, self.endpoint)
        except storops_ex.UnityResourceNotFoundError as ex:
            logger.exception(ex)
            raise array_errors.PoolDoesNotExist(pool_id, self.endpoint) from ex
        return self._generate_pool_response(unity_pool)

    def get_pool_by_name(self, pool_name):
        logger.debug("Get pool by name : {}".format(pool_name))
        try:
            unity_pool = self.client.get_pool(name=pool_name)
        except storops_ex.UnityResourceNotFoundError as ex:
            logger.exception(ex)
            raise array_errors.PoolDoesNotExist(pool_name, self.endpoint) from ex
        if not unity_pool:
            raise array_errors.PoolDoesNotExist(pool_name, self.endpoint)
        return self._generate_pool_response(unity_pool)

    def create_lun(self, pool_id, name, size_in_bytes):
        size_in_gib = convert_and_ceil_size_bytes_to_gib(size_in_bytes)
        logger.info("creating lun with name : {}. size : {} GiB . in pool : {}".format(name, size_in_gib, pool_id))
        unity_pool = self.client.get_pool(_id=pool_id)
        try:
            unity_lun = unity_pool.create_lun(lun_name=name, size_gb=size_in_gib, is_thin=True)
        except storops_ex.UnityLunNameInUseError as ex:
            logger.exception(ex)
            raise array_errors.VolumeAlreadyExists(name, self.endpoint) from ex
        except storops_ex.UnityResourceNotFoundError as ex:
            logger.exception(ex)
            raise array_errors.PoolDoesNotExist(pool_id, self.endpoint) from ex
        logger.info("finished creating lun : {}".format(unity_lun.get_id()))
        return self._generate_lun_response(unity_lun)

    def get_luns(self, pool_id):
        logger.debug("Get luns of pool : {}".format(pool_id))
        luns = []
        for unity_lun in self.client.get_lun():
            if unity_lun.pool is not None and unity_lun.pool.get_id() == pool_id:
                luns.append(self._generate_lun_response(unity_lun))
        logger.debug("found {} luns in pool : {}".format(len(luns), pool_id))
        return luns

    def _get_unity_lun(self, lun_id):
        try:
            unity_lun = self.client.get_lun(_id=lun_id)
            if unity_lun is None or not unity_lun.existed:
                raise array_errors.ObjectNotFoundError(lun_id)
        except storops_ex.UnityResourceNotFoundError as ex:
            logger.exception(ex)
            raise array_errors.ObjectNotFoundError(lun_id) from ex
        return unity_lun

    def _get_unity_host(self, host_id):
        try:
            unity_host = self.client.get_host(_id=host_id)
            if unity_host is None or not unity_host.existed:
                raise array_errors.HostNotFoundError(host_id)
        except storops_ex.UnityResourceNotFoundError as ex:
            logger.exception(ex)
            raise array_errors.HostNotFoundError(host_id) from ex
        return unity_host

    def get_lun_by_id(self, lun_id):
        logger.debug("Get lun : {}".format(lun_id))
        unity_lun = self._get_unity_lun(lun_id)
        return self._generate_lun_response(unity_lun)

    def delete_lun(self, lun_id):
        logger.info("Deleting lun with id : {0}".format(lun_id))
        unity_lun = self._get_unity_lun(lun_id)
        try:
            unity_lun.delete()
        except storops_ex.UnityResourceNotFoundError as ex:
            logger.exception(ex)
            raise array_errors.ObjectNotFoundError(lun_id) from ex
        except storops_ex.UnityException as ex:
            logger.exception(ex)
            raise ex
        logger.info("Finished lun deletion. id : {0}".format(lun_id))

    def get_host_by_id(self, host_id):
        logger.debug("Get host : {}".format(host_id))
        unity_host = self._get_unity_host(host_id)
        return Host(id=unity_host.get_id(), name=unity_host.name)

    def attach_host(self, lun_id, host_id):
        logger.debug("attaching lun : {0} to host : {1}".format(lun_id, host_id))
        unity_lun = self._get_unity_lun(lun_id)
        unity_host = self._get_unity_host(host_id)
        try:
            hlu = unity_host.attach(unity_lun, skip_hlu_0=True)
        except storops_ex.UnityResourceAlreadyAttachedError as ex:
            logger.exception(ex)
            raise array_errors.VolumeAlreadyAttachedError(lun_id, [host_id], str(ex)) from ex
        except storops_ex.UnityException as ex:
            logger.exception(ex)
            raise ex
        logger.debug("lun : {0} attached to host : {1} with hlu : {2}".format(lun_id, host_id, hlu))

    def detach_host(self, lun_id, host_id):
        logger.debug("detaching lun : {0} from host : {1}".format(lun_id, host_id))
        unity_lun = self._get_unity_lun(lun_id)
        unity_host = self._get_unity_host(host_id)
        try:
            unity_host.detach(unity_lun)
        except storops_ex.UnityException as ex:
            logger.exception(ex)
            raise ex

    def detach_all_hosts(self, lun_id):
        logger.debug("detaching lun : {0} from all hosts".format(lun_id))
        unity_lun = self._get_unity_lun(lun_id)
        host_access = unity_lun.host_access or []
        for access in host_access:
            logger.debug("detaching lun : {0} from host : {1}".format(lun_id, access.host.get_id()))
            try:
                access.host.detach(unity_lun)
            except storops_ex.UnityException as ex:
                logger.exception(ex)
                raise ex
