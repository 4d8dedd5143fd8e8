import unittest

from mock import patch, Mock, call
from storops import exception as storops_ex

import unity_block.array_action.errors as array_errors
import unity_block.tests.array_action.test_settings as array_settings
import unity_block.tests.common.test_settings as common_settings
from unity_block.array_action.array_mediator_unity import UnityArrayMediator
from unity_block.common.size_converter import GiB
from unity_block.tests.array_action.unity import utils

MEDIATOR_PATH = "unity_block.array_action.array_mediator_unity"


class TestArrayMediatorUnity(unittest.TestCase):

    def setUp(self):
        with patch("{}.UnityArrayMediator._connect".format(MEDIATOR_PATH)):
            self.unity = UnityArrayMediator(common_settings.USER_NAME_VALUE, common_settings.PASSWORD_VALUE,
                                            common_settings.ENDPOINT_VALUE)
        self.unity.client = Mock()
        self.host = utils.get_mock_unity_host()
        self.lun = utils.get_mock_unity_lun()
        self.unity.client.get_lun.return_value = self.lun
        self.unity.client.get_host.return_value = self.host

    @patch("{}.storops.UnitySystem".format(MEDIATOR_PATH))
    def test_connect_success(self, unity_system_mock):
        unity = UnityArrayMediator(common_settings.USER_NAME_VALUE, common_settings.PASSWORD_VALUE,
                                   common_settings.ENDPOINT_VALUE)
        unity_system_mock.assert_called_once_with(common_settings.ENDPOINT_VALUE, common_settings.USER_NAME_VALUE,
                                                  common_settings.PASSWORD_VALUE)
        unity_system_mock.return_value.update.assert_called_once_with()
        self.assertEqual(unity.client, unity_system_mock.return_value)

    @patch("{}.storops.UnitySystem".format(MEDIATOR_PATH))
    def test_connect_with_wrong_credentials_fail(self, unity_system_mock):
        unity_system_mock.return_value.update.side_effect = [
            storops_ex.UnityException(array_settings.CONNECTION_FAILED_MESSAGE)]
        with self.assertRaises(array_errors.CredentialsError):
            UnityArrayMediator(common_settings.USER_NAME_VALUE, common_settings.PASSWORD_VALUE,
                               common_settings.ENDPOINT_VALUE)

    def test_serial_number_is_cached(self):
        self.unity.client.serial_number = common_settings.ARRAY_SERIAL_NUMBER
        self.assertEqual(self.unity.serial_number, common_settings.ARRAY_SERIAL_NUMBER)
        self.unity.client.serial_number = "other"
        self.assertEqual(self.unity.serial_number, common_settings.ARRAY_SERIAL_NUMBER)

    def test_get_pool_by_id_success(self):
        self.unity.client.get_pool.return_value = utils.get_mock_unity_pool()
        pool = self.unity.get_pool_by_id(common_settings.POOL_ID)
        self.unity.client.get_pool.assert_called_once_with(_id=common_settings.POOL_ID)
        self.assertEqual(pool.id, common_settings.POOL_ID)
        self.assertEqual(pool.name, common_settings.POOL_NAME)

    def test_get_pool_by_id_not_existed_fail(self):
        self.unity.client.get_pool.return_value = utils.get_mock_unity_pool(existed=False)
        with self.assertRaises(array_errors.PoolDoesNotExist):
            self.unity.get_pool_by_id(common_settings.POOL_ID)

    def test_get_pool_by_id_not_found_fail(self):
        self.unity.client.get_pool.side_effect = [
            storops_ex.UnityResourceNotFoundError(array_settings.RESOURCE_NOT_FOUND_MESSAGE)]
        with self.assertRaises(array_errors.PoolDoesNotExist):
            self.unity.get_pool_by_id(common_settings.POOL_ID)

    def test_get_pool_by_name_success(self):
        self.unity.client.get_pool.return_value = utils.get_mock_unity_pool()
        pool = self.unity.get_pool_by_name(common_settings.POOL_NAME)
        self.unity.client.get_pool.assert_called_once_with(name=common_settings.POOL_NAME)
        self.assertEqual(pool.id, common_settings.POOL_ID)

    def test_get_pool_by_name_not_found_fail(self):
        self.unity.client.get_pool.side_effect = [
            storops_ex.UnityResourceNotFoundError(array_settings.RESOURCE_NOT_FOUND_MESSAGE)]
        with self.assertRaises(array_errors.PoolDoesNotExist):
            self.unity.get_pool_by_name(common_settings.POOL_NAME)

    def test_create_lun_success(self):
        unity_pool = utils.get_mock_unity_pool()
        unity_pool.create_lun.return_value = self.lun
        self.unity.client.get_pool.return_value = unity_pool
        lun = self.unity.create_lun(common_settings.POOL_ID, common_settings.VOLUME_NAME,
                                    array_settings.DUMMY_LUN_SIZE_BYTES)
        unity_pool.create_lun.assert_called_once_with(lun_name=common_settings.VOLUME_NAME,
                                                      size_gb=common_settings.VOLUME_SIZE_GIB, is_thin=True)
        self.assertEqual(lun.id, common_settings.VOLUME_ID)
        self.assertEqual(lun.size_total, array_settings.DUMMY_LUN_SIZE_BYTES)
        self.assertEqual(lun.host_ids, [])

    def test_create_lun_rounds_size_up_to_gib(self):
        unity_pool = utils.get_mock_unity_pool()
        unity_pool.create_lun.return_value = self.lun
        self.unity.client.get_pool.return_value = unity_pool
        self.unity.create_lun(common_settings.POOL_ID, common_settings.VOLUME_NAME,
                              array_settings.DUMMY_PARTIAL_GIB_SIZE_BYTES)
        self.assertEqual(unity_pool.create_lun.call_args.kwargs["size_gb"], common_settings.VOLUME_SIZE_GIB + 1)

    def test_create_lun_name_in_use_fail(self):
        unity_pool = utils.get_mock_unity_pool()
        unity_pool.create_lun.side_effect = [storops_ex.UnityLunNameInUseError(
            array_settings.LUN_NAME_IN_USE_MESSAGE)]
        self.unity.client.get_pool.return_value = unity_pool
        with self.assertRaises(array_errors.VolumeAlreadyExists):
            self.unity.create_lun(common_settings.POOL_ID, common_settings.VOLUME_NAME, GiB)

    def test_get_luns_filters_by_pool(self):
        other_pool = utils.get_mock_unity_pool(pool_id=common_settings.OTHER_POOL_ID)
        other_lun = utils.get_mock_unity_lun(lun_id=common_settings.OTHER_VOLUME_ID, pool=other_pool)
        self.unity.client.get_lun.return_value = [self.lun, other_lun]
        luns = self.unity.get_luns(common_settings.POOL_ID)
        self.assertEqual([lun.id for lun in luns], [common_settings.VOLUME_ID])

    def test_get_lun_by_id_with_hosts_success(self):
        other_host = utils.get_mock_unity_host(host_id=common_settings.OTHER_HOST_ID)
        self.unity.client.get_lun.return_value = utils.get_mock_unity_lun(hosts=[self.host, other_host])
        lun = self.unity.get_lun_by_id(common_settings.VOLUME_ID)
        self.unity.client.get_lun.assert_called_once_with(_id=common_settings.VOLUME_ID)
        self.assertEqual(lun.host_ids, [common_settings.HOST_ID, common_settings.OTHER_HOST_ID])
        self.assertTrue(lun.is_attached)
        self.assertEqual(lun.wwn, common_settings.VOLUME_WWN)

    def test_get_lun_by_id_not_existed_fail(self):
        self.unity.client.get_lun.return_value = utils.get_mock_unity_lun(existed=False)
        with self.assertRaises(array_errors.ObjectNotFoundError):
            self.unity.get_lun_by_id(common_settings.VOLUME_ID)

    def test_get_lun_by_id_not_found_fail(self):
        self.unity.client.get_lun.side_effect = [
            storops_ex.UnityResourceNotFoundError(array_settings.RESOURCE_NOT_FOUND_MESSAGE)]
        with self.assertRaises(array_errors.ObjectNotFoundError):
            self.unity.get_lun_by_id(common_settings.VOLUME_ID)

    def test_delete_lun_success(self):
        self.unity.delete_lun(common_settings.VOLUME_ID)
        self.lun.delete.assert_called_once_with()

    def test_delete_lun_not_found_fail(self):
        self.lun.delete.side_effect = [
            storops_ex.UnityResourceNotFoundError(array_settings.RESOURCE_NOT_FOUND_MESSAGE)]
        with self.assertRaises(array_errors.ObjectNotFoundError):
            self.unity.delete_lun(common_settings.VOLUME_ID)

    def test_delete_lun_array_failure_is_raised_unchanged(self):
        self.lun.delete.side_effect = [storops_ex.UnityException(array_settings.ARRAY_FAILURE_MESSAGE)]
        with self.assertRaises(storops_ex.UnityException):
            self.unity.delete_lun(common_settings.VOLUME_ID)

    def test_get_host_by_id_success(self):
        host = self.unity.get_host_by_id(common_settings.HOST_ID)
        self.unity.client.get_host.assert_called_once_with(_id=common_settings.HOST_ID)
        self.assertEqual(host.id, common_settings.HOST_ID)
        self.assertEqual(host.name, common_settings.HOST_NAME)

    def test_get_host_by_id_not_found_fail(self):
        self.unity.client.get_host.side_effect = [
            storops_ex.UnityResourceNotFoundError(array_settings.RESOURCE_NOT_FOUND_MESSAGE)]
        with self.assertRaises(array_errors.HostNotFoundError):
            self.unity.get_host_by_id(common_settings.HOST_ID)

    def test_attach_host_success(self):
        self.unity.attach_host(common_settings.VOLUME_ID, common_settings.HOST_ID)
        self.host.attach.assert_called_once_with(self.lun, skip_hlu_0=True)

    def test_attach_host_already_attached_fail(self):
        self.host.attach.side_effect = [
            storops_ex.UnityResourceAlreadyAttachedError(array_settings.ALREADY_ATTACHED_MESSAGE)]
        with self.assertRaises(array_errors.VolumeAlreadyAttachedError) as context:
            self.unity.attach_host(common_settings.VOLUME_ID, common_settings.HOST_ID)
        self.assertEqual(context.exception.hosts, [common_settings.HOST_ID])

    def test_attach_host_with_missing_host_fail(self):
        self.unity.client.get_host.return_value = utils.get_mock_unity_host(existed=False)
        with self.assertRaises(array_errors.HostNotFoundError):
            self.unity.attach_host(common_settings.VOLUME_ID, common_settings.HOST_ID)

    def test_detach_host_success(self):
        self.unity.detach_host(common_settings.VOLUME_ID, common_settings.HOST_ID)
        self.host.detach.assert_called_once_with(self.lun)

    def test_detach_host_with_missing_lun_fail(self):
        self.unity.client.get_lun.return_value = None
        with self.assertRaises(array_errors.ObjectNotFoundError):
            self.unity.detach_host(common_settings.VOLUME_ID, common_settings.HOST_ID)
        self.host.detach.assert_not_called()

    def test_detach_all_hosts_success(self):
        hosts = [utils.get_mock_unity_host(host_id=host_id) for host_id in
                 (common_settings.HOST_ID, common_settings.OTHER_HOST_ID, common_settings.THIRD_HOST_ID)]
        lun = utils.get_mock_unity_lun(hosts=hosts)
        self.unity.client.get_lun.return_value = lun
        self.unity.detach_all_hosts(common_settings.VOLUME_ID)
        for host in hosts:
            self.assertEqual(host.detach.call_args_list, [call(lun)])

    def test_detach_all_hosts_with_no_hosts_success(self):
        self.unity.detach_all_hosts(common_settings.VOLUME_ID)
        self.host.detach.assert_not_called()
