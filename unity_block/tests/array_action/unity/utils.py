from mock import Mock
from munch import Munch

import unity_block.tests.array_action.test_settings as array_settings
import unity_block.tests.common.test_settings as common_settings


def get_mock_unity_pool(pool_id=common_settings.POOL_ID, name=common_settings.POOL_NAME, existed=True):
    pool = Mock()
    pool.get_id.return_value = pool_id
    pool.name = name
    pool.existed = existed
    return pool


def get_mock_unity_host(host_id=common_settings.HOST_ID, name=common_settings.HOST_NAME, existed=True):
    host = Mock()
    host.get_id.return_value = host_id
    host.name = name
    host.existed = existed
    host.attach.return_value = array_settings.DUMMY_HLU
    return host


def get_mock_host_access(host):
    return Munch({"host": host})


def get_mock_unity_lun(lun_id=common_settings.VOLUME_ID, name=common_settings.VOLUME_NAME,
                       size_total=array_settings.DUMMY_LUN_SIZE_BYTES, hosts=None, pool=None, existed=True):
    lun = Mock()
    lun.get_id.return_value = lun_id
    lun.name = name
    lun.size_total = size_total
    lun.wwn = common_settings.VOLUME_WWN
    lun.existed = existed
    lun.pool = pool if pool is not None else get_mock_unity_pool()
    lun.host_access = [get_mock_host_access(host) for host in hosts] if hosts else None
    return lun
