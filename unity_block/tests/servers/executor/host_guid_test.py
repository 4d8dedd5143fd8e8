import os
import tempfile
import unittest

import unity_block.tests.common.test_settings as common_settings
from unity_block.servers.executor.host_guid import get_host_guid


class TestGetHostGuid(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.guid_path = os.path.join(self.temp_dir.name, "unity", "host_guid")

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_get_host_guid_creates_and_persists_guid(self):
        host_guid = get_host_guid(self.guid_path)
        self.assertTrue(host_guid)
        with open(self.guid_path, 'r', encoding="utf-8") as guid_file:
            self.assertEqual(guid_file.read(), host_guid)

    def test_get_host_guid_is_stable(self):
        self.assertEqual(get_host_guid(self.guid_path), get_host_guid(self.guid_path))

    def test_get_host_guid_reads_existing_guid(self):
        os.makedirs(os.path.dirname(self.guid_path))
        with open(self.guid_path, 'w', encoding="utf-8") as guid_file:
            guid_file.write("{}\n".format(common_settings.HOST_GUID))
        self.assertEqual(get_host_guid(self.guid_path), common_settings.HOST_GUID)

    def test_get_host_guid_regenerates_empty_guid(self):
        os.makedirs(os.path.dirname(self.guid_path))
        with open(self.guid_path, 'w', encoding="utf-8"):
            pass
        host_guid = get_host_guid(self.guid_path)
        self.assertTrue(host_guid)
        self.assertEqual(get_host_guid(self.guid_path), host_guid)
