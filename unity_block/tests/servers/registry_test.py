import unittest

from mock import Mock

import unity_block.tests.common.test_settings as common_settings
from unity_block.servers.errors import UnknownDriverError
from unity_block.servers.executor.storage_executor import UnityStorageExecutor
from unity_block.servers.registry import DriverRegistry, build_registry
from unity_block.servers.storage.storage_driver import UnityStorageDriver


class TestDriverRegistry(unittest.TestCase):

    def setUp(self):
        self.registry = DriverRegistry()

    def test_new_storage_driver_creates_new_instance_per_call(self):
        factory = Mock(side_effect=lambda: Mock())
        self.registry.register_storage_driver(common_settings.OTHER_DRIVER_NAME, factory)
        first_driver = self.registry.new_storage_driver(common_settings.OTHER_DRIVER_NAME)
        second_driver = self.registry.new_storage_driver(common_settings.OTHER_DRIVER_NAME)
        self.assertIsNot(first_driver, second_driver)
        self.assertEqual(factory.call_count, 2)

    def test_new_storage_driver_unknown_name_fail(self):
        with self.assertRaises(UnknownDriverError):
            self.registry.new_storage_driver(common_settings.OTHER_DRIVER_NAME)

    def test_new_storage_executor_unknown_name_fail(self):
        with self.assertRaises(UnknownDriverError):
            self.registry.new_storage_executor(common_settings.OTHER_DRIVER_NAME)

    def test_storage_driver_names(self):
        self.registry.register_storage_driver("b", Mock())
        self.registry.register_storage_driver("a", Mock())
        self.assertEqual(self.registry.storage_driver_names(), ["a", "b"])

    def test_build_registry_registers_unity(self):
        registry = build_registry()
        self.assertEqual(registry.storage_driver_names(), [common_settings.DRIVER_NAME])
        self.assertIsInstance(registry.new_storage_driver(common_settings.DRIVER_NAME), UnityStorageDriver)
        self.assertIsInstance(registry.new_storage_executor(common_settings.DRIVER_NAME), UnityStorageExecutor)
