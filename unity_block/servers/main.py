import json
from argparse import ArgumentParser
from dataclasses import asdict

from unity_block.common import settings
from unity_block.common.config import load_driver_config
from unity_block.common.driver_logger import set_log_level
from unity_block.servers.driver_types import DriverContext, InstanceId, VolumesOpts, VolumeInspectOpts, \
    VolumeCreateOpts, VolumeAttachOpts, VolumeDetachOpts
from unity_block.servers.registry import build_registry


def _build_parser():
    parser = ArgumentParser(prog="unity-block")
    parser.add_argument("-c", "--config", dest="config", required=True, help="driver configuration yaml file")
    parser.add_argument("-l", "--loglevel", dest="loglevel", help="log level")
    parser.add_argument("-d", "--driver", dest="driver", default=settings.DRIVER_NAME, help="storage driver name")
    parser.add_argument("-i", "--instance-id", dest="instance_id", help="instance id of the local host")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("instance", help="inspect the local instance")

    volumes_parser = subparsers.add_parser("volumes", help="list the volumes of the storage pool")
    volumes_parser.add_argument("--attachments", action="store_true")

    inspect_parser = subparsers.add_parser("inspect", help="inspect a volume")
    inspect_parser.add_argument("volume_id")
    inspect_parser.add_argument("--attachments", action="store_true")

    create_parser = subparsers.add_parser("create", help="create a volume")
    create_parser.add_argument("volume_name")
    create_parser.add_argument("--size", type=int, required=True, help="size in GiB")
    create_parser.add_argument("--type", dest="volume_type")
    create_parser.add_argument("--zone")
    create_parser.add_argument("--iops", type=int)

    remove_parser = subparsers.add_parser("remove", help="remove a volume")
    remove_parser.add_argument("volume_id")

    attach_parser = subparsers.add_parser("attach", help="attach a volume to the local instance")
    attach_parser.add_argument("volume_id")
    attach_parser.add_argument("--force", action="store_true")

    detach_parser = subparsers.add_parser("detach", help="detach a volume from the local instance")
    detach_parser.add_argument("volume_id")

    detach_all_parser = subparsers.add_parser("detach-all", help="detach a volume from all hosts")
    detach_all_parser.add_argument("volume_id")
    return parser


def _build_context(arguments, executor):
    context = DriverContext()
    if arguments.instance_id:
        context.instance_id = InstanceId(id=arguments.instance_id, driver=arguments.driver)
    else:
        context.instance_id = executor.instance_id(context)
    context.local_devices = executor.local_devices(context)
    return context


def run_command(arguments, driver, context):
    command = arguments.command
    if command == "instance":
        return asdict(driver.instance_inspect(context))
    if command == "volumes":
        volumes = driver.volumes(context, VolumesOpts(attachments=arguments.attachments))
        return [asdict(volume) for volume in volumes]
    if command == "inspect":
        return asdict(driver.volume_inspect(context, arguments.volume_id,
                                            VolumeInspectOpts(attachments=arguments.attachments)))
    if command == "create":
        opts = VolumeCreateOpts(availability_zone=arguments.zone, type=arguments.volume_type,
                                size=arguments.size, iops=arguments.iops)
        return asdict(driver.volume_create(context, arguments.volume_name, opts))
    if command == "remove":
        driver.volume_remove(context, arguments.volume_id)
        return {"removed": arguments.volume_id}
    if command == "attach":
        volume, device_token = driver.volume_attach(context, arguments.volume_id,
                                                    VolumeAttachOpts(force=arguments.force))
        return {"volume": asdict(volume), "token": device_token}
    if command == "detach":
        return asdict(driver.volume_detach(context, arguments.volume_id, VolumeDetachOpts()))
    if command == "detach-all":
        driver.volume_detach_all(context, arguments.volume_id)
        return {"detached": arguments.volume_id}
    raise ValueError("unknown command : {}".format(command))


def main(argv=None):
    arguments = _build_parser().parse_args(argv)
    set_log_level(arguments.loglevel)

    registry = build_registry()
    driver = registry.new_storage_driver(arguments.driver)
    executor = registry.new_storage_executor(arguments.driver)

    driver_config = load_driver_config(arguments.config)
    context = DriverContext()
    executor.init(context, driver_config)
    driver.init(context, driver_config)

    context = _build_context(arguments, executor)
    print(json.dumps(run_command(arguments, driver, context), indent=2))


if __name__ == '__main__':
    main()
