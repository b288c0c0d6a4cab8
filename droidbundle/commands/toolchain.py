import click
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..ndk import AndroidNdk
from ..targets import TargetDescriptor


def resolve_ndk(android):
    if android.get("ndk_path"):
        return AndroidNdk(android["ndk_path"])
    return AndroidNdk.from_env(android.get("sdk_path"))


@click.command()
@click.option("--target", "-t", "targets", multiple=True, help="Android ABI (e.g. arm64-v8a). Defaults to build_targets.")
@click.option("--api", type=int, default=None, help="Minimum API level. Defaults to min_sdk_version.")
@click.pass_context
@handle_exceptions
def toolchain(ctx, targets, api):
    """Show the NDK toolchain paths used for each target."""
    path = ctx.obj["path"]
    android = config_module.android_settings(config_module.load_config(path=path), path)
    targets = targets or android["build_targets"]
    api = api or android["min_sdk_version"]

    ndk = resolve_ndk(android)
    logger.info(f"NDK: {ndk.ndk_path}")
    logger.info(f"Toolchain: {ndk.toolchain_dir()}")
    for name in targets:
        descriptor = TargetDescriptor(name, api)
        cc, cxx = ndk.clang(descriptor.target, descriptor.min_api)
        logger.info(f"{descriptor}:")
        logger.step_info(f"clang:        {cc}", indent=2)
        logger.step_info(f"clang++:      {cxx}", indent=2)
        logger.step_info(f"readelf:      {ndk.readelf(descriptor.target)[0]}", indent=2)
        logger.step_info(f"sysroot lib:  {ndk.sysroot_lib_dir(descriptor.target)}", indent=2)
        logger.step_info(
            f"platform lib: {ndk.sysroot_platform_lib_dir(descriptor.target, descriptor.min_api)}",
            indent=2,
        )
    logger.success("Toolchain resolved.")
