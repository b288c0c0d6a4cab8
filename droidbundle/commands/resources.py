import os
import click
from .. import config as config_module
from ..aapt2 import Aapt2Runner
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..manifest import manifest_from_config
from ..sdk import AndroidSdk
from ..steps import CompileResources, GenAndroidManifest, LinkResources, Pipeline
from ..utils.file_manager import ensure_dir


def resource_pipeline(executor, conf, android, android_jar):
    """manifest -> compile -> link, all writing below the build directory."""
    app = conf.get("app", {})
    build_dir = android["build_dir"]
    name = app.get("name", "app")
    return Pipeline([
        GenAndroidManifest(build_dir, manifest_from_config(conf)),
        CompileResources(executor, [android["res"]] if os.path.isdir(android["res"]) else [],
                         os.path.join(build_dir, "compiled_res")),
        LinkResources(
            executor,
            None,
            os.path.join(build_dir, f"{name}.unaligned.apk"),
            android_jar=android_jar,
            assets_dir=android["assets"],
            min_sdk_version=android["min_sdk_version"],
            target_sdk_version=android["target_sdk_version"],
            version_code=app.get("version_code"),
            version_name=app.get("version_name"),
        ),
    ])


@click.command()
@click.option("--out", "-o", "out_dir", default=None, help="Output directory. Defaults to the build directory.")
@click.option("--daemon", is_flag=True, help="Run aapt2 once in daemon mode instead of once per file.")
@click.pass_context
@handle_exceptions
def resources(ctx, out_dir, daemon):
    """Compile and link the app resources into a resource package."""
    path = ctx.obj["path"]
    conf = config_module.load_config(path=path)
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found.")
        ctx.exit(1)
    android = config_module.android_settings(conf, path)
    if out_dir:
        android["build_dir"] = out_dir

    sdk = AndroidSdk.from_env(android.get("sdk_path"))
    runner = Aapt2Runner(sdk.aapt2(android.get("build_tools_version")))
    android_jar = sdk.platform_jar(android["target_sdk_version"])

    ensure_dir(android["build_dir"])
    if daemon:
        with runner.open_daemon() as session:
            package = resource_pipeline(session, conf, android, android_jar).run()
    else:
        package = resource_pipeline(runner, conf, android, android_jar).run()
    logger.success(f"Resources packaged: {package.path}")
