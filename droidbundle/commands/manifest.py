import click
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..manifest import manifest_from_config
from ..steps import GenAndroidManifest
from ..utils.file_manager import ensure_dir


@click.command()
@click.option("--out", "-o", "out_dir", default=None, help="Output directory. Defaults to the build directory.")
@click.pass_context
@handle_exceptions
def manifest(ctx, out_dir):
    """Generate AndroidManifest.xml from droidbundle.toml."""
    path = ctx.obj["path"]
    conf = config_module.load_config(path=path)
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found.")
        ctx.exit(1)
    android = config_module.android_settings(conf, path)
    out_dir = ensure_dir(out_dir or android["build_dir"])
    GenAndroidManifest(out_dir, manifest_from_config(conf)).run()
