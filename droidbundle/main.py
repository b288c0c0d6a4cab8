import click
from .commands import config, manifest, resources, toolchain, version


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.pass_context
def cli(ctx, path):
    """DroidBundle: build Android packages from native projects."""
    ctx.obj = {"path": path}

cli.add_command(toolchain)
cli.add_command(manifest)
cli.add_command(resources)
cli.add_command(version)
cli.add_command(config)


if __name__ == '__main__':
    cli()
