import click
import json
from .. import config as config_module
from ..builder import resolve_build
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..target import TargetPlatform

@click.command()
@click.pass_context
@click.option("--out-dir", default=None, help="Directory that receives bindings.py and the directive manifest.")
@click.option("--generate/--no-generate", default=None, help="Generate bindings from the client headers.")
@click.option("--bundled/--no-bundled", default=None, help="Configure the bundled client library.")
@click.option("--target", "triple", default=None, help="Target name used for per-target variables.")
@click.option("--pointer-width", type=int, default=None, help="Target pointer width in bits.")
@click.option("--arch", default=None, help="Target CPU architecture.")
@click.option("--windows/--no-windows", "is_windows", default=None, help="Whether the target is Windows.")
@click.option("--format", "output_format", type=click.Choice(["lines", "json"]), default="lines",
              help="How to print the build directives.")
@handle_exceptions
def resolve(ctx, out_dir, generate, bundled, triple, pointer_width, arch, is_windows, output_format):
    """Find libmysqlclient and put matching bindings into the build directory."""
    path = ctx.obj["path"]
    conf = config_module.load_config(path=path)
    settings = config_module.build_settings(
        conf, path=path, out_dir=out_dir, generate=generate, bundled=bundled,
    )
    target = TargetPlatform.detect(
        triple=triple, pointer_width=pointer_width, arch=arch, is_windows=is_windows,
    )

    directives = resolve_build(settings, target)
    manifest = directives.write_manifest(settings["out_dir"])
    logger.success(f"Wrote build directives to {manifest}")

    if output_format == "json":
        click.echo(json.dumps(directives.to_dict(), indent=4))
    else:
        for line in directives.to_lines():
            click.echo(line)
