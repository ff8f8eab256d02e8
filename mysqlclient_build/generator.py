import os

from .bindings import output_path
from .cli_logger import logger
from .discovery import PkgConfigProbe, VcpkgProbe
from .errors import BindingCopyError, GenerationError
from .utils.command_executor import run_shell_command
from .utils.mysql_config import mysql_config_variable


def find_include_args(env, target):
    """
    Collects the ``-I`` arguments for the header tool.

    Tries pkg-config, MYSQLCLIENT_INCLUDE_DIR, ``mysql_config --include`` and
    vcpkg in that order and uses the first one that answers.
    """
    lib = PkgConfigProbe().find()
    if lib:
        return [f"-I{include}" for include in lib["include_paths"]]

    include_dir = env.include_dir
    if include_dir is not None:
        return [f"-I{include_dir}"]

    include = mysql_config_variable("--include")
    if include is not None:
        return include.split()

    lib = VcpkgProbe(env, target).find()
    if lib:
        return [f"-I{os.path.join(include, 'mysql')}" for include in lib["include_paths"]]
    return []


def generate_bindings(settings, env, target, directives):
    """Generates the bindings from the client headers with an external tool."""
    out_dir = settings["out_dir"]
    destination = output_path(out_dir)
    include_args = find_include_args(env, target)
    for arg in include_args:
        # regenerate whenever one of the included headers changes
        directives.rerun_if_changed(arg[2:])

    command = [
        settings["generator_command"],
        *include_args,
        f"-l{env.libname}",
        settings["header"],
        "-o",
        destination,
    ]
    logger.info(f"Generating bindings with {settings['generator_command']}...")
    try:
        os.makedirs(out_dir, exist_ok=True)
    except OSError as e:
        raise BindingCopyError(settings["header"], destination, e) from e

    _, stderr, returncode = run_shell_command(command)
    if returncode != 0:
        raise GenerationError(" ".join(command), returncode, stderr)
    if not os.path.exists(destination):
        raise BindingCopyError(settings["header"], destination, "the generator wrote no output")
    logger.success(f"Generated bindings at {destination}")
    return destination
