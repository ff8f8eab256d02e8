import os
import shutil

from .catalog import all_versions, display_names
from .cli_logger import logger
from .errors import BindingCopyError, UnsupportedVersion
from .resolver import resolve_version

BINDINGS_FILE = "bindings.py"


def binding_filename(version, target):
    """Name of the precompiled bindings file for a version on a target."""
    return f"bindings_{version.binding_version}_{target.arch_tag}_{target.os_tag}.py"


def binding_path(version, target, bindings_dir):
    return os.path.join(bindings_dir, binding_filename(version, target))


def output_path(out_dir):
    return os.path.join(out_dir, BINDINGS_FILE)


def register_version_cfgs(directives):
    """Declares every version flag so code gated on any of them is valid."""
    for version in all_versions():
        directives.check_cfg(version.cfg)


def select_binding(version, target, bindings_dir, out_dir):
    """Copies the precompiled bindings for ``version`` into ``out_dir``."""
    source = binding_path(version, target, bindings_dir)
    destination = output_path(out_dir)
    logger.info(f"Using bindings {os.path.basename(source)}")
    try:
        os.makedirs(out_dir, exist_ok=True)
        shutil.copyfile(source, destination)
    except OSError as e:
        raise BindingCopyError(source, destination, e) from e
    logger.success(f"Copied bindings to {destination}")
    return destination


def configure_version(version_str, target, directives, bindings_dir, out_dir, generate=False):
    """
    Resolves a raw version string and configures the build for it.

    Registers every version flag, activates the resolved one and, unless the
    bindings are generated from headers, copies the matching precompiled
    bindings. Raises UnsupportedVersion when the string maps to no version.
    """
    register_version_cfgs(directives)
    version = resolve_version(version_str)
    if version is None:
        raise UnsupportedVersion(version_str, display_names())

    logger.info(f"Resolved `{version_str}` to {version.display_version}")
    directives.cfg(version.cfg)
    if generate:
        return version
    select_binding(version, target, bindings_dir, out_dir)
    return version
