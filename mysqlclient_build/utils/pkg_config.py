import shlex

from ..cli_logger import logger
from .command_executor import tool_output

PKG_CONFIG = "pkg-config"


def _strip_flags(output, flag):
    return [token[len(flag):] for token in shlex.split(output or "") if token.startswith(flag)]


def probe_library(name):
    """
    Queries pkg-config for a library.

    Returns a dict with ``version``, ``include_paths``, ``link_paths`` and
    ``libraries``, or None when pkg-config is missing or does not know the
    library.
    """
    version = tool_output(PKG_CONFIG, "--modversion", name)
    if not version:
        logger.step_info(f"pkg-config does not know '{name}'", indent=2)
        return None

    include_paths = _strip_flags(tool_output(PKG_CONFIG, "--cflags-only-I", name), "-I")
    link_paths = _strip_flags(tool_output(PKG_CONFIG, "--libs-only-L", name), "-L")
    libraries = _strip_flags(tool_output(PKG_CONFIG, "--libs-only-l", name), "-l")

    return {
        "name": name,
        "version": version,
        "include_paths": include_paths,
        "link_paths": link_paths,
        "libraries": libraries,
    }
