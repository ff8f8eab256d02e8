import os
import shutil

from ..cli_logger import logger

# vcpkg triplet names for the architectures it ships Windows ports for.
TRIPLET_ARCHES = {
    "x86_64": "x64",
    "x86": "x86",
    "aarch64": "arm64",
    "arm": "arm",
}


def find_vcpkg_root(environ=None):
    environ = os.environ if environ is None else environ
    root = environ.get("VCPKG_ROOT")
    if root:
        return root
    executable = shutil.which("vcpkg")
    if executable:
        return os.path.dirname(os.path.realpath(executable))
    return None


def triplet_for(arch, static=False, environ=None):
    environ = os.environ if environ is None else environ
    if environ.get("VCPKG_DEFAULT_TRIPLET"):
        return environ["VCPKG_DEFAULT_TRIPLET"]
    triplet_arch = TRIPLET_ARCHES.get(arch)
    if triplet_arch is None:
        return None
    return f"{triplet_arch}-windows-static" if static else f"{triplet_arch}-windows"


def find_package(name, arch, static=False, environ=None):
    """
    Looks up an installed vcpkg port by the name of its import library.

    Returns a dict with ``include_paths``, ``link_paths`` and ``libraries``,
    or None when vcpkg or the library is not installed. vcpkg does not
    report library versions.
    """
    root = find_vcpkg_root(environ)
    if root is None:
        logger.step_info("vcpkg root not found", indent=2)
        return None
    triplet = triplet_for(arch, static=static, environ=environ)
    if triplet is None:
        logger.step_info(f"No vcpkg triplet for architecture {arch}", indent=2)
        return None

    installed = os.path.join(root, "installed", triplet)
    lib_dir = os.path.join(installed, "lib")
    if not os.path.isfile(os.path.join(lib_dir, f"{name}.lib")):
        logger.step_info(f"vcpkg has no '{name}' for {triplet}", indent=2)
        return None

    return {
        "name": name,
        "include_paths": [os.path.join(installed, "include")],
        "link_paths": [lib_dir],
        "libraries": [name],
    }
