from dataclasses import dataclass, field
from typing import Optional

from .cli_logger import logger
from .errors import DiscoveryExhausted
from .utils import pkg_config, vcpkg
from .utils.mysql_config import mysql_config_variable, parse_libs

# Name of the MySQL client library to probe using pkg-config.
PKG_CONFIG_MYSQL_LIB = "mysqlclient"
# Name of the MariaDB client library to probe using pkg-config.
PKG_CONFIG_MARIADB_LIB = "libmariadb"
# Name of the MySQL client library to find using vcpkg.
VCPKG_MYSQL_LIB = "libmysql"
# Name of the MariaDB client library to find using vcpkg.
VCPKG_MARIADB_LIB = "libmariadb"


@dataclass
class DiscoveryResult:
    """What one probe learned about the installed client library."""

    source: str
    version: Optional[str] = None
    include_paths: list = field(default_factory=list)
    # (kind, value) pairs in the order the probe found them.
    link_directives: list = field(default_factory=list)
    static: bool = False
    rerun_if_changed: list = field(default_factory=list)

    @property
    def link_paths(self):
        return [value for kind, value in self.link_directives if kind == "link-search"]

    @property
    def libraries(self):
        return [value for kind, value in self.link_directives if kind == "link-lib"]

    def apply(self, directives):
        for path in self.include_paths:
            directives.include_dir(path)
        for kind, value in self.link_directives:
            if kind == "link-search":
                directives.link_search(value)
            elif kind == "link-lib":
                directives.link_lib(value, static=self.static)
            else:
                directives.link_arg(value)
        for path in self.rerun_if_changed:
            directives.rerun_if_changed(path)


def _link_directives(link_paths, libraries):
    return [("link-search", path) for path in link_paths] + [("link-lib", lib) for lib in libraries]


class PkgConfigProbe:
    name = "pkg-config"
    package_names = (PKG_CONFIG_MYSQL_LIB, PKG_CONFIG_MARIADB_LIB)

    def find(self):
        for package_name in self.package_names:
            lib = pkg_config.probe_library(package_name)
            if lib:
                return lib
        return None

    def attempt(self):
        lib = self.find()
        if lib is None:
            return None
        result = DiscoveryResult(
            source=f"{self.name} ({lib['name']})",
            version=lib["version"],
            include_paths=lib["include_paths"],
            link_directives=_link_directives(lib["link_paths"], lib["libraries"]),
        )
        # rebuild if users upgraded the library on their machine
        result.rerun_if_changed = result.link_paths
        return result


class VcpkgProbe:
    """
    Finds the library in a vcpkg installation (Windows targets only).

    vcpkg cannot tell which version it installed, so a hit only counts when
    MYSQLCLIENT_VERSION is set as well.
    """

    name = "vcpkg"
    package_names = (VCPKG_MYSQL_LIB, VCPKG_MARIADB_LIB)

    def __init__(self, env, target):
        self.env = env
        self.target = target

    def find(self):
        if not self.target.is_windows:
            return None
        for package_name in self.package_names:
            lib = vcpkg.find_package(package_name, self.target.arch, static=self.env.static)
            if lib:
                return lib
        return None

    def attempt(self):
        lib = self.find()
        if lib is None:
            return None
        version = self.env.version
        if version is None:
            logger.warning(f"Found {lib['name']} through vcpkg, but MYSQLCLIENT_VERSION is not set.")
            return None
        return DiscoveryResult(
            source=f"{self.name} ({lib['name']})",
            version=version,
            include_paths=lib["include_paths"],
            link_directives=_link_directives(lib["link_paths"], lib["libraries"]),
        )


class LibDirProbe:
    name = "MYSQLCLIENT_LIB_DIR"

    def __init__(self, env):
        self.env = env

    def attempt(self):
        path = self.env.lib_dir
        if path is None:
            return None
        version = self.env.version
        if version is None:
            logger.warning("MYSQLCLIENT_LIB_DIR is set, but MYSQLCLIENT_VERSION is not.")
            return None
        return DiscoveryResult(
            source=self.name,
            version=version,
            link_directives=_link_directives([path], [self.env.libname]),
            static=self.env.static,
        )


class MysqlConfigProbe:
    name = "mysql_config"

    def __init__(self, env):
        self.env = env

    def attempt(self):
        output = mysql_config_variable("--libs")
        if output is None:
            return None
        link_directives = parse_libs(output)
        version = mysql_config_variable("--version")
        if version is None:
            return None
        return DiscoveryResult(
            source=self.name,
            version=version,
            link_directives=link_directives,
            static=self.env.static,
        )


def default_probes(env, target):
    """The probes in the order they are tried: cheapest and most reliable first."""
    return [
        PkgConfigProbe(),
        VcpkgProbe(env, target),
        LibDirProbe(env),
        MysqlConfigProbe(env),
    ]


class DiscoveryChain:
    def __init__(self, probes):
        self.probes = probes

    def run(self):
        """Returns the result of the first conclusive probe."""
        for probe in self.probes:
            logger.info(f"Looking for the client library with {probe.name}...")
            result = probe.attempt()
            if result is not None:
                logger.success(f"Found client library {result.version} via {result.source}")
                if result.libraries:
                    logger.step_info(f"links: {', '.join(result.libraries)}", indent=2)
                return result
            logger.step_info(f"{probe.name}: nothing found", indent=2)
        raise DiscoveryExhausted()
