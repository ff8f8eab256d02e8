import re

from packaging.specifiers import SpecifierSet
from packaging.version import Version, InvalidVersion

from .catalog import MysqlVersion

SEMVER_REGEX = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

MARIADB_31_RANGE = ">=10.2.0, <10.6.0"
MARIADB_33_RANGE = ">=10.6.0, <11.4.0"


def match_semver(version_req, version):
    """
    Checks whether a semantic version satisfies a version range.

    A ``version`` that is not a valid semantic version never matches, and
    neither does a pre-release such as ``10.4.5-1`` (packaging would read
    that one as a post-release). The range is a trusted literal, so an
    invalid ``version_req`` raises ``packaging.specifiers.InvalidSpecifier``.
    """
    req = SpecifierSet(version_req)
    match = SEMVER_REGEX.match(version)
    if not match or match.group(4) is not None:
        return False
    try:
        ver = Version(version)
    except InvalidVersion:
        return False
    return req.contains(ver)


def _soname(version, major):
    return version == major or version.startswith(f"{major}.")


def resolve_version(version):
    """
    Maps a raw version string to the supported version it represents.

    Ubuntu/Debian packages report the SONAME of libmysqlclient instead of the
    MySQL release:

    * libmysqlclient20 -> 5.7.x
    * libmysqlclient21 -> 8.0.x
    * libmysqlclient22 -> 8.2.x
    * libmysqlclient23 -> 8.3.0
    * libmysqlclient24 -> 8.4.0 (24.0.x) or 9.2 (24.1.x)

    On Linux the SONAME is a full triple like 21.3.2, on macOS only the major.

    ``mysql_config`` of a MariaDB server reports the server release, which
    maps to the bundled libmariadb client:

    * 10.2.x - 10.5.x -> 3.1.x (3.0 is compatible with 3.1)
    * 10.6.x - 11.3.x -> 3.3.x (3.2 is compatible with 3.3)
    * 11.4.x and later -> 3.4.x

    Checks run in order and the first match wins. Returns None when nothing
    matches.
    """
    if version.startswith("5.7") or _soname(version, "20"):
        return MysqlVersion.MYSQL_5
    elif version.startswith("8.0") or _soname(version, "21"):
        return MysqlVersion.MYSQL_80
    elif version.startswith("8.1"):
        return MysqlVersion.MYSQL_81
    elif version.startswith("8.2") or _soname(version, "22"):
        return MysqlVersion.MYSQL_82
    elif version.startswith("8.3") or _soname(version, "23"):
        return MysqlVersion.MYSQL_83
    elif version.startswith("8.4") or version.startswith("24.0") or version == "24":
        return MysqlVersion.MYSQL_84
    elif version.startswith("9.0"):
        return MysqlVersion.MYSQL_90
    elif version.startswith("9.1"):
        return MysqlVersion.MYSQL_91
    elif version.startswith("9.2") or version.startswith("24.1"):
        return MysqlVersion.MYSQL_92
    elif version.startswith("9.3"):
        return MysqlVersion.MYSQL_93
    elif version.startswith("3.1") or match_semver(MARIADB_31_RANGE, version):
        return MysqlVersion.MARIADB_31
    elif (version.startswith("3.2")
          or version.startswith("3.3")
          or match_semver(MARIADB_33_RANGE, version)):
        return MysqlVersion.MARIADB_33
    elif version.startswith("3.4") or version.startswith("11"):
        return MysqlVersion.MARIADB_34
    return None
