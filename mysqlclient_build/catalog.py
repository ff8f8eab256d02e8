from enum import Enum


class MysqlVersion(Enum):
    """Client library ABI versions that have bindings.

    Each member carries its configuration tag, the identifier used in the
    name of its precompiled bindings file, and a display name.
    """

    MYSQL_5 = ("mysql_5_7_x", "5_7_42", "MySQL 5.7.x")
    MYSQL_80 = ("mysql_8_0_x", "8_0_39", "MySQL 8.0.x")
    MYSQL_81 = ("mysql_8_1_x", "8_1_0", "MySQL 8.1.x")
    MYSQL_82 = ("mysql_8_2_x", "8_2_0", "MySQL 8.2.x")
    MYSQL_83 = ("mysql_8_3_x", "8_3_0", "MySQL 8.3.x")
    MYSQL_84 = ("mysql_8_4_x", "8_4_3", "MySQL 8.4.x")
    MYSQL_90 = ("mysql_9_0_x", "9_0_1", "MySQL 9.0.x")
    MYSQL_91 = ("mysql_9_1_x", "9_1_0", "MySQL 9.1.x")
    MYSQL_92 = ("mysql_9_2_x", "9_2_0", "MySQL 9.2.x")
    MYSQL_93 = ("mysql_9_3_x", "9_3_0", "MySQL 9.3.x")
    MARIADB_31 = ("mariadb_3_1_x", "mariadb_3_1_27", "MariaDB 3.1.x")
    MARIADB_33 = ("mariadb_3_3_x", "mariadb_3_3_14", "MariaDB 3.3.x")
    MARIADB_34 = ("mariadb_3_4_x", "mariadb_3_4_4", "MariaDB 3.4.x")

    def __init__(self, cfg, binding_version, display_version):
        self.cfg = cfg
        self.binding_version = binding_version
        self.display_version = display_version


def all_versions():
    """Return every supported version, in catalog order."""
    return tuple(MysqlVersion)


def display_names():
    return [version.display_version for version in MysqlVersion]
