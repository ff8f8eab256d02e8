import unittest
from mysqlclient_build.catalog import MysqlVersion, all_versions, display_names

class TestCatalog(unittest.TestCase):

    def test_all_versions_order(self):
        versions = all_versions()
        self.assertEqual(len(versions), 13)
        self.assertEqual(versions[0], MysqlVersion.MYSQL_5)
        self.assertEqual(versions[-1], MysqlVersion.MARIADB_34)

    def test_tags_are_unique(self):
        versions = all_versions()
        self.assertEqual(len({v.cfg for v in versions}), len(versions))
        self.assertEqual(len({v.binding_version for v in versions}), len(versions))

    def test_version_attributes(self):
        self.assertEqual(MysqlVersion.MYSQL_80.cfg, "mysql_8_0_x")
        self.assertEqual(MysqlVersion.MYSQL_80.binding_version, "8_0_39")
        self.assertEqual(MysqlVersion.MYSQL_80.display_version, "MySQL 8.0.x")
        self.assertEqual(MysqlVersion.MARIADB_33.binding_version, "mariadb_3_3_14")

    def test_display_names(self):
        names = display_names()
        self.assertEqual(names[0], "MySQL 5.7.x")
        self.assertIn("MariaDB 3.4.x", names)
        self.assertEqual(len(names), len(all_versions()))

if __name__ == "__main__":
    unittest.main()
