import unittest
from mysqlclient_build.environment import EnvOverrides

class TestEnvOverrides(unittest.TestCase):

    def test_target_variable_wins_over_generic(self):
        env = EnvOverrides("LINUX_X86_64", {
            "MYSQLCLIENT_LIB_DIR": "/generic/lib",
            "MYSQLCLIENT_LIB_DIR_LINUX_X86_64": "/target/lib",
            "MYSQLCLIENT_VERSION": "8.0.1",
            "MYSQLCLIENT_VERSION_LINUX_X86_64": "9.3.0",
        })
        self.assertEqual(env.lib_dir, "/target/lib")
        self.assertEqual(env.version, "9.3.0")

    def test_generic_variable_used_without_target_variable(self):
        env = EnvOverrides("LINUX_X86_64", {"MYSQLCLIENT_INCLUDE_DIR": "/usr/include/mysql"})
        self.assertEqual(env.include_dir, "/usr/include/mysql")

    def test_other_targets_are_ignored(self):
        env = EnvOverrides("LINUX_X86_64", {"MYSQLCLIENT_VERSION_WIN_AMD64": "8.0.1"})
        self.assertIsNone(env.version)

    def test_libname_default(self):
        self.assertEqual(EnvOverrides("X", {}).libname, "mysqlclient")
        self.assertEqual(EnvOverrides("X", {"MYSQLCLIENT_LIBNAME_X": "mariadb"}).libname, "mariadb")

    def test_static_is_presence(self):
        self.assertFalse(EnvOverrides("X", {}).static)
        self.assertTrue(EnvOverrides("X", {"MYSQLCLIENT_STATIC": ""}).static)
        self.assertTrue(EnvOverrides("X", {"MYSQLCLIENT_STATIC_X": "1"}).static)

    def test_watched_variables(self):
        watched = EnvOverrides("X", {}).watched_variables()
        self.assertEqual(len(watched), 12)
        self.assertIn("MYSQLCLIENT_VERSION", watched)
        self.assertIn("MYSQLCLIENT_VERSION_X", watched)
        self.assertIn("MYSQLCLIENT_LIB_X", watched)
        self.assertIn("MYSQLCLIENT_STATIC", watched)

if __name__ == "__main__":
    unittest.main()
