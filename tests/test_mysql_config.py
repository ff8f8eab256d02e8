import unittest
from unittest.mock import patch
from mysqlclient_build.errors import MalformedToolOutput
from mysqlclient_build.utils.mysql_config import mysql_config_variable, parse_libs

class TestParseLibs(unittest.TestCase):

    def test_library_search_and_rpath(self):
        self.assertEqual(parse_libs("-lmysqlclient -L/usr/lib -R/usr/lib"), [
            ("link-lib", "mysqlclient"),
            ("link-search", "/usr/lib"),
            ("link-arg", "-Wl,-R/usr/lib"),
        ])

    def test_typical_output(self):
        parsed = parse_libs("-L/usr/lib/x86_64-linux-gnu -lmysqlclient -lzstd -lssl -lcrypto -lresolv -lm")
        self.assertEqual(parsed[0], ("link-search", "/usr/lib/x86_64-linux-gnu"))
        self.assertEqual([v for k, v in parsed if k == "link-lib"], ["mysqlclient", "zstd", "ssl", "crypto", "resolv", "m"])

    def test_unknown_token(self):
        output = "-lmysqlclient -L/usr/lib -Wfoo"
        with self.assertRaises(MalformedToolOutput) as cm:
            parse_libs(output)
        self.assertIn(output, cm.exception.format_message())
        self.assertEqual(cm.exception.output, output)

    def test_empty_output(self):
        self.assertEqual(parse_libs(""), [])

    @patch('mysqlclient_build.utils.mysql_config.tool_output', return_value="-I/usr/include/mysql")
    def test_mysql_config_variable(self, mock_tool_output):
        self.assertEqual(mysql_config_variable("--include"), "-I/usr/include/mysql")
        mock_tool_output.assert_called_once_with("mysql_config", "--include")

if __name__ == "__main__":
    unittest.main()
