import io
import os
import shutil
import tempfile
import unittest
from mysqlclient_build.cli_logger import Logger, get_latest_log_file, list_log_files


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.log_dir = os.path.join(self.test_dir, "logs")
        self.stream = io.StringIO()
        self.logger = Logger(log_dir=self.log_dir, stream=self.stream)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _read_log(self):
        with open(self.logger.log_file) as f:
            return f.read()

    def test_log_dir_created_on_first_message(self):
        self.assertFalse(os.path.exists(self.log_dir))
        self.logger.info("Looking for the client library with pkg-config...")
        self.assertTrue(os.path.isfile(self.logger.log_file))
        self.assertIn("[INFO] Looking for the client library with pkg-config...", self._read_log())
        self.assertIn("Looking for the client library with pkg-config...", self.stream.getvalue())

    def test_directive_goes_to_file_only(self):
        self.logger.directive("mysqlclient:link-lib=mysqlclient")
        self.assertIn("[DIRECTIVE] mysqlclient:link-lib=mysqlclient", self._read_log())
        self.assertEqual(self.stream.getvalue(), "")

    def test_file_has_no_color_prefix(self):
        self.logger.error("Did not find a compatible version")
        self.assertIn("[ERROR] Did not find a compatible version\n", self._read_log())

    def test_exception_writes_traceback(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            self.logger.exception(type(e), e, e.__traceback__)
        contents = self._read_log()
        self.assertIn("[ERROR] An unhandled exception occurred: boom", contents)
        self.assertIn("[TRACEBACK] >> RuntimeError: boom", contents)

    def test_latest_log_file(self):
        self.assertIsNone(get_latest_log_file(self.log_dir))
        self.assertEqual(list_log_files(self.log_dir), [])
        self.logger.info("resolving")
        os.makedirs(self.log_dir, exist_ok=True)
        with open(os.path.join(self.log_dir, "notes.txt"), "w") as f:
            f.write("not a log\n")
        self.assertEqual(list_log_files(self.log_dir), [os.path.basename(self.logger.log_file)])
        self.assertEqual(get_latest_log_file(self.log_dir), self.logger.log_file)

if __name__ == "__main__":
    unittest.main()
