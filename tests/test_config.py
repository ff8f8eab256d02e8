import os
import shutil
import tempfile
import toml
import unittest
from click.testing import CliRunner
from mysqlclient_build import config
from mysqlclient_build.commands.config import config as config_command
import json

class TestConfig(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, config.CONFIG_FILE)
        self.sample_config = {
            "build": {
                "generate": False,
                "header": "mysql.h"
            },
        }
        config.save_config(self.sample_config, path=self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_load_config_not_found(self):
        """Test that loading a non-existent config returns an empty dict."""
        os.remove(self.config_path)
        cfg = config.load_config(path=self.test_dir)
        self.assertEqual(cfg, {})

    def test_save_and_load_config(self):
        """Test saving a config and then loading it back."""
        loaded_config = config.load_config(path=self.test_dir)
        self.assertEqual(loaded_config, self.sample_config)
        with open(self.config_path, "r") as f:
            self.assertEqual(toml.load(f), self.sample_config)

    def test_build_settings_defaults(self):
        settings = config.build_settings({}, path=self.test_dir)
        self.assertFalse(settings["bundled"])
        self.assertFalse(settings["generate"])
        self.assertEqual(settings["out_dir"], os.path.join(self.test_dir, "build"))
        self.assertEqual(settings["bindings_dir"], os.path.join(self.test_dir, "bindings"))

    def test_build_settings_overrides(self):
        conf = {"build": {"generate": True, "out_dir": "/abs/out"}}
        settings = config.build_settings(conf, path=self.test_dir, generate=False, bundled=None)
        self.assertFalse(settings["generate"])
        self.assertFalse(settings["bundled"])
        self.assertEqual(settings["out_dir"], "/abs/out")

    def test_get_nested_value(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['get', 'build.header'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), 'mysql.h')

    def test_set_boolean_value(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['set', 'build.generate', 'true'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertIs(config.load_config(path=self.test_dir)['build']['generate'], True)

    def test_unset_value(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['unset', 'build.header'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertNotIn('header', config.load_config(path=self.test_dir)['build'])

    def test_list_config(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['list'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output.strip()), self.sample_config)

    def test_view_effective_settings(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['view'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        settings = json.loads(result.output.strip())
        self.assertEqual(settings["generator_command"], "ctypesgen")

if __name__ == "__main__":
    unittest.main()
