import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from obsidian_bridge.config import BridgeSettings, load_settings
from obsidian_bridge.constants import DEFAULT_OBSIDIAN_URL
from obsidian_bridge.errors import ConfigurationError


class LoadSettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.missing = Path(self.tmpdir.name) / "absent.yaml"

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write_config(self, text: str) -> Path:
        config_path = Path(self.tmpdir.name) / "obsidian.yaml"
        config_path.write_text(text, encoding="utf-8")
        return config_path

    def test_reads_api_key_and_default_url(self) -> None:
        settings = load_settings({"OBSIDIAN_API_KEY": "abc"}, self.missing)
        self.assertEqual(settings.api_key, "abc")
        self.assertEqual(settings.base_url, DEFAULT_OBSIDIAN_URL)
        self.assertEqual(settings.log_level, "INFO")

    def test_url_override_drops_trailing_slash(self) -> None:
        settings = load_settings(
            {"OBSIDIAN_API_KEY": "abc", "OBSIDIAN_URL": "https://127.0.0.1:27124/"},
            self.missing,
        )
        self.assertEqual(settings.base_url, "https://127.0.0.1:27124")

    def test_missing_api_key_raises(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            load_settings({}, self.missing)
        self.assertIn("OBSIDIAN_API_KEY", str(ctx.exception))

    def test_blank_api_key_raises(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_settings({"OBSIDIAN_API_KEY": "   "}, self.missing)

    def test_configuration_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            load_settings({}, self.missing)

    def test_values_from_yaml_file(self) -> None:
        config_path = self._write_config("api_key: from-file\nurl: http://vault:1234\nlog_level: debug\n")
        settings = load_settings({}, config_path)
        self.assertEqual(settings.api_key, "from-file")
        self.assertEqual(settings.base_url, "http://vault:1234")
        self.assertEqual(settings.log_level, "DEBUG")

    def test_environment_overrides_yaml_file(self) -> None:
        config_path = self._write_config("api_key: from-file\nurl: http://vault:1234\n")
        settings = load_settings({"OBSIDIAN_API_KEY": "from-env"}, config_path)
        self.assertEqual(settings.api_key, "from-env")
        self.assertEqual(settings.base_url, "http://vault:1234")

    def test_config_path_from_environment(self) -> None:
        config_path = self._write_config("api_key: pointed\n")
        settings = load_settings({"OBSIDIAN_CONFIG": str(config_path)})
        self.assertEqual(settings.api_key, "pointed")

    def test_empty_yaml_file_is_allowed(self) -> None:
        config_path = self._write_config("")
        settings = load_settings({"OBSIDIAN_API_KEY": "abc"}, config_path)
        self.assertEqual(settings.api_key, "abc")

    def test_non_mapping_yaml_raises(self) -> None:
        config_path = self._write_config("- just\n- a list\n")
        with self.assertRaises(ConfigurationError):
            load_settings({"OBSIDIAN_API_KEY": "abc"}, config_path)

    def test_invalid_yaml_raises(self) -> None:
        config_path = self._write_config("api_key: [unclosed\n")
        with self.assertRaises(ConfigurationError):
            load_settings({"OBSIDIAN_API_KEY": "abc"}, config_path)

    def test_unknown_log_level_raises(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            load_settings({"OBSIDIAN_API_KEY": "abc", "OBSIDIAN_LOG_LEVEL": "verbose"}, self.missing)
        self.assertIn("VERBOSE", str(ctx.exception))

    def test_unknown_log_level_in_yaml_raises(self) -> None:
        config_path = self._write_config("api_key: abc\nlog_level: chatty\n")
        with self.assertRaises(ConfigurationError):
            load_settings({}, config_path)

    def test_log_level_names_are_case_insensitive(self) -> None:
        settings = load_settings({"OBSIDIAN_API_KEY": "abc", "OBSIDIAN_LOG_LEVEL": "warning"}, self.missing)
        self.assertEqual(settings.log_level, "WARNING")

    def test_non_string_value_raises(self) -> None:
        config_path = self._write_config("api_key: 12345\n")
        with self.assertRaises(ConfigurationError):
            load_settings({}, config_path)


class BridgeSettingsTests(unittest.TestCase):
    def test_repr_hides_api_key(self) -> None:
        settings = BridgeSettings(api_key="top-secret")
        self.assertNotIn("top-secret", repr(settings))

    def test_payload_masks_api_key(self) -> None:
        payload = BridgeSettings(api_key="top-secret").as_payload()
        self.assertEqual(payload["api_key"], "***")
        self.assertEqual(payload["base_url"], DEFAULT_OBSIDIAN_URL)

    def test_settings_are_immutable(self) -> None:
        settings = BridgeSettings(api_key="abc")
        with self.assertRaises(AttributeError):
            settings.api_key = "other"  # type: ignore[misc]
