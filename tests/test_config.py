import json

import pytest

from packemon.config import (
    Config,
    ConfigError,
    KeyboardShortcutConfig,
    PacketTemplate,
    TemplateNotFoundError,
    UIConfig,
    default_config,
    get_config_dir,
    load_config,
)


def test_default_config_values(tmp_path):
    config = default_config(tmp_path)
    assert config.default_interface == "eth0"
    assert config.ui.theme == "dark"
    assert config.ui.show_statistics is True
    assert config.ui.max_packet_history == 1000
    assert config.keyboard_shortcuts.send_packet == "Ctrl+S"
    assert config.keyboard_shortcuts.switch_to_layer["Ethernet"] == "Alt+1"
    assert config.keyboard_shortcuts.switch_to_layer["HTTP"] == "Alt+9"
    assert config.templates == {}


def test_get_config_dir_creates_directory(tmp_path):
    directory = get_config_dir(tmp_path)
    assert directory == tmp_path / ".packemon"
    assert directory.is_dir()
    assert get_config_dir(tmp_path) == directory


def test_load_config_writes_defaults_when_missing(tmp_path):
    config = load_config(tmp_path)
    assert config == default_config()
    saved = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
    assert saved["defaultInterface"] == "eth0"
    assert saved["ui"]["maxPacketHistory"] == 1000


def test_save_and_load_round_trip(tmp_path):
    config = default_config(tmp_path)
    config.default_interface = "wlan0"
    config.ui.theme = "light"
    config.save()
    loaded = load_config(tmp_path)
    assert loaded == config
    assert loaded.default_interface == "wlan0"


def test_to_dict_uses_json_keys():
    data = default_config().to_dict()
    assert set(data) == {"defaultInterface", "templates", "ui", "keyboardShortcuts"}
    assert set(data["ui"]) == {"theme", "showStatistics", "maxPacketHistory"}
    assert data["keyboardShortcuts"]["loadTemplate"] == "Ctrl+O"


def test_from_dict_missing_fields_are_empty():
    config = Config.from_dict({})
    assert config.default_interface == ""
    assert config.ui == UIConfig()
    assert config.keyboard_shortcuts == KeyboardShortcutConfig()
    assert config.templates == {}


def test_from_dict_round_trip():
    original = default_config()
    original.templates["ping"] = PacketTemplate(description="echo", layers={"ICMP": {"type": 8}})
    assert Config.from_dict(original.to_dict()) == original


def test_invalid_json_raises(tmp_path):
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_object_json_raises(tmp_path):
    (tmp_path / "config.json").write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_save_template_persists(tmp_path):
    config = default_config(tmp_path)
    template = PacketTemplate(description="arp request", layers={"Ethernet": {"type": "0x0806"}})
    config.save_template("arp", template)
    assert config.load_template("arp") == template
    assert load_config(tmp_path).load_template("arp") == template


def test_list_templates(tmp_path):
    config = default_config(tmp_path)
    config.save_template("a", PacketTemplate(description="first"))
    config.save_template("b", PacketTemplate(description="second"))
    assert sorted(config.list_templates()) == ["a", "b"]


def test_load_missing_template_raises(tmp_path):
    config = default_config(tmp_path)
    with pytest.raises(TemplateNotFoundError, match="template not found: nope"):
        config.load_template("nope")


def test_delete_template(tmp_path):
    config = default_config(tmp_path)
    config.save_template("tmp", PacketTemplate(description="x"))
    config.delete_template("tmp")
    assert config.list_templates() == []
    assert load_config(tmp_path).list_templates() == []


def test_delete_missing_template_raises(tmp_path):
    config = default_config(tmp_path)
    with pytest.raises(TemplateNotFoundError):
        config.delete_template("missing")


def test_save_to_missing_directory_raises(tmp_path):
    config = default_config(tmp_path / "absent")
    with pytest.raises(ConfigError):
        config.save()


def test_shortcut_help():
    help_text = default_config().shortcut_help()
    lines = help_text.splitlines()
    assert lines[0] == "Keyboard Shortcuts:"
    assert "  Ctrl+S: Send packet" in lines
    assert "  Ctrl+L: Clear history" in lines
    assert "  Ctrl+T: Save template" in lines
    assert "  Ctrl+O: Load template" in lines
    assert "Layer Shortcuts:" in lines
    assert "  Alt+1: Switch to Ethernet" in lines
    assert "  Alt+9: Switch to HTTP" in lines
    assert help_text.endswith("\n")