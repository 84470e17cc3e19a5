"""User configuration: defaults, packet templates, UI settings and shortcuts."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CONFIG_DIR_NAME = ".packemon"
CONFIG_FILE_NAME = "config.json"


class ConfigError(Exception):
    """The configuration could not be located, read, parsed or written."""


class TemplateNotFoundError(LookupError):
    """No packet template is stored under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"template not found: {name}")
        self.name = name


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key!r} must be an object, got {type(value).__name__}")
    return value


@dataclass
class PacketTemplate:
    """A named set of layer settings for building a packet."""

    description: str = ""
    layers: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "layers": dict(self.layers)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PacketTemplate:
        if not isinstance(data, dict):
            raise ConfigError(f"template must be an object, got {type(data).__name__}")
        return cls(
            description=data.get("description") or "",
            layers=_section(data, "layers"),
        )


@dataclass
class UIConfig:
    """Look and behaviour of the user interface."""

    theme: str = ""
    show_statistics: bool = False
    max_packet_history: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "theme": self.theme,
            "showStatistics": self.show_statistics,
            "maxPacketHistory": self.max_packet_history,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UIConfig:
        return cls(
            theme=data.get("theme") or "",
            show_statistics=bool(data.get("showStatistics") or False),
            max_packet_history=int(data.get("maxPacketHistory") or 0),
        )


@dataclass
class KeyboardShortcutConfig:
    """Key bindings for common actions and for switching layers."""

    send_packet: str = ""
    clear_history: str = ""
    switch_to_layer: dict[str, str] = field(default_factory=dict)
    save_template: str = ""
    load_template: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "sendPacket": self.send_packet,
            "clearHistory": self.clear_history,
            "switchToLayer": dict(sorted(self.switch_to_layer.items())),
            "saveTemplate": self.save_template,
            "loadTemplate": self.load_template,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KeyboardShortcutConfig:
        return cls(
            send_packet=data.get("sendPacket") or "",
            clear_history=data.get("clearHistory") or "",
            switch_to_layer=dict(_section(data, "switchToLayer")),
            save_template=data.get("saveTemplate") or "",
            load_template=data.get("loadTemplate") or "",
        )


@dataclass
class Config:
    """The whole configuration, stored as JSON in ``config_dir``."""

    default_interface: str = ""
    templates: dict[str, PacketTemplate] = field(default_factory=dict)
    ui: UIConfig = field(default_factory=UIConfig)
    keyboard_shortcuts: KeyboardShortcutConfig = field(default_factory=KeyboardShortcutConfig)
    config_dir: Path | None = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "defaultInterface": self.default_interface,
            "templates": {
                name: template.to_dict() for name, template in sorted(self.templates.items())
            },
            "ui": self.ui.to_dict(),
            "keyboardShortcuts": self.keyboard_shortcuts.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], config_dir: str | Path | None = None) -> Config:
        if not isinstance(data, dict):
            raise ConfigError(f"configuration must be an object, got {type(data).__name__}")
        return cls(
            default_interface=data.get("defaultInterface") or "",
            templates={
                name: PacketTemplate.from_dict(value)
                for name, value in _section(data, "templates").items()
            },
            ui=UIConfig.from_dict(_section(data, "ui")),
            keyboard_shortcuts=KeyboardShortcutConfig.from_dict(
                _section(data, "keyboardShortcuts")
            ),
            config_dir=Path(config_dir) if config_dir is not None else None,
        )

    def save(self) -> None:
        """Write the configuration to ``config.json`` in its directory."""
        directory = self.config_dir if self.config_dir is not None else get_config_dir()
        path = Path(directory) / CONFIG_FILE_NAME
        text = json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to write config file: {exc}") from exc

    def save_template(self, name: str, template: PacketTemplate) -> None:
        """Store ``template`` under ``name`` and save the configuration."""
        self.templates[name] = template
        self.save()

    def load_template(self, name: str) -> PacketTemplate:
        try:
            return self.templates[name]
        except KeyError:
            raise TemplateNotFoundError(name) from None

    def list_templates(self) -> list[str]:
        return list(self.templates)

    def delete_template(self, name: str) -> None:
        """Remove the template ``name`` and save the configuration."""
        if name not in self.templates:
            raise TemplateNotFoundError(name)
        del self.templates[name]
        self.save()

    def shortcut_help(self) -> str:
        """Human-readable list of the keyboard shortcuts."""
        shortcuts = self.keyboard_shortcuts
        lines = [
            "Keyboard Shortcuts:",
            f"  {shortcuts.send_packet}: Send packet",
            f"  {shortcuts.clear_history}: Clear history",
            f"  {shortcuts.save_template}: Save template",
            f"  {shortcuts.load_template}: Load template",
            "",
            "Layer Shortcuts:",
        ]
        lines.extend(
            f"  {shortcut}: Switch to {layer}"
            for layer, shortcut in shortcuts.switch_to_layer.items()
        )
        return "\n".join(lines) + "\n"


def default_config(config_dir: str | Path | None = None) -> Config:
    """The configuration used when none has been saved yet."""
    return Config(
        default_interface="eth0",
        templates={},
        ui=UIConfig(theme="dark", show_statistics=True, max_packet_history=1000),
        keyboard_shortcuts=KeyboardShortcutConfig(
            send_packet="Ctrl+S",
            clear_history="Ctrl+L",
            switch_to_layer={
                "Ethernet": "Alt+1",
                "IPv4": "Alt+2",
                "IPv6": "Alt+3",
                "TCP": "Alt+4",
                "UDP": "Alt+5",
                "ICMP": "Alt+6",
                "ICMPv6": "Alt+7",
                "DNS": "Alt+8",
                "HTTP": "Alt+9",
            },
            save_template="Ctrl+T",
            load_template="Ctrl+O",
        ),
        config_dir=Path(config_dir) if config_dir is not None else None,
    )


def get_config_dir(home: str | Path | None = None) -> Path:
    """The ``.packemon`` directory under ``home``, created if missing."""
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as exc:
            raise ConfigError(f"failed to get user home directory: {exc}") from exc
    config_dir = Path(home) / CONFIG_DIR_NAME
    if not config_dir.exists():
        try:
            config_dir.mkdir(mode=0o755)
        except OSError as exc:
            raise ConfigError(f"failed to create config directory: {exc}") from exc
    return config_dir


def load_config(config_dir: str | Path | None = None) -> Config:
    """Read the saved configuration, writing the defaults first if none exists."""
    directory = Path(config_dir) if config_dir is not None else get_config_dir()
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        config = default_config(directory)
        try:
            config.save()
        except ConfigError as exc:
            raise ConfigError(f"failed to create default config: {exc}") from exc
        return config
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"failed to parse config file: {exc}") from exc
    return Config.from_dict(data, directory)