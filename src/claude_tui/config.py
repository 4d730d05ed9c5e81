"""claude-tui configuration management.

Handles settings stored in ~/.claude-tui/config.json. The location can be
overridden with the CLAUDE_TUI_CONFIG environment variable.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


# Default configuration values
DEFAULT_SCAN_DIRS = ["Documents/app", "Documents/playground"]
DEFAULT_DOCS_DIR = "Library/Mobile Documents/iCloud~md~obsidian/Documents/NV/Personal/App"
DEFAULT_VAULT_NAME = "NV"
DEFAULT_VAULT_SUBPATH = "Personal/App"
DEFAULT_RESERVED_NAME = "claude-tui"
DEFAULT_ASSISTANT_COMMAND = "claude"
DEFAULT_ASSISTANT_ARGS = ["--continue"]
DEFAULT_THEME = "textual-dark"

CONFIG_ENV_VAR = "CLAUDE_TUI_CONFIG"


def default_opener() -> str:
    """Platform command that opens paths and URIs with their default handler."""
    return "open" if sys.platform == "darwin" else "xdg-open"


def resolve_home() -> Optional[Path]:
    """Return the user's home directory, or None if it cannot be determined."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        logger.debug("Home directory could not be resolved")
        return None


@dataclass
class ClaudeTuiConfig:
    """claude-tui application configuration."""

    # Discovery
    scan_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_SCAN_DIRS))
    reserved_name: str = DEFAULT_RESERVED_NAME

    # Obsidian document store
    docs_dir: str = DEFAULT_DOCS_DIR
    vault_name: str = DEFAULT_VAULT_NAME
    vault_subpath: str = DEFAULT_VAULT_SUBPATH

    # External commands
    assistant_command: str = DEFAULT_ASSISTANT_COMMAND
    assistant_args: list[str] = field(default_factory=lambda: list(DEFAULT_ASSISTANT_ARGS))
    opener_command: str = field(default_factory=default_opener)

    # Appearance
    theme: str = DEFAULT_THEME

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the config file."""
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        home = resolve_home() or Path(".")
        return home / ".claude-tui" / "config.json"

    @classmethod
    def load(cls) -> "ClaudeTuiConfig":
        """Load configuration from file, or return defaults if not found."""
        config_path = cls.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                # Only use known fields to avoid issues with old config versions
                known_fields = {f.name for f in cls.__dataclass_fields__.values()}
                filtered_data = {k: v for k, v in data.items() if k in known_fields}
                return cls(**cls._valid_fields(filtered_data, config_path))
            except (OSError, json.JSONDecodeError, TypeError, ValueError, AttributeError) as e:
                # Invalid config, return defaults
                logger.warning("Ignoring invalid config %s: %s", config_path, e)

        return cls()

    @classmethod
    def _valid_fields(cls, data: dict, config_path: Path) -> dict:
        """Drop values whose type differs from the field default."""
        defaults = asdict(cls())
        valid = {}
        for key, value in data.items():
            default = defaults[key]
            if isinstance(default, list):
                ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
            else:
                ok = isinstance(value, type(default))
            if ok:
                valid[key] = value
            else:
                logger.warning(
                    "Ignoring %s in %s: expected %s, got %r",
                    key, config_path, type(default).__name__, value,
                )
        return valid

    def save(self) -> Path:
        """Save configuration to file."""
        config_path = self.get_config_path()

        # Ensure directory exists
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)
        return config_path

    def root_paths(self, home: Optional[Path] = None) -> list[Path]:
        """Resolve scan_dirs against the home directory.

        Absolute entries are used as-is; relative ones are skipped when the
        home directory is unknown.
        """
        if home is None:
            home = resolve_home()
        roots = []
        for entry in self.scan_dirs:
            path = Path(entry).expanduser()
            if path.is_absolute():
                roots.append(path)
            elif home is not None:
                roots.append(home / path)
        return roots

    def docs_path(self, home: Optional[Path] = None) -> Optional[Path]:
        """Absolute path of the document store, or None if home is unknown."""
        path = Path(self.docs_dir).expanduser()
        if path.is_absolute():
            return path
        if home is None:
            home = resolve_home()
        return home / path if home is not None else None


AVAILABLE_THEMES = [
    ("textual-dark", "Textual Dark"),
    ("textual-light", "Textual Light"),
    ("nord", "Nord"),
    ("gruvbox", "Gruvbox"),
    ("catppuccin-mocha", "Catppuccin Mocha"),
    ("dracula", "Dracula"),
    ("tokyo-night", "Tokyo Night"),
    ("monokai", "Monokai"),
    ("solarized-light", "Solarized Light"),
]
