"""User settings for the specloader command line."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from platformdirs import user_config_path

from specloader.exceptions import SettingsValidationError
from specloader.exceptions import SettingsVersionError
from specloader.operations import LOGIN_SPEC_FILENAME

SETTINGS_VERSION = 1


@dataclass
class Settings:
    """Defaults applied when options are not given on the command line."""

    version: int = SETTINGS_VERSION
    login_filename: str = LOGIN_SPEC_FILENAME
    default_root: Path | None = None  # None means the current directory

    @classmethod
    def default_path(cls) -> Path:
        """Get default settings location using platformdirs."""
        return user_config_path("specloader") / "settings.json"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "version": self.version,
            "login_filename": self.login_filename,
            "default_root": (
                str(self.default_root) if self.default_root is not None else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        if not isinstance(data, dict):
            raise SettingsValidationError("Settings must be a JSON object")
        if "version" not in data:
            raise SettingsValidationError("Settings missing 'version' key")

        version = data["version"]
        if isinstance(version, bool) or not isinstance(version, int):
            raise SettingsValidationError(f"Settings version must be int: {version!r}")
        if version > SETTINGS_VERSION:
            raise SettingsVersionError(
                f"Settings version {version} is newer than supported version {SETTINGS_VERSION}"
            )

        login_filename = data["login_filename"]
        if not isinstance(login_filename, str) or not login_filename:
            raise SettingsValidationError(
                "Settings 'login_filename' must be a non-empty string"
            )

        default_root = data.get("default_root")
        if default_root is not None and not isinstance(default_root, str):
            raise SettingsValidationError(
                f"Settings 'default_root' must be a path string or null: {default_root!r}"
            )

        return cls(
            version=version,
            login_filename=login_filename,
            default_root=Path(default_root) if default_root is not None else None,
        )

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load settings from JSON file. Returns defaults if it doesn't exist.

        Args:
            path: Path to settings file. If None, uses default location.
        """
        if path is None:
            path = cls.default_path()

        if not path.exists():
            return cls()

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return cls.from_dict(data)
        except OSError as e:
            raise SettingsValidationError(f"Cannot read settings file {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SettingsValidationError(f"Settings file is not UTF-8 text: {e}") from e
        except json.JSONDecodeError as e:
            raise SettingsValidationError(f"Invalid JSON in settings: {e}") from e
        except KeyError as e:
            raise SettingsValidationError(
                f"Missing required field in settings: {e}"
            ) from e

    def save(self, path: Path | None = None) -> None:
        """Save settings to JSON file atomically.

        Args:
            path: Path to save settings. If None, uses default location.
        """
        if path is None:
            path = self.default_path()

        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file, then rename
        temp_path = path.with_suffix(".tmp")
        temp_path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        temp_path.replace(path)
