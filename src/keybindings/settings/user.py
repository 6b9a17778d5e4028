"""User-editable settings loaded from config.yml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from keybindings.errors import SettingsError
from keybindings.utils.file import read_text_file

logger: Final = logging.getLogger(__name__)

# On-disk key for each descriptor field
_DESCRIPTOR_KEYS: Final = {"name": "name", "path": "path", "pattern": "keybindingpattern"}


class ApplicationDescriptor(BaseModel):
    """One application whose keybindings can be listed.

    The pattern must contain at least two capture groups: the first captures
    the key combination, the second the action bound to it. Compilability is
    only checked when the descriptor is used.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field("", description="Display name, also used on the command line")
    path: str = Field("", description="Config file location relative to the home directory")
    pattern: str = Field(
        "",
        alias="keybindingpattern",
        description="Regular expression capturing (binding, definition)",
    )

    @model_validator(mode="before")
    @classmethod
    def fill_missing_fields(cls, data: Any) -> Any:
        """Substitute empty strings for absent or null fields."""
        if not isinstance(data, dict):
            return data

        filled = dict(data)
        label = filled.get("name") or "<unnamed>"
        for field, key in _DESCRIPTOR_KEYS.items():
            value = filled.get(key, filled.get(field))
            if value is None:
                logger.warning("Application %s has no %r, using an empty string", label, key)
                value = ""
            elif isinstance(value, (list, dict)):
                raise ValueError(f"{key} must be a string, got {type(value).__name__}")
            elif not isinstance(value, str):
                # Plain YAML scalars such as `name: 42` are read as strings
                value = str(value)
            filled.pop(field, None)
            filled[key] = value
        return filled

    def target_path(self, home: Path) -> Path:
        """Return the absolute location of this application's config file."""
        return home / self.path


class Settings(BaseModel):
    """Ordered list of known applications, as stored in config.yml."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    applications: list[ApplicationDescriptor] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.applications)

    def __getitem__(self, index: int) -> ApplicationDescriptor:
        return self.applications[index]

    @property
    def names(self) -> list[str]:
        """Application names in settings order."""
        return [app.name for app in self.applications]

    def index_of(self, name: str) -> int | None:
        """Return the index of the first application named exactly `name`."""
        for i, app in enumerate(self.applications):
            if app.name == name:
                return i
        return None

    def to_yaml(self) -> str:
        """Serialize to the on-disk YAML layout."""
        return yaml.safe_dump(self.model_dump(by_alias=True), sort_keys=False)

    @classmethod
    def from_yaml(cls, content: str) -> Settings:
        """Parse settings from YAML text.

        An empty document yields no applications.

        Raises:
            SettingsError: If the text is not YAML or does not fit the schema
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise SettingsError(f"Error processing config file: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError(
                f"Error processing config file: expected a mapping, got {type(data).__name__}"
            )
        if data.get("applications") is None:
            data = {**data, "applications": []}

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise SettingsError(f"Error processing config file:\n{err}") from err

    @classmethod
    def load(cls, path: Path) -> Settings:
        """Load settings from a YAML file.

        Args:
            path: Path to config.yml

        Returns:
            Parsed Settings object

        Raises:
            SettingsError: If the file cannot be read or parsed
        """
        try:
            raw = read_text_file(path)
        except OSError as exc:
            raise SettingsError(f"Error reading config file: {exc}") from exc

        settings = cls.from_yaml(raw)
        logger.debug("Loaded %d application(s) from %s", len(settings), path)
        return settings


DEFAULT_APPLICATIONS: Final = (
    ApplicationDescriptor(
        name="i3",
        path=".config/i3/config",
        pattern=r"bindsym ([a-zA-Z0-9$+]+) (.*)",
    ),
    ApplicationDescriptor(
        name="vim",
        path=".vimrc",
        pattern=r"(?:map|nmap|nnoremap|tnoremap) ((?:[a-zA-Z0-9<>-]|\\p{Punct})+) (.*)",
    ),
    ApplicationDescriptor(
        name="vifm",
        path=".config/vifm/vifmrc",
        pattern=r"nnoremap ([a-zA-Z0-9<>,]+) (.*)",
    ),
)


def default_settings() -> Settings:
    """Settings written on first run."""
    return Settings(applications=list(DEFAULT_APPLICATIONS))
