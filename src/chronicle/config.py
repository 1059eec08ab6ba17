"""Configuration management for chronicle."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import DEFAULT_CONTENT_ID, DIFF_CONTEXT_LINES, LOCK_TIMEOUT
from .core.identifiers import validate_content_id
from .errors import InvalidArgumentError

CONFIG_FILE = "config.toml"


class ProjectConfig(BaseModel):
    """Project-level configuration."""

    name: str = "unnamed-project"


class ContentConfig(BaseModel):
    """Which content id commands operate on by default."""

    default_id: str = DEFAULT_CONTENT_ID

    @field_validator("default_id")
    @classmethod
    def check_default_id(cls, value: str) -> str:
        try:
            return validate_content_id(value)
        except InvalidArgumentError as e:
            raise ValueError(str(e)) from None


class StoreConfig(BaseModel):
    """Configuration for the JSON file store."""

    path: str = Field(default="content", description="Document directory, relative to .chronicle")
    lock_timeout: float = Field(default=LOCK_TIMEOUT, ge=0, description="Seconds to wait for a lock")


class DiffConfig(BaseModel):
    """Configuration for patch rendering."""

    context_lines: int = Field(default=DIFF_CONTEXT_LINES, ge=0)


class PublishConfig(BaseModel):
    """Configuration for publishing."""

    default_publisher: str = "anonymous"


class ChronicleConfig(BaseModel):
    """Root configuration for chronicle."""

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
    publish: PublishConfig = Field(default_factory=PublishConfig)

    def store_root(self, chronicle_dir: Path) -> Path:
        """Resolve the document directory of the file store."""
        path = Path(self.store.path)
        return path if path.is_absolute() else chronicle_dir / path


def load_config(chronicle_dir: Path) -> ChronicleConfig:
    """Load config from .chronicle/config.toml.

    Args:
        chronicle_dir: Path to .chronicle directory

    Returns:
        Loaded configuration, or defaults if config.toml doesn't exist

    Raises:
        InvalidArgumentError: If the file is not valid TOML or has invalid values
    """
    config_path = chronicle_dir / CONFIG_FILE
    if not config_path.exists():
        return ChronicleConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return ChronicleConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise InvalidArgumentError(f"Invalid config {config_path}: {e}") from e


def write_config_template(chronicle_dir: Path, project_name: str = "your-project") -> Path:
    """Write default config.toml template.

    Args:
        chronicle_dir: Path to .chronicle directory
        project_name: Name written into the [project] table

    Returns:
        Path to the written config file
    """
    config_path = chronicle_dir / CONFIG_FILE
    template = {
        "project": {"name": project_name},
        "content": {"default_id": DEFAULT_CONTENT_ID},
        "store": {"path": "content", "lock_timeout": LOCK_TIMEOUT},
        "diff": {"context_lines": DIFF_CONTEXT_LINES},
        "publish": {"default_publisher": "anonymous"},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
