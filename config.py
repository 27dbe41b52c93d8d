"""Configuration for Spendnote.

Settings live in ~/.config/spendnote.toml. A file with defaults is written
on first run so there is something to edit:

    base_dir = "/home/me/data/spendnote"

    [logging]
    level = "INFO"            # file log
    console_level = "INFO"    # CLI output
    log_dir = "/home/me/data/spendnote/logs"
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w


def _default_base_dir() -> Path:
    return Path.home() / "data" / "spendnote"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        base_dir: Root directory for everything Spendnote writes.
        log_level: Level for the dated log file.
        log_dir: Directory holding the log files.
        console_level: Level for console output.
    """

    base_dir: Path
    log_level: str
    log_dir: Path
    console_level: str = "INFO"

    @classmethod
    def default(cls) -> "Config":
        return cls.from_dict({})

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build a Config from parsed TOML, filling gaps with defaults.

        log_dir defaults to base_dir/logs, using the configured base_dir.
        """
        base_dir = Path(data.get("base_dir", _default_base_dir()))
        logging_section = data.get("logging", {})

        return cls(
            base_dir=base_dir,
            log_level=logging_section.get("level", "INFO"),
            log_dir=Path(logging_section.get("log_dir", base_dir / "logs")),
            console_level=logging_section.get("console_level", "INFO"),
        )

    def to_dict(self) -> dict:
        """Convert to the TOML layout read by from_dict."""
        return {
            "base_dir": str(self.base_dir),
            "logging": {
                "level": self.log_level,
                "console_level": self.console_level,
                "log_dir": str(self.log_dir),
            },
        }


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "spendnote.toml"


def load_config() -> Config:
    """Load configuration, writing a default file if none exists.

    Returns:
        Config with values from the file, or defaults.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        return Config.from_dict(tomllib.load(f))


def _write_config(config: Config, config_path: Path) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "wb") as f:
        tomli_w.dump(config.to_dict(), f)
