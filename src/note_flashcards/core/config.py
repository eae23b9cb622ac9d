"""Configuration management for Note Flashcards."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional
import logging
import yaml

from .exceptions import ConfigError

# Separator defaults used when a config file leaves a key out
DEFAULT_SINGLE_LINE_SEPARATOR = "::"
DEFAULT_SINGLE_LINE_REVERSED_SEPARATOR = ":::"
DEFAULT_MULTI_LINE_SEPARATOR = "?"
DEFAULT_MULTI_LINE_REVERSED_SEPARATOR = "??"

SEPARATOR_KEYS = (
    "single_line_separator",
    "single_line_reversed_separator",
    "multi_line_separator",
    "multi_line_reversed_separator",
)


@dataclass
class ParserOptions:
    """Separators and cloze toggles used when scanning a note.

    Every field must be given explicitly; see ParserOptions.defaults() for
    the stock settings.
    """
    single_line_separator: str
    single_line_reversed_separator: str
    multi_line_separator: str
    multi_line_reversed_separator: str

    # Implicit cloze triggers
    convert_highlights_to_clozes: bool
    convert_bold_text_to_clozes: bool
    convert_curly_brackets_to_clozes: bool

    def validate(self) -> None:
        """Reject separators that would match every line.

        Raises:
            ConfigError: If any separator is empty
        """
        for key in SEPARATOR_KEYS:
            value = getattr(self, key)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"Separator '{key}' must be a non-empty string", config_key=key)

    @classmethod
    def defaults(cls) -> "ParserOptions":
        return cls(
            single_line_separator=DEFAULT_SINGLE_LINE_SEPARATOR,
            single_line_reversed_separator=DEFAULT_SINGLE_LINE_REVERSED_SEPARATOR,
            multi_line_separator=DEFAULT_MULTI_LINE_SEPARATOR,
            multi_line_reversed_separator=DEFAULT_MULTI_LINE_REVERSED_SEPARATOR,
            convert_highlights_to_clozes=True,
            convert_bold_text_to_clozes=False,
            convert_curly_brackets_to_clozes=False,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "ParserOptions":
        """Create options from a dictionary, filling gaps with defaults."""
        defaults = cls.defaults()
        options = cls(**{
            f.name: data.get(f.name, getattr(defaults, f.name))
            for f in fields(cls)
        })
        options.validate()
        return options

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class OutputConfig:
    """Configuration for output formats."""
    output_dir: str = "./output"
    json_output: bool = False
    csv_output: bool = False

    # Written into the CSV Tags column
    tags: list[str] = field(default_factory=list)


@dataclass
class Config:
    """Main configuration for Note Flashcards."""
    # Scanner settings
    parser: ParserOptions = field(default_factory=ParserOptions.defaults)

    # Output settings
    output: OutputConfig = field(default_factory=OutputConfig)

    # Logging
    log_level: str = "INFO"
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if "parser" in data:
            parser_data = data["parser"] or {}
            if not isinstance(parser_data, dict):
                raise ConfigError("'parser' section must be a mapping", config_key="parser")
            config.parser = ParserOptions.from_dict(parser_data)

        if "output" in data:
            out_data = data["output"] or {}
            if not isinstance(out_data, dict):
                raise ConfigError("'output' section must be a mapping", config_key="output")
            config.output = OutputConfig(
                output_dir=out_data.get("output_dir", "./output"),
                json_output=out_data.get("json_output", False),
                csv_output=out_data.get("csv_output", False),
                tags=out_data.get("tags", []),
            )

        # Other settings
        log_level = str(data.get("log_level", "INFO")).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Unknown log level: {data['log_level']}", config_key="log_level")
        config.log_level = log_level
        config.verbose = data.get("verbose", False)

        return config

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "parser": self.parser.to_dict(),
            "output": {
                "output_dir": self.output.output_dir,
                "json_output": self.output.json_output,
                "csv_output": self.output.csv_output,
                "tags": list(self.output.tags),
            },
            "log_level": self.log_level,
            "verbose": self.verbose,
        }


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file or use defaults.

    Searches for config in:
    1. Provided path
    2. ./note_flashcards.yaml
    3. ./config.yaml
    4. ~/.config/note_flashcards/config.yaml
    5. Falls back to defaults
    """
    search_paths = []

    if config_path:
        search_paths.append(Path(config_path))

    search_paths.extend([
        Path("./note_flashcards.yaml"),
        Path("./config.yaml"),
        Path.home() / ".config" / "note_flashcards" / "config.yaml",
    ])

    for path in search_paths:
        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in config file: {e}")
            except OSError as e:
                raise ConfigError(f"Error loading config from {path}: {e}")

            if data is not None and not isinstance(data, dict):
                raise ConfigError(f"Config file {path} must contain a mapping")
            return Config.from_dict(data or {})

    # Return default config
    return Config()


def save_config(config: Config, path: str) -> None:
    """Save configuration to YAML file."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False)
