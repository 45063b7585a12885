from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PrivateAttr, ValidationError
from typing import Optional, Dict, Any
import json
import logging
import os
import re
from dotenv import load_dotenv

# Load .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Constants
WHITESPACE = "\t\n\x0b\x0c\r "  # Characters treated as whitespace when wrapping
OTHER_WHITESPACE = "\t\n\x0b\x0c\r"  # Whitespace other than the plain space
EM_DASH = "\u2014"
RECEIPT_WIDTH = 32  # Column count of a standard 58mm receipt printer


class WrapConfigError(ValueError):
    """Raised when the wrapping policy makes wrapping impossible."""


class WrapOptions(BaseModel):
    """
    Wrapping policy for one or many wrap calls.

    Instances are frozen once built, so one value can be shared between
    threads. Construction only assigns fields and compiles the matching
    rules for this instance; the policy itself is checked by
    validate_policy() when a wrap starts.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    width: int = 70
    expand_tabs: bool = True
    tab_size: int = Field(default=8, validation_alias=AliasChoices("tab_size", "tabsize"))
    replace_whitespace: bool = True
    drop_whitespace: bool = True
    initial_indent: str = ""
    subsequent_indent: str = ""
    fix_sentence_endings: bool = False
    break_long_words: bool = True
    break_on_hyphens: bool = True
    max_lines: int = 0  # 0 = no limit
    placeholder: str = " [...]"

    _sentence_ending_re: Optional[re.Pattern] = PrivateAttr(default=None)
    _whitespace_run_re: Optional[re.Pattern] = PrivateAttr(default=None)
    _whitespace_table: Dict[int, str] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        # non-whitespace, sentence punctuation, optional closing quote, then spaces
        self._sentence_ending_re = re.compile(
            f"([^{WHITESPACE}][.!?]['\"]?) [ ]*"
        )
        self._whitespace_run_re = re.compile(f"[{WHITESPACE}]+")
        self._whitespace_table = str.maketrans({c: " " for c in OTHER_WHITESPACE})

    @property
    def sentence_ending_re(self) -> re.Pattern:
        return self._sentence_ending_re

    @property
    def whitespace_run_re(self) -> re.Pattern:
        return self._whitespace_run_re

    @property
    def whitespace_table(self) -> Dict[int, str]:
        return self._whitespace_table

    @property
    def last_line_indent(self) -> str:
        """Indent used by the line that carries the placeholder."""
        if self.max_lines == 1:
            return self.initial_indent
        return self.subsequent_indent

    def with_overrides(self, **overrides) -> "WrapOptions":
        """Return a copy with some fields replaced (e.g. width=40)."""
        if "tabsize" in overrides:
            overrides["tab_size"] = overrides.pop("tabsize")
        data = self.model_dump()
        data.update(overrides)
        return WrapOptions(**data)

    def validate_policy(self) -> None:
        """
        Check that wrapping is possible with these options.

        Raises:
            WrapConfigError: If the width is below 1, tabs cannot be expanded,
                max_lines is negative, or the last line cannot hold its
                indent plus the placeholder.
        """
        if self.width < 1:
            raise WrapConfigError(f"width must be at least 1 (got {self.width})")

        if self.expand_tabs and self.tab_size < 0:
            raise WrapConfigError(
                f"tab size must be at least 0 to expand tabs (got {self.tab_size})"
            )

        if self.max_lines < 0:
            raise WrapConfigError(f"max_lines must be at least 0 (got {self.max_lines})")

        if self.max_lines > 0:
            indent = self.last_line_indent
            if len(indent) + len(self.placeholder.lstrip(WHITESPACE)) > self.width:
                raise WrapConfigError("placeholder too large for max width")


def _env_int(name: str, default: int) -> int:
    """Read an integer from the environment, falling back on bad values."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


def default_wrap_options() -> WrapOptions:
    """Service-wide default options, with width/placeholder from the environment."""
    return WrapOptions(
        width=_env_int("WRAPTEXT_WIDTH", 70),
        placeholder=os.getenv("WRAPTEXT_PLACEHOLDER", " [...]"),
    )


def default_presets() -> Dict[str, WrapOptions]:
    return {
        "receipt": WrapOptions(width=RECEIPT_WIDTH),
        "terminal": WrapOptions(width=80),
        "summary": WrapOptions(width=RECEIPT_WIDTH, max_lines=3),
    }


class Settings(BaseModel):
    host: str = os.getenv("WRAPTEXT_HOST", "127.0.0.1")
    port: int = _env_int("WRAPTEXT_PORT", 8000)
    log_level: str = os.getenv("WRAPTEXT_LOG_LEVEL", "INFO")

    # Options used when a request names no preset
    defaults: WrapOptions = Field(default_factory=default_wrap_options)

    # Named, reusable option sets (e.g. "receipt" -> width 32)
    presets: Dict[str, WrapOptions] = Field(default_factory=default_presets)

    def resolve_options(self, preset: Optional[str] = None) -> WrapOptions:
        """
        Look up the options for a preset name.

        Args:
            preset: Preset name, or None for the service defaults

        Returns:
            The matching WrapOptions

        Raises:
            KeyError: If the preset is not configured
        """
        if preset is None:
            return self.defaults
        return self.presets[preset]


def get_config_path() -> str:
    """Path of config.json (WRAPTEXT_CONFIG, or one directory up from this package)."""
    override = os.getenv("WRAPTEXT_CONFIG")
    if override:
        return override
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "config.json")


def load_config(config_path: Optional[str] = None) -> Settings:
    """Load settings from config.json or return defaults."""
    config_path = config_path or get_config_path()

    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Settings(**data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError, TypeError) as e:
            # TypeError: top-level JSON value was not an object
            logger.error(f"Error loading config from {config_path}: {e}")

    return Settings()


def save_config(new_settings: Settings, config_path: Optional[str] = None):
    """Saves the settings object to config.json."""
    config_path = config_path or get_config_path()

    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(new_settings.model_dump(), f, indent=4)


# Global settings instance
settings = load_config()
