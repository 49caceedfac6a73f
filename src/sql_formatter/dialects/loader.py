"""
Loader for YAML dialect profiles.

Each <dialect>.yml file holds the word and symbol lists of one SQL variant.
Files are validated with a Pydantic schema and converted into immutable
DialectProfile instances.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sql_formatter.config.settings import get_settings
from sql_formatter.dialects.profile import DialectProfile
from sql_formatter.errors import DialectProfileError
from sql_formatter.utils.logging import get_logger

logger = get_logger(__name__)

BUNDLED_DIALECTS_DIR = Path(__file__).resolve().parent / "data"


class DialectProfileConfig(BaseModel):
    """Schema of a <dialect>.yml profile file."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Dialect identifier")
    aliases: List[str] = Field(default_factory=list, description="Alternative names")
    description: Optional[str] = Field(None, description="Human-readable description")
    reserved_words: List[str] = Field(default_factory=list)
    reserved_toplevel_words: List[str] = Field(default_factory=list)
    reserved_newline_words: List[str] = Field(default_factory=list)
    table_name_prefix_words: List[str] = Field(default_factory=list)
    string_types: List[str] = Field(default_factory=list)
    open_parens: List[str] = Field(default_factory=list)
    close_parens: List[str] = Field(default_factory=list)
    indexed_placeholder_types: List[str] = Field(default_factory=list)
    named_placeholder_types: List[str] = Field(default_factory=list)
    line_comment_types: List[str] = Field(default_factory=list)
    special_word_chars: List[str] = Field(default_factory=list)

    def to_profile(self) -> DialectProfile:
        data = self.model_dump(exclude={"aliases", "description"})
        return DialectProfile(**data)


def get_dialects_dir() -> Path:
    """
    Get the directory holding dialect profiles.

    Returns:
        SQLFMT_DIALECTS_DIR when configured, otherwise the bundled data directory

    Raises:
        DialectProfileError: If the configured directory does not exist
    """
    configured = get_settings().dialects_dir
    if configured:
        path = Path(configured).expanduser()
        if not path.is_dir():
            raise DialectProfileError(
                f"SQLFMT_DIALECTS_DIR not found or not a directory: {configured}"
            )
        return path
    return BUNDLED_DIALECTS_DIR


def load_dialect_config(path: Path) -> DialectProfileConfig:
    """
    Load and validate one dialect profile file.

    Args:
        path: Path to a <dialect>.yml file

    Returns:
        Validated DialectProfileConfig

    Raises:
        DialectProfileError: If the file is missing, not valid YAML or fails validation
    """
    if not path.exists():
        raise DialectProfileError(f"Dialect profile not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise DialectProfileError(f"Invalid YAML in dialect profile {path}: {e}")

    if not isinstance(data, dict):
        raise DialectProfileError(f"Dialect profile {path} must be a mapping")

    try:
        return DialectProfileConfig(**data)
    except ValidationError as e:
        raise DialectProfileError(f"Dialect profile {path} validation failed: {e}")


def load_dialect_profile(path: Path) -> Tuple[DialectProfile, List[str]]:
    """
    Load a profile file into a DialectProfile.

    Returns:
        Tuple of (profile, aliases)
    """
    config = load_dialect_config(path)
    profile = config.to_profile()
    logger.debug(
        "dialect_loaded",
        dialect=profile.name,
        path=str(path),
        reserved_word_count=len(profile.reserved_words),
    )
    return profile, list(config.aliases)


def discover_dialect_files(directory: Optional[Path] = None) -> List[Path]:
    """List profile files in a directory, sorted by name."""
    directory = directory or get_dialects_dir()
    return sorted(
        p for p in directory.iterdir() if p.is_file() and p.suffix in (".yml", ".yaml")
    )
