"""
Pydantic schema for per-call formatting options.
"""

from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from sql_formatter.core.types import FormatOptions
from sql_formatter.errors import SqlFormatterConfigError


class FormatConfig(BaseModel):
    """Options accepted by sql_formatter.format() and sql_formatter.tokenize()."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    language: Optional[str] = Field(None, description="Dialect name, None for standard SQL")
    indent: str = Field(
        "  ",
        validation_alias=AliasChoices("indent", "indent_unit", "indentUnit"),
        description="Characters used for one indentation level",
    )
    reserved_word_case: Optional[Literal["upper", "lower", "unchanged"]] = Field(
        None,
        validation_alias=AliasChoices("reserved_word_case", "reservedWordCase"),
        description="Case applied to reserved words",
    )
    params: Optional[Union[Dict[str, Any], List[Any]]] = Field(
        None, description="Placeholder replacements by key or position"
    )
    lines_between_queries: int = Field(
        1,
        ge=1,
        validation_alias=AliasChoices("lines_between_queries", "linesBetweenQueries"),
        description="Newlines after each ';'",
    )

    @field_validator("params", mode="before")
    @classmethod
    def _normalize_params(cls, value: Any) -> Any:
        if isinstance(value, tuple):
            return list(value)
        if isinstance(value, Mapping):
            return {str(k): v for k, v in value.items()}
        return value

    def to_options(self) -> FormatOptions:
        case = None if self.reserved_word_case == "unchanged" else self.reserved_word_case
        return FormatOptions(
            indent=self.indent,
            reserved_word_case=case,
            params=self.params,
            lines_between_queries=self.lines_between_queries,
        )


def build_format_config(
    cfg: Union[FormatConfig, Mapping[str, Any], None] = None, **overrides: Any
) -> FormatConfig:
    """
    Normalize user options into a FormatConfig.

    Args:
        cfg: Existing FormatConfig, a plain mapping, or None
        **overrides: Individual options taking precedence over cfg

    Returns:
        Validated FormatConfig

    Raises:
        SqlFormatterConfigError: If any option is invalid
    """
    if isinstance(cfg, FormatConfig):
        data = cfg.model_dump()
    else:
        data = dict(cfg or {})
    data.update(overrides)
    try:
        return FormatConfig(**data)
    except ValidationError as e:
        raise SqlFormatterConfigError(f"Invalid format options: {e}")

