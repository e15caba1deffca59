import json
from typing import Annotated, Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Width = Annotated[int, Field(strict=True, ge=0)]
Flag = Annotated[bool, Field(strict=True)]


class _ConfigModel(BaseModel):
    """Frozen model that reads and writes the formatter's camelCase keys"""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FormatOptions(_ConfigModel):
    """Options understood by the formatter. Unset options are None."""

    print_width: Optional[Width] = None
    tab_width: Optional[Width] = None
    use_tabs: Optional[Flag] = None
    semi: Optional[Flag] = None
    single_quote: Optional[Flag] = None
    jsx_single_quote: Optional[Flag] = None
    quote_props: Optional[Literal["as-needed", "consistent", "preserve"]] = None
    trailing_comma: Optional[Literal["all", "es5", "none"]] = None
    bracket_spacing: Optional[Flag] = None
    bracket_same_line: Optional[Flag] = None
    object_wrap: Optional[Literal["preserve", "collapse"]] = None
    arrow_parens: Optional[Literal["always", "avoid"]] = None
    prose_wrap: Optional[Literal["always", "never", "preserve"]] = None
    html_whitespace_sensitivity: Optional[Literal["css", "strict", "ignore"]] = None
    end_of_line: Optional[Literal["lf", "crlf", "cr", "auto"]] = None
    embedded_language_formatting: Optional[Literal["auto", "off"]] = None
    single_attribute_per_line: Optional[Flag] = None
    experimental_ternaries: Optional[Flag] = None
    parser: Optional[Annotated[str, Field(min_length=1)]] = None
    require_pragma: Optional[Flag] = None
    insert_pragma: Optional[Flag] = None
    range_start: Optional[Width] = None
    range_end: Optional[Width] = None

    def options_dict(self) -> dict[str, Any]:
        """Set options keyed by their camelCase names"""
        return self.model_dump(
            by_alias=True, exclude_none=True, include=set(FormatOptions.model_fields)
        )

    def merged(self, other: "FormatOptions") -> "FormatOptions":
        """Return a copy with every option set in ``other`` taking precedence"""
        update = other.model_dump(exclude_none=True, include=set(FormatOptions.model_fields))
        return FormatOptions(**{**self.model_dump(include=set(FormatOptions.model_fields)), **update})


class OverrideRule(_ConfigModel):
    """Options that apply only to files matching a glob pattern"""

    files: str
    exclude_files: Optional[tuple[str, ...]] = None
    options: FormatOptions

    @field_validator("files")
    @classmethod
    def _files_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("files must be a non-empty glob pattern")
        return value

    @field_validator("exclude_files")
    @classmethod
    def _excludes_not_blank(cls, value: Optional[tuple[str, ...]]) -> Optional[tuple[str, ...]]:
        if value is not None and any(not pattern.strip() for pattern in value):
            raise ValueError("excludeFiles entries must be non-empty glob patterns")
        return value


class FormatConfig(FormatOptions):
    """Top-level options plus an ordered sequence of override rules"""

    overrides: tuple[OverrideRule, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormatConfig":
        return cls.model_validate(dict(data))

    def global_options(self) -> FormatOptions:
        """Top-level options without the overrides"""
        return FormatOptions(**self.model_dump(include=set(FormatOptions.model_fields)))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_defaults=True, mode="json")

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


# Values the formatter uses for options a config leaves unset.
FORMATTER_DEFAULTS = FormatOptions(
    print_width=80,
    tab_width=2,
    use_tabs=False,
    semi=True,
    single_quote=False,
    jsx_single_quote=False,
    quote_props="as-needed",
    trailing_comma="all",
    bracket_spacing=True,
    bracket_same_line=False,
    object_wrap="preserve",
    arrow_parens="always",
    prose_wrap="preserve",
    html_whitespace_sensitivity="css",
    end_of_line="lf",
    embedded_language_formatting="auto",
    single_attribute_per_line=False,
    experimental_ternaries=False,
    require_pragma=False,
    insert_pragma=False,
)
