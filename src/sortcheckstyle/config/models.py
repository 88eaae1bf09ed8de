from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator

DEFAULT_NAME_ATTRIBUTES: Tuple[str, ...] = ("name", "key", "id")
DEFAULT_VALUE_ATTRIBUTES: Tuple[str, ...] = ("value",)


class Ordering(str, Enum):
    LEXICAL = "lexical"
    CHECKSTYLE = "checkstyle"


class NormalizeOptions(BaseModel):
    '''Flags controlling a single normalization run. All flags off is the identity transform.'''
    sort_attributes: bool = Field(default=True, description="Sort each element's attributes by name.")
    sort_children: bool = Field(default=True, description="Sort each element's child elements.")
    compress: bool = Field(default=False, description="Drop whitespace-only text nodes.")
    compress_values: bool = Field(default=False, description="Collapse whitespace runs inside value attributes.")
    ordering: Ordering = Field(default=Ordering.LEXICAL, description="Child ordering profile.")
    name_attributes: Tuple[str, ...] = Field(
        default=DEFAULT_NAME_ATTRIBUTES,
        description="Attributes consulted, in priority order, for an element's sorting name.",
    )
    value_attributes: Tuple[str, ...] = Field(
        default=DEFAULT_VALUE_ATTRIBUTES,
        description="Attributes whose whitespace is collapsed by compress_values.",
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("name_attributes", "value_attributes")
    @classmethod
    def _no_empty_names(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not name for name in value):
            raise ValueError("attribute names must be non-empty")
        return value

    @property
    def sorts_anything(self) -> bool:
        return self.sort_attributes or self.sort_children

    @property
    def compresses_anything(self) -> bool:
        return self.compress or self.compress_values


class OutputSettings(BaseModel):
    '''How the normalized document is written.'''
    pretty_print: bool = Field(default=False, description="Re-indent the output.")
    xml_declaration: bool = Field(default=True, description="Emit an XML declaration.")
    encoding: Optional[str] = Field(default=None, description="Output encoding; defaults to the input document's.")

    model_config = {
        "extra": "forbid",
    }


class FetchSettings(BaseModel):
    '''Settings for reading input from a URI.'''
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds.")
    user_agent: str = Field(default="sortcheckstyle", description="User-Agent header sent with requests.")

    model_config = {
        "extra": "forbid",
    }


class AppSettings(BaseModel):
    '''All settings, as resolved from the configuration file and overrides.'''
    normalize: NormalizeOptions = Field(default_factory=NormalizeOptions)
    output: OutputSettings = Field(default_factory=OutputSettings)
    fetch: FetchSettings = Field(default_factory=FetchSettings)

    model_config = {
        "extra": "forbid",
    }
