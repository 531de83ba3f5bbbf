"""Shared base model and field types for the configuration schema."""

import re
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
_SHORT_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{3}$")


def _expand_short_hex(value: Any) -> Any:
    """Expand ``#RGB`` shorthand to ``#RRGGBB``."""
    if isinstance(value, str):
        value = value.strip()
        if _SHORT_HEX_COLOR.match(value):
            return "#" + "".join(ch * 2 for ch in value[1:])
    return value


def _check_hex(value: str) -> str:
    if not _HEX_COLOR.match(value):
        raise ValueError(f"Expected a #RRGGBB hex color, got {value!r}")
    return value


HexColor = Annotated[str, BeforeValidator(_expand_short_hex), AfterValidator(_check_hex)]


class SchemaModel(BaseModel):
    """Base for models exchanged as camelCase JSON with the generator."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
