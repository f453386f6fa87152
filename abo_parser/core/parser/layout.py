"""
Record Layouts - Single Source of Truth for ABO field offsets.

The offset tables live in record_layouts.yaml next to this module and are
loaded once into frozen models.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

LAYOUTS_FILE = Path(__file__).parent / "record_layouts.yaml"

FieldType = Literal["text", "date", "amount"]


class FieldSpec(BaseModel, frozen=True):
    """Position and type of one fixed-width field."""

    name: str
    start: int = Field(ge=0, description="Absolute offset in the line")
    width: int = Field(ge=1)
    type: FieldType = "text"

    model_config = {"frozen": True}

    @property
    def end(self) -> int:
        return self.start + self.width


class RecordLayout(BaseModel, frozen=True):
    """Fixed field table of one record type."""

    record_type: str = Field(pattern=r"^\d{3}$")
    fields: list[FieldSpec]

    model_config = {"frozen": True}

    @property
    def min_length(self) -> int:
        """Length a line needs to carry every field."""
        return max((f.end for f in self.fields), default=3)


class ExtensionFieldSpec(BaseModel, frozen=True):
    """Field of the extended block; its offset follows from the ones before."""

    name: str
    width: int = Field(ge=1)
    type: FieldType = "text"

    model_config = {"frozen": True}


class ExtensionLayout(BaseModel, frozen=True):
    """Ordered optional fields appended by the extended 075 layout."""

    start: int = Field(ge=0)
    fields: list[ExtensionFieldSpec]

    model_config = {"frozen": True}

    def positioned(self) -> Iterator[FieldSpec]:
        """Yield the extension fields with their absolute offsets."""
        pos = self.start
        for spec in self.fields:
            yield FieldSpec(name=spec.name, start=pos, width=spec.width, type=spec.type)
            pos += spec.width


class RecordLayouts(BaseModel, frozen=True):
    """All layouts loaded from YAML."""

    version: str
    statement: RecordLayout
    transaction: RecordLayout
    extension: ExtensionLayout

    model_config = {"frozen": True}


def _load_layouts_from_yaml(path: Path) -> RecordLayouts:
    """Load record layouts from YAML file."""
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f)

    return RecordLayouts(**data)


@lru_cache(maxsize=1)
def get_layouts() -> RecordLayouts:
    """
    Get the record layouts.

    The layouts are cached after first load.

    Returns:
        RecordLayouts for 074, 075 and the extended 075 block
    """
    return _load_layouts_from_yaml(LAYOUTS_FILE)
