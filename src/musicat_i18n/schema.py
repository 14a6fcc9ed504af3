"""Typed shape of a translation bundle, derived from the reference bundle.

``build_schema`` turns the reference tree into nested pydantic models: one
model per section, a non-blank ``str`` per leaf, extra keys forbidden.
Bundle keys are carried as field aliases so camelCase keys and keys that
collide with ``BaseModel`` attributes are both safe.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, create_model


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("translation is blank")
    return value


LeafText = Annotated[str, StringConstraints(min_length=1), AfterValidator(_not_blank)]


class BundleSection(BaseModel):
    """Base for generated section models."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=False)


def build_schema(reference: Mapping[str, Any], name: str = "Translation") -> type[BundleSection]:
    """Build a pydantic model tree mirroring ``reference``."""
    fields: dict[str, Any] = {}
    for index, (key, value) in enumerate(reference.items()):
        if isinstance(value, Mapping):
            field_type: Any = build_schema(value, name=f"{name}_{key}")
        else:
            field_type = LeafText
        fields[f"field_{index}"] = (field_type, Field(alias=key))
    return create_model(name, __base__=BundleSection, **fields)


def thaw(tree: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a (possibly frozen) bundle into plain dicts for validation."""
    return {key: thaw(value) if isinstance(value, Mapping) else value for key, value in tree.items()}


def validate_bundle(schema: type[BundleSection], bundle: Mapping[str, Any]) -> BundleSection:
    """Validate ``bundle`` against ``schema``.

    Raises:
        pydantic.ValidationError: Listing every shape problem found.
    """
    return schema.model_validate(thaw(bundle))
