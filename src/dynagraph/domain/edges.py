"""Edge records: the unit of storage in a graph table.

An edge is keyed by ``(source-key, target-key)``. Every other attribute is
free-form string metadata. A record whose source equals its target is a
self-referencing node and renders in bracketed form.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

SOURCE_KEY_ATTRIBUTE = "source-key"
TARGET_KEY_ATTRIBUTE = "target-key"

# Conventional metadata attributes (not enforced).
TAG_ATTRIBUTE = "tag"
DATA_ATTRIBUTE = "data"
TIMESTAMP_ATTRIBUTE = "timestamp"

KEY_ATTRIBUTES = frozenset({SOURCE_KEY_ATTRIBUTE, TARGET_KEY_ATTRIBUTE})


class EdgeRecord(BaseModel):
    """A stored ``(source, target, attributes)`` tuple.

    Attributes:
        source: Origin node identifier (partition key).
        target: Destination node identifier (sort key).
        attributes: Extra string attributes. Names may not collide with
            the two key attributes.
    """

    model_config = {"frozen": True}

    source: str
    target: str
    attributes: dict[str, str] = Field(default_factory=dict)

    @field_validator("attributes")
    @classmethod
    def _no_key_collision(cls, value: dict[str, str]) -> dict[str, str]:
        reserved = sorted(KEY_ATTRIBUTES.intersection(value))
        if reserved:
            msg = f"attribute name(s) reserved for the primary key: {', '.join(reserved)}"
            raise ValueError(msg)
        return value

    @property
    def is_self_edge(self) -> bool:
        return self.source == self.target

    def to_item(self) -> dict[str, str]:
        """Flatten into a store item (key attributes + extras)."""
        return {
            SOURCE_KEY_ATTRIBUTE: self.source,
            TARGET_KEY_ATTRIBUTE: self.target,
            **self.attributes,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> EdgeRecord:
        """Build a record from a flat store item."""
        extras = {k: str(v) for k, v in item.items() if k not in KEY_ATTRIBUTES}
        return cls(
            source=str(item[SOURCE_KEY_ATTRIBUTE]),
            target=str(item[TARGET_KEY_ATTRIBUTE]),
            attributes=extras,
        )


def render_edge(record: EdgeRecord) -> str:
    """Canonical one-line display form of an edge.

    Extra attributes are sorted by key, so output does not depend on the
    record's attribute order. A trailing space is left when there are no
    extras.

    Examples:
        >>> render_edge(EdgeRecord(source="a", target="b", attributes={"tag": "x"}))
        'a -> b tag:x'
        >>> render_edge(EdgeRecord(source="a", target="a", attributes={"data": "y"}))
        '[a] data:y'
    """
    extra = " ".join(f"{key}:{record.attributes[key]}" for key in sorted(record.attributes))
    if record.is_self_edge:
        return f"[{record.source}] {extra}"
    return f"{record.source} -> {record.target} {extra}"
