"""Form data value object wrapping the opaque application payload."""

import copy
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from domain.exceptions import ValidationError


@dataclass(frozen=True)
class FormData:
    """
    Immutable, opaque multi-section form payload.

    Only well-formedness is checked: the payload must be a JSON object with
    string keys and JSON-serialisable values. Field-level admissions rules
    belong to the form layer.

    Attributes:
        content: The normalised payload
    """

    content: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate and normalise the payload."""
        content = self.content if self.content is not None else {}
        if not isinstance(content, Mapping):
            raise ValidationError("Form data must be a JSON object")
        if not all(isinstance(key, str) for key in content):
            raise ValidationError("Form data keys must be strings")
        try:
            normalised = json.loads(json.dumps(dict(content), allow_nan=False))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Form data is not valid JSON: {e}") from e
        object.__setattr__(self, "content", normalised)

    @property
    def is_empty(self) -> bool:
        return not self.content

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the payload safe to hand out."""
        return copy.deepcopy(self.content)

    def __hash__(self) -> int:
        return hash(json.dumps(self.content, sort_keys=True))
