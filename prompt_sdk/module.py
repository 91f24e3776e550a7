"""PromptModule: a single reusable prompt template with metadata."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from . import parser
from .errors import EmptyTemplateError

DEFAULT_PROMPT_NAME = "Untitled Prompt"

# Accepted spellings on input; output always uses the first form.
_METADATA_ALIASES = {
    "created_at": ("created_at", "createdAt"),
    "updated_at": ("updated_at", "updatedAt"),
}


def _optional_str(value: Any) -> str | None:
    return str(value) if value is not None else None


@dataclass(frozen=True)
class PromptMetadata:
    """Descriptive fields of a prompt. Only ``name`` is used by groups."""

    name: str | None = DEFAULT_PROMPT_NAME
    description: str = ""
    tags: tuple[str, ...] = ()
    version: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze ``tags`` and ``extra`` so metadata cannot change after creation."""
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PromptMetadata":
        """
        Create PromptMetadata from a mapping. Unknown keys go to ``extra``.

        Scalar fields are converted to text, so YAML values such as
        ``name: 123`` or ``tags: [1]`` become ``"123"`` and ``("1",)``.
        """
        known = {"name", "description", "tags", "version"}
        for aliases in _METADATA_ALIASES.values():
            known.update(aliases)

        timestamps = {}
        for attr, aliases in _METADATA_ALIASES.items():
            value = next((data[a] for a in aliases if a in data), None)
            timestamps[attr] = _optional_str(value)

        tags = data.get("tags") or ()
        if isinstance(tags, (str, int, float)):
            tags = (tags,)

        description = data.get("description")
        return cls(
            name=_optional_str(data.get("name")),
            description=str(description) if description is not None else "",
            tags=tuple(str(tag) for tag in tags),
            version=_optional_str(data.get("version")),
            extra={k: v for k, v in data.items() if k not in known},
            **timestamps,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to a plain dictionary, skipping unset fields."""
        result: dict[str, Any] = {"name": self.name}
        if self.description:
            result["description"] = self.description
        if self.tags:
            result["tags"] = list(self.tags)
        for key in ("version", "created_at", "updated_at"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        result.update(self.extra)
        return result


@dataclass(frozen=True, eq=False)
class PromptModule:
    """
    A template bound to its metadata and the variables it requires.

    The template is validated on creation and never changes afterwards, so
    rendering the same inputs always gives the same text.
    """

    template: str
    metadata: PromptMetadata | Mapping[str, Any] | None = None
    _required_variables: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Normalize metadata, derive the variable set and validate."""
        if not self.template or not isinstance(self.template, str):
            raise EmptyTemplateError()

        if self.metadata is None:
            object.__setattr__(self, "metadata", PromptMetadata())
        elif not isinstance(self.metadata, PromptMetadata):
            object.__setattr__(self, "metadata", PromptMetadata.from_dict(self.metadata))

        object.__setattr__(
            self, "_required_variables", parser.extract_variables(self.template)
        )

        self.validate()

    @property
    def name(self) -> str | None:
        """Name from the metadata."""
        return self.metadata.name

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PromptModule":
        """Create a PromptModule from a mapping (e.g., parsed YAML)."""
        metadata = {k: v for k, v in data.items() if k != "template"}
        return cls(data.get("template", ""), metadata)

    def to_dict(self) -> dict[str, Any]:
        """Convert the module to a dictionary for serialization."""
        result = self.metadata.to_dict()
        result["template"] = self.template
        return result

    def render(
        self, inputs: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> str:
        """
        Render the template with the given variables.

        Args:
            inputs: Variable values keyed by name.
            **kwargs: More variable values; these win over ``inputs``.

        Returns:
            The rendered prompt string.

        Raises:
            MissingVariableError: If a required variable is not provided.
        """
        context = {**(inputs or {}), **kwargs}
        return parser.render(self.template, context, self._required_variables)

    def validate(self) -> None:
        """Validate the template, raising InvalidTemplateError on empty placeholders."""
        parser.validate(self.template)

    def get_required_variables(self) -> list[str]:
        """Get a sorted list of the variable names the template uses."""
        return sorted(self._required_variables)

    def __str__(self) -> str:
        return f"PromptModule(name={self.name})"

    def __repr__(self) -> str:
        return (
            f"PromptModule(name={self.name!r}, "
            f"variables={self.get_required_variables()!r})"
        )
