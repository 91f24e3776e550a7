"""PromptGroup class for organizing related prompt modules by name."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .errors import (
    DuplicateModuleError,
    GroupValidationError,
    InvalidGroupNameError,
    PromptError,
    PromptNotFoundError,
    UnnamedModuleError,
)
from .module import PromptMetadata, PromptModule

logger = logging.getLogger(__name__)


class PromptGroup:
    """
    A named collection of PromptModule instances, keyed by module name.

    Useful for a chain of prompts for a multi-step task or a set of
    variants of one prompt. Modules can be added but never replaced or
    removed.
    """

    def __init__(
        self,
        name: str,
        modules: Iterable[PromptModule] = (),
        metadata: PromptMetadata | Mapping[str, Any] | None = None,
    ):
        """
        Initialize the group.

        Args:
            name: Identifier of the group.
            modules: Modules to add, in order.
            metadata: Group metadata. Defaults to ``{"name": name}``.

        Raises:
            InvalidGroupNameError: If name is empty or not a string.
            UnnamedModuleError: If an initial module has no name.
            DuplicateModuleError: If two initial modules share a name.
        """
        if not isinstance(name, str) or not name:
            raise InvalidGroupNameError(name)

        self.name = name
        if metadata is None:
            metadata = PromptMetadata(name=name)
        elif not isinstance(metadata, PromptMetadata):
            metadata = PromptMetadata.from_dict({**metadata, "name": name})
        self.metadata = metadata
        self._modules: dict[str, PromptModule] = {}

        for module in modules:
            self.add(module)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_name: str | None = None) -> "PromptGroup":
        """Create a PromptGroup from a dictionary (e.g., parsed YAML)."""
        name = data.get("name", default_name)
        if name is not None and not isinstance(name, str):
            name = str(name)
        metadata = {k: v for k, v in data.items() if k not in ("name", "prompts")}
        modules = [PromptModule.from_dict(item) for item in data.get("prompts") or []]
        return cls(name, modules, metadata)

    def to_dict(self) -> dict[str, Any]:
        """Convert the group and its modules to a dictionary."""
        result = self.metadata.to_dict()
        result["name"] = self.name
        result["prompts"] = [module.to_dict() for module in self._modules.values()]
        return result

    def add(self, module: PromptModule) -> None:
        """
        Add a module, keyed by its metadata name.

        Raises:
            UnnamedModuleError: If the module metadata has no name.
            DuplicateModuleError: If the name is already used in this group.
        """
        module_name = module.name
        if not module_name:
            raise UnnamedModuleError(self.name)
        if module_name in self._modules:
            raise DuplicateModuleError(module_name, self.name)

        self._modules[module_name] = module
        logger.debug("Added prompt %r to group %r", module_name, self.name)

    def get(self, name: str) -> PromptModule | None:
        """Get a module by name, or None if it is not in the group."""
        return self._modules.get(name)

    def has(self, name: str) -> bool:
        """Check whether a module with the given name is in the group."""
        return name in self._modules

    def render(
        self,
        module_name: str,
        inputs: Mapping[str, Any] | None = None,
        /,
        **kwargs: Any,
    ) -> str:
        """
        Render a module of this group by name.

        Raises:
            PromptNotFoundError: If no module has that name.
            MissingVariableError: If the module is missing a variable.
        """
        module = self.get(module_name)
        if module is None:
            raise PromptNotFoundError(module_name, self.name)
        return module.render(inputs, **kwargs)

    def list_modules(self) -> list[str]:
        """Get the names of all modules, in insertion order."""
        return list(self._modules)

    def validate_all(self) -> None:
        """
        Validate every module, stopping at the first failure.

        Raises:
            GroupValidationError: Wrapping the first module error.
        """
        for name, module in self._modules.items():
            try:
                module.validate()
            except PromptError as e:
                raise GroupValidationError(name, self.name, str(e)) from e

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, name: object) -> bool:
        return name in self._modules

    def __iter__(self) -> Iterator[str]:
        """Iterate over module names."""
        return iter(list(self._modules))

    def __repr__(self) -> str:
        return f"PromptGroup(name={self.name!r}, modules={self.list_modules()!r})"
