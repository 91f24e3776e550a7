"""Exceptions raised by prompt-sdk."""


class PromptError(ValueError):
    """Base class for all prompt-sdk errors."""


class EmptyTemplateError(PromptError):
    """Raised when a PromptModule is created without a template."""

    def __init__(self) -> None:
        super().__init__("PromptModule requires a non-empty template")


class InvalidTemplateError(PromptError):
    """Raised when a template contains an empty placeholder such as `{{}}`."""


class MissingVariableError(PromptError):
    """Raised when a required variable has no value at render time."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"Missing required variable for rendering: '{variable}'")


class InvalidGroupNameError(PromptError):
    """Raised when a PromptGroup is given an empty or non-string name."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"PromptGroup requires a non-empty string name, got: {name!r}")


class UnnamedModuleError(PromptError):
    """Raised when adding a module whose metadata has no name."""

    def __init__(self, group_name: str) -> None:
        self.group_name = group_name
        super().__init__(
            f"Cannot add a PromptModule without a name in its metadata to group '{group_name}'"
        )


class DuplicateModuleError(PromptError):
    """Raised when a module name is already taken within a group."""

    def __init__(self, module_name: str, group_name: str) -> None:
        self.module_name = module_name
        self.group_name = group_name
        super().__init__(
            f"A PromptModule named '{module_name}' already exists in group '{group_name}'"
        )


class PromptNotFoundError(PromptError):
    """Raised when rendering a module name that is not in the group."""

    def __init__(self, module_name: str, group_name: str) -> None:
        self.module_name = module_name
        self.group_name = group_name
        super().__init__(f"Module '{module_name}' not found in group '{group_name}'")


class GroupValidationError(PromptError):
    """Raised by PromptGroup.validate_all for the first module that fails."""

    def __init__(self, module_name: str, group_name: str, reason: str) -> None:
        self.module_name = module_name
        self.group_name = group_name
        self.reason = reason
        super().__init__(
            f"Validation failed for module '{module_name}' in group '{group_name}': {reason}"
        )


class PromptLoadError(PromptError):
    """Raised when a group definition file cannot be read."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error loading prompts from {path}: {reason}")
