"""prompt-sdk - Reusable prompt templates with named placeholders and groups."""

from .errors import (
    DuplicateModuleError,
    EmptyTemplateError,
    GroupValidationError,
    InvalidGroupNameError,
    InvalidTemplateError,
    MissingVariableError,
    PromptError,
    PromptLoadError,
    PromptNotFoundError,
    UnnamedModuleError,
)
from .group import PromptGroup
from .loader import load_group, load_groups
from .module import PromptMetadata, PromptModule
from .parser import DEFAULT_SYNTAX, PlaceholderSyntax

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_SYNTAX",
    "DuplicateModuleError",
    "EmptyTemplateError",
    "GroupValidationError",
    "InvalidGroupNameError",
    "InvalidTemplateError",
    "MissingVariableError",
    "PlaceholderSyntax",
    "PromptError",
    "PromptGroup",
    "PromptLoadError",
    "PromptMetadata",
    "PromptModule",
    "PromptNotFoundError",
    "UnnamedModuleError",
    "load_group",
    "load_groups",
]
