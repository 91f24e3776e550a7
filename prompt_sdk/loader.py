"""Load PromptGroup definitions from YAML files."""

import logging
from collections.abc import Iterator
from pathlib import Path

import yaml

from .errors import PromptError, PromptLoadError
from .group import PromptGroup

logger = logging.getLogger(__name__)


def load_group(path: str | Path) -> PromptGroup:
    """
    Load a single group definition file.

    The group name defaults to the file stem when the file has no ``name``.

    Raises:
        PromptLoadError: If the file cannot be read, is not a YAML mapping, or
            defines an invalid group or prompt. The original error is chained.
    """
    filepath = Path(path)
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise PromptLoadError(filepath, str(e)) from e
    except yaml.YAMLError as e:
        raise PromptLoadError(filepath, f"invalid YAML: {e}") from e

    if data is None:
        raise PromptLoadError(filepath, "file is empty")
    if not isinstance(data, dict):
        raise PromptLoadError(filepath, "expected a mapping at the top level")
    prompts = data.get("prompts") or []
    if not isinstance(prompts, list) or not all(isinstance(p, dict) for p in prompts):
        raise PromptLoadError(filepath, "'prompts' must be a list of mappings")

    try:
        group = PromptGroup.from_dict(data, default_name=filepath.stem)
    except PromptError as e:
        raise PromptLoadError(filepath, str(e)) from e

    logger.debug("Loaded group %r with %d prompt(s) from %s", group.name, len(group), filepath)
    return group


def iter_group_files(directory: str | Path) -> Iterator[Path]:
    """Yield the YAML files under a directory, ``.yaml`` before ``.yml``."""
    root = Path(directory)
    if not root.exists():
        return
    yield from sorted(root.glob("**/*.yaml"))
    yield from sorted(root.glob("**/*.yml"))


def load_groups(directory: str | Path) -> dict[str, PromptGroup]:
    """
    Load every group definition under a directory.

    Returns:
        Groups keyed by name. Empty if the directory does not exist.

    Raises:
        PromptLoadError: If two files define the same group name.
    """
    groups: dict[str, PromptGroup] = {}
    sources: dict[str, Path] = {}

    for filepath in iter_group_files(directory):
        group = load_group(filepath)
        if group.name in groups:
            raise PromptLoadError(
                filepath, f"group '{group.name}' is already defined in {sources[group.name]}"
            )
        groups[group.name] = group
        sources[group.name] = filepath

    return groups
