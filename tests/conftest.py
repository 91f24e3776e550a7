"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def prompts_dir(tmp_path: Path) -> Path:
    """Create a prompts directory with two group files."""
    directory = tmp_path / "prompts"
    directory.mkdir()

    chat = {
        "name": "chat",
        "description": "Chat prompts",
        "prompts": [
            {
                "name": "greeting",
                "description": "Greets a user",
                "tags": ["intro"],
                "template": "Hi {{name}}",
            },
            {"name": "farewell", "template": "Bye {{name}}, see you {{when}}"},
        ],
    }
    (directory / "chat.yaml").write_text(yaml.safe_dump(chat, sort_keys=False))

    nested = directory / "support"
    nested.mkdir()
    (nested / "tickets.yml").write_text(
        "prompts:\n  - name: triage\n    template: 'Ticket: {{ticket}}'\n"
    )
    return directory
