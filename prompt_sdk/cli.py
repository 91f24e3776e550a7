"""CLI for prompt-sdk - inspect, render and validate prompt groups."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .errors import PromptError
from .group import PromptGroup
from .loader import iter_group_files, load_group, load_groups


console = Console()
error_console = Console(stderr=True)


def get_prompts_dir() -> Path:
    """Get the default prompts directory path."""
    return Path.cwd() / "prompts"


def _load_or_exit(prompts_dir: Path) -> dict[str, PromptGroup]:
    try:
        return load_groups(prompts_dir)
    except PromptError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def _get_group_or_exit(prompts_dir: Path, group_name: str) -> PromptGroup:
    groups = _load_or_exit(prompts_dir)
    group = groups.get(group_name)
    if group is None:
        error_console.print(f"[red]Group '{group_name}' not found.[/red]")
        sys.exit(1)
    return group


@click.group()
@click.option(
    "--prompts-dir",
    "-d",
    type=click.Path(path_type=Path),
    default=None,
    envvar="PROMPT_SDK_DIR",
    help="Directory containing prompt group files (default: ./prompts)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, prompts_dir: Optional[Path], verbose: bool) -> None:
    """Prompt SDK - Reusable prompt templates organized in groups."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["prompts_dir"] = prompts_dir or get_prompts_dir()


@cli.command("list")
@click.pass_context
def list_groups(ctx: click.Context) -> None:
    """List all prompt groups and their prompts."""
    prompts_dir = ctx.obj["prompts_dir"]
    groups = _load_or_exit(prompts_dir)

    if not groups:
        console.print("[yellow]No prompt groups found.[/yellow]")
        console.print(f"[dim]Looking in: {prompts_dir}[/dim]")
        return

    table = Table(title="Prompt Groups", box=box.ROUNDED)
    table.add_column("Group", style="cyan")
    table.add_column("Prompts", style="magenta")
    table.add_column("Description", style="dim")

    for name in sorted(groups):
        group = groups[name]
        desc = group.metadata.description
        table.add_row(
            name,
            ", ".join(group.list_modules()) or "-",
            desc[:50] + "..." if len(desc) > 50 else desc,
        )

    console.print(table)


@cli.command()
@click.argument("group_name")
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, group_name: str, name: str) -> None:
    """Show details of a prompt in a group."""
    group = _get_group_or_exit(ctx.obj["prompts_dir"], group_name)
    module = group.get(name)

    if module is None:
        error_console.print(f"[red]Prompt '{name}' not found in group '{group_name}'.[/red]")
        sys.exit(1)

    metadata = module.metadata
    header = f"[bold cyan]{group_name}/{name}[/bold cyan]"
    if metadata.version:
        header += f" v{metadata.version}"
    console.print(Panel(header, subtitle=metadata.description or "No description"))

    if metadata.tags:
        console.print(f"[bold]Tags:[/bold] {', '.join(metadata.tags)}")

    variables = module.get_required_variables()
    if variables:
        console.print(f"[bold]Variables:[/bold] [cyan]{', '.join(variables)}[/cyan]")
    else:
        console.print("[dim]No variables[/dim]")

    console.print("\n[bold]Template:[/bold]")
    syntax = Syntax(module.template, "text", theme="monokai", line_numbers=True)
    console.print(syntax)


@cli.command()
@click.argument("group_name")
@click.argument("name")
@click.option("--var", "-V", multiple=True, help="Variable in key=value format")
@click.pass_context
def render(ctx: click.Context, group_name: str, name: str, var: tuple) -> None:
    """Render a prompt from a group with variables."""
    group = _get_group_or_exit(ctx.obj["prompts_dir"], group_name)
    module = group.get(name)

    if module is None:
        error_console.print(f"[red]Prompt '{name}' not found in group '{group_name}'.[/red]")
        sys.exit(1)

    variables = {}
    for v in var:
        if "=" not in v:
            error_console.print(f"[red]Invalid variable format '{v}'. Use key=value.[/red]")
            sys.exit(1)
        key, value = v.split("=", 1)
        variables[key] = value

    missing = [v for v in module.get_required_variables() if v not in variables]
    if missing:
        error_console.print(f"[red]Missing required variables:[/red] {', '.join(missing)}")
        console.print("\n[dim]Use --var key=value to provide variables[/dim]")
        sys.exit(1)

    try:
        rendered = group.render(name, variables)
    except PromptError as e:
        error_console.print(f"[red]Error rendering prompt:[/red] {e}")
        sys.exit(1)

    console.print(Panel(rendered, title=f"Rendered: {group_name}/{name}"))


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate all prompt group files."""
    prompts_dir = ctx.obj["prompts_dir"]
    files = list(iter_group_files(prompts_dir))

    if not files:
        console.print("[yellow]No prompt groups found to validate.[/yellow]")
        return

    errors: dict[str, str] = {}
    seen: dict[str, Path] = {}
    for filepath in files:
        key = str(filepath.relative_to(prompts_dir))
        try:
            group = load_group(filepath)
            group.validate_all()
        except PromptError as e:
            errors[key] = str(e)
            continue
        if group.name in seen:
            errors[key] = f"Group '{group.name}' is already defined in {seen[group.name]}"
            continue
        seen[group.name] = filepath

    if not errors:
        console.print(f"[green]All {len(files)} group file(s) validated successfully.[/green]")
        return

    console.print("[red]Validation errors found:[/red]")
    for key, error in errors.items():
        console.print(f"\n[yellow]{key}:[/yellow]")
        console.print(f"  [red]- {error}[/red]")

    sys.exit(1)


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
