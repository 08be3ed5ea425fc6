import logging
from pathlib import Path
from typing import Annotated, Optional

import dotenv
import rich
import typer
from rich.tree import Tree

from mtcmodel.config import DeviceModelSettings
from mtcmodel.data_classes import Component, DeviceLayout, LoadError

__version__: str = "0.1.0"

app = typer.Typer(
    no_args_is_help=True,
    pretty_exceptions_enable=False,
    rich_markup_mode="rich",
    help=f"Device information model CLI, version {__version__}",
)


def get_settings(env_file: str = ".env") -> DeviceModelSettings:
    dotenv_file = dotenv.find_dotenv(env_file)
    # noinspection PyArgumentList
    return DeviceModelSettings(_env_file=dotenv_file or None)


def component_tree(component: Component, tree: Optional[Tree] = None) -> Tree:
    label = f"[bold]{component.prefixed_class}[/bold] {component.id}"
    if component.name:
        label += f" [cyan]{component.name}[/cyan]"
    branch = Tree(label) if tree is None else tree.add(label)
    for data_item in component.data_items:
        branch.add(f"[green]DataItem[/green] {data_item.id} ({data_item.type})")
    for composition in component.compositions:
        branch.add(f"[blue]Composition[/blue] {composition.id} ({composition.type})")
    for reference in component.references:
        state = "[green]Resolved[/green]" if reference.resolved else "[red]Unresolved[/red]"
        branch.add(f"[magenta]{reference.kind}Ref[/magenta] {reference.id} {state}")
    for child in component.children:
        component_tree(child, branch)
    return branch


def print_load_errors(errors: list[LoadError]) -> None:
    for error in errors:
        rich.print(
            f"[red]TypeName: {error.type_name}  Exception: <{error.exception}>[/red]"
        )


@app.command()
def config(env_file: str = ".env") -> None:
    """Show DeviceModelSettings."""
    dotenv_file = dotenv.find_dotenv(env_file)
    dotenv_file_exists = Path(dotenv_file).exists() if dotenv_file else False
    rich.print(f"Env file: <{dotenv_file}>  exists:{dotenv_file_exists}")
    rich.print(get_settings(env_file))


@app.command()
def show(
    layout_path: Annotated[
        Optional[Path], typer.Argument(help="Device document (JSON).")
    ] = None,
    env_file: str = ".env",
    *,
    strict: bool = False,
    verbose: bool = False,
) -> None:
    """Load, resolve and print device trees."""
    settings = get_settings(env_file)
    if verbose:
        settings.verbosity = logging.DEBUG
    logging.basicConfig(level=settings.verbosity)
    if layout_path is None:
        layout_path = settings.layout_path
    errors: list[LoadError] = []
    layout = DeviceLayout.load(
        layout_path,
        raise_errors=False,
        errors=errors,
        strict_references=strict or settings.strict_references,
    )
    for device in layout.devices:
        rich.print(component_tree(device))
    print_load_errors(errors)
    for reference_error in layout.reference_errors:
        rich.print(f"[yellow]{reference_error}[/yellow]")
    if errors or layout.reference_errors:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
