"""Typer-based command line interface for gluestack-catalog."""
from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markdown import Markdown

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from catalog import CatalogConfig, ComponentCatalog  # type: ignore  # noqa: E402
from tools import ToolError, ToolRouter  # type: ignore  # noqa: E402
from utils.config import load_config  # type: ignore  # noqa: E402
from utils.logging import configure_logging, get_logger  # type: ignore  # noqa: E402
from utils.paths import normalise_path  # type: ignore  # noqa: E402

app = typer.Typer(add_completion=False, help="Browse Gluestack UI components from a checkout or GitHub.")
console = Console()
LOGGER = get_logger("gluecli")


@dataclass
class Settings:
    catalog: CatalogConfig
    raw: bool


@app.callback()
def main(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(None, "--root", help="Path to a local gluestack-ui checkout."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file."),
    token: Optional[str] = typer.Option(None, "--token", help="GitHub personal access token."),
    remote: Optional[bool] = typer.Option(None, "--remote/--local", help="Read components from GitHub."),
    raw: bool = typer.Option(False, "--raw", help="Print plain Markdown instead of rendering it."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    app_config = load_config(config)
    configure_logging("DEBUG" if verbose else app_config.log_level)
    if root is not None:
        app_config.gluestack_path = root
    if token:
        app_config.github_token = token
        app_config.remote = True if remote is None else remote
    elif remote is not None:
        app_config.remote = remote
    LOGGER.info("Using %s mode with root %s", app_config.source_mode, app_config.gluestack_path)
    ctx.obj = Settings(
        catalog=CatalogConfig(
            root=normalise_path(app_config.gluestack_path),
            remote=bool(app_config.remote),
            github_token=app_config.github_token,
        ),
        raw=raw,
    )


async def _call(settings: Settings, tool: str, arguments: Dict[str, Any]) -> str:
    catalog = ComponentCatalog(settings.catalog)
    try:
        blocks = await ToolRouter(catalog).call_tool(tool, arguments)
    finally:
        await catalog.aclose()
    return "\n".join(block.text for block in blocks)


def _run(ctx: typer.Context, tool: str, arguments: Dict[str, Any]) -> None:
    settings: Settings = ctx.obj
    try:
        text = asyncio.run(_call(settings, tool, arguments))
    except ToolError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    if settings.raw:
        typer.echo(text)
    else:
        console.print(Markdown(text))


def _component_arguments(name: str, variant: Optional[str]) -> Dict[str, Any]:
    arguments: Dict[str, Any] = {"componentName": name}
    if variant:
        arguments["variant"] = variant
    return arguments


@app.command("list")
def list_(ctx: typer.Context) -> None:
    """List every component with its variants and features."""

    _run(ctx, "list_components", {})


@app.command()
def component(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Component name, e.g. Button."),
    variant: Optional[str] = typer.Option(None, "--variant", help="nativewind, themed or unstyled."),
) -> None:
    """Print a component's source code."""

    _run(ctx, "get_component", _component_arguments(name, variant))


@app.command()
def demo(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Component name, e.g. Button."),
    variant: Optional[str] = typer.Option(None, "--variant", help="nativewind, themed or unstyled."),
) -> None:
    """Print a component's demo or stories."""

    _run(ctx, "get_component_demo", _component_arguments(name, variant))


@app.command()
def metadata(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Component name, e.g. Button."),
    variant: Optional[str] = typer.Option(None, "--variant", help="nativewind, themed or unstyled."),
) -> None:
    _run(ctx, "get_component_metadata", _component_arguments(name, variant))


@app.command()
def variants(ctx: typer.Context, name: str = typer.Argument(..., help="Component name.")) -> None:
    _run(ctx, "list_component_variants", {"componentName": name})


@app.command()
def tree(
    ctx: typer.Context,
    path: str = typer.Argument("", help="Path relative to the checkout root."),
    depth: int = typer.Option(3, "--depth", min=1, max=10, help="Maximum depth to traverse."),
    files: bool = typer.Option(True, "--files/--no-files", help="Include relevant files."),
) -> None:
    """Print a bounded directory snapshot of the checkout."""

    _run(ctx, "get_directory_structure", {"path": path, "depth": depth, "includeFiles": files})


if __name__ == "__main__":
    app()
