"""Developer CLI for inspecting the code mode API.

Usage:
  # Inspect the surface a registry produces
  mysql-codemode --registry myserver.tools:build_adapter help
  mysql-codemode --registry myserver.tools:build_adapter help json
  mysql-codemode --registry myserver.tools:TOOLS methods transactions
  mysql-codemode --registry myserver.tools:TOOLS groups

  # See how a sandbox call would be normalized (no registry needed)
  mysql-codemode -f json normalize readQuery '"SELECT 1"'
  mysql-codemode -f json normalize createIndex orders '["id"]' '{"unique": true}'
"""

from __future__ import annotations

import importlib
import json
import logging
import sys

from pathlib import Path
from typing import Any

import click

from mysql_codemode import __version__
from mysql_codemode.adapter import StaticToolAdapter, ToolAdapter
from mysql_codemode.api import MysqlApi, create_mysql_api
from mysql_codemode.config import ConfigManager
from mysql_codemode.models import ToolDescriptor
from mysql_codemode.normalization import normalize_params
from mysql_codemode.utils.debug_logger import DebugLogger
from mysql_codemode.validation import CodeModeConfigurationError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------


def _text_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def format_output(data: Any, fmt: str) -> str:
    """Format data for human-readable output.

    fmt: 'text' (default) | 'json' | 'markdown'
    """
    normalized = (fmt or "text").strip().lower()

    if normalized == "json":
        return json.dumps(data, indent=2, default=str)

    if data is None:
        return "null"

    if normalized == "markdown":
        if isinstance(data, dict):
            return "\n".join(f"- **{k}**: {_text_value(v)}" for k, v in data.items())
        if isinstance(data, (list, tuple)):
            return "\n".join(f"- {item}" for item in data)
        return str(data)

    if isinstance(data, dict):
        return "\n".join(f"{k}: {_text_value(v)}" for k, v in data.items())
    if isinstance(data, (list, tuple)):
        return "\n".join(f"- {item}" for item in data)
    return str(data)


# ---------------------------------------------------------------------------
# Registry loading
# ---------------------------------------------------------------------------


def coerce_adapter(target: Any) -> ToolAdapter:
    """Turn a ``--registry`` target into a ``ToolAdapter``.

    Accepts an adapter instance, a list/tuple of ``ToolDescriptor``, or a
    class / zero-argument callable returning either.
    """
    if isinstance(target, type) or (callable(target) and not isinstance(target, ToolAdapter)):
        target = target()

    if isinstance(target, ToolAdapter):
        return target

    if isinstance(target, (list, tuple)) and all(isinstance(item, ToolDescriptor) for item in target):
        return StaticToolAdapter(target)

    raise click.BadParameter(
        f"expected a tool adapter or a list of ToolDescriptor, got {type(target).__name__}",
        param_hint="--registry",
    )


def load_adapter(spec: str) -> ToolAdapter:
    """Import ``module:attribute`` and coerce it into a ``ToolAdapter``."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise click.BadParameter(f"expected 'module:attribute', got '{spec}'", param_hint="--registry")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import module '{module_name}': {e}", param_hint="--registry") from e

    try:
        target = getattr(module, attr)
    except AttributeError as e:
        raise click.BadParameter(f"module '{module_name}' has no attribute '{attr}'", param_hint="--registry") from e

    adapter = coerce_adapter(target)
    logger.debug(f"Loaded tool registry from {spec}: {adapter!r}")
    return adapter


def parse_call_argument(raw: str) -> Any:
    """Parse one CLI call argument as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# ---------------------------------------------------------------------------
# Context helpers
# ---------------------------------------------------------------------------


def _get_opts(ctx: click.Context) -> dict[str, Any]:
    """Global options from context (set by main group)."""
    return ctx.obj or {}


def _fmt(ctx: click.Context) -> str:
    return _get_opts(ctx).get("format", "text")


def _api(ctx: click.Context) -> MysqlApi:
    opts = _get_opts(ctx)
    cached = opts.get("api")
    if cached is not None:
        return cached

    registry = opts.get("registry")
    if not registry:
        raise click.UsageError("this command needs a tool registry; pass --registry module:attribute")

    try:
        api = create_mysql_api(load_adapter(registry), opts.get("config"))
    except CodeModeConfigurationError as e:
        raise click.ClickException(str(e)) from e
    opts["api"] = api
    return api


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--registry", envvar="MYSQL_CODEMODE_REGISTRY", help="Tool registry as module:attribute")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON configuration file",
)
@click.option("--debug", is_flag=True, help="Log dispatch and table validation details")
@click.option(
    "-f",
    "--format",
    type=click.Choice(["json", "text", "markdown"]),
    default="text",
    help="Output format",
)
@click.version_option(__version__, "--version", "-V")
@click.pass_context
def main(
    ctx: click.Context,
    registry: str | None,
    config_file: Path | None,
    debug: bool,
    format: str,
) -> None:
    """Inspect the MySQL code mode API synthesized from a tool registry."""
    logging.basicConfig(
        level=logging.INFO if debug else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    config = ConfigManager(config_file)
    if debug:
        DebugLogger.set_debug_enabled(True)

    ctx.obj = {
        "registry": registry,
        "config": config,
        "format": format,
    }


@main.command("help")
@click.argument("group", required=False)
@click.pass_context
def help_command(ctx: click.Context, group: str | None) -> None:
    """Show canonical methods per group, or one group's help()."""
    api = _api(ctx)
    if group is None:
        click.echo(format_output(api.help(), _fmt(ctx)))
        return

    if group not in api.group_apis:
        raise click.ClickException(f"Unknown group '{group}'. Available groups: {', '.join(api.group_apis)}")
    bindings = api.create_sandbox_bindings()
    click.echo(format_output(bindings[group].help(), _fmt(ctx)))


@main.command("groups")
@click.pass_context
def groups_command(ctx: click.Context) -> None:
    """Show every registry group with its tool count."""
    click.echo(format_output(_api(ctx).available_groups(), _fmt(ctx)))


@main.command("methods")
@click.argument("group")
@click.pass_context
def methods_command(ctx: click.Context, group: str) -> None:
    """List every callable name of GROUP, aliases included."""
    api = _api(ctx)
    if group not in api.group_apis:
        raise click.ClickException(f"Unknown group '{group}'. Available groups: {', '.join(api.group_apis)}")
    click.echo(format_output(api.group_methods(group), _fmt(ctx)))


@main.command("normalize")
@click.argument("method")
@click.argument("args", nargs=-1)
@click.pass_context
def normalize_command(ctx: click.Context, method: str, args: tuple[str, ...]) -> None:
    """Show the parameters a call METHOD(ARGS...) would hand to its tool.

    Each ARG is parsed as JSON; anything that is not valid JSON is taken as a
    plain string.
    """
    params = normalize_params(method, [parse_call_argument(raw) for raw in args])
    click.echo(format_output(params, _fmt(ctx)))


if __name__ == "__main__":
    main()
