"""Click CLI for claude-tui."""

import json
import logging
from dataclasses import asdict
from typing import Optional

import click
from trogon import tui

from claude_tui import __version__
from claude_tui.config import ClaudeTuiConfig
from claude_tui.discovery import ProjectScanner
from claude_tui.timefmt import format_relative_time


def configure_logging(log_file: Optional[str], verbose: bool) -> None:
    """Send logs to a file; the dashboard owns the terminal."""
    if log_file is None and not verbose:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def get_config(ctx: click.Context) -> ClaudeTuiConfig:
    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        ctx.obj["config"] = ClaudeTuiConfig.load()
    return ctx.obj["config"]


@tui()
@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="claude-tui")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Write logs to this file")
@click.option("--verbose", "-v", is_flag=True, help="Log debug details (scan failures, git errors)")
@click.pass_context
def cli(ctx: click.Context, log_file: Optional[str], verbose: bool) -> None:
    """claude-tui - Terminal dashboard for local projects.

    Scans your project folders, shows git and Claude configuration at a
    glance and launches `claude --continue` in the selected project.

    Quick start:
        claude-tui                  Launch the dashboard
        claude-tui projects list    Print discovered projects
        claude-tui config show      Show the active configuration
    """
    configure_logging(log_file, verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(dashboard)


@cli.command()
@click.pass_context
def dashboard(ctx: click.Context) -> None:
    """Launch the interactive TUI dashboard.

    Projects are scanned once at startup, newest activity first.

    Keyboard shortcuts:
        ↑↓/jk - Navigate
        enter - Open Claude in project (claude --continue)
        f     - Open in file browser
        d     - Open linked Obsidian note
        /     - Search (esc clears)
        q     - Quit
    """
    from claude_tui.tui import ClaudeTuiApp
    app = ClaudeTuiApp(config=get_config(ctx))
    app.run()


# =============================================================================
# Projects Commands - Inspect discovered projects
# =============================================================================


@cli.group()
def projects() -> None:
    """Inspect discovered projects without starting the dashboard."""
    pass


@projects.command("list")
@click.option("--format", "-f", "fmt", type=click.Choice(["table", "json"]), default="table")
@click.pass_context
def projects_list(ctx: click.Context, fmt: str) -> None:
    """List projects in the configured folders, newest first."""
    config = get_config(ctx)
    found = ProjectScanner(config).scan()

    if fmt == "json":
        data = [
            {
                "name": p.name,
                "path": str(p.path),
                "source": p.source_group,
                "last_modified": p.last_modified.isoformat() if p.last_modified else None,
                "has_doc": p.has_linked_document,
                "branch": p.vcs_branch,
                "dirty": p.vcs_dirty,
                "config_labels": list(p.config_labels),
            }
            for p in found
        ]
        click.echo(json.dumps(data, indent=2))
        return

    if not found:
        click.echo("No projects found in: " + ", ".join(config.scan_dirs))
        return

    for p in found:
        parts = [f"{p.source_group:>10}", p.name]
        if p.branch_label:
            parts.append(click.style(p.branch_label, fg="magenta"))
        if p.config_labels:
            parts.append(" ".join(p.config_labels))
        if p.has_linked_document:
            parts.append(click.style("doc", fg="green"))
        parts.append(f"({format_relative_time(p.last_modified)})")
        click.echo("  ".join(parts))

    click.echo(f"\nTotal: {len(found)} projects")


# =============================================================================
# Config Commands
# =============================================================================


@cli.group()
def config() -> None:
    """Show or create the configuration file."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Print the active configuration as JSON."""
    cfg = get_config(ctx)
    click.echo(f"# {ClaudeTuiConfig.get_config_path()}")
    click.echo(json.dumps(asdict(cfg), indent=2))


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def config_init(force: bool) -> None:
    """Write a config file with the default settings."""
    path = ClaudeTuiConfig.get_config_path()
    if path.exists() and not force:
        click.echo(f"Error: {path} already exists (use --force to overwrite).", err=True)
        raise SystemExit(1)
    written = ClaudeTuiConfig().save()
    click.echo(click.style(f"✓ Created {written}", fg="green"))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
