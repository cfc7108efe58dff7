import logging
from pathlib import Path
from typing import List

import typer
from typer.core import TyperCommand

from . import __version__
from .config import DEFAULT_CONFIG_NAME, FormatConfig
from .converters import outcome_to_report
from .dispatcher import FileDispatcher
from .errors import InvalidInputError
from .logconf import console_logging
from .models import ExitCode, FileReport, ReportStatus, RunConfiguration
from .registry import build_default_registry
from .resolver import PathResolver

logger = logging.getLogger(__name__)

VERSION_BANNER = f"srcfmt\njava and groovy source formatter\nversion {__version__}"

app = typer.Typer(
    help="srcfmt - Format java and groovy source files in place",
    add_completion=False,
)


def run(config: RunConfiguration, settings: FormatConfig, cwd: Path) -> ExitCode:
    """Resolve the target, dispatch every candidate file and report the results"""
    if not config.target_path:
        logger.error("!!!invalid input!!! no file or directory given")
        return ExitCode.INVALID_INPUT

    try:
        files = PathResolver(cwd).resolve(config.target_path)
    except InvalidInputError as e:
        logger.error("!!!invalid input!!! %s", e)
        return ExitCode.INVALID_INPUT

    dispatcher = FileDispatcher(build_default_registry(settings.formatter_config()))
    reports = [outcome_to_report(dispatcher.process(path, config)) for path in files]
    _print_report(reports)

    if any(r.status == ReportStatus.ERROR for r in reports):
        return ExitCode.FILE_ERRORS
    return ExitCode.OK


class HelpFirstCommand(TyperCommand):
    """Lets --help win over every other argument, unknown flags included."""

    def parse_args(self, ctx, args):
        options = args[: args.index("--")] if "--" in args else args
        if any(arg in ctx.help_option_names for arg in options):
            typer.echo(ctx.get_help(), color=ctx.color)
            ctx.exit()
        return super().parse_args(ctx, args)


def _print_report(reports: List[FileReport]):
    formatted = 0
    failed = 0
    for report in reports:
        if report.status == ReportStatus.FORMATTED:
            formatted += 1
            line = f"Formatted {report.path}"
            if report.backup_path:
                line += f" (backup: {report.backup_path})"
            typer.echo(line)
        elif report.status == ReportStatus.ERROR:
            failed += 1
            typer.echo(f"Failed {report.path}")

    typer.echo(f"\n{len(reports)} files checked, {formatted} formatted, {failed} failed")


@app.command(cls=HelpFirstCommand)
def format_sources(
    targets: List[str] = typer.Argument(
        None, metavar="[DIRECTORY OR FILE]", help="File or directory to format (the last one given is used)"
    ),
    backup: bool = typer.Option(False, "-b", help="Create a backup file before overwriting a formatted file"),
    version: bool = typer.Option(False, "--version", help="Show the formatter version"),
    java: bool = typer.Option(False, "--java", help="Only format java files"),
    groovy: bool = typer.Option(False, "--groovy", help="Only format groovy files"),
    config_file: Path = typer.Option(Path(DEFAULT_CONFIG_NAME), "--config", help="Path to config file"),
):
    """Format java and groovy files. A directory is formatted one level deep."""
    # --help never reaches this body, HelpFirstCommand handles it while parsing
    cwd = Path.cwd()
    with console_logging():
        settings = FormatConfig(cwd / config_file)
        config = RunConfiguration.from_flags(
            backup=backup or settings.backup,
            java=java,
            groovy=groovy,
            version_requested=version,
            target_path=targets[-1] if targets else None,
        )
        if config.version_requested:
            typer.echo(VERSION_BANNER)
            return
        exit_code = run(config, settings, cwd)

    if exit_code != ExitCode.OK:
        raise typer.Exit(code=int(exit_code))


if __name__ == "__main__":
    app()
