"""CLI entry point for autotyper."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from autotyper import __version__
from autotyper.ansi import RESET
from autotyper.config import Settings, get_settings, resolve_config_path
from autotyper.errors import AutotyperError, InputError
from autotyper.inputs import read_file, read_interactive, read_stdin, split_commands, stdin_is_piped
from autotyper.logging_utils import configure_logging
from autotyper.player import PlaybackOptions, Player
from autotyper.prompt import Prompt, ShellStyle
from autotyper.render import Renderer, create_renderer

HELP = """A CLI tool to simulate user input

This tool can be used to simulate user input in a terminal. It can be used to
test command line applications or to create demos of command line applications.
"""

EPILOG = """Examples:

  autotyper -i commands.txt

  autotyper -i commands.txt --char-delay 25 --shell bash --no-cls

  autotyper -i commands.txt --pre-delay 250 --post-delay 2000

  autotyper -- ping -c 4 one.one.one.one

  cat commands.txt | autotyper
"""

app = typer.Typer(
    name="autotyper",
    add_completion=False,
    rich_markup_mode=None,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"autotyper version {__version__}")
        raise typer.Exit()


def _acquire_input(settings: Settings, args: list[str], interactive: bool) -> Optional[str]:
    """Pick the input source: file, then arguments, then piped stdin, then the keyboard."""
    if settings.input_file is not None:
        logger.debug("reading commands from {}", settings.input_file)
        return read_file(settings.input_file)
    if args:
        return " ".join(args)
    if stdin_is_piped():
        logger.debug("reading commands from standard input")
        return read_stdin()
    if interactive:
        return read_interactive()
    return None


def _build_prompt(settings: Settings) -> Prompt:
    shell = ShellStyle.parse(settings.shell)
    return Prompt.create(settings.prompt_username, settings.prompt_hostname, settings.prompt_path, shell)


def _report_config_file(config: Optional[Path], renderer: Renderer) -> None:
    path, _ = resolve_config_path(config)
    if path.is_file():
        renderer.info(f"Using config file: {path}")


@app.command(help=HELP, epilog=EPILOG, context_settings={"help_option_names": ["--help"]})
def main(
    ctx: typer.Context,
    command: Optional[list[str]] = typer.Argument(  # noqa: B008
        None, help="command to type, used when no input file is given"
    ),
    config: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="config file (default is $HOME/.autotyper.yaml)"
    ),
    input_file: Optional[Path] = typer.Option(None, "--input-file", "-i", help="input file"),  # noqa: B008
    char_delay: Optional[int] = typer.Option(
        None, "--char-delay", "-c", help="delay between each character in milliseconds (default 75)"
    ),
    pre_delay: Optional[int] = typer.Option(
        None, "--pre-delay", "-d", help="delay before each command in milliseconds (default 500)"
    ),
    post_delay: Optional[int] = typer.Option(
        None, "--post-delay", "-D", help="delay after each command in milliseconds (default 3500)"
    ),
    shell: Optional[str] = typer.Option(
        None, "--shell", "-s", help="shell prompt to simulate: bash, cmd or ps (default ps)"
    ),
    username: Optional[str] = typer.Option(
        None, "--username", "-u", help="username to print in the bash prompt (default bitcanon)"
    ),
    hostname: Optional[str] = typer.Option(
        None, "--hostname", "-H", help="hostname to print in the bash prompt (default code)"
    ),
    path: Optional[str] = typer.Option(None, "--path", "-p", help="path to use in the prompt"),
    no_cls: bool = typer.Option(False, "--no-cls", "-n", help="disable the clear screen between commands"),
    interactive: bool = typer.Option(
        False, "--interactive", "-I", help="type the commands in before playback when nothing else is given"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="print the version and exit"
    ),
) -> None:
    renderer = create_renderer()
    try:
        settings = get_settings(
            config,
            input_file=input_file,
            char_delay=char_delay,
            pre_delay=pre_delay,
            post_delay=post_delay,
            shell=shell,
            prompt_username=username,
            prompt_hostname=hostname,
            prompt_path=path,
            no_cls=True if no_cls else None,
        )
        configure_logging(settings.log_level)
        _report_config_file(config, renderer)

        text = _acquire_input(settings, command or [], interactive)
        if text is None:
            typer.echo(ctx.get_help())
            return

        commands = split_commands(text)
        if not commands:
            raise InputError("no commands to type")
    except AutotyperError as exc:
        renderer.error(str(exc))
        raise typer.Exit(1) from exc

    player = Player(
        _build_prompt(settings),
        PlaybackOptions(
            char_delay=settings.char_delay,
            pre_delay=settings.pre_delay,
            post_delay=settings.post_delay,
            clear_between=not settings.no_cls,
        ),
        renderer=renderer,
    )
    try:
        summary = player.run(commands)
    except KeyboardInterrupt:
        sys.stdout.write(f"{RESET}\n")
        sys.stdout.flush()
        raise typer.Exit(130) from None
    logger.debug("played {} commands, {} failed", summary.played, summary.failed)


if __name__ == "__main__":
    app()
