"""CLI entry point for curl2py."""

from pathlib import Path

import click

from curl2py.config import resolve_options
from curl2py.converter import convert as convert_curl
from curl2py.exceptions import Curl2PyError
from curl2py.generator.options import Library, default_filename
from curl2py.generator.validator import validate_python
from curl2py.samples import SAMPLE_COMMANDS, get_sample


def _read_command(command: str | None, file: Path | None, example: int | None) -> str:
    """Pick the cURL text from --example, --file, the argument or stdin."""
    given = [example is not None, file is not None, command is not None and command != "-"]
    if sum(given) > 1:
        raise click.UsageError("Give only one of COMMAND, --file or --example.")
    if example is not None:
        return get_sample(example)
    if file is not None:
        return file.read_text(encoding="utf-8")
    if command is not None and command != "-":
        return command
    return click.get_text_stream("stdin").read()


def _output_path(output: Path, library: Library) -> Path:
    if output.is_dir():
        return output / default_filename(library)
    return output


@click.group()
def main():
    """Turn cURL commands into requests, httpx or aiohttp code."""
    pass


@main.command()
@click.argument("command", required=False)
@click.option("-f", "--file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Read the cURL command from a file.")
@click.option("--example", type=click.IntRange(min=1), default=None, help="Convert built-in sample N (see `curl2py examples`).")
@click.option("-l", "--library", type=click.Choice([lib.value for lib in Library]), default=None, help="Target library.")
@click.option("--imports/--no-imports", "include_imports", default=None, help="Emit import statements.")
@click.option("--wrap-async/--no-wrap-async", "wrap_async", default=None, help="Wrap async code in main() with asyncio.run.")
@click.option("--error-handling/--no-error-handling", "add_error_handling", default=None, help="Add try/except and raise_for_status.")
@click.option("--session/--no-session", "use_session", default=None, help="Use a Session/Client object.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None, help="YAML file with option defaults.")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Write code to this file (or directory).")
@click.option("--check", is_flag=True, help="Fail if the generated code has a syntax error.")
def convert(command: str | None, file: Path | None, example: int | None, library: str | None,
            include_imports: bool | None, wrap_async: bool | None, add_error_handling: bool | None,
            use_session: bool | None, config_path: Path | None, output: Path | None, check: bool):
    """Convert a cURL command into Python code.

    COMMAND is the whole cURL command as one argument; use "-" or omit it
    to read from stdin.
    """
    raw = _read_command(command, file, example)
    if not raw.strip():
        raise click.UsageError("No cURL command given.")

    try:
        options = resolve_options(
            {
                "library": library,
                "include_imports": include_imports,
                "wrap_async": wrap_async,
                "add_error_handling": add_error_handling,
                "use_session": use_session,
            },
            config_path,
        )
        code = convert_curl(raw, options)
    except Curl2PyError as e:
        raise click.ClickException(str(e)) from e

    if wrap_async is not None and not options.library.is_async:
        click.echo(f"Note: --wrap-async has no effect on {options.library.value}.", err=True)

    filename = default_filename(options.library)
    if check:
        errors = validate_python({filename: code})
        for name, err in errors.items():
            click.echo(f"  {name}: {err}", err=True)
        if errors:
            raise click.ClickException("Generated code failed the syntax check.")

    if output is None:
        click.echo(code, nl=False)
        return

    path = _output_path(output, options.library)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(code, encoding="utf-8")
    click.echo(f"Saved {path}", err=True)


@main.command()
def examples():
    """List the built-in sample cURL commands."""
    for n, sample in enumerate(SAMPLE_COMMANDS, start=1):
        click.echo(f"{n}. {sample}")
