"""CLI commands using Typer."""

from __future__ import annotations

import logging
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError

from filekit import __version__
from filekit.config import LOG_LEVELS, ConfigManager, Settings
from filekit.console import ConsoleUI
from filekit.context import create_context
from filekit.errors import FilesystemError

app = typer.Typer(
    name="filekit",
    help="Directory and file operations on the local filesystem",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")

ui = ConsoleUI()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        ui.console.print(f"filekit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    log_level: Annotated[
        str | None, typer.Option("--log-level", "-l", help="Logging level (default from config)")
    ] = None,
) -> None:
    """Directory and file operations on the local filesystem."""
    if log_level is not None:
        level = log_level.upper()
        if level not in LOG_LEVELS:
            raise typer.BadParameter(
                f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
            )
    else:
        config = ConfigManager.create_default()
        try:
            level = config.load().log_level
        except ValueError as e:
            _fail(ValueError(f"Invalid configuration in {config.config_file}: {e}"))
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _fail(error: Exception) -> NoReturn:
    """Report an error and exit with status 1."""
    ui.show_error(str(error))
    raise typer.Exit(1) from error


# ============================================================================
# Directory Commands
# ============================================================================


@app.command("ls")
def list_directory(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    filter: Annotated[
        str, typer.Option("--filter", "-f", help="Only files containing this text")
    ] = "",
    dirs: Annotated[bool, typer.Option("--dirs", "-d", help="List directories only")] = False,
    _context=None,
) -> None:
    """List subdirectories and files of a directory."""
    ctx = _context or create_context()
    try:
        directory = ctx.open_directory(path)
        directories = directory.list_directories()
        files = [] if dirs else directory.list_files(filter)
    except FilesystemError as e:
        _fail(e)
    ui.show_entries(directory.path, directories, files)


@app.command("mkdir")
def make_directory(
    path: Annotated[str, typer.Argument(help="Directory to create, with parents")],
    _context=None,
) -> None:
    """Create a directory and any missing parents."""
    ctx = _context or create_context()
    try:
        directory = ctx.make_directory(path)
    except FilesystemError as e:
        _fail(e)
    ui.show_success(f"Directory ready: {directory.path}")


@app.command("rm")
def remove(
    path: Annotated[str, typer.Argument(help="File or directory to delete")],
    keep_contents: Annotated[
        bool,
        typer.Option("--keep-contents", help="Only remove a directory if it is already empty"),
    ] = False,
    _context=None,
) -> None:
    """Delete a file, or a directory with its contents."""
    ctx = _context or create_context()
    file = ctx.open_file(path)
    try:
        if file.exists():
            file.delete()
        else:
            ctx.open_directory(path).delete(recursive=not keep_contents)
    except FilesystemError as e:
        _fail(e)
    ui.show_success(f"Deleted {path}")


@app.command("cp")
def copy(
    source: Annotated[str, typer.Argument(help="Source directory")],
    target: Annotated[str, typer.Argument(help="Target directory")],
    filter: Annotated[
        str, typer.Option("--filter", "-f", help="Only files containing this text")
    ] = "",
    move: Annotated[
        bool, typer.Option("--move", "-m", help="Delete source files after copying")
    ] = False,
    _context=None,
) -> None:
    """Copy the files of one directory into another."""
    ctx = _context or create_context()
    try:
        directory = ctx.open_directory(source)
        count = len(directory.list_files(filter))
        directory.copy_files(ctx.open_directory(target), filter=filter, delete=move)
    except FilesystemError as e:
        _fail(e)
    ui.show_success(f"{'Moved' if move else 'Copied'} {count} file(s) to {target}")


@app.command("rename")
def rename(
    path: Annotated[str, typer.Argument(help="Directory whose files are renamed")],
    pad: Annotated[int, typer.Option("--pad", help="Zero-pad numbers to this width")] = 0,
    prefix: Annotated[str, typer.Option("--prefix", help="Text before each number")] = "",
    filter: Annotated[
        str, typer.Option("--filter", "-f", help="Only files containing this text")
    ] = "",
    start: Annotated[int, typer.Option("--start", help="First number")] = 0,
    _context=None,
) -> None:
    """Rename files to a numbered sequence in name order."""
    ctx = _context or create_context()
    try:
        directory = ctx.open_directory(path)
        directory.rename_sequential(pad=pad, prefix=prefix, filter=filter, start=start)
    except FilesystemError as e:
        _fail(e)
    ui.show_success(f"Renamed files in {directory.path}")


# ============================================================================
# File Commands
# ============================================================================


@app.command("cat")
def cat(
    path: Annotated[str, typer.Argument(help="File to print")],
    _context=None,
) -> None:
    """Print the content of a file."""
    ctx = _context or create_context()
    try:
        content = ctx.open_file(path).get_content()
    except FilesystemError as e:
        _fail(e)
    ui.show_text(content)


@app.command("write")
def write(
    path: Annotated[str, typer.Argument(help="File to write")],
    content: Annotated[str, typer.Argument(help="Text to write")],
    append: Annotated[bool, typer.Option("--append", "-a", help="Append instead of replace")] = False,
    _context=None,
) -> None:
    """Replace or append to the content of a file."""
    ctx = _context or create_context()
    file = ctx.open_file(path)
    try:
        written = file.append_content(content) if append else file.replace_content(content)
    except FilesystemError as e:
        _fail(e)
    ui.show_success(f"Wrote {written} bytes to {path}")


@app.command("mv")
def move(
    path: Annotated[str, typer.Argument(help="File to move")],
    target: Annotated[str, typer.Argument(help="Target directory, created if missing")],
    _context=None,
) -> None:
    """Move a file into a directory."""
    ctx = _context or create_context()
    file = ctx.open_file(path)
    try:
        moved = file.move_to(ctx.make_directory(target))
    except FilesystemError as e:
        _fail(e)
    if not moved:
        ui.show_error(f"Could not move {path} to {target}")
        raise typer.Exit(1)
    ui.show_success(f"Moved to {file.get_path()}")


@app.command("mime")
def mime(
    path: Annotated[str, typer.Argument(help="File to inspect")],
    encoding: Annotated[
        bool, typer.Option("--encoding", "-e", help="Include the charset")
    ] = False,
    _context=None,
) -> None:
    """Print the MIME type of a file."""
    ctx = _context or create_context()
    try:
        mime_type = ctx.open_file(path).get_mime_type(with_encoding=encoding)
    except FilesystemError as e:
        _fail(e)
    if mime_type is None:
        ui.show_warning(f"Unknown type: {path}")
        raise typer.Exit(1)
    ui.console.print(mime_type, highlight=False)


@app.command("headers")
def headers(
    path: Annotated[str, typer.Argument(help="File to offer for download")],
    filename: Annotated[
        str | None, typer.Option("--filename", help="Name offered to the client")
    ] = None,
    _context=None,
) -> None:
    """Print the HTTP headers for downloading a file."""
    ctx = _context or create_context()
    try:
        download_headers = ctx.open_file(path).get_download_headers(filename)
    except FilesystemError as e:
        _fail(e)
    ui.show_headers(download_headers)


@app.command("info")
def info(
    path: Annotated[str, typer.Argument(help="File to describe")],
    _context=None,
) -> None:
    """Show size, modification time and type of a file."""
    ctx = _context or create_context()
    file = ctx.open_file(path)
    try:
        ui.show_file_info(
            path=file.get_path(),
            size=file.get_size(),
            modified=file.get_modification_time(),
            mime_type=file.get_mime_type(),
            is_image=file.is_image(),
        )
    except FilesystemError as e:
        _fail(e)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or create_context()
    ui.show_settings(ctx.settings, str(ctx.config.config_file))


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Configuration key")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
    _context=None,
) -> None:
    """Set a configuration value.

    Keys: dir-mode (octal, e.g. 750), content-sniffing (true/false),
    log-level (DEBUG, INFO, WARNING, ERROR).
    """
    ctx = _context or create_context()
    fields = {
        "dir-mode": "dir_mode",
        "content-sniffing": "content_sniffing",
        "log-level": "log_level",
    }
    if key not in fields:
        ui.show_error(f"Unknown configuration key: {key}")
        raise typer.Exit(1)

    data = ctx.settings.model_dump()
    if key == "dir-mode":
        try:
            data["dir_mode"] = int(value, 8)
        except ValueError:
            _fail(ValueError(f"Invalid octal mode: {value}"))
    else:
        data[fields[key]] = value

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        _fail(e)
    ctx.config.save(settings)
    ctx.settings = settings
    ui.show_success(f"Set {key} to {value}")
