import typer
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import ConfigManager, Ordering, resolve_config_file
from .downloader import FetchError
from .logging_utils import setup_logging
from .pipeline import is_stdout, run_pipeline

app = typer.Typer(add_completion=False)


def _explicit_settings(no_sort_attributes: bool,
                       no_sort_children: bool,
                       compress: bool,
                       compress_values: bool,
                       ordering: Optional[Ordering],
                       pretty: bool) -> Dict[str, Any]:
    """Settings given as dedicated options; flags left at their default do not override the configuration."""
    normalize: Dict[str, Any] = {}
    if no_sort_attributes:
        normalize["sort_attributes"] = False
    if no_sort_children:
        normalize["sort_children"] = False
    if compress:
        normalize["compress"] = True
    if compress_values:
        normalize["compress_values"] = True
    if ordering is not None:
        normalize["ordering"] = ordering

    explicit: Dict[str, Any] = {}
    if normalize:
        explicit["normalize"] = normalize
    if pretty:
        explicit["output"] = {"pretty_print": True}
    return explicit


@app.command()
def main(
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", "--file", "-f", dir_okay=False, help="Checkstyle configuration to normalize (default: checkstyle-in.xml)."),
    uri: Optional[str] = typer.Option(None, "--uri", "-u", help="Read the configuration from an http(s) or file URI instead."),
    output_file: Optional[Path] = typer.Option(None, "--output", "-o", dir_okay=False, help="Output file (default: checkstyle-out.xml); '-' writes to stdout."),
    in_place: bool = typer.Option(False, "--in-place", help="Overwrite the input file."),
    no_sort_attributes: bool = typer.Option(False, "--no-sort-attributes", help="Keep attributes in document order."),
    no_sort_children: bool = typer.Option(False, "--no-sort-children", help="Keep child elements in document order."),
    compress: bool = typer.Option(False, "--compress", "-c", help="Remove whitespace-only text between elements."),
    compress_values: bool = typer.Option(False, "--compress-values", help="Collapse whitespace inside value attributes."),
    ordering: Optional[Ordering] = typer.Option(None, "--ordering", case_sensitive=False, help="Child ordering profile."),
    pretty: bool = typer.Option(False, "--pretty", help="Re-indent the output."),
    check: bool = typer.Option(False, "--check", help="Write nothing; exit with code 1 if the document is not in canonical form."),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to the configuration TOML file. Defaults to config.toml in XDG config home or sortcheckstyle.toml in CWD."),
    override_configs: List[str] = typer.Option(None, "--set", help="Override configuration settings using path.to.key=value format. Can be used multiple times."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Sorts and compresses Checkstyle configuration files."""
    setup_logging(verbose)

    if uri and input_file:
        raise typer.BadParameter("--uri cannot be combined with --input.")
    if uri and in_place:
        raise typer.BadParameter("--in-place requires a file input, not --uri.")
    if in_place and output_file:
        raise typer.BadParameter("--in-place cannot be combined with --output.")

    try:
        config_path = resolve_config_file(config_file)
        config_manager = ConfigManager(config_path, required=config_file is not None)
        settings = config_manager.get_settings(
            overrides=override_configs,
            explicit=_explicit_settings(no_sort_attributes, no_sort_children, compress,
                                        compress_values, ordering, pretty),
        )
    except ValueError as e:
        typer.echo(f"Error loading configuration: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        result = run_pipeline(
            settings,
            input_file=input_file,
            uri=uri,
            output_file=output_file,
            in_place=in_place,
            check=check,
        )
    except (FetchError, ValueError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if check:
        if result.changed:
            raise typer.Exit(code=1)
        return
    if is_stdout(output_file) and not in_place:
        typer.echo(result.output, nl=False)


if __name__ == "__main__":
    app()
