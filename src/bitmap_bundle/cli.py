"""
CLI for inspecting bitmap bundles.

Commands:
- info: Show the variants of a bundle and its default size
- resolve: Resolve one or more sizes and optionally save the result
"""

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .bundle import BitmapBundle, resolve as resolve_source
from .config import settings
from .errors import BitmapBundleError
from .images import Size, create_image_backend
from .logging import setup_logging

app = typer.Typer(
    name="bitmap-bundle",
    help="Inspect multi-resolution bitmap bundles and resolve bitmaps of any size",
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Bitmap Bundle - one graphic, many resolutions."""
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, json_output=settings.log_json)
    logger.debug("CLI initialized with log level: {}", log_level)


def _load_bundle(sources: list[str], resample: str) -> BitmapBundle:
    """Load a bundle for a command, exiting with status 1 on failure."""
    try:
        backend = create_image_backend(settings.image_backend, resample=resample)
        bundle = BitmapBundle.from_files(sources, backend=backend)
    except (BitmapBundleError, ValueError) as e:
        logger.error("Cannot load bundle: {}", e)
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1) from e

    if not bundle.is_ok():
        logger.error("Bundle is empty: {}", sources)
        console.print("[red]Error: no valid bitmaps in bundle[/]")
        raise typer.Exit(1)
    return bundle


@app.command()
def info(
    sources: list[str] = typer.Argument(..., help="Variant image files or URLs"),
):
    """Show the variants of a bundle and its default size."""
    logger.debug("Inspecting bundle from {} sources", len(sources))
    bundle = _load_bundle(sources, settings.resample_filter)

    table = Table(title="Variants")
    table.add_column("#", style="cyan")
    table.add_column("Source", style="cyan")
    table.add_column("Size", style="green")
    table.add_column("Area", style="green")
    for index, (source, variant) in enumerate(zip(sources, bundle.variants)):
        table.add_row(str(index), source, str(variant.size), str(variant.size.area))

    console.print(table)
    console.print(f"Default size: [bold]{bundle.default_size()}[/]")


@app.command()
def resolve(
    sources: list[str] = typer.Argument(..., help="Variant image files or URLs"),
    sizes: list[str] = typer.Option(
        ..., "--size", "-s", help="Requested size as WxH (repeatable)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Save the last resolved bitmap to this file"
    ),
    resample: str = typer.Option(
        settings.resample_filter, "--resample", "-r", help="Resampling filter"
    ),
):
    """Resolve bitmaps of the requested sizes from a bundle."""
    bundle = _load_bundle(sources, resample)
    logger.info("Resolving {} sizes from {}", len(sizes), bundle)

    table = Table(title="Resolved Bitmaps")
    table.add_column("Requested", style="cyan")
    table.add_column("Result", style="green")
    table.add_column("Source", style="green")

    bitmap = None
    for raw in sizes:
        try:
            target = Size.coerce(raw)
            if bundle.variants.find_exact(target) is not None:
                outcome, source = "exact variant", str(target)
            elif bundle.is_cached(target):
                outcome, source = "cache hit", "-"
            else:
                outcome = "rescaled"
                source = str(resolve_source(bundle.variants, target).size)
            bitmap = bundle.get_bitmap(target)
        except BitmapBundleError as e:
            logger.error("Cannot resolve {}: {}", raw, e)
            console.print(f"[red]Error: {e}[/]")
            raise typer.Exit(1) from e
        table.add_row(str(target), outcome, source)

    console.print(table)

    if output is not None and bitmap is not None:
        try:
            bitmap.save(output)
        except (ValueError, OSError) as e:
            logger.error("Cannot save bitmap to {}: {}", output, e)
            console.print(f"[red]Error: cannot save {output}: {e}[/]")
            raise typer.Exit(1) from e
        logger.info("Saved bitmap to {}", output)
        console.print(f"[green]Saved {output}[/]")


if __name__ == "__main__":
    app()
