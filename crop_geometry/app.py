"""
Command-line entry point.

Usage:
    python -m crop_geometry info photo.jpg --aspect 16:9 --width 800
    crop-geometry crop photo.jpg out.png --x 10 --y 10 --width 50 --height 50 --unit %
    crop-geometry max photo.jpg se --x 10 --y 10 --width 100 --aspect 1
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from PIL import Image, UnidentifiedImageError
from rich.console import Console
from rich.table import Table

from crop_geometry import __version__
from crop_geometry.aspect import parse_aspect, resolve_crop
from crop_geometry.config import (
    APP_NAME, JPEG_QUALITY_DEFAULT, ORDINALS, PNG_COMPRESS_LEVEL, UNIT_PX, UNITS,
)
from crop_geometry.containment import contain_crop
from crop_geometry.extent import get_max_crop
from crop_geometry.image_io import crop_image, get_image_size, open_image, unique_path
from crop_geometry.models import Crop
from crop_geometry.units import convert_to_percent_crop, convert_to_pixel_crop

app = typer.Typer(
    name=APP_NAME,
    help="Resolve, contain and apply image crop boxes",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)

console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit if --version flag is provided."""
    if value:
        typer.echo(f"{APP_NAME} version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Helpers
# =============================================================================
def _build_crop(x, y, width, height, unit: str, aspect: Optional[str]) -> Crop:
    if unit not in UNITS:
        raise typer.BadParameter(f"unit must be one of {', '.join(UNITS)}", param_hint="--unit")
    try:
        aspect_value = parse_aspect(aspect) if aspect is not None else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--aspect") from exc
    return Crop(x=x, y=y, width=width, height=height, unit=unit, aspect=aspect_value)


def _image_size(path: Path) -> tuple[int, int]:
    try:
        return get_image_size(path)
    except (UnidentifiedImageError, OSError) as e:
        console.print(f"[red]Error:[/red] Cannot read image {path}: {e}")
        raise typer.Exit(1)


def _output_format(path: Path) -> str:
    """Pillow format name that writes ``path``'s suffix."""
    out_format = Image.registered_extensions().get(path.suffix.lower())
    if out_format is None or out_format not in Image.SAVE:
        raise typer.BadParameter(f"no image writer for suffix {path.suffix!r}", param_hint="OUTPUT")
    return out_format


def _contained_pixel_crop(crop: Crop, img_w: int, img_h: int) -> Crop:
    pixel_crop = resolve_crop(convert_to_pixel_crop(crop, img_w, img_h), img_w, img_h)
    return contain_crop(pixel_crop, pixel_crop, img_w, img_h)


def _crop_table(title: str, rows: dict[str, Crop]) -> Table:
    table = Table(title=title)
    table.add_column("")
    for column in ("x", "y", "width", "height", "aspect"):
        table.add_column(column, justify="right")
    for label, crop in rows.items():
        aspect = "-" if crop.aspect is None else f"{crop.aspect:.4g}"
        table.add_row(
            f"{label} ({crop.unit})",
            f"{crop.x:.2f}", f"{crop.y:.2f}", f"{crop.width:.2f}", f"{crop.height:.2f}",
            aspect,
        )
    return table


# =============================================================================
# Commands
# =============================================================================
@app.command()
def info(
    image: Path = typer.Argument(..., help="Input image", exists=True, dir_okay=False, resolve_path=True),
    x: Optional[float] = typer.Option(None, "--x", help="Left offset"),
    y: Optional[float] = typer.Option(None, "--y", help="Top offset"),
    width: Optional[float] = typer.Option(None, "--width", "-W", help="Crop width"),
    height: Optional[float] = typer.Option(None, "--height", "-H", help="Crop height"),
    unit: str = typer.Option(UNIT_PX, "--unit", "-u", help="Unit of the crop values: 'px' or '%'"),
    aspect: Optional[str] = typer.Option(None, "--aspect", "-a", help="Aspect lock, e.g. '16:9', '1.5' or 'square'"),
) -> None:
    """Show the image size and the resolved crop in both units."""
    crop = _build_crop(x, y, width, height, unit, aspect)
    img_w, img_h = _image_size(image)
    pixel_crop = _contained_pixel_crop(crop, img_w, img_h)

    console.print(f"Image: {image.name} ({img_w} x {img_h})")
    console.print(_crop_table("Resolved crop", {
        "pixel": pixel_crop,
        "percent": convert_to_percent_crop(pixel_crop, img_w, img_h),
    }))


@app.command(name="max")
def max_extent(
    image: Path = typer.Argument(..., help="Input image", exists=True, dir_okay=False, resolve_path=True),
    ordinal: str = typer.Argument(..., help=f"Active handle: {', '.join(ORDINALS)}"),
    x: Optional[float] = typer.Option(None, "--x", help="Left offset"),
    y: Optional[float] = typer.Option(None, "--y", help="Top offset"),
    width: Optional[float] = typer.Option(None, "--width", "-W", help="Crop width"),
    height: Optional[float] = typer.Option(None, "--height", "-H", help="Crop height"),
    unit: str = typer.Option(UNIT_PX, "--unit", "-u", help="Unit of the crop values: 'px' or '%'"),
    aspect: Optional[str] = typer.Option(None, "--aspect", "-a", help="Aspect lock, e.g. '16:9', '1.5' or 'square'"),
) -> None:
    """Show the largest crop reachable by dragging one handle."""
    crop = _build_crop(x, y, width, height, unit, aspect)
    img_w, img_h = _image_size(image)
    pixel_crop = _contained_pixel_crop(crop, img_w, img_h)
    try:
        max_crop = get_max_crop(pixel_crop, ordinal, img_w, img_h)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="ORDINAL") from exc

    console.print(_crop_table(f"Max crop from '{ordinal}'", {
        "current": pixel_crop,
        "max": max_crop,
    }))


@app.command()
def crop(
    image: Path = typer.Argument(..., help="Input image", exists=True, dir_okay=False, resolve_path=True),
    output: Path = typer.Argument(..., help="Output file, format from its suffix; never overwritten"),
    x: Optional[float] = typer.Option(None, "--x", help="Left offset"),
    y: Optional[float] = typer.Option(None, "--y", help="Top offset"),
    width: Optional[float] = typer.Option(None, "--width", "-W", help="Crop width"),
    height: Optional[float] = typer.Option(None, "--height", "-H", help="Crop height"),
    unit: str = typer.Option(UNIT_PX, "--unit", "-u", help="Unit of the crop values: 'px' or '%'"),
    aspect: Optional[str] = typer.Option(None, "--aspect", "-a", help="Aspect lock, e.g. '16:9', '1.5' or 'square'"),
) -> None:
    """Crop an image and save the result."""
    crop_value = _build_crop(x, y, width, height, unit, aspect)
    out_format = _output_format(output)

    try:
        img = open_image(image)
        cropped = crop_image(img, crop_value)
    except (UnidentifiedImageError, OSError) as e:
        console.print(f"[red]Error:[/red] Cannot read image {image}: {e}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        out_path = unique_path(output)
        if out_format == "JPEG":
            cropped.convert("RGB").save(str(out_path), out_format, quality=JPEG_QUALITY_DEFAULT)
        elif out_format == "PNG":
            cropped.save(str(out_path), out_format, compress_level=PNG_COMPRESS_LEVEL)
        else:
            cropped.save(str(out_path), out_format)
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot write {output}: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Saved {cropped.width} x {cropped.height} crop to {out_path}")


def main():
    app()


if __name__ == "__main__":
    main()
