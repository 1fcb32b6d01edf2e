#!/usr/bin/env python3
"""Script Renderer CLI.

Command-line interface for inspecting how mixed-script text is segmented
and styled.
"""

import json
from typing import Any, Optional

import click

from script_renderer.segmentation import ScriptType, Segmenter
from script_renderer.styles import FontWeight, LocalizedText, default_registry
from script_renderer.utils.exceptions import ScriptRendererException
from script_renderer.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

_SCRIPT_CHOICE = click.Choice([script.value for script in ScriptType])
_WEIGHT_CHOICE = click.Choice([str(weight.value) for weight in FontWeight])


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@click.group()
def cli() -> None:
    """Script Renderer mixed-script text tools."""
    setup_logging()


@cli.command()
@click.argument("text")
def segment(text: str) -> None:
    """Split TEXT into script segments."""
    try:
        segments = Segmenter().segment(text)
    except ScriptRendererException as e:
        raise click.ClickException(str(e)) from e

    _echo_json(
        [{"text": seg.text, "script": seg.script.value} for seg in segments]
    )


@cli.command()
@click.argument("text")
@click.option("--font-size", "-s", type=float, help="Font size for all scripts")
@click.option("--color", "-c", help="Text color, e.g. '#1A1A1A'")
@click.option(
    "--font-weight", "-w", type=_WEIGHT_CHOICE, help="Font weight for all scripts"
)
@click.option("--khmer-font-family", help="Font family for Khmer text")
@click.option("--latin-font-family", help="Font family for Latin and neutral text")
def render(
    text: str,
    font_size: Optional[float],
    color: Optional[str],
    font_weight: Optional[str],
    khmer_font_family: Optional[str],
    latin_font_family: Optional[str],
) -> None:
    """Segment TEXT and print each span with its resolved style."""
    try:
        localized = LocalizedText.simple(
            text,
            font_size=font_size,
            color=color,
            font_weight=FontWeight(int(font_weight)) if font_weight else None,
            khmer_font_family=khmer_font_family,
            latin_font_family=latin_font_family,
        )
        payload = localized.to_dict()
    except ScriptRendererException as e:
        raise click.ClickException(str(e)) from e

    logger.debug("text_rendered", span_count=len(payload["spans"]))
    _echo_json(payload)


@cli.command()
@click.argument("script", type=_SCRIPT_CHOICE, required=False)
def fonts(script: Optional[str]) -> None:
    """Show the default font family and fallbacks for SCRIPT (or all scripts)."""
    scripts = [ScriptType(script)] if script else list(default_registry.scripts())

    _echo_json(
        {
            item.value: {
                "default": default_registry.default_family(item),
                "fallbacks": list(default_registry.fallback_chain(item)),
                "families": list(default_registry.families(item)),
            }
            for item in scripts
        }
    )


def main() -> None:
    """Entry point for the ``script-renderer`` console script."""
    cli()


if __name__ == "__main__":
    main()
