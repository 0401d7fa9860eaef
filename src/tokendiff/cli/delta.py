"""tokendiff delta command - perceptual difference between two hex colors."""

import json

import click

from tokendiff.matching.colorspace import calculate_delta


@click.command()
@click.argument("old_hex")
@click.argument("new_hex")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def delta_command(old_hex: str, new_hex: str, as_json: bool) -> None:
    """Show the HSL delta from OLD_HEX to NEW_HEX."""
    delta = calculate_delta(old_hex, new_hex)
    if as_json:
        click.echo(json.dumps({"old": old_hex, "new": new_hex, **delta.to_dict()}))
        return

    click.echo(f"{old_hex} -> {new_hex}")
    click.echo(f"Classification: {delta.classification.label} ({delta.magnitude:.1f})")
    click.echo(f"Hue: {delta.hue_delta:+.1f}°")
    click.echo(f"Saturation: {delta.saturation_delta:+.1f}%")
    click.echo(f"Lightness: {delta.lightness_delta:+.1f}%")
    click.echo(delta.description)
