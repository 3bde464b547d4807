"""CLI entry point for funnel."""

from __future__ import annotations

import logging
import os
import subprocess
import tomllib
from pathlib import Path
from typing import NoReturn

import click

from funnel.config import Config, ensure_config_file
from funnel.prompts.templates import DEFAULT_TEMPLATE, TemplateError, list_templates, render_prompt

_RULE = "=" * 80


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


@click.group()
@click.option("--template", "-t", default=None, help="Prompt template to render (see `funnel templates`).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default=None, help="Output format.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, template: str | None, output_format: str | None, verbose: bool) -> None:
    """Build language-model prompts from voice transcripts.

    Renders a bullet summary or lightly edited transcript prompt, ready to
    hand to a model.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    try:
        config = Config.load()
    except tomllib.TOMLDecodeError as e:
        _fail(f"could not parse config file: {e}")

    # Apply CLI overrides
    if template:
        config.prompts.template = template
    if not config.prompts.template:
        config.prompts.template = DEFAULT_TEMPLATE
    if output_format:
        config.output.format = output_format

    ctx.obj["config"] = config


def _render(config: Config, transcript: str) -> str:
    name = config.prompts.template
    if name not in list_templates(config.templates):
        _fail(f"unknown template {name!r}. Available: {', '.join(list_templates(config.templates))}")
    try:
        return render_prompt(name, transcript, config.templates)
    except TemplateError as e:
        _fail(str(e))


def _read_transcript(file: str) -> str:
    # Read bytes so CR and CRLF line endings survive.
    if file == "-":
        data = click.get_binary_stream("stdin").read()
    else:
        data = Path(file).read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        name = "stdin" if file == "-" else file
        _fail(f"could not decode {name} as UTF-8: {e}")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, allow_dash=True), default="-")
@click.option("--output", "-o", "output_path", type=click.Path(dir_okay=False), default=None,
              help="Write the prompt to a file instead of stdout.")
@click.pass_context
def render(ctx: click.Context, file: str, output_path: str | None) -> None:
    """Render a prompt for a transcript FILE (or stdin)."""
    config = ctx.obj["config"]
    transcript = _read_transcript(file)
    prompt = _render(config, transcript)

    if config.output.format == "json":
        from funnel.output.json_output import format_prompt_json

        text = format_prompt_json(config.prompts.template, transcript, prompt)
    else:
        text = prompt

    if output_path:
        path = Path(output_path)
        path.write_text(text + "\n", encoding="utf-8", newline="")
        click.echo(f"Prompt saved to {path}")
    else:
        click.echo(text, color=True)


@cli.command()
@click.pass_context
def templates(ctx: click.Context) -> None:
    """List available prompt templates."""
    config = ctx.obj["config"]
    default = config.prompts.template
    for name in list_templates(config.templates):
        suffix = " (custom)" if name in config.templates and config.templates[name].prompt else ""
        marker = "*" if name == default else " "
        click.echo(f"{marker} {name}{suffix}")


@cli.command()
@click.argument("name", required=False)
@click.pass_context
def samples(ctx: click.Context, name: str | None) -> None:
    """Render the built-in sample transcripts, or just sample NAME."""
    from funnel.prompts.samples import SAMPLES, get_sample

    config = ctx.obj["config"]
    if name:
        try:
            selected = [get_sample(name)]
        except KeyError:
            _fail(f"unknown sample {name!r}. Available: {', '.join(s.name for s in SAMPLES)}")
    else:
        selected = list(SAMPLES)

    rendered = [(s, _render(config, s.transcript)) for s in selected]

    if config.output.format == "json":
        from funnel.output.json_output import format_prompts_json

        click.echo(format_prompts_json([(config.prompts.template, s.transcript, p) for s, p in rendered]))
        return

    for sample, prompt in rendered:
        click.echo(f"\n{_RULE}\nSample: {sample.name}\n{_RULE}\n")
        click.echo(prompt, color=True)


@cli.command("config")
def config_cmd() -> None:
    """Open the configuration file in your editor."""
    path = ensure_config_file()
    editor = os.environ.get("EDITOR", "nano")
    click.echo(f"Opening {path} with {editor}...")
    subprocess.run([editor, str(path)])
