"""Typer-powered command line interface over :class:`openai_rest.Client`."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer

from . import Client, ConfigurationError, read_config_file
from .core import Result
from .descriptors import ChatCompletionRequest, EmbeddingRequest, FileUploadRequest

app = typer.Typer(
    add_completion=False,
    help=(
        "Call the REST API from the shell. Successful calls print the JSON "
        "response; failures print the error and exit with status 1."
    ),
)

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to a JSON or YAML configuration file.")


def _ensure_client(config: Optional[Path]) -> Client:
    """Instantiate the client, surfacing helpful credential errors."""

    try:
        if config is None:
            return Client.from_config()
        if not config.exists():
            raise typer.BadParameter(f"Configuration file '{config}' was not found.")
        return Client.from_config(read_config_file(config))
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc


def _read_prompt(argument: Optional[str]) -> str:
    """Resolve the user prompt either from an argument or standard input."""

    if argument and argument != "-":
        return argument
    data = sys.stdin.read()
    if not data.strip():
        raise typer.BadParameter("Provide a prompt argument or pipe text via standard input.")
    return data.strip()


def _render(result: Result) -> None:
    """Print a success as JSON or abort with the failure message."""

    if not result.ok:
        status = f" (HTTP {result.status})" if result.status is not None else ""
        typer.echo(f"Error: {result.message}{status}", err=True)
        raise typer.Exit(1)
    typer.echo(json.dumps(result.value, indent=2, ensure_ascii=False))


def _first_message(value: Any) -> Optional[str]:
    try:
        return value["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None


@app.command()
def models(config: Optional[Path] = _CONFIG_OPTION) -> None:
    """List the models available to the configured key."""

    with _ensure_client(config) as client:
        _render(client.models.list())


@app.command()
def chat(
    prompt: str = typer.Argument(..., help="Prompt to send to the assistant. Use '-' to read from stdin."),
    *,
    model: str = typer.Option(..., "--model", "-m", help="Model identifier to target."),
    temperature: Optional[float] = typer.Option(None, "--temperature", "-t", help="Sampling temperature."),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens", help="Upper bound on generated tokens."),
    json_output: bool = typer.Option(False, "--json/--no-json", help="Emit the full JSON response."),
    config: Optional[Path] = _CONFIG_OPTION,
) -> None:
    """Send a prompt and print the assistant response."""

    request = (
        ChatCompletionRequest(model, [{"role": "user", "content": _read_prompt(prompt)}])
        .temperature(temperature)
        .max_tokens(max_tokens)
    )
    with _ensure_client(config) as client:
        result = client.completions.create_chat(request)
    text = _first_message(result.value) if result.ok and not json_output else None
    if text is None:
        _render(result)
        return
    typer.echo(text)


@app.command()
def embed(
    texts: Optional[List[str]] = typer.Argument(None, help="Texts to embed. Use '-' or omit to read from stdin."),
    *,
    model: str = typer.Option(..., "--model", "-m", help="Embedding model identifier."),
    dimensions: Optional[int] = typer.Option(None, "--dimensions", help="Requested vector size."),
    config: Optional[Path] = _CONFIG_OPTION,
) -> None:
    """Generate embeddings for one or more pieces of text."""

    values = [value for value in (texts or []) if value != "-"]
    if not values or "-" in (texts or []):
        values.append(_read_prompt(None))
    with _ensure_client(config) as client:
        _render(client.embeddings.create(EmbeddingRequest(model, values).dimensions(dimensions)))


@app.command()
def upload(
    path: Path = typer.Argument(..., help="File to upload."),
    *,
    purpose: str = typer.Option(..., "--purpose", "-p", help="Intended use, e.g. fine-tune or assistants."),
    config: Optional[Path] = _CONFIG_OPTION,
) -> None:
    """Upload a local file."""

    with _ensure_client(config) as client:
        _render(client.files.upload(FileUploadRequest(path, purpose)))


def main() -> None:
    """Entry point compatible with ``python -m openai_rest.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
