"""Shared option handling for the CLI commands."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from ..config import CodecConfig, ConfigLoader
from ..vocab import DOCUMENT_TYPES

VOCABULARY_CHOICE = click.Choice(sorted(DOCUMENT_TYPES), case_sensitive=False)


def load_config(
    config_file: Path | None,
    *,
    strict: bool | None = None,
    pretty_print: bool | None = None,
) -> CodecConfig:
    """Load the runtime config and apply command-line overrides."""
    config = ConfigLoader.load(config_file=config_file)
    changes: dict[str, bool] = {}
    if strict is not None:
        changes["strict"] = strict
    if pretty_print is not None:
        changes["pretty_print"] = pretty_print
    return dataclasses.replace(config, **changes) if changes else config


def resolve_vocabulary(name: str) -> type:
    return DOCUMENT_TYPES[name.lower()]
