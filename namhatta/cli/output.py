"""
Rendering of structured command output.

Tools print data as YAML (human-readable), JSON (for scripts) or a rich
table of flattened keys.
"""

import json
from typing import Any

import yaml  # type: ignore[import-untyped]
from rich.table import Table
from rich.text import Text

FORMATS = ("yaml", "json")


def format_yaml(data: dict[str, Any]) -> str:
    result: str = yaml.dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=2,
    )
    return result.rstrip()


def format_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, sort_keys=False)


def format_data(data: dict[str, Any], output_format: str) -> str:
    """Format data as "yaml" or "json"."""
    if output_format == "json":
        return format_json(data)
    if output_format == "yaml":
        return format_yaml(data)
    raise ValueError(f"unsupported output format: {output_format}")


def flatten(data: dict[str, Any], prefix: str = "") -> list[tuple[str, str]]:
    """Recursively flatten a dictionary to (dotted.key, value) pairs."""
    result: list[tuple[str, str]] = []
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            result.extend(flatten(value, full_key))
        elif value is None:
            result.append((full_key, ""))
        elif isinstance(value, bool):
            result.append((full_key, str(value).lower()))
        elif isinstance(value, list):
            result.append((full_key, " ".join(str(v) for v in value)))
        else:
            result.append((full_key, str(value)))
    return result


def make_table(data: dict[str, Any], title: str | None = None) -> Table:
    """Two-column key/value table of the flattened data."""
    table = Table(title=title, show_header=True, header_style="key")
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Value", style="value")
    for key, value in flatten(data):
        table.add_row(Text(key), Text(value))
    return table
