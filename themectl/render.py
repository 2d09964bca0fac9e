"""Output rendering and formatting utilities.

This module provides the formatters used by the command-line interface to
display theme data as tables, JSON, or YAML.
"""

import json
from typing import Any, Dict, List, Optional, Union

import yaml
from rich import box
from rich.console import Console
from rich.table import Table

from .exceptions import ValidationError


class OutputFormatter:
    """Main output formatter that handles multiple output formats."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize output formatter.

        Args:
            console: Rich console instance. If None, creates a new one.
        """
        self.console = console or Console()

    def render(
        self,
        data: Any,
        format: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Render data in the specified format.

        Args:
            data: Data to render
            format: Output format (table, json, yaml); table when omitted
            **kwargs: Additional formatting options
        """
        format_name = (format or "table").lower()

        if format_name == "table":
            self.render_table(data, **kwargs)
        elif format_name == "json":
            self.render_json(data)
        elif format_name == "yaml":
            self.render_yaml(data)
        else:
            raise ValidationError(f"Unknown output format: {format_name}")

    def render_table(
        self,
        data: Union[List[Dict[str, Any]], Dict[str, Any]],
        columns: Optional[List[str]] = None,
        title: Optional[str] = None,
        show_header: bool = True,
        show_lines: bool = False,
    ) -> None:
        """Render data as a table using Rich.

        Args:
            data: Rows to render; a single dict renders as one row
            columns: Column names to display, all keys when omitted
            title: Table title
            show_header: Whether to show column headers
            show_lines: Whether to show row separators
        """
        if not data:
            self.console.print("[dim]No data to display[/dim]")
            return

        if isinstance(data, dict):
            data = [data]

        if not columns:
            columns = []
            for item in data:
                for key in item:
                    if key not in columns:
                        columns.append(key)

        table = Table(
            title=title,
            show_header=show_header,
            show_lines=show_lines,
            box=box.ROUNDED,
        )

        for col in columns:
            table.add_column(col.replace("_", " ").title(), overflow="fold")

        for item in data:
            row = []
            for col in columns:
                value = item.get(col, "")
                if value is None:
                    value = ""
                elif isinstance(value, bool):
                    value = "✓" if value else "✗"
                elif isinstance(value, (list, dict)):
                    value = str(value)
                row.append(str(value))
            table.add_row(*row)

        self.console.print(table)

    def render_properties(self, data: Dict[str, Any], title: Optional[str] = None) -> None:
        """Render a mapping as a two-column property table."""
        table = Table(title=title, box=box.ROUNDED)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="bold")
        for key, value in data.items():
            table.add_row(key.replace("_", " ").title(), "" if value is None else str(value))
        self.console.print(table)

    def render_json(self, data: Any, indent: int = 2) -> None:
        """Render data as JSON.

        Args:
            data: Data to render
            indent: Indentation level for pretty printing
        """
        try:
            output = json.dumps(data, indent=indent, ensure_ascii=False, default=str)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Failed to serialize data to JSON: {e}") from e
        print(output)

    def render_yaml(self, data: Any) -> None:
        """Render data as YAML.

        Args:
            data: Data to render
        """
        try:
            print(yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False), end="")
        except yaml.YAMLError as e:
            raise ValidationError(f"Failed to serialize data to YAML: {e}") from e
