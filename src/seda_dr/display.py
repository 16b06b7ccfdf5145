"""Console output for data request results."""

from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

custom_theme = Theme({
    "ok":   "bold green",
    "warn": "bold yellow",
    "err":  "bold red",
    "info": "bold cyan",
})
console = Console(theme=custom_theme)
err_console = Console(theme=custom_theme, stderr=True)


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_record(record: Dict[str, Any], title: Optional[str] = "Data Request Result") -> Table:
    table = Table(title=title, show_header=True, header_style="info")
    table.add_column("(index)", style="bold", no_wrap=True)
    table.add_column("Values", overflow="fold")
    for key, value in record.items():
        table.add_row(key, format_value(value))
    return table


def print_record(record: Dict[str, Any], title: Optional[str] = "Data Request Result"):
    console.print(render_record(record, title))

    # Long values fold inside the table; repeat them unbroken so they can be copied
    for label, key in (("DR ID", "dr_id"), ("Explorer", "explorer_link")):
        if key in record:
            print_line(label, format_value(record[key]))


def print_line(label: str, value: str):
    console.print(Text.assemble((f"{label}: ", "info"), value), soft_wrap=True)


def error_panel(title: str, msg: str):
    err_console.print(Panel.fit(Text(msg, no_wrap=False), title=title, border_style="red"))
