"""Presentation helpers used by :mod:`promptline.cli.app`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

import pyfiglet
from tabulate import tabulate
from termcolor import colored


@dataclass
class BannerSections:
    """Structured representation of the CLI banner content."""

    heading: str
    footer_lines: list[str]


class CLIUIHelpers:
    """Utility helpers for rendering banners and result summaries."""

    def __init__(self, *, font: str = "slant", color: Optional[str] = "blue") -> None:
        self.font = font
        self.color = color

    def render_banner(self, display_name: str, banner: str, *, table_width: int = 75) -> BannerSections:
        """Return the figlet heading and the framed banner line."""

        banner_text = pyfiglet.figlet_format(display_name, font=self.font)
        colored_banner = colored(banner_text, color=self.color)
        heading = tabulate([[colored_banner]], tablefmt="plain")
        rule = "=" * table_width
        footer_lines = [rule, banner.center(table_width), rule]
        return BannerSections(heading=heading, footer_lines=footer_lines)

    def display_banner(
        self,
        echo: Callable[[str], None],
        display_name: str,
        banner: str,
        *,
        table_width: int = 75,
    ) -> None:
        sections = self.render_banner(display_name, banner, table_width=table_width)
        echo(sections.heading)
        for line in sections.footer_lines:
            echo(line)

    def render_results(self, results: Mapping[str, Any]) -> str:
        """Return collected results as a two column table."""

        rows = [[name, _describe_value(value)] for name, value in results.items()]
        return tabulate(rows, headers=["Field", "Value"], tablefmt="fancy_grid")


def _describe_value(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


__all__ = ["CLIUIHelpers", "BannerSections"]
