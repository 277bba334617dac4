"""ANSI palette used by the presentation tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    reset: str
    dim: str
    menu_bar: str
    menu_logo: str
    button_label: str
    button_key: str
    table_header: str
    table_row: str
    table_row_alt: str
    table_selected: str
    table_match: str
    table_match_end: str
    scrollbar_track: str
    scrollbar_thumb: str
    details_border: str
    details_field: str
    details_value: str
    popup_border: str
    popup_title: str
    popup_heading: str
    status_bar: str


DEFAULT_THEME = UITheme(
    reset="\033[0m",
    dim="\033[2m",
    menu_bar="\033[48;5;236;38;5;252m",
    menu_logo="\033[1;48;5;236;38;5;81m",
    button_label="\033[48;5;236;38;5;252m",
    button_key="\033[48;5;236;38;5;229m",
    table_header="\033[1;48;5;24;38;5;255m",
    table_row="\033[48;5;234;38;5;252m",
    table_row_alt="\033[48;5;235;38;5;252m",
    table_selected="\033[7;38;5;81m",
    table_match="\033[1;4m",
    table_match_end="\033[22;24m",
    scrollbar_track="\033[48;5;238m",
    scrollbar_thumb="\033[48;5;250m",
    details_border="\033[38;5;24m",
    details_field="\033[1;3;4;38;5;110m",
    details_value="\033[38;5;252m",
    popup_border="\033[38;5;45m",
    popup_title="\033[1;38;5;45m",
    popup_heading="\033[3;38;5;81m",
    status_bar="\033[7m",
)


__all__ = ["DEFAULT_THEME", "UITheme"]
