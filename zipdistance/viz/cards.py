"""HTML rendering of result cards, header and footer for the Gradio form."""

from __future__ import annotations

import html
from typing import Dict, Optional

from ..domain.models import BatchResult, OutcomeRecord, Theme

ERROR_BACKGROUND = "#f8d7da"
NEAREST_BACKGROUND = "#d4edda"
DEFAULT_BACKGROUND = "#eaf2f8"
ERROR_TEXT = "#a94442"

PALETTES: Dict[Theme, Dict[str, str]] = {
    Theme.LIGHT: {
        "background": "#fff",
        "text": "#000",
        "title": "#2c3e50",
        "footer": "#555",
    },
    Theme.DARK: {
        "background": "#1e1e1e",
        "text": "#f5f5f5",
        "title": "#f5f5f5",
        "footer": "#aaa",
    },
}


def card_background(record: OutcomeRecord) -> str:
    """Pick the card colour: error first, then nearest, then default."""
    if record.error is not None:
        return ERROR_BACKGROUND
    if record.is_min:
        return NEAREST_BACKGROUND
    return DEFAULT_BACKGROUND


def theme_toggle_label(theme: Theme) -> str:
    """Label of the button that switches away from *theme*."""
    return "🌙 Dark Mode" if theme is Theme.LIGHT else "☀ Light Mode"


def render_record_card(record: OutcomeRecord) -> str:
    """Render one outcome as an HTML card.

    Cards always use black text, whatever the page theme.
    """
    style = (
        f"flex: 1 1 45%; padding: 20px; border-radius: 12px; margin: 10px; "
        f"box-shadow: 0 4px 10px rgba(0,0,0,0.1); color: #000; "
        f"background-color: {card_background(record)};"
    )
    parts = [
        f'<div class="zd-card" style="{style}">',
        f"<h3>From ZIP: {html.escape(record.source)}</h3>",
    ]

    if record.result is None:
        parts.append(
            f'<p class="zd-error" style="color: {ERROR_TEXT}; font-weight: 600;">'
            f"{html.escape(record.error or '')}</p>"
        )
    else:
        row = "display: flex; justify-content: space-between; margin-bottom: 8px;"
        r = record.result
        parts.append(
            f'<div style="{row}"><span style="font-weight: 600;">Distance:</span>'
            f"<span>{r.distance_km} km / {r.distance_miles} miles</span></div>"
        )
        parts.append(
            f'<div style="{row}"><span style="font-weight: 600;">Duration:</span>'
            f"<span>{r.duration_mins} minutes</span></div>"
        )

    parts.append("</div>")
    return "".join(parts)


def render_results(batch: Optional[BatchResult]) -> str:
    """Render a batch as a grid of cards, or nothing for an empty batch."""
    if batch is None or len(batch) == 0:
        return ""
    cards = "".join(render_record_card(record) for record in batch)
    return (
        '<div class="zd-grid" style="display: flex; flex-wrap: wrap; '
        f'justify-content: center; margin-top: 30px;">{cards}</div>'
    )


def render_header(title: str, theme: Theme) -> str:
    """Render the page title painted with the theme palette."""
    palette = PALETTES[theme]
    return (
        f'<div style="background-color: {palette["background"]}; padding: 10px 20px;">'
        f'<h1 style="color: {palette["title"]}; margin: 0;">🚗 {html.escape(title)}</h1>'
        "</div>"
    )


def render_footer(text: str, theme: Theme) -> str:
    """Render the footer line painted with the theme palette."""
    palette = PALETTES[theme]
    return (
        f'<footer style="background-color: {palette["background"]}; '
        f'color: {palette["footer"]}; margin-top: 40px; font-size: 14px; '
        f'text-align: center; padding: 10px;">{html.escape(text)}</footer>'
    )


def render_panel(inner_html: str, theme: Theme) -> str:
    """Wrap *inner_html* in a block painted with the theme background."""
    if not inner_html:
        return ""
    palette = PALETTES[theme]
    return (
        f'<div style="background-color: {palette["background"]}; '
        f'color: {palette["text"]}; padding: 10px; border-radius: 8px;">'
        f"{inner_html}</div>"
    )
