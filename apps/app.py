# -*- coding: utf-8 -*-
import logging
from typing import Iterator, Tuple

import gradio as gr

from zipdistance.config import get_config
from zipdistance.container import get_container
from zipdistance.domain.models import Theme
from zipdistance.logging_setup import configure_logging
from zipdistance.services import DistanceBatchService
from zipdistance.viz.cards import (
    render_footer,
    render_header,
    render_panel,
    render_results,
    theme_toggle_label,
)
from zipdistance.viz.session import FormSession

logger = logging.getLogger("zipdistance.app")

# ============================ CONFIG ============================
CONFIG = get_config()
configure_logging(CONFIG.observability)

SUBMIT_LABEL = "Calculate Distance"
BUSY_LABEL = "Calculating..."


def _new_session() -> FormSession:
    return FormSession(theme=Theme(CONFIG.ui.default_theme))


def _results_html(session: FormSession) -> str:
    return render_panel(render_results(session.batch), session.theme)


def _error_text(session: FormSession) -> str:
    return f"❌ {session.error}" if session.error else ""


def _form_updates(busy: bool) -> list:
    """Interactive state for the five inputs and the submit button."""
    fields = [gr.update(interactive=not busy) for _ in range(5)]
    button = gr.update(
        interactive=not busy, value=BUSY_LABEL if busy else SUBMIT_LABEL
    )
    return [*fields, button]


def calculate(
    session: FormSession,
    source_1: str,
    source_2: str,
    source_3: str,
    source_4: str,
    destination: str,
) -> Iterator[list]:
    """Run one batch, locking the form while the queries are outstanding."""
    sources = [source_1 or "", source_2 or "", source_3 or "", source_4 or ""]
    destination = destination or ""
    service: DistanceBatchService = get_container().resolve(DistanceBatchService)

    # Clear the previous results and lock the form before the first query
    session.error = ""
    session.batch = None
    yield [session, "", "", *_form_updates(busy=True)]

    try:
        session.submit(service, sources, destination)
    except Exception:
        logger.exception("Distance batch crashed")
        session.error = "Unexpected error, see server logs."

    yield [
        session,
        _results_html(session),
        _error_text(session),
        *_form_updates(busy=False),
    ]


def toggle_theme(session: FormSession) -> Tuple[FormSession, str, str, str, str]:
    session.toggle_theme()
    return (
        session,
        theme_toggle_label(session.theme),
        render_header(CONFIG.ui.title, session.theme),
        _results_html(session),
        render_footer(CONFIG.ui.footer_text, session.theme),
    )


# ============================ UI ============================
def build_app() -> gr.Blocks:
    initial = _new_session()
    defaults = CONFIG.ui.default_sources

    with gr.Blocks(title=CONFIG.ui.title) as app:
        session_state = gr.State(initial)

        with gr.Row():
            header = gr.HTML(render_header(CONFIG.ui.title, initial.theme))
            btn_theme = gr.Button(theme_toggle_label(initial.theme), scale=0)

        with gr.Row():
            source_boxes = [
                gr.Textbox(
                    value=defaults[i],
                    placeholder=f"Source ZIP {i + 1}",
                    show_label=False,
                )
                for i in range(4)
            ]

        destination_box = gr.Textbox(
            value="", placeholder="Destination ZIP", show_label=False
        )
        btn_submit = gr.Button(SUBMIT_LABEL, variant="primary")

        error_md = gr.Markdown()
        results_html = gr.HTML(value="")
        footer = gr.HTML(render_footer(CONFIG.ui.footer_text, initial.theme))

        btn_submit.click(
            calculate,
            inputs=[session_state, *source_boxes, destination_box],
            outputs=[
                session_state,
                results_html,
                error_md,
                *source_boxes,
                destination_box,
                btn_submit,
            ],
        )

        btn_theme.click(
            toggle_theme,
            inputs=[session_state],
            outputs=[session_state, btn_theme, header, results_html, footer],
        )

    return app


if __name__ == "__main__":
    build_app().launch(
        server_name=CONFIG.ui.server_name, server_port=CONFIG.ui.server_port
    )
