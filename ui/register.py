"""Register page UI"""
import logging

import gradio as gr

from core.config import APP_TITLE
from core.session import FormSession
from core.validation import check_constraints
from ui.view import INPUTS, SUBMIT_LABEL, ConfirmationView, render

logger = logging.getLogger(__name__)


def counter_label(count):
    return f"count is {count}"


def increment(count):
    """Demo counter in the page header"""
    count += 1
    return count, gr.update(value=counter_label(count))


def make_input_handler(name):
    """Handler storing one textbox's value in the session"""
    def on_input(value, session: FormSession):
        session.update_field(name, value)
        return session

    return on_input


def view_updates(session: FormSession):
    """
    Component updates for the current view, in the order
    form column, one per textbox, confirmation.
    """
    view = render(session)
    if isinstance(view, ConfirmationView):
        # textboxes keep their values, they are just not shown
        return (
            gr.update(visible=False),
            *(gr.update() for _ in INPUTS),
            gr.update(visible=True, value=f"#### {view.message}"),
        )

    return (
        gr.update(visible=True),
        *(gr.update(value=spec.value) for spec in view.inputs),
        gr.update(visible=False, value=""),
    )


def on_register(session: FormSession, *values):
    """
    Submit the form once every field passes the browser-style checks.

    `values` are the textbox contents at click time, in INPUTS order; they are
    stored first so a pending `input` event cannot leave the session behind.
    """
    for name, value in zip(INPUTS, values):
        session.update_field(name, value)

    problems = check_constraints(session.fields)
    if problems:
        logger.debug("Submission blocked: %d constraint(s) failed", len(problems))
        raise gr.Error("\n".join(problems))

    session.submit()
    return (session, *view_updates(session))


def create_register_page():
    """Create the register page interface"""
    with gr.Blocks(title=APP_TITLE) as register_page:
        gr.Markdown(f"# {APP_TITLE}")

        count = gr.State(0)
        counter_btn = gr.Button(counter_label(0))
        gr.Markdown("Register to learn more")

        session = gr.State(FormSession)

        with gr.Column(visible=True) as form_column:
            textboxes = []
            for spec in render(FormSession()).inputs:
                textboxes.append(
                    gr.Textbox(
                        label=spec.label,
                        placeholder=spec.placeholder,
                        type=spec.input_type,
                        value=spec.value,
                        max_lines=1,
                        elem_id=spec.name,
                    )
                )
            register_btn = gr.Button(SUBMIT_LABEL, variant="primary")

        confirmation = gr.Markdown(visible=False)
        view_outputs = [form_column, *textboxes, confirmation]

        counter_btn.click(increment, inputs=count, outputs=[count, counter_btn])

        # `input` fires on user edits only, so re-rendering never loops back
        for name, box in zip(INPUTS, textboxes):
            box.input(make_input_handler(name.value), inputs=[box, session], outputs=session)

        register_btn.click(on_register, inputs=[session, *textboxes], outputs=[session, *view_outputs])
        register_page.load(view_updates, inputs=session, outputs=view_outputs)

    return register_page
