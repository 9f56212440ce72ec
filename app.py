import gradio as gr
from functools import partial

from json_schema_builder.config import DEFAULT_KIND
from json_schema_builder.logger_config import setup_logging
from json_schema_builder.nodes import FIELD_KINDS
from json_schema_builder.serializer import to_json
from json_schema_builder.session import SchemaSession
from json_schema_builder.handlers import (
    handle_add_child,
    handle_add_root,
    handle_kind_edit,
    handle_name_edit,
    handle_remove,
    handle_reset,
    handle_upload,
    widget_key,
)

setup_logging()

# --- UI Definition ---
with gr.Blocks(title="JSON Schema Builder") as demo:
    gr.Markdown("# JSON Schema Builder")
    gr.Markdown("Add fields, nest them, and watch the JSON document update as you go.")

    # State
    session_state = gr.State(value=SchemaSession())

    with gr.Row():
        # Left Panel: Field Editor
        with gr.Column(scale=1):
            gr.Markdown("### 1. Fields")
            status_msg = gr.Textbox(label="Status", interactive=False)

            @gr.render(inputs=[session_state])
            def render_fields(session):
                if session is None or not session.forest:
                    gr.Markdown("No fields yet.")
                    return

                def recursive_ui(node):
                    with gr.Row(equal_height=True):
                        if node.indent_level:
                            with gr.Column(scale=0, min_width=node.indent_level):
                                gr.HTML("")
                        name_box = gr.Textbox(
                            value=node.name,
                            placeholder="Enter field",
                            show_label=False,
                            container=False,
                            key=widget_key(session, "name", node.key),
                        )
                        kind_box = gr.Dropdown(
                            choices=FIELD_KINDS,
                            value=node.kind.value,
                            show_label=False,
                            container=False,
                            key=widget_key(session, "kind", node.key),
                        )
                        remove_btn = gr.Button("remove", variant="stop", scale=0)

                    for event in (name_box.submit, name_box.blur):
                        event(
                            fn=partial(handle_name_edit, node.key),
                            inputs=[session_state, name_box],
                            outputs=[session_state, json_view, status_msg],
                        )
                    kind_box.input(
                        fn=partial(handle_kind_edit, node.key),
                        inputs=[session_state, kind_box],
                        outputs=[session_state, json_view, status_msg],
                    )
                    remove_btn.click(
                        fn=partial(handle_remove, node.key),
                        inputs=[session_state],
                        outputs=[session_state, json_view, status_msg],
                    )

                    if not node.is_nested:
                        return
                    for child in node.children:
                        recursive_ui(child)

                    with gr.Row(equal_height=True):
                        with gr.Column(scale=0, min_width=node.indent_level + session.indent_step):
                            gr.HTML("")
                        child_name = gr.Textbox(placeholder="Child field", show_label=False, container=False)
                        child_kind = gr.Dropdown(choices=FIELD_KINDS, value=DEFAULT_KIND, show_label=False, container=False)
                        add_btn = gr.Button("Add Item", variant="primary", scale=0)
                    add_btn.click(
                        fn=partial(handle_add_child, node.key),
                        inputs=[session_state, child_name, child_kind],
                        outputs=[session_state, json_view, status_msg],
                    )

                for root in session.forest:
                    recursive_ui(root)

            gr.Markdown("### 2. Add Top-Level Field")
            with gr.Row(equal_height=True):
                new_name = gr.Textbox(placeholder="Enter Field", show_label=False, container=False)
                new_kind = gr.Dropdown(choices=FIELD_KINDS, value=DEFAULT_KIND, show_label=False, container=False)
            add_root_btn = gr.Button("Add Item", variant="primary")

        # Right Panel: Document
        with gr.Column(scale=1):
            gr.Markdown("### 3. Document")
            json_view = gr.Code(value=to_json([]), language="json", label="JSON", interactive=False)

            gr.Markdown("### 4. Import / Reset")
            file_input = gr.File(label="Load Schema Document", file_types=[".json"], type="filepath")
            reset_btn = gr.Button("New Schema")

    add_root_btn.click(
        fn=handle_add_root,
        inputs=[session_state, new_name, new_kind],
        outputs=[session_state, json_view, status_msg, new_name],
    )
    new_name.submit(
        fn=handle_add_root,
        inputs=[session_state, new_name, new_kind],
        outputs=[session_state, json_view, status_msg, new_name],
    )

    file_input.upload(
        fn=handle_upload,
        inputs=[file_input],
        outputs=[session_state, json_view, status_msg],
    )

    reset_btn.click(
        fn=handle_reset,
        inputs=[],
        outputs=[session_state, json_view, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
