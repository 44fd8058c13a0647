"""Declare custom elements on top of the HTML defaults and group siblings."""

from taggart import (
    MarkupConfig,
    create_registry_with_defaults,
    html,
    markup_config_context,
    taggart,
)

builder = create_registry_with_defaults()
builder.deftag("todo-list").deftag("todo-item").deftag("x-divider", void=True)
config = MarkupConfig(tag_registry=builder.build(), attr_prefixes={"aria", "data", "hx"})

with markup_config_context(config):
    items = ["Buy milk", "Write <tests>", "Ship"]
    todo = html["todo-list"](
        taggart(html["todo-item"](item, done=i == 0) for i, item in enumerate(items)),
        html["x-divider"](),
        hx={"get": "/todos", "trigger": "load"},
    )
    print(todo.render())
