"""Build a small page from nested calls; user input is escaped exactly once."""

from taggart import html, render

user_name = "<script>alert('hi')</script>"

page = html.div(
    html.h1("Hello, ", html.em(user_name)),
    html.p("Tom & Jerry", class_=["lead", "muted"]),
    html.img(src="/logo.png", alt="Logo"),
    aria={"label": "greeting", "hidden": False},
    data={"user_id": 42},
)
print(render(page))
