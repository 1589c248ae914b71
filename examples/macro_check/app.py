"""Macro scope check -- find undeclared variables in macros.

Builds the AST of a small component library by hand (normally the host
template engine hands it over) and reports every variable a macro reads
without declaring it.

Template being checked (components.html):

    {% def card(title, items) %}
      <h2>{{ titel }}</h2>
      {% for item in items %}<li>{{ item.label }}</li>{% end %}
      <small>{{ item }}</small>
    {% end %}
    {% def badge(text) %}{% set css = "badge" %}<b class="{{ css }}">{{ text }}</b>{% end %}

Run:
    python app.py
"""

from macrolint import Linter, LoggingSink
from macrolint.nodes import (
    Const,
    Data,
    Def,
    DefParam,
    For,
    Getattr,
    Name,
    Output,
    Set,
    Template,
)

card = Def(
    1,
    0,
    "card",
    [DefParam(1, 9, "title"), DefParam(1, 16, "items")],
    [
        Data(2, 0, "<h2>"),
        Output(2, 6, Name(2, 9, "titel")),
        For(
            3,
            2,
            Name(3, 9, "item", ctx="store"),
            Name(3, 17, "items"),
            [Output(3, 31, Getattr(3, 34, Name(3, 34, "item"), "label"))],
        ),
        Output(4, 9, Name(4, 12, "item")),
    ],
)

badge = Def(
    6,
    0,
    "badge",
    [DefParam(6, 10, "text")],
    [
        Set(6, 17, Name(6, 24, "css", ctx="store"), Const(6, 30, "badge")),
        Output(6, 50, Name(6, 53, "css")),
        Output(6, 62, Name(6, 65, "text")),
    ],
)

ast = Template(1, 0, [card, badge], name="components.html")

linter = Linter(sink=LoggingSink())
diagnostics = linter.check(ast)

output = "\n".join(d.format() for d in diagnostics)


def main() -> None:
    print(f"=== {len(diagnostics)} finding(s) ===\n")
    print(output)


if __name__ == "__main__":
    main()
