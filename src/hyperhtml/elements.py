"""
HTML element factories for pure-Python composition.

Usage:
    from hyperhtml.core import text, hyper_render
    from hyperhtml.elements import div, section, h1, p, a, button

    section(
        {"class": "hero", "id": "main"},
        h1(text("Welcome")),
        div(
            {"class": ["actions", "wide"]},
            button({"type": "button"}, text("Click me")),
        ),
    )

Every factory takes an optional attribute mapping followed by children.
Names that would shadow a keyword or a builtin carry a trailing
underscore (`input_`, `del_`, `object_`). Void tags are not special:
`br()` renders `<br></br>`.
"""

from __future__ import annotations

from collections.abc import Callable

from .core import Child, Element, Node, coerce_children, tag_factory

TAGS: dict[str, Callable[..., Element]] = {}


def _make_element(tag: str) -> Callable[..., Element]:
    """Factory for creating element functions."""
    factory = tag_factory(tag)
    TAGS[tag] = factory
    return factory


# Document structure
html_el = _make_element("html")  # html_root() adds the DOCTYPE
head = _make_element("head")
body = _make_element("body")
title = _make_element("title")
base = _make_element("base")
link = _make_element("link")
meta_ = _make_element("meta")
style = _make_element("style")
script = _make_element("script")
noscript = _make_element("noscript")

# Sections
section = _make_element("section")
article = _make_element("article")
aside = _make_element("aside")
header = _make_element("header")
footer = _make_element("footer")
nav = _make_element("nav")
main = _make_element("main")
address = _make_element("address")
search = _make_element("search")
div = _make_element("div")

# Headings
h1 = _make_element("h1")
h2 = _make_element("h2")
h3 = _make_element("h3")
h4 = _make_element("h4")
h5 = _make_element("h5")
h6 = _make_element("h6")
hgroup = _make_element("hgroup")

# Text content
p = _make_element("p")
pre = _make_element("pre")
blockquote = _make_element("blockquote")
ol = _make_element("ol")
ul = _make_element("ul")
li = _make_element("li")
dl = _make_element("dl")
dt = _make_element("dt")
dd = _make_element("dd")
figure = _make_element("figure")
figcaption = _make_element("figcaption")
hr = _make_element("hr")

# Inline text
a = _make_element("a")
span = _make_element("span")
strong = _make_element("strong")
em = _make_element("em")
b = _make_element("b")
i = _make_element("i")
u = _make_element("u")
s = _make_element("s")
q = _make_element("q")
cite = _make_element("cite")
dfn = _make_element("dfn")
small = _make_element("small")
mark = _make_element("mark")
code = _make_element("code")
samp = _make_element("samp")
var = _make_element("var")
kbd = _make_element("kbd")
abbr = _make_element("abbr")
data = _make_element("data")
time_ = _make_element("time")
sub = _make_element("sub")
sup = _make_element("sup")
bdi = _make_element("bdi")
bdo = _make_element("bdo")
ruby = _make_element("ruby")
rt = _make_element("rt")
rp = _make_element("rp")
br = _make_element("br")
wbr = _make_element("wbr")

# Edits
del_ = _make_element("del")
ins = _make_element("ins")

# Forms
form = _make_element("form")
label = _make_element("label")
input_ = _make_element("input")
button = _make_element("button")
select = _make_element("select")
option = _make_element("option")
optgroup = _make_element("optgroup")
textarea = _make_element("textarea")
fieldset = _make_element("fieldset")
legend = _make_element("legend")
datalist = _make_element("datalist")
output = _make_element("output")
meter = _make_element("meter")
progress = _make_element("progress")

# Tables
table = _make_element("table")
thead = _make_element("thead")
tbody = _make_element("tbody")
tfoot = _make_element("tfoot")
tr = _make_element("tr")
th = _make_element("th")
td = _make_element("td")
caption = _make_element("caption")
colgroup = _make_element("colgroup")
col = _make_element("col")

# Media
img = _make_element("img")
map_ = _make_element("map")
area = _make_element("area")
audio = _make_element("audio")
video = _make_element("video")
source = _make_element("source")
track = _make_element("track")
picture = _make_element("picture")
iframe = _make_element("iframe")
embed = _make_element("embed")
object_ = _make_element("object")
canvas = _make_element("canvas")
svg = _make_element("svg")

# Interactive
details = _make_element("details")
summary = _make_element("summary")
dialog = _make_element("dialog")
menu = _make_element("menu")

# Web components
template = _make_element("template")
slot = _make_element("slot")


class Fragment(Node):
    """Multiple children without a wrapper element, one per line."""

    __slots__ = ("children",)

    def __init__(self, *children: Child):
        self.children = coerce_children(children)

    def __call__(self) -> str:
        return "\n".join(child() for child in self.children)

    def __repr__(self) -> str:
        return f"Fragment(children={len(self.children)})"


def fragment(*children: Child) -> Fragment:
    """Render multiple children without a wrapper element."""
    return Fragment(*children)
