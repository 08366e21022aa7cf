"""
Core lazy rendering model.

Every constructor returns a Renderable: a zero-argument callable that
produces an HTML string when invoked. Nothing is rendered until the root
is called.

Usage:
    from hyperhtml.core import node, text, render

    page = node("ul", {}, node("li", {}, text("a")), node("li", {}, text("b")))
    render(page)  # '<ul>\\n    <li>a</li>\\n    <li>b</li>\\n</ul>'
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from html import escape as _html_escape
from os import PathLike
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable

from . import config

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders to HTML when called with no arguments."""

    def __call__(self) -> str: ...


AttributeValue: TypeAlias = str | int | float | Iterable[str | int | float]
Attributes: TypeAlias = Mapping[str, AttributeValue]
Child: TypeAlias = Renderable | str | None


def escape(content: str) -> str:
    """Escape the five HTML-significant characters: & < > " '"""
    return _html_escape(content, quote=True)


def attribute_values(value: AttributeValue) -> list[str]:
    """Normalize a scalar or multi-valued attribute to its list form."""
    if isinstance(value, str) or not isinstance(value, Iterable):
        return [str(value)]
    return [str(item) for item in value]


class Node:
    """
    Base class for the built-in Renderables.

    `inline` marks text leaves; a parent keeps a lone single-line text
    child on the same line as its tags.
    """

    __slots__ = ()

    inline = False

    def __call__(self) -> str:
        raise NotImplementedError

    def __html__(self) -> str:
        return self()

    def __str__(self) -> str:
        return self()


class Text(Node):
    """Escaped text content."""

    __slots__ = ("content",)

    inline = True

    def __init__(self, content: str):
        self.content = content

    def __call__(self) -> str:
        return escape(self.content)

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


class Raw(Node):
    """Unescaped content. Never use with untrusted input."""

    __slots__ = ("content",)

    inline = True

    def __init__(self, content: str):
        self.content = content

    def __call__(self) -> str:
        return self.content

    def __repr__(self) -> str:
        return f"Raw({self.content!r})"


class Element(Node):
    """An HTML element with attributes and child Renderables."""

    __slots__ = ("tag", "attributes", "children")

    def __init__(self, tag: str, attributes: Attributes | None, children: Iterable[Child]):
        self.tag = tag
        self.attributes = dict(attributes or {})
        self.children = coerce_children(children)

    def __call__(self) -> str:
        attr_str = _render_attrs(self.attributes)
        space = " " if attr_str else ""
        inner = _render_children(self.children)
        return f"<{self.tag}{space}{attr_str}>{inner}</{self.tag}>"

    def __repr__(self) -> str:
        return (
            f"Element({self.tag!r}, attrs={list(self.attributes.keys())}, "
            f"children={len(self.children)})"
        )


class Frozen(Node):
    """A string rendered once, returned verbatim on every call."""

    __slots__ = ("content", "inline")

    def __init__(self, content: str, inline: bool = False):
        self.content = content
        self.inline = inline

    def __call__(self) -> str:
        return self.content

    def __repr__(self) -> str:
        return f"Frozen({len(self.content)} chars)"


class Parallel(Node):
    """
    Renders its children concurrently and joins them in original order.

    Each invocation gets its own thread pool, so a child that is itself
    a Parallel fans out on fresh workers instead of waiting on its
    parent's.
    """

    __slots__ = ("children",)

    def __init__(self, children: Iterable[Child]):
        self.children = coerce_children(children)

    def __call__(self) -> str:
        if not self.children:
            return ""

        workers = config.settings.max_workers or len(self.children)
        logger.debug(f"fan out {len(self.children)} children on {workers} workers")

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="hyperhtml") as pool:
            # Submit everything before waiting on anything
            futures = [pool.submit(child) for child in self.children]
            return "\n".join(future.result() for future in futures)

    def __repr__(self) -> str:
        return f"Parallel(children={len(self.children)})"


class Document(Node):
    """DOCTYPE preamble followed by the <html> element."""

    __slots__ = ("root",)

    def __init__(self, attributes: Attributes | None, children: Iterable[Child]):
        if attributes is None:
            attributes = config.settings.html_attributes
        self.root = Element("html", attributes, children)

    def __call__(self) -> str:
        return f"{config.settings.doctype}\n{render(self.root)}"

    def __repr__(self) -> str:
        return f"Document({self.root!r})"


class Include(Node):
    """File contents, read on every invocation."""

    __slots__ = ("path", "encoding")

    def __init__(self, path: str | PathLike[str], encoding: str | None = None):
        self.path = Path(path)
        self.encoding = encoding

    def __call__(self) -> str:
        logger.debug(f"reading {self.path}")
        return self.path.read_text(encoding=self.encoding)

    def __repr__(self) -> str:
        return f"Include({str(self.path)!r})"


def coerce_children(children: Iterable[Child]) -> tuple[Renderable, ...]:
    """Drop None and wrap plain strings as escaped text."""
    return tuple(
        Text(child) if isinstance(child, str) else child
        for child in children
        if child is not None
    )


def _render_attrs(attributes: dict[str, AttributeValue]) -> str:
    """Render attributes as key="v1 v2" pairs. Values are not escaped."""
    return " ".join(
        f'{key}="{" ".join(attribute_values(value))}"' for key, value in attributes.items()
    )


def _render_children(children: tuple[Renderable, ...]) -> str:
    """Render children one per line, indented, or inline for a lone text leaf."""
    if not children:
        return ""

    content = "\n".join(child() for child in children)
    if "\n" not in content and all(getattr(child, "inline", False) for child in children):
        return content

    return "\n" + _indent(content, " " * config.settings.indent) + "\n"


def _indent(content: str, pad: str) -> str:
    return "\n".join(pad + line for line in content.split("\n"))


# Constructors


def text(content: str) -> Text:
    """Escaped text node."""
    return Text(content)


def text_raw(content: str) -> Raw:
    """Unescaped text node, for scripts, styles and pre-rendered HTML."""
    return Raw(content)


def node(tag: str, attributes: Attributes | None = None, *children: Child) -> Element:
    """
    Build an element.

    Tag and attribute names are emitted as given; attribute values are
    joined with single spaces and are NOT escaped. Elements without
    children render as <tag></tag>, there is no void syntax.
    """
    return Element(tag, attributes, children)


def tag_factory(tag: str) -> Callable[..., Element]:
    """
    Bind `node` to a fixed tag name.

    The returned constructor takes an attribute mapping followed by
    children. A first argument that is not a mapping is taken as the
    first child, so `p(text("hi"))` works as well as `p({}, text("hi"))`.
    """

    def element(attributes: Attributes | Child = None, *children: Child) -> Element:
        if attributes is not None and not isinstance(attributes, Mapping):
            return Element(tag, None, (attributes, *children))
        return Element(tag, attributes, children)

    element.__name__ = tag
    element.__qualname__ = tag
    element.__doc__ = f"Create a <{tag}> element."
    return element


def with_attributes(
    constructor: Callable[..., Element], attributes: Attributes
) -> Callable[..., Element]:
    """
    Bind a tag constructor to a fixed attribute mapping.

    Usage:
        primary_button = with_attributes(button, {"class": ["btn", "primary"]})
        primary_button(text("Save"))
    """
    bound = dict(attributes)

    def element(*children: Child) -> Element:
        return constructor(bound, *children)

    element.__name__ = getattr(constructor, "__name__", "element")
    element.__doc__ = f"{element.__name__} with attributes {list(bound.keys())}."
    return element


def html_root(attributes: Attributes | None = None, *children: Child) -> Document:
    """
    A full document: DOCTYPE plus an <html> element.

    Attributes default to the configured html_attributes
    (lang="en" dir="ltr").
    """
    return Document(attributes, children)


def include_file(path: str | PathLike[str], encoding: str | None = None) -> Include:
    """
    Embed a file verbatim, unescaped.

    The file is read each time the node renders, so a missing file raises
    OSError at render time. Wrap in `pre_render` to read it once.
    """
    return Include(path, encoding)


# Render strategies


def render(thunk: Renderable) -> str:
    """Render sequentially. Nothing is cached."""
    return thunk()


def pre_render(thunk: Renderable) -> Frozen:
    """Render now and return a Renderable that always yields this result."""
    return Frozen(thunk(), inline=getattr(thunk, "inline", False))


def hyper_render(*children: Child) -> Parallel:
    """
    Render children concurrently when invoked, joined by newlines in the
    order given. An exception from any child propagates out of the call.
    """
    return Parallel(children)


async def render_async(thunk: Renderable) -> str:
    """Render in a worker thread without blocking the event loop."""
    return await asyncio.to_thread(render, thunk)
