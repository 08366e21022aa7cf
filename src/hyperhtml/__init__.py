"""
hyperhtml - Lazy, composable HTML generation

Constructors build a tree of deferred render units; calling the root
produces the HTML string. Subtrees can be frozen once with pre_render
or rendered concurrently with hyper_render.
"""

from .core import (
    Renderable,
    Node,
    Text,
    Raw,
    Element,
    Frozen,
    Parallel,
    Document,
    Include,
    escape,
    attribute_values,
    coerce_children,
    text,
    text_raw,
    node,
    tag_factory,
    with_attributes,
    html_root,
    include_file,
    render,
    pre_render,
    hyper_render,
    render_async,
)
from .config import Settings, configure, load_settings
from .elements import TAGS, Fragment, fragment

__version__ = "0.1.0"
__all__ = [
    # Core
    "Renderable",
    "Node",
    "Text",
    "Raw",
    "Element",
    "Frozen",
    "Parallel",
    "Document",
    "Include",
    "escape",
    "attribute_values",
    "coerce_children",
    # Constructors
    "text",
    "text_raw",
    "node",
    "tag_factory",
    "with_attributes",
    "html_root",
    "include_file",
    # Render strategies
    "render",
    "pre_render",
    "hyper_render",
    "render_async",
    # Config
    "Settings",
    "configure",
    "load_settings",
    # Elements
    "TAGS",
    "Fragment",
    "fragment",
]
