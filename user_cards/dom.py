#!/usr/bin/env python3
"""
A headless page: just enough of an element tree to build cards, find them by id,
change their background, and serialize the result to HTML.
"""
import html
from typing import Dict, Iterator, List, Optional

from . import config
from .errors import MountPointError

# Elements that never get a closing tag in HTML output.
VOID_TAGS = {"img", "input", "link", "meta", "br"}


class Element:
    # One node of the page: a tag, its attributes, inline style and children, like a DOM element.
    def __init__(self, tag: str, text: str = "", **attrs: str):
        self.tag = tag
        self.text = text  # plain text content, never parsed as markup
        self.attrs: Dict[str, str] = {}
        for name, value in attrs.items():
            self.set_attribute(name, value)
        self.style: Dict[str, str] = {}  # inline style, e.g. {"background-color": "yellow"}
        self.children: List["Element"] = []
        self.parent: Optional["Element"] = None  # None until appended somewhere

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        cls = f".{self.class_name}" if self.class_name else ""
        return f"<Element {self.tag}{ident}{cls}>"

    # ---- attributes ------------------------------------------------------------
    def set_attribute(self, name: str, value: str) -> None:
        # class_name -> class, data_foo -> data-foo
        name = "class" if name == "class_name" else name.replace("_", "-")
        self.attrs[name] = value

    @property
    def id(self) -> Optional[str]:
        return self.attrs.get("id")

    @id.setter
    def id(self, value: str) -> None:
        self.attrs["id"] = value

    @property
    def class_name(self) -> Optional[str]:
        return self.attrs.get("class")

    @class_name.setter
    def class_name(self, value: str) -> None:
        self.attrs["class"] = value

    @property
    def background_color(self) -> Optional[str]:
        return self.style.get("background-color")

    @background_color.setter
    def background_color(self, value: str) -> None:
        self.style["background-color"] = value

    # ---- tree ------------------------------------------------------------------
    def append_child(self, child: "Element") -> "Element":
        # An element has one parent: appending moves it, the same as appendChild.
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def clear(self) -> None:
        # Detach every child so nothing can still find them through root().
        for child in self.children:
            child.parent = None
        self.children = []

    def iter(self) -> Iterator["Element"]:
        """Walk this element and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter()

    def root(self) -> "Element":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    # ---- output ----------------------------------------------------------------
    def to_html(self) -> str:
        # Attributes and text are escaped here, and only here: the tree itself holds raw values.
        attrs = dict(self.attrs)
        if self.style:
            attrs["style"] = "; ".join(f"{k}: {v}" for k, v in self.style.items())
        rendered = "".join(f' {k}="{html.escape(str(v), quote=True)}"' for k, v in attrs.items())
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{rendered}>"
        inner = html.escape(self.text, quote=False) + "".join(c.to_html() for c in self.children)
        return f"<{self.tag}{rendered}>{inner}</{self.tag}>"


class Page:
    """The document the cards are mounted into.

    Exposes the two ports the rest of the package relies on: the render
    target (``#content``) and the email input (``#emailInput``).
    """

    def __init__(self, title: str = "Random users", stylesheet: Optional[str] = "style.css"):
        self.title = title
        self.stylesheet = stylesheet
        self.body = Element("body")

    @classmethod
    def default(cls, **kwargs) -> "Page":
        page = cls(**kwargs)
        # Enter in the input submits the form, which is how the service sees a key press.
        form = page.body.append_child(Element("form", method="post", action="/highlight"))
        form.append_child(Element("input", id=config.EMAIL_INPUT_ID, name="email",
                                  type="text", placeholder="email address"))
        page.body.append_child(Element("div", id=config.CONTENT_ID))
        return page

    def get_element_by_id(self, element_id: str, class_name: Optional[str] = None) -> Optional[Element]:
        # First match in document order, like the browser's getElementById.
        for element in self.body.iter():
            if element.id == element_id and class_name in (None, element.class_name):
                return element
        return None

    def require(self, element_id: str) -> Element:
        element = self.get_element_by_id(element_id)
        if element is None:
            raise MountPointError(element_id)
        return element

    def contains(self, element: Element) -> bool:
        # Attached means the element's topmost ancestor is this page's body.
        return element.root() is self.body

    # ---- input port -------------------------------------------------------------
    @property
    def email_input(self) -> Element:
        return self.require(config.EMAIL_INPUT_ID)

    def type_email(self, value: str) -> None:
        self.email_input.set_attribute("value", value)

    def read_email(self) -> str:
        return self.email_input.attrs.get("value", "")

    def to_html(self, alerts: Optional[List[str]] = None) -> str:
        # Alerts render as banners at the top of the body instead of a modal window.alert.
        head = f"<title>{html.escape(self.title)}</title>"
        if self.stylesheet:
            head += f'<link rel="stylesheet" href="{html.escape(self.stylesheet)}">'
        banner = "".join(Element("p", text=msg, role="alert").to_html() for msg in alerts or [])
        body = banner + "".join(child.to_html() for child in self.body.children)
        return f"<!DOCTYPE html><html><head><meta charset=\"utf-8\">{head}</head><body>{body}</body></html>"
