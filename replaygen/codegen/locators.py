"""Locator resolution.

Turns the locator description of a recorded action into a Python
expression rooted at a page or frame binding, e.g.
``page.get_by_role("button").filter(has_text="Submit")``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..errors import (
    ChainedLocatorUnsupportedError,
    NoLocatorError,
    UnknownAriaRoleError,
    UnrecognizedLocatorFormatError,
)
from ..recording.models import ActionRecord, LocatorKind, LocatorSpec
from .formatters import literal


class AriaRole(str, Enum):
    """ARIA roles accepted by ``get_by_role``."""

    ALERT = "alert"
    ALERTDIALOG = "alertdialog"
    APPLICATION = "application"
    ARTICLE = "article"
    BANNER = "banner"
    BLOCKQUOTE = "blockquote"
    BUTTON = "button"
    CAPTION = "caption"
    CELL = "cell"
    CHECKBOX = "checkbox"
    CODE = "code"
    COLUMNHEADER = "columnheader"
    COMBOBOX = "combobox"
    COMPLEMENTARY = "complementary"
    CONTENTINFO = "contentinfo"
    DEFINITION = "definition"
    DELETION = "deletion"
    DIALOG = "dialog"
    DIRECTORY = "directory"
    DOCUMENT = "document"
    EMPHASIS = "emphasis"
    FEED = "feed"
    FIGURE = "figure"
    FORM = "form"
    GENERIC = "generic"
    GRID = "grid"
    GRIDCELL = "gridcell"
    GROUP = "group"
    HEADING = "heading"
    IMG = "img"
    INSERTION = "insertion"
    LINK = "link"
    LIST = "list"
    LISTBOX = "listbox"
    LISTITEM = "listitem"
    LOG = "log"
    MAIN = "main"
    MARQUEE = "marquee"
    MATH = "math"
    METER = "meter"
    MENU = "menu"
    MENUBAR = "menubar"
    MENUITEM = "menuitem"
    MENUITEMCHECKBOX = "menuitemcheckbox"
    MENUITEMRADIO = "menuitemradio"
    NAVIGATION = "navigation"
    NONE = "none"
    NOTE = "note"
    OPTION = "option"
    PARAGRAPH = "paragraph"
    PRESENTATION = "presentation"
    PROGRESSBAR = "progressbar"
    RADIO = "radio"
    RADIOGROUP = "radiogroup"
    REGION = "region"
    ROW = "row"
    ROWGROUP = "rowgroup"
    ROWHEADER = "rowheader"
    SCROLLBAR = "scrollbar"
    SEARCH = "search"
    SEARCHBOX = "searchbox"
    SEPARATOR = "separator"
    SLIDER = "slider"
    SPINBUTTON = "spinbutton"
    STATUS = "status"
    STRONG = "strong"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"
    SWITCH = "switch"
    TAB = "tab"
    TABLE = "table"
    TABLIST = "tablist"
    TABPANEL = "tabpanel"
    TERM = "term"
    TEXTBOX = "textbox"
    TIME = "time"
    TIMER = "timer"
    TOOLBAR = "toolbar"
    TOOLTIP = "tooltip"
    TREE = "tree"
    TREEGRID = "treegrid"
    TREEITEM = "treeitem"


def resolve_role(role: str, action: Optional[ActionRecord] = None) -> AriaRole:
    """Look up a role name, case-insensitively.

    Raises:
        UnknownAriaRoleError: ``role`` is not in the table
    """
    try:
        return AriaRole(str(role).lower())
    except ValueError:
        raise UnknownAriaRoleError(
            str(role), action.raw if action is not None else None
        ) from None


def role_locator(
    root: str,
    role: str,
    name: Optional[str] = None,
    action: Optional[ActionRecord] = None,
) -> str:
    """``get_by_role`` call, narrowed by text when an accessible name is given."""
    code = f"{root}.get_by_role({literal(resolve_role(role, action).value)})"
    if name is not None:
        code += f".filter(has_text={literal(name)})"
    return code


_GETTERS = {
    LocatorKind.TEXT: "get_by_text",
    LocatorKind.LABEL: "get_by_label",
    LocatorKind.PLACEHOLDER: "get_by_placeholder",
    LocatorKind.TEST_ID: "get_by_test_id",
    LocatorKind.ALT_TEXT: "get_by_alt_text",
    LocatorKind.TITLE: "get_by_title",
    LocatorKind.CSS: "locator",
}


def _locator_from_spec(root: str, spec: LocatorSpec, action: ActionRecord) -> str:
    if spec.kind == LocatorKind.ROLE:
        return role_locator(root, spec.value, spec.name, action)

    if spec.kind == LocatorKind.LEGACY:
        if spec.legacy_kind != "role":
            raise UnrecognizedLocatorFormatError(
                f"Unrecognized locator kind '{spec.legacy_kind}'.", action.raw
            )
        return role_locator(root, spec.value, spec.name, action)

    if spec.kind == LocatorKind.CHAINED:
        raise ChainedLocatorUnsupportedError(
            f"Chained locator arrays not implemented.\nLocator: {literal(spec.raw)}",
            action.raw,
        )

    getter = _GETTERS.get(spec.kind)
    if getter is None:
        raise UnrecognizedLocatorFormatError(
            f"Unrecognized locator map format: {literal(spec.raw)}", action.raw
        )
    return f"{root}.{getter}({literal(spec.value)})"


# =============================================================================
# Internal selector syntax
# =============================================================================


@dataclass(frozen=True)
class SelectorMatcher:
    """Recognizes one ``internal:<engine>=`` prefix."""

    prefix: str
    build: Callable[[str, str], Optional[str]]


def _quoted_value(pattern: str) -> Callable[[str], Optional[str]]:
    compiled = re.compile(pattern)

    def extract(selector: str) -> Optional[str]:
        match = compiled.search(selector)
        return match.group(1) if match else None

    return extract


_NAME_ATTR = _quoted_value(r'name="([^"]+)"')


def _build_role(root: str, selector: str) -> Optional[str]:
    # internal:role=heading[name="Example Domain"i]
    rest = selector[len("internal:role="):]
    role_part, _, attrs = rest.partition("[")
    role = re.sub(r"[^a-zA-Z]", "", role_part)
    name = _NAME_ATTR(attrs) if attrs else None
    return role_locator(root, role, name)


def _getter(method: str, extract: Callable[[str], Optional[str]]):
    def build(root: str, selector: str) -> Optional[str]:
        value = extract(selector)
        if value is None:
            return None
        return f"{root}.{method}({literal(value)})"

    return build


SELECTOR_MATCHERS: tuple[SelectorMatcher, ...] = (
    SelectorMatcher("internal:role=", _build_role),
    SelectorMatcher(
        "internal:text=",
        _getter("get_by_text", _quoted_value(r'internal:text="([^"]+)"')),
    ),
    SelectorMatcher(
        "internal:label=",
        _getter("get_by_label", _quoted_value(r'internal:label="([^"]+)"')),
    ),
    SelectorMatcher(
        "internal:testid=",
        _getter("get_by_test_id", _quoted_value(r'internal:testid="([^"]+)"')),
    ),
    SelectorMatcher(
        "internal:attr=",
        _getter("get_by_placeholder", _quoted_value(r'placeholder="([^"]+)"')),
    ),
)


def parse_internal_selector(root: str, selector: str) -> Optional[str]:
    """Translate Playwright's internal selector syntax.

    Only the first matcher whose prefix fits is consulted. Returns None
    when no prefix fits or its value cannot be extracted.
    """
    for matcher in SELECTOR_MATCHERS:
        if selector.startswith(matcher.prefix):
            return matcher.build(root, selector)
    return None


def resolve_locator(root: str, action: ActionRecord) -> str:
    """Build the locator expression for an element-level action.

    Args:
        root: Page or frame binding the locator hangs off
        action: The recorded action

    Returns:
        Python expression evaluating to a Locator

    Raises:
        NoLocatorError: Neither ``locator`` nor ``selector`` present
        CodegenError: Any unsupported locator shape or role
    """
    if action.locator is not None:
        return _locator_from_spec(root, action.locator, action)

    if action.selector is not None:
        try:
            code = parse_internal_selector(root, action.selector)
        except UnknownAriaRoleError as e:
            raise UnknownAriaRoleError(e.role, action.raw) from None
        return code or f"{root}.locator({literal(action.selector)})"

    raise NoLocatorError("No locator or selector found for action.", action.raw)
