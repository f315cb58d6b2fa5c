"""Data models for Playwright JSONL recordings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ActionKind(str, Enum):
    """Recorded action kinds that codegen knows how to translate."""

    OPEN_PAGE = "openPage"
    CLOSE_PAGE = "closePage"
    NAVIGATE = "navigate"
    CLICK = "click"
    FILL = "fill"
    PRESS = "press"
    HOVER = "hover"
    CHECK = "check"
    UNCHECK = "uncheck"
    SELECT = "select"
    SET_INPUT_FILES = "setInputFiles"
    ASSERT_TEXT = "assertText"
    ASSERT_CHECKED = "assertChecked"
    ASSERT_VISIBLE = "assertVisible"
    ASSERT_VALUE = "assertValue"
    ASSERT_SNAPSHOT = "assertSnapshot"


class SignalName(str, Enum):
    """Interaction-triggered browser events."""

    DIALOG = "dialog"
    POPUP = "popup"
    DOWNLOAD = "download"


class LocatorKind(str, Enum):
    """Tag of a LocatorSpec."""

    ROLE = "role"
    TEXT = "text"
    LABEL = "label"
    PLACEHOLDER = "placeholder"
    TEST_ID = "test_id"
    ALT_TEXT = "alt_text"
    TITLE = "title"
    CSS = "css"
    LEGACY = "legacy"  # {kind, body, options: {attrs: [...]}}
    CHAINED = "chained"
    UNRECOGNIZED = "unrecognized"


# JSON key -> tag, checked in this order after role and legacy kind/body
_SIMPLE_LOCATOR_KEYS = (
    ("text", LocatorKind.TEXT),
    ("label", LocatorKind.LABEL),
    ("placeholder", LocatorKind.PLACEHOLDER),
    ("testId", LocatorKind.TEST_ID),
    ("altText", LocatorKind.ALT_TEXT),
    ("title", LocatorKind.TITLE),
    ("css", LocatorKind.CSS),
)


@dataclass(frozen=True)
class LocatorSpec:
    """A structured description of how to find an element.

    Exactly one tag is populated. ``value`` holds the tag's payload (role
    name, text, selector, ...); ``name`` is the optional accessible-name
    filter of role locators; ``legacy_kind`` is the ``kind`` field of the
    legacy encoding. ``raw`` keeps the original JSON value.
    """

    kind: LocatorKind
    value: Any = None
    name: Optional[str] = None
    legacy_kind: Optional[str] = None
    raw: Any = None

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["LocatorSpec"]:
        """Classify a decoded ``locator`` field. Never fails.

        Shapes the resolver cannot handle are tagged ``CHAINED`` or
        ``UNRECOGNIZED`` and rejected at resolution time, where the full
        action is available for diagnostics.
        """
        if raw is None:
            return None

        if isinstance(raw, str):
            return cls(kind=LocatorKind.CSS, value=raw, raw=raw)

        if isinstance(raw, list):
            return cls(kind=LocatorKind.CHAINED, value=raw, raw=raw)

        if not isinstance(raw, dict):
            return cls(kind=LocatorKind.UNRECOGNIZED, raw=raw)

        if _present(raw.get("role")):
            return cls(
                kind=LocatorKind.ROLE,
                value=raw["role"],
                name=raw["name"] if _present(raw.get("name")) else None,
                raw=raw,
            )

        if _present(raw.get("kind")) and _present(raw.get("body")):
            return cls(
                kind=LocatorKind.LEGACY,
                value=raw["body"],
                name=_legacy_name_attr(raw),
                legacy_kind=str(raw["kind"]),
                raw=raw,
            )

        for key, kind in _SIMPLE_LOCATOR_KEYS:
            if _present(raw.get(key)):
                return cls(kind=kind, value=raw[key], raw=raw)

        return cls(kind=LocatorKind.UNRECOGNIZED, raw=raw)


def _present(value: Any) -> bool:
    """Whether a decoded field counts as set. Empty strings do; null and false do not."""
    return value is not None and value is not False


def _legacy_name_attr(raw: dict) -> Optional[str]:
    """Extract the ``name`` attr from ``options.attrs`` of a legacy locator."""
    options = raw.get("options") or {}
    for attr in options.get("attrs") or []:
        if isinstance(attr, dict) and str(attr.get("name")) == "name":
            if _present(attr.get("value")):
                return attr["value"]
    return None


@dataclass(frozen=True)
class Signal:
    """A browser event triggered by an action.

    ``alias`` is the page alias the recorder gave a popup (``popupAlias``)
    or the download (``downloadAlias``), when it recorded one.
    """

    name: str
    alias: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Signal":
        """Create Signal from a ``{"name": ...}`` object."""
        if isinstance(data, dict):
            return cls(
                name=str(data.get("name")),
                alias=data.get("popupAlias") or data.get("downloadAlias"),
            )
        return cls(name=str(data))


@dataclass(frozen=True)
class RecordingHeader:
    """First line of a recording: which browser, and how it was launched."""

    browser_name: str = "chromium"
    headless: bool = True
    raw: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "RecordingHeader":
        """Create RecordingHeader from the decoded header line."""
        launch_options = data.get("launchOptions") or {}
        return cls(
            browser_name=data.get("browserName") or "chromium",
            # Headless unless explicitly disabled
            headless=launch_options.get("headless") is not False,
            raw=data,
        )


@dataclass(frozen=True)
class ActionRecord:
    """One recorded interaction."""

    kind: str
    locator: Optional[LocatorSpec] = None
    selector: Optional[str] = None
    page_alias: str = "page"
    url: Optional[str] = None
    text: Optional[str] = None
    key: Optional[str] = None
    modifiers: int = 0
    click_count: Optional[int] = None
    position: Optional[dict] = None
    button: Optional[str] = None
    files: Any = None
    options: Any = None
    substring: bool = False
    checked: bool = False
    value: Any = None
    snapshot: Any = None
    signals: tuple[Signal, ...] = ()
    frame_path: tuple[str, ...] = ()
    raw: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "ActionRecord":
        """Create ActionRecord from a decoded action line."""
        selector = data.get("selector")
        return cls(
            kind=str(data.get("name")),
            locator=LocatorSpec.from_raw(data.get("locator")),
            selector=selector if isinstance(selector, str) else None,
            page_alias=data.get("pageAlias") or "page",
            url=data.get("url"),
            text=data.get("text"),
            key=data.get("key"),
            modifiers=data.get("modifiers") or 0,
            click_count=data.get("clickCount"),
            position=data.get("position"),
            button=data.get("button"),
            files=data.get("files"),
            options=data.get("options"),
            substring=bool(data.get("substring")),
            checked=bool(data.get("checked")),
            value=data.get("value"),
            snapshot=data.get("snapshot"),
            signals=tuple(Signal.from_dict(s) for s in data.get("signals") or []),
            frame_path=tuple(data.get("framePath") or []),
            raw=data,
        )


@dataclass(frozen=True)
class Recording:
    """A parsed recording: header plus actions in recorded order."""

    header: RecordingHeader
    actions: tuple[ActionRecord, ...] = ()

    @property
    def action_count(self) -> int:
        """Get count of recorded actions."""
        return len(self.actions)
