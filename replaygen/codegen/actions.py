"""Action translation.

Maps each recorded action kind to the Playwright call that replays it.
Every kind in ActionKind has exactly one handler; anything else is fatal.
"""

import json
from typing import Callable

from ..errors import MalformedFilesFieldError, UnknownActionError
from ..recording.models import ActionKind, ActionRecord
from .formatters import identifier, literal
from .fragment import CodeBlock
from .frames import build_frame_chain
from .locators import resolve_locator
from .signals import signal_names, wrap_signals

# Bit -> key name, in the order they are joined
MODIFIER_KEYS = (
    (1, "Alt"),
    (2, "ControlOrMeta"),
    (4, "Meta"),
    (8, "Shift"),
)

BLANK_PAGE_URLS = frozenset({"about:blank", "chrome://newtab/"})


def page_variable(alias: str | None) -> str:
    """Python identifier for a recorded page alias (``page``, ``page1``, ...)."""
    return identifier(alias, "page")


def modifiers_to_keys(mask: int | None) -> list[str]:
    """Decode a modifier bitmask into key names."""
    if not mask or mask <= 0:
        return []
    return [key for bit, key in MODIFIER_KEYS if mask & bit]


def _position(position: dict) -> str:
    return literal({"x": position.get("x"), "y": position.get("y")})


def _call(target: str, method: str, *args: str) -> CodeBlock:
    return CodeBlock.of(f"{target}.{method}({', '.join(args)})")


def _expect(locator: str, matcher: str, *args: str) -> CodeBlock:
    return CodeBlock.of(f"expect({locator}).{matcher}({', '.join(args)})")


# =============================================================================
# Page lifecycle
# =============================================================================


def _open_page(root: str, action: ActionRecord) -> CodeBlock:
    page = page_variable(action.page_alias)
    block = CodeBlock.of(f"# New page: {page}")
    if action.url and action.url not in BLANK_PAGE_URLS:
        block += _call(page, "goto", literal(action.url))
    return block


def _close_page(root: str, action: ActionRecord) -> CodeBlock:
    return _call(page_variable(action.page_alias), "close")


def _navigate(root: str, action: ActionRecord) -> CodeBlock:
    return _call(page_variable(action.page_alias), "goto", literal(action.url or ""))


# =============================================================================
# Element interactions
# =============================================================================


def _click(root: str, action: ActionRecord) -> CodeBlock:
    locator = resolve_locator(root, action)
    count = action.click_count or 1

    if count == 2:
        return _call(locator, "dblclick")
    if count > 2:
        return _call(locator, "click", f"click_count={count}")

    options = []
    if action.button and action.button != "left":
        options.append(f"button={literal(action.button)}")
    modifiers = modifiers_to_keys(action.modifiers)
    if modifiers:
        options.append(f"modifiers={literal(modifiers)}")
    if action.position:
        options.append(f"position={_position(action.position)}")
    return _call(locator, "click", *options)


def _fill(root: str, action: ActionRecord) -> CodeBlock:
    return _call(resolve_locator(root, action), "fill", literal(action.text or ""))


def _press(root: str, action: ActionRecord) -> CodeBlock:
    combo = "+".join(modifiers_to_keys(action.modifiers) + [action.key or ""])
    return _call(resolve_locator(root, action), "press", literal(combo))


def _hover(root: str, action: ActionRecord) -> CodeBlock:
    locator = resolve_locator(root, action)
    if action.position:
        return _call(locator, "hover", f"position={_position(action.position)}")
    return _call(locator, "hover")


def _check(root: str, action: ActionRecord) -> CodeBlock:
    return _call(resolve_locator(root, action), "check")


def _uncheck(root: str, action: ActionRecord) -> CodeBlock:
    return _call(resolve_locator(root, action), "uncheck")


def _select(root: str, action: ActionRecord) -> CodeBlock:
    options = action.options
    if isinstance(options, list) and len(options) == 1:
        options = options[0]
    elif options is None:
        options = []
    return _call(resolve_locator(root, action), "select_option", literal(options))


def _set_input_files(root: str, action: ActionRecord) -> CodeBlock:
    files = action.files
    if isinstance(files, list) and len(files) == 1:
        files = files[0]
    elif not (isinstance(files, str) or (isinstance(files, list) and len(files) > 1)):
        raise MalformedFilesFieldError(
            f"setInputFiles: unexpected files format: {json.dumps(files)}",
            action.raw,
        )
    return _call(resolve_locator(root, action), "set_input_files", literal(files))


# =============================================================================
# Assertions
# =============================================================================


def _assert_text(root: str, action: ActionRecord) -> CodeBlock:
    matcher = "to_contain_text" if action.substring else "to_have_text"
    return _expect(resolve_locator(root, action), matcher, literal(action.text or ""))


def _assert_checked(root: str, action: ActionRecord) -> CodeBlock:
    matcher = "to_be_checked" if action.checked else "not_to_be_checked"
    return _expect(resolve_locator(root, action), matcher)


def _assert_visible(root: str, action: ActionRecord) -> CodeBlock:
    return _expect(resolve_locator(root, action), "to_be_visible")


def _assert_value(root: str, action: ActionRecord) -> CodeBlock:
    locator = resolve_locator(root, action)
    if action.value is None or not str(action.value).strip():
        return _expect(locator, "to_be_empty")
    return _expect(locator, "to_have_value", literal(str(action.value)))


def _assert_snapshot(root: str, action: ActionRecord) -> CodeBlock:
    snapshot = "" if action.snapshot is None else str(action.snapshot)
    return _expect(resolve_locator(root, action), "to_match_aria_snapshot", literal(snapshot))


ACTION_HANDLERS: dict[ActionKind, Callable[[str, ActionRecord], CodeBlock]] = {
    ActionKind.OPEN_PAGE: _open_page,
    ActionKind.CLOSE_PAGE: _close_page,
    ActionKind.NAVIGATE: _navigate,
    ActionKind.CLICK: _click,
    ActionKind.FILL: _fill,
    ActionKind.PRESS: _press,
    ActionKind.HOVER: _hover,
    ActionKind.CHECK: _check,
    ActionKind.UNCHECK: _uncheck,
    ActionKind.SELECT: _select,
    ActionKind.SET_INPUT_FILES: _set_input_files,
    ActionKind.ASSERT_TEXT: _assert_text,
    ActionKind.ASSERT_CHECKED: _assert_checked,
    ActionKind.ASSERT_VISIBLE: _assert_visible,
    ActionKind.ASSERT_VALUE: _assert_value,
    ActionKind.ASSERT_SNAPSHOT: _assert_snapshot,
}


def translate_action(root: str, action: ActionRecord) -> CodeBlock:
    """Translate one action, without frame or signal handling.

    Args:
        root: Page or frame binding locators are resolved against
        action: The recorded action

    Raises:
        UnknownActionError: ``action.kind`` is not a supported kind
    """
    try:
        kind = ActionKind(action.kind)
    except ValueError:
        raise UnknownActionError(
            f"Unknown action '{action.kind}' is not implemented.", action.raw
        ) from None
    return ACTION_HANDLERS[kind](root, action)


def compile_action(action: ActionRecord) -> CodeBlock:
    """Translate one action with its frame bindings and signal handling.

    Signals are validated before anything is translated.
    """
    signal_names(action)
    page = page_variable(action.page_alias)
    root, frame_bindings = build_frame_chain(page, action.frame_path)
    code = translate_action(root, action)
    return frame_bindings + wrap_signals(page, code, action)
