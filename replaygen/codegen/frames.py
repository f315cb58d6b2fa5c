"""Frame-chain bindings for actions recorded inside nested iframes."""

from typing import Sequence

from .formatters import literal
from .fragment import CodeBlock


def build_frame_chain(root: str, frame_path: Sequence[str]) -> tuple[str, CodeBlock]:
    """Drill from ``root`` into nested frames.

    Each selector binds ``frame<i>`` to the content frame of the matching
    iframe, looked up from the previous binding (``root`` for the first).

    Args:
        root: Page binding the path starts from
        frame_path: Iframe selectors, outermost first

    Returns:
        (binding to resolve locators against, binding statements)
    """
    bindings = []
    parent = root
    for index, selector in enumerate(frame_path):
        binding = f"frame{index}"
        bindings.append(f"{binding} = {parent}.locator({literal(selector)}).content_frame")
        parent = binding
    return parent, CodeBlock.of(*bindings)
