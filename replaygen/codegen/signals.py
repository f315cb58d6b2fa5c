"""Signal handling around translated actions.

Popups and downloads are awaited with ``expect_*`` context managers around
the action; dialogs get a handler registered before it.
"""

from typing import Optional

from ..errors import UnknownSignalError
from ..recording.models import ActionRecord, Signal, SignalName
from .formatters import identifier
from .fragment import CodeBlock


def signal_names(action: ActionRecord) -> set[SignalName]:
    """Validate the action's signals and return the distinct names.

    Raises:
        UnknownSignalError: A signal outside dialog/popup/download
    """
    names = set()
    for signal in action.signals:
        try:
            names.add(SignalName(signal.name))
        except ValueError:
            raise UnknownSignalError(
                f"Unknown signal '{signal.name}' is not implemented.", action.raw
            ) from None
    return names


def _last_signal(action: ActionRecord, name: SignalName) -> Optional[Signal]:
    found = None
    for signal in action.signals:
        if signal.name == name.value:
            found = signal
    return found


def _expect_event(page: str, event: str, binding: str, block: CodeBlock) -> CodeBlock:
    return (
        CodeBlock.of(f"with {page}.expect_{event}() as {event}_info:")
        + block.indented()
        + CodeBlock.of(f"{binding} = {event}_info.value")
    )


def wrap_signals(page: str, block: CodeBlock, action: ActionRecord) -> CodeBlock:
    """Apply signal handling to a translated action.

    Popup wraps the action, download wraps that, and the dialog handler
    is prepended. The new page or download is bound to the alias the
    recorder gave it, falling back to ``popup`` / ``download``. When a
    signal repeats, the last one wins.
    """
    signal_names(action)

    popup = _last_signal(action, SignalName.POPUP)
    if popup is not None:
        block = _expect_event(page, "popup", identifier(popup.alias, "popup"), block)

    download = _last_signal(action, SignalName.DOWNLOAD)
    if download is not None:
        block = _expect_event(page, "download", identifier(download.alias, "download"), block)

    if _last_signal(action, SignalName.DIALOG) is not None:
        block = CodeBlock.of(f'{page}.once("dialog", lambda dialog: dialog.dismiss())') + block
    return block
