"""Dialogs shared by the screens."""

from __future__ import annotations

from typing import Any, Callable, Optional

from kivymd.uix.button import MDFlatButton, MDRaisedButton
from kivymd.uix.dialog import MDDialog

from backend.confirmations import PendingConfirmation


def open_confirmation(
    pending: Optional[PendingConfirmation],
    on_confirmed: Optional[Callable[[Any], None]] = None,
) -> Optional[MDDialog]:
    """Show ``pending`` and run it only if the user accepts.

    ``on_confirmed`` receives the action's return value, typically to
    refresh the calling screen.
    """

    if pending is None:
        return None
    dialog = None

    def do_confirm(*args):
        result = pending.confirm()
        if dialog:
            dialog.dismiss()
        if on_confirmed:
            on_confirmed(result)

    def do_cancel(*args):
        pending.cancel()
        if dialog:
            dialog.dismiss()

    dialog = MDDialog(
        title=pending.title,
        text=pending.message,
        buttons=[
            MDFlatButton(text="Cancel", on_release=do_cancel),
            MDRaisedButton(text=pending.confirm_label, on_release=do_confirm),
        ],
    )
    dialog.open()
    return dialog
