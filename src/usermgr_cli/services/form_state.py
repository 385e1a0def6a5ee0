"""Form and selection state for the user form.

Holds the draft being typed, which user (if any) the draft is an edit of,
and whether the avatar picker is open.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from usermgr_cli.models.user import DRAFT_FIELDS, User, UserDraft


@dataclass
class FormState:
    """Draft values, edit marker and avatar-picker flag."""

    draft: UserDraft = field(default_factory=UserDraft.empty)
    editing_id: int | None = None
    avatar_picker_open: bool = False

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def submit_label(self) -> str:
        return "Update User" if self.is_editing else "Create User"

    @property
    def can_cancel(self) -> bool:
        # Cancel is only offered while editing
        return self.is_editing

    def set_field(self, name: str, value: str) -> None:
        """Set one draft field.

        Raises:
            AttributeError: If *name* is not a form field
        """
        if name not in DRAFT_FIELDS:
            raise AttributeError(f"Unknown form field '{name}'")
        setattr(self.draft, name, value)

    def open_avatar_picker(self) -> None:
        self.avatar_picker_open = True

    def select_avatar(self, url: str) -> None:
        """Use *url* as the draft's avatar and close the picker."""
        self.draft.img_url = url
        self.avatar_picker_open = False

    def begin_edit(self, user: User) -> None:
        """Load *user* into the draft and mark it as being edited."""
        self.draft = UserDraft.from_user(user)
        self.editing_id = user.id

    def reset_draft(self) -> None:
        self.draft = UserDraft.empty()

    def clear_edit_marker(self) -> None:
        self.editing_id = None

    def cancel(self) -> None:
        """Drop the draft and leave edit mode."""
        self.reset_draft()
        self.clear_edit_marker()
