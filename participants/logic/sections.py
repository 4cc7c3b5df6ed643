"""Collapsible sections of the participants page."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from participants.logic.participant_documents import DocumentKind


class Section(str, Enum):
    REGISTRATION = "registration"
    PARTICIPATION = "participation"
    ADDRESS = "address"

    @property
    def title_key(self) -> str:
        return _TITLE_KEYS[self]

    @property
    def action_key(self) -> str:
        return _ACTION_KEYS[self]

    @property
    def document_kind(self) -> DocumentKind:
        return _KINDS[self]


_TITLE_KEYS = {
    Section.REGISTRATION: "registrationConfirmation",
    Section.PARTICIPATION: "participationConfirmation",
    Section.ADDRESS: "addressPostList",
}
_ACTION_KEYS = {
    Section.REGISTRATION: "makeRegistrationConfirmation",
    Section.PARTICIPATION: "makeParticipationConfirmation",
    Section.ADDRESS: "makeAddressPostList",
}
_KINDS = {
    Section.REGISTRATION: DocumentKind.REGISTRATION,
    Section.PARTICIPATION: DocumentKind.PARTICIPATION,
    Section.ADDRESS: DocumentKind.ADDRESS_LIST,
}


def toggle_section(current: Optional[Section], requested: Section) -> Optional[Section]:
    """Clicking the open section closes it; any other opens instead."""
    return None if current is requested else requested
