"""
participants/tests/test_sections.py
"""

from __future__ import annotations

import unittest

from participants.logic.participant_documents import DocumentKind
from participants.logic.sections import Section, toggle_section


class TestSections(unittest.TestCase):
    def test_toggle(self) -> None:
        self.assertIs(toggle_section(None, Section.REGISTRATION), Section.REGISTRATION)
        self.assertIsNone(toggle_section(Section.REGISTRATION, Section.REGISTRATION))
        self.assertIs(toggle_section(Section.REGISTRATION, Section.ADDRESS), Section.ADDRESS)

    def test_section_metadata(self) -> None:
        self.assertEqual(Section.ADDRESS.title_key, "addressPostList")
        self.assertEqual(Section.PARTICIPATION.action_key, "makeParticipationConfirmation")
        self.assertIs(Section.ADDRESS.document_kind, DocumentKind.ADDRESS_LIST)


if __name__ == "__main__":
    unittest.main()
