"""
participants/tests/test_participant_documents.py

Writes real PDF/DOCX files into a temporary directory.
"""

from __future__ import annotations

import tempfile
import unittest
from datetime import date
from pathlib import Path

from docx import Document

from core.common.errors import DocumentGenerationError
from history.logic.history_repository import HistoryRepository
from history.logic.history_service import HistoryService
from participants.logic.participant_documents import DocumentKind, ParticipantDocumentService

DAY = date(2024, 1, 15)


class TestParticipantDocuments(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.repo = HistoryRepository(":memory:")
        self.history = HistoryService(self.repo)
        self.service = ParticipantDocumentService(self.dir / "docs", self.history)

    def tearDown(self) -> None:
        self.repo.close()
        self._tmp.cleanup()

    def test_registration_pdf(self) -> None:
        doc = self.service.generate(DocumentKind.REGISTRATION, ["1001", "1002"], day=DAY)
        self.assertEqual(doc.path.name, "registration-2024-01-15.pdf")
        self.assertEqual(doc.count, 2)
        self.assertTrue(doc.path.read_bytes().startswith(b"%PDF"))
        event = self.history.get_history()[0]
        self.assertEqual(event.type, "participants_registration")
        self.assertEqual(event.meta["orders"], ["1001", "1002"])

    def test_participation_pdf_from_string_kind(self) -> None:
        doc = self.service.generate("participation", ["55"], day=DAY)
        self.assertIs(doc.kind, DocumentKind.PARTICIPATION)
        self.assertTrue(doc.path.exists())

    def test_address_list_docx(self) -> None:
        doc = self.service.generate(DocumentKind.ADDRESS_LIST, ["1001", "1002", "1003"], day=DAY)
        self.assertEqual(doc.path.suffix, ".docx")
        table = Document(str(doc.path)).tables[0]
        self.assertEqual(len(table.rows), 4)
        self.assertEqual(table.rows[3].cells[1].text, "1003")

    def test_existing_file_not_overwritten(self) -> None:
        first = self.service.generate(DocumentKind.REGISTRATION, ["10"], day=DAY)
        second = self.service.generate(DocumentKind.REGISTRATION, ["11"], day=DAY)
        self.assertNotEqual(first.path, second.path)
        self.assertEqual(second.path.name, "registration-2024-01-15-2.pdf")

    def test_empty_input_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.service.generate(DocumentKind.REGISTRATION, [])
        self.assertEqual(self.history.get_history(), [])

    def test_unwritable_directory(self) -> None:
        blocker = self.dir / "blocker"
        blocker.write_text("x", encoding="utf-8")
        service = ParticipantDocumentService(blocker, self.history)
        with self.assertRaises(DocumentGenerationError):
            service.generate(DocumentKind.ADDRESS_LIST, ["10"], day=DAY)

    def test_kind_properties(self) -> None:
        self.assertEqual(DocumentKind.ADDRESS_LIST.extension, ".docx")
        self.assertEqual(DocumentKind.PARTICIPATION.extension, ".pdf")


if __name__ == "__main__":
    unittest.main()
