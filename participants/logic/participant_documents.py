"""
===============================================================================
ParticipantDocumentService – confirmations and address post list
-------------------------------------------------------------------------------
    - registration / participation confirmation: PDF via reportlab,
      one page per order number
    - address post list: DOCX via python-docx, one table row per order number
Files are written to the configured documents directory and named
``<kind>-<YYYY-MM-DD>[-n].<ext>``; existing files are never overwritten.
===============================================================================
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from docx import Document  # type: ignore
from reportlab.lib.pagesizes import A4  # type: ignore
from reportlab.lib.units import cm  # type: ignore
from reportlab.pdfgen import canvas  # type: ignore

from core.common.errors import DocumentGenerationError
from core.helpers.date_time_helper import date_stamp
from history.logic.history_service import HistoryService

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    REGISTRATION = "registration"
    PARTICIPATION = "participation"
    ADDRESS_LIST = "address_list"

    @property
    def extension(self) -> str:
        return ".docx" if self is DocumentKind.ADDRESS_LIST else ".pdf"

    @property
    def history_type(self) -> str:
        return f"participants_{self.value}"


_TITLES = {
    DocumentKind.REGISTRATION: "Anmeldebestätigung",
    DocumentKind.PARTICIPATION: "Teilnahmebestätigung",
    DocumentKind.ADDRESS_LIST: "Adress-Post-Liste",
}

_BODY = {
    DocumentKind.REGISTRATION: "Hiermit bestätigen wir die Anmeldung zur Bestellung Nr. {number}.",
    DocumentKind.PARTICIPATION: "Hiermit bestätigen wir die Teilnahme zur Bestellung Nr. {number}.",
}


@dataclass(frozen=True)
class GeneratedDocument:
    kind: DocumentKind
    path: Path
    count: int


class ParticipantDocumentService:
    def __init__(self, output_dir: Path, history: Optional[HistoryService] = None,
                 school_name: str = "inlingua") -> None:
        self.output_dir = Path(output_dir)
        self.history = history
        self.school_name = school_name

    # ------------------------------------------------------------------ #
    def generate(self, kind: DocumentKind | str, order_numbers: Sequence[str],
                 day: Optional[date] = None) -> GeneratedDocument:
        kind = DocumentKind(kind)
        numbers = [n for n in order_numbers if n]
        if not numbers:
            raise ValueError("No order numbers given")

        day = day or date.today()
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            target = self._target_path(kind, day)
            if kind is DocumentKind.ADDRESS_LIST:
                self._write_address_list(target, numbers, day)
            else:
                self._write_confirmations(target, kind, numbers, day)
        except (OSError, ValueError) as exc:
            logger.error("Generating %s failed: %s", kind.value, exc)
            raise DocumentGenerationError(f"{_TITLES[kind]}: {exc}") from exc

        logger.info("%s written to %s (%d entries)", kind.value, target, len(numbers))
        if self.history is not None:
            self.history.log_activity(
                kind.history_type,
                f"{_TITLES[kind]} erzeugt ({len(numbers)})",
                {"path": str(target), "orders": list(numbers)},
            )
        return GeneratedDocument(kind=kind, path=target, count=len(numbers))

    # ------------------------------------------------------------------ #
    #  Writers                                                           #
    # ------------------------------------------------------------------ #
    def _write_confirmations(self, target: Path, kind: DocumentKind,
                             numbers: Sequence[str], day: date) -> None:
        width, height = A4
        c = canvas.Canvas(str(target), pagesize=A4)
        c.setTitle(_TITLES[kind])
        for number in numbers:
            c.setFont("Helvetica-Bold", 18)
            c.drawString(2.5 * cm, height - 3 * cm, self.school_name)
            c.setFont("Helvetica", 10)
            c.drawRightString(width - 2.5 * cm, height - 3 * cm, day.strftime("%d.%m.%Y"))

            c.setFont("Helvetica-Bold", 16)
            c.drawString(2.5 * cm, height - 6 * cm, _TITLES[kind])
            c.setFont("Helvetica", 12)
            c.drawString(2.5 * cm, height - 7.5 * cm, _BODY[kind].format(number=number))
            c.drawString(2.5 * cm, height - 10 * cm, "Mit freundlichen Grüßen")
            c.drawString(2.5 * cm, height - 10.7 * cm, self.school_name)

            c.setFont("Helvetica", 8)
            c.drawString(2.5 * cm, 1.5 * cm, f"{_TITLES[kind]} · {number}")
            c.showPage()
        c.save()

    def _write_address_list(self, target: Path, numbers: Sequence[str], day: date) -> None:
        doc = Document()
        doc.add_heading(_TITLES[DocumentKind.ADDRESS_LIST], level=1)
        doc.add_paragraph(f"{self.school_name} · {day.strftime('%d.%m.%Y')}")

        table = doc.add_table(rows=1, cols=3)
        table.style = "Table Grid"
        header = table.rows[0].cells
        header[0].text = "Nr."
        header[1].text = "Bestellnummer"
        header[2].text = "Adresse"
        for idx, number in enumerate(numbers, start=1):
            cells = table.add_row().cells
            cells[0].text = str(idx)
            cells[1].text = number
            cells[2].text = ""
        doc.save(str(target))

    # ------------------------------------------------------------------ #
    def _target_path(self, kind: DocumentKind, day: date) -> Path:
        stem = f"{kind.value}-{date_stamp(day)}"
        candidate = self.output_dir / f"{stem}{kind.extension}"
        counter = 2
        while candidate.exists():
            candidate = self.output_dir / f"{stem}-{counter}{kind.extension}"
            counter += 1
        return candidate
