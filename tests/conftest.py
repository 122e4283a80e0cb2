import io
import json

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Lease agreement clause 4.2")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a Word document with two paragraphs and a table."""
    document = docx.Document()
    document.add_paragraph("Clause 1. The employee works 60 hours per week.")
    document.add_paragraph("Clause 2. No overtime is paid.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Salary"
    table.rows[0].cells[1].text = "100 000 KZT"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    """Generate a valid Word document with no text."""
    buf = io.BytesIO()
    docx.Document().save(buf)
    return buf.getvalue()


@pytest.fixture()
def valid_response_body() -> str:
    return json.dumps({
        "summary": "Employment contract with excessive working hours.",
        "risks": [
            {
                "clause": "Clause 1",
                "riskLevel": "High",
                "violation": "Exceeds the 40-hour working week.",
                "recommendation": "Limit working hours to 40 per week.",
            },
            {
                "clause": "Clause 2",
                "riskLevel": "Critical",
                "violation": "Overtime must be compensated.",
                "recommendation": "Add overtime compensation.",
            },
        ],
        "verdict": "Dangerous",
    })
