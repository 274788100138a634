"""Tests for the text acquisition cascade and the PDF entry point."""

import subprocess

import fitz
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

import assessment_compare.parsing as parsing
from assessment_compare.config import AcquisitionSettings
from assessment_compare.exceptions import AssessmentExtractionError, TextAcquisitionError
from assessment_compare.parsing import acquisition
from assessment_compare.parsing.acquisition import (
    acquire_text,
    extract_text_layer,
    extract_text_layer_pypdf2,
    extract_with_ocr,
    extract_with_pdftotext,
    rasterize_page,
    resolve_page_limit,
)
from assessment_compare.parsing.extractor import CandidateCounter


def write_pdf(path, pages, pagesize=letter):
    """Write a simple text PDF, one list of lines per page."""
    c = canvas.Canvas(str(path), pagesize=pagesize)
    for page_lines in pages:
        y = pagesize[1] - 52
        for line in page_lines:
            c.drawString(72, y, line)
            y -= 14
        c.showPage()
    c.save()
    return path


@pytest.fixture
def settings():
    return AcquisitionSettings()


@pytest.fixture
def assessment_pdf(tmp_path, export_text):
    return write_pdf(tmp_path / "jane.pdf", [export_text.splitlines()])


def test_text_layer_is_read_from_generated_pdf(assessment_pdf, settings):
    text = extract_text_layer(assessment_pdf, settings)
    assert "Mobile Developer" in text
    assert "4/5.0" in text


def test_acquire_text_returns_first_sufficient_strategy(tmp_path, settings):
    pdf = tmp_path / "a.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    calls = []

    def short(path, settings):
        calls.append("short")
        return "tiny"

    def long(path, settings):
        calls.append("long")
        return "x" * 150

    def never(path, settings):
        calls.append("never")
        return "y" * 150

    text = acquire_text(pdf, settings, strategies=[("short", short), ("long", long), ("never", never)])
    assert text == "x" * 150
    assert calls == ["short", "long"]


def test_acquire_text_skips_failing_strategies(tmp_path, settings):
    pdf = tmp_path / "a.pdf"
    pdf.write_bytes(b"%PDF-1.4")

    def broken(path, settings):
        raise RuntimeError("damaged xref table")

    def works(path, settings):
        return "z" * 120

    assert acquire_text(pdf, settings, strategies=[("broken", broken), ("works", works)]) == "z" * 120


def test_acquire_text_falls_back_to_longest_minimal_text(tmp_path, settings):
    pdf = tmp_path / "a.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    strategies = [
        ("a", lambda path, settings: "short text"),
        ("b", lambda path, settings: "a somewhat longer text"),
        ("c", lambda path, settings: ""),
    ]
    assert acquire_text(pdf, settings, strategies=strategies) == "a somewhat longer text"


def test_acquire_text_missing_file(tmp_path, settings):
    with pytest.raises(FileNotFoundError):
        acquire_text(tmp_path / "missing.pdf", settings, strategies=[])


def test_page_limit_with_known_count(monkeypatch, tmp_path):
    monkeypatch.setattr(acquisition, "count_pages", lambda path: 25)
    assert resolve_page_limit(tmp_path, None, 10) == 25
    assert resolve_page_limit(tmp_path, 5, 10) == 5
    assert resolve_page_limit(tmp_path, 40, 10) == 25


def test_page_limit_with_unknown_count(monkeypatch, tmp_path):
    def unreadable(path):
        raise ValueError("cannot read trailer")

    monkeypatch.setattr(acquisition, "count_pages", unreadable)
    assert resolve_page_limit(tmp_path, None, 10) == 10
    assert resolve_page_limit(tmp_path, 3, 10) == 3


def test_ocr_skips_failed_pages_and_removes_rasters(monkeypatch, tmp_path, settings):
    """A page that fails OCR is skipped; every raster is cleaned up."""
    pdf = write_pdf(tmp_path / "scan.pdf", [["one"], ["two"], ["three"]])

    def fake_rasterize(doc, page_number, settings, out_dir):
        image = out_dir / f"page{page_number + 1}.png"
        image.write_bytes(b"png")
        return image

    def fake_ocr(image_path, settings):
        if image_path.name == "page2.png":
            raise RuntimeError("tesseract crashed")
        return f"text from {image_path.stem}"

    monkeypatch.setattr(acquisition, "rasterize_page", fake_rasterize)
    monkeypatch.setattr(acquisition, "ocr_image", fake_ocr)

    text = extract_with_ocr(pdf, settings)

    assert text == "text from page1\ntext from page3\n"
    assert list(tmp_path.glob("*.png")) == []


def test_ocr_respects_page_cap(monkeypatch, tmp_path):
    pdf = write_pdf(tmp_path / "scan.pdf", [["one"], ["two"], ["three"]])
    seen = []

    def fake_rasterize(doc, page_number, settings, out_dir):
        seen.append(page_number)
        image = out_dir / f"page{page_number + 1}.png"
        image.write_bytes(b"png")
        return image

    monkeypatch.setattr(acquisition, "rasterize_page", fake_rasterize)
    monkeypatch.setattr(acquisition, "ocr_image", lambda image_path, settings: "page")

    extract_with_ocr(pdf, AcquisitionSettings(ocr_max_pages=2))
    assert seen == [0, 1]


def test_parse_pdf_end_to_end(assessment_pdf, settings):
    counter = CandidateCounter()
    assessment = parsing.parse_assessment_pdf(assessment_pdf, counter, settings)

    assert assessment.candidate_name == "Candidate 1"
    assert assessment.job_title == "Mobile Developer"
    assert [q.rating for q in assessment.questions] == [4, 2, 3]
    assert counter.current == 1


def test_counter_advances_only_on_success(monkeypatch, tmp_path, export_text):
    counter = CandidateCounter()

    monkeypatch.setattr(parsing, "acquire_text", lambda path, settings=None: export_text)
    first = parsing.parse_assessment_pdf(tmp_path / "a.pdf", counter)

    monkeypatch.setattr(
        parsing, "acquire_text", lambda path, settings=None: "Nothing that looks like a question here. " * 3
    )
    with pytest.raises(AssessmentExtractionError):
        parsing.parse_assessment_pdf(tmp_path / "b.pdf", counter)

    monkeypatch.setattr(parsing, "acquire_text", lambda path, settings=None: export_text)
    second = parsing.parse_assessment_pdf(tmp_path / "c.pdf", counter)

    assert first.candidate_name == "Candidate 1"
    assert second.candidate_name == "Candidate 2"
    assert counter.current == 2


def test_blank_text_reports_unreadable_pdf(monkeypatch, tmp_path):
    monkeypatch.setattr(parsing, "acquire_text", lambda path, settings=None: "  \n")
    counter = CandidateCounter()
    with pytest.raises(TextAcquisitionError, match="All PDF text extraction methods failed"):
        parsing.parse_assessment_pdf(tmp_path / "blank.pdf", counter)
    assert counter.current == 0


def test_pypdf2_text_layer_is_read_from_generated_pdf(assessment_pdf, settings):
    text = extract_text_layer_pypdf2(assessment_pdf, settings)
    assert "Mobile Developer" in text
    assert "Interview Assessment Summary" in text


def test_raster_is_bounded_by_max_size(tmp_path):
    """300 DPI on a 500pt page would be 2083px; the bound brings it to 1000px."""
    pdf = write_pdf(tmp_path / "scan.pdf", [["page one"]], pagesize=(500, 500))
    out_dir = tmp_path / "rasters"
    out_dir.mkdir()
    settings = AcquisitionSettings(ocr_dpi=300, ocr_max_size=1000)

    with fitz.open(str(pdf)) as doc:
        image_path = rasterize_page(doc, 0, settings, out_dir)

    assert image_path.parent == out_dir
    assert image_path.suffix == ".png"
    pixmap = fitz.Pixmap(str(image_path))
    assert max(pixmap.width, pixmap.height) <= 1000
    assert (pixmap.width, pixmap.height) == (1000, 1000)


def test_raster_uses_dpi_below_the_bound(tmp_path):
    """At 72 DPI a 500pt page renders at 500px, under the default bound."""
    pdf = write_pdf(tmp_path / "scan.pdf", [["page one"]], pagesize=(500, 500))

    with fitz.open(str(pdf)) as doc:
        image_path = rasterize_page(doc, 0, AcquisitionSettings(ocr_dpi=72), tmp_path)

    pixmap = fitz.Pixmap(str(image_path))
    assert (pixmap.width, pixmap.height) == (500, 500)


def test_pdftotext_runs_the_configured_command(monkeypatch, tmp_path):
    pdf = tmp_path / "a.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args, 0, stdout="text from poppler", stderr="")

    monkeypatch.setattr(acquisition.subprocess, "run", fake_run)

    text = extract_with_pdftotext(pdf, AcquisitionSettings(pdftotext_cmd="/usr/bin/pdftotext"))

    assert text == "text from poppler"
    assert calls == [["/usr/bin/pdftotext", str(pdf), "-"]]


def test_failing_pdftotext_keeps_earlier_text(monkeypatch, tmp_path, settings):
    """A non-zero exit from the last strategy is logged and the best text so far is kept."""
    pdf = tmp_path / "a.pdf"
    pdf.write_bytes(b"%PDF-1.4")

    def failing_run(args, **kwargs):
        raise subprocess.CalledProcessError(1, args, stderr="Syntax Error: Couldn't read xref table")

    monkeypatch.setattr(acquisition.subprocess, "run", failing_run)

    with pytest.raises(subprocess.CalledProcessError):
        extract_with_pdftotext(pdf, settings)

    strategies = [
        ("text-layer", lambda path, settings: "partial text layer"),
        ("pdftotext", extract_with_pdftotext),
    ]
    assert acquire_text(pdf, settings, strategies=strategies) == "partial text layer"
