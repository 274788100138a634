"""Text acquisition from assessment PDFs.

Assessment PDFs arrive either digitally generated (a usable text layer) or
printed and rescanned (images only). Text is acquired with an ordered cascade
of strategies, cheapest first; each strategy takes a path and returns text or
raises. Between stages the result is checked against a minimum length.
"""

import io
import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Optional

import fitz  # PyMuPDF
import pytesseract
from PyPDF2 import PdfReader

from ..config import AcquisitionSettings

logger = logging.getLogger(__name__)

Strategy = Callable[[Path, AcquisitionSettings], str]


def extract_text_layer(path: Path, settings: AcquisitionSettings) -> str:
    """Read the embedded text layer with PyMuPDF (whole file in memory)."""
    data = path.read_bytes()
    with fitz.open(stream=data, filetype="pdf") as doc:
        text = "\n".join(page.get_text("text") for page in doc)
    logger.info("PyMuPDF extracted %d characters", len(text))
    return text


def extract_text_layer_pypdf2(path: Path, settings: AcquisitionSettings) -> str:
    """Read the embedded text layer with PyPDF2."""
    reader = PdfReader(io.BytesIO(path.read_bytes()))
    text = "\n".join(page.extract_text() or "" for page in reader.pages)
    logger.info("PyPDF2 extracted %d characters", len(text))
    return text


def count_pages(path: Path) -> int:
    with open(path, "rb") as f:
        return len(PdfReader(f).pages)


def resolve_page_limit(path: Path, max_pages: Optional[int], default_pages: int) -> int:
    """How many pages to OCR.

    With a known page count: all pages, or ``min(max_pages, count)`` when capped.
    Without one: ``max_pages`` if given, else ``default_pages``.
    """
    try:
        total = count_pages(path)
    except Exception as e:
        logger.warning("Could not determine page count: %s", e)
        return max_pages if max_pages else default_pages

    limit = min(max_pages, total) if max_pages else total
    logger.info("PDF has %d pages, will process %d pages with OCR", total, limit)
    return limit


def rasterize_page(doc, page_number: int, settings: AcquisitionSettings, out_dir: Path) -> Path:
    """Render one page to a temporary PNG at the OCR density, bounded in size."""
    page = doc.load_page(page_number)
    zoom = min(settings.ocr_dpi / 72, settings.ocr_max_size / max(page.rect.width, page.rect.height))
    pixmap = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom))

    fd, name = tempfile.mkstemp(prefix=f"page{page_number + 1}_", suffix=".png", dir=out_dir)
    os.close(fd)
    pixmap.save(name)
    return Path(name)


def ocr_image(image_path: Path, settings: AcquisitionSettings) -> str:
    if settings.tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = settings.tesseract_cmd
    return pytesseract.image_to_string(str(image_path), lang=settings.ocr_language)


def remove_raster(image_path: Path) -> None:
    try:
        image_path.unlink()
    except OSError as e:
        logger.warning("Could not clean up temp file %s: %s", image_path, e)


def extract_with_ocr(path: Path, settings: AcquisitionSettings) -> str:
    """Rasterize pages one at a time and OCR them; bad pages are skipped."""
    logger.info("Starting OCR extraction for %s", path)
    limit = resolve_page_limit(path, settings.ocr_max_pages, settings.ocr_default_pages)

    parts: list[str] = []
    with fitz.open(str(path)) as doc:
        for page_number in range(min(limit, doc.page_count)):
            try:
                image_path = rasterize_page(doc, page_number, settings, path.parent)
                try:
                    text = ocr_image(image_path, settings)
                finally:
                    remove_raster(image_path)
            except Exception as e:
                logger.warning("OCR failed for page %d: %s", page_number + 1, e)
                continue
            parts.append(text + "\n")
            logger.info("Page %d OCR extracted %d characters", page_number + 1, len(text))

    full_text = "".join(parts)
    logger.info("OCR extraction completed. Total text length: %d", len(full_text))
    return full_text


def extract_with_pdftotext(path: Path, settings: AcquisitionSettings) -> str:
    """Last resort: the poppler ``pdftotext`` command-line tool."""
    result = subprocess.run(
        [settings.pdftotext_cmd, str(path), "-"],
        capture_output=True,
        text=True,
        check=True,
    )
    logger.info("pdftotext extracted %d characters", len(result.stdout))
    return result.stdout


DEFAULT_STRATEGIES: list[tuple[str, Strategy]] = [
    ("text-layer", extract_text_layer),
    ("text-layer-pypdf2", extract_text_layer_pypdf2),
    ("ocr", extract_with_ocr),
    ("pdftotext", extract_with_pdftotext),
]


def is_minimal(text: str, settings: AcquisitionSettings) -> bool:
    """True when the text is too short to be a real text layer."""
    return len(text.strip()) < settings.min_text_length


def acquire_text(
    file_path,
    settings: Optional[AcquisitionSettings] = None,
    strategies: Optional[list[tuple[str, Strategy]]] = None,
) -> str:
    """Get the best available text for a PDF.

    Strategies run in order until one yields non-minimal text. A failing
    strategy is logged and skipped. If none qualifies, the longest text seen is
    returned, which may be empty.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    settings = settings or AcquisitionSettings.from_env()
    strategies = DEFAULT_STRATEGIES if strategies is None else strategies
    logger.info("PDF file info: %d bytes", path.stat().st_size)

    best = ""
    for name, strategy in strategies:
        try:
            text = strategy(path, settings)
        except Exception as e:
            logger.warning("Extraction strategy %s failed: %s", name, e)
            continue
        if not is_minimal(text, settings):
            return text
        logger.info("Strategy %s produced minimal text (%d characters)", name, len(text.strip()))
        if len(text.strip()) > len(best.strip()):
            best = text
    return best
