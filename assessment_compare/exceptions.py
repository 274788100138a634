"""Errors raised while reading and scoring interview assessments."""

UNREADABLE_PDF_MESSAGE = """All PDF text extraction methods failed. The PDF may contain:
    • Scanned images instead of selectable text
    • Protected/encrypted content
    • Complex formatting that cannot be parsed
    • Unsupported PDF version or encoding

Please ensure your Interview Assessment PDF contains selectable text content. You can test this by trying to select and copy text from the PDF in a PDF viewer.

If the text is selectable but this error persists, the PDF may use an unsupported encoding format."""

NO_TEXT_MESSAGE = """No readable text content found in PDF. This PDF may be:
    • A scanned document (image-only PDF)
    • Password protected or encrypted
    • Corrupted or not a valid PDF

Please upload an Interview Assessment PDF that contains selectable text content."""

MINIMAL_TEXT_MESSAGE = """PDF contains minimal text content ({length} characters). This PDF may contain:
    • Scanned images instead of selectable text
    • Protected/encrypted content
    • Complex formatting that cannot be parsed

Please ensure your Interview Assessment PDF contains selectable text content. You can test this by trying to select and copy text from the PDF in a PDF viewer."""

NO_QUESTIONS_MESSAGE = (
    "No valid interview questions found in the PDF. Please ensure the PDF contains "
    "properly formatted interview assessment data with questions and ratings."
)


class AssessmentParseError(ValueError):
    """Base class for failures turning a PDF into an assessment."""


class TextAcquisitionError(AssessmentParseError):
    """No usable text could be obtained from the document."""


class AssessmentExtractionError(AssessmentParseError):
    """Text was obtained but it does not look like an assessment export."""


class ScoringError(ValueError):
    """An assessment cannot be scored."""
