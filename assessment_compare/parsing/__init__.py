"""Reading interview assessment PDFs into structured assessments."""

import logging
from typing import Optional

from ..config import AcquisitionSettings
from ..exceptions import UNREADABLE_PDF_MESSAGE, TextAcquisitionError
from ..models import InterviewAssessment
from .acquisition import acquire_text
from .extractor import CandidateCounter, extract_assessment

logger = logging.getLogger(__name__)


def parse_assessment_pdf(
    file_path,
    counter: CandidateCounter,
    settings: Optional[AcquisitionSettings] = None,
) -> InterviewAssessment:
    """Acquire text from a PDF and extract its assessment.

    The counter only advances when extraction succeeds.

    Raises:
        TextAcquisitionError: If no strategy produced any text
        AssessmentExtractionError: If the text holds no valid questions
    """
    text = acquire_text(file_path, settings)
    if not text.strip():
        raise TextAcquisitionError(UNREADABLE_PDF_MESSAGE)

    assessment = extract_assessment(text, counter.next_number)
    counter.advance()
    logger.info(
        "Parsed %s: %d questions, document average %.1f",
        assessment.candidate_name,
        assessment.total_questions,
        assessment.average_rating,
    )
    return assessment


__all__ = [
    "CandidateCounter",
    "acquire_text",
    "extract_assessment",
    "parse_assessment_pdf",
]
