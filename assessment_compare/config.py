"""Runtime settings for text acquisition, read from the environment."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AcquisitionSettings(BaseModel):
    """Knobs for the PDF text acquisition cascade."""

    min_text_length: int = Field(
        default=100, description="Below this many characters the text layer counts as missing"
    )
    ocr_dpi: int = Field(default=300, description="Rasterization density for OCR")
    ocr_max_size: int = Field(default=2000, description="Bound on raster width and height in pixels")
    ocr_language: str = Field(default="eng", description="Tesseract language code")
    ocr_default_pages: int = Field(
        default=10, description="Pages to OCR when the page count cannot be determined"
    )
    ocr_max_pages: Optional[int] = Field(default=None, description="Optional cap on OCR pages")
    pdftotext_cmd: str = Field(default="pdftotext", description="Command-line extractor binary")
    tesseract_cmd: Optional[str] = Field(default=None, description="Path to the tesseract binary")

    @classmethod
    def from_env(cls) -> "AcquisitionSettings":
        """Build settings from ASSESSMENT_* environment variables (and a .env file)."""
        load_dotenv()
        values: dict[str, object] = {}
        env_map = {
            "min_text_length": "ASSESSMENT_MIN_TEXT_LENGTH",
            "ocr_dpi": "ASSESSMENT_OCR_DPI",
            "ocr_max_size": "ASSESSMENT_OCR_MAX_SIZE",
            "ocr_language": "ASSESSMENT_OCR_LANGUAGE",
            "ocr_default_pages": "ASSESSMENT_OCR_DEFAULT_PAGES",
            "ocr_max_pages": "ASSESSMENT_OCR_MAX_PAGES",
            "pdftotext_cmd": "ASSESSMENT_PDFTOTEXT_CMD",
            "tesseract_cmd": "TESSERACT_CMD",
        }
        for field_name, env_name in env_map.items():
            raw = os.getenv(env_name)
            if raw:
                values[field_name] = raw
        return cls.model_validate(values)
