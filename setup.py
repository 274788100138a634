"""Setup script for assessment-compare."""

from setuptools import setup, find_packages

setup(
    name="assessment-compare",
    version="0.1.0",
    description="Interview assessment PDF extraction and candidate comparison scoring",
    author="Your Name",
    python_requires=">=3.11",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "PyMuPDF>=1.23.0",
        "PyPDF2>=3.0.0",
        "pytesseract>=0.3.10",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "reportlab>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "assessment-compare=assessment_compare.cli:main",
        ],
    },
)
