"""Line patterns recognised in exported interview assessment text."""

import re

# "3/5.0", "4.5/5", "2/5." on a line of their own start a new question block.
RATING_TRIGGER = re.compile(r"^(\d+(?:\.\d+)?)/5(?:\.0?)?$")
RATING_PREFIX = re.compile(r"^\d+/5")

CATEGORY_LINE = re.compile(r"^(TECHNICAL|BEHAVIORAL|SITUATIONAL|EXPERIENCE)$", re.IGNORECASE)
CATEGORY_INLINE = re.compile(r"Category:\s*(technical|behavioral|situational|experience)", re.IGNORECASE)
DIFFICULTY_LINE = re.compile(r"^(EASY|MEDIUM|HARD)$", re.IGNORECASE)
DIFFICULTY_INLINE = re.compile(r"Difficulty:\s*(easy|medium|hard)", re.IGNORECASE)
KEYWORD_LINE = re.compile(
    r"^(TECHNICAL|BEHAVIORAL|SITUATIONAL|EXPERIENCE|EASY|MEDIUM|HARD)$", re.IGNORECASE
)

DURATION = re.compile(r"(\d+)\s*(?:minutes?|mins?)\b", re.IGNORECASE)
BARE_DURATION = re.compile(r"^\d+\s*(?:MIN|minutes?)", re.IGNORECASE)

# Header fields: bare uppercase label on its own line, or "Label: value".
DATE_INLINE = re.compile(r"\b(?:Generated on:?|Date:|Created:)\s*(.+)", re.IGNORECASE)
DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%m/%d/%Y", "%d/%m/%Y", "%Y-%m-%d", "%d %B %Y")
JOB_TITLE_INLINE = re.compile(r"^(?:Position|Job Title|Role):\s*(.*)$", re.IGNORECASE)
DEPARTMENT_INLINE = re.compile(r"^Department:\s*(.*)$", re.IGNORECASE)
EXPERIENCE_INLINE = re.compile(r"^Experience(?: Level)?:\s*(.*)$", re.IGNORECASE)
SKILLS_INLINE = re.compile(r"^(?:Required )?Skills:\s*(.*)$", re.IGNORECASE)
RESUME_INLINE = re.compile(r"^Resume:\s*(.*)$", re.IGNORECASE)

JOB_TITLE_LABELS = ("POSITION", "JOB TITLE")
DEPARTMENT_LABEL = "DEPARTMENT"
EXPERIENCE_LABEL = "EXPERIENCE LEVEL"
SKILLS_LABEL = "REQUIRED SKILLS"
RESUME_LABEL = "RESUME"

ROLE_NOUN = re.compile(
    r"^(Software Engineer|Developer|Manager|Analyst|Designer|Consultant|MobileDeveloper|Mobile Developer)",
    re.IGNORECASE,
)

# Summary statistics, number-first ("12 QUESTIONS") or label-first ("Total Questions: 12").
TOTAL_QUESTIONS = re.compile(r"(\d+)\s*questions?\b|Total Questions:\s*(\d+)", re.IGNORECASE)
TOTAL_DURATION = re.compile(r"(\d+)\s*(?:minutes?|mins?)\b|Total Duration:\s*(\d+)", re.IGNORECASE)
AVERAGE_RATING = re.compile(
    r"(\d+(?:\.\d+)?)\s*(?:AVG RATING|Average Rating|Average)"
    r"|(?:AVG RATING|Average Rating|Average):?\s*(\d+(?:\.\d+)?)",
    re.IGNORECASE,
)
QUESTIONS_RATED = re.compile(r"(\d+)\s*of\s*\d+\s*(?:questions\s*)?rated", re.IGNORECASE)

CRITERIA_LABEL = "EVALUATION CRITERIA"
CRITERIA_INLINE = re.compile(r"Criteria:\s*(.+)", re.IGNORECASE)

ASSESSMENT_MARKER = "Interview Assessment"
RATING_REFINE = re.compile(r"(?:Rating|Score):\s*(\d+(?:\.\d+)?)", re.IGNORECASE)
COMMENT_REFINE = re.compile(r"(?:Comments|Feedback):\s*(.+)", re.IGNORECASE)
COMMENT_PLACEHOLDER = "No additional comments"

BEHAVIORAL_HINTS = ("situation", "time when", "experience", "example")
SITUATIONAL_HINTS = ("difficult", "conflict", "challenge", "problem")


def first_group(match: re.Match) -> str:
    """Return the first participating group of an alternation match."""
    return next(group for group in match.groups() if group is not None)


def is_trigger(line: str) -> bool:
    return RATING_TRIGGER.match(line) is not None


def looks_like_question(line: str) -> bool:
    """Question-shaped line accepted by the lookahead right after a trigger."""
    return (
        len(line) > 20
        and not KEYWORD_LINE.match(line)
        and CRITERIA_LABEL not in line
        and ASSESSMENT_MARKER not in line
        and "Rating:" not in line
        and not RATING_PREFIX.match(line)
        and not BARE_DURATION.match(line)
    )


def could_be_question(line: str, require_question_mark: bool) -> bool:
    """Broader filter used while a question is open but still has no text."""
    if require_question_mark and "?" not in line:
        return False
    return (
        len(line) > 20
        and not KEYWORD_LINE.match(line)
        and CRITERIA_LABEL not in line
        and ASSESSMENT_MARKER not in line
        and "Rating:" not in line
        and "/5" not in line
        and not BARE_DURATION.match(line)
        and not re.search(r"Category:", line, re.IGNORECASE)
        and not re.search(r"Difficulty:", line, re.IGNORECASE)
    )


def looks_like_criteria(line: str) -> bool:
    return (
        len(line) > 10
        and ASSESSMENT_MARKER not in line
        and "Rating:" not in line
        and not RATING_PREFIX.match(line)
    )
