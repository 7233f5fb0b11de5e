# Keep FORM_FIELDS order EXACTLY aligned with the question list the UI renders

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class FormQuestion:
    field: str
    question: str
    placeholder: str
    multiline: bool = False
    required: bool = True


FORM_QUESTIONS: List[FormQuestion] = [
    FormQuestion(
        field="brand_name",
        question="What's your brand's name?",
        placeholder="Enter your brand's name",
    ),
    FormQuestion(
        field="industry",
        question="What industry is your business in?",
        placeholder="e.g., Technology, Healthcare, Consulting...",
    ),
    FormQuestion(
        field="brand_description",
        question="How would you describe what your brand does?",
        placeholder="Tell us about your brand in a few sentences...",
        multiline=True,
    ),
    FormQuestion(
        field="target_audience",
        question="Who is your ideal customer?",
        placeholder="Describe your target audience",
    ),
    FormQuestion(
        field="website_link",
        question="What's your website URL?",
        placeholder="https://yourwebsite.com",
        required=False,
    ),
]

FORM_FIELDS = [q.field for q in FORM_QUESTIONS]
LAST_SUB_STEP = len(FORM_QUESTIONS) - 1

STEP_TITLES = ["Welcome", "Brand Information", "Audit Results", "Brand Kit"]

WELCOME_STEP = 0
FORM_STEP = 1
RESULTS_STEP = 2
KIT_STEP = 3

REQUIRED_MSG = "This field is required"
URL_MSG = "Please enter a valid URL starting with http:// or https://"

# (role, usage) in palette order
PALETTE_ROLES = [
    ("Primary", "Main brand color for logos and key elements"),
    ("Secondary", "Supporting color for accents and highlights"),
    ("Accent", "Call-to-action buttons and important details"),
    ("Background", "Page backgrounds and subtle sections"),
    ("Text", "Primary text and content readability"),
]

CONTACT_SUBJECT = "Brand Kit Access Request"
