from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .constants import FORM_QUESTIONS, FORM_STEP, KIT_STEP, RESULTS_STEP, WELCOME_STEP
from .types import FieldName, IntakeForm, KitSource, ScoreSet


# -----------------------------
# Wizard state variants
# -----------------------------
@dataclass(frozen=True)
class Welcome:
    # answers typed before going Back survive a return to Welcome
    draft: IntakeForm = field(default_factory=IntakeForm)
    top_step: int = field(default=WELCOME_STEP, init=False)


@dataclass(frozen=True)
class Collecting:
    sub_step: int = 0
    draft: IntakeForm = field(default_factory=IntakeForm)
    # at most one entry: the focused field
    errors: Dict[FieldName, str] = field(default_factory=dict)
    top_step: int = field(default=FORM_STEP, init=False)

    @property
    def current_field(self) -> FieldName:
        return FORM_QUESTIONS[self.sub_step].field

    @property
    def current_value(self) -> str:
        return self.draft.get(self.current_field)

    @property
    def progress(self) -> float:
        return (self.sub_step + 1) / len(FORM_QUESTIONS)


@dataclass(frozen=True)
class Results:
    form: IntakeForm
    scores: ScoreSet
    kit: Optional[KitSource] = None
    top_step: int = field(default=RESULTS_STEP, init=False)


@dataclass(frozen=True)
class KitView:
    form: IntakeForm
    scores: ScoreSet
    kit: KitSource
    top_step: int = field(default=KIT_STEP, init=False)


WizardState = Union[Welcome, Collecting, Results, KitView]


def initial_state() -> WizardState:
    return Welcome()


def sub_step_of(state: WizardState) -> int:
    """Sub-step only advances inside Collecting; every other screen reports 0."""
    if isinstance(state, Collecting):
        return state.sub_step
    return 0


def describe(state: WizardState) -> Dict[str, object]:
    """Flat snapshot for the debug panel."""
    out: Dict[str, object] = {
        "variant": type(state).__name__,
        "top_step": state.top_step,
        "sub_step": sub_step_of(state),
    }
    if isinstance(state, Collecting):
        out["errors"] = dict(state.errors)
        out["draft"] = state.draft
    if isinstance(state, (Results, KitView)):
        out["scores"] = state.scores
        out["kit_source"] = type(state.kit).__name__ if state.kit else None
    return out
