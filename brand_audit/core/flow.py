from __future__ import annotations

from typing import Callable, Optional

from .constants import LAST_SUB_STEP
from .service import resolve_kit, submit_intake
from .state import Collecting, KitView, Results, Welcome, WizardState, initial_state, sub_step_of
from .types import IntakeForm, SubmissionOutcome
from .validation import validate_field
from ..webhook.client import WebhookClient

Submitter = Callable[[IntakeForm], SubmissionOutcome]


class IntakeWizard:
    """
    Brand-audit wizard.

    Screens: Welcome(0) -> Collecting(1, five sub-steps) -> Results(2) -> KitView(3).
    Every event returns the new state. Events that do not apply to the
    current screen are ignored and leave the state as it was.

    Not guarded against re-entrant events while `loading` is set; the UI
    only disables its buttons.
    """

    def __init__(
        self,
        client: Optional[WebhookClient] = None,
        submitter: Optional[Submitter] = None,
        kit_delay_sec: Optional[float] = None,
    ):
        self.state: WizardState = initial_state()
        self.loading = False
        self.last_outcome: Optional[SubmissionOutcome] = None
        self._client = client
        self._submitter = submitter
        self._kit_delay_sec = kit_delay_sec

    # -----------------------------
    # Position
    # -----------------------------
    @property
    def top_step(self) -> int:
        return self.state.top_step

    @property
    def sub_step(self) -> int:
        return sub_step_of(self.state)

    @property
    def errors(self) -> dict:
        if isinstance(self.state, Collecting):
            return dict(self.state.errors)
        return {}

    def _ignored(self, event: str) -> WizardState:
        print(f"[Wizard] '{event}' ignored on {type(self.state).__name__}", flush=True)
        return self.state

    # -----------------------------
    # Events
    # -----------------------------
    def start(self) -> WizardState:
        if not isinstance(self.state, Welcome):
            return self._ignored("start")
        self.state = Collecting(draft=self.state.draft)
        return self.state

    def restart(self) -> WizardState:
        self.state = initial_state()
        self.loading = False
        self.last_outcome = None
        return self.state

    def edit(self, value: str) -> WizardState:
        st = self.state
        if not isinstance(st, Collecting):
            return self._ignored("edit")
        draft = st.draft.with_value(st.current_field, value)
        # any edit clears the inline error
        self.state = Collecting(sub_step=st.sub_step, draft=draft, errors={})
        return self.state

    def advance(self) -> WizardState:
        st = self.state
        if not isinstance(st, Collecting):
            return self._ignored("advance")

        ok, msg = validate_field(st.current_field, st.current_value)
        if not ok:
            self.state = Collecting(sub_step=st.sub_step, draft=st.draft, errors={st.current_field: msg})
            return self.state

        if st.sub_step < LAST_SUB_STEP:
            self.state = Collecting(sub_step=st.sub_step + 1, draft=st.draft, errors={})
            return self.state

        return self._submit(st.draft)

    def submit_on_enter(self, value: str) -> WizardState:
        """Enter inside a text field == edit + Next."""
        self.edit(value)
        return self.advance()

    def retreat(self) -> WizardState:
        st = self.state
        if not isinstance(st, Collecting):
            return self._ignored("retreat")
        if st.sub_step > 0:
            self.state = Collecting(sub_step=st.sub_step - 1, draft=st.draft, errors={})
        else:
            self.state = Welcome(draft=st.draft)
        return self.state

    def generate_kit(self) -> WizardState:
        st = self.state
        if isinstance(st, KitView):
            # already showing a kit, nothing to recompute
            return self.state
        if not isinstance(st, Results):
            return self._ignored("generate_kit")

        self.loading = True
        try:
            kit = resolve_kit(st.form, st.kit, delay_sec=self._kit_delay_sec)
        finally:
            self.loading = False
        self.state = KitView(form=st.form, scores=st.scores, kit=kit)
        return self.state

    # -----------------------------
    # Submission
    # -----------------------------
    def _submit(self, form: IntakeForm) -> WizardState:
        self.loading = True
        try:
            if self._submitter is not None:
                outcome = self._submitter(form)
            else:
                outcome = submit_intake(form, client=self._client)
        finally:
            self.loading = False

        self.last_outcome = outcome
        self.state = Results(form=form, scores=outcome.scores, kit=outcome.kit)
        return self.state
