import streamlit as st

from brand_audit.core import config, service
from brand_audit.core.constants import (
    FORM_QUESTIONS,
    LAST_SUB_STEP,
    PALETTE_ROLES,
    STEP_TITLES,
)
from brand_audit.core.flow import IntakeWizard
from brand_audit.core.state import Collecting, KitView, Results, Welcome, describe
from brand_audit.export.exporter_docx import render_docx_bytes
from brand_audit.export.exporter_txt import render_txt
from brand_audit.kit.generator import (
    color_palette_explanation,
    tagline_explanation,
    typography_explanation,
)
from brand_audit.scoring.classification import classify, opportunities_text, strengths_text

SHOW_DEBUG = config.show_debug()


# MUST be first Streamlit call
st.set_page_config(
    page_title="AI Brand Audit",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# ---------- CSS (SAFE) ----------
st.markdown(
    """
<style>
.stApp { background: #f9fafb; }

.block-container {
  padding-top: 1.5rem;
  max-width: 980px;
}

.ba-hero { text-align: center; margin: 24px 0 32px 0; }
.ba-hero h1 { font-size: 56px; font-weight: 800; color: #111827; line-height: 1.1; }
.ba-hero h1 span { display: block; color: #2563eb; }
.ba-hero p { color: #4b5563; font-size: 18px; }

.ba-pill {
  display: inline-block;
  padding: 4px 12px;
  border-radius: 999px;
  border: 1px solid #e5e7eb;
  background: #fff;
  font-size: 13px;
  color: #374151;
}

.ba-score {
  text-align: center;
  border-radius: 18px;
  padding: 18px 10px;
  border: 2px solid;
  margin-bottom: 12px;
}
.ba-score .num { font-size: 44px; font-weight: 800; }
.ba-score .big { font-size: 88px; }
.ba-score .lbl { font-size: 14px; font-weight: 600; }

.ba-swatch {
  display: inline-block;
  width: 44px;
  height: 44px;
  border-radius: 12px;
  border: 2px solid #fff;
  box-shadow: 0 1px 3px rgba(0,0,0,0.15);
  vertical-align: middle;
  margin-right: 12px;
}

button[kind="primary"] {
  border-radius: 14px !important;
  font-weight: 700 !important;
}
</style>
""",
    unsafe_allow_html=True,
)


# ---------- Helpers ----------
def _init_session():
    st.session_state["wizard"] = IntakeWizard()


def _wizard() -> IntakeWizard:
    return st.session_state["wizard"]


def _score_card(title: str, score: int, big: bool = False):
    tier = classify(score)
    num_cls = "num big" if big else "num"
    st.markdown(
        f"""
<div class="ba-score" style="background:{tier.background};border-color:{tier.border};">
  <div class="lbl">{title}</div>
  <div class="{num_cls}" style="color:{tier.color};">{score}</div>
  <div class="lbl" style="color:{tier.color};">{tier.label}</div>
</div>
""",
        unsafe_allow_html=True,
    )


def _step_badge(n: int):
    st.markdown(
        f'<div style="text-align:center"><span class="ba-pill">Step {n} of 3</span></div>',
        unsafe_allow_html=True,
    )


# ---------- Session init ----------
if "wizard" not in st.session_state:
    _init_session()

wizard = _wizard()
state = wizard.state

# ---------- Sidebar ----------
with st.sidebar:
    if SHOW_DEBUG:
        st.header("Status")
        st.write(f"**Webhook:** `{config.webhook_url()}`")
        st.json({k: str(v) for k, v in describe(state).items()})
        if wizard.last_outcome is not None and wizard.last_outcome.error:
            st.warning(f"Fallback used: {wizard.last_outcome.error}")
        st.divider()

    st.caption(" → ".join(STEP_TITLES))
    if st.button("Restart Audit", type="primary"):
        wizard.restart()
        st.rerun()

    if isinstance(state, (Results, KitView)):
        c1, c2 = st.columns(2)
        with c1:
            if st.button("Export DOCX"):
                res = service.export(state.form, state.scores, state.kit, fmt="docx")
                st.success(f"DOCX: {res['path']}")
        with c2:
            if st.button("Export TXT"):
                res = service.export(state.form, state.scores, state.kit, fmt="txt")
                st.success(f"TXT: {res['path']}")


# ---------- Welcome ----------
if isinstance(state, Welcome):
    st.markdown(
        """
<div class="ba-hero">
  <span class="ba-pill">⭐ AI-Powered Brand Assessment · NEW</span>
  <h1>Discover Your Brand's<span>True Potential</span></h1>
  <p>Answer five quick questions and get an AI brand audit with scores,
  insights and a starter brand kit.</p>
</div>
""",
        unsafe_allow_html=True,
    )
    c1, c2, c3 = st.columns(3)
    with c1:
        st.markdown("#### 🎯 AI Brand Audit")
        st.caption("Awareness, consistency and engagement scored in one pass.")
    with c2:
        st.markdown("#### 💡 Actionable Insights")
        st.caption("Concrete next steps tailored to your audience.")
    with c3:
        st.markdown("#### 🎨 Brand Kit")
        st.caption("Mission, vision, tagline, typography and palette.")

    if st.button("Start Your Brand Audit →", type="primary", use_container_width=True):
        wizard.start()
        st.rerun()


# ---------- Form ----------
elif isinstance(state, Collecting):
    q = FORM_QUESTIONS[state.sub_step]

    st.caption(f"Step {state.sub_step + 1} of {len(FORM_QUESTIONS)}")
    st.progress(state.progress)
    st.markdown(f"### {q.question}")
    if not q.required:
        st.caption("Optional")

    with st.form(key=f"q_{state.sub_step}", clear_on_submit=False):
        if q.multiline:
            value = st.text_area(q.question, value=state.current_value, placeholder=q.placeholder,
                                 label_visibility="collapsed")
        else:
            value = st.text_input(q.question, value=state.current_value, placeholder=q.placeholder,
                                  label_visibility="collapsed")

        err = state.errors.get(q.field)
        if err:
            st.error(err)

        # Enter triggers the first submit button declared, so Next goes first
        col_back, col_next = st.columns(2)
        with col_next:
            next_label = "Generate Brand Audit" if state.sub_step == LAST_SUB_STEP else "Next →"
            nxt = st.form_submit_button(next_label, type="primary", use_container_width=True)
        with col_back:
            back = st.form_submit_button("← Back", use_container_width=True)

    if back:
        wizard.edit(value)
        wizard.retreat()
        st.rerun()

    if nxt:
        if state.sub_step == LAST_SUB_STEP:
            with st.spinner("Analyzing…"):
                wizard.submit_on_enter(value)
        else:
            wizard.submit_on_enter(value)
        st.rerun()


# ---------- Results ----------
elif isinstance(state, Results):
    form, scores = state.form, state.scores
    kit = state.kit.kit if state.kit else None

    _step_badge(2)
    st.markdown("## Your Brand Audit Results")
    st.caption(f"Here's how {form.brand_name} performs across key brand metrics")

    _score_card("Overall Brand Score", scores.overall, big=True)
    cols = st.columns(3)
    for col, (name, val) in zip(cols, scores.dimensions().items()):
        with col:
            _score_card(name, val)
            st.progress(max(0, min(val, 100)) / 100)

    st.markdown("### 📈 Summary of Findings")
    c1, c2 = st.columns(2)
    with c1:
        st.success("**Strengths**\n\n" + ((kit and kit.insight_summary) or strengths_text(form.brand_name, scores)))
    with c2:
        st.info("**Opportunities**\n\n" + ((kit and kit.summary_of_findings) or opportunities_text(scores)))

    if st.button("Generate My Brand Kit ✨", type="primary", use_container_width=True,
                 disabled=wizard.loading):
        with st.spinner("Generating Brand Kit…"):
            wizard.generate_kit()
        st.rerun()


# ---------- Kit ----------
elif isinstance(state, KitView):
    form, scores, kit = state.form, state.scores, state.kit.kit

    _step_badge(3)
    st.markdown("## Your Brand Kit")
    st.caption(f"A complete brand identity toolkit for {form.brand_name}")

    c1, c2 = st.columns(2)
    with c1:
        st.markdown("### 🎯 Mission")
        st.write(kit.mission)
    with c2:
        st.markdown("### 👁️ Vision")
        st.write(kit.vision)

    st.markdown("### ✨ Tagline")
    st.markdown(f"#### *\"{kit.tagline}\"*")
    st.caption(tagline_explanation(kit, form))

    c1, c2 = st.columns(2)
    with c1:
        st.markdown("### 🔤 Typography")
        st.write(kit.typography)
        st.markdown(
            f'<p style="font-family:{kit.typography}, sans-serif;font-size:24px;font-weight:700;">'
            f"{kit.tagline}</p>",
            unsafe_allow_html=True,
        )
        st.caption(typography_explanation(kit, form))
    with c2:
        st.markdown("### 🎨 Color Palette")
        for (role, usage), color in zip(PALETTE_ROLES, kit.color_palette):
            st.markdown(
                f'<div><span class="ba-swatch" style="background:{color};"></span>'
                f"<b>{role}</b> <code>{color}</code><br/><small>{usage}</small></div>",
                unsafe_allow_html=True,
            )
        st.markdown("**Why These Colors Work**")
        st.caption(color_palette_explanation(kit, form))

    st.markdown("### 💡 Actionable Insights")
    for i, item in enumerate(kit.insights, start=1):
        st.markdown(f"{i}. {item}")

    st.divider()
    d1, d2 = st.columns(2)
    with d1:
        st.download_button(
            "Download Report (TXT)",
            data=render_txt(form, scores, kit=kit),
            file_name="brand_audit.txt",
            mime="text/plain",
            use_container_width=True,
        )
    with d2:
        st.download_button(
            "Download Report (DOCX)",
            data=render_docx_bytes(form, scores, kit=kit),
            file_name="brand_audit.docx",
            mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            use_container_width=True,
        )

    with st.expander("Ready to Transform Your Brand?", expanded=False):
        st.write("Our brand experts will help you implement these recommendations and provide:")
        st.markdown(
            "- Complete brand guidelines\n"
            "- Logo design & variations\n"
            "- Marketing templates\n"
            "- Implementation strategy"
        )
        st.link_button("Contact Proweaver", service.contact_mailto(), type="primary")
