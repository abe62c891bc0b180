import streamlit as st

from uphill_calories.config import load_settings
from uphill_calories.energy import calculate
from uphill_calories.logging import configure_logging
from uphill_calories.models import FIELD_ORDER, RawInputs
from uphill_calories.normalize import display_inputs
from uphill_calories.render import format_errors, rounded_result
from uphill_calories.texts import SUPPORTED_LANGS, label, method_text

settings = load_settings()
configure_logging(verbose=settings.verbose, log_json=settings.log_json)

st.set_page_config(page_title="Uphill Walking Calories", page_icon="⛰️")

DEFAULTS = {"weight": "70", "speed": "5", "grade": "10", "duration": "30"}
for name, value in DEFAULTS.items():
    st.session_state.setdefault(name, value)

lang = st.sidebar.radio(
    "Langue / Language",
    list(SUPPORTED_LANGS),
    index=SUPPORTED_LANGS.index(settings.lang),
    horizontal=True,
)


def run() -> None:
    raw = RawInputs.from_text(*(st.session_state[name] for name in FIELD_ORDER))
    checked, result = calculate(raw, lang)
    st.session_state["outcome"] = (checked, result)
    if checked.inputs is not None:
        # Show the values the computation actually used.
        for name, value in display_inputs(checked.inputs).items():
            st.session_state[name] = str(value)


st.title(label("title", lang))

# Enter inside any text input submits the form.
with st.form("inputs"):
    cols = st.columns(2)
    for idx, name in enumerate(FIELD_ORDER):
        cols[idx % 2].text_input(label(name, lang), key=name)
    st.form_submit_button(label("calculate", lang), on_click=run)

outcome = st.session_state.get("outcome")
if outcome is not None:
    checked, result = outcome
    if result is None:
        st.error(format_errors(checked.errors, lang))
    else:
        shown = rounded_result(result)
        st.subheader(label("result_title", lang))
        c1, c2 = st.columns(2)
        c1.metric("kcal", shown["total_kcal"])
        c2.metric("kcal / min", shown["kcal_per_min"])
        with st.expander(label("details", lang)):
            st.write(label("vo2", lang).format(vo2=shown["vo2"]))
            st.caption(label("assumptions", lang))
        with st.expander(label("method_title", lang)):
            st.text(method_text(lang))
