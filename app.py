import streamlit as st
import structlog

from bmi_engine import InvalidMeasurement, Measurement, category_label, lookup_category
from charts import bmi_gauge, reference_table
from logging_config import configure_logging
from settings import get_settings

settings = get_settings()

# ------------------------ UI CONFIGURATION ------------------------
st.set_page_config(page_title=settings.page_title, page_icon=settings.page_icon, layout="wide")
st.title(f"{settings.page_icon} {settings.page_title}")


@st.cache_resource
def init_logging(level):
    configure_logging(level)
    return structlog.get_logger("app")


logger = init_logging(settings.log_level)

# Status box used for each category's description
STATUS_BOX = {
    "underweight": st.warning,
    "normal": st.success,
    "overweight": st.info,
    "obese": st.error,
}

# ------------------------ HELPER FUNCTIONS ------------------------

def read_measurement():
    height = st.slider(
        "📏 Height (cm)",
        min_value=settings.height_min_cm,
        max_value=settings.height_max_cm,
        value=settings.height_default_cm,
        step=1,
        key="height_cm"
    )
    st.caption(f"{height} cm")

    weight = st.slider(
        "⚖️ Weight (kg)",
        min_value=settings.weight_min_kg,
        max_value=settings.weight_max_kg,
        value=settings.weight_default_kg,
        step=1,
        key="weight_kg"
    )
    st.caption(f"{weight} kg")

    return Measurement(height_cm=height, weight_kg=weight)


def render_result(result):
    info = lookup_category(result.category)

    st.metric("Your BMI", f"{result.value:.1f}")
    st.markdown(f"**Category: {category_label(result.category)}**")
    STATUS_BOX.get(result.category, st.success)(info.description)

    st.subheader("❤️ Health Tips")
    st.markdown("\n".join(f"- {tip}" for tip in info.tips))


def render_disclaimer():
    st.markdown("---")
    st.caption("Note: BMI is a general indicator and may not be accurate for athletes, elderly, or pregnant women.")
    st.caption("Always consult healthcare professionals for personalized advice.")

# ------------------------ MAIN LOGIC ------------------------

def main():
    col_input, col_result = st.columns(2)

    with col_input:
        measurement = read_measurement()

    try:
        result = measurement.evaluate()
    except InvalidMeasurement as e:
        logger.warning("page.invalid_measurement", error=str(e))
        with col_result:
            st.error(f"❌ Cannot calculate BMI: {e.reason}")
        render_disclaimer()
        return

    with col_result:
        render_result(result)

    if settings.show_gauge:
        st.plotly_chart(bmi_gauge(result))

    if settings.show_reference_table:
        st.subheader("BMI Categories")
        st.dataframe(reference_table(), hide_index=True)

    render_disclaimer()

# ------------------------ EXECUTE ------------------------
main()
