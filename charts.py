import pandas as pd
import plotly.graph_objects as go

from bmi_engine import CATEGORY_KEYS, CATEGORIES, THRESHOLDS, BMIResult, category_label

# ---------- COLOR PALETTE ----------
colors = {
    "underweight": "#42a5f5",
    "normal": "#66bb6a",
    "overweight": "#ffca28",
    "obese": "#ef5350"
}

GAUGE_UPPER = 40


def category_bands(upper=GAUGE_UPPER):
    """Split [0, upper] into (key, low, high) bands at the category thresholds."""
    edges = [0.0] + [threshold for threshold, _ in THRESHOLDS] + [upper]
    bands = []
    for key, low, high in zip(CATEGORY_KEYS, edges, edges[1:]):
        if low >= upper:
            break
        bands.append((key, low, min(high, upper)))
    return bands


def bmi_gauge(result: BMIResult, upper=GAUGE_UPPER):
    needle = min(result.value, upper)

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=needle,
        number={"valueformat": ".1f"},
        title={"text": f"Category: {category_label(result.category)}"},
        gauge={
            "axis": {"range": [0, upper]},
            "bar": {"color": "#333333", "thickness": 0.25},
            "steps": [
                {"range": [low, high], "color": colors[key]}
                for key, low, high in category_bands(upper)
            ],
        },
    ))
    fig.update_layout(
        plot_bgcolor="white",
        paper_bgcolor="white",
        font=dict(color="#333333"),
        height=280,
        margin=dict(l=30, r=30, t=60, b=20)
    )
    return fig


def reference_table():
    rows = [
        {
            "Category": category_label(key),
            "BMI Range": CATEGORIES[key].range,
            "Guidance": CATEGORIES[key].description,
        }
        for key in CATEGORY_KEYS
    ]
    return pd.DataFrame(rows, columns=["Category", "BMI Range", "Guidance"])
