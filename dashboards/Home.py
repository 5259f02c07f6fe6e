"""dashboards/Home.py"""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from pdforecast.common.config import load_config
from pdforecast.data import reference as ref
from pdforecast.data.supplier import ReferenceDataSupplier
from pdforecast.forecasting.engine import ForecastEngine
from pdforecast.pipelines.operations import DashboardOperations, Operation


def project_root() -> Path:
    # dashboards/Home.py -> dashboards -> project root
    return Path(__file__).resolve().parents[1]


@st.cache_resource(show_spinner=False)
def get_supplier() -> ReferenceDataSupplier:
    cfg = load_config(project_root() / "configs" / "config.yaml")
    return ReferenceDataSupplier.from_config(cfg)


def _page_link(path: str, label: str) -> None:
    """Prefer st.page_link (Streamlit multipage). Fallback to st.switch_page for older versions."""
    if hasattr(st, "page_link"):
        st.page_link(path, label=label)
    else:
        if st.button(label, use_container_width=True):
            st.switch_page(path)


def main() -> None:
    st.set_page_config(page_title="PD Burden • Home", layout="wide")

    st.title(f"{ref.COUNTY_NAME} — Parkinson's Disease Analysis")
    st.caption("Navigate: Population → Disease Burden → Forecast")

    ops = DashboardOperations(get_supplier(), ForecastEngine())
    initial = ops.load_initial()

    failed = [r for r in initial.values() if not r.ok]
    if failed:
        st.error(failed[0].error)

    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Population")
        age = initial[Operation.AGE_DISTRIBUTION]
        for label, value in age.stats.items():
            st.metric(label, value)
    with c2:
        st.subheader("PD mortality")
        mort = initial[Operation.MORTALITY]
        for label, value in mort.stats.items():
            st.metric(label, value)

    st.divider()

    st.subheader("Navigate")
    b1, b2, b3 = st.columns(3)
    with b1:
        _page_link("pages/1_Population.py", "👥 Population")
    with b2:
        _page_link("pages/2_Disease_Burden.py", "🗺️ Disease Burden")
    with b3:
        _page_link("pages/3_Forecast.py", "📈 ML Forecast")

    st.divider()

    st.subheader("Command line")
    st.code("pdforecast forecast --target-year 2030\npdforecast report", language="bash")
    st.info(
        "Reference figures are synthetic demo data modelled on Census ACS, BEBR projections "
        "and CDC WONDER mortality. Forecasts are illustrative only."
    )


if __name__ == "__main__":
    main()
