"""dashboards/pages/1_Population.py"""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from pdforecast.common.config import load_config
from pdforecast.data import reference as ref
from pdforecast.data.supplier import ReferenceDataSupplier
from pdforecast.forecasting.engine import ForecastEngine
from pdforecast.pipelines.operations import DashboardOperations, Operation, OperationResult


def project_root() -> Path:
    # dashboards/pages/1_Population.py -> dashboards/pages -> dashboards -> project root
    return Path(__file__).resolve().parents[2]


@st.cache_resource(show_spinner=False)
def get_supplier() -> ReferenceDataSupplier:
    cfg = load_config(project_root() / "configs" / "config.yaml")
    return ReferenceDataSupplier.from_config(cfg)


def _plot(fig) -> None:
    try:
        st.plotly_chart(fig, width="stretch")
    except TypeError:
        st.plotly_chart(fig, use_container_width=True)


def _render(result: OperationResult) -> None:
    if not result.ok:
        st.error(result.error)
        return
    _plot(result.figure)
    if result.stats:
        cols = st.columns(len(result.stats))
        for col, (label, value) in zip(cols, result.stats.items()):
            col.metric(label, value)


def main() -> None:
    st.set_page_config(page_title="Population • PD Burden", layout="wide")
    st.title("Population")
    st.caption(f"{ref.COUNTY_NAME} age structure and BEBR-style projections.")

    ops = DashboardOperations(get_supplier(), ForecastEngine())

    with st.sidebar:
        st.header("Filters")
        year = st.selectbox("Census year", [ref.CENSUS_YEAR], index=0)
        scenario = st.selectbox(
            "Projection",
            ["total", "age65plus"],
            format_func=lambda s: "Total population" if s == "total" else "Age 65+",
        )

    st.subheader("Age distribution")
    _render(ops.dispatch(Operation.AGE_DISTRIBUTION, year=year))

    st.divider()

    st.subheader("Population projection")
    _render(ops.dispatch(Operation.PROJECTION, scenario=scenario))


if __name__ == "__main__":
    main()
