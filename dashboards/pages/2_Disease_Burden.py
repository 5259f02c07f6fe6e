"""dashboards/pages/2_Disease_Burden.py"""

from __future__ import annotations

import io
from pathlib import Path

import pandas as pd
import streamlit as st

from pdforecast.common.config import load_config
from pdforecast.data import reference as ref
from pdforecast.data.supplier import HEATMAP_METRICS, ReferenceDataSupplier
from pdforecast.forecasting.engine import ForecastEngine
from pdforecast.pipelines.operations import DashboardOperations, Operation
from pdforecast.reporting.charts import mortality_trend_figure
from pdforecast.reporting.tables import make_mortality_trend_table


def project_root() -> Path:
    # dashboards/pages/2_Disease_Burden.py -> dashboards/pages -> dashboards -> project root
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


def _df(df: pd.DataFrame) -> None:
    try:
        st.dataframe(df, width="stretch")
    except TypeError:
        st.dataframe(df, use_container_width=True)


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def main() -> None:
    st.set_page_config(page_title="Disease Burden • PD Burden", layout="wide")
    st.title("Disease Burden")
    st.caption("CDC WONDER-style PD mortality and the per-city distribution across the county.")

    ops = DashboardOperations(get_supplier(), ForecastEngine())

    with st.sidebar:
        st.header("Map filters")
        hm_year = st.selectbox("Year", list(range(ref.HEATMAP_REFERENCE_YEAR, 2031)), index=0)
        hm_metric = st.selectbox("Metric", list(HEATMAP_METRICS), index=1, format_func=str.capitalize)
        show_history = st.checkbox("Show mortality history", value=False)

    st.subheader("Mortality by age group")
    mort = ops.dispatch(Operation.MORTALITY)
    if not mort.ok:
        st.error(mort.error)
    else:
        left, right = st.columns([3, 1])
        with left:
            _plot(mort.figure)
        with right:
            for label, value in mort.stats.items():
                st.metric(label, value)

        if show_history:
            _plot(mortality_trend_figure(mort.record))
            _df(make_mortality_trend_table(mort.record))

    st.divider()

    st.subheader("Geographic distribution")
    hm = ops.dispatch(Operation.HEATMAP, year=hm_year, metric=hm_metric)
    if not hm.ok:
        st.error(hm.error)
        return

    _plot(hm.figure)
    frame = hm.record.to_frame()
    _df(frame[["City", "Population", "Value"]])
    st.download_button(
        "Download city values (CSV)",
        data=to_csv_bytes(frame),
        file_name=f"pd_{hm.record.metric}_{hm.record.year}.csv",
        mime="text/csv",
    )


if __name__ == "__main__":
    main()
