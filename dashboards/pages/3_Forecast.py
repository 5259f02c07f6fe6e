"""dashboards/pages/3_Forecast.py"""

from __future__ import annotations

import io
from pathlib import Path

import pandas as pd
import streamlit as st

from pdforecast.common.config import load_config
from pdforecast.data.supplier import ReferenceDataSupplier
from pdforecast.features.build_features import FORECAST_START_YEAR
from pdforecast.forecasting.engine import ForecastEngine
from pdforecast.pipelines.operations import DashboardOperations, Operation
from pdforecast.reporting.tables import make_forecast_table


def project_root() -> Path:
    # dashboards/pages/3_Forecast.py -> dashboards/pages -> dashboards -> project root
    return Path(__file__).resolve().parents[2]


@st.cache_resource(show_spinner=False)
def get_supplier() -> ReferenceDataSupplier:
    cfg = load_config(project_root() / "configs" / "config.yaml")
    return ReferenceDataSupplier.from_config(cfg)


def get_engine() -> ForecastEngine:
    # one engine per browser session; it holds the last fitted network
    if "engine" not in st.session_state:
        cfg = load_config(project_root() / "configs" / "config.yaml")
        st.session_state["engine"] = ForecastEngine.from_config(cfg)
    return st.session_state["engine"]


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
    st.set_page_config(page_title="ML Forecast • PD Burden", layout="wide")
    st.title("ML Forecast of Parkinson's Burden")
    st.caption("A small neural network is refit on six historical years every time you run it.")

    ops = DashboardOperations(get_supplier(), get_engine())

    with st.sidebar:
        st.header("Forecast")
        target_year = st.slider("Target year", FORECAST_START_YEAR, 2050, 2030, step=1)
        run = st.button("Run forecast", type="primary")

    if run:
        with st.spinner("Training model..."):
            st.session_state["forecast"] = ops.dispatch(Operation.FORECAST, target_year=target_year)

    result = st.session_state.get("forecast")
    if result is None:
        st.info("Choose a target year and press **Run forecast**.")
        return
    if not result.ok:
        st.error(result.error)
        return

    cols = st.columns(len(result.stats))
    for col, (label, value) in zip(cols, result.stats.items()):
        col.metric(label, value)

    _plot(result.figure)

    table = make_forecast_table(result.record)
    _df(table)
    st.download_button(
        "Download forecast (CSV)",
        data=to_csv_bytes(table),
        file_name=f"pd_case_forecast_{result.record.years[0]}_{result.record.years[-1]}.csv",
        mime="text/csv",
    )


if __name__ == "__main__":
    main()
