"""
TOR Activity Dashboard: interactive front end.

Run with:  streamlit run app.py
"""

import sys
from datetime import date
from pathlib import Path

import streamlit as st
import plotly.graph_objects as go

sys.path.insert(0, str(Path(__file__).resolve().parent))

from tor_dashboard.config import UNIT_NAME
from tor_dashboard.dashboard import (
    get_daily_reports,
    get_productivity,
    get_reports_overview,
)
from tor_dashboard.kpis import timeline_frame
from tor_dashboard.loaders import TransportError, fetch_csv_text
from tor_dashboard.simulator import generate_activity_csv

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title=f"{UNIT_NAME} Dashboard",
    page_icon="🚓",
    layout="wide",
    initial_sidebar_state="expanded",
)

TREND_COLORS = {
    "up": "#10b981",
    "down": "#ef4444",
    "flat": "#94a3b8",
}


# ---------------------------------------------------------------------------
# Data loading (fresh on every rerun)
# ---------------------------------------------------------------------------
def load_csv_text(offline: bool) -> str | None:
    if offline:
        return generate_activity_csv()
    try:
        return fetch_csv_text()
    except TransportError:
        return None


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.title(UNIT_NAME)
st.sidebar.markdown("Painel de Produtividade")
st.sidebar.divider()

today = date.today()
start_date = st.sidebar.date_input("Início", date(today.year, 1, 1), format="DD/MM/YYYY")
end_date = st.sidebar.date_input("Fim", today, format="DD/MM/YYYY")
offline = st.sidebar.toggle("Dados simulados", value=False)

page = st.sidebar.radio("Navegar", ["Produtividade", "Relatórios"])

csv_text = load_csv_text(offline)
if csv_text is None:
    st.error("Não foi possível carregar a planilha. Tente novamente mais tarde.")
    st.stop()


# ---------------------------------------------------------------------------
# Helper: trend metric card
# ---------------------------------------------------------------------------
def trend_card(label: str, value: str, trend: int):
    if trend > 0:
        color = TREND_COLORS["up"]
    elif trend < 0:
        color = TREND_COLORS["down"]
    else:
        color = TREND_COLORS["flat"]

    st.markdown(
        f"""
        <div style="background: linear-gradient(135deg, {color}22, {color}11);
                    border-left: 4px solid {color};
                    border-radius: 8px; padding: 16px; margin-bottom: 8px;">
            <div style="font-size: 13px; color: #888; font-weight: 600; text-transform: uppercase;">{label}</div>
            <div style="font-size: 28px; font-weight: 700; color: #222; margin: 4px 0;">{value}</div>
            <div style="font-size: 13px; color: {color}; font-weight: 600;">{trend:+d}% vs ano anterior</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


# ===========================================================================
# PAGE: Produtividade
# ===========================================================================
if page == "Produtividade":
    st.title("Produtividade")
    st.caption(f"Período: **{start_date:%d/%m/%Y} a {end_date:%d/%m/%Y}**")

    data = get_productivity(csv_text, start_date, end_date)

    st.subheader("Drogas")
    cols = st.columns(4)
    for i, m in enumerate(data["drugs"]):
        with cols[i % 4]:
            trend_card(m["label"], m["value"], m["trend"])

    st.subheader("Apreensões")
    cols = st.columns(3)
    for i, m in enumerate(data["seizures"]):
        with cols[i % 3]:
            trend_card(m["label"], m["value"], m["trend"])

    st.divider()
    col1, col2 = st.columns([1, 2])

    with col1:
        st.subheader("Boletins")
        boletins = data["boletins"]
        fig = go.Figure(go.Pie(
            labels=[b["name"] for b in boletins],
            values=[b["value"] for b in boletins],
            marker=dict(colors=[b["color"] for b in boletins]),
            hole=0.55,
        ))
        fig.update_layout(height=320, margin=dict(l=10, r=10, t=10, b=10))
        st.plotly_chart(fig, use_container_width=True)

    with col2:
        st.subheader("Volume mensal")
        timeline = timeline_frame(data["timeline"])
        if timeline.empty:
            st.info("Sem registros no período.")
        else:
            fig = go.Figure(go.Scatter(
                x=timeline["month"],
                y=timeline["value"],
                mode="lines+markers",
                line=dict(color="#1e3a8a", width=3),
            ))
            fig.update_layout(
                height=320,
                plot_bgcolor="rgba(0,0,0,0)",
                margin=dict(l=10, r=10, t=10, b=40),
            )
            st.plotly_chart(fig, use_container_width=True)

    st.subheader("Resumo")
    counters = {k: v for k, v in data["summary"].items() if k != "trends"}
    cols = st.columns(4)
    for i, (name, value) in enumerate(counters.items()):
        with cols[i % 4]:
            st.metric(name.replace("_", " ").title(), value)


# ===========================================================================
# PAGE: Relatórios
# ===========================================================================
elif page == "Relatórios":
    st.title("Relatórios Diários")

    reports = get_daily_reports(csv_text, start_date, end_date)
    overview = get_reports_overview(reports)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Relatórios", overview["total_reports"])
    with col2:
        st.metric("Apreensões", f"{overview['total_seizures']:,.0f}")
    with col3:
        st.metric("Média de drogas (g)", f"{overview['avg_drugs']:.1f}")

    search = st.text_input("Buscar por ID, equipe ou viatura")
    if search:
        term = search.lower()
        mask = (
            reports["id"].str.lower().str.contains(term, regex=False)
            | reports["team"].str.lower().str.contains(term, regex=False)
            | reports["vtr"].str.lower().str.contains(term, regex=False)
        )
        reports = reports[mask]

    st.dataframe(reports, use_container_width=True, hide_index=True)
