"""Vehicle Prototype Lab dashboard.

Interactive vehicle builder built with Streamlit and Plotly.  Parts are
added one at a time, the stress tests run on every rerun, and the
resulting durability and efficiency scores are charted alongside each
part's contribution.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from vehicle_lab.config import load_catalog
from vehicle_lab.core.part import PartKind, PartSpec
from vehicle_lab.core.report import report
from vehicle_lab.core.scoring import BASE_SCORE, part_counts, run_stress_tests
from vehicle_lab.core.vehicle import Vehicle, VehicleKind

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_vehicle(kind: VehicleKind, parts: list[str]) -> Vehicle:
    """Construct a Vehicle from the part kinds stored in session state."""
    vehicle = Vehicle(kind)
    for value in parts:
        vehicle.add_part(value)
    return vehicle


def _contribution_rows(
    vehicle: Vehicle, catalog: dict[PartKind, PartSpec]
) -> list[dict]:
    """Total contribution of each part kind to both metrics."""
    counts = part_counts(vehicle)
    rows: list[dict] = []
    for kind, count in zip(PartKind, counts):
        spec = catalog[kind]
        rows.append(
            {
                "Part": spec.label,
                "Count": int(count),
                "Durability": count * spec.durability_delta + 0.0,
                "Efficiency": count * spec.efficiency_delta + 0.0,
            }
        )
    return rows


# ---------------------------------------------------------------------------
# Streamlit app
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="Vehicle Prototype Lab", layout="wide")
    st.title("Vehicle Prototype Lab")

    catalog = load_catalog()

    if "parts" not in st.session_state:
        st.session_state["parts"] = []

    # ── Sidebar ──────────────────────────────────────────────────────────
    st.sidebar.header("Vehicle")

    kind: VehicleKind = st.sidebar.selectbox(
        "Vehicle type",
        options=list(VehicleKind),
        format_func=lambda k: k.label,
        index=0,
    )

    st.sidebar.subheader("Add Parts")
    for part_kind in PartKind:
        if st.sidebar.button(f"Add {catalog[part_kind].label}"):
            st.session_state["parts"].append(part_kind.value)

    st.sidebar.markdown("---")
    if st.sidebar.button("Reset parts"):
        st.session_state["parts"] = []

    vehicle = _build_vehicle(kind, st.session_state["parts"])

    # ── Section 1: Configuration ─────────────────────────────────────────
    st.header("1 -- Configuration")

    lines = vehicle.display(catalog)
    st.subheader(lines[0])
    if len(lines) == 1:
        st.info("No parts yet. Add parts from the sidebar.")
    for idx, label in enumerate(lines[1:], start=1):
        st.write(f"{idx}. {label}")

    # ── Section 2: Stress test scores ────────────────────────────────────
    st.header("2 -- Stress Test Scores")

    run_stress_tests(vehicle, catalog)
    scores = report(vehicle)

    col_d, col_e = st.columns(2)
    col_d.metric(
        "Durability",
        f"{scores['durability']:g}",
        delta=f"{scores['durability'] - BASE_SCORE:+g}",
    )
    col_e.metric(
        "Efficiency",
        f"{scores['efficiency']:g}",
        delta=f"{scores['efficiency'] - BASE_SCORE:+g}",
    )

    fig_scores = go.Figure(
        go.Bar(
            x=["Durability", "Efficiency"],
            y=[scores["durability"], scores["efficiency"]],
            marker_color=["#1f77b4", "#2ca02c"],
        )
    )
    fig_scores.add_hline(y=BASE_SCORE, line_dash="dash", line_color="#888888")
    fig_scores.update_layout(
        title=f"{kind.label} Scores",
        yaxis_title="Score",
        height=350,
    )
    st.plotly_chart(fig_scores, use_container_width=True)

    # ── Section 3: Contribution breakdown ────────────────────────────────
    st.header("3 -- Contribution by Part")

    rows = _contribution_rows(vehicle, catalog)
    fig_parts = go.Figure(
        [
            go.Bar(
                name="Durability",
                x=[r["Part"] for r in rows],
                y=[r["Durability"] for r in rows],
                marker_color="#1f77b4",
            ),
            go.Bar(
                name="Efficiency",
                x=[r["Part"] for r in rows],
                y=[r["Efficiency"] for r in rows],
                marker_color="#2ca02c",
            ),
        ]
    )
    fig_parts.update_layout(
        barmode="group",
        xaxis_title="Part",
        yaxis_title="Score change",
        height=350,
    )
    st.plotly_chart(fig_parts, use_container_width=True)

    for row in rows:
        st.write(
            f"**{row['Part']}** x{row['Count']}: "
            f"durability {row['Durability']:+g}, efficiency {row['Efficiency']:+g}"
        )

    # ── Footer ───────────────────────────────────────────────────────────
    st.markdown("---")
    st.caption("Vehicle Prototype Lab -- scores are relative to a base of 100.")


if __name__ == "__main__":
    main()
