import io
from contextlib import redirect_stdout

import streamlit as st

from tableau_simplex.errors import MaxIterationsExceededError, SimplexError
from tableau_simplex.graph import plot_2d
from tableau_simplex.parser import parse_lp_text
from tableau_simplex.simplex import fmt_out, solve

st.set_page_config(page_title="Simplex Visualizer", layout="wide")
st.title("Simplex (Tableau) — Solve & Visualize")

with st.sidebar:
    st.header("Options")
    orientation = st.selectbox("Orientation", ["auto", "primal", "dual"], index=0)
    show_graph = st.checkbox("Show graph (2 variables only)", value=True)

default_text = """// lines starting with // are ignored
min: + 3*x0 + 2*x1;
+ 1*x0 + 1*x1 >= 4;
+ 2*x0 + 1*x1 >= 6;
"""

st.subheader("Model")
lp_text = st.text_area("Edit the LP here", default_text, height=220)

col_run, col_reset = st.columns([1, 1])
run = col_run.button("Solve")
if col_reset.button("Reset to template"):
    st.rerun()


if run:
    try:
        lp = parse_lp_text(lp_text)
    except SimplexError as e:
        st.error(f"Invalid LP: {e}")
    else:
        buf = io.StringIO()
        res = None
        try:
            with redirect_stdout(buf):
                res = solve(lp, orientation=orientation, verbose=True)
        except MaxIterationsExceededError as e:
            st.warning(str(e))
        except SimplexError as e:
            st.error(f"Solver error: {e}")

        st.subheader("Iterations / Tableaux")
        st.code(buf.getvalue())

        if res is not None:
            st.subheader("Result")
            st.json({
                "status": res.status,
                "orientation": res.orientation,
                "optimal_value": fmt_out(res.optimal_value) if res.optimal_value is not None else None,
                "solution": {name: fmt_out(v) for name, v in zip(lp.var_names, res.solution or [])},
                "iterations": res.iterations,
            })
            if res.details.get('alternate_optimal'):
                st.info("Infinite many optimal solutions (alternate optimal).")

            st.subheader("Graph")
            if show_graph and lp.n_vars == 2:
                fig = plot_2d(lp, res)
                if fig is not None:
                    st.pyplot(fig)
                else:
                    st.info("No feasible region to plot.")
            else:
                st.info("Graph available only for 2 variables.")
