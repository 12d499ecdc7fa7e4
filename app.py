"""
RUPACAYA Investment Calculator - Main Streamlit App

An educational web application projecting an investment under optimistic,
moderate and pessimistic scenarios and illustrating the national liquidity
and inflation effects of broad participation.
"""

import sys
from pathlib import Path

import streamlit as st

# Configure page
st.set_page_config(
    page_title="RUPACAYA Investment Calculator",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded"
)

sys.path.insert(0, str(Path(__file__).parent))

from projection_model.ui import build_app_dependencies

deps = build_app_dependencies()
deps.apply_app_styles(st)
deps.run_main_app(st_module=st, deps=deps)
