"""
Centralized Streamlit style definitions.
"""

APP_STYLES = """
<style>
    .scenario-card {
        border-radius: 12px;
        padding: 14px;
        margin: 0.5rem 0;
    }
    .scenario-optimistic {
        background-color: #ecfdf5;
        border: 1px solid #86efac;
    }
    .scenario-moderate {
        background-color: #eff6ff;
        border: 1px solid #93c5fd;
    }
    .scenario-pessimistic {
        background-color: #fef2f2;
        border: 1px solid #fca5a5;
    }
    .positive-impact {
        color: #16a34a;
        font-weight: bold;
    }
    .negative-impact {
        color: #dc2626;
        font-weight: bold;
    }
    .info-box {
        background-color: #e7f3ff;
        border-left: 4px solid #2563eb;
        padding: 1rem;
        margin: 1rem 0;
        border-radius: 0.25rem;
    }
</style>
"""

SCENARIO_CARD_CLASSES = {
    "optimistic": "scenario-card scenario-optimistic",
    "moderate": "scenario-card scenario-moderate",
    "pessimistic": "scenario-card scenario-pessimistic",
}


def apply_app_styles(st_module) -> None:
    """Apply shared CSS style block to the Streamlit app."""
    st_module.markdown(APP_STYLES, unsafe_allow_html=True)
