# pages/1_Open_Incidents.py
import streamlit as st
import pandas as pd
from techsupport.controller import TechSupportController

# --- Page Configuration ---
st.set_page_config(page_title="Open Incidents", page_icon="📋", layout="wide")
st.title("📋 Open Incidents")

# --- Initialization ---
controller = TechSupportController.from_config()

if st.button("Refresh"):
    st.rerun()

incidents = controller.get_open_incidents()

if not incidents:
    st.success("There are no open incidents.")
else:
    df_incidents = pd.DataFrame([incident.to_dict() for incident in incidents])
    st.dataframe(
        df_incidents[['IncidentID', 'ProductCode', 'DateOpened', 'Customer', 'Technician', 'Title']],
        hide_index=True, use_container_width=True
    )
    st.caption(f"{len(incidents)} open incident(s).")
