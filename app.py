# app.py
import streamlit as st

from techsupport.utils import setup_logger

setup_logger()

st.set_page_config(
    page_title="TechSupport Home",
    page_icon="🛠️",
    layout="wide"
)

st.title("🛠️ Welcome to TechSupport Incidents")

st.write(
    "Record customer incidents against registered products, "
    "assign technicians and close incidents once they are resolved."
)
st.info("Select a page from the navigation sidebar on the left to begin.")
