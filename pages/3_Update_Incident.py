# pages/3_Update_Incident.py
import dataclasses
import streamlit as st
from datetime import datetime
from techsupport.controller import TechSupportController
from techsupport.errors import TechSupportError
from techsupport.models import ByName, Incident

# --- Page Configuration ---
st.set_page_config(page_title="Update Incident", page_icon="✏️")
st.title("✏️ Update / Close Incident")

# --- Initialization ---
controller = TechSupportController.from_config()

if "loaded_incident" not in st.session_state:
    st.session_state.loaded_incident = None

incident_id = st.number_input("Incident ID", min_value=1, step=1)
if st.button("Get Incident"):
    try:
        st.session_state.loaded_incident = controller.get_incident_by_id(
            Incident(title="", description="", incident_id=int(incident_id))
        )
        if st.session_state.loaded_incident is None:
            st.error(f"Could not find an incident with ID: {incident_id}")
    except TechSupportError as e:
        st.error(f"An error occurred: {e}")

old_incident = st.session_state.loaded_incident
if old_incident is not None:
    st.text_input("Customer", value=old_incident.customer_name or "", disabled=True)
    st.text_input("Product", value=old_incident.product_name or "", disabled=True)
    st.text_input("Title", value=old_incident.title, disabled=True)
    st.text_input("Date Opened", value=str(old_incident.date_opened), disabled=True)

    if old_incident.is_closed:
        st.info(f"This incident was closed on {old_incident.date_closed}.")
        st.text_area("Description", value=old_incident.description, disabled=True)
    else:
        tech_options = ["-- Unassigned --"] + controller.get_technician_names()
        current = old_incident.technician_name
        technician = st.selectbox(
            "Technician", options=tech_options,
            index=tech_options.index(current) if current in tech_options else 0
        )
        st.text_area("Description", value=old_incident.description, disabled=True)
        text_to_add = st.text_area("Text to add")

        description = old_incident.description
        if text_to_add:
            description = f"{description}\n<{datetime.now():%Y-%m-%d}> {text_to_add}"
        new_incident = dataclasses.replace(
            old_incident,
            description=description,
            technician=ByName(technician) if technician != "-- Unassigned --" else None,
        )

        col1, col2 = st.columns(2)
        try:
            if col1.button("Update"):
                controller.update_incident(old_incident, new_incident)
                st.session_state.loaded_incident = controller.get_incident_by_id(old_incident)
                st.success("Incident updated.")
            if col2.button("Close"):
                closed = dataclasses.replace(new_incident, date_closed=datetime.now())
                controller.close_incident(old_incident, closed)
                st.session_state.loaded_incident = controller.get_incident_by_id(old_incident)
                st.success("Incident closed.")
        except TechSupportError as e:
            st.error(f"An error occurred: {e}")
