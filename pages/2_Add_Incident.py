# pages/2_Add_Incident.py
import streamlit as st
from datetime import datetime
from techsupport.controller import TechSupportController
from techsupport.errors import TechSupportError
from techsupport.models import ByName, Incident

# --- Page Configuration ---
st.set_page_config(page_title="Add Incident", page_icon="➕")
st.title("➕ Add Incident")

# --- Initialization ---
controller = TechSupportController.from_config()


@st.cache_data(ttl=300)
def load_names():
    return controller.get_customer_names(), controller.get_product_names()


customer_names, product_names = load_names()

if not customer_names or not product_names:
    st.warning("Customers and products must exist in the database before adding incidents.")
else:
    with st.form("add_incident_form"):
        customer_name = st.selectbox("Customer", options=customer_names)
        product_name = st.selectbox("Product", options=product_names)
        title = st.text_input("Title")
        description = st.text_area("Description")
        submitted = st.form_submit_button("Add")

    if submitted:
        incident = Incident(
            title=title, description=description,
            customer=ByName(customer_name), product=ByName(product_name),
            date_opened=datetime.now()
        )
        try:
            if not controller.product_is_registered_to_customer(incident):
                st.error(f"{product_name} is not registered to {customer_name}.")
            else:
                controller.add_open_incident(incident)
                st.success(f"Incident #{controller.get_last_incident_id()} added.")
        except TechSupportError as e:
            st.error(f"Could not add incident: {e}")
