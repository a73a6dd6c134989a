# storefront/app.py

import streamlit as st
from storefront.add_product import AddProductForm, FIELD_LABELS, FORM_FIELDS
from storefront.product_list import ERROR_MESSAGE, ProductListView, products_frame
from storefront.router import NAV_LINKS, Router
from storefront.models import ADD_PRODUCT_PATH, HOME_PATH
from storefront.logger import configure_logging, get_logger

configure_logging()

# Create logger object
log = get_logger(__name__)
log.info("Streamlit application is starting...")

ROUTES = {
	HOME_PATH: ProductListView,
	ADD_PRODUCT_PATH: AddProductForm,
}


def main():
	# Page settings
	st.set_page_config(
	page_title="Product Dashboard",
	page_icon="🛒",
	layout="centered"
	)

	#Initialize session_states
	initialize_sessions()
	router = st.session_state.router

	render_navbar()

	if router.path == HOME_PATH:
		run_product_list(router.view)
	elif router.path == ADD_PRODUCT_PATH:
		run_add_product(router.view)

	# Keep the address bar in sync for deep links
	st.query_params["route"] = router.path


def render_navbar():
	"""Static navbar in the sidebar, one button per route."""
	with st.sidebar:
		for label, path in NAV_LINKS:
			st.button(label, key=nav_key(label), on_click=go_to, args=(path,))


def run_product_list(view: ProductListView):
	"""Product listing: waits for the mount's single fetch, then draws the table or the error."""
	st.title("Product Dashboard")

	# One-shot acknowledgement from the add product page
	acknowledgement = st.session_state.pop("acknowledgement", None)
	if acknowledgement:
		show_acknowledgement(acknowledgement)

	view.wait()

	if view.error:
		st.error(ERROR_MESSAGE)
		return

	st.dataframe(
		products_frame(view.products),
		column_config={
			"Image": st.column_config.ImageColumn("Image"),
		},
		hide_index=True,
	)


@st.dialog("Product added")
def show_acknowledgement(message: str):
	"""Modal the user dismisses; the message is popped from session state so it shows once."""
	st.success(message)
	if st.button("OK", key="acknowledgement_ok"):
		st.rerun()


def run_add_product(form: AddProductForm):
	st.title("Add Product")
	mount_id = st.session_state.router.mounts

	if form.error:
		st.error(form.error)

	missing = st.session_state.get("missing_fields")
	if missing:
		st.warning("Please fill out: " + ", ".join(FIELD_LABELS[name] for name in missing))

	# Widget keys are per mount so a new form starts empty
	for name in FORM_FIELDS:
		key = field_key(name, mount_id)
		st.text_input(FIELD_LABELS[name], key=key, on_change=update_field, args=(form, name, key))

	st.button("Add Product", key="add_product_submit", type="primary", on_click=handle_submit, args=(form, mount_id))


def update_field(form: AddProductForm, name: str, key: str):
	form.update_field(name, st.session_state.get(key, ""))


def handle_submit(form: AddProductForm, mount_id: int):
	for name in FORM_FIELDS:
		update_field(form, name, field_key(name, mount_id))

	# Presence check of the required inputs, runs before validation
	st.session_state.missing_fields = form.missing_fields()
	if st.session_state.missing_fields:
		log.debug(f"Submit blocked, missing fields: {st.session_state.missing_fields}")
		return

	result = form.submit()
	if not result.ok:
		return

	st.session_state.acknowledgement = result.acknowledgement
	st.session_state.router.dispatch(result.navigate)


def go_to(path: str):
	st.session_state.missing_fields = []
	st.session_state.router.navigate(path)


def nav_key(label: str) -> str:
	return "nav_" + label.lower().replace(" ", "_")


def field_key(name: str, mount_id: int) -> str:
	return f"add_product_{name}_{mount_id}"


def initialize_sessions():
	"""Initialize session state variables."""
	if "router" not in st.session_state:
		path = st.query_params.get("route", HOME_PATH)
		st.session_state.router = Router(ROUTES, path=path)
		log.debug(f"Session state 'router' initialized at '{path}'.")
	if "missing_fields" not in st.session_state:
		st.session_state.missing_fields = []
		log.debug("Session state 'missing_fields' initialized.")


if __name__ == "__main__":
	main()
