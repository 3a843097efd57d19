import logging

import streamlit as st

from media_library import MediaLibrary
from settings_store import load_settings, save_settings
from utils.dispatch import send_email, send_sms
from utils.errors import QRAppError
from utils.export import DocumentStore, StoragePermission, export_image
from utils.form_state import QRSession
from utils.payloads import Category, form_fields
from utils.qr_generator import qr_png_bytes


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def get_session():
    if "qr_session" not in st.session_state:
        st.session_state["qr_session"] = QRSession()
    return st.session_state["qr_session"]


def show_error(exc):
    st.error(f"{exc.title}: {exc.message}")


def show_category_picker(session):
    st.header("Select QR Code Type")
    for category in Category:
        if st.button(category.label, key=f"pick_{category.value}"):
            session.select_category(category)
            st.rerun()


def show_form(session):
    category = session.category
    for field in form_fields(category):
        value = st.text_input(field.label, key=f"{category.value}_{field.key}")
        if field.key == "primary":
            session.form.primary_value = value
        else:
            session.form.secondary_value = value


def save_qr_code(png_bytes, settings, allow_storage):
    library = MediaLibrary(settings["media_db"], settings["gallery_dir"])
    library.init_library()
    permission = StoragePermission(settings, prompt=lambda: allow_storage, persist=save_settings)
    return export_image(
        png_bytes,
        permission,
        DocumentStore(settings["documents_dir"]),
        library,
        album=settings["album_name"],
        filename=settings["export_filename"],
    )


def show_generator(session, settings):
    if st.button("Back"):
        for field in form_fields(session.category):
            st.session_state.pop(f"{session.category.value}_{field.key}", None)
        session.reset()
        st.rerun()

    st.header("QR Code Generator")
    show_form(session)

    if st.button("Generate QR Code", disabled=not session.can_generate):
        session.generate()

    if session.generated:
        label = session.category.label if settings.get("show_label") else ""
        png_bytes = qr_png_bytes(session.payload, label=label, settings=settings)
        st.image(png_bytes, width=200)

        allow_storage = settings.get("storage_permission") == "granted" or st.checkbox(
            "Allow storage access to save QR codes"
        )
        if st.button("Save QR Code"):
            try:
                save_qr_code(png_bytes, settings, allow_storage)
            except QRAppError as exc:
                show_error(exc)
            else:
                st.success("QR Code saved to gallery!")

    if session.category is Category.SMS and st.button("Send SMS"):
        try:
            send_sms(session.form.primary_value, session.form.secondary_value)
        except QRAppError as exc:
            show_error(exc)

    if session.category is Category.EMAIL and st.button("Send Email"):
        try:
            send_email(session.form.primary_value, session.form.secondary_value)
        except QRAppError as exc:
            show_error(exc)


st.set_page_config(page_title="QR Code Generator", page_icon="🔳", layout="centered")
st.title("🔳 QR Code Generator")

settings = load_settings()
qr_session = get_session()

if qr_session.category is None:
    show_category_picker(qr_session)
else:
    show_generator(qr_session, settings)
