# app/screens.py
import logging
import time
from datetime import date

import pandas as pd
import streamlit as st

import config
import db as DB
from calendar_grid import InvalidMonth, Month, build_grid
from forms import FormError, mask_card, validate_card, validate_contact, validate_listing
from navigation import NAV_ITEMS, ROUT_HOME, ROUT_SPLASH, current_route, navigate
from ui_components import contact_info, month_grid, page_header, property_card

logger = logging.getLogger(__name__)


def bottom_nav():
    st.markdown("---")
    cols = st.columns(len(NAV_ITEMS))
    active = current_route()
    for col, (label, route) in zip(cols, NAV_ITEMS):
        if col.button(label, key=f"nav_{route}", use_container_width=True,
                      type="primary" if route == active else "secondary"):
            navigate(route)


# --- Splash ---
def splash_screen():
    st.markdown(
        "<div style='text-align:center; padding-top:120px'>"
        f"<div style='color:#FFD700; font-size:44px; font-weight:800; letter-spacing:2px'>{config.APP_NAME}</div>"
        f"<div style='color:#FFD700; opacity:0.85; font-size:20px'>{config.TAGLINE}</div>"
        "</div>",
        unsafe_allow_html=True,
    )
    # no login screen, straight to home
    time.sleep(config.SPLASH_SECONDS)
    navigate(ROUT_HOME)


# --- Home ---
def home_screen():
    page_header(config.APP_NAME)
    properties = DB.list_properties()

    st.markdown("<span class='lux-title' style='font-size:18px'>Featured Property</span>", unsafe_allow_html=True)
    if properties:
        property_card(properties[0])
    else:
        st.caption("No listings yet.")

    st.markdown("<span class='lux-title' style='font-size:18px'>Available Listings</span>", unsafe_allow_html=True)
    for prop in properties:
        property_card(prop)

    with st.expander("Add a listing"):
        with st.form("add_listing", clear_on_submit=True):
            title = st.text_input("Title")
            location = st.text_input("Location")
            price = st.text_input("Price", placeholder="KES 58M")
            submitted = st.form_submit_button("Save listing")
            if submitted:
                try:
                    title, location, price = validate_listing(title, location, price)
                except FormError as e:
                    st.error(str(e))
                else:
                    DB.insert_property(title, location, price)
                    st.session_state.listing_saved = True
                    st.rerun()
    if st.session_state.pop("listing_saved", False):
        st.success("Listing saved")

    if properties:
        with st.expander("Saved listings"):
            df = pd.DataFrame(properties)[["id", "title", "location", "price", "created_at"]]
            st.dataframe(df, use_container_width=True, hide_index=True)


# --- Calendar ---
def calendar_screen():
    page_header("Calendar", size=20)
    if "today" not in st.session_state:
        st.session_state.today = date.today()
    today = st.session_state.today
    if "selected_month" not in st.session_state:
        st.session_state.selected_month = Month.of(today)
    selected = st.session_state.selected_month

    prev_col, label_col, next_col = st.columns([1, 3, 1])
    if prev_col.button("◀", key="cal_prev", use_container_width=True):
        st.session_state.selected_month = selected.previous()
        st.rerun()
    if next_col.button("▶", key="cal_next", use_container_width=True):
        st.session_state.selected_month = selected.next()
        st.rerun()

    try:
        cells = build_grid(selected, today)
    except InvalidMonth:
        # caller passed an out-of-range month; nothing sensible to show
        logger.exception("Cannot build calendar grid for %s", selected)
        return

    label_col.markdown(
        f"<div class='lux-title' style='text-align:center; font-size:22px'>{selected.label()}</div>",
        unsafe_allow_html=True,
    )
    if Month.of(today) != selected and st.button("Today", key="cal_today"):
        st.session_state.selected_month = Month.of(today)
        st.rerun()
    month_grid(cells)


# --- Contact ---
def contact_screen():
    page_header("Contact Us", size=20)
    st.markdown("<span class='lux-title' style='font-size:22px'>We'd love to hear from you!</span>",
                unsafe_allow_html=True)
    for label, value in config.CONTACT_INFO.items():
        contact_info(label, value)

    st.markdown("<span class='lux-title' style='font-size:18px'>Send us a message</span>", unsafe_allow_html=True)
    # input is kept when validation fails, cleared once saved
    with st.form("contact"):
        name = st.text_input("Your Name", key="contact_name")
        email = st.text_input("Your Email", key="contact_email")
        message = st.text_area("Your Message", key="contact_message")
        submitted = st.form_submit_button("Submit", use_container_width=True)
    if submitted:
        try:
            msg = validate_contact(name, email, message)
        except FormError as e:
            st.error(str(e))
        else:
            DB.insert_contact_message(msg.name, msg.email, msg.message)
            st.session_state.contact_sent = True
            for key in ("contact_name", "contact_email", "contact_message"):
                del st.session_state[key]
            st.rerun()
    if st.session_state.pop("contact_sent", False):
        st.success("Thank you! Your message has been sent.")

    recent = DB.list_contact_messages(limit=5)
    if recent:
        with st.expander("Recent messages"):
            st.dataframe(pd.DataFrame(recent)[["created_at", "name", "email", "message"]],
                         use_container_width=True, hide_index=True)


# --- Payment ---
def payment_screen():
    st.markdown(
        f"<div style='color:{config.DIM_GOLD}; font-size:30px; font-weight:600; text-align:center'>"
        "Payment Details</div>",
        unsafe_allow_html=True,
    )
    with st.form("payment", clear_on_submit=True):
        name_on_card = st.text_input("Name on Card")
        card_number = st.text_input("Card Number")
        expiry = st.text_input("Expiry Date (MM/YY)")
        cvv = st.text_input("CVV", type="password", max_chars=4)
        submitted = st.form_submit_button("Pay Now", use_container_width=True)
    if submitted:
        try:
            card = validate_card(name_on_card, card_number, expiry, cvv)
        except FormError as e:
            st.error(str(e))
        else:
            DB.insert_payment(card.name_on_card, card.last4, card.brand, card.expiry)
            st.success(f"Payment details recorded for {card.brand} {mask_card(card.last4)}.")
            st.info("No charge was made: payments are not processed in this app.")


# --- Profile ---
def profile_screen():
    page_header("Profile", size=20)
    st.markdown(
        "<div style='text-align:center'>"
        "<div style='width:100px; height:100px; border-radius:50%; background:#808080; margin:24px auto 16px'></div>"
        f"<div style='color:white; font-size:22px; font-weight:700'>{config.PROFILE['name']}</div>"
        f"<div style='color:#D3D3D3; font-size:16px'>{config.PROFILE['email']}</div>"
        "</div>",
        unsafe_allow_html=True,
    )
    st.write("")
    if st.button("✏️ Edit Profile", use_container_width=True):
        st.info("Editing your profile is not available yet.")
    if st.button("⚙️ Settings", use_container_width=True):
        st.info("Settings are not available yet.")
    if st.button("🚪 Log Out", use_container_width=True):
        logger.info("Session logged out")
        st.session_state.clear()
        navigate(ROUT_SPLASH)
