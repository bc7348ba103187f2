# app/navigation.py
import logging

import streamlit as st

logger = logging.getLogger(__name__)

ROUT_SPLASH = "splash"
ROUT_HOME = "home"
ROUT_CALENDAR = "calendar"
ROUT_CONTACT = "contact"
ROUT_PAYMENT = "payment"
ROUT_PROFILE = "profile"

ROUTES = [ROUT_SPLASH, ROUT_HOME, ROUT_CALENDAR, ROUT_CONTACT, ROUT_PAYMENT, ROUT_PROFILE]

# bottom navigation bar: (label, route)
NAV_ITEMS = [
    ("🏠 Home", ROUT_HOME),
    ("📅 Calendar", ROUT_CALENDAR),
    ("📞 Contact", ROUT_CONTACT),
    ("💳 Payment", ROUT_PAYMENT),
    ("👤 Profile", ROUT_PROFILE),
]


def current_route():
    return st.session_state.get("route", ROUT_SPLASH)


def set_route(route):
    if route not in ROUTES:
        raise ValueError(f"Unknown route: {route!r}")
    logger.debug("Navigating %s -> %s", current_route(), route)
    st.session_state["route"] = route


def navigate(route):
    set_route(route)
    st.rerun()
