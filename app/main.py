# app/main.py
import logging

import streamlit as st

import config
from debug_utils import setup_logging
from navigation import (ROUT_CALENDAR, ROUT_CONTACT, ROUT_HOME, ROUT_PAYMENT, ROUT_PROFILE,
                        ROUT_SPLASH, current_route)
from screens import (bottom_nav, calendar_screen, contact_screen, home_screen, payment_screen,
                     profile_screen, splash_screen)
from seed_data import seed
from ui_components import apply_theme

st.set_page_config(page_title=config.APP_NAME, page_icon="🏠", layout="centered",
                   initial_sidebar_state="collapsed")

setup_logging()
logger = logging.getLogger("nyumbalink")

# Init DB and seed
seed()

apply_theme()

SCREENS = {
    ROUT_SPLASH: splash_screen,
    ROUT_HOME: home_screen,
    ROUT_CALENDAR: calendar_screen,
    ROUT_CONTACT: contact_screen,
    ROUT_PAYMENT: payment_screen,
    ROUT_PROFILE: profile_screen,
}

route = current_route()
logger.debug("Rendering %s", route)
SCREENS[route]()

if route != ROUT_SPLASH:
    bottom_nav()
