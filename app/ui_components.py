# app/ui_components.py
import html

import streamlit as st

import config
from calendar_grid import WEEKDAY_HEADERS, Blank, weeks

THEME_CSS = f"""
<style>
.stApp {{ background-color: {config.BACKGROUND}; color: {config.TEXT}; }}
.lux-title {{ color: {config.GOLD}; font-weight: 700; }}
.lux-card {{ background: {config.CARD}; border-radius: 14px; padding: 12px 16px; margin-bottom: 14px; }}
.lux-card .title {{ color: {config.TEXT}; font-weight: 700; }}
.lux-card .location {{ color: #9E9E9E; }}
.lux-card .price {{ color: {config.GOLD}; font-weight: 600; }}
.day-cell {{ background: #3A3A3A; color: {config.GOLD}; text-align: center; padding: 10px 0; border-radius: 4px; }}
.day-cell.today {{ color: white; font-weight: 700; }}
.blank-cell {{ padding: 10px 0; }}
</style>
"""

def apply_theme():
    st.markdown(THEME_CSS, unsafe_allow_html=True)

def page_header(title, size=22):
    st.markdown(f"<h2 class='lux-title' style='font-size:{size}px'>{html.escape(title)}</h2>",
                unsafe_allow_html=True)

def property_card(prop):
    # simple listing card
    st.markdown(
        "<div class='lux-card'>"
        f"<div class='title'>{html.escape(prop['title'])}</div>"
        f"<div class='location'>{html.escape(prop['location'])}</div>"
        f"<div class='price'>{html.escape(prop['price'])}</div>"
        "</div>",
        unsafe_allow_html=True,
    )

def contact_info(label, value):
    st.markdown(f"<span class='lux-title' style='font-size:14px'>{html.escape(label)}</span>",
                unsafe_allow_html=True)
    st.write(value)

def month_grid(cells):
    # header weekdays, Sunday first like the grid
    cols = st.columns(7)
    for i, c in enumerate(cols):
        c.markdown(f"**{WEEKDAY_HEADERS[i]}**")
    for week in weeks(cells):
        cols = st.columns(7)
        for i, cell in enumerate(week):
            with cols[i]:
                if isinstance(cell, Blank):
                    st.markdown("<div class='blank-cell'>&nbsp;</div>", unsafe_allow_html=True)
                else:
                    css = "day-cell today" if cell.is_today else "day-cell"
                    st.markdown(f"<div class='{css}'>{cell.date.day}</div>", unsafe_allow_html=True)
