"""Shared Streamlit widgets: listing cards and the card grid."""

from __future__ import annotations

import streamlit as st

from src.models import Property, format_price


def _specs(prop: Property) -> str:
    parts = []
    if prop.beds is not None:
        parts.append(f"🛏 {prop.beds} bed")
    if prop.baths is not None:
        parts.append(f"🛁 {prop.baths} bath")
    if prop.kitchens is not None:
        parts.append(f"🍳 {prop.kitchens} kitchen")
    if prop.sqft is not None:
        parts.append(f"📐 {prop.sqft:,.0f} sqft")
    return " · ".join(parts)


def house_card(prop: Property) -> None:
    with st.container(border=True):
        if prop.youtube_video_url and (prop.use_embed_player or not prop.image_url):
            st.video(prop.youtube_video_url)
        elif prop.image_url:
            st.image(prop.image_url)

        badges = []
        if prop.new_listing:
            badges.append(":blue-background[New Listing]")
        if prop.trending:
            badges.append(":orange-background[Trending]")
        if badges:
            st.markdown(" ".join(badges))

        st.subheader(prop.title or "Untitled property")
        if prop.subtitle:
            st.caption(prop.subtitle)
        if prop.location:
            st.markdown(f"📍 {prop.location}")
        st.markdown(f"**{format_price(prop.price)}**" + (f" · {prop.finance_type}" if prop.finance_type else ""))

        specs = _specs(prop)
        if specs:
            st.caption(specs)
        if prop.agent_name or prop.agent_phone:
            st.caption(" · ".join(v for v in (prop.agent_name, prop.agent_phone) if v))


def card_grid(properties: list[Property], columns: int = 3) -> None:
    for start in range(0, len(properties), columns):
        cols = st.columns(columns)
        for col, prop in zip(cols, properties[start : start + columns]):
            with col:
                house_card(prop)
