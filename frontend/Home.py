# frontend/Home.py
import os

import altair as alt
import pandas as pd
import requests
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
st.set_page_config(page_title="Supply Chain Reports", layout="wide")

DEFAULT_API_BASE = os.getenv("API_BASE", "http://127.0.0.1:8011")

# numeric column to chart for the aggregation reports
CHARTS = {
    "stock_by_warehouse": ("warehouse_location", "total_stock"),
    "order_count_by_status": ("status", "order_count"),
}

# --- shared helpers ---
def get_json(url: str, params: dict | None = None):
    r = requests.get(url, params=params or {}, timeout=15)
    r.raise_for_status()
    return r.json()

def post_json(url: str, payload: dict | None = None):
    r = requests.post(url, json=payload or {}, timeout=30)
    r.raise_for_status()
    return r.json()

def toast(msg: str, icon: str = "✅"):
    try:
        st.toast(msg, icon=icon)
    except Exception:
        st.success(msg)

st.title("📦 Supply Chain Reports")

# --------- Sidebar: settings / health / setup ---------
with st.sidebar:
    st.header("Settings")
    api_base = st.text_input("API base", value=DEFAULT_API_BASE, key="api_base").rstrip("/")

    try:
        health = get_json(f"{api_base}/db-ping")
        st.success(f"DB: {health['data']['dialect']} ✓")
    except requests.RequestException as e:
        st.error(f"API unreachable: {e}")
        st.stop()

    st.divider()
    st.subheader("Setup")
    if st.button("Create schema"):
        try:
            res = post_json(f"{api_base}/admin/schema")
            toast(f"{res['meta']['count']} tables ready")
        except requests.HTTPError as e:
            st.error(f"Schema error: {e.response.status_code}: {e.response.text[:160]}")
    if st.button("Load demo data"):
        try:
            res = post_json(f"{api_base}/admin/seed/demo")
            toast(f"{res['meta']['total']} rows inserted")
        except requests.HTTPError as e:
            st.error(f"Seed error: {e.response.status_code}: {e.response.text[:160]}")

# --------- Report picker ---------
try:
    catalogue = get_json(f"{api_base}/reports")["data"]
except requests.RequestException as e:
    st.error(f"Report list unavailable: {e}")
    st.stop()

names = [item["name"] for item in catalogue]
paths = {item["name"]: item["path"] for item in catalogue}
choice = st.selectbox("Report", names, format_func=lambda n: n.replace("_", " ").capitalize())

params = {}
if choice == "orders_in_period":
    c1, c2 = st.columns(2)
    params["start"] = c1.date_input("Start", value=pd.Timestamp("2024-01-01")).isoformat()
    params["end"] = c2.date_input("End", value=pd.Timestamp("2024-12-31")).isoformat()
elif choice in ("low_stock_inventory", "low_stock_by_category"):
    params["threshold"] = st.number_input("Stock below", min_value=0, value=50 if choice == "low_stock_inventory" else 20)
    if choice == "low_stock_by_category":
        params["category"] = st.text_input("Category", value="Electronics")
elif choice == "high_value_order_lines":
    params["threshold"] = st.number_input("Line value above", min_value=0, value=500)
    loyalty = st.selectbox("Loyalty", ["(any)", "Bronze", "Silver", "Gold"])
    if loyalty != "(any)":
        params["loyalty_status"] = loyalty
elif choice == "heavy_shipments":
    params["min_weight"] = st.number_input("Weight above", min_value=0, value=1000)

try:
    res = get_json(f"{api_base}{paths[choice]}", params)
    df = pd.DataFrame(res.get("data", []))
    st.caption(f"{res.get('meta', {}).get('count', len(df))} rows")
    if df.empty:
        st.info("No rows.")
    else:
        st.dataframe(df, use_container_width=True)
        if choice in CHARTS:
            x, y = CHARTS[choice]
            chart = (
                alt.Chart(df)
                .mark_bar()
                .encode(
                    x=alt.X(f"{y}:Q", title=y.replace("_", " ")),
                    y=alt.Y(f"{x}:N", sort="-x", title=x.replace("_", " ")),
                    tooltip=[x, y],
                )
            )
            st.altair_chart(chart, use_container_width=True)
except requests.HTTPError as e:
    st.error(f"Report failed: {getattr(e.response, 'status_code', '?')}: {getattr(e.response, 'text', '')[:160]}")
except requests.RequestException as e:
    st.error(f"Network error: {e}")
