# Run from project root: streamlit run app/ui.py
# UI talks to the relay API (POST /api/analyze) and shows the answer or error as plain text.

import os

import requests
import streamlit as st

# Backend config
API_BASE = os.environ.get("API_BASE", "http://localhost:8000")
REQUEST_TIMEOUT = 90

NAV_LINKS = [
    ("bssc.live", "https://bssc.live"),
    ("BSSC Project Github", "https://github.com/HaidarIDK/Binance-Super-Smart-Chain"),
    ("X Page", "https://x.com/bnbsolfork"),
    ("BSSC Explorer", "https://explorer.bssc.live"),
]

EMPTY_QUERY_MESSAGE = "Error: Please provide your query to begin the analysis."


def ask_relay(api_base: str, query: str) -> str:
    """Send one query to the relay and return the text to display."""
    try:
        r = requests.post(f"{api_base}/api/analyze", json={"query": query}, timeout=REQUEST_TIMEOUT)
        data = r.json()
    except (requests.RequestException, ValueError):
        return "Critical Error: Failed to connect to the analysis service. Ensure the relay API is running."
    if not isinstance(data, dict):
        data = {}
    if data.get("error"):
        return f"Serverless Function Error: {data['error']}"
    return data.get("answer") or "Error: Could not retrieve a response. Check the relay logs for details."


def main() -> None:
    st.set_page_config(page_title="BSSC AI Explorer")
    st.title("BSSC AI Explorer")
    st.markdown(" · ".join(f"[{name}]({url})" for name, url in NAV_LINKS))

    st.subheader("AI Assistant")
    st.caption("Enter a BSSC Testnet query or any general question below.")

    if "loading" not in st.session_state:
        st.session_state.loading = False
    if "response" not in st.session_state:
        st.session_state.response = ""

    query = st.text_input(
        "Query",
        placeholder="Enter BSSC address, transaction hash, or general query...",
        disabled=st.session_state.loading,
        label_visibility="collapsed",
    )

    # Submit stays disabled while blank or while a request is outstanding
    if st.button(
        "Get Professional Analysis",
        disabled=not query.strip() or st.session_state.loading,
        use_container_width=True,
    ):
        st.session_state.pending_query = query
        st.session_state.loading = True
        st.session_state.response = ""
        st.rerun()

    if st.session_state.get("pending_query") is not None:
        pending = st.session_state.pending_query
        with st.spinner("Analyzing Data..."):
            if not pending.strip():
                st.session_state.response = EMPTY_QUERY_MESSAGE
            else:
                st.session_state.response = ask_relay(API_BASE, pending)
        del st.session_state["pending_query"]
        st.session_state.loading = False
        st.rerun()

    if st.session_state.response:
        st.markdown("**Analysis Result:**")
        st.text(st.session_state.response)

    st.divider()
    st.caption("© 2025 BSSC Project. All Rights Reserved.")
    st.caption("Architecture powered by FastAPI and Gemini.")


if __name__ == "__main__":
    main()
