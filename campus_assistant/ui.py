# Run from project root: streamlit run campus_assistant/ui.py
# UI talks to the backend API (POST /api/query). The conversation log lives in the ChatSession kept in st.session_state.

import os
import sys
from pathlib import Path

# Ensure project root is on path (Streamlit may run with cwd != project root)
_root_from_file = Path(__file__).resolve().parent.parent
_cwd = os.getcwd()
for _root in (_root_from_file, _cwd):
    _root = str(_root)
    if _root not in sys.path:
        sys.path.insert(0, _root)

import streamlit as st

from campus_assistant.client.session import ChatSession, HttpTransport
from campus_assistant.core.config import API_BASE

st.title("Smart Campus Assistant")
st.caption("Ask about schedules, facilities, dining, library or admin procedures.")

if "chat_session" not in st.session_state:
    st.session_state.chat_session = ChatSession.with_greeting(HttpTransport(API_BASE))
session: ChatSession = st.session_state.chat_session

# New chat: fresh session with only the greeting
if st.button("New chat", key="new_chat"):
    st.session_state.chat_session = ChatSession.with_greeting(HttpTransport(API_BASE), use_llm=session.use_llm)
    st.rerun()

session.use_llm = st.checkbox("Use LLM (if backend configured)", value=session.use_llm, key="use_llm")

for entry in session.log:
    with st.chat_message(entry.speaker):
        st.markdown(entry.text)

if prompt := st.chat_input("Ask about library hours, where is the gym, etc.", disabled=session.pending):
    with st.chat_message("user"):
        st.markdown(prompt)
    with st.chat_message("assistant"):
        with st.spinner("Thinking..."):
            session.submit(prompt)
    st.rerun()
