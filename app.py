"""
app.py
======
Streamlit web UI for Detective Quest: The Mysterious Mansion.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Keep one ExplorationSession per browser session in st.session_state.
  - Turn button clicks into the same single-character commands the CLI
    accepts, and render the engine's notices through ui_helpers.py.
  - Run the final accusation once the player ends the investigation.

This file contains only UI logic. All game logic lives in game_engine.py and
accusation.py, all narrative data in case_data.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import html
import logging
from typing import List

import streamlit as st
from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv()

from config import HashConfig, LogConfig

# basicConfig only takes effect once per process, however often Streamlit
# reruns the script.
try:
    _log_config = LogConfig.from_env()
    _log_error = None
except ValueError as exc:
    _log_config = LogConfig()
    _log_error = exc
logging.basicConfig(
    level=_log_config.level,
    format=_log_config.format,
    datefmt=_log_config.datefmt,
)
logger = logging.getLogger("detective_quest.app")
if _log_error is not None:
    logger.warning("Falling back to %s logging: %s", _log_config.level, _log_error)

from accusation import evaluate_accusation
from game_engine import create_session
from models import Action
from ui_helpers import (
    build_css,
    key_for,
    render_accusation_prompt,
    render_clue_listing,
    render_notices,
    render_verdict,
    render_welcome,
    verdict_headline,
)


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Detective Quest",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def reset_game() -> None:
    """
    Start a fresh investigation: new session, empty narration log, no verdict.

    Stops the script with an error panel if the case data or the suspect
    table cannot be built.
    """
    try:
        session, dataset = create_session(HashConfig.from_env().bucket_count)
    except (ValidationError, ValueError, MemoryError) as exc:
        logger.error("Game initialisation failed: %s", exc, exc_info=True)
        st.error("Erro: Nao foi possivel preparar a mansao e a tabela de suspeitos!")
        st.stop()

    st.session_state.session    = session
    st.session_state.suspects   = list(dataset.suspects)
    st.session_state.narration  = render_welcome() + render_notices(session.start())
    st.session_state.accusation = None


def init_session_state() -> None:
    if "session" not in st.session_state:
        reset_game()


def send_command(command: str) -> None:
    notices = st.session_state.session.handle(command)
    st.session_state.narration.extend(render_notices(notices))


# ============================================================
# RENDERING
# ============================================================

def _text_block(lines: List[str], css_class: str) -> None:
    body = html.escape("\n".join(lines).strip("\n"))
    st.markdown(f"<div class='{css_class}'>{body}</div>", unsafe_allow_html=True)


def render_sidebar() -> None:
    session = st.session_state.session
    st.sidebar.markdown("### 📓 Caderno de investigacao")
    if session.clues:
        for i, clue in enumerate(session.clues, 1):
            st.sidebar.markdown(f"{i}. {clue}")
    else:
        st.sidebar.markdown("_Nenhuma pista ainda._")

    st.sidebar.markdown("---")
    st.sidebar.markdown(f"**Sala atual:** {session.current_room.name}")
    st.sidebar.markdown(f"**Salas visitadas:** {session.rooms_visited}")

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NOVO CASO", width="stretch"):
        reset_game()
        st.rerun()


def render_navigation() -> None:
    """Direction buttons; unavailable directions are disabled, not hidden."""
    room = st.session_state.session.current_room
    col_left, col_right, col_end = st.columns(3)
    with col_left:
        if st.button(
            f"⬅️ Esquerda\n{room.left.name if room.left else '—'}",
            key="go_left",
            width="stretch",
            disabled=room.left is None,
        ):
            send_command(key_for(Action.GO_LEFT))
            st.rerun()
    with col_right:
        if st.button(
            f"➡️ Direita\n{room.right.name if room.right else '—'}",
            key="go_right",
            width="stretch",
            disabled=room.right is None,
        ):
            send_command(key_for(Action.GO_RIGHT))
            st.rerun()
    with col_end:
        if st.button("🛑 Encerrar investigacao", key="end_session", width="stretch"):
            send_command(key_for(Action.END_SESSION))
            st.rerun()


def render_final_report() -> None:
    session = st.session_state.session
    _text_block(render_clue_listing(session.clues), "detective-notes")

    if not session.clues:
        return

    result = st.session_state.accusation
    if result is None:
        _text_block(render_accusation_prompt(st.session_state.suspects), "narration")
        with st.form("accusation_form"):
            accused = st.text_input("Quem voce acusa do crime?")
            if st.form_submit_button("⚖️ ACUSAR", type="primary"):
                st.session_state.accusation = evaluate_accusation(
                    session.clues, session.table, accused
                )
                st.rerun()
        return

    st.markdown(
        f"<div class='verdict'>{html.escape(verdict_headline(result))}</div>",
        unsafe_allow_html=True,
    )
    _text_block(render_verdict(result), "narration")


# ============================================================
# MAIN
# ============================================================

def main() -> None:
    init_session_state()

    st.markdown("""
    <h1 class='main-header'>🔍 DETECTIVE QUEST</h1>
    <h3 class='sub-header'>Nivel Mestre: a mansao misteriosa</h3>
    """, unsafe_allow_html=True)

    render_sidebar()

    # Full narration log, oldest first.
    _text_block(st.session_state.narration, "narration")
    st.markdown("---")

    if st.session_state.session.ended:
        render_final_report()
    else:
        render_navigation()


if __name__ == "__main__":
    main()
