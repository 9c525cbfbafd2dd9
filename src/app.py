"""StudyBot main entry point."""

from __future__ import annotations

import html
import time

import streamlit as st

from config import (
    API_BASE_URL,
    API_TIMEOUT_S,
    DEFAULT_LANG,
    PAGE_ICON,
    PAGE_TITLE,
    SIDEBAR_FOOTER,
    SIDEBAR_HEADER,
    STUDYBOT_BG_PAGE,
    STUDYBOT_BUDDY,
    STUDYBOT_CARD_SHADOW,
    STUDYBOT_FLASHCARDS,
    STUDYBOT_PRIMARY,
    STUDYBOT_QUIZ,
)
from i18n import tr
from services.content_client import ContentClient
from services.dashboard_controller import DashboardController, View
from services.quiz_session import QuizPhase
from services.study_models import Speaker
from utils.logging_setup import configure_logging

LOGGER = configure_logging()

ROUTE_TO_VIEW: dict[str, View] = {f"/{v.value}": v for v in View}
VIEW_TO_ROUTE: dict[View, str] = {v: k for k, v in ROUTE_TO_VIEW.items()}

NAV_ENTRIES: list[tuple[View, str, str]] = [
    (View.DASHBOARD, "🏠", "dashboard"),
    (View.FLASHCARDS, "🃏", "flashcards"),
    (View.QUIZ, "📝", "quiz"),
    (View.STUDY_BUDDY, "🤖", "study_buddy"),
]


def _lang() -> str:
    return st.session_state.get("lang", DEFAULT_LANG)


def _t(key: str, **kwargs: object) -> str:
    return tr(_lang(), key, **kwargs)


def _controller() -> DashboardController:
    if "dashboard" not in st.session_state:
        client = ContentClient(base_url=API_BASE_URL, timeout=API_TIMEOUT_S)
        st.session_state["dashboard"] = DashboardController(client)
        LOGGER.info("new dashboard session against %s", API_BASE_URL)
    return st.session_state["dashboard"]


def _request_nav(view: View) -> None:
    _controller().go_to(view)
    st.query_params["route"] = VIEW_TO_ROUTE[view]
    st.rerun()


def _sync_nav_with_route_query() -> None:
    ctl = _controller()
    raw_route = st.query_params.get("route", "")
    if isinstance(raw_route, list):
        raw_route = raw_route[0] if raw_route else ""
    route = str(raw_route or "").strip().lower()
    if "route_synced" not in st.session_state:
        # Only a fresh browser session follows the URL; afterwards the controller leads.
        st.session_state["route_synced"] = True
        query_view = ROUTE_TO_VIEW.get(route)
        if query_view is not None:
            ctl.go_to(query_view)
    expected_route = VIEW_TO_ROUTE[ctl.active_view]
    if route != expected_route:
        st.query_params["route"] = expected_route


def _inject_css() -> None:
    st.markdown(
        f"""
        <style>
        .stApp {{ background: {STUDYBOT_BG_PAGE} !important; }}
        .overview-icon {{ font-size: 2.4rem; }}
        .flashcard-face {{
            min-height: 12rem;
            border-radius: 16px;
            box-shadow: {STUDYBOT_CARD_SHADOW};
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 1.5rem;
            font-weight: 600;
            padding: 1.5rem;
            text-align: center;
        }}
        .flashcard-front {{ background: #DBEAFE; color: {STUDYBOT_FLASHCARDS}; }}
        .flashcard-back {{ background: #EFF6FF; color: {STUDYBOT_PRIMARY}; }}
        .quiz-question {{ color: {STUDYBOT_QUIZ}; font-weight: 700; font-size: 1.15rem; }}
        .buddy-title {{ color: {STUDYBOT_BUDDY}; }}
        .sidebar-header {{ color: {STUDYBOT_PRIMARY}; font-size: 1.8rem; font-weight: 800; text-align: center; }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def _render_language_switcher() -> None:
    if "lang" not in st.session_state:
        st.session_state["lang"] = DEFAULT_LANG
    c1, c2 = st.sidebar.columns(2, gap="small")
    if c1.button(
        _t("lang_en"),
        key="btn_lang_en",
        type="primary" if _lang() == "en" else "secondary",
        use_container_width=True,
    ):
        st.session_state["lang"] = "en"
        st.rerun()
    if c2.button(
        _t("lang_zh"),
        key="btn_lang_zh",
        type="primary" if _lang() == "zh" else "secondary",
        use_container_width=True,
    ):
        st.session_state["lang"] = "zh"
        st.rerun()


def _render_sidebar() -> None:
    ctl = _controller()
    st.sidebar.markdown(f'<p class="sidebar-header">{SIDEBAR_HEADER}</p>', unsafe_allow_html=True)
    _render_language_switcher()
    st.sidebar.markdown(f"**{_t('nav')}**")
    for view, icon, label_key in NAV_ENTRIES:
        if st.sidebar.button(
            f"{icon}  {_t(label_key)}",
            key=f"nav_btn_{view.value}",
            use_container_width=True,
            type="primary" if ctl.active_view is view else "secondary",
        ):
            if ctl.active_view is not view:
                _request_nav(view)
    st.sidebar.caption(SIDEBAR_FOOTER)


def _render_notice(view: View) -> None:
    ctl = _controller()
    notice = ctl.notice
    if notice is None or notice.view is not view:
        return
    st.error(_t("flashcards_error" if view is View.FLASHCARDS else "quiz_error"))
    st.caption(notice.detail)
    if st.button(_t("dismiss"), key=f"dismiss_notice_{view.value}"):
        ctl.dismiss_notice()
        st.rerun()


# ── Dashboard ────────────────────────────────────────────────────


def _render_dashboard() -> None:
    ctl = _controller()
    overview = ctl.overview()
    col_cards, col_quiz, col_buddy = st.columns(3)

    with col_cards.container(border=True):
        st.markdown('<div class="overview-icon">🃏</div>', unsafe_allow_html=True)
        st.markdown(f"#### {_t('flashcards')}")
        st.caption(_t("flashcards_desc"))
        if st.button(_t("go_flashcards"), key="btn_go_flashcards", use_container_width=True):
            _request_nav(View.FLASHCARDS)
        if overview.flashcard_count:
            st.caption(_t("progress"))
            st.progress(overview.flashcard_progress)
            st.caption(_t("cards_progress", pos=overview.flashcard_position, total=overview.flashcard_count))

    with col_quiz.container(border=True):
        st.markdown('<div class="overview-icon">📝</div>', unsafe_allow_html=True)
        st.markdown(f"#### {_t('quiz')}")
        st.caption(_t("quiz_desc"))
        if st.button(_t("go_quiz"), key="btn_go_quiz", use_container_width=True):
            _request_nav(View.QUIZ)
        if overview.quiz_count:
            st.caption(_t("progress"))
            st.progress(overview.quiz_progress)
            st.caption(_t("questions_progress", pos=overview.quiz_position, total=overview.quiz_count))

    with col_buddy.container(border=True):
        st.markdown('<div class="overview-icon">🤖</div>', unsafe_allow_html=True)
        st.markdown(f"#### {_t('study_buddy')}")
        st.caption(_t("study_buddy_desc"))
        if st.button(_t("go_study_buddy"), key="btn_go_buddy", use_container_width=True):
            _request_nav(View.STUDY_BUDDY)
        if overview.questions_asked:
            st.caption(_t("questions_asked", n=overview.questions_asked))


# ── Flashcards ───────────────────────────────────────────────────


def _render_flashcards_page() -> None:
    ctl = _controller()
    session = ctl.flashcards
    _render_notice(View.FLASHCARDS)

    card = session.current_card
    if card is None:
        st.subheader(_t("generate_flashcards_title"))
        notes = st.text_area(
            _t("generate_flashcards_title"),
            key=f"flashcards_notes_{ctl.input_epoch(View.FLASHCARDS)}",
            placeholder=_t("notes_placeholder"),
            height=160,
            label_visibility="collapsed",
        )
        ctl.set_draft(View.FLASHCARDS, notes)
        if st.button(
            _t("generate_flashcards"),
            key="btn_generate_flashcards",
            type="primary",
            disabled=not ctl.can_submit(View.FLASHCARDS),
            use_container_width=True,
        ):
            with st.spinner(_t("generating")):
                ctl.submit_flashcards()
            st.rerun()
        return

    st.caption(_t("card_position", pos=session.position, total=session.size))
    face_class = "flashcard-back" if session.is_face_up else "flashcard-front"
    face_text = card.back if session.is_face_up else card.front
    st.caption(_t("back") if session.is_face_up else _t("front"))
    st.markdown(f'<div class="flashcard-face {face_class}">{html.escape(face_text)}</div>', unsafe_allow_html=True)
    st.markdown("<br>", unsafe_allow_html=True)

    c_prev, c_flip, c_home, c_next = st.columns(4)
    if c_prev.button(_t("previous"), key="btn_card_prev", disabled=session.is_first, use_container_width=True):
        session.previous()
        st.rerun()
    if c_flip.button(_t("flip"), key="btn_card_flip", use_container_width=True):
        session.flip()
        st.rerun()
    if c_home.button(_t("back_to_dashboard"), key="btn_cards_home", use_container_width=True):
        ctl.close_flashcards()
        _request_nav(View.DASHBOARD)
    if c_next.button(_t("next"), key="btn_card_next", disabled=session.is_last, use_container_width=True):
        session.next()
        st.rerun()
    st.progress(session.progress)


# ── Quiz ─────────────────────────────────────────────────────────


def _option_label(idx: int, option: str, selected: int | None, correct_index: int) -> str:
    if selected is None:
        return option
    if idx == correct_index:
        return f"✅ {option}"
    if idx == selected:
        return f"❌ {option}"
    return option


def _render_quiz_page() -> None:
    ctl = _controller()
    session = ctl.quiz
    session.tick()
    _render_notice(View.QUIZ)

    if session.phase is QuizPhase.EMPTY:
        st.subheader(_t("create_quiz_title"))
        text = st.text_area(
            _t("create_quiz_title"),
            key=f"quiz_text_{ctl.input_epoch(View.QUIZ)}",
            placeholder=_t("quiz_placeholder"),
            height=160,
            label_visibility="collapsed",
        )
        ctl.set_draft(View.QUIZ, text)
        if st.button(
            _t("create_quiz"),
            key="btn_create_quiz",
            type="primary",
            disabled=not ctl.can_submit(View.QUIZ),
            use_container_width=True,
        ):
            with st.spinner(_t("creating")):
                ctl.submit_quiz()
            st.rerun()
        return

    if session.phase is QuizPhase.COMPLETE:
        st.subheader(_t("quiz_complete"))
        st.markdown(_t("quiz_score", score=session.score, total=session.size, pct=session.score_percent))
        if st.button(_t("back_to_dashboard"), key="btn_quiz_home", type="primary"):
            ctl.close_quiz()
            _request_nav(View.DASHBOARD)
        return

    question = session.current_question
    st.caption(_t("question_position", pos=session.cursor + 1, total=session.size))
    with st.container(border=True):
        st.markdown(f'<p class="quiz-question">{html.escape(question.question)}</p>', unsafe_allow_html=True)
        selected = session.selected
        for idx, option in enumerate(question.options):
            if st.button(
                _option_label(idx, option, selected, question.correct_index),
                key=f"quiz_opt_{session.cursor}_{idx}",
                disabled=selected is not None,
                use_container_width=True,
                type="primary" if selected == idx else "secondary",
            ):
                session.answer(idx)
                st.rerun()
        if selected is not None:
            if session.is_correct_selection:
                st.success(_t("quiz_correct"))
            else:
                st.error(_t("quiz_wrong", answer=question.options[question.correct_index]))
            st.markdown(f"**{_t('explanation')}** {question.explanation or '-'}")
    st.progress(session.progress)

    if session.phase is QuizPhase.ANSWERED:
        time.sleep(session.feedback_remaining())
        session.tick()
        st.rerun()


# ── Study buddy ──────────────────────────────────────────────────


def _render_study_buddy_page() -> None:
    ctl = _controller()
    st.markdown(f'<h3 class="buddy-title">{_t("ask_title")}</h3>', unsafe_allow_html=True)

    c_input, c_btn = st.columns([5, 1])
    question = c_input.text_input(
        _t("ask_title"),
        key=f"buddy_input_{ctl.input_epoch(View.STUDY_BUDDY)}",
        placeholder=_t("ask_placeholder"),
        label_visibility="collapsed",
    )
    ctl.set_draft(View.STUDY_BUDDY, question)
    if c_btn.button(
        _t("ask"),
        key="btn_buddy_ask",
        type="primary",
        disabled=not ctl.can_submit(View.STUDY_BUDDY),
        use_container_width=True,
    ):
        with st.spinner(_t("thinking")):
            ctl.ask()
        st.rerun()

    for turn in ctl.chat.turns:
        with st.chat_message("user" if turn.speaker is Speaker.USER else "assistant"):
            st.markdown(turn.content)


def main() -> None:
    st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="wide")
    _inject_css()
    _sync_nav_with_route_query()
    _render_sidebar()
    view = _controller().active_view
    if view is View.FLASHCARDS:
        _render_flashcards_page()
    elif view is View.QUIZ:
        _render_quiz_page()
    elif view is View.STUDY_BUDDY:
        _render_study_buddy_page()
    else:
        _render_dashboard()


if __name__ == "__main__":
    main()
