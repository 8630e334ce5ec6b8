import os
from pathlib import Path
from typing import Optional

import streamlit as st
from loguru import logger

from period_pace.period import TOTAL_DAYS
from period_pace.schedule import period_chart, period_schedule
from period_pace.settings import JsonFileStore, Settings, load_settings, save_settings
from period_pace.tiers import plural_days
from period_pace.timecodec import format_time
from period_pace.view import ViewState, recompute

st.set_page_config(page_title="DT Speed Calculator", layout="centered")

SETTINGS_ENV = "PERIOD_PACE_SETTINGS"
DEFAULT_SETTINGS_PATH = Path.home() / ".period_pace" / "settings.json"
INPUT_KEYS = ("goal", "day_of_period", "current_avg")
COL = {
    "line": "rgba(255,255,255,.08)",
    "text": "#f0f0f5",
    "muted": "rgba(255,255,255,.4)",
    "faint": "rgba(255,255,255,.25)",
    "brand": "#6366f1",
    "brand2": "#8b5cf6",
    "danger": "#f87171",
}
CHART_CFG = {"displayModeBar": False}
MONO = "'JetBrains Mono', monospace"


def theme() -> None:
    st.markdown(
        f"""
        <style>
        @import url('https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;700&family=JetBrains+Mono:wght@500;700&display=swap');
        .stApp {{font-family:"DM Sans", system-ui, sans-serif; color:{COL["text"]}; background:linear-gradient(160deg,#0a0a14,#11111f);}}
        .stMarkdown p, label {{color:{COL["text"]} !important;}}
        .block-container {{padding-top:1.2rem; max-width:30rem;}}
        [data-testid="stHeader"] {{background:rgba(0,0,0,0);}}
        div[data-baseweb="input"] > div {{background:rgba(255,255,255,.04) !important; border:1.5px solid rgba(255,255,255,.1) !important; border-radius:12px !important;}}
        div[data-baseweb="input"] input {{color:{COL["text"]} !important; font-family:{MONO}; font-weight:500; font-size:1.1rem;}}
        .stButton > button {{width:100%; background:rgba(255,255,255,.04); color:{COL["muted"]}; border:1.5px solid {COL["line"]}; border-radius:12px;}}
        .stButton > button:hover {{color:rgba(255,255,255,.7); border-color:rgba(255,255,255,.16);}}
        .hd {{display:flex; align-items:center; gap:.75rem; padding-bottom:.9rem; border-bottom:1px solid rgba(255,255,255,.05); margin-bottom:1.1rem;}}
        .logo {{width:2.25rem; height:2.25rem; border-radius:.75rem; background:linear-gradient(135deg,{COL["brand"]},{COL["brand2"]}); box-shadow:0 2px 12px rgba(99,102,241,.3);}}
        .ht {{font-size:1.25rem; font-weight:700; margin:0; line-height:1.2;}}
        .hs {{font-size:.7rem; font-weight:500; letter-spacing:.05em; color:rgba(255,255,255,.35); margin:0;}}
        .help {{font-size:.82rem; color:{COL["muted"]}; margin:0 0 1.2rem 0;}}
        .err {{font-size:.75rem; color:{COL["danger"]}; margin:-.6rem 0 .6rem 0;}}
        .pill {{display:inline-block; border-radius:.5rem; padding:.2rem .6rem; margin:0 .35rem .6rem 0; font-size:.75rem; font-weight:700; font-family:{MONO};}}
        .p1 {{background:rgba(99,102,241,.15); color:#a5b4fc;}}
        .p2 {{background:rgba(255,255,255,.06); color:rgba(255,255,255,.5);}}
        .prow {{display:flex; justify-content:space-between; font-size:.72rem; color:{COL["faint"]}; margin:-.4rem 0 0 0;}}
        .card {{position:relative; border-radius:1rem; padding:1.4rem; margin:1.3rem 0 .6rem 0; overflow:hidden;}}
        .ch {{font-size:.85rem; font-weight:700; text-transform:uppercase; letter-spacing:.03em; margin:0 0 .6rem 0;}}
        .cm {{font-size:.82rem; color:rgba(255,255,255,.5); margin:0 0 .9rem 0;}}
        .cl {{font-size:.68rem; text-transform:uppercase; letter-spacing:.15em; color:rgba(255,255,255,.35); text-align:center; margin:0 0 .2rem 0;}}
        .cv {{font-family:{MONO}; font-weight:700; color:#fff; text-align:center; line-height:1; margin:0;}}
        .stats {{display:grid; grid-template-columns:1fr 1fr; gap:.75rem; margin-top:1.2rem;}}
        .stat {{border-radius:.75rem; padding:.6rem .75rem; background:rgba(255,255,255,.04);}}
        .sl {{font-size:.62rem; text-transform:uppercase; letter-spacing:.04em; color:rgba(255,255,255,.3); margin:0;}}
        .sv {{font-size:1.1rem; font-weight:700; font-family:{MONO}; color:rgba(255,255,255,.8); margin:0;}}
        .note {{margin-top:.9rem; padding:.5rem .75rem; border-radius:.5rem; font-size:.75rem;}}
        .math p {{font-family:{MONO}; font-size:.75rem; color:rgba(255,255,255,.35); margin:0;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def secret(key: str, default: Optional[str] = None) -> Optional[str]:
    try:
        return st.secrets.get(key, default)
    except Exception:
        # No secrets.toml is the common local case.
        return default


def settings_path() -> Path:
    return Path(secret("settings_path") or os.environ.get(SETTINGS_ENV) or DEFAULT_SETTINGS_PATH)


def init_inputs(store: JsonFileStore) -> None:
    if "interacted" not in st.session_state:
        saved = load_settings(store) or Settings()
        st.session_state["goal"] = saved.goal
        st.session_state["day_of_period"] = saved.day_of_period
        st.session_state["current_avg"] = saved.current_avg
        st.session_state["interacted"] = False
        logger.info(f"Loaded inputs from {store.path}")
    # Re-assigning keeps the value of a widget that is hidden on this run.
    for k in INPUT_KEYS:
        st.session_state[k] = st.session_state[k]


def mark_interacted() -> None:
    st.session_state["interacted"] = True


def reset_inputs() -> None:
    d = Settings()
    st.session_state["goal"] = d.goal
    st.session_state["day_of_period"] = d.day_of_period
    st.session_state["current_avg"] = d.current_avg
    st.session_state["interacted"] = False


def field_error(view: ViewState, key: str) -> None:
    if key in view.errors:
        st.markdown(f"<p class='err'>{view.errors[key]}</p>", unsafe_allow_html=True)


def result_card(view: ViewState) -> None:
    res, tier = view.result, view.tier
    if res is None or tier is None:
        return
    head = f"<p class='ch' style='color:{tier.text};'>✓ {view.headline}</p>" if res.status != "ok" else ""
    msg = f"<p class='cm'>{view.message}</p>" if view.message else ""
    if res.status == "day1":
        body = (
            f"<p class='cl'>Target Speed</p>"
            f"<p class='cv' style='font-size:3rem;text-shadow:0 0 30px {tier.accent}40;'>{format_time(view.goal_seconds)}</p>"
        )
    elif res.status == "ahead":
        body = "<p class='cl'>Required Remaining Avg</p><p class='cv' style='font-size:3rem;'>0:00</p>"
    elif res.status == "ok":
        note = view.note
        note_html = (
            f"<div class='note' style='background:{note.bg};border:1px solid {note.border};color:{note.text};'>{note.message}</div>"
            if note
            else ""
        )
        body = (
            f"<p class='cl'>{view.headline}</p>"
            f"<p class='cv' style='font-size:3.5rem;text-shadow:0 0 40px {tier.accent}30;'>{format_time(res.required_seconds)}</p>"
            f"<div class='stats'>"
            f"<div class='stat'><p class='sl'>Goal</p><p class='sv'>{format_time(view.goal_seconds)}</p></div>"
            f"<div class='stat'><p class='sl'>Current Avg</p><p class='sv'>{format_time(view.current_avg_seconds)}</p></div>"
            f"</div>{note_html}"
        )
    else:
        body = ""
    st.markdown(
        f"<div class='card' style='background:{tier.bg};border:1.5px solid {tier.border}33;'>{head}{msg}{body}</div>",
        unsafe_allow_html=True,
    )


theme()
store = JsonFileStore(settings_path())
init_inputs(store)

st.markdown(
    "<div class='hd'><div class='logo'></div><div><p class='ht'>DT Speed Calculator</p>"
    f"<p class='hs'>{TOTAL_DAYS}-DAY PERIOD PLANNER</p></div></div>"
    "<p class='help'>Enter your day &amp; current average to find the speed you must run "
    f"from today forward to finish the {TOTAL_DAYS}-day period at your goal.</p>",
    unsafe_allow_html=True,
)

st.text_input("🎯 Goal Speed (mm:ss)", key="goal", placeholder="3:45", on_change=mark_interacted)
view = recompute(Settings(**{k: st.session_state[k] for k in INPUT_KEYS}), st.session_state["interacted"])
field_error(view, "goal")

st.text_input(f"📅 Day of Period (1–{TOTAL_DAYS})", key="day_of_period", placeholder="1", on_change=mark_interacted)
field_error(view, "day_of_period")
if view.week_day is not None:
    st.markdown(
        f"<span class='pill p1'>Week {view.week_day.week}</span><span class='pill p2'>Day {view.week_day.day_in_week}</span>",
        unsafe_allow_html=True,
    )

if view.needs_current_avg:
    st.text_input("⏱ Current Period Avg (mm:ss)", key="current_avg", placeholder="4:10", on_change=mark_interacted)
    field_error(view, "current_avg")

if view.valid_day:
    st.progress(view.progress, text=f"Period progress • {view.days_done}/{TOTAL_DAYS} days done")
    st.markdown(
        f"<div class='prow'><span>{plural_days(view.days_left)} left</span><span>{view.progress_pct}%</span></div>",
        unsafe_allow_html=True,
    )

result_card(view)

if view.result is not None and view.goal_seconds is not None and view.day_index is not None and view.result.status != "final":
    frame = period_schedule(view.goal_seconds, view.day_index, view.current_avg_seconds, view.result.required_seconds)
    st.plotly_chart(period_chart(frame, view.goal_seconds), use_container_width=True, config=CHART_CFG)

st.button("↻ Reset to Defaults", on_click=reset_inputs)

with st.expander("How the math works"):
    st.markdown(
        "<div class='math'>"
        f"<p>required = (goal × {TOTAL_DAYS} − currentAvg × daysDone) / daysLeft</p><br>"
        "<p>daysDone = dayOfPeriod − 1</p>"
        f"<p>daysLeft = {TOTAL_DAYS} − daysDone</p><br>"
        f"<p><em>Period performance is a simple average of all {TOTAL_DAYS} daily speeds.</em></p>"
        "</div>",
        unsafe_allow_html=True,
    )

save_settings(store, Settings(**{k: st.session_state[k] for k in INPUT_KEYS}))
