from typing import List, Optional

import pandas as pd
import plotly.graph_objects as go

from period_pace.period import TOTAL_DAYS, days_done, week_day_of
from period_pace.timecodec import format_time

SCHEDULE_COLS = ["Day", "Week", "DayInWeek", "Phase", "Seconds", "RunningAvg"]
COL = {
    "done": "#6366f1",
    "remaining": "#8b5cf6",
    "goal": "#5CFF9D",
    "avg": "#FFC75A",
    "text": "#e8eef8",
    "muted": "#9db0cc",
}


def period_schedule(
    goal_seconds: float,
    day_index: int,
    current_avg_seconds: Optional[float],
    required_seconds: Optional[float],
) -> pd.DataFrame:
    """One row per period day: elapsed days at the current average, the rest at the requirement."""
    done = days_done(day_index)
    rows: List[dict] = []
    for d in range(1, TOTAL_DAYS + 1):
        wd = week_day_of(d)
        if d <= done:
            phase, sec = "done", current_avg_seconds
        else:
            phase, sec = "remaining", required_seconds
        rows.append({"Day": d, "Week": wd.week, "DayInWeek": wd.day_in_week, "Phase": phase, "Seconds": sec})
    df = pd.DataFrame(rows, columns=SCHEDULE_COLS[:-1])
    df["Seconds"] = pd.to_numeric(df["Seconds"], errors="coerce")
    # Cumulative mean over days that have a value; gaps carry forward.
    df["RunningAvg"] = df["Seconds"].expanding().mean()
    return df[SCHEDULE_COLS]


def fig_style(fig: go.Figure, h: int) -> go.Figure:
    fig.update_layout(
        height=h,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(8,12,24,.46)",
        margin=dict(l=0, r=0, t=8, b=0),
        font=dict(family="JetBrains Mono, monospace", size=12, color=COL["text"]),
        xaxis=dict(showgrid=False, zeroline=False, tickfont=dict(color=COL["muted"])),
        yaxis=dict(showgrid=True, gridcolor="rgba(125,150,180,.18)", zeroline=False, tickfont=dict(color=COL["muted"])),
        legend=dict(orientation="h", y=1.1, x=1, xanchor="right", yanchor="bottom"),
        bargap=0.25,
    )
    return fig


def period_chart(frame: pd.DataFrame, goal_seconds: float) -> go.Figure:
    fig = go.Figure()
    for phase, label in (("done", "Done"), ("remaining", "Remaining")):
        part = frame.loc[frame["Phase"] == phase]
        if part.empty:
            continue
        fig.add_trace(
            go.Bar(
                x=part["Day"],
                y=part["Seconds"],
                name=label,
                marker_color=COL[phase],
                customdata=[format_time(s) for s in part["Seconds"]],
                hovertemplate="Day %{x}<br>%{customdata}<extra></extra>",
            )
        )
    fig.add_trace(
        go.Scatter(
            x=frame["Day"],
            y=frame["RunningAvg"],
            name="Period avg",
            mode="lines",
            line=dict(color=COL["avg"], width=2),
            customdata=[format_time(s) for s in frame["RunningAvg"]],
            hovertemplate="Day %{x}<br>Avg %{customdata}<extra></extra>",
        )
    )
    fig.add_hline(y=goal_seconds, line_dash="dot", line_color=COL["goal"], annotation_text=f"Goal {format_time(goal_seconds)}")
    fig.update_xaxes(dtick=7, range=[0.5, TOTAL_DAYS + 0.5])
    fig.update_yaxes(title_text="seconds")
    return fig_style(fig, 260)
