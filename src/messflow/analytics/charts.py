"""Matplotlib renderers for the dashboard and analytics charts.

Each ``plot_*`` function returns ``(fig, ax)``; :func:`render_png` turns a
figure into PNG bytes and closes it.
"""
from __future__ import annotations

import io
from typing import Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from .model import DailyStat, HallStat, HourlyStat, MealCount  # noqa: E402

MEAL_COLORS = {
    "Breakfast": "#f59e0b",
    "Lunch": "#3b82f6",
    "Dinner": "#8b5cf6",
    "Snacks": "#10b981",
}


def plot_meal_bar(data: Sequence[MealCount]) -> Tuple[plt.Figure, plt.Axes]:
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(
        [d.meal for d in data],
        [d.count for d in data],
        color=[MEAL_COLORS.get(d.meal, "#64748b") for d in data],
    )
    ax.set_title("Meal-wise Attendance Today")
    ax.set_ylabel("Scans")
    return fig, ax


def plot_hourly_line(data: Sequence[HourlyStat]) -> Tuple[plt.Figure, plt.Axes]:
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot([d.hour for d in data], [d.count for d in data], marker="o", color="#3b82f6")
    ax.set_title("Hourly Scans Today")
    ax.set_ylabel("Scans")
    ax.grid(alpha=0.3)
    return fig, ax


def plot_hall_pie(data: Sequence[HallStat]) -> Tuple[plt.Figure, plt.Axes]:
    fig, ax = plt.subplots(figsize=(5, 5))
    # Percentages are always defined (33/33/34 when there is no data).
    ax.pie(
        [d.percentage for d in data],
        labels=[f"{d.hall} ({d.count})" for d in data],
        autopct="%d%%",
        startangle=90,
    )
    ax.set_title("Hall Distribution")
    ax.axis("equal")
    return fig, ax


def plot_weekly_area(data: Sequence[DailyStat]) -> Tuple[plt.Figure, plt.Axes]:
    fig, ax = plt.subplots(figsize=(8, 4))
    labels = [d.date for d in data]
    ax.stackplot(
        labels,
        [d.breakfast for d in data],
        [d.lunch for d in data],
        [d.dinner for d in data],
        [d.snacks for d in data],
        labels=list(MEAL_COLORS),
        colors=list(MEAL_COLORS.values()),
        alpha=0.8,
    )
    ax.set_title("Weekly Trend")
    ax.legend(loc="upper left")
    return fig, ax


def plot_peak_hours(data: Sequence[HourlyStat]) -> Tuple[plt.Figure, plt.Axes]:
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar([d.hour for d in data], [d.count for d in data], color="#6366f1")
    ax.set_title("Peak Hours")
    ax.set_ylabel("Scans")
    return fig, ax


def render_png(fig: plt.Figure) -> io.BytesIO:
    buf = io.BytesIO()
    try:
        fig.tight_layout()
        fig.savefig(buf, format="png")
    finally:
        plt.close(fig)
    buf.seek(0)
    return buf
