from __future__ import annotations

import logging

from flask import Flask, abort, flash, jsonify, redirect, render_template, request, send_file, url_for

from ..analytics.charts import plot_hall_pie, plot_hourly_line, plot_meal_bar, plot_weekly_area, render_png
from ..analytics.filters import search_records
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="dashboard")
    def dashboard():
        data = container.dashboard_service.build()
        return render_template(
            "dashboard.html",
            data=data,
            refresh_seconds=container.live_feed_refresh_seconds,
            active_page="dashboard",
        )

    @app.route("/refresh", methods=["POST"], endpoint="refresh")
    def refresh():
        if not container.record_service.refresh():
            flash("A refresh is already in progress", "info")
        else:
            error = container.record_service.snapshot().error
            if error:
                flash(f"Could not refresh live data: {error}", "warning")
        return redirect(url_for("dashboard"))

    @app.route("/api/feed", endpoint="api_feed")
    def api_feed():
        return jsonify(container.record_service.snapshot().to_dict())

    @app.route("/api/stats", endpoint="api_stats")
    def api_stats():
        try:
            return jsonify(container.dashboard_service.build().to_dict())
        except Exception:
            logger.exception("failed to build dashboard stats")
            return jsonify({"success": False, "message": "Failed to build dashboard stats"}), 500

    @app.route("/api/recent-scans", endpoint="api_recent_scans")
    def api_recent_scans():
        snapshot = container.record_service.snapshot()
        rows = search_records(container.record_service.recent(snapshot=snapshot), request.args.get("q"))
        return jsonify(
            {
                "rows": [r.to_dict() for r in rows],
                "last_updated": snapshot.last_updated.isoformat() if snapshot.last_updated else None,
                "error": snapshot.error,
            }
        )

    charts = {
        "meals": lambda d: plot_meal_bar(d.meals),
        "hourly": lambda d: plot_hourly_line(d.hourly),
        "halls": lambda d: plot_hall_pie(d.halls),
        "weekly": lambda d: plot_weekly_area(d.weekly),
    }

    @app.route("/charts/<name>.png", endpoint="chart")
    def chart(name: str):
        plot = charts.get(name)
        if plot is None:
            abort(404)
        fig, _ax = plot(container.dashboard_service.build())
        return send_file(render_png(fig), mimetype="image/png")
