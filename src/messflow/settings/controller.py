from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/settings", methods=["GET", "POST"], endpoint="settings")
    def settings():
        current = container.settings_service.defaults()
        if request.method == "POST":
            try:
                current = container.settings_service.apply_form(request.form)
                flash("Settings saved successfully", "success")
            except ValidationError as e:
                flash(str(e), "warning")
        return render_template("settings.html", settings=current, active_page="settings")

    @app.route("/settings/reset", methods=["POST"], endpoint="settings_reset")
    def settings_reset():
        flash("Settings reset to defaults", "info")
        return redirect(url_for("settings"))
