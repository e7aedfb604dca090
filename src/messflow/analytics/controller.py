from __future__ import annotations

from flask import Flask, flash, render_template, request, send_file
from werkzeug.datastructures import MultiDict

from ..common.datetime_utils import format_date
from ..common.parsing import parse_int_or_zero
from ..container import Container
from ..core.constants import MESS_HALLS
from ..core.enums import MealTime
from ..core.exceptions import ValidationError
from .charts import plot_peak_hours, render_png
from .filters import filter_from_args
from .model import RecordFilter


def register(app: Flask, container: Container) -> None:
    def _filters(args: MultiDict) -> RecordFilter:
        try:
            return filter_from_args(args)
        except ValidationError as e:
            flash(str(e), "warning")
            return RecordFilter()

    @app.route("/analytics", endpoint="analytics")
    def analytics():
        filters = _filters(request.args)
        page = parse_int_or_zero(request.args.get("page")) or 1
        view = container.analytics_service.build_view(filters, page=page)
        query = {k: v for k, v in request.args.items() if k != "page"}
        return render_template(
            "analytics.html",
            view=view,
            query=query,
            meals=[m.value for m in MealTime],
            halls=MESS_HALLS,
            active_page="analytics",
        )

    @app.route("/analytics/export.csv", endpoint="analytics_export_csv")
    def analytics_export_csv():
        csv_text = container.analytics_service.export_csv(_filters(request.args))
        filename = f"mess-analytics-{format_date(container.record_service.today())}.csv"
        return app.response_class(
            csv_text,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/analytics/export.xlsx", endpoint="analytics_export_xlsx")
    def analytics_export_xlsx():
        output = container.analytics_service.export_xlsx(_filters(request.args))
        return send_file(
            output,
            download_name=f"mess-analytics-{format_date(container.record_service.today())}.xlsx",
            as_attachment=True,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    @app.route("/analytics/peak-hours.png", endpoint="analytics_peak_hours")
    def analytics_peak_hours():
        view = container.analytics_service.build_view(_filters(request.args))
        fig, _ax = plot_peak_hours(view.peak_hours)
        return send_file(render_png(fig), mimetype="image/png")
