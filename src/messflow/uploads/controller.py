from __future__ import annotations

import os

from flask import Flask, flash, render_template, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/upload", methods=["GET", "POST"], endpoint="upload")
    def upload():
        receipt = None
        if request.method == "POST":
            file = request.files.get("file")
            try:
                if file is None:
                    raise ValidationError("Please choose a CSV file to upload")
                file.stream.seek(0, os.SEEK_END)
                size = file.stream.tell()
                receipt = container.upload_service.accept(file.filename, file.mimetype, size)
                flash(f"File uploaded successfully! {receipt.name} has been processed.", "success")
            except ValidationError as e:
                flash(str(e), "warning")

        return render_template(
            "upload.html",
            receipt=receipt,
            template_csv=container.upload_service.template_csv(),
            active_page="upload",
        )

    @app.route("/upload/template.csv", endpoint="upload_template")
    def upload_template():
        return app.response_class(
            container.upload_service.template_csv(),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=mess-data-template.csv"},
        )
