from __future__ import annotations

import csv
import io

from flask import Flask, jsonify

from ..common.http import json_errors, query_date
from ..container import Container
from ..users.access import login_required


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _attachment(body: str, *, mimetype: str, filename: str):
        return app.response_class(
            body.encode("utf-8-sig") if mimetype == "text/csv" else body.encode("utf-8"),
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/daily-summary", methods=["GET"], endpoint="daily_summary")
    @login_required
    @json_errors("Error generating daily summary report")
    def daily_summary(current_user):
        return jsonify(reports.daily_summary(query_date()).to_json())

    @app.route("/api/reports/daily-summary/export", methods=["GET"], endpoint="daily_summary_export")
    @login_required
    @json_errors("Error exporting daily summary report")
    def daily_summary_export(current_user):
        date = query_date()
        return _attachment(
            reports.render_daily_summary_text(date),
            mimetype="text/plain",
            filename=f"visitor-summary-{date}.txt",
        )

    @app.route("/api/reports/departments", methods=["GET"], endpoint="department_report")
    @login_required
    @json_errors("Error generating department report")
    def department_report(current_user):
        return jsonify(reports.department_breakdown(query_date()).to_json())

    @app.route("/api/reports/departments/export", methods=["GET"], endpoint="department_report_export")
    @login_required
    @json_errors("Error exporting department report")
    def department_report_export(current_user):
        date = query_date()
        report = reports.department_breakdown(date)

        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=["department", "generalVisitors", "researchers", "total", "avgDuration"],
        )
        writer.writeheader()
        for row in report.rows:
            writer.writerow(row)

        return _attachment(out.getvalue(), mimetype="text/csv", filename=f"department-report-{date}.csv")
