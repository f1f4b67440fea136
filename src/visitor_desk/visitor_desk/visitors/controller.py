from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_errors, query_date, query_enum
from ..common.schemas import parse_payload
from ..container import Container
from ..core.enums import CheckStatus, Department, Role, VisitorType
from ..users.access import login_required, roles_required
from .schemas import FeeUpdate, VisitorCreate


def register(app: Flask, container: Container) -> None:
    visitors = container.visitor_service

    def _not_found():
        return jsonify({"message": "Visitor not found"}), 404

    @app.route("/api/visitors", methods=["GET"], endpoint="list_visitors")
    @login_required
    @json_errors("Error fetching visitors")
    def list_visitors(current_user):
        rows = visitors.search(
            date=query_date(),
            status=query_enum("status", CheckStatus),
            visitor_type=query_enum("type", VisitorType),
            department=query_enum("department", Department),
        )
        return jsonify([v.to_json() for v in rows])

    @app.route("/api/visitors/checkedin", methods=["GET"], endpoint="checked_in_visitors")
    @login_required
    @json_errors("Error fetching checked-in visitors")
    def checked_in_visitors(current_user):
        return jsonify([v.to_json() for v in visitors.list_checked_in()])

    @app.route("/api/visitors/<int:visitor_id>", methods=["GET"], endpoint="get_visitor")
    @login_required
    @json_errors("Error fetching visitor")
    def get_visitor(current_user, visitor_id: int):
        visitor = visitors.get(visitor_id)
        if not visitor:
            return _not_found()
        return jsonify(visitor.to_json())

    @app.route("/api/visitors/idnumber/<id_number>", methods=["GET"], endpoint="get_active_visitor")
    @login_required
    @json_errors("Error fetching visitor")
    def get_active_visitor(current_user, id_number: str):
        visitor = visitors.get_active_by_id_number(id_number)
        if not visitor:
            return jsonify({"message": "No active visitor found with this ID number"}), 404
        return jsonify(visitor.to_json())

    @app.route("/api/visitors", methods=["POST"], endpoint="check_in_visitor")
    @roles_required(Role.RECEPTIONIST)
    @json_errors("Error creating visitor")
    def check_in_visitor(current_user):
        data = parse_payload(VisitorCreate, json_body(), message="Invalid visitor data")
        visitor = visitors.check_in(data)
        return jsonify(visitor.to_json()), 201

    @app.route("/api/visitors/<int:visitor_id>/checkout", methods=["PATCH"], endpoint="check_out_visitor")
    @roles_required(Role.RECEPTIONIST)
    @json_errors("Error checking out visitor")
    def check_out_visitor(current_user, visitor_id: int):
        visitor = visitors.check_out(visitor_id)
        if not visitor:
            return _not_found()
        return jsonify(visitor.to_json())

    @app.route("/api/visitors/<int:visitor_id>/fee", methods=["PATCH"], endpoint="update_visitor_fee")
    @roles_required(Role.ACCOUNTANT)
    @json_errors("Error updating researcher fee status")
    def update_visitor_fee(current_user, visitor_id: int):
        data = parse_payload(FeeUpdate, json_body(), message="Invalid fee data")
        visitor = visitors.update_fee(visitor_id, fee_paid=data.fee_paid, ticket_number=data.ticket_number)
        if not visitor:
            return _not_found()
        return jsonify(visitor.to_json())
