from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_errors, query_date
from ..common.schemas import parse_payload
from ..container import Container
from ..core.enums import Role
from ..users.access import login_required, roles_required
from .schemas import LibraryCheckout, LibraryVisitCreate


def register(app: Flask, container: Container) -> None:
    library = container.library_service

    def _not_found():
        return jsonify({"message": "Library visit not found"}), 404

    @app.route("/api/library/visits", methods=["GET"], endpoint="list_library_visits")
    @login_required
    @json_errors("Error fetching library visits")
    def list_library_visits(current_user):
        return jsonify([v.to_json() for v in library.list_by_date(query_date())])

    @app.route("/api/library/visits/checkedin", methods=["GET"], endpoint="checked_in_library_visits")
    @login_required
    @json_errors("Error fetching checked-in library visits")
    def checked_in_library_visits(current_user):
        return jsonify([v.to_json() for v in library.list_checked_in()])

    @app.route("/api/library/visits/<int:visit_id>", methods=["GET"], endpoint="get_library_visit")
    @login_required
    @json_errors("Error fetching library visit")
    def get_library_visit(current_user, visit_id: int):
        visit = library.get(visit_id)
        if not visit:
            return _not_found()
        return jsonify(visit.to_json())

    @app.route("/api/library/visits/visitor/<int:visitor_id>", methods=["GET"], endpoint="library_visits_for_visitor")
    @login_required
    @json_errors("Error fetching library visits")
    def library_visits_for_visitor(current_user, visitor_id: int):
        return jsonify([v.to_json() for v in library.list_for_visitor(visitor_id)])

    @app.route("/api/library/visits/ticket/<ticket_number>", methods=["GET"], endpoint="active_library_visit")
    @login_required
    @json_errors("Error fetching library visit")
    def active_library_visit(current_user, ticket_number: str):
        visit = library.get_active_by_ticket(ticket_number)
        if not visit:
            return jsonify({"message": "No active library visit found with this ticket number"}), 404
        return jsonify(visit.to_json())

    @app.route("/api/library/visits", methods=["POST"], endpoint="check_in_library_visit")
    @roles_required(Role.LIBRARY_OFFICER)
    @json_errors("Error creating library visit")
    def check_in_library_visit(current_user):
        data = parse_payload(LibraryVisitCreate, json_body(), message="Invalid library visit data")
        visit = library.check_in(data)
        return jsonify(visit.to_json()), 201

    @app.route("/api/library/visits/<int:visit_id>/checkout", methods=["PATCH"], endpoint="check_out_library_visit")
    @roles_required(Role.LIBRARY_OFFICER)
    @json_errors("Error checking out library visit")
    def check_out_library_visit(current_user, visit_id: int):
        data = parse_payload(LibraryCheckout, json_body(), message="Invalid checkout data")
        visit = library.check_out(visit_id, notes=data.notes)
        if not visit:
            return _not_found()
        return jsonify(visit.to_json())
