from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import json_body, json_errors
from ..common.schemas import parse_payload
from ..container import Container
from ..core.enums import Role
from .access import SESSION_KEY, login_required, roles_required
from .schemas import LoginRequest, UserCreate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    @json_errors("Error during login")
    def login():
        data = parse_payload(LoginRequest, json_body(), message="Invalid login data")
        s_user = container.auth_service.authenticate(data.username, data.password)

        session.clear()
        session.permanent = True
        session[SESSION_KEY] = s_user.to_session()

        return jsonify({"message": "Login successful", "user": s_user.to_json()})

    @app.route("/api/auth/logout", methods=["GET"], endpoint="auth_logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logout successful"})

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @login_required
    def me(current_user):
        return jsonify({"user": current_user.to_json()})

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    @json_errors("Error creating user")
    def register_account():
        data = parse_payload(UserCreate, json_body(), message="Invalid user data")
        user = container.user_service.create_account(
            username=data.username,
            password=data.password,
            full_name=data.full_name,
            role=data.role,
            email=data.email,
        )
        return jsonify(user.to_json()), 201

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @roles_required(Role.ADMIN)
    @json_errors("Error fetching users")
    def list_users(current_user):
        return jsonify([u.to_json() for u in container.user_service.list_users()])

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @roles_required(Role.ADMIN)
    @json_errors("Error creating user")
    def create_user(current_user):
        data = parse_payload(UserCreate, json_body(), message="Invalid user data")
        user = container.user_service.create_account(
            username=data.username,
            password=data.password,
            full_name=data.full_name,
            role=data.role,
            email=data.email,
            allow_admin=True,
        )
        return jsonify(user.to_json()), 201
