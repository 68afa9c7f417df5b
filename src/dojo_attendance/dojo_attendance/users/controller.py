from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import json_payload, remember_user, role_required, session_user
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .service import instructor_from_fields


def register(app: Flask, container: Container) -> None:
    facade = container.facade
    login_required = role_required(container)
    admin_required = role_required(container, Role.ADMIN)

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        role = (request.get_json(silent=True) or {}).get("role") or request.form.get("role")
        if not role:
            raise ValidationError("Perfil é obrigatório")
        # Sign-in lives in this client's cookie; the shared core session is left as it was.
        with facade.acting_as(None):
            user = facade.login(role)
        session.clear()
        remember_user(user)
        return jsonify(user.to_dict())

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return "", 204

    @app.route("/auth/me", endpoint="me")
    def me():
        user = session_user(container)
        return jsonify(user.to_dict() if user else None)

    @app.route("/instructors", methods=["GET"], endpoint="list_instructors")
    @login_required
    def list_instructors():
        return jsonify([
            {**i.to_dict(), "age": facade.calculate_age(i.birth_date) if i.birth_date else None}
            for i in facade.instructors
        ])

    @app.route("/instructors", methods=["POST"], endpoint="add_instructor")
    @admin_required
    def add_instructor():
        instructor = facade.add_instructor(json_payload())
        return jsonify(instructor.to_dict()), 201

    @app.route("/instructors/<instructor_id>", methods=["GET"], endpoint="get_instructor")
    @login_required
    def get_instructor(instructor_id: str):
        instructor = facade.get_instructor(instructor_id)
        if not instructor:
            return jsonify({"error": "Instrutor não encontrado"}), 404
        return jsonify(instructor.to_dict())

    @app.route("/instructors/<instructor_id>/name", methods=["GET"], endpoint="instructor_name")
    def instructor_name(instructor_id: str):
        return jsonify({"id": instructor_id, "name": facade.get_instructor_name(instructor_id)})

    @app.route("/instructors/<instructor_id>", methods=["PUT"], endpoint="update_instructor")
    @admin_required
    def update_instructor(instructor_id: str):
        facade.update_instructor(instructor_from_fields(instructor_id, json_payload()))
        return "", 204

    @app.route("/instructors/<instructor_id>", methods=["DELETE"], endpoint="delete_instructor")
    @admin_required
    def delete_instructor(instructor_id: str):
        facade.delete_instructor(instructor_id)
        return "", 204
