from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import json_payload, role_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .service import class_from_fields


def register(app: Flask, container: Container) -> None:
    facade = container.facade
    login_required = role_required(container)
    admin_required = role_required(container, Role.ADMIN)

    def _today_arg():
        value = request.args.get("date")
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"Data inválida: {value!r}")

    @app.route("/classes", methods=["GET"], endpoint="list_classes")
    @login_required
    def list_classes():
        day = request.args.get("day")
        classes = facade.classes_for_day(day) if day else facade.classes
        return jsonify([c.to_dict() for c in classes])

    @app.route("/classes/today", methods=["GET"], endpoint="todays_classes")
    @login_required
    def todays_classes():
        return jsonify([c.to_dict() for c in facade.todays_classes(_today_arg())])

    @app.route("/classes", methods=["POST"], endpoint="add_class")
    @admin_required
    def add_class():
        schedule = facade.add_class(json_payload())
        return jsonify(schedule.to_dict()), 201

    @app.route("/classes/<class_id>", methods=["GET"], endpoint="get_class")
    @login_required
    def get_class(class_id: str):
        schedule = facade.get_class(class_id)
        if not schedule:
            return jsonify({"error": "Turma não encontrada"}), 404
        return jsonify(schedule.to_dict())

    @app.route("/classes/<class_id>", methods=["PUT"], endpoint="update_class")
    @admin_required
    def update_class(class_id: str):
        facade.update_class(class_from_fields(class_id, json_payload()))
        return "", 204

    @app.route("/classes/<class_id>", methods=["DELETE"], endpoint="delete_class")
    @admin_required
    def delete_class(class_id: str):
        facade.delete_class(class_id)
        return "", 204

    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @admin_required
    def dashboard():
        return jsonify(facade.dashboard_summary(_today_arg()).to_dict())
