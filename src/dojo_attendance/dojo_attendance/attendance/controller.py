from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_payload, role_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    facade = container.facade
    login_required = role_required(container)
    admin_required = role_required(container, Role.ADMIN)

    def _view(work_date: str, class_id: str):
        return {
            "date": work_date,
            "class_id": class_id,
            "present_student_ids": sorted(facade.get_attendance(work_date, class_id)),
        }

    @app.route("/attendance", methods=["GET"], endpoint="list_attendance")
    @admin_required
    def list_attendance():
        return jsonify([r.to_dict() for r in facade.attendance])

    @app.route("/attendance/<work_date>/<class_id>", methods=["GET"], endpoint="get_attendance")
    @login_required
    def get_attendance(work_date: str, class_id: str):
        return jsonify(_view(work_date, class_id))

    @app.route("/attendance/<work_date>/<class_id>", methods=["PUT"], endpoint="save_attendance")
    @login_required
    def save_attendance(work_date: str, class_id: str):
        present = json_payload().get("present_student_ids")
        if not isinstance(present, list):
            raise ValidationError("present_student_ids deve ser uma lista")
        facade.save_attendance(work_date, class_id, present)
        return jsonify(_view(work_date, class_id))
