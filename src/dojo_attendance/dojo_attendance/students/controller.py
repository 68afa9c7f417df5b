from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_payload, role_required
from ..container import Container
from ..core.enums import Role
from .service import student_from_fields


def register(app: Flask, container: Container) -> None:
    facade = container.facade
    login_required = role_required(container)
    admin_required = role_required(container, Role.ADMIN)

    def _view(student):
        return {**student.to_dict(), "age": facade.calculate_age(student.birth_date)}

    @app.route("/students", methods=["GET"], endpoint="list_students")
    @login_required
    def list_students():
        return jsonify([_view(s) for s in facade.students])

    @app.route("/students", methods=["POST"], endpoint="add_student")
    @admin_required
    def add_student():
        student = facade.add_student(json_payload())
        return jsonify(_view(student)), 201

    @app.route("/students/<student_id>", methods=["GET"], endpoint="get_student")
    @login_required
    def get_student(student_id: str):
        student = facade.get_student(student_id)
        if not student:
            return jsonify({"error": "Aluno não encontrado"}), 404
        return jsonify(_view(student))

    @app.route("/students/<student_id>", methods=["PUT"], endpoint="update_student")
    @admin_required
    def update_student(student_id: str):
        facade.update_student(student_from_fields(student_id, json_payload()))
        return "", 204

    @app.route("/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @admin_required
    def delete_student(student_id: str):
        facade.delete_student(student_id)
        return "", 204
