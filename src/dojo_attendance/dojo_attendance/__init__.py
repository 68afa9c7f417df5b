"""Dojo Attendance package.

In-memory roster and attendance core for a martial-arts school, organized by
feature modules (users, students, schedules, attendance) with a thin Flask
controller layer over SOLID service/repository layers.
"""
