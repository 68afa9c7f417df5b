"""Example: drive the facade directly (no Flask).

Controllers are a thin layer; everything they do goes through the facade.
"""

from config import get_settings_module

from src.dojo_attendance.dojo_attendance.container import build_container
from src.dojo_attendance.dojo_attendance.main import load_settings


def main():
    settings = load_settings(get_settings_module())
    facade = build_container(settings=settings).facade

    facade.login("INSTRUCTOR")
    print("logged in as", facade.current_user.name)

    facade.save_attendance("2024-06-03", "cls-1", {"stu-1", "stu-2"})
    print(sorted(facade.get_attendance("2024-06-03", "cls-1")))
    print(facade.dashboard_summary().to_dict())


if __name__ == "__main__":
    main()
