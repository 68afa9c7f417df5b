from src.dojo_attendance.dojo_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    # The in-memory core serves one request at a time.
    app.run(debug=app.config["DEBUG"], threaded=False)
