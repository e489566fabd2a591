import importlib

from config import get_settings_module

from src.course_admin.course_admin.main import create_app

app = create_app()

if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(host="0.0.0.0", port=settings.PORT, debug=app.config["DEBUG"])
