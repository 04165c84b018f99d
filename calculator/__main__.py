"""Run the development server: ``python -m calculator``."""

from calculator.app import create_app
from calculator.config import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
