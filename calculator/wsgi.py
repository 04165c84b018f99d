#setup: pip install -e ".[test]"
#setup: flask --app calculator.wsgi run --port 5000 --debug

from calculator.app import create_app

app = create_app()
