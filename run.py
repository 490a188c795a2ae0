# run.py
from dotenv import load_dotenv
import os

basedir = os.path.abspath(os.path.dirname(__file__))
# Load the .env sitting next to this file before the app reads its settings.
load_dotenv(dotenv_path=os.path.join(basedir, '.env'))

from threaded_comments import create_app

app = create_app()

if __name__ == '__main__':
    host = os.getenv('FLASK_RUN_HOST', '127.0.0.1')
    port = int(os.getenv('FLASK_RUN_PORT', 5001))
    debug = app.config.get('DEBUG', False)
    print(f"Server running on port {port}")
    print(f"Health check: http://localhost:{port}/health")
    app.run(host=host, port=port, debug=debug)
