import logging
import os
import sys

# Ensure consistent import paths by setting working directory
project_root = os.path.dirname(os.path.abspath(__file__))
if project_root not in sys.path:
    sys.path.insert(0, project_root)
os.chdir(project_root)

from UI.app import app, server

logging.basicConfig(
    level=server.config.get('LOG_LEVEL', 'INFO'),
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)

# Register callbacks with Dash
from UI.callback import card_callbacks
from UI.callback import chart_callbacks
from UI.callback import user_callbacks

# Entry table master controller
from UI.controller import entry_table_controller

if __name__ == '__main__':
    port = server.config['PORT']
    debug = os.getenv('FLASK_ENV') != 'production'
    # The entries table calls back into this server over HTTP, so requests
    # must be served concurrently
    app.run(debug=debug, port=port, threaded=True, use_reloader=False)
