"""ASGI entry point: ``uvicorn inkwell.main:app``.

Serves the HTTP API only. ``inkwell-server`` runs HTTP and gRPC together over
one shared set of services.
"""

from inkwell.core.application import create_application
from inkwell.core.initialization import initialize_application

initialize_application()

app = create_application()
