"""Web layer: FastAPI routes and the HTML form."""
