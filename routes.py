# routes.py
from fastapi import FastAPI
from controller.evaluation_controller import evaluation_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(evaluation_router)
