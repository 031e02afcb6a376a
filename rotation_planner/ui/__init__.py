"""
UI package for the Rotation Planner.

This package contains the Flask web server exposing the rotation engine.
"""
from .web_app import create_app, run_web_app

__all__ = ["create_app", "run_web_app"]
