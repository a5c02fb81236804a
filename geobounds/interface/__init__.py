"""Mini README: Interactive interfaces for geobounds.

Exports the FastAPI application factory. The command line entry point lives
in ``geobounds_cli.py`` at the repository root and reuses this factory.
"""

from .web_app import create_application

__all__ = ["create_application"]
