"""HTTP API for the interaction checker."""
from interaction_checker.api.app import CheckRequest, create_app

__all__ = ["CheckRequest", "create_app"]
