"""HTTP surface for interactive question sessions."""

from .app import METRICS_REGISTRY, SessionRegistry, create_app

__all__ = ["METRICS_REGISTRY", "SessionRegistry", "create_app"]
