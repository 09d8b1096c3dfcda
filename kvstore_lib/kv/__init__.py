from .api import router, respond, failure

__all__ = ["router", "respond", "failure"]
