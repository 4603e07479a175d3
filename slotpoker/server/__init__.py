"""
SlotPoker Server - FastAPI Evaluation Service
"""

from slotpoker.server.app import app, create_app

__all__ = ["app", "create_app"]
