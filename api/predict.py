# Serverless entry point: the platform routes /api/predict here and picks up `app`.
from prediction_relay.main import app

__all__ = ["app"]
