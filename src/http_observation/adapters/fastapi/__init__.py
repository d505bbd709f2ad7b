"""FastAPI adapter – observation middleware."""
from http_observation.adapters.fastapi.middleware import FastAPIObservationMiddleware

__all__ = ["FastAPIObservationMiddleware"]
