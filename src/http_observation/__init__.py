"""
http_observation – canonical tags for HTTP server request observations.

Import path convention::

    from http_observation.observability.conventions import DefaultServerRequestObservationConvention
    from http_observation.observability.conventions import ExchangeContext, RequestCarrier
    from http_observation.adapters.fastapi import FastAPIObservationMiddleware
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
