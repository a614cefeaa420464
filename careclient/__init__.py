"""Python client for the CareGuardian API.

``QueryClient`` is the data layer (keyed response cache with explicit
invalidation); ``pages`` and ``navigation`` model the view layer.
"""
from .query import ApiError, QueryClient, TransportError
from .pages import PageState, ResourcePage
from .navigation import Router, VoiceCommands

__all__ = ['ApiError', 'QueryClient', 'TransportError', 'PageState', 'ResourcePage', 'Router', 'VoiceCommands']
