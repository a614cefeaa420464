"""
Page model: the loading lifecycle of a view bound to one query key.
"""
from __future__ import annotations

import enum
import logging

from .demo import demo_for
from .query import ApiError, QueryClient

logger = logging.getLogger(__name__)


class PageState(enum.Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    SUCCESS = 'success'
    ERROR = 'error'


def _is_empty(data) -> bool:
    return data is None or (isinstance(data, (list, dict)) and len(data) == 0)


class ResourcePage:
    """Loads ``key`` through the shared client and tracks its state.

    When the load succeeds with no rows, the demo payload registered for
    the key is shown instead and ``is_demo`` is set.  ``empty_on_404``
    treats a 404 (e.g. no latest health reading yet) as an empty result.
    """

    def __init__(self, client: QueryClient, key: str, *, use_demo: bool = True, empty_on_404: bool = False):
        self.client = client
        self.key = key
        self.use_demo = use_demo
        self.empty_on_404 = empty_on_404
        self.state = PageState.IDLE
        self.data = None
        self.error: ApiError | None = None
        self.is_demo = False

    def load(self, force: bool = False) -> PageState:
        self.state = PageState.LOADING
        self.error = None
        try:
            data = self.client.fetch(self.key, force=force)
        except ApiError as exc:
            if not (self.empty_on_404 and exc.status == 404):
                logger.debug('loading %s failed: %s', self.key, exc)
                self.state = PageState.ERROR
                self.error = exc
                self.data = None
                self.is_demo = False
                return self.state
            data = None

        self.is_demo = False
        if _is_empty(data) and self.use_demo:
            demo = demo_for(self.key)
            if demo is not None:
                data = demo
                self.is_demo = True
        self.data = data
        self.state = PageState.SUCCESS
        return self.state

    def reload(self) -> PageState:
        return self.load(force=True)

    @property
    def is_loading(self) -> bool:
        return self.state is PageState.LOADING
