# app/hooks.py
from typing import Protocol


class QueryHooks(Protocol):
    def query_start(self, name: str, **params): ...
    def query_end(self, name: str, *, result, wall_ms: float, **params): ...
    def error(self, name: str, *, exc: BaseException, **params): ...


class NoopHooks:
    def query_start(self, *_, **__):
        pass

    def query_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
