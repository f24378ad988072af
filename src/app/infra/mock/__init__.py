"""Backend simulado (mock responder) para o modo CIP_USE_MOCK=true."""

from app.infra.mock.datasets import COLLECTIONS, MockDatasetError, load_dataset
from app.infra.mock.responder import AGENT_RESPONSES, InMemoryMockResponder
from app.infra.mock.routes import ROUTES, Route, match_path, resolve_route

__all__ = [
    "AGENT_RESPONSES",
    "COLLECTIONS",
    "ROUTES",
    "InMemoryMockResponder",
    "MockDatasetError",
    "Route",
    "load_dataset",
    "match_path",
    "resolve_route",
]
