import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest

# keep test runs from writing per-logger files
os.environ.setdefault("JSENDJAR_LOG_DIR", "")
os.environ.setdefault("JSENDJAR_LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient

from jsendjar.envelope import ResponseEnvelope


@dataclass
class Profile:
    bio: str
    avatar: Optional[str] = None


@dataclass
class Author:
    name: str
    profile: Optional[Profile] = None


@dataclass
class Comment:
    text: str


@dataclass
class Post:
    id: int
    title: str
    body: str
    author: Optional[Author] = None
    comments: List[Comment] = field(default_factory=list)


class Record:
    """Hand-written ``Projectable`` with its own type name and a 'tags' collection."""

    def __init__(self, kind: str, **attrs: Any):
        self.kind = kind
        self.attrs = attrs

    def type_name(self) -> str:
        return self.kind

    def attribute_map(self) -> Dict[str, Any]:
        return {k: v for k, v in self.attrs.items() if k != "tags"}

    def has_property(self, name: str) -> bool:
        return name in self.attrs

    def read_property(self, name: str) -> Any:
        return self.attrs[name]

    def is_collection(self, name: str) -> bool:
        return name == "tags"


@pytest.fixture
def post() -> Post:
    """The canonical scenario object: Post{id:1, title:"A", body:"B", author:{name:"Wil"}}."""
    return Post(id=1, title="A", body="B", author=Author(name="Wil", profile=Profile(bio="dev")))


@pytest.fixture
def posts() -> List[Post]:
    return [
        Post(id=1, title="A", body="B", author=Author(name="Wil")),
        Post(id=2, title="C", body="D", author=None),
        Post(id=3, title="E", body="F", author=Author(name="Ann"), comments=[Comment("hi")]),
    ]


@pytest.fixture
def envelope() -> ResponseEnvelope:
    return ResponseEnvelope()


@pytest.fixture
def client() -> TestClient:
    from jsendjar.main import app

    return TestClient(app)
