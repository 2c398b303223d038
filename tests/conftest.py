from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from inkwell.assets import get_posts_store, get_public_store
from inkwell.main import app
from inkwell.routers.pages import get_now
from inkwell.services.asset_store import AssetStore


HELLO_WORLD = b"""# Hello world

First post.

```python
def greet():
    return "hi"
```
"""


@pytest.fixture
def posts_store():
    return AssetStore({"2021-05-01_hello-world.md": HELLO_WORLD})


@pytest.fixture
def public_store():
    return AssetStore(
        {
            "styles.css": b"body { color: black; }",
            "img/logo.png": b"\x89PNG\r\n",
            "noext": b"mystery",
        }
    )


@pytest.fixture
def client(posts_store, public_store):
    app.dependency_overrides[get_posts_store] = lambda: posts_store
    app.dependency_overrides[get_public_store] = lambda: public_store
    app.dependency_overrides[get_now] = lambda: datetime(2021, 6, 15, 12, 0)
    yield TestClient(app)
    app.dependency_overrides.clear()
