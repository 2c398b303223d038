from inkwell.assets import get_posts_store
from inkwell.main import app
from inkwell.services.asset_store import AssetStore


def test_homepage_shows_injected_year(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "2021" in response.text


def test_blog_lists_posts(client):
    response = client.get("/blog")
    assert response.status_code == 200
    assert "2021-05-01" in response.text
    assert "hello world" in response.text
    assert "/blog/2021-05-01_hello-world" in response.text


def test_post_detail_renders_markdown(client):
    response = client.get("/blog/2021-05-01_hello-world")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'id="hello-world"' in response.text
    assert '<span class="k">def</span>' in response.text


def test_post_detail_missing(client):
    assert client.get("/blog/does-not-exist").status_code == 404


def test_static_asset_served_with_content_type(client):
    response = client.get("/static/styles.css")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")
    assert response.content == b"body { color: black; }"


def test_static_nested_asset(client):
    response = client.get("/static/img/logo.png")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"


def test_static_missing_asset(client):
    assert client.get("/static/missing.css").status_code == 404


def test_static_asset_without_extension(client):
    assert client.get("/static/noext").status_code == 400


def test_highlight_stylesheet_fallback(client):
    response = client.get("/static/highlight.css")
    assert response.status_code == 200
    assert ".highlight" in response.text


def test_malformed_post_name_only_fails_that_request(client):
    bad = AssetStore({"2021-05-01_hello-world.md": b"ok", "broken.md": b"x"})
    app.dependency_overrides[get_posts_store] = lambda: bad

    response = client.get("/blog")
    assert response.status_code == 500
    assert "Something went wrong" in response.text
    assert client.get("/").status_code == 200
    assert client.get("/blog/2021-05-01_hello-world").status_code == 200


def test_undecodable_post_yields_error_page(client):
    bad = AssetStore({"2021-05-01_latin.md": b"caf\xe9"})
    app.dependency_overrides[get_posts_store] = lambda: bad

    assert client.get("/blog/2021-05-01_latin").status_code == 500


def test_healthcheck(client):
    assert client.get("/health").json() == {"status": "ok"}
