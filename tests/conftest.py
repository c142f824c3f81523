"""Pytest fixtures for Collection Distiller tests."""

import json

import pytest


@pytest.fixture
def sample_post():
    """Sample blog post entry as exported by the CMS."""
    return {
        "uid": "p1",
        "title": "Hello World",
        "url": "/hello world",
        "date": "2024-01-05",
        "full_description": "<p>Hi <b>there</b></p>",
        "category": ["c1"],
        "author": ["a1"],
    }


@pytest.fixture
def sample_categories():
    """Categories feed keyed by entry uid."""
    return {
        "c1": {"uid": "c1", "title": "News"},
        "c2": {"uid": "c2", "title": "Events"},
    }


@pytest.fixture
def sample_authors():
    """Authors feed keyed by entry uid."""
    return {
        "a1": {"uid": "a1", "title": "Jane", "bio": "Writes about things."},
    }


@pytest.fixture
def sample_assets():
    """Asset catalog keyed by asset uid."""
    return {
        "img1": {"uid": "img1", "filename": "cover.jpg"},
    }


@pytest.fixture
def sample_press_release():
    """Sample press release entry."""
    return {
        "uid": "r1",
        "title": "Press One",
        "url": "/press/one",
        "date": "2024-02-01",
        "body": "<p>Body</p>",
    }


@pytest.fixture
def sample_blog_home():
    """Sample blog home singleton entry."""
    return {
        "uid": "home",
        "url": "/blog/",
        "seo": {
            "meta_title": "Our Blog",
            "meta_description": "News and stories",
        },
        "featured_post": [],
    }


@pytest.fixture
def write_feed():
    """Write a feed document under a site source's data directory."""

    def _write(source, content_type, data, data_dir="_data"):
        if content_type == "assets":
            path = source / data_dir / "assets" / "assets.json"
        else:
            path = source / data_dir / "entries" / content_type / "en-us.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2))
        return path

    return _write


@pytest.fixture
def site_source(
    tmp_path,
    write_feed,
    sample_post,
    sample_categories,
    sample_authors,
    sample_assets,
    sample_press_release,
    sample_blog_home,
):
    """A site source directory with every feed populated."""
    source = tmp_path / "site"
    source.mkdir()

    second_post = {
        "uid": "p2",
        "title": "Later Post",
        "url": "/later",
        "date": "2024-03-10T09:30:00Z",
        "full_description": "<p>Second post</p>",
        "category": ["c2", "c1"],
        "author": ["a1"],
        "featured_image": "img1",
        "excerpt": "A hand-written excerpt",
    }

    write_feed(source, "posts", {"p1": sample_post, "p2": second_post})
    write_feed(source, "categories", sample_categories)
    write_feed(source, "authors", sample_authors)
    write_feed(source, "assets", sample_assets)
    write_feed(source, "press_releases", [sample_press_release])
    write_feed(source, "blog_home", [sample_blog_home])
    return source
