"""Tests for post reference resolution."""

import logging

import pytest

from collection_distiller.transformers.resolver import ReferenceResolver
from schemas.entries import Post


@pytest.fixture
def resolver(sample_categories, sample_authors, sample_assets):
    return ReferenceResolver(
        categories=sample_categories,
        authors=sample_authors,
        assets=sample_assets,
    )


class TestResolveCategories:
    """Tests for category resolution."""

    def test_replaces_uids_with_titles(self, resolver, sample_post):
        """Category uids become titles, in order."""
        post = Post.model_validate({**sample_post, "category": ["c2", "c1"]})

        resolved = resolver.resolve_categories(post)

        assert resolved.category == ["Events", "News"]

    def test_does_not_mutate_input(self, resolver, sample_post):
        """Returns a new post and leaves the input alone."""
        post = Post.model_validate(sample_post)

        resolver.resolve_categories(post)

        assert post.category == ["c1"]

    def test_unknown_uid_left_in_place(self, resolver, sample_post, caplog):
        """Unknown uids stay and are reported."""
        post = Post.model_validate({**sample_post, "category": ["c1", "missing"]})

        with caplog.at_level(logging.WARNING):
            resolved = resolver.resolve_categories(post)

        assert resolved.category == ["News", "missing"]
        assert resolver.unresolved == ["category missing in post p1"]
        assert "Unresolved category missing in post p1" in caplog.text

    def test_category_without_title_unresolved(self, sample_post):
        """A matching category record without a title does not resolve."""
        resolver = ReferenceResolver(categories={"c1": {"uid": "c1", "name": "News"}})
        post = Post.model_validate(sample_post)

        resolved = resolver.resolve_categories(post)

        assert resolved.category == ["c1"]
        assert resolver.unresolved == ["category c1 in post p1"]

    def test_non_string_value_unresolved(self, resolver, sample_post):
        """Values that are not uid strings stay and are reported."""
        post = Post.model_validate({**sample_post, "category": ["c1", 5]})

        resolved = resolver.resolve_categories(post)

        assert resolved.category == ["News", 5]
        assert resolver.unresolved == ["category 5 in post p1"]

    def test_ignore_policy_is_silent(self, sample_categories, sample_post, caplog):
        """The ignore policy neither logs nor records."""
        resolver = ReferenceResolver(categories=sample_categories, policy="ignore")
        post = Post.model_validate({**sample_post, "category": ["missing"]})

        resolved = resolver.resolve_categories(post)

        assert resolved.category == ["missing"]
        assert resolver.unresolved == []
        assert "Unresolved" not in caplog.text

    def test_absent_feed_leaves_categories(self, sample_post):
        """Without a categories feed nothing is resolved or reported."""
        resolver = ReferenceResolver()
        post = Post.model_validate(sample_post)

        assert resolver.resolve_categories(post) is post
        assert resolver.unresolved == []


class TestResolveAuthor:
    """Tests for author resolution."""

    def test_first_author_becomes_title(self, resolver, sample_post, sample_authors):
        """The author list collapses to the first author's title."""
        post = Post.model_validate({**sample_post, "author": ["a1", "a2"]})

        resolved = resolver.resolve_author(post)

        assert resolved.author == "Jane"
        assert resolved.author_data == sample_authors["a1"]

    def test_author_data_dumped_by_alias(self, resolver, sample_post):
        """The author record is serialized as authorData."""
        resolved = resolver.resolve_author(Post.model_validate(sample_post))

        data = resolved.model_dump(by_alias=True, exclude_unset=True)

        assert data["authorData"]["title"] == "Jane"

    def test_unknown_author_left_as_list(self, resolver, sample_post):
        """An unknown first author leaves the uid list."""
        post = Post.model_validate({**sample_post, "author": ["nobody"]})

        resolved = resolver.resolve_author(post)

        assert resolved.author == ["nobody"]
        assert resolved.author_data is None
        assert resolver.unresolved == ["author nobody in post p1"]

    def test_author_without_title_unresolved(self, sample_post, caplog):
        """A matching author record without a title does not resolve."""
        resolver = ReferenceResolver(authors={"a1": {"uid": "a1", "name": "Jane"}})
        post = Post.model_validate(sample_post)

        with caplog.at_level(logging.WARNING):
            resolved = resolver.resolve_author(post)

        assert resolved.author == ["a1"]
        assert resolved.author_data is None
        assert resolver.unresolved == ["author a1 in post p1"]
        assert "Unresolved author a1 in post p1" in caplog.text

    def test_non_string_author_unresolved(self, resolver, sample_post):
        """A first author that is not a uid string is left and reported."""
        post = Post.model_validate({**sample_post, "author": [7]})

        resolved = resolver.resolve_author(post)

        assert resolved.author == [7]
        assert resolver.unresolved == ["author 7 in post p1"]

    def test_empty_author_list_skipped(self, resolver, sample_post):
        """Posts without authors are returned as they are."""
        post = Post.model_validate({**sample_post, "author": []})

        assert resolver.resolve_author(post) is post


class TestResolveFeaturedImage:
    """Tests for featured image resolution."""

    def test_uid_string(self, resolver, sample_post):
        """A uid becomes the local asset path."""
        post = Post.model_validate({**sample_post, "featured_image": "img1"})

        resolved = resolver.resolve_featured_image(post)

        assert resolved.featured_image == "assets/images/img1/cover.jpg"

    def test_file_reference_mapping(self, resolver, sample_post):
        """A file reference with a uid key becomes the local asset path."""
        post = Post.model_validate({**sample_post, "featured_image": {"uid": "img1"}})

        resolved = resolver.resolve_featured_image(post)

        assert resolved.featured_image == "assets/images/img1/cover.jpg"

    def test_asset_filename_reference(self, sample_post):
        """An asset whose filename is a file reference uses its uid key."""
        resolver = ReferenceResolver(
            assets={"img1": {"uid": "img1", "filename": {"uid": "cover.jpg"}}}
        )
        post = Post.model_validate({**sample_post, "featured_image": "img1"})

        resolved = resolver.resolve_featured_image(post)

        assert resolved.featured_image == "assets/images/img1/cover.jpg"
        assert resolver.unresolved == []

    @pytest.mark.parametrize(
        "filename",
        [{"url": "cover.jpg"}, {"uid": 3}, "", 12, None],
    )
    def test_unusable_asset_filename_unresolved(self, sample_post, filename):
        """Assets without a usable filename leave the reference and report it."""
        resolver = ReferenceResolver(assets={"img1": {"uid": "img1", "filename": filename}})
        post = Post.model_validate({**sample_post, "featured_image": "img1"})

        resolved = resolver.resolve_featured_image(post)

        assert resolved.featured_image == "img1"
        assert resolver.unresolved == ["featured image img1 in post p1"]

    @pytest.mark.parametrize("marker", [None, "", "null"])
    def test_null_markers_skipped(self, resolver, sample_post, marker):
        """Null markers are not looked up."""
        post = Post.model_validate({**sample_post, "featured_image": marker})

        assert resolver.resolve_featured_image(post) is post
        assert resolver.unresolved == []

    def test_unknown_asset_unchanged(self, resolver, sample_post):
        """An unknown asset leaves the reference structure unchanged."""
        post = Post.model_validate({**sample_post, "featured_image": {"uid": "gone", "url": "x"}})

        resolved = resolver.resolve_featured_image(post)

        assert resolved.featured_image == {"uid": "gone", "url": "x"}
        assert resolver.unresolved == ["featured image gone in post p1"]


class TestResolve:
    """Tests for full post resolution."""

    def test_resolves_everything(self, resolver, sample_post):
        """Resolves categories, author and featured image together."""
        post = Post.model_validate({**sample_post, "featured_image": "img1"})

        resolved = resolver.resolve(post)

        assert resolved.category == ["News"]
        assert resolved.author == "Jane"
        assert resolved.featured_image == "assets/images/img1/cover.jpg"

    def test_resolution_is_idempotent(self, resolver, sample_post):
        """Resolving an already-resolved post leaves it unchanged."""
        post = Post.model_validate({**sample_post, "featured_image": "img1"})
        once = resolver.resolve(post)

        twice = resolver.resolve(once)

        assert twice.model_dump() == once.model_dump()

    def test_unknown_policy_rejected(self):
        """Only warn and ignore are accepted."""
        with pytest.raises(ValueError, match="Unknown unresolved reference policy"):
            ReferenceResolver(policy="drop")
