"""Tests for Post/PageResult models — pure validation, no mocks needed."""

from conftest import make_node

from blogfront.models.post import PageResult, Post


def test_post_flattens_graphql_node():
    post = Post.model_validate(make_node(3))

    assert post.id == "cG9zdDo3"
    assert post.database_id == 3
    assert post.slug == "post-3"
    assert post.featured_image_url == "https://cms.test/img/3.jpg"
    assert post.categories == ["News"]
    assert post.author.name == "Jane Writer"
    assert post.content is None


def test_post_accepts_flat_data_roundtrip():
    post = Post.model_validate(make_node(1))
    again = Post.model_validate(post.model_dump(mode="json"))
    assert again == post


def test_post_tolerates_missing_featured_image():
    post = Post.model_validate(make_node(2, featuredImage=None, author=None))
    assert post.featured_image_url is None
    assert post.author is None


def test_page_result_serializes_with_wire_aliases():
    page = PageResult(items=[], end_cursor="abc", has_next_page=True)
    data = page.model_dump(by_alias=True)
    assert data == {"items": [], "endCursor": "abc", "hasNextPage": True}


def test_page_result_parses_wire_shape():
    page = PageResult.model_validate(
        {"items": [make_node(1)], "endCursor": None, "hasNextPage": False}
    )
    assert page.items[0].slug == "post-1"
    assert page.end_cursor is None
    assert page.has_next_page is False
