# tests/test_blog.py
from django.urls import reverse

from blog.models import BlogPost, EXCERPT_LENGTH
from tests.factories import BlogPostFactory, UserFactory


def _titles(response):
    return [row["title"] for row in response.json()["results"]]


class TestBlogPostModel:

    def test_short_content_is_its_own_excerpt(self):
        post = BlogPostFactory.build(content="Tiny")
        assert post.excerpt == "Tiny"

    def test_long_content_is_truncated_with_ellipsis(self):
        post = BlogPostFactory.build(content="x" * (EXCERPT_LENGTH + 1))
        assert post.excerpt == "x" * EXCERPT_LENGTH + "..."

    def test_content_of_exact_length_is_not_truncated(self):
        post = BlogPostFactory.build(content="y" * EXCERPT_LENGTH)
        assert post.excerpt.endswith("y")


class TestBlogPostApi:

    def test_list_shows_published_posts_and_own_drafts(self, api_client, user, other_user):
        BlogPostFactory(user=other_user, title="Public", is_published=True)
        BlogPostFactory(user=other_user, title="Their draft", is_published=False)
        BlogPostFactory(user=user, title="My draft", is_published=False)

        response = api_client.get(reverse("blog-post-list"))
        assert sorted(_titles(response)) == ["My draft", "Public"]

    def test_create_with_tags_and_default_author(self, api_client):
        author = UserFactory(display_name="Robin")
        api_client.force_authenticate(user=author)

        response = api_client.post(reverse("blog-post-list"), {
            "title": "Weekend in Lisbon",
            "content": "Pastel de nata everywhere.",
            "is_published": True,
            "tags": ["travel", "food"],
        }, format="json")

        assert response.status_code == 201
        assert response.data["author"] == "Robin"
        post = BlogPost.objects.get(pk=response.data["id"])
        assert post.user == author
        assert sorted(post.tags.names()) == ["food", "travel"]

    def test_explicit_author_is_kept(self, api_client):
        response = api_client.post(reverse("blog-post-list"), {
            "title": "Guest post",
            "content": "Hello",
            "author": "A Guest",
        }, format="json")
        assert response.data["author"] == "A Guest"

    def test_filter_by_tag(self, api_client, user):
        tagged = BlogPostFactory(user=user, title="Tagged")
        tagged.tags.add("travel", "summer")
        BlogPostFactory(user=user, title="Untagged")

        response = api_client.get(reverse("blog-post-list"), {"tag": "travel"})
        assert _titles(response) == ["Tagged"]

    def test_search_title_and_content(self, api_client, user):
        BlogPostFactory(user=user, title="Hiking gear", content="Boots")
        BlogPostFactory(user=user, title="Recipes", content="A hiking snack")
        BlogPostFactory(user=user, title="Unrelated", content="Nothing")

        response = api_client.get(reverse("blog-post-list"), {"search": "HIKING"})
        assert sorted(_titles(response)) == ["Hiking gear", "Recipes"]

    def test_only_owner_can_edit(self, api_client, other_user):
        post = BlogPostFactory(user=other_user, is_published=True)

        response = api_client.patch(
            reverse("blog-post-detail", args=[post.id]), {"title": "Mine now"}, format="json"
        )
        assert response.status_code == 403

    def test_owner_edit_rewrites_user(self, api_client, user):
        post = BlogPostFactory(user=user, is_published=False)

        response = api_client.patch(
            reverse("blog-post-detail", args=[post.id]), {"is_published": True}, format="json"
        )
        assert response.status_code == 200
        post.refresh_from_db()
        assert post.is_published is True
        assert post.user == user
