"""Unit tests for CommentService."""

import pytest

from vibeforum.domain.error import NotAuthorizedError
from vibeforum.domain.repository import CommentRepository
from vibeforum.domain.service import CommentService, resolve_author
from vibeforum.domain.value import AuthorIdentity, CommentId, CommentStatus, PostId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - in-memory persistence
unit_env = create_env_fixture()

ADA = AuthorIdentity(name="Ada", email="ada@example.com", is_guest=False)
POST_ID = PostId("post-1")


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment has no parent and is saved."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        result = await comment_service.create_comment(
            post_id=POST_ID, author=ADA, content="  Hello forum  "
        )

        # Assert
        assert result.parent_id is None
        assert result.content == "Hello forum"
        assert result.author_email == "ada@example.com"
        assert result.status == CommentStatus.PUBLISHED

        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """A reply keeps its parent's ID."""
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            post_id=POST_ID, author=ADA, content="Parent"
        )

        reply = await comment_service.create_comment(
            post_id=POST_ID, author=ADA, content="Reply", parent_id=parent.id
        )

        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_guest_author_is_recorded(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        guest = resolve_author(None, None, "203.0.113.7")

        comment = await comment_service.create_comment(
            post_id=POST_ID, author=guest, content="Hi"
        )

        assert comment.author_name == "Guest8757"
        assert comment.author_email == "guest8757@guest.local"

    @pytest.mark.asyncio
    async def test_missing_parent_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValueError, match="Parent comment not found"):
            await comment_service.create_comment(
                post_id=POST_ID,
                author=ADA,
                content="Reply",
                parent_id=CommentId("nope"),
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            post_id=PostId("other-post"), author=ADA, content="Elsewhere"
        )

        with pytest.raises(ValueError, match="does not belong"):
            await comment_service.create_comment(
                post_id=POST_ID, author=ADA, content="Reply", parent_id=parent.id
            )


class TestGetCommentTree:
    """Tests for get_comment_tree method."""

    @pytest.mark.asyncio
    async def test_tree_nests_published_comments(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("c1", minute=0))
        await comment_repo.save(make_comment("c2", parent_id="c1", minute=1))
        await comment_repo.save(make_comment("c3", minute=2))
        await comment_repo.save(make_comment("c4", parent_id="c2", minute=3))

        roots = await comment_service.get_comment_tree(POST_ID)

        assert [r.id for r in roots] == ["c1", "c3"]
        assert [r.id for r in roots[0].replies] == ["c2"]
        assert [r.id for r in roots[0].replies[0].replies] == ["c4"]

    @pytest.mark.asyncio
    async def test_replies_to_hidden_comments_become_roots(self, unit_env):
        """Hidden parents aren't fetched, so their replies surface at top level."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(
            make_comment("hidden", minute=0, status=CommentStatus.HIDDEN)
        )
        await comment_repo.save(make_comment("reply", parent_id="hidden", minute=1))

        roots = await comment_service.get_comment_tree(POST_ID)

        assert [r.id for r in roots] == ["reply"]

    @pytest.mark.asyncio
    async def test_other_posts_are_excluded(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("mine", minute=0))
        await comment_repo.save(make_comment("theirs", post_id="post-2", minute=1))

        roots = await comment_service.get_comment_tree(POST_ID)

        assert [r.id for r in roots] == ["mine"]

    @pytest.mark.asyncio
    async def test_comments_are_ordered_by_creation(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("later", minute=5))
        await comment_repo.save(make_comment("earlier", minute=1))

        roots = await comment_service.get_comment_tree(POST_ID)

        assert [r.id for r in roots] == ["earlier", "later"]


class TestAuthorizeEdit:
    """Tests for authorize_edit method."""

    @pytest.mark.asyncio
    async def test_author_may_edit(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        comment_service.authorize_edit(make_comment("c1"), "ADA@example.com")

    @pytest.mark.asyncio
    async def test_other_address_is_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotAuthorizedError, match="your own comments"):
            comment_service.authorize_edit(make_comment("c1"), "eve@example.com")


class TestUpdateContent:
    """Tests for update_content method."""

    @pytest.mark.asyncio
    async def test_update_replaces_content(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            post_id=POST_ID, author=ADA, content="Before"
        )

        updated = await comment_service.update_content(comment.id, " After ")

        assert updated is not None
        assert updated.content == "After"
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_comment_returns_none(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.update_content(CommentId("nope"), "x") is None
