"""Unit tests for comment tree assembly."""

import pytest

from vibeforum.domain.model.comment import Comment, CommentNode
from vibeforum.domain.service import (
    build_comment_tree,
    count_comment_nodes,
    prune_comment_tree,
)
from vibeforum.domain.value import CommentId, PostId
from tests.conftest import make_comment


def _ids(nodes: list[CommentNode]) -> list[str]:
    return [node.id for node in nodes]


def _walk(nodes: list[CommentNode]) -> list[str]:
    """Depth-first list of every id in the tree."""
    result = []
    for node in nodes:
        result.append(node.id)
        result.extend(_walk(node.replies))
    return result


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input_returns_no_roots(self):
        """No comments should give an empty forest."""
        assert build_comment_tree([]) == []

    def test_thread_with_replies_and_orphan(self):
        """c1 <- c2 <- c4 nest under one root, c3 stays top-level."""
        comments = [
            make_comment("c1", minute=0),
            make_comment("c2", parent_id="c1", minute=1),
            make_comment("c3", minute=2),
            make_comment("c4", parent_id="c2", minute=3),
        ]

        roots = build_comment_tree(comments)

        assert _ids(roots) == ["c1", "c3"]
        assert _ids(roots[0].replies) == ["c2"]
        assert _ids(roots[0].replies[0].replies) == ["c4"]
        assert roots[0].replies[0].replies[0].replies == []
        assert roots[1].replies == []

    def test_every_comment_appears_exactly_once(self):
        """Totality: the tree holds each input id once."""
        comments = [
            make_comment("a", minute=0),
            make_comment("b", parent_id="a", minute=1),
            make_comment("c", parent_id="missing", minute=2),
            make_comment("d", parent_id="b", minute=3),
            make_comment("e", parent_id="a", minute=4),
            make_comment("f", minute=5),
        ]

        roots = build_comment_tree(comments)

        walked = _walk(roots)
        assert sorted(walked) == sorted(c.id for c in comments)
        assert len(walked) == len(set(walked))
        assert count_comment_nodes(roots) == len(comments)

    def test_siblings_keep_input_order(self):
        """Replies stay in the order they were given, never re-sorted."""
        # Deliberately out of chronological order
        comments = [
            make_comment("root", minute=0),
            make_comment("late", parent_id="root", minute=9),
            make_comment("early", parent_id="root", minute=1),
            make_comment("middle", parent_id="root", minute=5),
        ]

        roots = build_comment_tree(comments)

        assert _ids(roots[0].replies) == ["late", "early", "middle"]

    def test_dangling_parent_is_promoted_to_root(self):
        """A reply whose parent is absent becomes a root instead of vanishing."""
        comments = [
            make_comment("r1", minute=0),
            make_comment("orphan", parent_id="deleted-parent", minute=1),
            make_comment("r2", minute=2),
        ]

        roots = build_comment_tree(comments)

        assert _ids(roots) == ["r1", "orphan", "r2"]
        assert roots[1].parent_id == "deleted-parent"

    def test_reply_listed_before_parent_still_nests(self):
        """All ids are indexed before parents are resolved."""
        comments = [
            make_comment("child", parent_id="parent", minute=0),
            make_comment("parent", minute=1),
        ]

        roots = build_comment_tree(comments)

        assert _ids(roots) == ["parent"]
        assert _ids(roots[0].replies) == ["child"]

    def test_self_parent_is_treated_as_root(self):
        """A comment naming itself as parent cannot nest under itself."""
        roots = build_comment_tree([make_comment("loop", parent_id="loop")])

        assert _ids(roots) == ["loop"]
        assert roots[0].replies == []

    def test_deep_chain_is_not_truncated(self):
        """Depth is unbounded at construction time."""
        comments = [make_comment("n0", minute=0)]
        for i in range(1, 50):
            comments.append(make_comment(f"n{i}", parent_id=f"n{i - 1}", minute=i))

        roots = build_comment_tree(comments)

        depth = 0
        node = roots[0]
        while node.replies:
            node = node.replies[0]
            depth += 1
        assert depth == 49

    def test_nodes_carry_comment_fields(self):
        """Nodes keep every field of the flat record."""
        comment = make_comment("c1", author_name="Guest0097", votes_count=3)

        (node,) = build_comment_tree([comment])

        assert node.author_name == "Guest0097"
        assert node.votes_count == 3
        assert node.content == "comment c1"
        assert node.post_id == "post-1"

    def test_nodes_are_fresh_per_call(self):
        """Building twice never shares reply lists between results."""
        comments = [make_comment("p", minute=0), make_comment("c", parent_id="p")]

        first = build_comment_tree(comments)
        second = build_comment_tree(comments)

        assert first[0] is not second[0]
        assert first[0].replies is not second[0].replies
        assert first == second

    def test_input_is_not_mutated(self):
        """The flat records are left as they were."""
        comments = [make_comment("p", minute=0), make_comment("c", parent_id="p")]
        before = [c.model_dump() for c in comments]

        build_comment_tree(comments)

        assert [c.model_dump() for c in comments] == before
        assert all(not isinstance(c, CommentNode) for c in comments)

    def test_duplicate_ids_last_one_wins(self):
        """Replies attach to the last comment indexed under a repeated id."""
        comments = [
            make_comment("dup", content="first", minute=0),
            make_comment("dup", content="second", minute=1),
            make_comment("reply", parent_id="dup", minute=2),
        ]

        roots = build_comment_tree(comments)

        assert [r.content for r in roots] == ["first", "second"]
        assert roots[0].replies == []
        assert _ids(roots[1].replies) == ["reply"]

    def test_comment_without_id_fails_fast(self):
        """A record without an id is a programming error."""
        broken = Comment.model_construct(
            id=CommentId(""),
            post_id=PostId("post-1"),
            parent_id=None,
            content="no id",
        )

        with pytest.raises(AssertionError):
            build_comment_tree([broken])


class TestPruneCommentTree:
    """Tests for prune_comment_tree."""

    @pytest.fixture
    def roots(self) -> list[CommentNode]:
        return build_comment_tree(
            [
                make_comment("c1", minute=0),
                make_comment("c2", parent_id="c1", minute=1),
                make_comment("c3", minute=2),
                make_comment("c4", parent_id="c2", minute=3),
            ]
        )

    def test_level_zero_keeps_roots_only(self, roots):
        pruned = prune_comment_tree(roots, 0)

        assert _ids(pruned) == ["c1", "c3"]
        assert all(node.replies == [] for node in pruned)

    def test_level_one_cuts_grandchildren(self, roots):
        pruned = prune_comment_tree(roots, 1)

        assert _ids(pruned[0].replies) == ["c2"]
        assert pruned[0].replies[0].replies == []

    def test_deep_level_keeps_everything(self, roots):
        pruned = prune_comment_tree(roots, 5)

        assert pruned == roots

    def test_original_tree_is_untouched(self, roots):
        prune_comment_tree(roots, 0)

        assert _ids(roots[0].replies) == ["c2"]
        assert count_comment_nodes(roots) == 4

    def test_negative_level_keeps_nothing(self, roots):
        assert prune_comment_tree(roots, -1) == []


def test_count_comment_nodes_counts_nested_replies():
    """Every node at every depth is counted."""
    roots = build_comment_tree(
        [
            make_comment("a", minute=0),
            make_comment("b", parent_id="a", minute=1),
            make_comment("c", parent_id="b", minute=2),
            make_comment("d", minute=3),
        ]
    )

    assert count_comment_nodes(roots) == 4
    assert count_comment_nodes([]) == 0
