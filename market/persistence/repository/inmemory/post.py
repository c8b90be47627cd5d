"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from market.domain.model.post import Post
from market.domain.repository.post import PostRepository
from market.domain.value import ModerationStatus, PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_created_since(
        self,
        since: datetime,
        moderation_status: Optional[ModerationStatus] = ModerationStatus.APPROVED,
    ) -> list[Post]:
        """Find posts created at or after a point in time, newest first."""
        posts = [
            p
            for p in self._posts.values()
            if p.created_at >= since
            and (moderation_status is None or p.moderation_status == moderation_status)
        ]
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post
