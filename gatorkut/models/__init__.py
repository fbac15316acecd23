from .user import User
from .post import Post
from .comment import Comment
from .community import Community, CommunityMember
from .friend import FriendLink, FriendStatus

__all__ = [
    'User', 'Post', 'Comment',
    'Community', 'CommunityMember',
    'FriendLink', 'FriendStatus'
]
