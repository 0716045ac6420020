"""ORM models; importing this package registers every table on ``Base.metadata``."""
from .user import User
from .publication import PublicationModel
from .social import Follower, FriendRequest
from .group import GroupMembership, ResearchGroup
from .project import Project, ProjectCollaborator
from .comment import Comment, Reaction

__all__ = [
    "User",
    "PublicationModel",
    "Follower",
    "FriendRequest",
    "ResearchGroup",
    "GroupMembership",
    "Project",
    "ProjectCollaborator",
    "Comment",
    "Reaction",
]
