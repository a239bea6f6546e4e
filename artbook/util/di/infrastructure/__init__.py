"""Infrastructure providers."""

# Import bases
from .comment_api import CommentApiProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .comment_api import ProdCommentApiProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CommentApiProvider",
    "PersistenceProvider",
    "ProdCommentApiProvider",
    "ProdPersistenceProvider",
]
