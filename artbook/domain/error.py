"""Domain layer errors.

Route handlers translate these into HTTP statuses:
ValidationError -> 400, NotAuthorizedError -> 403, NotFoundError -> 404,
ConflictError -> 409.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they are not allowed to touch."""

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str = "edit"):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a request conflicts with the current state of a resource."""

    pass


class DepthExceededError(ConflictError):
    """Raised when a reply would nest deeper than the allowed maximum."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum nesting depth of {max_depth} exceeded")


class CommentHasRepliesError(ConflictError):
    """Raised when deleting a comment that still has replies."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__("Cannot delete comment with replies")


class ResourceMismatchError(ConflictError):
    """Raised when a child resource does not belong to the addressed parent."""

    def __init__(self, message: str):
        super().__init__(message)


class DuplicateReportError(ConflictError):
    """Raised when a user reports the same artbook twice."""

    def __init__(self, artbook_id: str, reporter_id: str):
        self.artbook_id = artbook_id
        self.reporter_id = reporter_id
        super().__init__("You have already reported this artbook")
