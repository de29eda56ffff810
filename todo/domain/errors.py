from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(eq=False)
class DomainError(Exception):
    """Base class for all domain-level errors.

    Subclasses carry the identifiers of the thing that failed and render them
    into ``message``. ``code`` and ``http_status`` are read by the HTTP layer.
    """

    code = 0
    http_status = 500

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __reduce__(self):
        # rebuild from the fields so copy and pickle keep them
        return (type(self), tuple(getattr(self, f.name) for f in fields(self)))

    @property
    def message(self) -> str:
        return "domain error"

    def to_payload(self) -> dict:
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return self.message


# =====================
# User operation errors
# =====================


@dataclass(eq=False)
class UsernameExists(DomainError):
    """A user with this username already exists."""

    user_id: int
    username: str

    code = 1001
    http_status = 400

    @property
    def message(self) -> str:
        return (
            "a user with this username does already exist "
            f"[user id: {self.user_id}, username: {self.username}]"
        )


@dataclass(eq=False)
class UserEmailExists(DomainError):
    """A user with this email already exists."""

    user_id: int
    email: str

    code = 1002
    http_status = 400

    @property
    def message(self) -> str:
        return (
            "a user with this email does already exist "
            f"[user id: {self.user_id}, email: {self.email}]"
        )


@dataclass(eq=False)
class NoUsername(DomainError):
    """A user was saved without a username."""

    user_id: int

    code = 1003
    http_status = 400

    @property
    def message(self) -> str:
        return f"you need to specify a username [user id: {self.user_id}]"


@dataclass(eq=False)
class NoUsernamePassword(DomainError):
    code = 1004
    http_status = 412

    @property
    def message(self) -> str:
        return "you need to specify a username and a password"


@dataclass(eq=False)
class UserDoesNotExist(DomainError):
    """No user matches the given id."""

    user_id: int

    code = 1005
    http_status = 404

    @property
    def message(self) -> str:
        return f"this user does not exist [user id: {self.user_id}]"


@dataclass(eq=False)
class CouldNotGetUserID(DomainError):
    code = 1006
    http_status = 400

    @property
    def message(self) -> str:
        return "could not get user ID"


@dataclass(eq=False)
class CannotDeleteLastUser(DomainError):
    code = 1007
    http_status = 412

    @property
    def message(self) -> str:
        return "cannot delete last user"


# ===================
# Empty things errors
# ===================


@dataclass(eq=False)
class IDCannotBeZero(DomainError):
    """An id (of anything) is 0 where a real id is required."""

    code = 2001
    http_status = 400

    @property
    def message(self) -> str:
        return "ID cannot be 0"


# ===========
# List errors
# ===========


@dataclass(eq=False)
class ListDoesNotExist(DomainError):
    list_id: int

    code = 3001
    http_status = 404

    @property
    def message(self) -> str:
        return f"List does not exist [ID: {self.list_id}]"


@dataclass(eq=False)
class NeedToBeListOwner(DomainError):
    """The user is not the owner of the list (e.g. when deleting it)."""

    list_id: int
    user_id: int

    code = 3002
    http_status = 403

    @property
    def message(self) -> str:
        return (
            "You need to be list owner to do that "
            f"[ListID: {self.list_id}, UserID: {self.user_id}]"
        )


# ================
# List item errors
# ================


@dataclass(eq=False)
class ListItemCannotBeEmpty(DomainError):
    """A list item was saved without text."""

    code = 4001
    http_status = 400

    @property
    def message(self) -> str:
        return "List item text cannot be empty."


@dataclass(eq=False)
class ListItemDoesNotExist(DomainError):
    item_id: int

    code = 4002
    http_status = 404

    @property
    def message(self) -> str:
        return f"List item does not exist. [ID: {self.item_id}]"


@dataclass(eq=False)
class NeedToBeItemOwner(DomainError):
    """The user is not the owner of the list item."""

    item_id: int
    user_id: int

    code = 4003
    http_status = 403

    @property
    def message(self) -> str:
        return (
            "You need to be item owner to do that "
            f"[ItemID: {self.item_id}, UserID: {self.user_id}]"
        )


# ================
# Namespace errors
# ================


@dataclass(eq=False)
class NamespaceDoesNotExist(DomainError):
    namespace_id: int

    code = 5001
    http_status = 404

    @property
    def message(self) -> str:
        return f"Namespace does not exist [ID: {self.namespace_id}]"


@dataclass(eq=False)
class NeedToBeNamespaceOwner(DomainError):
    """The user is not the owner of the namespace."""

    namespace_id: int
    user_id: int

    code = 5002
    http_status = 403

    @property
    def message(self) -> str:
        return (
            "You need to be namespace owner to do that "
            f"[NamespaceID: {self.namespace_id}, UserID: {self.user_id}]"
        )


# Classification helpers. Each accepts any object and never raises.


def is_username_exists(err: object) -> bool:
    return isinstance(err, UsernameExists)


def is_user_email_exists(err: object) -> bool:
    return isinstance(err, UserEmailExists)


def is_no_username(err: object) -> bool:
    return isinstance(err, NoUsername)


def is_no_username_password(err: object) -> bool:
    return isinstance(err, NoUsernamePassword)


def is_user_does_not_exist(err: object) -> bool:
    return isinstance(err, UserDoesNotExist)


def is_could_not_get_user_id(err: object) -> bool:
    return isinstance(err, CouldNotGetUserID)


def is_cannot_delete_last_user(err: object) -> bool:
    return isinstance(err, CannotDeleteLastUser)


def is_id_cannot_be_zero(err: object) -> bool:
    return isinstance(err, IDCannotBeZero)


def is_list_does_not_exist(err: object) -> bool:
    return isinstance(err, ListDoesNotExist)


def is_need_to_be_list_owner(err: object) -> bool:
    return isinstance(err, NeedToBeListOwner)


def is_list_item_cannot_be_empty(err: object) -> bool:
    return isinstance(err, ListItemCannotBeEmpty)


def is_list_item_does_not_exist(err: object) -> bool:
    return isinstance(err, ListItemDoesNotExist)


def is_need_to_be_item_owner(err: object) -> bool:
    return isinstance(err, NeedToBeItemOwner)


def is_namespace_does_not_exist(err: object) -> bool:
    return isinstance(err, NamespaceDoesNotExist)


def is_need_to_be_namespace_owner(err: object) -> bool:
    return isinstance(err, NeedToBeNamespaceOwner)
