import copy
import pickle

import pytest

from todo.domain import errors as e

# (constructor, predicate, expected message)
KINDS = [
    (
        lambda: e.UsernameExists(user_id=1, username="alice"),
        e.is_username_exists,
        "a user with this username does already exist [user id: 1, username: alice]",
    ),
    (
        lambda: e.UserEmailExists(user_id=2, email="a@x.com"),
        e.is_user_email_exists,
        "a user with this email does already exist [user id: 2, email: a@x.com]",
    ),
    (
        lambda: e.NoUsername(user_id=3),
        e.is_no_username,
        "you need to specify a username [user id: 3]",
    ),
    (
        e.NoUsernamePassword,
        e.is_no_username_password,
        "you need to specify a username and a password",
    ),
    (
        lambda: e.UserDoesNotExist(user_id=42),
        e.is_user_does_not_exist,
        "this user does not exist [user id: 42]",
    ),
    (e.CouldNotGetUserID, e.is_could_not_get_user_id, "could not get user ID"),
    (e.CannotDeleteLastUser, e.is_cannot_delete_last_user, "cannot delete last user"),
    (e.IDCannotBeZero, e.is_id_cannot_be_zero, "ID cannot be 0"),
    (
        lambda: e.ListDoesNotExist(list_id=5),
        e.is_list_does_not_exist,
        "List does not exist [ID: 5]",
    ),
    (
        lambda: e.NeedToBeListOwner(list_id=7, user_id=3),
        e.is_need_to_be_list_owner,
        "You need to be list owner to do that [ListID: 7, UserID: 3]",
    ),
    (
        e.ListItemCannotBeEmpty,
        e.is_list_item_cannot_be_empty,
        "List item text cannot be empty.",
    ),
    (
        lambda: e.ListItemDoesNotExist(item_id=9),
        e.is_list_item_does_not_exist,
        "List item does not exist. [ID: 9]",
    ),
    (
        lambda: e.NeedToBeItemOwner(item_id=9, user_id=3),
        e.is_need_to_be_item_owner,
        "You need to be item owner to do that [ItemID: 9, UserID: 3]",
    ),
    (
        lambda: e.NamespaceDoesNotExist(namespace_id=11),
        e.is_namespace_does_not_exist,
        "Namespace does not exist [ID: 11]",
    ),
    (
        lambda: e.NeedToBeNamespaceOwner(namespace_id=11, user_id=3),
        e.is_need_to_be_namespace_owner,
        "You need to be namespace owner to do that [NamespaceID: 11, UserID: 3]",
    ),
]

PREDICATES = [predicate for _, predicate, _ in KINDS]


@pytest.mark.parametrize("make, predicate, message", KINDS)
def test_message_and_str(make, predicate, message):
    err = make()
    assert err.message == message
    assert str(err) == message


@pytest.mark.parametrize("make, predicate, message", KINDS)
def test_only_own_predicate_matches(make, predicate, message):
    err = make()
    matches = [p for p in PREDICATES if p(err)]
    assert matches == [predicate]


@pytest.mark.parametrize("predicate", PREDICATES)
@pytest.mark.parametrize(
    "value", [None, ValueError("boom"), "UsernameExists", 0, e.DomainError()]
)
def test_predicates_never_raise_on_foreign_values(predicate, value):
    assert predicate(value) is False


def test_list_owner_scenario():
    err = e.NeedToBeListOwner(list_id=7, user_id=3)
    assert str(err) == "You need to be list owner to do that [ListID: 7, UserID: 3]"
    assert e.is_need_to_be_list_owner(err)
    assert not e.is_need_to_be_item_owner(err)
    assert not e.is_need_to_be_namespace_owner(err)


def test_same_fields_render_same_text():
    a = e.UsernameExists(user_id=1, username="bob")
    b = e.UsernameExists(user_id=1, username="bob")
    assert a.message == b.message


def test_errors_are_raisable_domain_errors():
    with pytest.raises(e.DomainError) as info:
        raise e.ListItemDoesNotExist(item_id=4)
    assert e.is_list_item_does_not_exist(info.value)


def test_codes_are_unique():
    codes = [make().code for make, _, _ in KINDS]
    assert len(set(codes)) == len(codes)


def test_payload():
    err = e.UserDoesNotExist(user_id=42)
    assert err.to_payload() == {
        "code": 1005,
        "message": "this user does not exist [user id: 42]",
    }
    assert err.http_status == 404


@pytest.mark.parametrize("make, predicate, message", KINDS)
def test_copy_and_pickle_keep_fields(make, predicate, message):
    err = make()
    assert err.args == (message,)

    for clone in (copy.copy(err), copy.deepcopy(err), pickle.loads(pickle.dumps(err))):
        assert type(clone) is type(err)
        assert clone.message == message
        assert predicate(clone)
