from __future__ import annotations

from datetime import datetime

import pytest
from bson import ObjectId

from todolists.services._shared.base import ServiceContext
from todolists.services._shared.converters import PROGRESS_PLACEHOLDER
from todolists.services._shared.errors import AuthenticationError, ValidationError
from todolists.services.task_lists import TaskListService
from todolists.services.task_lists.dto import (
    TaskListAddUserIn,
    TaskListCreateIn,
    TaskListDeleteIn,
    TaskListGetIn,
    TaskListUpdateIn,
)

from tests.factories.task_list import TaskListFactory, ToDoFactory
from tests.factories.user import UserFactory


@pytest.fixture()
def service(user_ctx) -> TaskListService:
    return TaskListService(ctx=user_ctx)


@pytest.fixture()
def anonymous(anonymous_ctx) -> TaskListService:
    return TaskListService(ctx=anonymous_ctx)


class TestCreate:
    def test_creator_is_sole_member(self, service, user):
        created = service.create(TaskListCreateIn(title="Groceries"))

        assert created.title == "Groceries"
        assert [u.id for u in created.users] == [str(user["_id"])]
        assert created.todos == ()
        assert created.progress == PROGRESS_PLACEHOLDER

    def test_created_at_is_iso_timestamp(self, service, freeze_time):
        with freeze_time("2024-03-05T10:20:30"):
            created = service.create(TaskListCreateIn(title="Trip"))

        assert datetime.fromisoformat(created.created_at).isoformat() == created.created_at
        assert created.created_at.startswith("2024-03-05T10:20:30")

    def test_created_list_shows_up_in_my_task_lists(self, service):
        created = service.create(TaskListCreateIn(title="Groceries"))

        assert [tl.id for tl in service.my_task_lists()] == [created.id]


class TestMyTaskLists:
    def test_only_lists_with_caller_membership(self, service, user, other_user):
        mine = TaskListFactory(userIds=[user["_id"]])
        shared = TaskListFactory(userIds=[other_user["_id"], user["_id"]])
        TaskListFactory(userIds=[other_user["_id"]])

        listed = service.my_task_lists()

        assert [tl.id for tl in listed] == [str(mine["_id"]), str(shared["_id"])]

    def test_members_follow_stored_order(self, service, user, other_user):
        third = UserFactory()
        TaskListFactory(userIds=[other_user["_id"], user["_id"], third["_id"]])

        (listed,) = service.my_task_lists()

        assert [u.id for u in listed.users] == [
            str(other_user["_id"]),
            str(user["_id"]),
            str(third["_id"]),
        ]

    def test_members_without_user_record_are_skipped(self, service, user):
        TaskListFactory(userIds=[user["_id"], ObjectId()])

        (listed,) = service.my_task_lists()

        assert [u.id for u in listed.users] == [str(user["_id"])]

    def test_todos_are_joined_without_parent(self, service, user):
        task_list = TaskListFactory(userIds=[user["_id"]])
        todo = ToDoFactory(taskListId=task_list["_id"], content="Buy milk")

        (listed,) = service.my_task_lists()

        assert len(listed.todos) == 1
        assert listed.todos[0].id == str(todo["_id"])
        assert listed.todos[0].content == "Buy milk"
        assert listed.todos[0].task_list_id == str(task_list["_id"])
        assert listed.todos[0].task_list is None

    def test_empty_for_new_user(self, service):
        assert service.my_task_lists() == []


class TestGetUpdateDelete:
    def test_get_returns_none_for_unknown_or_invalid_id(self, service):
        assert service.get(TaskListGetIn(id=str(ObjectId()))) is None
        assert service.get(TaskListGetIn(id="not-an-id")) is None

    def test_get_does_not_check_membership(self, service, other_user):
        foreign = TaskListFactory(userIds=[other_user["_id"]], title="Private")

        fetched = service.get(TaskListGetIn(id=str(foreign["_id"])))

        assert fetched is not None
        assert fetched.title == "Private"

    def test_update_renames_and_keeps_members(self, service, storage, user):
        task_list = TaskListFactory(userIds=[user["_id"]], title="Old")

        updated = service.update(TaskListUpdateIn(id=str(task_list["_id"]), title="New"))

        assert updated is not None
        assert updated.title == "New"
        assert updated.created_at == task_list["createdAt"]
        assert storage.task_lists.get(task_list["_id"])["userIds"] == [user["_id"]]

    def test_update_missing_returns_none(self, service):
        assert service.update(TaskListUpdateIn(id=str(ObjectId()), title="X")) is None

    def test_delete_leaves_todos_behind(self, service, storage, user):
        task_list = TaskListFactory(userIds=[user["_id"]])
        todo = ToDoFactory(taskListId=task_list["_id"])

        assert service.delete(TaskListDeleteIn(id=str(task_list["_id"]))) is True

        assert storage.task_lists.get(task_list["_id"]) is None
        assert storage.todos.get(todo["_id"]) is not None
        assert service.my_task_lists() == []

    def test_delete_missing_returns_false(self, service):
        assert service.delete(TaskListDeleteIn(id=str(ObjectId()))) is False


class TestAddUser:
    def test_shared_list_is_visible_to_new_member(self, storage, user, other_user):
        owner = TaskListService(ctx=ServiceContext(storage=storage, user=user))
        task_list = owner.create(TaskListCreateIn(title="Shared"))

        result = owner.add_user(
            TaskListAddUserIn(task_list_id=task_list.id, user_id=str(other_user["_id"]))
        )

        assert [u.id for u in result.users] == [str(user["_id"]), str(other_user["_id"])]
        member = TaskListService(ctx=ServiceContext(storage=storage, user=other_user))
        assert [tl.id for tl in member.my_task_lists()] == [task_list.id]

    def test_adding_twice_keeps_single_membership(self, service, storage, user, other_user):
        task_list = TaskListFactory(userIds=[user["_id"]])
        dto = TaskListAddUserIn(task_list_id=str(task_list["_id"]), user_id=str(other_user["_id"]))

        first = service.add_user(dto)
        second = service.add_user(dto)

        assert first.users == second.users
        stored = storage.task_lists.get(task_list["_id"])
        assert stored["userIds"] == [user["_id"], other_user["_id"]]

    def test_invalid_user_id_is_rejected(self, service, user):
        task_list = TaskListFactory(userIds=[user["_id"]])

        with pytest.raises(ValidationError) as excinfo:
            service.add_user(TaskListAddUserIn(task_list_id=str(task_list["_id"]), user_id="zzz"))
        assert excinfo.value.field == "userId"

    def test_missing_list_returns_none(self, service, other_user):
        dto = TaskListAddUserIn(task_list_id=str(ObjectId()), user_id=str(other_user["_id"]))
        assert service.add_user(dto) is None


class TestAnonymous:
    def test_every_operation_requires_identity(self, anonymous, storage, user, other_user):
        task_list = TaskListFactory(userIds=[user["_id"]], title="Keep")
        list_id = str(task_list["_id"])
        calls = [
            anonymous.my_task_lists,
            lambda: anonymous.get(TaskListGetIn(id=list_id)),
            lambda: anonymous.create(TaskListCreateIn(title="Nope")),
            lambda: anonymous.update(TaskListUpdateIn(id=list_id, title="Changed")),
            lambda: anonymous.delete(TaskListDeleteIn(id=list_id)),
            lambda: anonymous.add_user(
                TaskListAddUserIn(task_list_id=list_id, user_id=str(other_user["_id"]))
            ),
        ]

        for call in calls:
            with pytest.raises(AuthenticationError):
                call()

        stored = storage.task_lists.find({})
        assert len(stored) == 1
        assert stored[0]["title"] == "Keep"
        assert stored[0]["userIds"] == [user["_id"]]
