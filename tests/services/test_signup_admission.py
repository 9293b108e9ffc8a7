# tests/services/test_signup_admission.py
"""Tests for signup admission and withdrawal."""

from datetime import timedelta

import pytest

from classhub.core.exceptions import (
    CapacityError,
    ConflictError,
    EntityReferenceError,
    StateError,
)
from classhub.db.time import utcnow
from classhub.services.signup_service import (
    SignupAdmissionController,
    count_signups,
    list_signups,
)


@pytest.fixture()
def controller() -> SignupAdmissionController:
    return SignupAdmissionController()


def test_admit_creates_signed_row(db_session, controller, make_activity, students) -> None:
    activity = make_activity(max_people=5)

    signup = controller.admit(db_session, activity.activity_id, "u1")

    assert signup.id is not None
    assert signup.activity_id == activity.activity_id
    assert signup.user_id == "u1"
    assert signup.status == "signed"
    assert signup.signup_time is not None
    assert count_signups(db_session, activity.activity_id) == 1


def test_capacity_scenario_with_withdrawal(db_session, controller, make_activity, students) -> None:
    """Two seats: third signup bounces until someone withdraws."""
    activity = make_activity(max_people=2)
    aid = activity.activity_id

    controller.admit(db_session, aid, "u1")
    controller.admit(db_session, aid, "u2")

    with pytest.raises(CapacityError) as exc_info:
        controller.admit(db_session, aid, "u3")
    assert exc_info.value.limit == 2
    assert exc_info.value.current == 2
    assert "activity is full" in exc_info.value.message

    assert controller.withdraw(db_session, aid, "u1") == 1
    controller.admit(db_session, aid, "u3")

    assert sorted(s.user_id for s in list_signups(db_session, activity_id=aid)) == ["u2", "u3"]


def test_missing_activity_is_reference_error(db_session, controller, students) -> None:
    with pytest.raises(EntityReferenceError, match="activity does not exist"):
        controller.admit(db_session, 424242, "u1")


def test_tombstoned_activity_is_reference_error(db_session, controller, make_activity, students) -> None:
    activity = make_activity()
    activity.deleted_at = utcnow()
    db_session.commit()

    with pytest.raises(EntityReferenceError):
        controller.admit(db_session, activity.activity_id, "u1")


@pytest.mark.parametrize("status", ["draft", "closed", "Active", "active "])
def test_non_active_status_is_state_error(db_session, controller, make_activity, students, status) -> None:
    activity = make_activity(status=status, max_people=10)

    with pytest.raises(StateError, match="not open for signup"):
        controller.admit(db_session, activity.activity_id, "u1")
    assert count_signups(db_session, activity.activity_id) == 0


def test_ended_activity_is_state_error(db_session, controller, make_activity, students) -> None:
    activity = make_activity(ends_in=timedelta(minutes=-1), max_people=10)

    with pytest.raises(StateError, match="already ended"):
        controller.admit(db_session, activity.activity_id, "u1")


def test_time_gate_uses_injected_clock(db_session, make_activity, students) -> None:
    activity = make_activity(ends_in=timedelta(hours=1), max_people=10)
    later = SignupAdmissionController(clock=lambda: utcnow() + timedelta(hours=2))

    with pytest.raises(StateError):
        later.admit(db_session, activity.activity_id, "u1")


def test_status_gate_wins_over_capacity(db_session, controller, make_activity, students) -> None:
    """A full, inactive activity reports the status problem first."""
    activity = make_activity(status="draft", max_people=0)

    with pytest.raises(StateError):
        controller.admit(db_session, activity.activity_id, "u1")


def test_time_gate_wins_over_capacity(db_session, controller, make_activity, students) -> None:
    activity = make_activity(ends_in=timedelta(hours=-1), max_people=0)

    with pytest.raises(StateError):
        controller.admit(db_session, activity.activity_id, "u1")


def test_zero_capacity_rejects_everyone(db_session, controller, make_activity, students) -> None:
    activity = make_activity(max_people=0)

    with pytest.raises(CapacityError) as exc_info:
        controller.admit(db_session, activity.activity_id, "u1")
    assert exc_info.value.limit == 0
    assert exc_info.value.current == 0


def test_duplicate_signup_is_conflict(db_session, controller, make_activity, students) -> None:
    activity = make_activity(max_people=5)
    controller.admit(db_session, activity.activity_id, "u1")

    with pytest.raises(ConflictError):
        controller.admit(db_session, activity.activity_id, "u1")
    assert count_signups(db_session, activity.activity_id) == 1


def test_unknown_user_is_reference_error(db_session, controller, make_activity) -> None:
    activity = make_activity(max_people=5)

    with pytest.raises(EntityReferenceError, match="user does not exist"):
        controller.admit(db_session, activity.activity_id, "ghost")
    assert count_signups(db_session, activity.activity_id) == 0


def test_withdraw_missing_signup_is_noop(db_session, controller, make_activity, students) -> None:
    activity = make_activity()

    assert controller.withdraw(db_session, activity.activity_id, "u1") == 0
    assert controller.withdraw(db_session, 999, "nobody") == 0


def test_withdraw_ignores_activity_state(db_session, controller, make_activity, students) -> None:
    """Withdrawal is allowed even after the activity closed or ended."""
    activity = make_activity(max_people=3)
    controller.admit(db_session, activity.activity_id, "u1")
    activity.status = "closed"
    activity.end_time = utcnow() - timedelta(days=1)
    db_session.commit()

    assert controller.withdraw(db_session, activity.activity_id, "u1") == 1
    assert count_signups(db_session, activity.activity_id) == 0


def test_rejection_leaves_no_partial_state(db_session, controller, make_activity, students) -> None:
    activity = make_activity(max_people=1)
    controller.admit(db_session, activity.activity_id, "u1")

    with pytest.raises(CapacityError):
        controller.admit(db_session, activity.activity_id, "u2")

    assert [s.user_id for s in list_signups(db_session, activity_id=activity.activity_id)] == ["u1"]


def test_list_signups_filters(db_session, controller, make_activity, students) -> None:
    first = make_activity(max_people=5)
    second = make_activity(max_people=5)
    controller.admit(db_session, first.activity_id, "u1")
    controller.admit(db_session, first.activity_id, "u2")
    controller.admit(db_session, second.activity_id, "u1")

    assert len(list_signups(db_session)) == 3
    assert len(list_signups(db_session, activity_id=first.activity_id)) == 2
    assert len(list_signups(db_session, user_id="u1")) == 2
    assert len(list_signups(db_session, activity_id=second.activity_id, user_id="u2")) == 0


def test_unique_constraint_backs_up_duplicate_check(
    db_session, controller, make_activity, students, monkeypatch
) -> None:
    """With the pre-check out of the way the database still refuses a second row."""
    activity = make_activity(max_people=5)
    monkeypatch.setattr(
        SignupAdmissionController,
        "_check_not_signed_up",
        staticmethod(lambda db, activity_id, user_id: None),
    )
    controller.admit(db_session, activity.activity_id, "u1")

    with pytest.raises(ConflictError, match="conflicts"):
        controller.admit(db_session, activity.activity_id, "u1")

    assert count_signups(db_session, activity.activity_id) == 1
