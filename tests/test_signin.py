"""Tests for the sign-in form controller."""

import pytest

from nexus.config import NexusConfig
from nexus.errors import FormClosedError, UnknownFieldError
from nexus.forms import FormStatus, SignInForm
from nexus.navigation import Destination
from nexus.session import SessionContext
from nexus.testing import (
    RecordingNavigator,
    RecordingSession,
    assert_navigated_once,
    assert_not_navigated,
)


def _form(**kwargs: object) -> tuple[SignInForm, RecordingSession, RecordingNavigator, list[str]]:
    log: list[str] = []
    session = RecordingSession(log)
    navigator = RecordingNavigator(log)
    return SignInForm(session, navigator, **kwargs), session, navigator, log


def _fill(form: SignInForm, email: str = "ada@example.com", password: str = "analytical") -> None:
    form.on_field_change("email", email)
    form.on_field_change("password", password)


class TestInitialState:
    def test_fields_start_blank(self) -> None:
        form, *_ = _form()
        assert dict(form.fields) == {"email": "", "password": ""}
        assert dict(form.errors) == {}
        assert form.status is FormStatus.EDITING

    def test_password_hidden(self) -> None:
        form, *_ = _form()
        assert form.is_secret_visible("password") is False

    def test_read_views_are_immutable(self) -> None:
        form, *_ = _form()
        with pytest.raises(TypeError):
            form.fields["email"] = "x"  # type: ignore[index]


class TestFieldChange:
    def test_sets_value(self) -> None:
        form, *_ = _form()
        form.on_field_change("email", "ada@example.com")
        assert form.fields["email"] == "ada@example.com"

    def test_does_not_validate(self) -> None:
        form, *_ = _form()
        form.on_field_change("email", "nope")
        assert dict(form.errors) == {}

    @pytest.mark.parametrize("value", ["", "nope", "ada@example.com"])
    def test_clears_error_whatever_the_value(self, value: str) -> None:
        form, *_ = _form()
        form.on_submit()
        assert "email" in form.errors

        form.on_field_change("email", value)

        assert "email" not in form.errors

    def test_only_the_changed_field_is_cleared(self) -> None:
        form, *_ = _form()
        form.on_submit()
        form.on_field_change("email", "x")
        assert "password" in form.errors

    def test_unknown_field(self) -> None:
        form, *_ = _form()
        with pytest.raises(UnknownFieldError, match="name"):
            form.on_field_change("name", "Ada")

    def test_no_selection_fields(self) -> None:
        form, *_ = _form()
        with pytest.raises(UnknownFieldError):
            form.on_selection_change("email", "ada@example.com")


class TestSubmitRejected:
    def test_errors_stored(self) -> None:
        form, *_ = _form()
        result = form.on_submit()
        assert not result
        assert dict(form.errors) == {
            "email": "Email is required",
            "password": "Password is required",
        }
        assert form.status is FormStatus.EDITING

    def test_no_side_effects(self) -> None:
        form, session, navigator, log = _form()
        _fill(form, email="a@b", password="abc")
        form.on_submit()
        assert session.calls == 0
        assert_not_navigated(navigator)
        assert log == []

    def test_resubmit_after_fix(self) -> None:
        form, session, navigator, _ = _form()
        _fill(form, password="abc")
        assert not form.on_submit()
        assert dict(form.errors) == {"password": "Password must be at least 6 characters"}

        form.on_field_change("password", "abcdef")
        assert form.on_submit()
        assert session.calls == 1
        assert_navigated_once(navigator, "/alumni")


class TestSubmitAccepted:
    def test_session_then_navigation(self) -> None:
        form, session, navigator, log = _form()
        _fill(form)
        result = form.on_submit()
        assert result
        assert log == ["mark_authenticated", "navigate:/alumni"]
        assert session.calls == 1
        assert_navigated_once(navigator, Destination.ALUMNI)

    def test_terminal(self) -> None:
        form, *_ = _form()
        _fill(form)
        form.on_submit()
        assert form.is_submitted
        assert dict(form.errors) == {}

    def test_second_submit_refused(self) -> None:
        form, session, navigator, _ = _form()
        _fill(form)
        form.on_submit()
        with pytest.raises(FormClosedError):
            form.on_submit()
        assert session.calls == 1
        assert len(navigator.destinations) == 1

    def test_edit_after_submit_refused(self) -> None:
        form, *_ = _form()
        _fill(form)
        form.on_submit()
        with pytest.raises(FormClosedError):
            form.on_field_change("email", "other@example.com")

    def test_real_session(self) -> None:
        session = SessionContext()
        form = SignInForm(session, RecordingNavigator())
        _fill(form)
        form.on_submit()
        assert session.is_authenticated

    def test_configured_landing(self) -> None:
        form, _, navigator, _ = _form(config=NexusConfig(landing="/jobs"))
        _fill(form)
        form.on_submit()
        assert_navigated_once(navigator, "/jobs")

    def test_configured_password_length(self) -> None:
        form, *_ = _form(config=NexusConfig(min_password_length=12))
        _fill(form, password="analytical")
        assert not form.on_submit()
        assert form.errors["password"] == "Password must be at least 12 characters"


class TestSecretVisibility:
    def test_toggle(self) -> None:
        form, *_ = _form()
        assert form.toggle_secret_visibility() is True
        assert form.is_secret_visible("password") is True
        assert form.toggle_secret_visibility("password") is False

    def test_independent_of_validation(self) -> None:
        form, *_ = _form()
        form.on_submit()
        errors = dict(form.errors)
        form.toggle_secret_visibility()
        assert dict(form.errors) == errors
        assert form.fields["password"] == ""

    def test_not_a_secret(self) -> None:
        form, *_ = _form()
        with pytest.raises(UnknownFieldError):
            form.toggle_secret_visibility("email")

    def test_allowed_after_submit(self) -> None:
        form, *_ = _form()
        _fill(form)
        form.on_submit()
        assert form.toggle_secret_visibility() is True


class TestIndependence:
    def test_forms_share_no_state(self) -> None:
        first, *_ = _form()
        second, *_ = _form()
        first.on_field_change("email", "ada@example.com")
        first.on_submit()
        assert second.fields["email"] == ""
        assert dict(second.errors) == {}
