"""Tests for form outcome events."""

import logging

import pytest

from nexus.errors import ErrorKind
from nexus.forms import (
    FormEvent,
    FormEventBus,
    FormOutcome,
    FormStatus,
    RegistrationForm,
    SignInForm,
    form_events,
)
from nexus.testing import RecordingNavigator, RecordingSession, assert_navigated_once


def _signin(bus: FormEventBus) -> tuple[SignInForm, RecordingSession, RecordingNavigator]:
    session = RecordingSession()
    navigator = RecordingNavigator()
    return SignInForm(session, navigator, events=bus), session, navigator


class TestFormEvent:
    def test_name(self) -> None:
        assert FormEvent("signin", FormOutcome.REJECTED).name == "signin.rejected"

    def test_failed_fields(self) -> None:
        event = FormEvent(
            "registration",
            FormOutcome.REJECTED,
            failures={"email": ErrorKind.INVALID_FORMAT, "company": ErrorKind.REQUIRED},
        )
        assert event.failed_fields == ("email", "company")

    def test_submitted_has_no_failures(self) -> None:
        event = FormEvent("signin", FormOutcome.SUBMITTED)
        assert event.failed_fields == ()
        assert event.timestamp > 0


class TestFormEventBus:
    def test_publish_without_listeners(self) -> None:
        bus = FormEventBus()
        bus.publish(FormEvent("signin", FormOutcome.SUBMITTED))
        assert len(bus) == 0

    def test_listeners_called_in_order(self) -> None:
        bus = FormEventBus()
        calls: list[str] = []
        bus.subscribe(lambda event: calls.append(f"first:{event.name}"))
        bus.subscribe(lambda event: calls.append(f"second:{event.name}"))

        bus.publish(FormEvent("signin", FormOutcome.SUBMITTED))

        assert calls == ["first:signin.submitted", "second:signin.submitted"]

    def test_outcome_filter(self) -> None:
        bus = FormEventBus()
        rejected: list[FormEvent] = []
        bus.subscribe(rejected.append, outcome=FormOutcome.REJECTED)

        bus.publish(FormEvent("signin", FormOutcome.SUBMITTED))
        bus.publish(FormEvent("signin", FormOutcome.REJECTED))

        assert [event.outcome for event in rejected] == [FormOutcome.REJECTED]

    def test_unsubscribe(self) -> None:
        bus = FormEventBus()
        seen: list[FormEvent] = []
        unsubscribe = bus.subscribe(seen.append)

        unsubscribe()
        unsubscribe()
        bus.publish(FormEvent("signin", FormOutcome.SUBMITTED))

        assert seen == []
        assert len(bus) == 0

    def test_failing_listener_is_logged_and_skipped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        bus = FormEventBus()
        seen: list[FormEvent] = []

        def broken(event: FormEvent) -> None:
            raise RuntimeError("listener down")

        bus.subscribe(broken)
        bus.subscribe(seen.append)

        with caplog.at_level(logging.ERROR, logger="nexus.forms.events"):
            bus.publish(FormEvent("signin", FormOutcome.SUBMITTED))

        assert len(seen) == 1
        assert "signin.submitted" in caplog.text
        assert "listener down" in caplog.text


class TestControllerEvents:
    def test_rejected_submit_carries_kinds(self) -> None:
        bus = FormEventBus()
        events: list[FormEvent] = []
        bus.subscribe(events.append)
        form, _, _ = _signin(bus)
        form.on_field_change("email", "ada@example.com")
        form.on_field_change("password", "abc")

        form.on_submit()

        assert [event.name for event in events] == ["signin.rejected"]
        assert dict(events[0].failures) == {"password": ErrorKind.TOO_SHORT}

    def test_accepted_submit(self) -> None:
        bus = FormEventBus()
        events: list[FormEvent] = []
        bus.subscribe(events.append)
        form, _, _ = _signin(bus)
        form.on_field_change("email", "ada@example.com")
        form.on_field_change("password", "analytical")

        form.on_submit()

        assert [event.name for event in events] == ["signin.submitted"]
        assert events[0].failures == {}

    def test_events_never_carry_values(self) -> None:
        bus = FormEventBus()
        events: list[FormEvent] = []
        bus.subscribe(events.append)
        form, _, _ = _signin(bus)
        form.on_field_change("email", "ada@example.com")
        form.on_field_change("password", "abc")

        form.on_submit()

        assert "abc" not in repr(events)
        assert "ada@example.com" not in repr(events)

    def test_failing_listener_does_not_undo_success(self) -> None:
        bus = FormEventBus()

        def broken(event: FormEvent) -> None:
            raise RuntimeError("listener down")

        bus.subscribe(broken)
        form, session, navigator = _signin(bus)
        form.on_field_change("email", "ada@example.com")
        form.on_field_change("password", "analytical")

        result = form.on_submit()

        assert result
        assert form.status is FormStatus.SUBMITTED
        assert session.calls == 1
        assert_navigated_once(navigator, "/alumni")

    def test_registration_publishes_to_shared_bus(self) -> None:
        events: list[FormEvent] = []
        unsubscribe = form_events.subscribe(events.append)
        try:
            form = RegistrationForm(RecordingSession(), RecordingNavigator())
            form.on_submit()
        finally:
            unsubscribe()

        assert [event.name for event in events] == ["registration.rejected"]
        assert set(events[0].failures) == set(RegistrationForm.field_names)
