"""Tests for wren.forms.form — multi-field controller and aggregate validity."""

import pytest

from wren.config import FieldConfig, FormOptions
from wren.errors import UnknownFieldError
from wren.forms import BlurHandler, ChangeHandler, FieldState, FormController
from wren.validation import ValidationOutcome, email, max_length, min_length, required


def _form(**options: object) -> FormController:
    return FormController(
        {
            "name": [required, min_length(3)],
            "email": FieldConfig([required, email], initial_value="me@example.com"),
        },
        FormOptions(language="en", **options),  # type: ignore[arg-type]
    )


class TestConstruction:
    def test_states_match_config(self) -> None:
        form = _form()
        assert form.names == ("name", "email")
        assert set(form.fields) == {"name", "email"}
        assert form.field("name") == FieldState()
        assert form.field("email") == FieldState(value="me@example.com")

    def test_rule_list_shorthand(self) -> None:
        form = FormController({"a": [required]})
        assert form.config["a"] == FieldConfig((required,))

    def test_fresh_form_is_invalid(self) -> None:
        # Every value would pass, but nothing has been validated yet
        form = FormController({"a": [], "b": FieldConfig((required,), initial_value="x")})
        assert form.is_valid is False
        assert form.field("a").error is None

    def test_empty_form_is_valid(self) -> None:
        assert FormController({}).is_valid is True

    def test_fields_view_is_read_only(self) -> None:
        form = _form()
        with pytest.raises(TypeError):
            form.fields["name"] = FieldState()  # type: ignore[index]


class TestSetValue:
    def test_marks_dirty_without_validating(self) -> None:
        form = _form()
        form.set_value("name", "bob")
        state = form.field("name")
        assert state.value == "bob"
        assert state.is_dirty is True
        assert state.is_valid is False
        assert state.is_touched is False

    def test_other_fields_untouched(self) -> None:
        form = _form()
        form.set_value("name", "bob")
        assert form.field("email") == FieldState(value="me@example.com")


class TestValidate:
    def test_pass_and_fail(self) -> None:
        form = _form()
        form.set_value("name", "ab")
        assert form.validate("name") is False
        assert form.field("name").error == "Please enter at least 3 characters"
        form.set_value("name", "abc")
        assert form.validate("name") is True
        assert form.field("name").error is None

    def test_marks_dirty(self) -> None:
        form = _form()
        form.validate("email")
        assert form.field("email").is_dirty is True
        assert form.field("email").is_valid is True

    def test_short_circuit(self) -> None:
        calls: list[str] = []

        def passing(value: str) -> ValidationOutcome:
            calls.append("r1")
            return ValidationOutcome.ok()

        def failing(value: str) -> ValidationOutcome:
            calls.append("r2")
            return ValidationOutcome.fail("E2")

        def never(value: str) -> ValidationOutcome:
            calls.append("r3")
            return ValidationOutcome.fail("E3")

        form = FormController({"x": [passing, failing, never]})
        assert form.validate("x") is False
        assert form.field("x").error == "E2"
        assert calls == ["r1", "r2"]

    def test_uses_form_language(self) -> None:
        form = FormController({"a": [required]}, FormOptions(language="ko"))
        form.validate("a")
        assert form.field("a").error == "필수 입력 항목입니다"


class TestValidateAll:
    def test_no_short_circuit_across_fields(self) -> None:
        form = _form()
        form.set_value("name", "")
        assert form.validate_all() is False
        assert form.field("name").is_valid is False
        assert form.field("name").error == "This field is required"
        assert form.field("email").is_valid is True
        assert form.field("email").is_dirty is True

    def test_all_pass(self) -> None:
        form = _form()
        form.set_value("name", "alice")
        assert form.validate_all() is True
        assert form.is_valid is True
        assert form.errors == {}

    def test_order_is_config_order(self) -> None:
        order: list[str] = []

        def tracking(label: str):
            def rule(value: str) -> ValidationOutcome:
                order.append(label)
                return ValidationOutcome.ok()

            return rule

        form = FormController({"z": [tracking("z")], "a": [tracking("a")], "m": [tracking("m")]})
        form.validate_all()
        assert order == ["z", "a", "m"]

    def test_aggregate_reflects_last_results(self) -> None:
        form = _form()
        form.set_value("name", "alice")
        form.validate_all()
        form.set_value("name", "")
        # Not revalidated, so the last result still stands
        assert form.is_valid is True
        form.validate("name")
        assert form.is_valid is False


class TestSetError:
    def test_injects_error(self) -> None:
        form = _form()
        form.set_value("email", "taken@example.com")
        form.validate("email")
        form.set_error("email", "Already registered")
        state = form.field("email")
        assert state.error == "Already registered"
        assert state.is_valid is False
        assert form.errors == {"email": "Already registered"}

    def test_next_validate_overwrites(self) -> None:
        form = _form()
        form.set_error("email", "Already registered")
        assert form.validate("email") is True
        assert form.field("email").error is None


class TestReset:
    def test_reset_restores_initial_value(self) -> None:
        form = _form()
        form.set_value("email", "other@example.com")
        form.blur("email")
        form.validate("email")
        form.reset("email")
        assert form.field("email") == FieldState(value="me@example.com")

    def test_reset_only_named_field(self) -> None:
        form = _form()
        form.set_value("name", "bob")
        form.set_value("email", "x@y.zz")
        form.reset("email")
        assert form.field("name").value == "bob"

    def test_reset_all(self) -> None:
        form = _form()
        form.set_value("name", "bob")
        form.set_error("email", "bad")
        form.mark_touched("name")
        form.reset_all()
        assert form.field("name") == FieldState()
        assert form.field("email") == FieldState(value="me@example.com")
        assert form.is_dirty is False


class TestHandlers:
    def test_handle_change_sets_value(self) -> None:
        form = _form()
        handler = form.handle_change("name")
        assert isinstance(handler, ChangeHandler)
        assert handler.name == "name"
        handler("bob")
        assert form.field("name").value == "bob"
        assert form.field("name").is_dirty is True
        assert form.field("name").is_valid is False
        assert form.field("name").error is None

    def test_handle_change_validates_when_configured(self) -> None:
        form = _form(validate_on_change=True)
        form.handle_change("name")({"value": "ab"})
        assert form.field("name").error == "Please enter at least 3 characters"

    def test_handle_blur_marks_touched(self) -> None:
        form = _form()
        handler = form.handle_blur("name")
        assert isinstance(handler, BlurHandler)
        handler()
        state = form.field("name")
        assert state.is_touched is True
        assert state.is_dirty is False
        assert state.error is None

    def test_handle_blur_validates_when_configured(self) -> None:
        form = _form(validate_on_blur=True)
        form.handle_blur("name")(object())
        assert form.field("name").is_touched is True
        assert form.field("name").error == "This field is required"

    def test_handlers_compare_by_form_and_name(self) -> None:
        form = _form()
        assert form.handle_change("name") == form.handle_change("name")
        assert form.handle_change("name") != form.handle_change("email")
        assert form.handle_blur("name") == form.handle_blur("name")
        assert form.handle_blur("name") != _form().handle_blur("name")
        assert len({form.handle_blur("name"), form.handle_blur("name")}) == 1

    def test_touched_only_via_blur(self) -> None:
        form = _form(validate_on_change=True)
        form.handle_change("name")("alice")
        form.validate_all()
        assert form.field("name").is_touched is False
        form.mark_touched("name")
        assert form.field("name").is_touched is True


class TestUnknownField:
    @pytest.mark.parametrize(
        "call",
        [
            lambda f: f.set_value("missing", "x"),
            lambda f: f.set_error("missing", "x"),
            lambda f: f.validate("missing"),
            lambda f: f.reset("missing"),
            lambda f: f.field("missing"),
            lambda f: f.mark_touched("missing"),
            lambda f: f.handle_change("missing"),
            lambda f: f.handle_blur("missing"),
        ],
    )
    def test_raises_without_creating_state(self, call) -> None:
        form = _form()
        with pytest.raises(UnknownFieldError, match="missing"):
            call(form)
        assert set(form.fields) == {"name", "email"}

    def test_is_key_error(self) -> None:
        form = _form()
        with pytest.raises(KeyError):
            form.validate("missing")

    def test_contains(self) -> None:
        form = _form()
        assert "name" in form
        assert "missing" not in form


class TestBind:
    def test_binds_known_fields(self) -> None:
        form = _form()
        form.bind({"name": "alice", "unknown": "ignored"})
        assert form.values == {"name": "alice", "email": "me@example.com"}
        assert form.field("name").is_dirty is True
        assert form.field("email").is_dirty is False

    def test_bound_values_are_validated(self) -> None:
        form = FormController({"title": [required, max_length(5)]}, FormOptions(language="en"))
        form.bind({"title": "too long title"})
        assert form.validate_all() is False
        assert form.errors == {"title": "Maximum 5 characters allowed"}


class TestSubscribe:
    def test_listener_gets_name_and_state(self) -> None:
        form = _form()
        seen: list[tuple[str, FieldState]] = []
        form.subscribe(lambda name, state: seen.append((name, state)))
        form.set_value("name", "bob")
        form.validate_all()
        assert [name for name, _ in seen] == ["name", "name", "email"]
        assert seen[-1][1] == form.field("email")

    def test_unsubscribe(self) -> None:
        form = _form()
        seen: list[str] = []
        unsubscribe = form.subscribe(lambda name, state: seen.append(name))
        form.reset_all()
        unsubscribe()
        form.reset_all()
        assert seen == ["name", "email"]
