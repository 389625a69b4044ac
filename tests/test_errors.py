"""Tests for Error, ErrorCollector and the error helper functions."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from errkit import (
    NON_FIELD_ERRORS,
    Diagnostics,
    Error,
    ErrorCollector,
    LocalizerRegistry,
    bad_request,
    conflict,
    duplicate_error,
    email_error,
    forbidden,
    format_stack,
    internal,
    max_length_error,
    max_value_error,
    message,
    min_length_error,
    min_value_error,
    new,
    new_validation_error,
    not_found,
    required_error,
    stack,
    status,
    unauthorized,
    wrap,
)

from .conftest import field_names, leaf_errors, messages, param_values, statuses

# =============================================================================
# Construction Unit Tests
# =============================================================================


class TestErrorConstructionUnit:
    """Unit tests for creating errors."""

    def test_status_zero_defaults_to_internal(self) -> None:
        err = Error()

        assert err.status == 500
        assert err.stack != ()

    def test_client_error_has_no_stack(self) -> None:
        err = Error(400, "Invalid email")

        assert err.status == 400
        assert err.message == "Invalid email"
        assert err.stack == ()

    def test_internal_error_captures_stack_ending_at_caller(self) -> None:
        err = internal("boom")

        assert err.stack != ()
        assert err.stack[-1].name == "test_internal_error_captures_stack_ending_at_caller"

    def test_diagnostics_stack_forces_capture(self) -> None:
        err = Error(404, "missing", diagnostics=Diagnostics.STACK)

        assert err.stack != ()

    def test_diagnostics_none_disables_capture(self) -> None:
        err = Error(500, "boom", diagnostics=Diagnostics.NONE)

        assert err.stack == ()

    def test_cause_is_chained(self) -> None:
        cause = ValueError("db down")
        err = Error(503, "Service unavailable", cause)

        assert err.cause is cause
        assert err.__cause__ is cause

    def test_new_is_alias(self) -> None:
        err = new(409, "taken")

        assert isinstance(err, Error)
        assert err.status == 409
        assert err.message == "taken"

    def test_error_can_be_raised(self) -> None:
        with pytest.raises(Error) as exc_info:
            raise not_found("user not found")

        assert exc_info.value.status == 404

    @given(status_code=statuses, text=messages)
    @settings(max_examples=50)
    def test_status_and_message_preserved(self, status_code: int, text: str) -> None:
        err = Error(status_code, text)

        assert err.status == status_code
        assert err.message == text
        assert (err.stack != ()) == (status_code == 500)


# =============================================================================
# Builder Unit Tests
# =============================================================================


class TestErrorBuildersUnit:
    """Unit tests for the with_* builders."""

    def test_builders_return_new_instances(self) -> None:
        base = Error(400)
        keyed = base.with_message_key("validation.required")

        assert keyed is not base
        assert base.message_key == ""
        assert keyed.message_key == "validation.required"

    def test_builders_preserve_other_attributes(self) -> None:
        cause = KeyError("k")
        err = (
            Error(422, "bad", cause)
            .with_field_name("email")
            .with_value("x")
            .with_param("min", 3)
        )

        assert err.status == 422
        assert err.message == "bad"
        assert err.cause is cause
        assert err.__cause__ is cause
        assert err.field_name == "email"
        assert err.value == "x"
        assert err.params == {"min": 3}

    def test_with_param_last_write_wins(self) -> None:
        err = Error(400).with_param("min", 1).with_param("min", 5)

        assert err.params == {"min": 5}

    def test_params_returns_copy(self) -> None:
        err = Error(400).with_param("min", 1)
        err.params["min"] = 99

        assert err.params == {"min": 1}

    def test_with_params_merges(self) -> None:
        err = Error(400).with_param("a", 1).with_params({"b": 2, "a": 3})

        assert err.params == {"a": 3, "b": 2}

    @given(key=field_names, values=st.lists(param_values, min_size=1, max_size=5))
    @settings(max_examples=50)
    def test_with_param_keeps_last_value(self, key: str, values: list) -> None:
        err = Error(400)
        for value in values:
            err = err.with_param(key, value)

        assert err.params[key] == values[-1]


# =============================================================================
# Children Unit Tests
# =============================================================================


class TestErrorChildrenUnit:
    """Unit tests for child collection and flattening."""

    def test_with_errors_appends_in_order(self) -> None:
        first = required_error("email", "")
        second = required_error("name", "")
        container = Error(400).with_errors(first, second)

        assert container.has_errors()
        assert container.all_errors() == [first, second]

    def test_none_children_are_ignored(self) -> None:
        container = Error(400).with_errors(None, required_error("email", ""), None)

        assert len(container.all_errors()) == 1

    def test_adding_container_contributes_its_children(self) -> None:
        inner = Error(400).with_errors(required_error("a", ""), required_error("b", ""))
        outer = Error(400).with_errors(inner, required_error("c", ""))

        assert [e.field_name for e in outer.all_errors()] == ["a", "b", "c"]
        assert not any(e.has_errors() for e in outer.all_errors())

    def test_with_errors_does_not_mutate_original(self) -> None:
        base = Error(400)
        base.with_errors(required_error("a", ""))

        assert not base.has_errors()

    def test_all_errors_returns_copy(self, container: Error) -> None:
        container.all_errors().clear()

        assert len(container.all_errors()) == 2

    @given(groups=st.lists(st.lists(leaf_errors, min_size=1, max_size=4), max_size=4))
    @settings(max_examples=50)
    def test_children_never_nest(self, groups: list[list[Error]]) -> None:
        nested = [Error(400).with_errors(*group) for group in groups]
        container = Error(400).with_errors(*nested)

        assert len(container.all_errors()) == sum(len(g) for g in groups)
        assert all(not child.has_errors() for child in container.all_errors())


# =============================================================================
# ErrorCollector Unit Tests
# =============================================================================


class TestErrorCollectorUnit:
    """Unit tests for the mutable collector."""

    def test_collects_and_seals(self) -> None:
        collector = ErrorCollector(400)
        collector.add_error(required_error("email", ""))
        collector.add_errors([required_error("name", ""), None])

        assert len(collector) == 2
        assert collector.has_errors()

        err = collector.to_error()
        assert err.status == 400
        assert len(err.all_errors()) == 2

    def test_add_methods_chain(self) -> None:
        collector = ErrorCollector(400)

        assert collector.add_error(None) is collector
        assert collector.add_errors(None) is collector
        assert not collector.has_errors()

    def test_flattens_containers(self, container: Error) -> None:
        collector = ErrorCollector(400).add_error(container)

        assert len(collector.all_errors()) == 2

    def test_sealed_error_unaffected_by_later_adds(self) -> None:
        collector = ErrorCollector(400).add_error(required_error("a", ""))
        sealed = collector.to_error()
        collector.add_error(required_error("b", ""))

        assert len(sealed.all_errors()) == 1

    def test_zero_status_becomes_internal(self) -> None:
        err = ErrorCollector().to_error()

        assert err.status == 500


# =============================================================================
# Rendering Unit Tests
# =============================================================================


class TestLocalizedErrorUnit:
    """Unit tests for localized_error and its fallbacks."""

    def test_message_key_renders_template(self) -> None:
        err = min_length_error("password", "123", 8)

        assert err.localized_error() == "password must be at least 8 characters long"
        assert str(err) == "password must be at least 8 characters long"

    def test_params_override_field_and_value(self) -> None:
        err = new_validation_error("{{field}} got {{value}}", "x", "abc")

        assert err.localized_error() == "x got abc"
        assert err.with_param("field", "other").localized_error() == "other got abc"

    def test_inline_template_key(self) -> None:
        err = (
            Error(400)
            .with_message_key("{{field}} must be exactly {{expected}} years old")
            .with_field_name("age")
            .with_param("expected", 21)
        )

        assert err.localized_error() == "age must be exactly 21 years old"

    def test_list_params_are_comma_joined(self) -> None:
        err = new_validation_error("validation.in", "color", "pink").with_param(
            "values", ["red", "green"]
        )

        assert err.localized_error() == "color must be one of: red, green"

    def test_single_child_rendered_verbatim(self) -> None:
        err = Error(400).with_errors(required_error("email", ""))

        assert err.localized_error() == "email is required"

    def test_multiple_children_joined(self, container: Error) -> None:
        assert container.localized_error() == (
            "multiple errors: email is required; name is required"
        )

    def test_multiple_children_without_template(self, container: Error) -> None:
        bare = LocalizerRegistry(include_defaults=False)
        text = container.localized_error(bare.get_localizer())

        assert text.startswith("multiple errors: ")

    def test_fallback_to_cause(self) -> None:
        err = Error(400, "ignored", ValueError("boom"))

        assert err.localized_error() == "boom"

    def test_fallback_to_message(self) -> None:
        assert Error(400, "Invalid email").localized_error() == "Invalid email"

    def test_fallback_with_field(self) -> None:
        err = Error(400).with_message_key("custom.missing").with_field_name("x")

        assert err.localized_error() == "validation error for field 'x'"

    def test_fallback_with_key_only(self) -> None:
        err = Error(400).with_message_key("custom.missing")

        assert err.localized_error() == "validation error (key: custom.missing)"

    def test_fallback_unknown(self) -> None:
        assert Error(400).localized_error() == "unknown error"

    def test_explicit_localizer(self, registry: LocalizerRegistry, container: Error) -> None:
        es = registry.get_localizer("es")

        assert container.localized_error(es) == (
            "varios errores: email es obligatorio; name es obligatorio"
        )

    def test_language_tag(self, installed_registry: LocalizerRegistry) -> None:
        err = required_error("email", "")

        assert err.localized_error("es") == "email es obligatorio"
        assert err.localized_error("fr") == "email is required"


class TestErrMapUnit:
    """Unit tests for err_map and localized_err_map."""

    def test_groups_children_by_field(self) -> None:
        err = Error(400).with_errors(
            required_error("email", ""),
            email_error("email", "x"),
            required_error("name", ""),
        )

        assert err.err_map() == {
            "email": ["email is required", "email must be a valid email address"],
            "name": ["name is required"],
        }

    def test_unnamed_children_use_fallback_bucket(self) -> None:
        err = Error(400).with_errors(Error(400, "bad payload"))

        assert err.err_map() == {NON_FIELD_ERRORS: ["bad payload"]}
        assert err.err_map() == {"error": ["bad payload"]}

    def test_leaf_with_key_maps_itself(self) -> None:
        assert required_error("email", "").err_map() == {"email": ["email is required"]}

    def test_leaf_without_key_is_absent(self) -> None:
        assert Error(400, "plain").err_map() is None

    def test_localized(self, registry: LocalizerRegistry, container: Error) -> None:
        assert container.localized_err_map(registry.get_localizer("es")) == {
            "email": ["email es obligatorio"],
            "name": ["name es obligatorio"],
        }

    @given(errors=st.lists(leaf_errors, min_size=1, max_size=6))
    @settings(max_examples=50)
    def test_message_count_matches_children(self, errors: list[Error]) -> None:
        err_map = Error(400).with_errors(*errors).err_map()

        assert err_map is not None
        assert sum(len(v) for v in err_map.values()) == len(errors)


# =============================================================================
# Helper Function Unit Tests
# =============================================================================


class TestHelperFunctionsUnit:
    """Unit tests for functions that accept any exception."""

    def test_status(self) -> None:
        assert status(None) == 200
        assert status(Error(404)) == 404
        assert status(ValueError("x")) == 500

    def test_message(self) -> None:
        assert message(None) == ""
        assert message(Error(400, "Invalid")) == "Invalid"
        assert message(Error(404)) == "Not Found"
        assert message(Error(599)) == ""
        assert message(RuntimeError("secret")) == "Internal Server Error"

    def test_stack(self) -> None:
        assert stack(None) == ()
        assert stack(ValueError("x")) == ()
        assert stack(internal("boom")) != ()

    def test_format_stack(self) -> None:
        assert format_stack(None) == ""
        assert format_stack(bad_request("x")) == ""
        assert "test_format_stack" in format_stack(internal("boom"))

    def test_wrap(self) -> None:
        original = bad_request("x")
        cause = ValueError("db")
        wrapped = wrap(cause)

        assert wrap(None) is None
        assert wrap(original) is original
        assert wrapped is not None
        assert wrapped.status == 500
        assert wrapped.message == "Internal Server Error"
        assert wrapped.cause is cause

    @pytest.mark.parametrize(
        ("factory", "expected"),
        [
            (bad_request, 400),
            (unauthorized, 401),
            (forbidden, 403),
            (not_found, 404),
            (conflict, 409),
            (internal, 500),
        ],
    )
    def test_convenience_constructors(self, factory, expected: int) -> None:
        cause = ValueError("inner")
        err = factory("text", cause)

        assert err.status == expected
        assert err.message == "text"
        assert err.cause is cause

    def test_validation_constructors(self) -> None:
        assert required_error("name", "").localized_error() == "name is required"
        assert max_length_error("bio", "x", 10).localized_error() == (
            "bio must be at most 10 characters long"
        )
        assert min_value_error("age", 5, 18).localized_error() == "age must be at least 18"
        assert max_value_error("age", 200, 150).localized_error() == "age must be at most 150"
        assert duplicate_error("email", "a@b.co").localized_error() == (
            "email already exists, another record has the same value"
        )
        assert email_error("email", "x").status == 400

    def test_repr(self) -> None:
        text = repr(required_error("email", ""))

        assert "status=400" in text
        assert "field_name='email'" in text
