"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import strategies as st

from errkit import Error, LocalizerRegistry, new_validation_error
from errkit.localization import reset_default_registry, set_default_registry

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for valid field names (letters and numbers only)
field_names = st.text(
    min_size=1,
    max_size=30,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for user-facing messages
messages = st.text(min_size=1, max_size=100)

# Strategy for HTTP status codes an Error may carry
statuses = st.sampled_from([400, 401, 403, 404, 409, 422, 500, 502, 503])

# Strategy for template parameter values
param_values = st.one_of(
    st.integers(min_value=-1000, max_value=1000),
    st.text(
        max_size=20,
        alphabet=st.characters(whitelist_categories=("L", "N")),
    ),
    st.booleans(),
)

# Strategy for leaf validation errors
leaf_errors = st.builds(
    new_validation_error,
    st.sampled_from(["validation.required", "validation.email", "validation.alpha"]),
    field_names,
    st.text(max_size=20),
)


# -----------------------------------------------------------------------------
# Catalogs
# -----------------------------------------------------------------------------

SPANISH_MESSAGES = {
    "validation.required": "{{field}} es obligatorio",
    "validation.min_value": "{{field}} debe ser al menos {{min}}",
    "error.multiple": "varios errores: {{errors}}",
}


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def registry() -> LocalizerRegistry:
    """Create an isolated registry with an extra Spanish catalog."""
    registry = LocalizerRegistry()
    registry.add_messages("es", SPANISH_MESSAGES)
    return registry


@pytest.fixture
def installed_registry(registry: LocalizerRegistry) -> Iterator[LocalizerRegistry]:
    """Install the isolated registry as the process-wide default."""
    set_default_registry(registry)
    yield registry
    reset_default_registry()


@pytest.fixture
def container() -> Error:
    """Create a 400 container holding two field errors."""
    return Error(400).with_errors(
        new_validation_error("validation.required", "email", ""),
        new_validation_error("validation.required", "name", ""),
    )
