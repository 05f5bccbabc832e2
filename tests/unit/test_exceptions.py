"""Unit tests for the exception hierarchy."""

import pytest

from checkpoint.config import CheckpointConfig
from checkpoint.exceptions import (
    CheckpointError,
    ConfigurationError,
    InvalidReferenceError,
    UnsupportedRuleError,
    ValidationException,
)
from checkpoint.form import FormInspector


@pytest.fixture
def form():
    form = FormInspector()
    form.add("person", FormInspector())
    form.set_requirements({"email": True, "person": {"name": True}})
    return form


class TestHierarchy:
    """Test exception classes and their messages."""

    def test_configuration_errors(self):
        """Test configuration error hierarchy."""
        assert issubclass(UnsupportedRuleError, ConfigurationError)
        assert issubclass(InvalidReferenceError, ConfigurationError)
        assert issubclass(ConfigurationError, CheckpointError)
        assert not issubclass(ValidationException, ConfigurationError)

    def test_unsupported_rule_message(self):
        """Test unsupported rule message and attribute."""
        error = UnsupportedRuleError("fancy")
        assert error.rule == "fancy"
        assert str(error) == 'Unsupported validation rule "fancy", try using define()'

    def test_invalid_reference_message(self):
        """Test invalid reference message and attribute."""
        error = InvalidReferenceError("person")
        assert str(error) == 'Reference "person" is not valid / has not been added.'


class TestValidationException:
    """Test the raised validation failure."""

    def test_messages_by_path(self, form):
        """Test message lookup on the exception by dotted path."""
        with pytest.raises(ValidationException) as excinfo:
            form.run({}, exception_on_messages=True)

        error = excinfo.value
        assert error.count_messages() == 2
        assert error.get_messages("email") == ["This field cannot be left blank"]
        assert error.get_messages("person.name") == ["This field cannot be left blank"]
        assert error.get_messages("person") == {"name": ["This field cannot be left blank"]}
        assert error.get_messages("missing.path") == {}

    def test_snapshot_survives_rerun(self, form):
        """Test messages captured at raise time survive a re-run."""
        with pytest.raises(ValidationException) as excinfo:
            form.run({}, exception_on_messages=True)

        form.run({"email": "user@example.com", "person": {"name": "Jane"}})
        assert form.count_messages() == 0

        assert excinfo.value.count_messages() == 2
        assert excinfo.value.inspector is form

    def test_configured_message(self):
        """Test exception message taken from config."""
        config = CheckpointConfig(exception_message="Invalid submission")
        form = FormInspector(config=config).set_requirements({"email": True})

        with pytest.raises(ValidationException, match="Invalid submission"):
            form.run({}, exception_on_messages=True)
