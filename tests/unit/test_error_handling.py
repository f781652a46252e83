"""
Unit tests for the error hierarchy and error handler.
"""

from institution_lab.domain.exceptions import (
    InstitutionLabError, InvalidEntity, InvalidInput, ConfigurationError
)
from institution_lab.infrastructure.error_handling.handler import ErrorHandler


class TestExceptions:
    """Test exception hierarchy."""

    def test_str_without_context(self):
        assert str(InvalidInput("Institutions to search must not be None")) == (
            "Institutions to search must not be None"
        )

    def test_str_with_context(self):
        error = InstitutionLabError("Broken", context={'path': "lab.json"})
        assert str(error) == "Broken (Context: path=lab.json)"

    def test_invalid_entity_carries_field(self):
        error = InvalidEntity("rating must be a finite number", field='rating', value=float('nan'))
        assert error.field == 'rating'
        assert isinstance(error, ValueError)
        assert isinstance(error, InstitutionLabError)

    def test_configuration_error_is_not_value_error(self):
        assert not isinstance(ConfigurationError("x"), ValueError)


class TestErrorHandler:
    """Test ErrorHandler logging levels and user messages."""

    def test_invalid_entity_logged_critical(self, mock_logger):
        handler = ErrorHandler(mock_logger)
        error = InvalidEntity("name must be non-empty", field='name', value="")

        message = handler.handle_error(error, {'component': 'main'})

        assert message == "Invalid institution (field: name): name must be non-empty"
        mock_logger.critical.assert_called_once()
        kwargs = mock_logger.critical.call_args.kwargs
        assert kwargs['field'] == 'name'
        assert kwargs['value'] == "''"
        assert kwargs['component'] == 'main'
        assert kwargs['error_type'] == 'InvalidEntity'

    def test_invalid_input_logged_warning(self, mock_logger):
        handler = ErrorHandler(mock_logger)

        message = handler.handle_error(InvalidInput("missing"), {})

        assert message == "Invalid input: missing"
        mock_logger.warning.assert_called_once()

    def test_configuration_error_message(self, mock_logger):
        handler = ErrorHandler(mock_logger)
        error = ConfigurationError("Invalid configuration: bad level", context={'path': "lab.json"})

        message = handler.handle_error(error, {})

        assert message.startswith("Configuration error: Invalid configuration: bad level")
        assert mock_logger.warning.call_args.kwargs['path'] == "lab.json"

    def test_base_error_message(self, mock_logger):
        assert ErrorHandler(mock_logger).create_user_message(InstitutionLabError("oops")) == "Error: oops"

    def test_unexpected_error_logged_error(self, mock_logger):
        handler = ErrorHandler(mock_logger)

        message = handler.handle_error(RuntimeError("boom"), {})

        assert message == "Unexpected error: boom"
        mock_logger.error.assert_called_once()

    def test_traceback_included_for_raised_errors(self, mock_logger):
        handler = ErrorHandler(mock_logger)
        try:
            raise InvalidInput("missing")
        except InvalidInput as e:
            handler.log_error(e, {})

        assert "Traceback" in mock_logger.warning.call_args.kwargs['traceback']
