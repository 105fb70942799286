"""
Tests for diagnostics accounting and the exit status policy.
"""

from unittest.mock import patch

import pytest

from dtsugar.diag import Diagnostics, ExitStatus, FatalConversionError, ConversionError, ConfigError


class TestExitStatus:
    """Tests for the exit status values and their priority."""

    def test_values(self):
        """The values are part of the command line contract."""
        assert ExitStatus.OK == 0
        assert ExitStatus.BAD_ARGS == 1
        assert ExitStatus.BAD_INPUT == 2
        assert ExitStatus.WARNINGS == 3
        assert ExitStatus.FORCED_ERRORS == 10
        assert ExitStatus.ILLEGAL_NODE == 11
        assert ExitStatus.MISSING_TARGET == 12

    def test_clean(self):
        assert Diagnostics().exit_status() == ExitStatus.OK

    def test_warnings(self):
        diag = Diagnostics()
        diag.warning("w")
        assert diag.exit_status() == ExitStatus.WARNINGS

    def test_errors_take_priority(self):
        diag = Diagnostics()
        diag.warning("w")
        diag.error("e")
        assert diag.exit_status() == ExitStatus.FORCED_ERRORS


class TestReporting:
    """Tests for counting and reporting through the log helpers."""

    def test_warning_reported(self):
        diag = Diagnostics()
        with patch('dtsugar.log._warning') as mock_warning:
            diag.warning("target-path not supported", 7)

        mock_warning.assert_called_once()
        assert mock_warning.call_args[0][0] == "line 7: target-path not supported"
        assert diag.warnings == 1
        assert diag.messages == [("warning", "line 7: target-path not supported")]

    def test_error_reported(self):
        diag = Diagnostics()
        with patch('dtsugar.log._error') as mock_error:
            diag.error("illegal node name '__symbols__'")

        mock_error.assert_called_once_with("illegal node name '__symbols__'")
        assert diag.errors == 1

    def test_fatal(self):
        """fatal() reports and returns the exception for the caller to raise."""
        diag = Diagnostics()
        with patch('dtsugar.log._error') as mock_error:
            err = diag.fatal(ExitStatus.MISSING_TARGET, "no 'target' property in node fragment@0", 6)

        mock_error.assert_called_once()
        assert isinstance(err, FatalConversionError)
        assert isinstance(err, ConversionError)
        assert err.exit_status == ExitStatus.MISSING_TARGET
        assert err.line_number == 6
        assert err.message == "no 'target' property in node fragment@0"
        assert str(err) == "line 6: no 'target' property in node fragment@0"

    def test_config_error_status(self):
        assert ConfigError.exit_status == ExitStatus.BAD_ARGS
        with pytest.raises(ConversionError):
            raise ConfigError("bad")


class TestRootProperties:
    """Tests for root property warnings."""

    def test_first_only(self):
        diag = Diagnostics(verbose=0)
        assert diag.root_property("a = <1>;") is True
        assert diag.root_property("b = <2>;") is False
        assert diag.root_property("c = <3>;") is False
        assert diag.root_properties == 3
        assert diag.warnings == 1

    def test_verbose_every_occurrence(self):
        diag = Diagnostics(verbose=1)
        for i in range(3):
            assert diag.root_property(f"p{i} = <{i}>;") is True
        assert diag.root_properties == 3
        assert diag.warnings == 3

    def test_warning_names_property(self):
        diag = Diagnostics()
        diag.root_property('compatible = "brcm,bcm2835";', 5)
        assert diag.messages[0] == ("warning", "line 5: property 'compatible = \"brcm,bcm2835\";' found in root node")


class TestSummary:
    """Tests for the verbose summary line."""

    def test_summary(self):
        diag = Diagnostics()
        diag.warning("w")
        diag.root_property("a = <1>;")
        summary = diag.summary(lines_read=12, bytes_read=300)
        assert "12 lines" in summary
        assert "300 bytes" in summary
        assert "0 errors" in summary
        assert "2 warnings" in summary
        assert "1 root property" in summary

    def test_summary_plural_root_properties(self):
        diag = Diagnostics()
        diag.root_property("a = <1>;")
        diag.root_property("b = <1>;")
        assert "2 root properties" in diag.summary(1, 1)
