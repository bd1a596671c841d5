"""
Tests for the command line interface.
"""

import pytest
from click.testing import CliRunner

from dategetter import __version__
from dategetter.cli import main
from dategetter.config import Settings

from conftest import NEW_YEAR_2015


@pytest.fixture
def runner():
    return CliRunner()


class TestFormatCommand:
    """Tests for `dategetter format`."""
    
    def test_formats_timestamp(self, runner):
        result = runner.invoke(main, ["format", "--at", str(NEW_YEAR_2015), "--tz", "UTC", "-d", "tokens",
                                      "-p", "YYYY-MM-DD hh:mm:ss"])
        
        assert result.exit_code == 0
        assert result.output.strip() == "2015-01-01 00:00:00"
    
    def test_strftime_dialect(self, runner):
        result = runner.invoke(main, ["format", "-a", "0", "-z", "UTC", "-d", "strftime", "-p", "%Y"])
        
        assert result.exit_code == 0
        assert result.output.strip() == "1970"
    
    def test_bad_timezone_exits_nonzero(self, runner):
        result = runner.invoke(main, ["format", "-a", "0", "-z", "Not/AZone"])
        
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_bad_log_level_exits_nonzero(self, runner, monkeypatch):
        monkeypatch.setattr("dategetter.cli.get_settings", lambda: Settings(log_level="verbose"))

        result = runner.invoke(main, ["format", "-a", "0", "-z", "UTC"])

        assert result.exit_code == 1
        assert "Error" in result.output


def test_tokens_table(runner):
    result = runner.invoke(main, ["tokens"])
    
    assert result.exit_code == 0
    assert "YYYY" in result.output


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    
    assert __version__ in result.output
