"""Tests for the sumvec command line."""

import pytest

from sumvec import __version__
from sumvec.cli import create_argument_parser, create_config_from_args, main
from sumvec.core.config import VerbosityLevel


class TestMain:
    def test_prints_sum(self, capsys) -> None:
        assert main([]) == 0
        assert capsys.readouterr().out == "sum is 10\n"

    def test_verbose_keeps_stdout_unchanged(self, capsys) -> None:
        assert main(["-vv"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "sum is 10\n"
        assert "step 3: +4 -> 10" in captured.err

    def test_single_verbose_logs_sequence(self, capsys) -> None:
        assert main(["-v"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "sum is 10\n"
        assert "Built sequence [1, 2, 3, 4]" in captured.err
        assert "step 0" not in captured.err

    def test_quiet_and_verbose_conflict(self, capsys) -> None:
        assert main(["-q", "-v"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Cannot use --quiet and --verbose together." in captured.err

    def test_write_failure_reported(self, monkeypatch, capsys) -> None:
        def broken_run(**kwargs):
            raise BrokenPipeError("stdout closed")

        monkeypatch.setattr("sumvec.cli.run", broken_run)
        assert main([]) == 1
        assert "Error writing result: stdout closed" in capsys.readouterr().err

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestCreateConfigFromArgs:
    @pytest.mark.parametrize(
        "argv, verbosity",
        [
            ([], VerbosityLevel.NORMAL),
            (["-q"], VerbosityLevel.QUIET),
            (["-v"], VerbosityLevel.DETAILED),
            (["-vv"], VerbosityLevel.EXPERT),
            (["-vvv"], VerbosityLevel.EXPERT),
        ],
    )
    def test_verbosity(self, argv, verbosity) -> None:
        args = create_argument_parser().parse_args(argv)
        assert create_config_from_args(args).verbosity is verbosity

    def test_range_is_not_configurable(self) -> None:
        args = create_argument_parser().parse_args(["-vv"])
        config = create_config_from_args(args)
        assert (config.range_start, config.range_stop) == (1, 5)
