"""Tests for the headless runner and the command line entry point."""

import pytest
from rich.console import Console

from armsim.__main__ import build_parser, main
from armsim.headless import demo_script, print_summary, run_headless, summary_table
from armsim.input.snapshot import InputSnapshot
from armsim.session import ArmSession


class TestRunHeadless:
    def test_runs_requested_number_of_ticks(self):
        frame = run_headless(ArmSession(), seconds=2.0, fps=60)
        assert frame.tick == 120

    def test_demo_script_moves_the_arm(self):
        frame = run_headless(ArmSession(), seconds=3.0, fps=60, script=demo_script)
        assert frame.joints.shoulder == pytest.approx(60.0)
        assert frame.joints.base == pytest.approx(90.0)
        assert frame.gripper.is_open
        assert 0.0 < frame.gripper.current_angle <= 30.0

    def test_stops_on_quit(self):
        frame = run_headless(
            ArmSession(), seconds=10.0, fps=10, script=lambda t: InputSnapshot(quit=t >= 1.0)
        )
        assert frame.quit_requested
        assert frame.tick == 11

    def test_zero_seconds_returns_initial_frame(self):
        session = ArmSession()
        assert run_headless(session, 0.0, 60) is session.frame

    @pytest.mark.parametrize("seconds, fps", [(-1.0, 60), (1.0, 0)])
    def test_invalid_arguments(self, seconds, fps):
        with pytest.raises(ValueError):
            run_headless(ArmSession(), seconds, fps)


class TestSummary:
    def test_table_rows(self):
        frame = ArmSession().frame
        table = summary_table(frame)
        assert table.row_count == 7

    def test_print_summary(self):
        console = Console(record=True, width=200)
        print_summary(ArmSession().frame, console)
        text = console.export_text()
        assert "Reach" in text
        assert "4.50" in text


class TestCli:
    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.fps == 60
        assert args.headless is None
        assert args.log_level == "INFO"

    def test_headless_main(self, capsys):
        assert main(["--headless", "0.5", "--fps", "30", "--log-level", "WARNING"]) == 0
        out = capsys.readouterr().out
        assert "Arm state after 15 ticks" in out

    def test_rejects_non_positive_fps(self):
        assert main(["--headless", "1", "--fps", "0"]) == 2
