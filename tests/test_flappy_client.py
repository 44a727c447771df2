"""Tests for flappy_client.py - command-line parsing (no display needed)."""
import pytest

from flappy_ball.constants import RENDER_FPS
from flappy_ball.flappy_client import parse_args


@pytest.mark.unit
class TestParseArgs:
    """--fps and --seed handling."""

    def test_defaults(self):
        args = parse_args([])

        assert args.fps == RENDER_FPS
        assert args.seed is None

    def test_custom_values(self):
        args = parse_args(["--fps", "30", "--seed", "42"])

        assert args.fps == 30
        assert args.seed == 42

    @pytest.mark.parametrize("fps", ["0", "-5", "fast"])
    def test_rejects_bad_fps(self, fps):
        with pytest.raises(SystemExit):
            parse_args(["--fps", fps])
