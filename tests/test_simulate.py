"""
Tests for the headless simulation runner
"""

import json

from tick_pong.core.controls import InputState, ScriptedInput
from tick_pong.core.physics import PhysicsEngine
from tick_pong.simulate import main, run_simulation
from tick_pong.utils.config import GameConfig


class RecordingRenderer:
    """Renderer keeping every frame it is handed"""

    def __init__(self) -> None:
        self.frames: list[dict] = []

    def render_frame(self, state: dict) -> None:
        self.frames.append(state)


class TestRunSimulation:
    """Tests for run_simulation"""

    def test_renderer_gets_one_frame_per_tick(self) -> None:
        """Test the renderer sees the snapshot after every tick"""
        renderer = RecordingRenderer()
        engine = PhysicsEngine(GameConfig())

        summary = run_simulation(engine, 5, ScriptedInput([InputState(up=True)]), renderer)

        assert len(renderer.frames) == 5
        assert [frame["tick_count"] for frame in renderer.frames] == [1, 2, 3, 4, 5]
        assert summary["ticks"] == 5
        assert summary["final_state"]["tick_count"] == 5

    def test_input_sampled_once_per_tick(self) -> None:
        """Test the script advances by one state per tick"""
        source = ScriptedInput([InputState(up=True), InputState(), InputState(down=True)])
        engine = PhysicsEngine(GameConfig())

        run_simulation(engine, 3, source)

        assert source.index == 3
        assert engine.match.player.position.y == 0.0

    def test_event_counts(self) -> None:
        """Test that events of a long run are counted"""
        engine = PhysicsEngine(GameConfig())

        summary = run_simulation(engine, 2000, ScriptedInput([]))

        assert set(summary["events"]) == {"paddle_hits", "round_resets", "wall_bounces"}
        assert summary["events"]["wall_bounces"] > 0
        assert sum(summary["events"].values()) > 0

    def test_zero_ticks(self) -> None:
        """Test a run of zero ticks leaves the match untouched"""
        engine = PhysicsEngine(GameConfig())
        summary = run_simulation(engine, 0, ScriptedInput([]))

        assert summary["events"] == {"paddle_hits": 0, "round_resets": 0, "wall_bounces": 0}
        assert engine.tick_count == 0


class TestMain:
    """Tests for the command line entry point"""

    def test_prints_summary(self, capsys) -> None:
        """Test that the summary is printed as JSON"""
        assert main(["--ticks", "10", "--hold", "down"]) == 0

        summary = json.loads(capsys.readouterr().out)
        assert summary["ticks"] == 10
        player = next(e for e in summary["final_state"]["entities"] if e["kind"] == "player")
        assert player["position"] == [150.0, -20.0]

    def test_config_file(self, tmp_path, capsys) -> None:
        """Test running with a configuration file"""
        path = tmp_path / "config.json"
        GameConfig(PLAYER_SPEED=3.0).save_to_file(str(path))

        assert main(["--ticks", "2", "--hold", "up", "--config", str(path)]) == 0

        summary = json.loads(capsys.readouterr().out)
        player = next(e for e in summary["final_state"]["entities"] if e["kind"] == "player")
        assert player["position"] == [150.0, 6.0]

    def test_missing_config_file(self, tmp_path) -> None:
        """Test that a missing configuration exits with status 2"""
        assert main(["--config", str(tmp_path / "missing.json")]) == 2

    def test_invalid_config_file(self, tmp_path) -> None:
        """Test that an invalid configuration exits with status 2"""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"OPPONENT_POLICY": "perfect"}))

        assert main(["--config", str(path)]) == 2

    def test_config_path_is_directory(self, tmp_path) -> None:
        """Test that a directory given as configuration exits with status 2"""
        assert main(["--config", str(tmp_path)]) == 2

    def test_config_file_not_an_object(self, tmp_path) -> None:
        """Test that a JSON document other than an object exits with status 2"""
        path = tmp_path / "config.json"
        path.write_text(json.dumps([1, 2]))

        assert main(["--config", str(path)]) == 2

    def test_negative_ticks(self) -> None:
        """Test that a negative tick count is refused"""
        assert main(["--ticks", "-1"]) == 2

    def test_opponent_override(self, capsys) -> None:
        """Test selecting the opponent policy from the command line"""
        assert main(["--ticks", "1", "--opponent", "dead_zone"]) == 0

        summary = json.loads(capsys.readouterr().out)
        opponent = next(e for e in summary["final_state"]["entities"] if e["kind"] == "opponent")
        # ball level with the paddle, inside the dead zone
        assert opponent["velocity"] == [0.0, 0.0]
