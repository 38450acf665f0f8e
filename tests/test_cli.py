"""
CLI smoke tests.
"""

import json
import logging

import pytest

from peoplepulse.cli import main


def _run_json(capsys, *argv):
    assert main([*argv, "--json"]) == 0
    return json.loads(capsys.readouterr().out)


class TestCLI:
    """Tests for the people-pulse command."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_ppi_default_reading(self, capsys):
        payload = _run_json(capsys, "ppi")
        assert payload["category"] == "Good"
        assert payload["confidence"] == 100

    def test_ppi_factor_override(self, capsys):
        payload = _run_json(capsys, "ppi", "--factor", "inflationRate=15", "--previous", "80")
        assert payload["factors"]["inflation_rate"] == 15
        assert payload["trend"] == "declining"

    def test_ppi_from_file(self, capsys, tmp_path, reference_factors):
        path = tmp_path / "factors.json"
        del reference_factors["pollApproval"]
        path.write_text(json.dumps(reference_factors), encoding="utf-8")
        payload = _run_json(capsys, "ppi", "--file", str(path))
        assert payload["confidence"] == 92

    def test_ppi_bad_pair(self, capsys):
        assert main(["ppi", "--factor", "inflationRate"]) == 1
        assert "NAME=VALUE" in capsys.readouterr().out

    def test_ppi_text(self, capsys):
        assert main(["ppi"]) == 0
        out = capsys.readouterr().out
        assert "People Pulse Index" in out
        assert "Economic" in out

    def test_corruption(self, capsys):
        payload = _run_json(capsys, "corruption")
        assert payload["overall"] == 68
        assert payload["public_mood"] == "neutral"

    def test_sector_risk(self, capsys):
        payload = _run_json(capsys, "sector-risk", "Healthcare")
        assert payload == {"risk": "critical", "score": 80, "factors": ["Worsening trend"]}

    def test_simulate(self, capsys):
        payload = _run_json(capsys, "simulate", "--scenario", "economic crisis", "--seed", "5")
        assert sum(r["seats"] for r in payload["results"]) == 250

    def test_simulate_reproducible(self, capsys):
        first = _run_json(capsys, "simulate", "--seed", "8")
        second = _run_json(capsys, "simulate", "--seed", "8")
        assert first == second

    def test_simulate_unknown_scenario(self, capsys):
        assert main(["simulate", "--scenario", "Alien Invasion"]) == 1
        assert "Status Quo" in capsys.readouterr().out

    def test_simulate_text(self, capsys):
        assert main(["simulate"]) == 0
        assert "Seats:" in capsys.readouterr().out

    def test_diaspora(self, capsys):
        payload = _run_json(capsys, "diaspora", "--seed", "1")
        assert payload["active_users"] == 70
        assert payload["total_population"] == 1_770_000

    def test_coalitions(self, capsys):
        payload = _run_json(capsys, "coalitions")
        assert len(payload) == 6
        assert payload[0]["parties"] == ["PS", "PD"]

    def test_coalitions_none_reach_threshold(self, capsys):
        assert main(["coalitions", "--threshold", "138"]) == 0
        assert "No coalition" in capsys.readouterr().out

    def test_command_logged_at_debug(self, capsys, caplog):
        with caplog.at_level(logging.DEBUG, logger="peoplepulse"):
            assert main(["--log-level", "DEBUG", "sector-risk", "Police"]) == 0
        assert any(
            r.name == "peoplepulse.cli" and "sector-risk" in r.getMessage()
            for r in caplog.records
        )

    @pytest.mark.parametrize("command", [["corruption"], ["sector-risk", "Police"], ["diaspora"], ["coalitions"]])
    def test_text_output(self, capsys, command):
        assert main(command) == 0
        assert "People Pulse" in capsys.readouterr().out
