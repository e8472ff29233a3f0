"""Tests for the wasteproof CLI."""
import fcntl
import json

import pytest
from click.testing import CliRunner

from wasteproof_cli.main import cli

from conftest import ADMIN, BUSINESS1, BUSINESS2, COLLECTOR

EVIDENCE = "01" * 32


@pytest.fixture
def run(tmp_path):
    """Invoke the CLI against a temporary ledger."""
    runner = CliRunner()
    ledger_path = str(tmp_path / "cli_receipts.jsonl")

    def invoke(*args, height=None):
        base = ["--ledger", ledger_path]
        if height is not None:
            base += ["--height", str(height)]
        return runner.invoke(cli, base + list(args))

    return invoke


def last_json(output: str) -> dict:
    """Parse the pretty-printed JSON block at the end of the output."""
    start = output.rindex("{\n")
    return json.loads(output[start:])


@pytest.fixture
def initialized(run):
    assert run("init", "--authority", ADMIN).exit_code == 0
    return run


def submit_args(recycled=800):
    return [
        "claim", "submit", "--caller", BUSINESS1, "--date", "20230501",
        "--waste-type", "paper", "--volume", "1000", "--recycled", str(recycled),
        "--evidence", EVIDENCE,
    ]


class TestInit:

    def test_init_once(self, run):
        assert run("init", "--authority", ADMIN).exit_code == 0
        result = run("init", "--authority", ADMIN)
        assert result.exit_code == 1
        assert "Already initialized" in result.output

    def test_commands_need_init(self, run):
        result = run("claim", "stats", BUSINESS1)
        assert result.exit_code == 2


class TestClaimCommands:

    def test_submit_verify_stats(self, initialized):
        result = initialized(*submit_args())
        assert result.exit_code == 0
        assert "PENDING" in result.output

        result = initialized("claim", "verify", "1", "--caller", ADMIN, height=400)
        assert result.exit_code == 0
        assert "VERIFIED" in result.output

        result = initialized("claim", "stats", BUSINESS1)
        assert result.exit_code == 0
        stats = last_json(result.output)
        assert stats["total_waste"] == 1000
        assert stats["diversion_rate"] == 8000
        assert stats["carbon_offset"] == 96000
        assert stats["last_updated"] == 400

    def test_submit_invalid_volume(self, initialized):
        result = initialized(*submit_args(recycled=1200))
        assert result.exit_code == 1
        assert "INVALID_VOLUME" in result.output

    def test_submit_bad_evidence(self, initialized):
        args = submit_args()
        args[-1] = "not-hex"
        assert initialized(*args).exit_code == 2

    def test_verify_unauthorized(self, initialized):
        initialized(*submit_args())
        result = initialized("claim", "verify", "1", "--caller", BUSINESS2)
        assert result.exit_code == 1
        assert "UNAUTHORIZED" in result.output

        shown = last_json(initialized("claim", "show", "1").output)
        assert shown["status"] == "PENDING"
        assert shown["verifier"] is None

    def test_verify_not_found(self, initialized):
        result = initialized("claim", "verify", "9", "--caller", ADMIN)
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.output

    def test_reject(self, initialized):
        initialized(*submit_args())
        result = initialized("claim", "reject", "1", "--caller", ADMIN, height=12)
        assert result.exit_code == 0

        shown = last_json(initialized("claim", "show", "1").output)
        assert shown["status"] == "REJECTED"
        assert shown["verification_time"] == 12
        assert shown["evidence_hash"] == EVIDENCE

    def test_show_missing(self, initialized):
        assert initialized("claim", "show", "5").exit_code == 1

    def test_transfer(self, initialized):
        assert initialized("claim", "transfer", BUSINESS2, "--caller", BUSINESS1).exit_code == 1
        assert initialized("claim", "transfer", BUSINESS2, "--caller", ADMIN).exit_code == 0

        initialized(*submit_args())
        assert initialized("claim", "verify", "1", "--caller", ADMIN).exit_code == 1
        assert initialized("claim", "verify", "1", "--caller", BUSINESS2).exit_code == 0


class TestVolumeCommands:

    def test_record_totals_percentage(self, initialized):
        base = ["volume", "record", "--caller", COLLECTOR, "--business", BUSINESS1]
        assert initialized(*base, "--date", "20230501", "--general", "1000",
                           "--recyclable", "500", "--organic", "200", "--hazardous", "50").exit_code == 0

        result = initialized("volume", "percentage", BUSINESS1)
        assert result.exit_code == 0
        assert "2857" in result.output

        assert initialized(*base, "--date", "20230508", "--general", "800",
                           "--recyclable", "400", "--organic", "100", "--hazardous", "30").exit_code == 0

        totals = last_json(initialized("volume", "totals", BUSINESS1).output)
        assert totals["general_total"] == 1800
        assert totals["recyclable_total"] == 900
        assert totals["organic_total"] == 300
        assert totals["hazardous_total"] == 80
        assert totals["total_waste"] == 3080

    def test_show_record(self, initialized):
        initialized("volume", "record", "--caller", COLLECTOR, "--business", BUSINESS1,
                    "--date", "1", "--general", "5", height=99)
        record = last_json(initialized("volume", "show", BUSINESS1, "1").output)
        assert record["general"] == 5
        assert record["collector"] == COLLECTOR
        assert record["timestamp"] == 99

    def test_show_missing_record(self, initialized):
        assert initialized("volume", "show", BUSINESS1, "1").exit_code == 1


class TestLedgerCommands:

    def test_status(self, initialized):
        initialized(*submit_args())
        result = initialized("ledger", "status")
        assert result.exit_code == 0
        assert "claim_submitted" in result.output
        assert "registry_genesis" in result.output

    def test_trail_unlocked_after_command(self, initialized, tmp_path):
        assert initialized(*submit_args()).exit_code == 0
        lock_path = tmp_path / "cli_receipts.jsonl.lock"
        assert lock_path.exists()
        with open(lock_path, "a") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)

    def test_sequential_submits_get_distinct_ids(self, initialized):
        initialized(*submit_args())
        initialized(*submit_args(recycled=100))
        assert last_json(initialized("claim", "show", "2").output)["recycled_volume"] == 100
