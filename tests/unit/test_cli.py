from __future__ import annotations

import json
from contextlib import asynccontextmanager
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest


def _report(username: str = "octocat"):
    from devmatch.assessment.models import Assessment
    from devmatch.matching.models import JobMatch, JobMatchReport

    return JobMatchReport(
        username=username,
        assessment=Assessment(username=username, skills=["Python"], overall_score=0.7),
        assessment_source="heuristic",
        matches=[
            JobMatch(
                job_id=2,
                job_title="Python Data Scientist",
                company="DataTech Solutions",
                match_score=0.58,
                matching_skills=["Python"],
                missing_skills=["Pandas"],
                rationale="Potential match.",
            )
        ],
        postings_considered=5,
    )


def test_cli_match_mode_calls_pipeline_service(monkeypatch, capsys) -> None:
    from devmatch.__main__ import main

    mock = AsyncMock(return_value=_report())
    monkeypatch.setattr("devmatch.matching.service.run_matching", mock)

    exit_code = main(["match", "octocat", "--location", "Berlin"])

    assert exit_code == 0
    mock.assert_awaited_once()
    assert mock.await_args.kwargs["location"] == "Berlin"
    out = capsys.readouterr().out
    assert "Top matches (1 of 5 postings):" in out
    assert "Python Data Scientist @ DataTech Solutions" in out


def test_cli_match_json_and_output_file(monkeypatch, capsys, tmp_path) -> None:
    from devmatch.__main__ import main

    monkeypatch.setattr(
        "devmatch.matching.service.run_matching", AsyncMock(return_value=_report())
    )
    output = tmp_path / "reports" / "match.json"

    exit_code = main(["match", "octocat", "--json", "--output", str(output)])

    assert exit_code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["matches"][0]["job_id"] == 2
    assert json.loads(output.read_text(encoding="utf-8")) == printed


def test_cli_save_writes_under_output_dir(monkeypatch, tmp_path) -> None:
    from devmatch.__main__ import main

    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path))
    monkeypatch.setattr(
        "devmatch.matching.service.run_matching", AsyncMock(return_value=_report())
    )

    assert main(["match", "octocat", "--save"]) == 0

    saved = list(tmp_path.glob("match_*.json"))
    assert len(saved) == 1


def test_cli_unknown_user_exits_with_error(monkeypatch, capsys) -> None:
    from devmatch.__main__ import main
    from devmatch.errors import NotFoundError

    monkeypatch.setattr(
        "devmatch.matching.service.run_analysis",
        AsyncMock(side_effect=NotFoundError("GitHub user 'ghost' not found")),
    )

    assert main(["analyze", "ghost"]) == 1
    assert "ghost" in capsys.readouterr().err


def test_cli_github_outage_exits_with_error(monkeypatch, capsys) -> None:
    from devmatch.__main__ import main
    from devmatch.errors import UpstreamUnavailableError

    monkeypatch.setattr(
        "devmatch.matching.service.run_matching",
        AsyncMock(side_effect=UpstreamUnavailableError("rate limited", status_code=403)),
    )

    assert main(["match", "octocat"]) == 1
    assert "temporarily unavailable" in capsys.readouterr().err


def test_cli_jobs_mode_lists_postings(monkeypatch, capsys, now) -> None:
    from devmatch.__main__ import main
    from devmatch.jobs.samples import sample_postings

    seen = {}

    async def _collect(location):
        seen["location"] = location
        return sample_postings(now)

    @asynccontextmanager
    async def _fake_service(settings=None, **kwargs):
        yield SimpleNamespace(jobs=SimpleNamespace(collect=_collect))

    monkeypatch.setattr("devmatch.matching.service.open_matching_service", _fake_service)

    assert main(["jobs", "--location", "Austin"]) == 0

    assert seen["location"] == "Austin"
    assert "[3] Frontend React Developer @ StartupXYZ" in capsys.readouterr().out


def test_cli_without_mode_prints_help(capsys) -> None:
    from devmatch.__main__ import main

    assert main([]) == 0
    assert "usage: devmatch" in capsys.readouterr().out


def test_cli_parser_supports_subcommands() -> None:
    from devmatch.__main__ import create_parser

    parser = create_parser()

    assert parser.parse_args(["profile", "octocat"]).mode == "profile"
    match_args = parser.parse_args(["match", "octocat", "--location", "Remote"])
    assert match_args.location == "Remote"
    postings_args = parser.parse_args(["postings", "update", "3", "posting.yaml"])
    assert postings_args.postings_cmd == "update"
    assert postings_args.id == 3


def test_cli_requires_username() -> None:
    from devmatch.__main__ import main

    with pytest.raises(SystemExit):
        main(["match"])


class TestPostingsCommand:
    """End-to-end posting store management through the CLI."""

    def _write_posting(self, tmp_path, name="posting.yaml", **overrides):
        fields = {
            "title": "Backend Engineer",
            "company": "Acme",
            "location": "Berlin, Germany",
            "required_skills": ["Python", "PostgreSQL"],
            "experience_level": "Mid",
            "salary_min": 60000,
            "salary_max": 80000,
            "remote_options": "Hybrid",
        }
        fields.update(overrides)
        path = tmp_path / name
        if path.suffix == ".json":
            path.write_text(json.dumps(fields), encoding="utf-8")
        else:
            lines = []
            for key, value in fields.items():
                lines.append(f"{key}: {json.dumps(value)}")
            path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    def test_add_list_show_deactivate(self, tmp_path, capsys) -> None:
        from devmatch.__main__ import main

        db = tmp_path / "postings.db"
        posting_file = self._write_posting(tmp_path)

        assert main(["postings", "--db", str(db), "add", str(posting_file)]) == 0
        assert "Created posting 1: Backend Engineer @ Acme" in capsys.readouterr().out

        assert main(["postings", "--db", str(db), "list", "--json"]) == 0
        listed = json.loads(capsys.readouterr().out)
        assert [posting["title"] for posting in listed] == ["Backend Engineer"]

        assert main(["postings", "--db", str(db), "show", "1"]) == 0
        shown = json.loads(capsys.readouterr().out)
        assert shown["remote_options"] == "Hybrid"
        assert shown["salary_max"] == 80000

        assert main(["postings", "--db", str(db), "deactivate", "1"]) == 0
        capsys.readouterr()

        assert main(["postings", "--db", str(db), "list"]) == 0
        assert "No active postings." in capsys.readouterr().out

    def test_update_from_json_file(self, tmp_path, capsys) -> None:
        from devmatch.__main__ import main

        db = tmp_path / "postings.db"
        main(["postings", "--db", str(db), "add", str(self._write_posting(tmp_path))])
        update_file = self._write_posting(
            tmp_path, "update.json", title="Staff Engineer", experience_level="Senior"
        )

        assert main(["postings", "--db", str(db), "update", "1", str(update_file)]) == 0
        assert "Updated posting 1: Staff Engineer @ Acme" in capsys.readouterr().out

    def test_unknown_id_fails(self, tmp_path, capsys) -> None:
        from devmatch.__main__ import main

        db = tmp_path / "postings.db"

        assert main(["postings", "--db", str(db), "show", "99"]) == 1
        assert main(["postings", "--db", str(db), "deactivate", "99"]) == 1
        assert "Posting 99 not found" in capsys.readouterr().err

    def test_invalid_posting_file_fails(self, tmp_path, capsys) -> None:
        from devmatch.__main__ import main

        db = tmp_path / "postings.db"
        bad = self._write_posting(tmp_path, salary_min=90000, salary_max=10000)

        assert main(["postings", "--db", str(db), "add", str(bad)]) == 1
        assert "Invalid posting file" in capsys.readouterr().err

    def test_unusable_db_path_fails_cleanly(self, tmp_path, capsys) -> None:
        from devmatch.__main__ import main

        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file", encoding="utf-8")

        assert main(["postings", "--db", str(blocker / "postings.db"), "list"]) == 1
        assert "Cannot open postings database" in capsys.readouterr().err
