import json

import pytest
from typer.testing import CliRunner

from dep_health.app.cli import app


runner = CliRunner()


@pytest.mark.usefixtures("mocked_container")
class TestAuditCommand:
    def test_json_output(self, package_json_file):
        result = runner.invoke(app, ["audit", str(package_json_file), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["totalDependencies"] == 5
        assert [r["dependency"] for r in data["results"]] == ["express", "jest", "lodash", "gpl-tool", "ghost-package"]
        assert data["results"][-1]["error"] == "Package not found: ghost-package"

    def test_human_readable_output(self, package_json_file):
        result = runner.invoke(app, ["audit", str(package_json_file)])

        assert result.exit_code == 0, result.output
        assert "DEPENDENCY HEALTH REPORT" in result.stdout
        assert "Average health score: 6.80" in result.stdout
        assert "express" in result.stdout
        assert "(Package not found: ghost-package)" in result.stdout
        with pytest.raises(json.JSONDecodeError):
            json.loads(result.stdout)

    def test_limit(self, package_json_file):
        result = runner.invoke(app, ["audit", str(package_json_file), "--limit", "2"])

        assert result.exit_code == 0, result.output
        assert "... 3 more" in result.stdout
        assert "ghost-package" not in result.stdout

    def test_no_dependencies(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"name": "empty"}', encoding="utf-8")

        result = runner.invoke(app, ["audit", str(path)])

        assert result.exit_code == 2
        assert "No dependencies found" in result.output

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{oops", encoding="utf-8")

        result = runner.invoke(app, ["audit", str(path)])

        assert result.exit_code == 2
        assert "not valid JSON" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["audit", str(tmp_path / "nope.json")])

        assert result.exit_code == 2


@pytest.mark.usefixtures("mocked_container")
class TestGitHubCommand:
    def test_audits_repository(self):
        result = runner.invoke(app, ["github", "https://github.com/acme/web"])

        assert result.exit_code == 0, result.output
        assert "Repository: acme/web" in result.stdout
        assert "lodash" in result.stdout

    def test_invalid_url(self):
        result = runner.invoke(app, ["github", "https://gitlab.com/acme/web"])

        assert result.exit_code == 2
        assert "Invalid GitHub repository URL" in result.output

    def test_manifest_not_found(self):
        result = runner.invoke(app, ["github", "https://github.com/acme/missing"])

        assert result.exit_code == 1
        assert "Could not find package.json" in result.output


@pytest.mark.usefixtures("mocked_container")
class TestScoreCommand:
    def test_json_output(self):
        result = runner.invoke(app, ["score", "express", "^4.18.2", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["dependency"] == "express"
        assert data["version"] == "^4.18.2"
        assert data["health_score"] == 10.0
        assert data["maintainers"] == 3

    def test_unknown_package(self):
        result = runner.invoke(app, ["score", "ghost-package"])

        assert result.exit_code == 0, result.output
        assert "Package: ghost-package@latest" in result.stdout
        assert "Health score: 3.0" in result.stdout
        assert "Error: Package not found: ghost-package" in result.stdout

    def test_mangled_registry_document(self):
        result = runner.invoke(app, ["score", "mangled"])

        assert result.exit_code == 0, result.output
        assert "Health score: 3.0" in result.stdout
        assert "Unreadable registry data for mangled" in result.stdout


@pytest.mark.usefixtures("mocked_container")
def test_serve_starts_uvicorn(monkeypatch):
    calls = []

    def fake_run(app_, **kwargs):
        calls.append((app_, kwargs))

    monkeypatch.setattr("uvicorn.run", fake_run)

    result = runner.invoke(app, ["serve", "--port", "4000"])

    assert result.exit_code == 0, result.output
    assert len(calls) == 1
    served, kwargs = calls[0]
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 4000
    assert served.title == "Dependency Health Visualizer"
    assert "http://127.0.0.1:4000/health" in result.stdout


def test_no_args_shows_help():
    result = runner.invoke(app, [])

    assert "audit" in result.output
    assert "github" in result.output
