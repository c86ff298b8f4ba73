import json
from pathlib import Path

from click.testing import CliRunner

from openapi_check.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliValidate:
    def test_valid_document_exits_zero(self):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(FIXTURES / "petstore.yaml"), "--output", "plain"])

        assert result.exit_code == 0
        assert "Endpoints: 3" in result.output
        assert "valid with no warnings" in result.output

    def test_invalid_document_exits_one(self):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(FIXTURES / "broken.yaml"), "--output", "plain"])

        assert result.exit_code == 1
        assert 'Path "users" must start with "/"' in result.output
        assert "OpenAPI specification is invalid" in result.output

    def test_colorful_output(self):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(FIXTURES / "petstore.yaml")])

        assert result.exit_code == 0
        assert "OpenAPI Specification Stats" in result.output

    def test_json_output(self):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(FIXTURES / "petstore.json"), "--output", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["is_valid"] is True
        assert data["info"]["openapi_version"] == "3.1.0"

    def test_strict_fails_on_warnings(self, tmp_path):
        spec = tmp_path / "openapi.yaml"
        spec.write_text(
            "openapi: 3.0.0\n"
            "info: {title: t, version: '1'}\n"
            "paths:\n"
            "  /x:\n"
            "    get:\n"
            "      responses: {'404': {description: nope}}\n"
        )
        runner = CliRunner()
        relaxed = runner.invoke(main, ["validate", str(spec), "--output", "plain"])
        strict = runner.invoke(main, ["validate", str(spec), "--output", "plain", "--strict"])

        assert relaxed.exit_code == 0
        assert strict.exit_code == 1

    def test_missing_file_exits_one(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(tmp_path / "nope.yaml"), "--output", "plain"])

        assert result.exit_code == 1

    def test_spec_path_from_environment(self):
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["validate", "--output", "plain"],
            env={"OPENAPI_SPEC_PATH": str(FIXTURES / "petstore.yaml")},
        )

        assert result.exit_code == 0
        assert "Title: Swagger Petstore" in result.output

    def test_default_spec_path(self, tmp_path, monkeypatch):
        (tmp_path / "openapi.yaml").write_text((FIXTURES / "petstore.yaml").read_text(encoding="utf-8"))
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("OPENAPI_SPEC_PATH", raising=False)

        runner = CliRunner()
        result = runner.invoke(main, ["validate", "--output", "plain"])

        assert result.exit_code == 0

    def test_undecodable_file_exits_one(self, tmp_path):
        spec = tmp_path / "openapi.yaml"
        spec.write_bytes(b"openapi: 3.0.0\ninfo: {title: \xff\xfe}\n")

        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(spec), "--output", "plain"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)


class TestCliStats:
    def test_stats_for_invalid_document_still_exit_zero(self):
        runner = CliRunner()
        result = runner.invoke(main, ["stats", str(FIXTURES / "broken.yaml"), "--output", "plain"])

        assert result.exit_code == 0
        assert "Endpoints: 2" in result.output
        assert "Validation Results" not in result.output

    def test_stats_json(self):
        runner = CliRunner()
        result = runner.invoke(main, ["stats", str(FIXTURES / "petstore.yaml"), "--output", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["stats"]["method_counts"] == {"get": 2, "post": 1}
