"""Tests for output serialisation and the CLI."""

from __future__ import annotations

import json

from click.testing import CliRunner

from nscontext.cli import cli
from nscontext.config import ContextResult, LoadConfig
from nscontext.output import build_result, write_output
from nscontext.registry.namespace_context import NamespaceContext

XSD = "http://www.w3.org/2001/XMLSchema"
GATING = "http://www.isac-net.org/std/Gating-ML/v2.0/gating"


class TestOutput:
    def test_build_result(self):
        ctx = NamespaceContext()
        ctx.add_prefix_mapping("a", "X")
        ctx.add_prefix_mapping("b", "X")
        ctx.add_prefix_mapping("xs", XSD)
        result = build_result(LoadConfig(paths=["doc.xml"]), ctx)

        assert isinstance(result, ContextResult)
        assert result.stats == {"bindings": 3, "namespaces": 2}
        assert result.bindings[0] == {"prefix": "a", "uri": "X"}
        assert result.metadata["sources"][0].endswith("doc.xml")
        assert "generated_at" in result.metadata

    def test_write_output(self, tmp_path):
        ctx = NamespaceContext()
        ctx.add_prefix_mapping("xs", XSD)
        out = tmp_path / "nested" / "out.json"
        write_output(build_result(LoadConfig(), ctx), str(out))

        data = json.loads(out.read_text())
        assert data["version"] == "1.0"
        assert data["bindings"] == [{"prefix": "xs", "uri": XSD}]


class TestCli:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("list", "resolve", "prefix", "query"):
            assert command in result.output

    def test_list(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["list", fixture_path("schema.xml")])
        assert result.exit_code == 0
        assert "xs" in result.output
        assert "(default)" in result.output

    def test_list_writes_json(self, fixture_path, tmp_path):
        out = tmp_path / "ns.json"
        runner = CliRunner()
        result = runner.invoke(cli, [
            "list", fixture_path("schema.xml"), "--all-elements", "--no-default",
            "--quiet", "-o", str(out),
        ])
        assert result.exit_code == 0
        assert result.output == ""

        data = json.loads(out.read_text())
        prefixes = {b["prefix"] for b in data["bindings"]}
        assert prefixes == {"xs", "doc"}
        assert data["metadata"]["root_only"] is False

    def test_list_skips_broken_file(self, fixture_path, tmp_path):
        out = tmp_path / "ns.json"
        runner = CliRunner()
        result = runner.invoke(cli, [
            "list", fixture_path("broken.xml"), fixture_path("gating.xml"), "--quiet", "-o", str(out),
        ])
        assert result.exit_code == 0
        data = json.loads(out.read_text())
        assert data["stats"]["bindings"] == 3

    def test_resolve(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", fixture_path("schema.xml"), "xs"])
        assert result.exit_code == 0
        assert result.output.strip() == XSD

    def test_resolve_unbound(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", fixture_path("schema.xml"), "doc"])
        assert result.exit_code == 1
        assert "not bound" in result.output

    def test_prefix(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["prefix", fixture_path("gating.xml"), GATING])
        assert result.exit_code == 0
        assert result.output.strip() == "gating"

    def test_prefix_unknown(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["prefix", fixture_path("gating.xml"), "urn:nope"])
        assert result.exit_code == 1

    def test_query(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["query", fixture_path("schema.xml"), ".//xs:documentation"])
        assert result.exit_code == 0
        assert result.output.strip() == "xs:documentation\tLine item"

    def test_query_extra_binding(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "query", fixture_path("gating.xml"), "g:RectangleGate",
            "-n", f"g={GATING}",
        ])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["g:RectangleGate", "g:RectangleGate"]

    def test_query_unbound_prefix(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["query", fixture_path("schema.xml"), "foo:bar"])
        assert result.exit_code == 1
        assert "foo" in result.output

    def test_query_bad_binding(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["query", fixture_path("schema.xml"), "xs:element", "-n", "nouri"])
        assert result.exit_code == 2
        assert "PREFIX=URI" in result.output

    def test_query_broken_document(self, fixture_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["query", fixture_path("broken.xml"), "a:child"])
        assert result.exit_code == 1
        assert "Failed to parse" in result.output
