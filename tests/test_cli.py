"""Tests for the px command line interface."""

import textwrap
import tomllib

import polars as pl
import pytest
from typer.testing import CliRunner

from parallaxer.cli.__main__ import app
from parallaxer.cli.config import load_chain, validate_config, write_chain_config
from parallaxer import Chain, Interval

runner = CliRunner()

PYPROJECT = textwrap.dedent("""
    [project]
    name = "demo"

    [tool.parallaxer.chain.header]
    over = [0, 4]
    steps = [
      { op = "refocus", interval = [2, 4] },
      { op = "reshape", curve = "clamp_to_unit_interval" },
      { op = "rescale", interval = [0, 100] },
    ]

    [tool.parallaxer.chain.drift]
    over = [0, 1]
    steps = [{ op = "rescale", interval = [[0, 0], [10, 20]] }]
""")


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Temporary project directory with two chains configured."""
    (tmp_path / "pyproject.toml").write_text(PYPROJECT)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path, monkeypatch):
    """Temporary directory without a pyproject.toml."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestConfig:
    """Tests for reading and writing chain configuration."""

    def test_load_chain(self, project):
        """Test a named chain is loaded from pyproject.toml."""
        chain = load_chain("header")

        assert chain.name == "header"
        assert chain.evaluate(3) == pytest.approx(50)

    def test_load_unknown_chain(self, project):
        """Test unknown names list what is available."""
        with pytest.raises(KeyError, match="Available"):
            load_chain("footer")

    def test_load_from_standalone_file(self, tmp_path):
        """Test chains can live in their own file."""
        path = tmp_path / "chains.toml"
        path.write_text('[chain.simple]\nover = [0, 10]\nsteps = [{ op = "rescale", interval = [0, 1] }]\n')

        assert load_chain("simple", path).evaluate(5) == pytest.approx(0.5)

    def test_write_preserves_other_tables(self, project):
        """Test writing a chain keeps the rest of pyproject.toml."""
        write_chain_config(Chain(Interval(0, 10), name="extra").rescale(Interval(0, 1)))

        with open(project / "pyproject.toml", "rb") as f:
            data = tomllib.load(f)

        assert data["project"]["name"] == "demo"
        assert set(data["tool"]["parallaxer"]["chain"]) == {"header", "drift", "extra"}

    def test_write_requires_name(self, project):
        """Test unnamed chains cannot be written."""
        with pytest.raises(ValueError, match="must be named"):
            write_chain_config(Chain(Interval(0, 10)))

    def test_validate_config(self):
        """Test validation collects one message per bad chain."""
        errors = validate_config({"chain": {
            "ok": {"over": [0, 1]},
            "flat": {"over": [1, 1]},
            "empty": {},
        }})

        assert len(errors) == 2
        assert validate_config({}) == ["Missing 'chain' table"]


class TestChainsCommands:
    """Tests for px chains list/check/add."""

    def test_list(self, project):
        """Test configured chains are listed with summaries."""
        result = runner.invoke(app, ["chains", "list"])

        assert result.exit_code == 0
        assert "Chains (2):" in result.output
        assert "header: [0, 4] -> refocus([2, 4])" in result.output
        assert "drift:" in result.output

    def test_list_without_pyproject(self, empty_dir):
        """Test a missing pyproject.toml is reported."""
        result = runner.invoke(app, ["chains", "list"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_check_valid(self, project):
        """Test valid chains pass the check."""
        result = runner.invoke(app, ["chains", "check"])

        assert result.exit_code == 0
        assert "2 chain(s) valid" in result.output

    def test_check_invalid(self, project):
        """Test invalid chains fail the check."""
        (project / "pyproject.toml").write_text(
            '[tool.parallaxer.chain.flat]\nover = [3, 3]\n'
        )

        result = runner.invoke(app, ["chains", "check"])

        assert result.exit_code == 1
        assert "1 problem(s) found" in result.output

    def test_add(self, empty_dir):
        """Test a chain added from the command line can be loaded back."""
        result = runner.invoke(app, [
            "chains", "add", "fade",
            "--over", "0:600",
            "--step", "refocus=0:300",
            "--step", "reshape=clamp_to_unit_interval",
            "--step", "rescale=1:0",
        ])

        assert result.exit_code == 0
        assert "Wrote chain 'fade'" in result.output
        assert load_chain("fade").evaluate(150) == pytest.approx(0.5)

    def test_add_invalid_step(self, empty_dir):
        """Test malformed steps are rejected without writing."""
        result = runner.invoke(app, ["chains", "add", "bad", "--over", "0:1", "--step", "zoom=1:2"])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not (empty_dir / "pyproject.toml").exists()


class TestSampleCommand:
    """Tests for px sample."""

    def test_sample_csv(self, project):
        """Test sampling writes a CSV table."""
        result = runner.invoke(app, ["sample", "header", "--points", "5", "--output", "out.csv"])

        assert result.exit_code == 0
        assert "Sampled chain 'header' at 5 inputs" in result.output
        table = pl.read_csv(project / "out.csv")
        assert table["value"].to_list() == pytest.approx([0, 0, 0, 50, 100])

    def test_sample_default_output(self, project):
        """Test the default output path is derived from the chain name."""
        result = runner.invoke(app, ["sample", "header", "-n", "3"])

        assert result.exit_code == 0
        assert "Using default output path header.csv" in result.output
        assert (project / "header.csv").exists()

    def test_sample_parquet_points(self, project):
        """Test point chains sample to parquet with split columns."""
        result = runner.invoke(app, ["sample", "drift", "-n", "3", "--start", "0", "--stop", "1", "-o", "drift.parquet"])

        assert result.exit_code == 0
        table = pl.read_parquet(project / "drift.parquet")
        assert table["value_x"].to_list() == pytest.approx([0, 5, 10])
        assert table["value_y"].to_list() == pytest.approx([0, 10, 20])

    def test_sample_unknown_chain(self, project):
        """Test unknown chains fail."""
        result = runner.invoke(app, ["sample", "footer"])

        assert result.exit_code == 1
        assert "Unknown chain: footer" in result.output

    def test_sample_unsupported_format(self, project):
        """Test unsupported output formats fail."""
        result = runner.invoke(app, ["sample", "header", "-o", "out.json"])

        assert result.exit_code == 1
        assert "unsupported output format" in result.output


class TestMain:
    """Tests for top-level commands."""

    def test_version(self):
        """Test version output."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "Parallaxer CLI version" in result.output

    def test_missing_command(self):
        """Test invoking without a command shows help and fails."""
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Missing command" in result.output
