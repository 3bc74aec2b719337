"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from leadscore import __version__
from leadscore.cli.handlers import evaluate_fail_status
from leadscore.cli.main import build_parser, main
from leadscore.exceptions import ConfigError
from leadscore.model import Analysis, LeadStatus
from leadscore.pipeline import build_report


@pytest.fixture()
def shop_file(tmp_path: Path, analyses_root: Path) -> Path:
    target = tmp_path / "shop.yaml"
    shutil.copy(analyses_root / "shop.yaml", target)
    shutil.copy(analyses_root / "shop_previous.json", tmp_path / "shop_previous.json")
    return target


def test_build_parser_accepts_score_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        [
            "score",
            "--input",
            str(tmp_path / "a.yaml"),
            "--previous",
            str(tmp_path / "b.yaml"),
            "--output-dir",
            str(tmp_path / "out"),
            "--industry",
            "eshop",
            "--fail-on-status",
            "bad",
        ]
    )

    assert args.command == "score"
    assert args.input == tmp_path / "a.yaml"
    assert args.previous == tmp_path / "b.yaml"
    assert args.output_dir == tmp_path / "out"
    assert args.industry == "eshop"
    assert args.fail_on_status == "bad"
    assert args.output_format is None


@pytest.mark.parametrize(
    ("short_args", "long_args"),
    [
        pytest.param(
            ["score", "-i", "a.yaml", "-o", "out"],
            ["score", "--input", "a.yaml", "--output-dir", "out"],
            id="out",
        ),
        pytest.param(
            ["score", "-i", "a.yaml", "-c", "x.yaml"],
            ["score", "--input", "a.yaml", "--config", "x.yaml"],
            id="config",
        ),
        pytest.param(
            ["score", "-i", "a.yaml", "-p", "b.yaml"],
            ["score", "--input", "a.yaml", "--previous", "b.yaml"],
            id="previous",
        ),
        pytest.param(["score", "-i", "a.yaml", "-v"], ["score", "--input", "a.yaml", "--verbose"], id="verbose"),
    ],
)
def test_shorthand_equivalent_to_long_form(short_args: list[str], long_args: list[str]) -> None:
    parser = build_parser()

    assert vars(parser.parse_args(short_args)) == vars(parser.parse_args(long_args))


def test_fail_on_status_rejects_workflow_states() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["score", "-i", "a.yaml", "--fail-on-status", "new"])


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


class TestScoreCommand:
    def test_prints_summary(self, shop_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["score", "-i", str(shop_file), "--no-color"])

        out = capsys.readouterr().out
        assert code == 0
        assert "shop.example.com" in out
        assert "Average (middle)" in out

    def test_no_stdout(self, shop_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["score", "-i", str(shop_file), "--no-stdout"])

        assert code == 0
        assert capsys.readouterr().out == ""

    def test_writes_reports(self, shop_file: Path) -> None:
        out = shop_file.parent / "out"

        code = main(["score", "-i", str(shop_file), "-o", str(out), "--output-format", "json,csv", "--no-stdout"])

        assert code == 0
        assert json.loads((out / "report.json").read_text(encoding="utf-8"))["status"] == "middle"
        assert (out / "issues.csv").is_file()

    def test_verbose_shows_delta(self, shop_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        previous = shop_file.parent / "shop_previous.json"

        code = main(["score", "-i", str(shop_file), "-p", str(previous), "-v", "--no-color"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Compared with analysis #1" in out
        assert "Warnings" in out

    @pytest.mark.parametrize(
        ("threshold", "expected"),
        [("middle", 1), ("bad", 0), ("super", 1), ("very_bad", 0)],
        ids=["same-tier-fails", "worse-threshold-passes", "best-threshold-fails", "worst-threshold-passes"],
    )
    def test_fail_on_status(self, shop_file: Path, threshold: str, expected: int) -> None:
        code = main(["score", "-i", str(shop_file), "--fail-on-status", threshold, "--no-stdout"])

        assert code == expected

    @pytest.mark.parametrize(
        "value",
        ["json,", ",", "json,,csv", "sarif"],
        ids=["trailing-comma", "only-comma", "empty-middle", "unknown-format"],
    )
    def test_bad_output_format_exits_2(
        self, shop_file: Path, value: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(["score", "-i", str(shop_file), "--output-format", value])

        assert code == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_invalid_config_exits_2_before_scoring(self, shop_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (shop_file.parent / "leadscore.yaml").write_text("industri: eshop\n", encoding="utf-8")

        with patch("leadscore.cli.main.score_analysis_file") as scorer:
            code = main(["score", "-i", str(shop_file)])

        assert code == 2
        scorer.assert_not_called()
        assert "[CFG004]" in capsys.readouterr().err

    def test_config_error_exits_2(self, shop_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("leadscore.cli.main.score_analysis_file", side_effect=ConfigError("bad output dir")):
            code = main(["score", "-i", str(shop_file)])

        assert code == 2
        assert "Configuration error: bad output dir" in capsys.readouterr().err

    def test_parse_error_exits_1(self, tmp_path: Path, analyses_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        broken = tmp_path / "broken.yaml"
        shutil.copy(analyses_root / "broken.yaml", broken)

        code = main(["score", "-i", str(broken)])

        assert code == 1
        assert "Scoring error:" in capsys.readouterr().err

    def test_non_utf8_analysis_exits_1(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        lead = tmp_path / "lead.yaml"
        lead.write_bytes(b"\xff\xfe")

        code = main(["score", "-i", str(lead), "--no-stdout"])

        assert code == 1
        assert "Scoring error:" in capsys.readouterr().err

    def test_passes_arguments_to_pipeline(self, shop_file: Path) -> None:
        report = build_report(Analysis(lead="x"))
        with patch("leadscore.cli.main.score_analysis_file", return_value=report) as scorer:
            code = main(
                ["score", "-i", str(shop_file), "--industry", "medical", "--output-format", "csv", "--no-stdout"]
            )

        assert code == 0
        kwargs = scorer.call_args.kwargs
        assert kwargs["industry"].value == "medical"
        assert kwargs["output_formats"] == ("csv",)
        assert kwargs["out"] is None


class TestRegistryCommand:
    def test_lists_codes(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["registry"])

        out = capsys.readouterr().out
        assert code == 0
        assert "ssl_not_https" in out
        assert out.rstrip().endswith("issue code(s)")

    def test_filters_by_category_and_severity(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["registry", "--category", "http", "--severity", "critical"])

        lines = capsys.readouterr().out.strip().splitlines()
        assert code == 0
        assert all(" http " in line and " critical " in line for line in lines[:-1])
        assert any(line.startswith("ssl_not_https") for line in lines)
        assert not any(line.startswith("ssl_expiring_soon") for line in lines)

    def test_filters_by_severity_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["registry", "--severity", "critical"])

        lines = capsys.readouterr().out.strip().splitlines()
        assert code == 0
        assert all(" critical " in line for line in lines[:-1])
        assert any(line.startswith("ssl_not_https") for line in lines)

    def test_includes_extra_catalogue(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "extra.yaml").write_text(
            "branding:\n  brand_no_logo:\n    severity: recommended\n    title: No logo\n",
            encoding="utf-8",
        )
        config = tmp_path / "custom.yaml"
        config.write_text("registry_files: [extra.yaml]\n", encoding="utf-8")

        code = main(["registry", "-c", str(config), "--category", "branding"])

        assert code == 0
        assert "brand_no_logo" in capsys.readouterr().out

    def test_bad_catalogue_exits_2(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "custom.yaml"
        config.write_text("registry_files: [missing.yaml]\n", encoding="utf-8")

        code = main(["registry", "-c", str(config)])

        assert code == 2
        assert "Configuration error" in capsys.readouterr().err


class TestValidateConfigCommand:
    def test_valid(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "leadscore.yaml"
        config.write_text("industry: eshop\n", encoding="utf-8")

        code = main(["validate-config", "-c", str(config)])

        assert code == 0
        assert "Configuration is valid." in capsys.readouterr().out

    def test_invalid(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "leadscore.yaml"
        config.write_text("output_formats: [sarif]\nindustri: eshop\n", encoding="utf-8")

        code = main(["validate-config", "-c", str(config)])

        err = capsys.readouterr().err.splitlines()
        assert code == 2
        assert err[0].startswith("[CFG004]")
        assert err[1].startswith("[CFG006]")

    def test_missing_explicit_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["validate-config", "-c", str(tmp_path / "nope.yaml")])

        assert code == 2
        assert "[CFG001]" in capsys.readouterr().err

    def test_root_lookup(self, tmp_path: Path) -> None:
        (tmp_path / "leadscore.yaml").write_text("industry: bakery\n", encoding="utf-8")

        assert main(["validate-config", "-r", str(tmp_path)]) == 2


class TestEvaluateFailStatus:
    def test_no_threshold_passes(self) -> None:
        report = build_report(Analysis(lead="x"))

        assert evaluate_fail_status(report, fail_on_status=None) == 0

    def test_clean_lead_fails_only_on_super(self) -> None:
        report = build_report(Analysis(lead="x"))

        assert report.status is LeadStatus.SUPER
        assert evaluate_fail_status(report, fail_on_status=LeadStatus.SUPER) == 1
        assert evaluate_fail_status(report, fail_on_status=LeadStatus.QUALITY_GOOD) == 0
