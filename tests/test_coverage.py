"""Tests for the coverage engine."""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from doccover.analysis.coverage import DocCoverage, ExportOnlyCoverage
from doccover.analysis.privacy_policy import DEFAULT_PRIVATE_PATTERNS
from doccover.models.coverage_result import CoverageResult


class TestCoverageScenarios:
    """End-to-end ratings of the sample modules."""

    def test_two_of_three_documented(self):
        """Test foo and baz documented through items, bar left out."""
        pc = DocCoverage("dc_simple")

        assert pc.coverage() == pytest.approx(2 / 3)
        assert pc.naked() == ["bar"]
        assert pc.covered() == ["baz", "foo"]

    def test_three_of_four_documented(self):
        """Test headings covering foo, bar, and baz but not naked."""
        pc = DocCoverage("dc_covered")

        assert pc.coverage() == 0.75
        assert pc.naked() == ["naked"]

    def test_also_private_removes_naked(self):
        """Test that excluding naked leaves a fully covered module."""
        pc = DocCoverage("dc_covered", also_private=[r"^naked$"])

        assert pc.coverage() == 1
        assert pc.covered() == ["bar", "baz", "foo"]
        assert pc.naked() == []

    def test_private_override_with_naked(self):
        """Test a full override that repeats the defaults plus naked."""
        pc = DocCoverage(
            "dc_covered", private=list(DEFAULT_PRIVATE_PATTERNS) + [r"^naked$"]
        )

        assert pc.coverage() == 1

    def test_private_override_drops_defaults(self):
        """Test that an override without '^_' makes helpers count."""
        pc = DocCoverage("dc_covered", private=[r"^naked$"])

        # _helper is mentioned in the docs, naked is excluded
        assert pc.coverage() == 1
        assert "_helper" in pc.covered()

    def test_also_private_shrinks_denominator(self):
        """Test that an excluded undocumented routine does not count."""
        assert DocCoverage("dc_also_private").coverage() == 0.5
        assert DocCoverage("dc_also_private", also_private=[r"^bar$"]).coverage() == 1

    def test_markup_variants_document_once(self):
        """Test that ->naked, <naked>, and naked(x) all credit naked."""
        pc = DocCoverage("dc_markup")

        assert pc.coverage() == 1
        assert pc.covered() == ["clothed", "naked"]

    def test_package_init(self):
        """Test rating a package through its __init__ docstring."""
        assert DocCoverage("dc_pkg").coverage() == 1

    def test_submodule_with_rst_documentation(self):
        """Test a submodule documented by a Sphinx directive file."""
        pc = DocCoverage("dc_pkg.sub")

        assert pc.coverage() == 0.5
        assert pc.naked() == ["other"]

    def test_autodoc_directive_with_qualified_name(self, tmp_path):
        """Test that autofunction entries qualified with the module credit it."""
        docs = tmp_path / "sub.rst"
        docs.write_text(
            ".. autofunction:: dc_pkg.sub.helper\n.. autofunction:: other\n"
        )
        pc = DocCoverage("dc_pkg.sub", pod_from=str(docs))

        assert pc.coverage() == 1
        assert pc.covered() == ["helper", "other"]


class TestOwnershipAndPrivacy:
    """Imported and private routines never enter the eligible set."""

    def test_imported_routines_not_credited(self):
        """Test that documented imports are neither covered nor naked."""
        pc = DocCoverage("dc_covered")
        pc.coverage()

        eligible = set(pc.covered()) | set(pc.naked())
        assert "join" not in eligible
        assert "borrowed" not in eligible

    def test_documented_private_routine_not_counted(self):
        """Test that a documented private helper stays out of the count."""
        pc = DocCoverage("dc_covered")
        pc.coverage()

        assert "_helper" not in pc.covered()
        assert "_helper" not in pc.naked()


class TestUnrated:
    """Conditions that produce no rating."""

    def test_missing_documentation(self):
        """Test a module whose source has no docstring and no doc file."""
        pc = DocCoverage("dc_nodocs")

        assert pc.coverage() is None
        assert "No documentation found" in pc.why_unrated()

    def test_missing_pod_from_file(self, tmp_path):
        """Test that an explicit but absent documentation file is unrated."""
        pc = DocCoverage("dc_simple", pod_from=str(tmp_path / "gone.rst"))

        assert pc.coverage() is None
        assert "No documentation found" in pc.why_unrated()

    def test_module_unavailable(self):
        """Test a module that raises while being imported."""
        pc = DocCoverage("dc_broken")

        assert pc.coverage() is None
        assert "Cannot load module 'dc_broken'" in pc.why_unrated()

    def test_module_unknown_with_explicit_docs(self, tmp_path):
        """Test that an unknown module is unrated even with docs."""
        docs = tmp_path / "docs.rst"
        docs.write_text("- foo\n")
        pc = DocCoverage("dc_not_a_module", pod_from=str(docs))

        assert pc.coverage() is None
        assert "Cannot load module" in pc.why_unrated()

    def test_documentation_not_utf8(self, tmp_path):
        """Test that undecodable bytes in a doc file are tolerated."""
        docs = tmp_path / "docs.md"
        docs.write_bytes(b"- foo\n- caf\xe9\n")
        pc = DocCoverage("dc_simple", pod_from=str(docs))

        assert pc.coverage() == pytest.approx(1 / 3)
        assert pc.covered() == ["foo"]

    def test_documentation_module_with_syntax_error(self, tmp_path):
        """Test that an unparsable Python documentation source is unrated."""
        docs = tmp_path / "dc_bad_docs.py"
        docs.write_text('"""Docs.\n\n- foo\n"""\ndef foo(:\n')
        pc = DocCoverage("dc_simple", pod_from=str(docs))

        assert pc.coverage() is None
        assert "Cannot parse documentation for 'dc_simple'" in pc.why_unrated()
        assert pc.naked() == []

    def test_no_eligible_symbols(self):
        """Test that zero eligible routines is not a zero rating."""
        pc = DocCoverage("dc_empty")

        assert pc.coverage() is None
        assert "defines no public routines" in pc.why_unrated()

    def test_everything_private(self):
        """Test that excluding every name leaves the module unrated."""
        pc = DocCoverage("dc_simple", private=["."])

        assert pc.coverage() is None

    def test_queries_on_unrated_module(self):
        """Test that covered and naked are empty when unrated."""
        pc = DocCoverage("dc_nodocs")

        assert pc.covered() == []
        assert pc.naked() == []
        assert pc.uncovered() == []

    def test_rated_module_has_no_reason(self):
        """Test that why_unrated is None after a successful rating."""
        pc = DocCoverage("dc_simple")
        pc.coverage()

        assert pc.why_unrated() is None


class TestQueries:
    """Covered/naked queries and their relation to coverage()."""

    def test_partition_of_eligible_set(self):
        """Test that covered and naked are disjoint and complete."""
        pc = DocCoverage("dc_covered")
        rating = pc.coverage()

        covered, naked = set(pc.covered()), set(pc.naked())
        assert covered.isdisjoint(naked)
        assert covered | naked == {"foo", "bar", "baz", "naked"}
        assert rating == pytest.approx(len(covered) / (len(covered) + len(naked)))

    def test_naked_without_prior_coverage(self):
        """Test that naked computes coverage lazily."""
        assert DocCoverage("dc_simple").naked() == ["bar"]

    def test_covered_without_prior_coverage(self):
        """Test that covered computes coverage lazily."""
        assert DocCoverage("dc_simple").covered() == ["baz", "foo"]

    def test_naked_is_idempotent(self):
        """Test that repeated naked calls agree."""
        pc = DocCoverage("dc_covered")

        assert pc.naked() == pc.naked()

    def test_uncovered_is_naked(self):
        """Test the uncovered alias."""
        pc = DocCoverage("dc_simple")

        assert pc.uncovered() == pc.naked() == ["bar"]

    def test_pod_from_overrides_search(self, tmp_path):
        """Test that an explicit documentation file is parsed instead."""
        docs = tmp_path / "simple.rst"
        docs.write_text("Reference\n=========\n\n- foo\n- bar\n- baz\n")
        pc = DocCoverage("dc_simple", pod_from=str(docs))

        assert pc.coverage() == 1

    def test_coverage_rereads_documentation(self, tmp_path):
        """Test that each coverage call parses the documentation again."""
        docs = tmp_path / "simple.md"
        docs.write_text("- foo\n")
        pc = DocCoverage("dc_simple", pod_from=str(docs))

        assert pc.coverage() == pytest.approx(1 / 3)

        docs.write_text("- foo\n- bar\n- baz\n")
        # Queries keep reading the cached map
        assert pc.naked() == ["bar", "baz"]
        assert pc.coverage() == 1
        assert pc.naked() == []

    def test_failed_recompute_clears_cache(self, tmp_path):
        """Test that a later unrated computation discards the old map."""
        docs = tmp_path / "simple.rst"
        docs.write_text("- foo\n")
        pc = DocCoverage("dc_simple", pod_from=str(docs))
        pc.coverage()

        docs.unlink()

        assert pc.coverage() is None
        assert pc.covered() == []


class TestResult:
    """Bundled results for reporting."""

    def test_result_of_rated_module(self):
        """Test that result() carries rating and both lists."""
        result = DocCoverage("dc_simple").result()

        assert isinstance(result, CoverageResult)
        assert result.package == "dc_simple"
        assert result.has_rating
        assert result.covered == ["baz", "foo"]
        assert result.naked == ["bar"]
        assert result.total_items == 3
        assert result.reason is None

    def test_result_of_unrated_module(self):
        """Test that result() explains a missing rating."""
        result = DocCoverage("dc_empty").result()

        assert result.rating is None
        assert not result.has_rating
        assert result.covered == []
        assert result.naked == []
        assert "defines no public routines" in result.reason


class TestExportOnlyCoverage:
    """Coverage limited to __all__."""

    def test_restricted_to_exports(self):
        """Test that unexported routines are not counted."""
        assert DocCoverage("dc_exports").coverage() == 0.5
        assert ExportOnlyCoverage("dc_exports").coverage() == 1

    def test_module_without_all(self):
        """Test that modules without __all__ are checked in full."""
        assert ExportOnlyCoverage("dc_simple").coverage() == pytest.approx(2 / 3)


class TestDebugLogging:
    """Progress diagnostics follow the debug flag."""

    def test_debug_logs_progress(self, caplog):
        """Test that debug=True logs each stage."""
        caplog.set_level(logging.DEBUG, logger="doccover")

        DocCoverage("dc_simple", debug=True).coverage()

        assert "getting documentation location for 'dc_simple'" in caplog.text
        assert "walking symbols" in caplog.text

    def test_quiet_without_debug(self, caplog):
        """Test that progress is not logged without the flag."""
        caplog.set_level(logging.DEBUG, logger="doccover.analysis.coverage")

        DocCoverage("dc_simple").coverage()

        assert "walking symbols" not in caplog.text
