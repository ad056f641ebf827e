"""Analysis engine for Scalpel."""

import fnmatch
import sys
from pathlib import Path
from typing import Iterable, Union

from scalpel.checks import Check, CheckContext, CheckRegistry
from scalpel.core.config import Config
from scalpel.core.fixer import FixConflictError, apply_fixes
from scalpel.core.sink import DiagnosticSink
from scalpel.core.types import AnalysisResult, Diagnostic
from scalpel.directives.classifier import classify
from scalpel.directives.extractor import AnnotationExtractor, ExtractionError
from scalpel.directives.registry import build_line_suppressions
from scalpel.lang import get_analyzer_for
from scalpel.lang.base import LanguageAnalyzer

SKIP_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "node_modules",
    "vendor",
    "__pycache__",
    "build",
    "dist",
}


class EngineError(Exception):
    """Error during analysis."""

    pass


class AnalysisEngine:
    """Runs checks over source files and applies their fixes."""

    def __init__(
        self,
        config: Config,
        verbose: bool = False,
        quiet: bool = False,
    ) -> None:
        """Initialize the analysis engine.

        Args:
            config: Application configuration.
            verbose: Enable verbose output.
            quiet: Suppress progress output.
        """
        self.config = config
        self.verbose = verbose
        self.quiet = quiet

    def analyze(self, targets: Union[str, Iterable[str]]) -> AnalysisResult:
        """Check every supported file under the targets.

        Args:
            targets: Files and/or directories.

        Returns:
            AnalysisResult with diagnostics and per-file errors.

        Raises:
            EngineError: If a target does not exist.
        """
        target_list = [targets] if isinstance(targets, str) else list(targets)
        files = self._collect_files(target_list)
        result = AnalysisResult(target=", ".join(target_list))

        if self.verbose:
            self._log(f"Found {len(files)} file(s) to check")

        for path in files:
            analyzer = get_analyzer_for(str(path))
            if analyzer is None:
                continue
            try:
                diagnostics = self._check_bytes(path.read_bytes(), str(path), analyzer)
            except (OSError, ExtractionError) as e:
                self._record_error(result, f"{path}: {e}")
                continue

            result.files_checked += 1
            result.diagnostics.extend(diagnostics)

            if self.verbose and diagnostics:
                self._log(f"  {path}: {len(diagnostics)} diagnostic(s)")

        return result

    def fix(self, targets: Union[str, Iterable[str]]) -> AnalysisResult:
        """Apply fixes in place until no fixable diagnostic remains.

        Args:
            targets: Files and/or directories.

        Returns:
            AnalysisResult with the diagnostics left after fixing.

        Raises:
            EngineError: If a target does not exist.
        """
        target_list = [targets] if isinstance(targets, str) else list(targets)
        files = self._collect_files(target_list)
        result = AnalysisResult(target=", ".join(target_list))

        for path in files:
            analyzer = get_analyzer_for(str(path))
            if analyzer is None:
                continue
            try:
                original = path.read_bytes()
                fixed, applied, remaining = self._fix_bytes(original, str(path), analyzer)
                if fixed != original:
                    path.write_bytes(fixed)
            except (OSError, ExtractionError, FixConflictError, EngineError) as e:
                self._record_error(result, f"{path}: {e}")
                continue

            result.files_checked += 1
            result.fixes_applied += applied
            result.diagnostics.extend(remaining)

            if applied and not self.quiet:
                self._log(f"Fixed {applied} issue(s) in {path}")

        return result

    def check_source(self, source: str, path: str) -> list[Diagnostic]:
        """Check in-memory source as if it lived at ``path``.

        Raises:
            EngineError: If no analyzer supports the path.
        """
        analyzer = self._require_analyzer(path)
        return self._check_bytes(source.encode("utf-8"), path, analyzer)

    def fix_source(self, source: str, path: str) -> tuple[str, int]:
        """Fix in-memory source; returns the new source and fix count.

        Raises:
            EngineError: If no analyzer supports the path or fixes do not converge.
            FixConflictError: If fixes in one pass overlap.
        """
        analyzer = self._require_analyzer(path)
        fixed, applied, _ = self._fix_bytes(source.encode("utf-8"), path, analyzer)
        return fixed.decode("utf-8"), applied

    def _require_analyzer(self, path: str) -> LanguageAnalyzer:
        analyzer = get_analyzer_for(path)
        if analyzer is None:
            raise EngineError(f"Unsupported file type: {path}")
        return analyzer

    def _check_bytes(
        self, source: bytes, path: str, analyzer: LanguageAnalyzer
    ) -> list[Diagnostic]:
        """Run every enabled check over one file's content."""
        ast = analyzer.parse_bytes(source, path)
        annotations = AnnotationExtractor(analyzer).extract(ast)
        directives = [classify(annotation) for annotation in annotations]
        sink = DiagnosticSink(path, build_line_suppressions(directives, ast.line_count))

        for check in self._get_enabled_checks():
            check.run(
                CheckContext(
                    ast=ast,
                    directives=directives,
                    sink=sink,
                    config=self.config.get_check_config(check.name),
                )
            )

        diagnostics = [
            d
            for d in sink.diagnostics
            if d.severity >= self.config.get_check_config(d.check).severity_threshold
        ]
        diagnostics = self._apply_ignore_rules(diagnostics)
        return sorted(diagnostics, key=lambda d: (d.location.line, d.location.column or 0))

    def _fix_bytes(
        self, source: bytes, path: str, analyzer: LanguageAnalyzer
    ) -> tuple[bytes, int, list[Diagnostic]]:
        """Fix one file's content until it reaches a fixed point.

        Returns:
            (fixed content, number of fixes applied, remaining diagnostics)
        """
        applied = 0

        for _ in range(self.config.max_fix_passes):
            diagnostics = self._check_bytes(source, path, analyzer)
            fixes = {d.fix for d in diagnostics if d.fix is not None}
            if not fixes:
                return source, applied, diagnostics
            source = apply_fixes(source, fixes)
            applied += len(fixes)

        diagnostics = self._check_bytes(source, path, analyzer)
        if any(d.is_fixable for d in diagnostics):
            raise EngineError(
                f"Fixes did not converge after {self.config.max_fix_passes} pass(es)"
            )
        return source, applied, diagnostics

    def _collect_files(self, targets: list[str]) -> list[Path]:
        """Expand targets into supported files, honoring ignore paths.

        Raises:
            EngineError: If a target does not exist.
        """
        files: list[Path] = []

        for target in targets:
            target_path = Path(target)
            if target_path.is_file():
                candidates = [target_path]
            elif target_path.is_dir():
                candidates = sorted(
                    p
                    for p in target_path.rglob("*")
                    if p.is_file() and not SKIP_DIRS.intersection(p.relative_to(target_path).parts[:-1])
                )
            else:
                raise EngineError(f"Target not found: {target}")

            for path in candidates:
                if get_analyzer_for(str(path)) is None:
                    continue
                if self._is_ignored_path(path):
                    if self.verbose:
                        self._log(f"  Skipping {path} (ignored)")
                    continue
                files.append(path)

        return files

    def _is_ignored_path(self, path: Path) -> bool:
        posix = path.as_posix()
        return any(fnmatch.fnmatch(posix, pattern) for pattern in self.config.ignore_paths)

    def _get_enabled_checks(self) -> list[Check]:
        """Get list of enabled check instances."""
        checks = [check_class() for check_class in CheckRegistry.all()]
        return [check for check in checks if self.config.is_check_enabled(check.name)]

    def _apply_ignore_rules(self, diagnostics: list[Diagnostic]) -> list[Diagnostic]:
        """Filter diagnostics based on configured ignore rules.

        Rules may be keyed by short code ("UnmatchedDisable") or by the
        fully qualified rule.
        """
        if not self.config.ignore_rules:
            return diagnostics

        result = []
        for diagnostic in diagnostics:
            patterns = self.config.ignore_rules.get(diagnostic.rule) or self.config.ignore_rules.get(
                diagnostic.code, []
            )
            path = diagnostic.location.file
            if any(pattern == "*" or fnmatch.fnmatch(path, pattern) for pattern in patterns):
                continue
            result.append(diagnostic)

        return result

    def _record_error(self, result: AnalysisResult, message: str) -> None:
        result.errors.append(message)
        if self.verbose:
            self._log(f"  Error: {message}")

    def _log(self, message: str) -> None:
        """Log a message if not in quiet mode."""
        if not self.quiet:
            print(message, file=sys.stderr)
