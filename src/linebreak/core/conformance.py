"""Conformance run orchestration.

This module runs the break engine over the cases of a LineBreakTest.txt
file and collects statistics. Lines listed in the configured skip list are
counted as skipped, never silently dropped.

Key components:
- check_case: Compare the engine's segments with one case
- ConformanceRunner: Orchestrates a full conformance run
"""

import time
from collections.abc import Callable, Iterable
from pathlib import Path

from linebreak.config import LinebreakSettings
from linebreak.core.classifier import Classifier
from linebreak.core.iterator import OpportunityIterator
from linebreak.io.conformance import ConformanceCase, read_test_file
from linebreak.io.reader import LineBreakDataReader
from linebreak.utils import ConformanceLogger, ConformanceStats, configure_logging


def check_case(case: ConformanceCase, classifier: Classifier) -> tuple[str, ...]:
    """Break a case's text and return the segments produced.

    Args:
        case: Conformance case
        classifier: Codepoint classifier

    Returns:
        Segments in emission order
    """
    return tuple(opportunity.segment for opportunity in OpportunityIterator(case.text, classifier))


class ConformanceRunner:
    """Runs the conformance test corpus against the break engine.

    Example:
        settings = LinebreakSettings()
        runner = ConformanceRunner(settings)
        stats = runner.run()
        print(stats.passed_count, stats.failed_count)
    """

    def __init__(
        self,
        config: LinebreakSettings,
        classifier: Classifier | None = None,
        quiet: bool = True,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Settings with data locations and the skip list
            classifier: Classifier to test (default: loaded from
                ``config.data.line_break_file``)
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self._classifier = classifier

    @property
    def classifier(self) -> Classifier:
        """Classifier under test, loaded on first use."""
        if self._classifier is None:
            self._classifier = LineBreakDataReader(
                self.config.data.line_break_file, self.config.data.class_aliases
            ).load()
        return self._classifier

    def run_cases(
        self,
        cases: Iterable[ConformanceCase],
        progress_callback: Callable[[int, bool], None] | None = None,
    ) -> ConformanceStats:
        """Run a sequence of cases.

        Args:
            cases: Cases to check
            progress_callback: Optional callback(line_index, passed) per
                checked case

        Returns:
            ConformanceStats with counts, timing and failure details
        """
        conformance_logger = ConformanceLogger(
            self.logger,
            max_reported_failures=self.config.conformance.max_reported_failures,
        )
        stats = conformance_logger.stats
        stats.start_time = time.time()
        skip_lines = self.config.conformance.skip_lines
        classifier = self.classifier

        for case in cases:
            if case.line_index in skip_lines:
                conformance_logger.log_case_skipped(case.line_index)
                continue

            actual = check_case(case, classifier)
            passed = actual == case.expected
            if passed:
                conformance_logger.log_case_passed(case.line_index)
            else:
                conformance_logger.log_case_failed(case.line_index, case.expected, actual)

            if progress_callback is not None:
                progress_callback(case.line_index, passed)
            if not passed and self.config.conformance.stop_on_failure:
                self.logger.info("Stopping at first failure", line=case.line_index)
                break

        stats.end_time = time.time()
        self.logger.info(
            "Conformance run complete",
            passed=stats.passed_count,
            failed=stats.failed_count,
            skipped=stats.skipped_count,
            duration_s=round(stats.duration_seconds, 3),
        )
        return stats

    def run(
        self,
        test_file: Path | None = None,
        progress_callback: Callable[[int, bool], None] | None = None,
    ) -> ConformanceStats:
        """Run every case of a conformance file.

        Args:
            test_file: Path to LineBreakTest.txt (default: from config)
            progress_callback: Optional callback(line_index, passed)

        Returns:
            ConformanceStats for the run

        Raises:
            DataFileNotFoundError: If a data file does not exist
            ConformanceDataError: If the test file is malformed
            ClassifierDataError: If the line-break data is malformed
        """
        path = test_file if test_file is not None else self.config.data.test_file
        self.logger.info("Starting conformance run", test_file=str(path))
        cases = read_test_file(path)
        return self.run_cases(cases, progress_callback=progress_callback)
