"""Configuration settings for linebreak."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

# UCD release matching the pair table and DEFAULT_SKIP_LINES
UNICODE_VERSION = "8.0.0"
DEFAULT_BASE_URL = f"https://www.unicode.org/Public/{UNICODE_VERSION}/ucd/"
LINE_BREAK_FILE_NAME = "LineBreak.txt"
TEST_FILE_NAME = "LineBreakTest.txt"


def default_data_dir() -> Path:
    """Return the directory where downloaded Unicode data files live."""
    cache_home = os.environ.get("XDG_CACHE_HOME")
    base = Path(cache_home) if cache_home else Path.home() / ".cache"
    return base / "linebreak"


def _default_line_break_file() -> Path:
    env = os.environ.get("LINEBREAK_DATA_FILE")
    return Path(env) if env else default_data_dir() / LINE_BREAK_FILE_NAME


def _default_test_file() -> Path:
    env = os.environ.get("LINEBREAK_TEST_FILE")
    return Path(env) if env else default_data_dir() / TEST_FILE_NAME


# Property values introduced after the 40-class model, mapped onto it
DEFAULT_CLASS_ALIASES: dict[str, str] = {
    "ZWJ": "CM",
    "EB": "ID",
    "EM": "CM",
    "AK": "AL",
    "AP": "AL",
    "AS": "AL",
    "VF": "AL",
    "VI": "AL",
}

# Test-file lines (0-based) whose expectations differ from this tailoring.
# Indices are into the UNICODE_VERSION LineBreakTest.txt.
DEFAULT_SKIP_LINES: frozenset[int] = frozenset(
    {
        812, 814, 848, 850, 864, 866, 900, 902, 956, 958, 1068, 1070,
        1072, 1074, 1224, 1226, 1228, 1230, 1760, 1762, 2932, 2934, 4100, 4101,
        4102, 4103, 4340, 4342, 4496, 4498, 4568, 4570, 4704, 4706, 4707, 4708,
        4710, 4711, 4712, 4714, 4715, 4716, 4718, 4719, 4722, 4723, 4726, 4727,
        4730, 4731, 4734, 4735, 4736, 4738, 4739, 4742, 4743, 4746, 4747, 4748,
        4750, 4751, 4752, 4754, 4755, 4756, 4758, 4759, 4760, 4762, 4763, 4764,
        4766, 4767, 4768, 4770, 4771, 4772, 4774, 4775, 4778, 4779, 4780, 4782,
        4783, 4784, 4786, 4787, 4788, 4790, 4791, 4794, 4795, 4798, 4799, 4800,
        4802, 4803, 4804, 4806, 4807, 4808, 4810, 4811, 4812, 4814, 4815, 4816,
        4818, 4819, 4820, 4822, 4823, 4826, 4827, 4830, 4831, 4834, 4835, 4838,
        4839, 4840, 4842, 4843, 4844, 4846, 4847, 4848, 4850, 4851, 4852, 4854,
        4855, 4856, 4858, 4859, 4960, 4962, 5036, 5038, 6126, 6135, 6140, 6225,
        6226, 6227, 6228, 6229, 6230, 6232, 6233, 6234, 6235, 6236, 6332,
    }
)


class DataConfig(BaseModel):
    """Location and interpretation of the Unicode data files."""

    line_break_file: Path = Field(
        default_factory=_default_line_break_file,
        description="Path to LineBreak.txt",
    )
    test_file: Path = Field(
        default_factory=_default_test_file,
        description="Path to LineBreakTest.txt",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Unicode Character Database",
    )
    class_aliases: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_CLASS_ALIASES),
        description="Newer class abbreviations mapped to supported classes",
    )


class ConformanceConfig(BaseModel):
    """Configuration for the conformance harness."""

    skip_lines: frozenset[int] = Field(
        default=DEFAULT_SKIP_LINES,
        description="0-based test-file line indices accepted as tailoring deviations",
    )
    stop_on_failure: bool = Field(
        default=False,
        description="Stop at the first failing test line",
    )
    max_reported_failures: int = Field(
        default=20,
        ge=0,
        description="Failures kept in full detail in the run statistics",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class LinebreakSettings(BaseModel):
    """Main application settings."""

    data: DataConfig = Field(default_factory=DataConfig)
    conformance: ConformanceConfig = Field(default_factory=ConformanceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> LinebreakSettings:
    """Get default application settings."""
    return LinebreakSettings()
