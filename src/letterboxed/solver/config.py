"""Letter Boxed solver configuration."""

from dotenv import find_dotenv
from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Letter Boxed solver."""

    max_guesses: PositiveInt = 6
    """Maximum number of words allowed in a solution chain. Default: 6."""

    word_list_path: str = "words.txt"
    """Path to the line-delimited word list. Default: words.txt."""

    use_parallel: bool = False
    """Whether to spread start words over worker processes. Default: False."""

    max_workers: int | None = None
    """Maximum number of worker processes to use. If None (default), uses os.cpu_count() - 1."""

    report_interval: PositiveInt = 100_000
    """Interval (in number of popped search states) at which to report progress."""

    log_dir: str = "logs"
    """Directory in which per-run log files are written. Default: logs."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
