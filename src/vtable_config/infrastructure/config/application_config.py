"""Configuration management for the vtable-config command line tool."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """Configuration for the vtable-config tool."""

    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    verbose: bool = False
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        input_str = os.getenv("VTABLE_INPUT")
        output_str = os.getenv("VTABLE_OUTPUT")
        log_dir_str = os.getenv("VTABLE_LOG_DIR")
        verbose_str = os.getenv("VERBOSE", "false").lower()

        return cls(
            input_path=Path(input_str) if input_str else None,
            output_path=Path(output_str) if output_str else None,
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str) if log_dir_str else None,
        )

    @classmethod
    def from_args(
        cls,
        input_path: Optional[Path] = None,
        output_path: Optional[Path] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            input_path: Vtable document to read (overrides env)
            output_path: Where to write the normalized document (overrides env)
            verbose: Enable verbose output (overrides env)
            log_dir: Directory for log files (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if input_path is not None:
            config.input_path = input_path
        if output_path is not None:
            config.output_path = output_path
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.input_path is None:
            raise ValueError("No input document given (argument or VTABLE_INPUT)")

        if not self.input_path.exists():
            raise ValueError(f"Input document not found: {self.input_path}")

        if not self.input_path.is_file():
            raise ValueError(f"Not a file: {self.input_path}")

    def ensure_output_dir(self) -> None:
        """Create the output file's parent directory if it doesn't exist."""
        if self.output_path is not None:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def ensure_log_dir(self) -> None:
        """Create the log directory if one is configured."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
