"""
Configuration for NoteMind.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from notemind.utils.exceptions import ConfigurationError


class AnalysisConfig(BaseModel):
    """Content analysis configuration."""

    max_keywords: int = 8
    max_topics: int = 5
    keyword_score_divisor: float = 5.0
    action_item_candidates: int = 6
    max_action_items: int = 4
    tone_threshold: float = 0.25


class ConnectionConfig(BaseModel):
    """Semantic connection scoring configuration."""

    keyword_count: int = 8
    keyword_similarity_threshold: float = 0.7
    min_strength: float = 0.05
    max_results: int = 50


class MindMapConfig(BaseModel):
    """Mind map layout and edge configuration."""

    cluster_radius: float = 180.0
    note_radius: float = 40.0
    note_radius_step: float = 5.0
    notes_per_cluster: int = 8
    edge_source_limit: int = 15
    neighbor_window: int = 9
    edge_threshold: float = 0.35
    max_edges: int = 20
    # Discovery order is the historical behaviour; strength order is opt-in.
    sort_edges_by_strength: bool = False


class FlashcardConfig(BaseModel):
    """Flashcard generation and review configuration."""

    review_interval_hours: float = 24.0
    id_suffix_length: int = 4
    summary_length: int = 180


class MentorConfig(BaseModel):
    """Mentor system configuration."""

    challenge_due_hours: float = 24.0
    report_window_days: int = 7
    consistency_target_notes: int = 20


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    connections: ConnectionConfig = Field(default_factory=ConnectionConfig)
    mind_map: MindMapConfig = Field(default_factory=MindMapConfig)
    flashcards: FlashcardConfig = Field(default_factory=FlashcardConfig)
    mentor: MentorConfig = Field(default_factory=MentorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in working directory)

        Returns:
            Config instance

        Environment variables:
            NOTEMIND_MAX_KEYWORDS: Keywords extracted per analysis
            NOTEMIND_TONE_THRESHOLD: Sentiment magnitude for non-neutral tone
            NOTEMIND_CONNECTION_MIN_STRENGTH: Minimum connection strength kept
            NOTEMIND_CONNECTION_MAX_RESULTS: Maximum connections returned
            NOTEMIND_MINDMAP_EDGE_THRESHOLD: Minimum mind map edge strength
            NOTEMIND_MINDMAP_MAX_EDGES: Maximum mind map edges
            NOTEMIND_MINDMAP_SORT_BY_STRENGTH: Order mind map edges by strength
            NOTEMIND_REVIEW_INTERVAL_HOURS: Base flashcard review interval
            NOTEMIND_CHALLENGE_DUE_HOURS: Hours until a challenge is due
            NOTEMIND_REPORT_WINDOW_DAYS: Weekly report window
            NOTEMIND_LOG_LEVEL: Log level
            NOTEMIND_LOG_TO_FILE: Enable rotating file sink
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            if value == "":
                return default
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        return cls(
            analysis=AnalysisConfig(
                max_keywords=get_env("NOTEMIND_MAX_KEYWORDS", 8),
                max_topics=get_env("NOTEMIND_MAX_TOPICS", 5),
                max_action_items=get_env("NOTEMIND_MAX_ACTION_ITEMS", 4),
                tone_threshold=get_env("NOTEMIND_TONE_THRESHOLD", 0.25),
            ),
            connections=ConnectionConfig(
                keyword_similarity_threshold=get_env("NOTEMIND_KEYWORD_SIMILARITY_THRESHOLD", 0.7),
                min_strength=get_env("NOTEMIND_CONNECTION_MIN_STRENGTH", 0.05),
                max_results=get_env("NOTEMIND_CONNECTION_MAX_RESULTS", 50),
            ),
            mind_map=MindMapConfig(
                edge_threshold=get_env("NOTEMIND_MINDMAP_EDGE_THRESHOLD", 0.35),
                max_edges=get_env("NOTEMIND_MINDMAP_MAX_EDGES", 20),
                sort_edges_by_strength=get_env("NOTEMIND_MINDMAP_SORT_BY_STRENGTH", False),
            ),
            flashcards=FlashcardConfig(
                review_interval_hours=get_env("NOTEMIND_REVIEW_INTERVAL_HOURS", 24.0),
            ),
            mentor=MentorConfig(
                challenge_due_hours=get_env("NOTEMIND_CHALLENGE_DUE_HOURS", 24.0),
                report_window_days=get_env("NOTEMIND_REPORT_WINDOW_DAYS", 7),
            ),
            logging=LoggingConfig(
                level=get_env("NOTEMIND_LOG_LEVEL", "INFO"),
                log_to_file=get_env("NOTEMIND_LOG_TO_FILE", False),
                log_dir=get_env("NOTEMIND_LOG_DIR", "logs"),
                file_rotation=get_env("NOTEMIND_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("NOTEMIND_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("NOTEMIND_LOG_COMPRESSION", "zip"),
                serialize=get_env("NOTEMIND_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
            ConfigurationError: If the YAML does not describe a valid configuration
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls._from_mapping(data or {}, source=str(yaml_path))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        final_dict = {**config_dict}

        # Env sections only win when they differ from the defaults
        default = cls()
        for section in ("analysis", "connections", "mind_map", "flashcards", "mentor", "logging"):
            if getattr(env_config, section) != getattr(default, section):
                final_dict[section] = getattr(env_config, section).model_dump()

        return cls._from_mapping(final_dict, source=str(yaml_path)) if final_dict else env_config

    @classmethod
    def _from_mapping(cls, data: Any, source: str) -> "Config":
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration must be a mapping", context={"source": source}
            )
        try:
            return cls(**data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}", context={"source": source}
            ) from e


# Default config instance
default_config = Config()
