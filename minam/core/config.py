"""
Configuration management for minam with Pydantic validation
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ..checks.common_columns_check import CommonColumnsParams
from ..checks.common_values_check import CommonValuesParams
from ..checks.similar_shape_check import SimilarShapeParams


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class LLMConfig(BaseModel):
    """Completion service settings"""
    model_config = ConfigDict(protected_namespaces=())

    model: str = Field('gpt-4o', min_length=1, description="Chat completion model")
    api_key: Optional[str] = Field(None, description="API key (use ${OPENAI_API_KEY})")
    base_url: Optional[str] = Field(None, description="OpenAI-compatible endpoint override")
    max_tokens: int = Field(2000, gt=0, description="Maximum tokens in the completion")
    temperature: float = Field(0.1, ge=0.0, le=2.0, description="Sampling temperature")


class ConnectionsConfig(BaseModel):
    """Per-check parameters for the dataset connection finder"""
    common_columns: CommonColumnsParams = Field(default_factory=CommonColumnsParams)
    common_values: CommonValuesParams = Field(default_factory=CommonValuesParams)
    similar_shape: SimilarShapeParams = Field(default_factory=SimilarShapeParams)


class OutputConfig(BaseModel):
    """Output configuration"""
    directory: str = Field('minam_results', description="Output directory path")
    format: Literal['text', 'json', 'csv'] = Field('text', description="Connections output format")


class MinamConfigModel(BaseModel):
    """Pydantic model for configuration validation"""
    model_config = ConfigDict(extra='ignore')  # Ignore extra fields in YAML

    version: Optional[Union[int, float, str]] = None
    project: Optional[str] = None

    llm: LLMConfig = Field(default_factory=LLMConfig)
    connections: ConnectionsConfig = Field(default_factory=ConnectionsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# ============================================================================
# Environment Variable Substitution
# ============================================================================

def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values

    Supports multiple formats:
    - ${VAR_NAME}
    - $VAR_NAME
    - ${VAR_NAME:-default_value}  (with default, may be empty)

    Args:
        value: Configuration value (can be str, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If a referenced variable is unset and has no default
    """
    if isinstance(value, str):
        def replace_with_default(match):
            var_name = match.group(1)
            has_default = match.group(2) is not None
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            elif has_default:
                return match.group(3)
            else:
                raise ValueError(f"Environment variable '{var_name}' is not set and no default value provided")

        value = re.sub(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(:-([^}]*))?\}', replace_with_default, value)

        def replace_simple(match):
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            else:
                raise ValueError(f"Environment variable '{var_name}' is not set")

        value = re.sub(r'\$([A-Za-z_][A-Za-z0-9_]*)', replace_simple, value)

        return value

    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]

    else:
        return value


# ============================================================================
# MinamConfig Class (wrapper around Pydantic model)
# ============================================================================

class MinamConfig:
    """Configuration class for minam with validation"""

    def __init__(self, config_dict: Optional[Dict] = None):
        """Initialize from dictionary (parsed from YAML) with Pydantic validation"""
        config_dict = _substitute_env_vars(config_dict or {})

        try:
            self._model = MinamConfigModel(**config_dict)
        except Exception as e:
            raise ValueError(f"Configuration validation failed: {str(e)}") from e

        self.project = self._model.project

        # Completion service
        llm = self._model.llm
        self.model = llm.model
        self.api_key = llm.api_key or None
        self.base_url = llm.base_url or None
        self.max_tokens = llm.max_tokens
        self.temperature = llm.temperature

        # Connection finder parameters keyed by check name
        self.check_params = self._model.connections.model_dump()

        # Output
        self.output_dir = Path(self._model.output.directory)
        self.output_format = self._model.output.format

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'MinamConfig':
        """Load configuration from YAML file"""
        with open(yaml_path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f)

        if config_dict is not None and not isinstance(config_dict, dict):
            raise ValueError(f"Configuration file must contain a mapping: {yaml_path}")

        return cls(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Validated configuration as a plain dictionary"""
        return self._model.model_dump()
