"""
Configuration Loader for Rock Identifier
설정 파일 로더

config.yaml is optional: missing keys (or a missing file) fall back to
DEFAULT_CONFIG.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_ENV_VAR = "ROCK_IDENTIFIER_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"
API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"

DEFAULT_CONFIG: Dict[str, Any] = {
    "http": {
        "timeout": 10.0,
        "user_agent": "rock-identifier/0.1.0",
    },
    "sources": {
        "wikipedia_api": "https://en.wikipedia.org/api/rest_v1",
        "commons_api": "https://commons.wikimedia.org/w/api.php",
        "geonames_api": "http://api.geonames.org",
        "geonames_username": None,
    },
    "anthropic": {
        "api_key": None,
    },
    "model": {
        "name": "claude-sonnet-4-20250514",
        "max_tokens": 1024,
    },
    "persona": {
        "system_prompt": (
            "You are a friendly field geologist. Answer questions about rocks, "
            "minerals and geological processes in a few clear sentences, using the "
            "reference material you are given."
        ),
    },
    "server": {
        "host": "0.0.0.0",
        "port": 8000,
    },
    "logging": {
        "level": "INFO",
    },
}

_config_cache: Optional[Dict[str, Any]] = None


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file

    Args:
        config_path: Path to config file. If None, uses $ROCK_IDENTIFIER_CONFIG
            or config.yaml at the project root.

    Returns:
        Dictionary containing configuration merged over the defaults
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return _merge(DEFAULT_CONFIG, config)


def get_config() -> Dict[str, Any]:
    """프로세스 단위로 캐시된 설정 반환"""
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def init_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """설정을 (다시) 로드하여 캐시에 저장"""
    global _config_cache
    _config_cache = load_config(config_path)
    return _config_cache


def get_http_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    config = config or get_config()
    return config.get('http', DEFAULT_CONFIG['http'])


def get_source_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    config = config or get_config()
    return config.get('sources', DEFAULT_CONFIG['sources'])


def get_model_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    config = config or get_config()
    settings = dict(config.get('model', DEFAULT_CONFIG['model']))
    settings['system_prompt'] = config.get('persona', {}).get('system_prompt', '')
    return settings


def get_anthropic_api_key(config: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """API 키 반환 (환경변수 우선, placeholder는 미설정으로 간주)"""
    config = config or get_config()
    api_key = os.environ.get("ANTHROPIC_API_KEY") or config.get('anthropic', {}).get('api_key')
    if not api_key or api_key == API_KEY_PLACEHOLDER:
        return None
    return api_key
