"""Server configuration loader for the querylens MCP server."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from querylens.models.error_types import ConfigurationError


VALID_TRANSPORTS = ('stdio', 'sse')
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULTS: Dict[str, Any] = {
    'server_name': 'QueryLens MCP Server',
    'transport': 'stdio',
    'host': '0.0.0.0',
    'port': 3000,
    'log_level': 'INFO',
    'log_json': False,
    'log_file': None,
}

# Setting name -> environment variable
ENV_VARS = {
    'server_name': 'QUERYLENS_SERVER_NAME',
    'transport': 'QUERYLENS_TRANSPORT',
    'host': 'QUERYLENS_HOST',
    'port': 'QUERYLENS_PORT',
    'log_level': 'LOG_LEVEL',
    'log_json': 'LOG_JSON',
    'log_file': 'LOG_FILE',
}


class ServerConfig:
    """Server configuration resolved from environment, YAML file and defaults.

    Priority, highest first:
        1. Environment variables (a ``.env`` file is loaded first)
        2. YAML file from ``QUERYLENS_CONFIG`` or ``config/querylens.yaml``
        3. Built-in defaults
    """

    def __init__(self, config_path: Optional[str] = None):
        load_dotenv()

        self.settings: Dict[str, Any] = dict(DEFAULTS)
        self.source_file: Optional[str] = None

        self._load_from_yaml(config_path)
        self._load_from_env()

        self.validate()

    def _load_from_yaml(self, config_path: Optional[str] = None) -> bool:
        """Overlay settings from the first readable YAML config file."""
        possible_paths = [
            config_path,
            os.getenv('QUERYLENS_CONFIG'),
            'config/querylens.yaml',
            Path(__file__).parent.parent.parent / 'config' / 'querylens.yaml'
        ]

        for path in possible_paths:
            if not path:
                continue
            try:
                with open(path, 'r') as f:
                    config_data = yaml.safe_load(f) or {}
            except FileNotFoundError:
                continue
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Could not parse config file {path}: {e}")

            server = config_data.get('server', {}) or {}
            logging_section = config_data.get('logging', {}) or {}

            for key in ('server_name', 'transport', 'host', 'port'):
                if key in server:
                    self.settings[key] = server[key]
            # The logging section uses short keys: level, json, file
            for key in ('level', 'json', 'file'):
                if key in logging_section:
                    self.settings[f'log_{key}'] = logging_section[key]

            self.source_file = str(path)
            return True

        return False

    def _load_from_env(self):
        """Overlay settings from environment variables."""
        for key, env_var in ENV_VARS.items():
            value = os.getenv(env_var)
            if value is None or value == '':
                continue
            if key == 'log_json':
                self.settings[key] = value.lower() == 'true'
            else:
                self.settings[key] = value

    @property
    def server_name(self) -> str:
        return str(self.settings['server_name'])

    @property
    def transport(self) -> str:
        return str(self.settings['transport']).lower()

    @property
    def host(self) -> str:
        return str(self.settings['host'])

    @property
    def port(self) -> int:
        return int(self.settings['port'])

    @property
    def log_level(self) -> str:
        return str(self.settings['log_level']).upper()

    @property
    def log_json(self) -> bool:
        return bool(self.settings['log_json'])

    @property
    def log_file(self) -> Optional[str]:
        return self.settings['log_file'] or None

    def validate(self):
        """Validate configuration values."""
        if self.transport not in VALID_TRANSPORTS:
            raise ConfigurationError(
                f"Invalid transport '{self.settings['transport']}', expected one of: {', '.join(VALID_TRANSPORTS)}"
            )

        try:
            port = int(self.settings['port'])
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid port value: {self.settings['port']}")
        if not 0 < port < 65536:
            raise ConfigurationError(f"Port out of range: {port}")

        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.settings['log_level']}")

    def to_dict(self) -> Dict[str, Any]:
        """Return the effective settings."""
        return {
            'server_name': self.server_name,
            'transport': self.transport,
            'host': self.host,
            'port': self.port,
            'log_level': self.log_level,
            'log_json': self.log_json,
            'log_file': self.log_file,
            'source_file': self.source_file
        }
