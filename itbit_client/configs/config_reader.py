#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
配置文件读取器
Reads the YAML client settings (itbit.yaml) and offers dotted-path access.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any

import yaml

DEFAULT_SETTINGS = {
    'server_v1': 'https://api.itbit.com/v1',
    'server_v2': 'https://www.itbit.com/api/v2',
    'timeout': 20000,
    'log_dir': None,
}

SETTINGS_FILE = 'itbit.yaml'


class ConfigReader:
    """配置文件读取器类"""

    def __init__(self, config_dir: str = None):
        """
        Args:
            config_dir: 配置文件目录路径，默认为当前文件所在目录
        """
        if config_dir is None:
            config_dir = os.path.dirname(os.path.abspath(__file__))

        self.config_dir = Path(config_dir)
        self._configs = {}
        self._logger = logging.getLogger(__name__)

    def load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        加载YAML配置文件

        Args:
            filename: 配置文件名（不包含路径）

        Returns:
            dict: 解析后的配置字典，空文件返回 {}

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML解析错误
        """
        file_path = self.config_dir / filename

        if not file_path.exists():
            raise FileNotFoundError(f"配置文件不存在: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self._logger.error(f"YAML解析错误 {filename}: {e}")
            raise

        self._configs[filename] = config
        self._logger.info(f"成功加载配置文件: {filename}")
        return config

    def get_config(self, filename: str, key_path: str = None) -> Any:
        """
        获取配置文件中的指定值

        Args:
            filename: 配置文件名
            key_path: 键路径，用点分隔，如 'itbit.timeout'

        Returns:
            配置值, 键不存在时返回 None
        """
        if filename not in self._configs:
            self.load_yaml(filename)

        value = self._configs[filename]
        if key_path is None:
            return value

        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            self._logger.warning(f"配置键不存在: {key_path}")
            return None

    def get_client_settings(self) -> Dict[str, Any]:
        """
        Client settings from the `itbit` section of itbit.yaml, merged over
        DEFAULT_SETTINGS. A missing settings file means all defaults.
        """
        settings = dict(DEFAULT_SETTINGS)
        try:
            section = self.get_config(SETTINGS_FILE, 'itbit') or {}
        except FileNotFoundError:
            self._logger.info(f"{SETTINGS_FILE} not found in {self.config_dir}, using default settings")
            return settings

        unknown = set(section) - set(DEFAULT_SETTINGS)
        if unknown:
            raise ValueError(f"unknown itbit settings: {sorted(unknown)}")
        settings.update({k: v for k, v in section.items() if v is not None})
        settings['timeout'] = int(settings['timeout'])
        return settings

    def reload_config(self, filename: str = None):
        """
        重新加载配置文件

        Args:
            filename: 要重新加载的配置文件名，为None时重新加载所有配置
        """
        if filename:
            self._configs.pop(filename, None)
            self.load_yaml(filename)
        else:
            self._configs.clear()
            for file_path in self.config_dir.glob('*.yaml'):
                if not file_path.name.endswith('.example.yaml'):  # 跳过示例文件
                    self.load_yaml(file_path.name)
