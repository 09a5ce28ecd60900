#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
账户配置文件读取器
Reads account.yaml (accounts.itbit.<name>) and falls back to environment
variables for anything the file does not provide.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

ENV_FALLBACK = {
    'api_key': 'ITBIT_API_KEY',
    'api_secret': 'ITBIT_API_SECRET',
    'user_id': 'ITBIT_USER_ID',
}


class AccountReader:
    """账户配置读取器"""

    def __init__(self, config_dir: str = None):
        """
        Args:
            config_dir: 配置文件目录，默认为当前文件所在目录
        """
        if config_dir is None:
            config_dir = os.path.dirname(os.path.abspath(__file__))

        self.config_dir = Path(config_dir)
        self.account_file = self.config_dir / 'account.yaml'
        self._config = None
        self._logger = logging.getLogger(__name__)

    def _load_config(self) -> Dict[str, Any]:
        """加载配置文件"""
        if self._config is not None:
            return self._config

        if not self.account_file.exists():
            raise FileNotFoundError(f"账户配置文件不存在: {self.account_file}")

        try:
            with open(self.account_file, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"YAML解析错误: {e}") from e
        return self._config

    def get_all_accounts(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """
        获取所有账户配置

        Returns:
            dict: 格式为 {exchange: {account: {credentials}}}

        Example:
            {
                'itbit': {
                    'main': {'api_key': '...', 'api_secret': '...', 'user_id': '...'},
                }
            }
        """
        return self._load_config().get('accounts') or {}

    def get_exchange_accounts(self, exchange: str = 'itbit') -> Dict[str, Dict[str, Any]]:
        return self.get_all_accounts().get(exchange) or {}

    def get_account(self, exchange: str, account: str) -> Dict[str, Any]:
        return self.get_exchange_accounts(exchange).get(account) or {}

    def get_itbit_credentials(self, account: str = 'main') -> Dict[str, str]:
        """
        获取itBit账户认证信息

        Args:
            account: 账户名称，默认为'main'

        Returns:
            dict: 包含api_key, api_secret, user_id的字典; 文件缺失或字段为空时
                  使用 ITBIT_API_KEY / ITBIT_API_SECRET / ITBIT_USER_ID 环境变量
        """
        try:
            account_config = self.get_account('itbit', account)
        except FileNotFoundError:
            self._logger.info(f"{self.account_file} not found, reading itBit credentials from environment")
            account_config = {}

        credentials = {}
        for field, env_name in ENV_FALLBACK.items():
            value = account_config.get(field) or os.getenv(env_name, '')
            credentials[field] = str(value).strip()
        return credentials

    def list_accounts(self, exchange: str = 'itbit') -> List[str]:
        """
        获取指定交易所的账户列表, 顺序与配置文件一致
        """
        try:
            return list(self.get_exchange_accounts(exchange).keys())
        except FileNotFoundError:
            return []

    def is_account_valid(self, account: str = 'main') -> bool:
        """
        检查itBit账户配置是否完整 (api_key 与 api_secret 均非空, 含环境变量)
        """
        creds = self.get_itbit_credentials(account)
        return bool(creds['api_key'] and creds['api_secret'])

    def reload(self):
        """重新加载配置文件"""
        self._config = None
        self._load_config()
