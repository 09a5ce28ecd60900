# -*- coding: utf-8 -*-
# tests/test_configs.py

import pytest
import yaml

from itbit_client.configs.account_reader import AccountReader
from itbit_client.configs.config_reader import DEFAULT_SETTINGS, ConfigReader


def test_bundled_settings_match_defaults():
    settings = ConfigReader().get_client_settings()
    assert settings == DEFAULT_SETTINGS


def test_missing_settings_file_means_defaults(tmp_path):
    assert ConfigReader(tmp_path).get_client_settings() == DEFAULT_SETTINGS


def test_settings_override(tmp_path):
    (tmp_path / 'itbit.yaml').write_text(
        "itbit:\n  server_v2: https://v2.example\n  timeout: '3000'\n  log_dir:\n",
        encoding='utf-8',
    )
    settings = ConfigReader(tmp_path).get_client_settings()
    assert settings['server_v2'] == 'https://v2.example'
    assert settings['server_v1'] == DEFAULT_SETTINGS['server_v1']
    assert settings['timeout'] == 3000
    assert settings['log_dir'] is None


def test_unknown_setting_rejected(tmp_path):
    (tmp_path / 'itbit.yaml').write_text("itbit:\n  retries: 3\n", encoding='utf-8')
    with pytest.raises(ValueError):
        ConfigReader(tmp_path).get_client_settings()


def test_get_config_key_path(tmp_path):
    (tmp_path / 'itbit.yaml').write_text("itbit:\n  timeout: 100\n", encoding='utf-8')
    reader = ConfigReader(tmp_path)
    assert reader.get_config('itbit.yaml', 'itbit.timeout') == 100
    assert reader.get_config('itbit.yaml', 'itbit.nope') is None
    assert reader.get_config('itbit.yaml') == {'itbit': {'timeout': 100}}


def test_load_yaml_errors(tmp_path):
    reader = ConfigReader(tmp_path)
    with pytest.raises(FileNotFoundError):
        reader.load_yaml('itbit.yaml')
    (tmp_path / 'bad.yaml').write_text("itbit: [unclosed\n", encoding='utf-8')
    with pytest.raises(yaml.YAMLError):
        reader.load_yaml('bad.yaml')


def test_reload_skips_example_files(tmp_path):
    (tmp_path / 'itbit.yaml').write_text("itbit:\n  timeout: 1\n", encoding='utf-8')
    (tmp_path / 'account.example.yaml').write_text("accounts: [broken\n", encoding='utf-8')
    reader = ConfigReader(tmp_path)
    reader.reload_config()
    (tmp_path / 'itbit.yaml').write_text("itbit:\n  timeout: 2\n", encoding='utf-8')
    reader.reload_config('itbit.yaml')
    assert reader.get_config('itbit.yaml', 'itbit.timeout') == 2


ACCOUNTS = """
accounts:
  itbit:
    main:
      api_key: k1
      api_secret: s1
      user_id: u1
    empty:
      api_key: ""
      api_secret: ""
  okx:
    main:
      api_key: x
"""


@pytest.fixture
def accounts_dir(tmp_path, monkeypatch):
    for name in ('ITBIT_API_KEY', 'ITBIT_API_SECRET', 'ITBIT_USER_ID'):
        monkeypatch.delenv(name, raising=False)
    (tmp_path / 'account.yaml').write_text(ACCOUNTS, encoding='utf-8')
    return tmp_path


def test_account_reader_credentials(accounts_dir):
    reader = AccountReader(accounts_dir)
    assert reader.get_itbit_credentials('main') == {'api_key': 'k1', 'api_secret': 's1', 'user_id': 'u1'}
    assert reader.list_accounts() == ['main', 'empty']
    assert reader.list_accounts('okx') == ['main']
    assert reader.is_account_valid('main')
    assert not reader.is_account_valid('empty')


def test_account_reader_env_fallback(accounts_dir, monkeypatch):
    monkeypatch.setenv('ITBIT_API_KEY', 'env-key')
    monkeypatch.setenv('ITBIT_API_SECRET', 'env-secret')
    reader = AccountReader(accounts_dir)
    creds = reader.get_itbit_credentials('empty')
    assert creds == {'api_key': 'env-key', 'api_secret': 'env-secret', 'user_id': ''}
    assert reader.is_account_valid('empty')
    # file values win over the environment
    assert reader.get_itbit_credentials('main')['api_key'] == 'k1'


def test_account_reader_without_file(tmp_path, monkeypatch):
    for name in ('ITBIT_API_KEY', 'ITBIT_API_SECRET', 'ITBIT_USER_ID'):
        monkeypatch.delenv(name, raising=False)
    reader = AccountReader(tmp_path)
    assert reader.list_accounts() == []
    assert reader.get_itbit_credentials() == {'api_key': '', 'api_secret': '', 'user_id': ''}
    with pytest.raises(FileNotFoundError):
        reader.reload()


def test_account_reader_bad_yaml(tmp_path):
    (tmp_path / 'account.yaml').write_text("accounts: [broken\n", encoding='utf-8')
    with pytest.raises(ValueError):
        AccountReader(tmp_path).get_all_accounts()
