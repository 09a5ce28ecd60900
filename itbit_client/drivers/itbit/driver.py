# -*- coding: utf-8 -*-
# itbit_client/drivers/itbit/driver.py
# itBit driver: endpoint wrappers over the signed RestClient.

import logging

from itbit_client.configs.account_reader import AccountReader
from itbit_client.configs.config_reader import ConfigReader
from itbit_client.core.kernel.syscalls import ItBitSyscalls
from itbit_client.drivers.itbit.rest import RestClient
from itbit_client.drivers.itbit.util import to_decimal_str
from itbit_client.utils.logger import RequestLogger

logger = logging.getLogger(__name__)


def get_account_name_by_id(account_id=0, account_reader=None):
    """
    根据账户ID获取账户名称

    Args:
        account_id: 账户ID, 对应 account.yaml 中 accounts.itbit 下的顺序
        account_reader: AccountReader 实例

    Returns:
        str: 账户名称, 没有配置文件时为 'main'
    """
    account_reader = account_reader or AccountReader()
    accounts = account_reader.list_accounts('itbit')
    if not accounts:
        return 'main'
    if 0 <= account_id < len(accounts):
        return accounts[account_id]
    logger.warning(f"账户ID {account_id} 超出范围，可用账户: {accounts}, 使用 {accounts[0]}")
    return accounts[0]


def init_ItBitDriver(account_id=0, config_dir=None, session=None):
    """
    初始化itBit driver

    Args:
        account_id: 账户ID，根据配置文件中的账户顺序映射 (0=第一个账户, 1=第二个账户, ...)
        config_dir: itbit.yaml / account.yaml 所在目录, 默认为 itbit_client/configs
        session: optional requests.Session passed to the RestClient

    Returns:
        ItBitDriver
    """
    config_reader = ConfigReader(config_dir)
    account_reader = AccountReader(config_dir)
    settings = config_reader.get_client_settings()

    account_name = get_account_name_by_id(account_id, account_reader)
    credentials = account_reader.get_itbit_credentials(account_name)
    if not account_reader.is_account_valid(account_name):
        logger.warning(f"[itBit] 账户 {account_name} (ID: {account_id}) 认证信息不完整, only public endpoints will work")

    request_logger = RequestLogger(settings['log_dir']) if settings.get('log_dir') else None
    client = RestClient(
        key=credentials['api_key'] or None,
        secret=credentials['api_secret'] or None,
        server_v1=settings['server_v1'],
        server_v2=settings['server_v2'],
        timeout=settings['timeout'],
        session=session,
        request_logger=request_logger,
    )
    return ItBitDriver(client, user_id=credentials['user_id'] or None, account=account_name)


class ItBitDriver(ItBitSyscalls):
    """
    itBit driver.
    Every method returns (body, error) where error is None or an ItBitError.
    """

    def __init__(self, client=None, user_id=None, account='main', **client_kwargs):
        """
        :param client: RestClient to use; built from client_kwargs when omitted
        :param user_id: default user id for get_wallets()
        :param account: account name, informational
        """
        self.client = client if client is not None else RestClient(**client_kwargs)
        self.user_id = user_id
        self.account = account

    def __repr__(self):
        return f"ItBitDriver(account={self.account!r}, server={self.client.server_v1!r})"

    def close(self):
        self.client.close()

    # ---- Market data (public) ----
    def get_order_book(self, ticker_symbol):
        return self.client.public_request(f"/markets/{ticker_symbol}/order_book")

    def get_ticker(self, ticker_symbol):
        return self.client.public_request(f"/markets/{ticker_symbol}/ticker")

    def get_trades(self, ticker_symbol, since=0):
        return self.client.public_request(f"/markets/{ticker_symbol}/trades", {'since': since or 0})

    # ---- Wallets ----
    def get_wallets(self, user_id=None):
        return self.client.private_request('GET', '/wallets', {'userId': user_id or self.user_id})

    def get_wallet(self, wallet_id):
        return self.client.private_request('GET', f"/wallets/{wallet_id}")

    def get_wallet_trades(self, wallet_id, params=None):
        return self.client.private_request('GET', f"/wallets/{wallet_id}/trades", params)

    def get_funding_history(self, wallet_id, params=None):
        return self.client.private_request('GET', f"/wallets/{wallet_id}/funding_history", params)

    # ---- Trading ----
    def get_orders(self, wallet_id, instrument=None, status=None):
        args = {
            'instrument': instrument,
            'status': status,
        }
        return self.client.private_request('GET', f"/wallets/{wallet_id}/orders", args)

    def get_order(self, wallet_id, order_id):
        return self.client.private_request('GET', f"/wallets/{wallet_id}/orders/{order_id}")

    def add_order(self, wallet_id, side, order_type, amount, price, instrument,
                  metadata=None, client_order_identifier=None):
        args = build_order_args(side, order_type, amount, price, instrument,
                                metadata, client_order_identifier)
        return self.client.private_request('POST', f"/wallets/{wallet_id}/orders", args)

    def cancel_order(self, wallet_id, order_id):
        return self.client.private_request('DELETE', f"/wallets/{wallet_id}/orders/{order_id}")

    # ---- Funding ----
    def cryptocurrency_withdrawal(self, wallet_id, currency, amount, address):
        args = {
            'currency': currency,
            'amount': to_decimal_str(amount),
            'address': address,
        }
        return self.client.private_request('POST', f"/wallets/{wallet_id}/cryptocurrency_withdrawals", args)

    def cryptocurrency_deposit(self, wallet_id, currency):
        return self.client.private_request('POST', f"/wallets/{wallet_id}/cryptocurrency_deposits",
                                           {'currency': currency})


def build_order_args(side, order_type, amount, price, instrument, metadata=None, client_order_identifier=None):
    """
    Order body in the key order the server documents.
    Currency is the first three letters of the instrument ('XBTUSD' -> 'XBT').
    """
    args = {
        'side': side,
        'type': order_type,
        'currency': instrument[:3],
        'amount': to_decimal_str(amount),
        'price': to_decimal_str(price),
        'instrument': instrument,
    }
    if metadata:
        args['metadata'] = metadata
    if client_order_identifier:
        args['clientOrderIdentifier'] = client_order_identifier
    return args
