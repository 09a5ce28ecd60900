# -*- coding: utf-8 -*-
# itbit_client/core/kernel/syscalls.py
# Syscall interface every itBit driver implements.
# Plain base class with NotImplementedError; every call returns (body, error).

class ItBitSyscalls(object):
    # ---- Market data (public) ----
    def get_order_book(self, ticker_symbol):
        """Return (order_book, error), order_book = {'bids': [...], 'asks': [...]}"""
        raise NotImplementedError

    def get_ticker(self, ticker_symbol):
        """Return (ticker, error)"""
        raise NotImplementedError

    def get_trades(self, ticker_symbol, since=0):
        """Return (trades, error)
           :param ticker_symbol: e.g. 'XBTUSD'
           :param since: trade id cursor, 0 returns the most recent trades
        """
        raise NotImplementedError

    # ---- Wallets ----
    def get_wallets(self, user_id):
        """Return (wallets, error), a list of wallet dicts"""
        raise NotImplementedError

    def get_wallet(self, wallet_id):
        raise NotImplementedError

    def get_wallet_trades(self, wallet_id, params=None):
        """Return (trades, error)
           :param params: optional filters, e.g. {'rangeStart': ..., 'page': 1, 'perPage': 50}
        """
        raise NotImplementedError

    def get_funding_history(self, wallet_id, params=None):
        raise NotImplementedError

    # ---- Trading ----
    def get_orders(self, wallet_id, instrument=None, status=None):
        """Return (orders, error)
           :param instrument: filter by instrument, e.g. 'XBTUSD'
           :param status: 'open' / 'filled' / 'cancelled' / 'rejected' ...
        """
        raise NotImplementedError

    def get_order(self, wallet_id, order_id):
        raise NotImplementedError

    def add_order(self, wallet_id, side, order_type, amount, price, instrument,
                  metadata=None, client_order_identifier=None):
        """Place order, return (order, error)
           :param side: 'buy' / 'sell'
           :param order_type: 'limit' / 'market'
           :param amount: order quantity
           :param price: limit price, or the market-order sentinel
           :param instrument: e.g. 'XBTUSD'; currency is its first three letters
           :param metadata: optional dict stored with the order
           :param client_order_identifier: optional client-side idempotency id
        """
        raise NotImplementedError

    def cancel_order(self, wallet_id, order_id):
        raise NotImplementedError

    # ---- Funding ----
    def cryptocurrency_withdrawal(self, wallet_id, currency, amount, address):
        raise NotImplementedError

    def cryptocurrency_deposit(self, wallet_id, currency):
        raise NotImplementedError
