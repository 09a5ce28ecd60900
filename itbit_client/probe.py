# -*- coding: utf-8 -*-
# itbit_client/probe.py
# Connectivity and credential probe for the itBit API.

import json
import os
import time
from datetime import datetime

ADVICE = {
    'Transport': "If api.itbit.com is unreachable, check DNS, egress network and proxy (HTTPS_PROXY).",
    'UnparseableHTML': "The server answered with an HTML page, usually maintenance or a gateway error.",
    'ApiError': "The API rejected the call; check key, secret and that the clock is in sync.",
    'CredentialsMissing': "Set ITBIT_API_KEY / ITBIT_API_SECRET or fill configs/account.yaml.",
}


def _timed(call, *args):
    t0 = time.time()
    body, error = call(*args)
    result = {"ok": error is None, "ms": int((time.time() - t0) * 1000)}
    if error is not None:
        result["kind"] = error.kind.value
        result["error"] = error.message
        result["advice"] = ADVICE.get(error.kind.value)
    return body, result


def probe(driver, ticker="XBTUSD"):
    """
    Run one public and one private call through the driver.

    Returns:
        dict: {'time', 'server', 'public': {...}, 'private': {...}, 'summary': {'ok', 'issues'}}
    """
    report = {
        "time": datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
        "server": driver.client.server_v1,
    }

    ticker_body, report["public"] = _timed(driver.get_ticker, ticker)
    if ticker_body is not None and isinstance(ticker_body, dict):
        report["public"]["last_price"] = ticker_body.get("lastPrice")

    if driver.client.has_credentials:
        wallets, report["private"] = _timed(driver.get_wallets, driver.user_id)
        if wallets is not None:
            report["private"]["wallets"] = len(wallets)
    else:
        report["private"] = {"ok": False, "skipped": True, "advice": ADVICE['CredentialsMissing']}

    issues = []
    if not report["public"]["ok"]:
        issues.append("public endpoint failed")
    if not report["private"]["ok"] and not report["private"].get("skipped"):
        issues.append("private endpoint failed")
    report["summary"] = {"ok": not issues, "issues": issues}
    return report


def main():
    from itbit_client.drivers.itbit.driver import init_ItBitDriver

    account_id = int(os.getenv("ITBIT_ACCOUNT_ID", "0"))
    ticker = os.getenv("ITBIT_TEST_TICKER", "XBTUSD")
    driver = init_ItBitDriver(account_id=account_id)
    try:
        report = probe(driver, ticker)
    finally:
        driver.close()
    print(json.dumps(report, indent=2, ensure_ascii=False))
    return 0 if report["summary"]["ok"] else 1
