#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Probe itBit connectivity and credentials.
#   ITBIT_ACCOUNT_ID=0 ITBIT_TEST_TICKER=XBTUSD python scripts/net_probe.py

import sys

from itbit_client.probe import main

if __name__ == '__main__':
    sys.exit(main())
